"""
scoring/ - PROM Scoring Engine

Modules:
    utils.py                  - Rounding helpers (Math.round compatible)
    answers.py                - Raw answer validation
    instruments.py            - Instrument definitions (MOXFQ, EFAS)
    subscale_calculator.py    - Shared subscale scoring
    moxfq_calculator.py       - MOXFQ Calculator
    efas_calculator.py        - EFAS Calculator
    registry.py               - Calculator lookup by instrument / form layout
"""
