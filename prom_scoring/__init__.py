"""
PROM Scoring Engine

Scores patient-reported outcome measures (MOXFQ, EFAS) from raw
per-question answers into subscale and total scores.
"""

from prom_scoring.core.exceptions import (
    InstrumentDefinitionError,
    InvalidAnswerError,
    ScoringException,
    UnknownInstrumentError,
)
from prom_scoring.models.enumerations import FormLayout, Instrument
from prom_scoring.models.scoring import ScoringData, SubscaleScore
from prom_scoring.scoring.efas_calculator import EFASCalculator
from prom_scoring.scoring.instruments import (
    MOXFQ_DEFINITION,
    InstrumentDefinition,
    SubscaleDefinition,
    efas_definition,
)
from prom_scoring.scoring.moxfq_calculator import MOXFQCalculator
from prom_scoring.scoring.registry import get_calculator, score_form
from prom_scoring.scoring.subscale_calculator import compute_subscale

__version__ = "1.0.0"

__all__ = [
    "EFASCalculator",
    "FormLayout",
    "Instrument",
    "InstrumentDefinition",
    "InstrumentDefinitionError",
    "InvalidAnswerError",
    "MOXFQCalculator",
    "MOXFQ_DEFINITION",
    "ScoringData",
    "ScoringException",
    "SubscaleDefinition",
    "SubscaleScore",
    "UnknownInstrumentError",
    "compute_subscale",
    "efas_definition",
    "get_calculator",
    "score_form",
]
