"""
Core Package - PROM Scoring Engine
prom_scoring/core/__init__.py

Core infrastructure: exceptions.
"""

from prom_scoring.core.exceptions import (
    InstrumentDefinitionError,
    InvalidAnswerError,
    ScoringException,
    UnknownInstrumentError,
)

__all__ = [
    "InstrumentDefinitionError",
    "InvalidAnswerError",
    "ScoringException",
    "UnknownInstrumentError",
]
