"""
Custom Exceptions - PROM Scoring Engine
prom_scoring/core/exceptions.py

Exception classes raised by the scoring engine.
"""

from typing import Any


class ScoringException(Exception):
    """Base exception for scoring operations."""

    pass


class InvalidAnswerError(ScoringException, ValueError):
    """
    An answer value is present but cannot be scored.

    Raised for values that are not finite numbers, and also for numbers
    outside the instrument's answer scale (below 0 or above scale_max).
    The second case is a rejection by the instrument definition, so stored
    records holding out-of-scale values raise when they are re-scored.
    `reason` says which case applied.
    """

    def __init__(self, question_key: str, value: Any, reason: str = "not a number"):
        self.question_key = question_key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid answer for question '{question_key}': {value!r} ({reason})"
        )


class InstrumentDefinitionError(ScoringException, ValueError):
    """Instrument definition is malformed."""

    def __init__(self, message: str = "Invalid instrument definition"):
        self.message = message
        super().__init__(message)


class UnknownInstrumentError(ScoringException, KeyError):
    """No calculator is registered for the requested instrument."""

    def __init__(self, instrument: str):
        self.instrument = instrument
        super().__init__(f"No scoring calculator registered for '{instrument}'")

    def __str__(self) -> str:
        return self.args[0]
