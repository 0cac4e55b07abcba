# tests/conftest.py

"""
Pytest Fixtures - Shared answer sets for the scoring tests

MOXFQ question layout:
- walkingStanding:   q1-q8
- pain:              q9, q11, q12, q15
- socialInteraction: q10, q13, q14, q16

EFAS test layout: standard q1-q5, sport s1-s3 (max 25 + 15 = 40).
"""

import logging

import pytest
import structlog

from prom_scoring.config import get_settings
from prom_scoring.scoring.efas_calculator import EFASCalculator
from prom_scoring.scoring.moxfq_calculator import MOXFQCalculator

MOXFQ_WALKING_KEYS = ["q1", "q2", "q3", "q4", "q5", "q6", "q7", "q8"]
MOXFQ_PAIN_KEYS = ["q9", "q11", "q12", "q15"]
MOXFQ_SOCIAL_KEYS = ["q10", "q13", "q14", "q16"]
MOXFQ_ALL_KEYS = MOXFQ_WALKING_KEYS + MOXFQ_PAIN_KEYS + MOXFQ_SOCIAL_KEYS

EFAS_STANDARD_KEYS = ["q1", "q2", "q3", "q4", "q5"]
EFAS_SPORT_KEYS = ["s1", "s2", "s3"]


# =============================================================================
# CALCULATOR FIXTURES
# =============================================================================

@pytest.fixture
def moxfq_calculator():
    """MOXFQ calculator with the standard definition."""
    return MOXFQCalculator()


@pytest.fixture
def efas_calculator():
    """EFAS calculator for a 5 standard + 3 sport question form."""
    return EFASCalculator(EFAS_STANDARD_KEYS, EFAS_SPORT_KEYS)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; drop the cache around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    """Undo configure_logging() after a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


# =============================================================================
# MOXFQ ANSWER FIXTURES
# =============================================================================

@pytest.fixture
def moxfq_complete_answers():
    """Every MOXFQ question answered."""
    return {
        "q1": 2, "q2": 1, "q3": 3, "q4": 2, "q5": 1, "q6": 2, "q7": 3, "q8": 2,
        "q9": 3, "q11": 2, "q12": 1, "q15": 4,
        "q10": 2, "q13": 1, "q14": 2, "q16": 3,
    }


@pytest.fixture
def moxfq_empty_answers():
    """Every MOXFQ question present but unanswered."""
    return {key: None for key in MOXFQ_ALL_KEYS}


@pytest.fixture
def moxfq_partial_answers():
    """Walking half answered, pain one answer, social untouched."""
    return {
        "q1": 2, "q2": None, "q3": 3, "q4": None, "q5": 1, "q6": None, "q7": None, "q8": 2,
        "q9": 3, "q11": None, "q12": None, "q15": None,
        "q10": None, "q13": None, "q14": None, "q16": None,
    }


# =============================================================================
# EFAS ANSWER FIXTURES
# =============================================================================

@pytest.fixture
def efas_complete_answers():
    """Both EFAS sections fully answered."""
    return {
        "standardfragebogen": {"q1": 3, "q2": 4, "q3": 2, "q4": 5, "q5": 1},
        "sportfragebogen": {"s1": 2, "s2": 3, "s3": 4},
    }


@pytest.fixture
def efas_form_schema():
    """JSON schema of an EFAS form, as stored with the form template."""
    return {
        "type": "object",
        "properties": {
            "standardfragebogen": {
                "type": "object",
                "properties": {
                    key: {"type": ["integer", "null"], "minimum": 0, "maximum": 5}
                    for key in EFAS_STANDARD_KEYS
                },
            },
            "sportfragebogen": {
                "type": "object",
                "properties": {
                    key: {"type": ["integer", "null"], "minimum": 0, "maximum": 5}
                    for key in EFAS_SPORT_KEYS
                },
            },
        },
    }
