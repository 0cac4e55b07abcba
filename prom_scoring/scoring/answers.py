"""
scoring/answers.py

Boundary validation for raw questionnaire answers.

An answer is either a number or "unanswered" (None / key absent). Zero is a
real answer. Anything else (strings, booleans, NaN, containers) is rejected
with InvalidAnswerError before it can reach a sum.
"""

import math
import numbers
from typing import Any, List, Mapping, Optional, Sequence

import structlog

from prom_scoring.core.exceptions import InvalidAnswerError
from prom_scoring.scoring.utils import Number

logger = structlog.get_logger(__name__)


def validate_answer(
    question_key: str,
    value: Any,
    scale_max: Optional[int] = None,
) -> Optional[Number]:
    """
    Validate one raw answer value.

    Args:
        question_key: Key of the question, used in the error.
        value: Raw value from the answer map.
        scale_max: Highest valid answer. When given, values outside
                   [0, scale_max] are rejected.

    Returns:
        None for an unanswered question, otherwise the value as int or float.

    Raises:
        InvalidAnswerError: value is present but not a finite number in range.
    """
    if value is None:
        return None

    # bool is an int subclass; True must not score as 1
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        logger.warning(
            "invalid_answer_rejected",
            question_key=question_key,
            value_type=type(value).__name__,
        )
        raise InvalidAnswerError(question_key, value)

    if isinstance(value, numbers.Integral):
        number: Number = int(value)
    else:
        number = float(value)
        if not math.isfinite(number):
            logger.warning(
                "invalid_answer_rejected",
                question_key=question_key,
                value_type=type(value).__name__,
            )
            raise InvalidAnswerError(question_key, value, "not a finite number")

    if scale_max is not None and not 0 <= number <= scale_max:
        logger.warning(
            "invalid_answer_rejected",
            question_key=question_key,
            scale_max=scale_max,
        )
        raise InvalidAnswerError(
            question_key, value, f"outside answer scale 0-{scale_max}"
        )

    return number


def collect_answers(
    question_keys: Sequence[str],
    answers: Optional[Mapping[str, Any]],
    scale_max: Optional[int] = None,
) -> List[Number]:
    """
    Return the answered values for question_keys, in key order.

    A missing answer map (None) counts as every question unanswered.
    """
    if answers is None:
        return []

    valid: List[Number] = []
    for key in question_keys:
        value = validate_answer(key, answers.get(key), scale_max)
        if value is not None:
            valid.append(value)
    return valid
