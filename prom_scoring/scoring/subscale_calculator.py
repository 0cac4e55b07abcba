"""
scoring/subscale_calculator.py

Scores one subscale of a questionnaire. Shared by every instrument.

Formula:
    raw_score          = Σ answered values
    max_possible_score = question_count × scale_max
    normalized_score   = round(raw_score / max_possible_score × 100, precision)
    completion         = round(answered / question_count × 100)

An answer of 0 is an answer. With `empty_scores_as_null`, a subscale whose
questions are all unanswered scores as None instead of a zeroed record.
"""

from typing import Any, Mapping, Optional, Sequence

import structlog

from prom_scoring.models.scoring import SubscaleScore
from prom_scoring.scoring.answers import collect_answers
from prom_scoring.scoring.utils import Number, percentage, to_score

logger = structlog.get_logger(__name__)


def build_subscale_score(
    name: str,
    raw_score: Number,
    max_possible_score: int,
    answered_questions: int,
    total_questions: int,
    precision: int,
    description: Optional[str] = None,
) -> SubscaleScore:
    """
    Assemble a SubscaleScore from already summed values.

    Both percentages fall back to 0 when their denominator is 0, and a
    subscale without questions is never complete.
    """
    completion_rate = answered_questions / total_questions if total_questions > 0 else 0

    return SubscaleScore(
        name=name,
        description=description,
        raw_score=raw_score,
        normalized_score=to_score(percentage(raw_score, max_possible_score), precision),
        max_possible_score=max_possible_score,
        answered_questions=answered_questions,
        total_questions=total_questions,
        completion_percentage=to_score(completion_rate * 100),
        is_complete=completion_rate == 1,
    )


def compute_subscale(
    question_keys: Sequence[str],
    answers: Optional[Mapping[str, Any]],
    scale_max: int,
    precision: int,
    *,
    name: str,
    description: Optional[str] = None,
    empty_scores_as_null: bool = False,
    log_details: bool = False,
) -> Optional[SubscaleScore]:
    """
    Score the questions `question_keys` against `answers`.

    Args:
        question_keys: Keys of the subscale's questions.
        answers: Raw answer map (key → number or None). None means no answers.
        scale_max: Highest valid answer to a single question.
        precision: Decimal places of normalized_score.
        name: Display name stored on the result.
        description: Optional display description.
        empty_scores_as_null: Return None when no question is answered.
        log_details: Log raw/max values of the subscale at DEBUG.

    Returns:
        SubscaleScore, or None under `empty_scores_as_null` with no answers.

    Raises:
        InvalidAnswerError: an answer is not a number within [0, scale_max].

    Examples:
        >>> score = compute_subscale(["q1", "q2"], {"q1": 3, "q2": None}, 4, 1, name="Pain")
        >>> score.raw_score, score.normalized_score, score.completion_percentage
        (3, 37.5, 50)
    """
    valid_answers = collect_answers(question_keys, answers, scale_max)
    total_questions = len(question_keys)

    # An empty key list still yields a zeroed record
    if empty_scores_as_null and total_questions > 0 and not valid_answers:
        logger.debug("subscale_not_scoreable", subscale=name, total_questions=total_questions)
        return None

    raw_score = sum(valid_answers)
    max_possible_score = total_questions * scale_max

    score = build_subscale_score(
        name=name,
        description=description,
        raw_score=raw_score,
        max_possible_score=max_possible_score,
        answered_questions=len(valid_answers),
        total_questions=total_questions,
        precision=precision,
    )

    if log_details:
        logger.debug(
            "subscale_scored",
            subscale=name,
            raw_score=raw_score,
            max_possible_score=max_possible_score,
            answered_questions=score.answered_questions,
            total_questions=total_questions,
            normalized_score=score.normalized_score,
        )

    return score
