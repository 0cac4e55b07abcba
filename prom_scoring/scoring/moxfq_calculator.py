"""
scoring/moxfq_calculator.py

Scores the Manchester-Oxford Foot Questionnaire (MOXFQ).

16 questions answered 0-4, in three subscales:
    walkingStanding    q1-q8                  (max 32)
    pain               q9, q11, q12, q15      (max 16)
    socialInteraction  q10, q13, q14, q16     (max 16)

The total is scored over all 16 questions (max 64). Normalized scores are
rounded to one decimal place. A subscale with no answered questions is None,
and so is the total when nothing at all is answered.
"""

from typing import Any, Mapping, Optional

import structlog

from prom_scoring.models.scoring import ScoringData
from prom_scoring.scoring.instruments import MOXFQ_DEFINITION, InstrumentDefinition
from prom_scoring.scoring.subscale_calculator import compute_subscale

logger = structlog.get_logger(__name__)


class MOXFQCalculator:
    """Calculate MOXFQ subscale and total scores."""

    def __init__(
        self,
        definition: InstrumentDefinition = MOXFQ_DEFINITION,
        log_details: bool = False,
    ):
        self.definition = definition
        self.log_details = log_details

    def calculate(self, answers: Optional[Mapping[str, Any]]) -> ScoringData:
        """
        Score one MOXFQ form.

        Args:
            answers: Mapping of question key (q1-q16) → 0-4 or None.

        Returns:
            ScoringData with subscales walkingStanding, pain and
            socialInteraction plus total; any of them None when unanswered.

        Raises:
            InvalidAnswerError: an answer is not a number in 0-4.

        Examples:
            >>> calc = MOXFQCalculator()
            >>> result = calc.calculate({f"q{i}": 2 for i in range(1, 17)})
            >>> result.total.normalized_score
            50
        """
        definition = self.definition

        subscales = {
            subscale.key: compute_subscale(
                subscale.question_keys,
                answers,
                definition.scale_max,
                definition.precision,
                name=subscale.name,
                description=subscale.description,
                empty_scores_as_null=definition.empty_scores_as_null,
            log_details=self.log_details,
            )
            for subscale in definition.subscales
        }

        total = compute_subscale(
            definition.question_keys,
            answers,
            definition.scale_max,
            definition.precision,
            name=definition.total_name,
            description=definition.total_description,
            empty_scores_as_null=definition.empty_scores_as_null,
            log_details=self.log_details,
        )

        logger.info(
            "moxfq_scored",
            scored_subscales=[k for k, v in subscales.items() if v is not None],
            answered_questions=total.answered_questions if total else 0,
            total_questions=len(definition.question_keys),
            total_score=total.normalized_score if total else None,
        )

        return ScoringData(
            raw_data=dict(answers) if answers is not None else None,
            subscales=subscales,
            total=total,
        )
