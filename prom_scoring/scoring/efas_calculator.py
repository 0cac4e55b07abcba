"""
scoring/efas_calculator.py

Scores the EFAS foot and ankle questionnaire.

EFAS answers come in two sections, each its own answer map:
    standardfragebogen   standard questions, answered 0-5
    sportfragebogen      sport questions, answered 0-5

Each section is scored as a subscale (integer normalized score, zeroed record
when nothing is answered). The total is recomputed from the combined raw and
maximum scores, never averaged from the section scores:

    total.normalized = round((raw_std + raw_sport) / (max_std + max_sport) × 100)
"""

from typing import Any, Dict, Mapping, Optional, Sequence

import structlog

from prom_scoring.models.scoring import ScoringData, SubscaleScore
from prom_scoring.scoring.instruments import (
    EFAS_SPORT_SECTION,
    EFAS_STANDARD_SECTION,
    InstrumentDefinition,
    efas_definition,
    question_keys_from_schema,
)
from prom_scoring.scoring.subscale_calculator import build_subscale_score, compute_subscale

logger = structlog.get_logger(__name__)


def _section_answers(data: Optional[Mapping[str, Any]], section: str) -> Mapping[str, Any]:
    """Answer map of one section; a missing or non-mapping section has no answers."""
    if not isinstance(data, Mapping):
        return {}
    section_data = data.get(section)
    if not isinstance(section_data, Mapping):
        return {}
    return section_data


class EFASCalculator:
    """
    Calculate EFAS section and total scores.

    The question keys of both sections are part of the form definition, so
    a calculator is built per form layout.
    """

    def __init__(
        self,
        standard_keys: Sequence[str],
        sport_keys: Sequence[str],
        log_details: bool = False,
    ):
        self.definition: InstrumentDefinition = efas_definition(standard_keys, sport_keys)
        self.log_details = log_details

    @classmethod
    def from_form_schema(
        cls, schema: Dict[str, Any], log_details: bool = False
    ) -> "EFASCalculator":
        """
        Build a calculator from the JSON schema of an EFAS form.

        The question keys are the properties of the standardfragebogen and
        sportfragebogen sections.
        """
        return cls(
            standard_keys=question_keys_from_schema(schema, EFAS_STANDARD_SECTION),
            sport_keys=question_keys_from_schema(schema, EFAS_SPORT_SECTION),
            log_details=log_details,
        )

    @property
    def standard_keys(self):
        return self.definition.get_subscale(EFAS_STANDARD_SECTION).question_keys

    @property
    def sport_keys(self):
        return self.definition.get_subscale(EFAS_SPORT_SECTION).question_keys

    def calculate(self, data: Optional[Mapping[str, Any]]) -> ScoringData:
        """
        Score one EFAS form.

        Args:
            data: Mapping of section name → answer map. Missing sections
                  count as unanswered.

        Returns:
            ScoringData with subscales standardfragebogen and sportfragebogen
            plus total. All three are always records, never None.

        Raises:
            InvalidAnswerError: an answer is not a number in 0-5.

        Examples:
            >>> calc = EFASCalculator(["q1", "q2"], ["s1"])
            >>> result = calc.calculate({"standardfragebogen": {"q1": 5, "q2": 5},
            ...                          "sportfragebogen": {"s1": 0}})
            >>> result.total.normalized_score
            67
        """
        definition = self.definition

        subscales: Dict[str, SubscaleScore] = {}
        for subscale in definition.subscales:
            subscales[subscale.key] = compute_subscale(
                subscale.question_keys,
                _section_answers(data, subscale.section),
                definition.scale_max,
                definition.precision,
                name=subscale.name,
                description=subscale.description,
                empty_scores_as_null=False,
                log_details=self.log_details,
            )

        sections = list(subscales.values())
        total = build_subscale_score(
            name=definition.total_name,
            description=definition.total_description,
            raw_score=sum(s.raw_score for s in sections),
            max_possible_score=sum(s.max_possible_score for s in sections),
            answered_questions=sum(s.answered_questions for s in sections),
            total_questions=sum(s.total_questions for s in sections),
            precision=definition.precision,
        )

        logger.info(
            "efas_scored",
            standard_answered=subscales[EFAS_STANDARD_SECTION].answered_questions,
            sport_answered=subscales[EFAS_SPORT_SECTION].answered_questions,
            total_questions=total.total_questions,
            total_score=total.normalized_score,
            is_complete=total.is_complete,
        )

        return ScoringData(
            raw_data=dict(data) if isinstance(data, Mapping) else None,
            subscales=subscales,
            total=total,
        )
