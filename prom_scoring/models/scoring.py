from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict, Optional, Union


class SubscaleScore(BaseModel):
    """
    Score of one subscale (or of a whole instrument, for the total).

    Field names are snake_case in Python and camelCase in stored records.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    name: str = Field(
        ...,
        description="Display name of the subscale"
    )

    description: Optional[str] = Field(
        default=None,
        description="Display-only description"
    )

    raw_score: Union[int, float] = Field(
        ...,
        ge=0,
        description="Sum of all answered values"
    )

    normalized_score: Union[int, float] = Field(
        ...,
        ge=0,
        le=100,
        description="raw_score as a rounded percentage of max_possible_score"
    )

    max_possible_score: int = Field(
        ...,
        ge=0,
        description="Question count × per-question scale maximum"
    )

    answered_questions: int = Field(
        ...,
        ge=0,
        description="Questions with a non-null answer"
    )

    total_questions: int = Field(
        ...,
        ge=0,
        description="Questions in the subscale"
    )

    completion_percentage: int = Field(
        ...,
        ge=0,
        le=100,
        description="Answered questions as a rounded percentage"
    )

    is_complete: bool = Field(
        ...,
        description="Every question of the subscale is answered"
    )

    @model_validator(mode="after")
    def validate_counts(self):
        """answered_questions can never exceed total_questions."""
        if self.answered_questions > self.total_questions:
            raise ValueError(
                f"answered_questions ({self.answered_questions}) exceeds "
                f"total_questions ({self.total_questions})"
            )
        if self.is_complete and self.answered_questions != self.total_questions:
            raise ValueError("is_complete requires every question answered")
        return self


class ScoringData(BaseModel):
    """
    Scoring result of one questionnaire.

    This is the shape stored in a form's `scoring` field: the answers as
    submitted, the score of each subscale and the total. A subscale or total
    of None means "not yet scoreable" (no answers), which is different from a
    score of zero.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    raw_data: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Answers exactly as submitted"
    )

    subscales: Dict[str, Optional[SubscaleScore]] = Field(
        default_factory=dict,
        description="Subscale key → score, or None when nothing was answered"
    )

    total: Optional[SubscaleScore] = Field(
        default=None,
        description="Score over all questions of the instrument"
    )

    @property
    def is_scoreable(self) -> bool:
        return self.total is not None and self.total.answered_questions > 0

    def to_record(self) -> Dict[str, Any]:
        """JSON-compatible camelCase dict for storage."""
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "ScoringData":
        """Rebuild a result from a stored record."""
        return cls.model_validate(record)
