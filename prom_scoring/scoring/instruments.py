"""
scoring/instruments.py

Static instrument definitions.

An instrument is a set of named subscales (each an ordered tuple of question
keys), a per-question answer maximum, the rounding precision of normalized
scores and the policy for subscales with no answers:

    Instrument   scale   precision   empty subscale
    MOXFQ        0-4     1 decimal   None
    EFAS         0-5     integer     zeroed record
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from prom_scoring.core.exceptions import InstrumentDefinitionError
from prom_scoring.models.enumerations import Instrument


@dataclass(frozen=True)
class SubscaleDefinition:
    """One scored group of questions."""
    key: str                          # key in ScoringData.subscales
    name: str                         # display name
    question_keys: Tuple[str, ...]
    description: Optional[str] = None
    section: Optional[str] = None     # answer section to read from; None = top level


@dataclass(frozen=True)
class InstrumentDefinition:
    """Immutable scoring parameters of one questionnaire."""
    instrument: Instrument
    subscales: Tuple[SubscaleDefinition, ...]
    scale_max: int
    precision: int
    empty_scores_as_null: bool
    total_name: str = "Total"
    total_description: Optional[str] = None

    def __post_init__(self):
        if self.scale_max <= 0:
            raise InstrumentDefinitionError(
                f"{self.instrument.value}: scale_max must be positive, got {self.scale_max}"
            )
        if self.precision < 0:
            raise InstrumentDefinitionError(
                f"{self.instrument.value}: precision must be >= 0, got {self.precision}"
            )

        seen_subscales = set()
        seen_questions = set()
        for subscale in self.subscales:
            if subscale.key in seen_subscales:
                raise InstrumentDefinitionError(
                    f"{self.instrument.value}: duplicate subscale '{subscale.key}'"
                )
            seen_subscales.add(subscale.key)

            # A key listed twice would be counted twice in the total
            for question_key in subscale.question_keys:
                slot = (subscale.section, question_key)
                if slot in seen_questions:
                    raise InstrumentDefinitionError(
                        f"{self.instrument.value}: question '{question_key}' "
                        f"appears more than once"
                    )
                seen_questions.add(slot)

    @property
    def question_keys(self) -> Tuple[str, ...]:
        """All question keys, subscale by subscale."""
        return tuple(k for s in self.subscales for k in s.question_keys)

    @property
    def max_score(self) -> int:
        return len(self.question_keys) * self.scale_max

    def get_subscale(self, key: str) -> SubscaleDefinition:
        for subscale in self.subscales:
            if subscale.key == key:
                return subscale
        raise KeyError(key)


# ---------------------------------------------------------------------------
# MOXFQ
# ---------------------------------------------------------------------------

MOXFQ_SCALE_MAX = 4
MOXFQ_PRECISION = 1

MOXFQ_DEFINITION = InstrumentDefinition(
    instrument=Instrument.MOXFQ,
    subscales=(
        SubscaleDefinition(
            key="walkingStanding",
            name="Walking & Standing",
            question_keys=("q1", "q2", "q3", "q4", "q5", "q6", "q7", "q8"),
            description="Assesses difficulties in walking and standing.",
        ),
        SubscaleDefinition(
            key="pain",
            name="Pain",
            question_keys=("q9", "q11", "q12", "q15"),
            description="Evaluates pain levels and impact.",
        ),
        SubscaleDefinition(
            key="socialInteraction",
            name="Social Interaction",
            question_keys=("q10", "q13", "q14", "q16"),
            description="Measures social engagement and interaction.",
        ),
    ),
    scale_max=MOXFQ_SCALE_MAX,
    precision=MOXFQ_PRECISION,
    empty_scores_as_null=True,
    total_name="Total",
    total_description="Measures overall health status.",
)


# ---------------------------------------------------------------------------
# EFAS
# ---------------------------------------------------------------------------

EFAS_SCALE_MAX = 5
EFAS_PRECISION = 0
EFAS_STANDARD_SECTION = "standardfragebogen"
EFAS_SPORT_SECTION = "sportfragebogen"


def _as_keys(keys: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(keys, str):
        raise InstrumentDefinitionError(
            f"Question keys must be a sequence of strings, got {keys!r}"
        )
    return tuple(str(k) for k in keys)


def efas_definition(
    standard_keys: Sequence[str],
    sport_keys: Sequence[str],
) -> InstrumentDefinition:
    """
    Build the EFAS definition for a concrete form.

    EFAS question keys come from the form schema the patient filled in, so
    only the section layout, scale and precision are fixed here.
    """
    return InstrumentDefinition(
        instrument=Instrument.EFAS,
        subscales=(
            SubscaleDefinition(
                key=EFAS_STANDARD_SECTION,
                name="Standard",
                question_keys=_as_keys(standard_keys),
                section=EFAS_STANDARD_SECTION,
            ),
            SubscaleDefinition(
                key=EFAS_SPORT_SECTION,
                name="Sport",
                question_keys=_as_keys(sport_keys),
                section=EFAS_SPORT_SECTION,
            ),
        ),
        scale_max=EFAS_SCALE_MAX,
        precision=EFAS_PRECISION,
        empty_scores_as_null=False,
        total_name="Total",
    )


def question_keys_from_schema(schema: Dict, section: str) -> Tuple[str, ...]:
    """
    Question keys of one section of a JSON-schema form definition.

    The section is looked up under schema["properties"]; its own
    "properties" (in declaration order) are the question keys. A section the
    schema does not declare has no questions.
    """
    properties = schema.get("properties") if isinstance(schema, dict) else None
    if not isinstance(properties, dict):
        raise InstrumentDefinitionError("Form schema has no 'properties' object")

    section_schema = properties.get(section)
    if not isinstance(section_schema, dict):
        return ()
    questions = section_schema.get("properties") or {}
    if not isinstance(questions, dict):
        raise InstrumentDefinitionError(
            f"Section '{section}' has malformed 'properties'"
        )
    return tuple(questions.keys())
