# tests/test_property_based.py
"""
Property-Based Tests

Hypothesis tests, covering:
  - MOXFQ bounds, null policy, determinism
  - EFAS bounds, total recomputation, zero-vs-null
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from prom_scoring.scoring.efas_calculator import EFASCalculator
from prom_scoring.scoring.moxfq_calculator import MOXFQCalculator
from prom_scoring.scoring.utils import percentage, to_score

from conftest import EFAS_SPORT_KEYS, EFAS_STANDARD_KEYS, MOXFQ_ALL_KEYS

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------


def answer_st(scale_max: int):
    """An unanswered question, an integer answer or a slider (float) answer."""
    return st.one_of(
        st.none(),
        st.integers(min_value=0, max_value=scale_max),
        st.floats(min_value=0.0, max_value=float(scale_max), allow_nan=False, allow_infinity=False),
    )


@st.composite
def moxfq_answers(draw):
    """Draw a MOXFQ answer map; some keys may be absent."""
    keys = draw(st.lists(st.sampled_from(MOXFQ_ALL_KEYS), unique=True))
    return {k: draw(answer_st(4)) for k in keys}


@st.composite
def efas_answers(draw):
    """Draw EFAS section maps; either section may be missing."""
    data = {}
    if draw(st.booleans()):
        data["standardfragebogen"] = {k: draw(answer_st(5)) for k in EFAS_STANDARD_KEYS}
    if draw(st.booleans()):
        data["sportfragebogen"] = {k: draw(answer_st(5)) for k in EFAS_SPORT_KEYS}
    return data


def all_scores(result):
    return [s for s in [*result.subscales.values(), result.total] if s is not None]


# ---------------------------------------------------------------------------
# MOXFQ Property Tests
# ---------------------------------------------------------------------------


class TestMOXFQPropertyBased:

    @given(moxfq_answers())
    @settings(max_examples=300)
    def test_scores_bounded(self, answers):
        """Percentages stay in [0, 100] and answered never exceeds total."""
        for score in all_scores(MOXFQCalculator().calculate(answers)):
            assert 0 <= score.completion_percentage <= 100
            assert 0 <= score.normalized_score <= 100
            assert 0 <= score.answered_questions <= score.total_questions
            assert score.raw_score <= score.max_possible_score

    @given(moxfq_answers())
    @settings(max_examples=300)
    def test_null_exactly_when_unanswered(self, answers):
        """A subscale is None iff none of its questions has an answer."""
        result = MOXFQCalculator().calculate(answers)
        answered = {k for k, v in answers.items() if v is not None}

        assert (result.total is None) == (not answered)
        for definition in MOXFQCalculator().definition.subscales:
            has_answers = bool(answered.intersection(definition.question_keys))
            assert (result.subscales[definition.key] is not None) == has_answers

    @given(moxfq_answers())
    @settings(max_examples=300)
    def test_deterministic(self, answers):
        """Scoring the same answers twice gives the same result."""
        calc = MOXFQCalculator()
        assert calc.calculate(answers) == calc.calculate(answers)

    @given(moxfq_answers())
    @settings(max_examples=300)
    def test_one_decimal(self, answers):
        """Normalized scores never carry more than one decimal."""
        for score in all_scores(MOXFQCalculator().calculate(answers)):
            assert round(score.normalized_score, 1) == score.normalized_score


# ---------------------------------------------------------------------------
# EFAS Property Tests
# ---------------------------------------------------------------------------


class TestEFASPropertyBased:

    @given(efas_answers())
    @settings(max_examples=300)
    def test_always_records(self, data):
        """EFAS never returns None for a section or the total."""
        result = EFASCalculator(EFAS_STANDARD_KEYS, EFAS_SPORT_KEYS).calculate(data)

        assert result.total is not None
        assert all(s is not None for s in result.subscales.values())

    @given(efas_answers())
    @settings(max_examples=300)
    def test_total_recomputed_from_sections(self, data):
        """Total raw/max/answered are section sums; normalized comes from the sums."""
        result = EFASCalculator(EFAS_STANDARD_KEYS, EFAS_SPORT_KEYS).calculate(data)
        standard = result.subscales["standardfragebogen"]
        sport = result.subscales["sportfragebogen"]

        raw = standard.raw_score + sport.raw_score
        assert result.total.raw_score == raw
        assert result.total.max_possible_score == 40
        assert result.total.answered_questions == standard.answered_questions + sport.answered_questions
        assert result.total.normalized_score == to_score(percentage(raw, 40))
        assert isinstance(result.total.normalized_score, int)

    @given(efas_answers())
    @settings(max_examples=300)
    def test_complete_iff_everything_answered(self, data):
        """The total is complete exactly when both sections are."""
        result = EFASCalculator(EFAS_STANDARD_KEYS, EFAS_SPORT_KEYS).calculate(data)

        both = all(s.is_complete for s in result.subscales.values())
        assert result.total.is_complete == both

    @given(st.integers(min_value=0, max_value=5))
    @settings(max_examples=50)
    def test_uniform_answers_are_complete(self, value):
        """Any uniform answer, including 0, completes the form."""
        data = {
            "standardfragebogen": {k: value for k in EFAS_STANDARD_KEYS},
            "sportfragebogen": {k: value for k in EFAS_SPORT_KEYS},
        }

        result = EFASCalculator(EFAS_STANDARD_KEYS, EFAS_SPORT_KEYS).calculate(data)

        assert result.total.is_complete is True
        assert result.total.normalized_score == value * 20
