"""
scoring/registry.py

Looks up the calculator for a questionnaire.

Forms identify their instrument either by name ("moxfq", "efas") or by the
layout type their renderer is registered for ("MOXFQTable", "EFAS_Layout").
"""

from typing import Any, Dict, Mapping, Optional, Sequence, Union

from prom_scoring.core.exceptions import InstrumentDefinitionError, UnknownInstrumentError
from prom_scoring.models.enumerations import FormLayout, Instrument
from prom_scoring.models.scoring import ScoringData
from prom_scoring.scoring.efas_calculator import EFASCalculator
from prom_scoring.scoring.moxfq_calculator import MOXFQCalculator

LAYOUT_INSTRUMENTS: Dict[FormLayout, Instrument] = {
    FormLayout.MOXFQ_TABLE: Instrument.MOXFQ,
    FormLayout.EFAS_LAYOUT: Instrument.EFAS,
}

_MOXFQ_CALCULATOR = MOXFQCalculator()


def resolve_instrument(instrument: Union[str, Instrument, FormLayout]) -> Instrument:
    """Map an instrument name or form layout type to an Instrument."""
    if isinstance(instrument, Instrument):
        return instrument
    if isinstance(instrument, FormLayout):
        return LAYOUT_INSTRUMENTS[instrument]

    key = str(instrument).strip()
    for layout, resolved in LAYOUT_INSTRUMENTS.items():
        if key == layout.value:
            return resolved
    try:
        return Instrument(key.lower())
    except ValueError:
        raise UnknownInstrumentError(key) from None


def get_calculator(
    instrument: Union[str, Instrument, FormLayout],
    *,
    standard_keys: Optional[Sequence[str]] = None,
    sport_keys: Optional[Sequence[str]] = None,
    form_schema: Optional[Dict[str, Any]] = None,
    log_details: bool = False,
) -> Union[MOXFQCalculator, EFASCalculator]:
    """
    Return a calculator for `instrument`.

    EFAS needs its question keys, either as standard_keys/sport_keys or
    through the form's JSON schema. `log_details` is usually
    get_settings().LOG_SCORING_DETAILS of the host application.
    """
    resolved = resolve_instrument(instrument)

    if resolved is Instrument.MOXFQ:
        if log_details:
            return MOXFQCalculator(log_details=True)
        return _MOXFQ_CALCULATOR

    if form_schema is not None:
        return EFASCalculator.from_form_schema(form_schema, log_details=log_details)
    if standard_keys is None or sport_keys is None:
        raise InstrumentDefinitionError(
            "EFAS scoring requires standard_keys and sport_keys, or form_schema"
        )
    return EFASCalculator(standard_keys, sport_keys, log_details=log_details)


def score_form(
    instrument: Union[str, Instrument, FormLayout],
    data: Optional[Mapping[str, Any]],
    **options: Any,
) -> ScoringData:
    """
    Score a submitted form.

    Args:
        instrument: Instrument name or form layout type.
        data: Raw answers as submitted by the form.
        **options: Calculator options, see get_calculator().

    Returns:
        ScoringData ready to store in the form's scoring field.
    """
    return get_calculator(instrument, **options).calculate(data)
