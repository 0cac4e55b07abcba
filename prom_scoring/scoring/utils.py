"""
Rounding Utilities
prom_scoring/scoring/utils.py

Provides the rounding used by stored PROM scores.

Stored scores were produced by the browser's Math.round, which sends halves
toward positive infinity and operates on the IEEE double it is given. The
helpers below keep that float arithmetic and only
switch to Decimal for the rounding step.
"""

from decimal import Decimal, ROUND_HALF_DOWN, ROUND_HALF_UP
from typing import Union

Number = Union[int, float]


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal through its shortest repr."""
    return Decimal(str(value))


def round_half_up(value: Number, places: int = 0) -> Decimal:
    """
    Round value to `places` decimals with halves toward +infinity.

    The value is scaled by 10**places as a float (x * 10), rounded to an
    integer, then scaled back, which is what `Math.round(x * 10) / 10` does.

    Examples:
        >>> round_half_up(47.5)
        Decimal('48')
        >>> round_half_up(47.5, 1)
        Decimal('47.5')
        >>> round_half_up(-2.5)
        Decimal('-2')
    """
    if places < 0:
        raise ValueError(f"places must be >= 0, got {places}")

    factor = 10 ** places
    scaled = to_decimal(value * factor)
    rounding = ROUND_HALF_UP if scaled >= 0 else ROUND_HALF_DOWN
    rounded = scaled.quantize(Decimal("1"), rounding=rounding)
    if places == 0:
        return rounded
    return rounded / Decimal(factor)


def to_score(value: Number, places: int = 0) -> Number:
    """
    Round a percentage for storage.

    Whole results come back as int (47.5 stays float, 50.0 becomes 50) so
    serialized records match the ones the browser wrote.
    """
    rounded = round_half_up(value, places)
    if rounded == rounded.to_integral_value():
        return int(rounded)
    return float(rounded)


def percentage(part: Number, whole: Number) -> float:
    """part / whole × 100, or 0 when whole is 0."""
    if whole == 0:
        return 0.0
    return (part / whole) * 100
