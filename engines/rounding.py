"""
UVS Value Engine — Rounding helpers
Whole-unit, 1dp, 2dp and step rounding. Ties round away from zero.
Non-finite values (or integers too large for a float) raise NonFiniteValueError.
"""
import math
from decimal import Decimal, ROUND_HALF_UP

_WHOLE = Decimal('1')
_TENTHS = Decimal('0.1')
_CENTS = Decimal('0.01')


class NonFiniteValueError(ValueError):
    """A computed figure left the float range and cannot be reported."""


def _decimal(value):
    try:
        f = float(value)
    except OverflowError:
        raise NonFiniteValueError("value out of range: integer too large for a float") from None
    if not math.isfinite(f):
        raise NonFiniteValueError(f"value out of range: {f!r}")
    return Decimal(repr(f))


def round_whole(value):
    """Round to the nearest integer, .5 away from zero."""
    return int(_decimal(value).quantize(_WHOLE, rounding=ROUND_HALF_UP))


def round2(value):
    """Round to 2 decimal places, .005 away from zero."""
    return float(_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def round1(value):
    return float(_decimal(value).quantize(_TENTHS, rounding=ROUND_HALF_UP))


def round_to_step(value, step):
    """Round |value| to the nearest multiple of step and restore the sign."""
    sign = -1 if value < 0 else 1
    return sign * round_whole(abs(value) / step) * step
