"""Coverage ratio formatting shared by the parser and the serializer."""

from __future__ import annotations

from decimal import Decimal

ZERO_RATE = "0.0"

# outside [1e-6, 1e21) the reference converter switches to exponent notation
_SMALL_EXPONENT_THRESHOLD = 1e-6
_LARGE_EXPONENT_THRESHOLD = 1e21


def _number_text(value: float) -> str:
    """Render *value* as the shortest round-tripping text, JavaScript style.

    Integral values carry no fractional part (``1`` rather than ``1.0``) and
    positional notation is used from ``1e-6`` up to ``1e21``; beyond that the
    exponent is written with an explicit sign (``1e-7``, ``1e+22``).
    """
    magnitude = abs(value)
    if magnitude and not _SMALL_EXPONENT_THRESHOLD <= magnitude < _LARGE_EXPONENT_THRESHOLD:
        # repr already uses exponent form at these magnitudes
        mantissa, _, exponent = repr(value).partition("e")
        return f"{mantissa}e{int(exponent):+d}"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def format_rate(total: int, covered: int) -> str:
    """Return ``covered / total`` as a ratio string, ``"0.0"`` when *total* is 0.

    >>> format_rate(2, 1)
    '0.5'
    >>> format_rate(0, 0)
    '0.0'
    """
    if total == 0:
        return ZERO_RATE
    return _number_text(covered / total)


__all__ = ["ZERO_RATE", "format_rate"]
