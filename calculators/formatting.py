"""
Display Formatting

Turns derived decimals into display strings and composes the four strings
shown for one cycle.

Rules:
    |value| >= 1  -> fixed two decimals            (40 -> "40.00")
    |value| <  1  -> three significant digits      (0.05 -> "0.0500")
                     exponential below 1e-6         (1.2e-7 -> "1.20e-7")
Rounding is half-up.
"""

from decimal import Decimal, MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, localcontext
from typing import Iterable, Mapping, Optional

from calculators.margin_config import (
    FIXED_DECIMALS,
    FIXED_THRESHOLD,
    MIN_FIXED_EXPONENT,
    SIGNIFICANT_DIGITS,
)
from calculators.margin_models import Field, RawInputs
from calculators.parsing import within_range


def _round_to(value: Decimal, exponent: int) -> Decimal:
    """Round half-up so that the last kept digit sits at 10**exponent."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() - exponent + 2)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        ctx.rounding = ROUND_HALF_UP
        return value.quantize(Decimal(1).scaleb(exponent))


def to_fixed(value: Decimal, decimals: int = FIXED_DECIMALS) -> str:
    """Fixed-point string with ``decimals`` places."""
    return format(_round_to(value, -decimals), "f")


def to_precision(value: Decimal, digits: int = SIGNIFICANT_DIGITS) -> str:
    """
    String with ``digits`` significant digits.

    Fixed notation unless the rounded exponent falls below
    MIN_FIXED_EXPONENT or reaches ``digits``, in which case the mantissa is
    followed by ``e<exponent>``.
    """
    if value.is_zero():
        return to_fixed(Decimal(0), digits - 1)

    rounded = _round_to(value, value.adjusted() - (digits - 1))
    exponent = rounded.adjusted()
    if exponent != value.adjusted():
        # 0.9996 -> 1.000, drop the extra digit
        rounded = _round_to(rounded, exponent - (digits - 1))

    if exponent < MIN_FIXED_EXPONENT or exponent >= digits:
        mantissa = format(rounded.scaleb(-exponent), "f")
        sign = "+" if exponent >= 0 else "-"
        return f"{mantissa}e{sign}{abs(exponent)}"

    return format(rounded, "f")


def format_value(value: Optional[Decimal]) -> Optional[str]:
    """Display string for a derived value, or None when it is not finite or out of range."""
    if value is None or not within_range(value):
        return None
    if abs(value) >= FIXED_THRESHOLD:
        return to_fixed(value)
    return to_precision(value)


def compose_display(
    raw: RawInputs,
    derived: Mapping[Field, Decimal],
    sources: Iterable[Field],
) -> dict:
    """
    Display string per field.

    Source fields echo the raw text so the user's own typing (trailing zeros,
    partial input) survives. Other fields show the formatted derived value,
    falling back to the raw text when it is not finite.
    """
    source_set = set(sources)
    display = {}
    for field in Field:
        if field in source_set:
            display[field] = raw.get(field)
            continue
        formatted = format_value(derived.get(field))
        display[field] = formatted if formatted is not None else raw.get(field)
    return display
