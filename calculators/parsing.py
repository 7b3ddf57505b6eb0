"""Raw text to number conversion for calculator fields."""

import re
from decimal import Decimal, DecimalException
from typing import Dict

from calculators.margin_config import MAX_MAGNITUDE
from calculators.margin_models import Field, ParsedValue, RawInputs

# Plain ASCII decimal: no digit separators, no non-ASCII digits
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)

# Unsigned integer literals with a radix prefix: 0x1F, 0o17, 0b101
RADIX_PATTERN = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)
RADIX_BASES = {"x": 16, "o": 8, "b": 2}


def within_range(value: Decimal) -> bool:
    """True for finite values no larger in magnitude than MAX_MAGNITUDE."""
    return value.is_finite() and value.copy_abs() <= MAX_MAGNITUDE


def parse_number(text: str) -> ParsedValue:
    """
    Parse one raw field.

    Blank (after trimming) is absent. Decimal notation and radix-prefixed
    integers are numbers; anything else, including "NaN", "Infinity",
    "1_000" and magnitudes beyond MAX_MAGNITUDE, is invalid.
    """
    trimmed = text.strip()
    if not trimmed:
        return ParsedValue.absent()

    radix = RADIX_PATTERN.fullmatch(trimmed)
    if radix:
        value = Decimal(int(trimmed[2:], RADIX_BASES[trimmed[1].lower()]))
    elif DECIMAL_PATTERN.fullmatch(trimmed):
        try:
            value = Decimal(trimmed)
        except (DecimalException, ValueError):
            return ParsedValue.invalid()
    else:
        return ParsedValue.invalid()

    if not within_range(value):
        return ParsedValue.invalid()

    return ParsedValue.number(value)


def parse_inputs(raw: RawInputs) -> Dict[Field, ParsedValue]:
    """Parse all four fields."""
    return {field: parse_number(raw.get(field)) for field in Field}
