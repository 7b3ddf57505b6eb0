"""
Margin Calculator Configuration

Tunable constants of the derivation engine. Display thresholds are a
presentation heuristic carried over unchanged from the first release of the
calculator; do not generalise them.

Environment:
    MARGIN_CACHE_SIZE: entries kept by the derivation memo (default 256)
    LOG_LEVEL / LOG_FILE: see utils.logging_config

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import os
import sys
from decimal import Decimal

from calculators.margin_models import Field
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

# Fallback order when edit history does not name two filled fields.
# Arbitrary but user-visible; keep as is.
FIELD_PRIORITY = (Field.PRICE, Field.COST, Field.PROFIT, Field.MARGIN)

# Number of recently edited fields treated as authoritative
SOURCE_HISTORY_CAPACITY = 2

# Display formatting
FIXED_DECIMALS = 2                  # |value| >= FIXED_THRESHOLD
SIGNIFICANT_DIGITS = 3              # |value| < FIXED_THRESHOLD
FIXED_THRESHOLD = Decimal(1)
MIN_FIXED_EXPONENT = -6             # below this, significant-digit output turns exponential

PERCENT = Decimal(100)

# Largest magnitude accepted as input or shown as a derived value (IEEE double range)
MAX_MAGNITUDE = Decimal(sys.float_info.max)

DEFAULT_CACHE_SIZE = 256


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default
    if value < 0:
        logger.warning(f"Ignoring negative {name}={value}, using {default}")
        return default
    return value


CACHE_SIZE = _env_int("MARGIN_CACHE_SIZE", DEFAULT_CACHE_SIZE)
