"""
Margin Calculator Data Models

Defines the transient data structures of one derivation cycle:
- Field: the four calculator fields
- RawInputs: verbatim text per field, as typed by the user
- ParsedValue: absent / number / invalid result of parsing one field
- CalculationIssue: the single user-facing problem of a cycle
- DisplayResult: four display strings plus an optional error

None of these are persisted; they are rebuilt on every edit.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Optional, Dict, Tuple


class Field(str, Enum):
    """Calculator fields."""
    COST = "cost"
    PRICE = "price"
    PROFIT = "profit"
    MARGIN = "margin"

    @property
    def label(self) -> str:
        """Capitalised name used in error messages."""
        return self.value.capitalize()


class ValueState(str, Enum):
    """Outcome of parsing one raw field."""
    ABSENT = "absent"
    NUMBER = "number"
    INVALID = "invalid"


@dataclass(frozen=True)
class ParsedValue:
    """Parsed form of a single raw input."""

    state: ValueState
    value: Optional[Decimal] = None

    @classmethod
    def absent(cls) -> "ParsedValue":
        return cls(ValueState.ABSENT)

    @classmethod
    def invalid(cls) -> "ParsedValue":
        return cls(ValueState.INVALID)

    @classmethod
    def number(cls, value: Decimal) -> "ParsedValue":
        return cls(ValueState.NUMBER, value)

    @property
    def is_filled(self) -> bool:
        """Blank fields are the only unfilled ones; invalid text counts as filled."""
        return self.state != ValueState.ABSENT

    @property
    def is_invalid(self) -> bool:
        return self.state == ValueState.INVALID


@dataclass(frozen=True)
class RawInputs:
    """
    Verbatim text of the four fields.

    Frozen so that it can be used as part of a memoization key.
    """

    cost: str = ""
    price: str = ""
    profit: str = ""
    margin: str = ""

    def get(self, field: Field) -> str:
        return getattr(self, field.value)

    def with_value(self, field: Field, text: str) -> "RawInputs":
        """Return a copy with one field replaced."""
        return replace(self, **{field.value: text})


class IssueCategory(str, Enum):
    """Error taxonomy, in surfacing priority order."""
    NOT_A_NUMBER = "NotANumber"
    OUT_OF_RANGE = "OutOfRange"
    INSUFFICIENT_INPUTS = "InsufficientInputs"
    UNSOLVABLE = "Unsolvable"


@dataclass(frozen=True)
class CalculationIssue:
    """A user-input problem that suppresses computation for one cycle."""

    category: IssueCategory
    message: str
    field: Optional[Field] = None


@dataclass(frozen=True)
class DisplayResult:
    """
    Output of a derivation cycle.

    When ``error`` is set the four strings echo the raw inputs and carry no
    computed meaning.
    """

    cost: str
    price: str
    profit: str
    margin: str
    error: Optional[str] = None
    category: Optional[IssueCategory] = None
    sources: Tuple[Field, ...] = ()

    def get(self, field: Field) -> str:
        return getattr(self, field.value)

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, str]:
        """Record handed to the presentation layer; ``error`` only when present."""
        record = {
            "cost": self.cost,
            "price": self.price,
            "profit": self.profit,
            "margin": self.margin,
        }
        if self.error is not None:
            record["error"] = self.error
        return record
