"""
Source Field Tracking

Decides which two filled fields act as the independent variables of a
derivation cycle. Recently edited fields win over the fixed priority order,
so the two fields a user typed into stay authoritative even while a third
field still holds stale text.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from calculators.margin_config import FIELD_PRIORITY, SOURCE_HISTORY_CAPACITY
from calculators.margin_models import Field


@dataclass(frozen=True)
class SourceHistory:
    """
    Fixed-capacity ordered set of recently edited fields, most recent first.

    Invariant: no duplicates and ``len(fields) <= capacity``. Instances are
    immutable; ``push`` returns a new history.
    """

    fields: Tuple[Field, ...] = ()
    capacity: int = SOURCE_HISTORY_CAPACITY

    def __post_init__(self):
        if self.capacity < 1:
            raise ValueError(f"Capacity must be positive, got {self.capacity}")
        if len(set(self.fields)) != len(self.fields):
            raise ValueError(f"Duplicate fields in history: {self.fields}")
        if len(self.fields) > self.capacity:
            raise ValueError(
                f"History holds {len(self.fields)} fields, capacity is {self.capacity}"
            )

    @classmethod
    def from_edits(cls, edits: Iterable[Field], capacity: int = SOURCE_HISTORY_CAPACITY) -> "SourceHistory":
        """Replay a sequence of edits, oldest first."""
        history = cls(capacity=capacity)
        for field in edits:
            history = history.push(field)
        return history

    def push(self, field: Field) -> "SourceHistory":
        """Move ``field`` to the front, dropping entries past capacity."""
        field = Field(field)
        rest = tuple(f for f in self.fields if f != field)
        return SourceHistory((field,) + rest[:self.capacity - 1], self.capacity)

    def __iter__(self):
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, field) -> bool:
        return field in self.fields


def select_source_pair(
    history: SourceHistory,
    filled: Sequence[Field],
) -> Tuple[Field, Field]:
    """
    Choose the two authoritative fields for this cycle.

    Args:
        history: Recently edited fields, most recent first
        filled: Fields whose input is currently non-blank

    Returns:
        The two most recently edited filled fields if there are two, else the
        first two filled fields in FIELD_PRIORITY order

    Raises:
        ValueError: If fewer than two fields are filled
    """
    filled_set = set(filled)
    if len(filled_set) < 2:
        raise ValueError(f"Need at least two filled fields, got {sorted(f.value for f in filled_set)}")

    recent = [field for field in history if field in filled_set]
    if len(recent) >= 2:
        return recent[0], recent[1]

    ordered = [field for field in FIELD_PRIORITY if field in filled_set]
    return ordered[0], ordered[1]
