"""
Input Validation

Checks parsed calculator inputs and reports the first problem found.
Checks run in a fixed order so that exactly one message surfaces per cycle:
numeric validity first, then domain ranges, then the number of filled fields.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal
from typing import Dict, List, Optional

from calculators.margin_config import PERCENT
from calculators.margin_models import CalculationIssue, Field, IssueCategory, ParsedValue

INSUFFICIENT_INPUTS_MESSAGE = "Enter any two values to calculate the others"
UNSOLVABLE_MESSAGE = "Cannot compute with the provided values"

# Order in which per-field "must be a number" errors are reported
NUMERIC_CHECK_ORDER = (Field.PRICE, Field.COST, Field.PROFIT, Field.MARGIN)


class InputValidator:
    """Validates one cycle's parsed inputs."""

    def __init__(self, parsed: Dict[Field, ParsedValue]):
        self.parsed = parsed

    def validate(self) -> Optional[CalculationIssue]:
        """Run all checks, returning the first issue or None."""
        for check in (
            self.check_numeric,
            self.check_ranges,
            self.check_filled_count,
        ):
            issue = check()
            if issue is not None:
                return issue
        return None

    def filled_fields(self) -> List[Field]:
        return [field for field in Field if self.parsed[field].is_filled]

    def _number(self, field: Field) -> Optional[Decimal]:
        parsed = self.parsed[field]
        return parsed.value if parsed.is_filled and not parsed.is_invalid else None

    def check_numeric(self) -> Optional[CalculationIssue]:
        for field in NUMERIC_CHECK_ORDER:
            if self.parsed[field].is_invalid:
                return CalculationIssue(
                    IssueCategory.NOT_A_NUMBER,
                    f"{field.label} must be a number",
                    field,
                )
        return None

    def check_ranges(self) -> Optional[CalculationIssue]:
        price = self._number(Field.PRICE)
        cost = self._number(Field.COST)
        margin = self._number(Field.MARGIN)

        # Profit is unbounded: negative profit is a loss
        if price is not None and price <= 0:
            return self._out_of_range(Field.PRICE, "Price must be greater than zero")
        if cost is not None and cost < 0:
            return self._out_of_range(Field.COST, "Cost cannot be negative")
        if margin is not None and margin <= 0:
            return self._out_of_range(Field.MARGIN, "Margin must be greater than zero")
        if margin is not None and margin >= PERCENT:
            return self._out_of_range(Field.MARGIN, "Margin must be less than 100")
        return None

    def check_filled_count(self) -> Optional[CalculationIssue]:
        if len(self.filled_fields()) < 2:
            return CalculationIssue(IssueCategory.INSUFFICIENT_INPUTS, INSUFFICIENT_INPUTS_MESSAGE)
        return None

    @staticmethod
    def _out_of_range(field: Field, message: str) -> CalculationIssue:
        return CalculationIssue(IssueCategory.OUT_OF_RANGE, message, field)


def validate_inputs(parsed: Dict[Field, ParsedValue]) -> Optional[CalculationIssue]:
    """Convenience wrapper around InputValidator."""
    return InputValidator(parsed).validate()


def unsolvable_issue() -> CalculationIssue:
    return CalculationIssue(IssueCategory.UNSOLVABLE, UNSOLVABLE_MESSAGE)
