"""
Margin Derivation Engine

Given any two of {cost, price, profit, margin}, derives the other two.

One derivation cycle:
    raw text -> parse -> validate -> pick source pair -> solve -> format

The engine is a pure function of the four raw inputs and the edit history.
It never raises for user input: every problem becomes the ``error`` of the
returned DisplayResult, with the raw inputs echoed as display strings.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from typing import Dict

from calculators.formatting import compose_display
from calculators.margin_models import CalculationIssue, DisplayResult, Field, RawInputs
from calculators.parsing import parse_inputs
from calculators.solvers import is_solved, solve_pair
from calculators.source_history import SourceHistory, select_source_pair
from calculators.validation import InputValidator, unsolvable_issue
from utils.logging_config import log_context, setup_logger

logger = setup_logger(__name__)


def _echo_raw(raw: RawInputs, issue: CalculationIssue) -> DisplayResult:
    """Result for a cycle that stopped at an issue."""
    logger.debug(
        "Derivation stopped",
        extra=log_context(category=issue.category, field=issue.field),
    )
    return DisplayResult(
        cost=raw.cost,
        price=raw.price,
        profit=raw.profit,
        margin=raw.margin,
        error=issue.message,
        category=issue.category,
    )


def derive_display(raw: RawInputs, history: SourceHistory = SourceHistory()) -> DisplayResult:
    """
    Run one derivation cycle.

    Args:
        raw: Verbatim text of the four fields
        history: Most recently edited fields, most recent first

    Returns:
        DisplayResult with four display strings and, if the inputs cannot be
        used, a single error message
    """
    parsed = parse_inputs(raw)

    validator = InputValidator(parsed)
    issue = validator.validate()
    if issue is not None:
        return _echo_raw(raw, issue)

    sources = select_source_pair(history, validator.filled_fields())
    known = {field: parsed[field].value for field in sources}

    derived = solve_pair(known)
    if not is_solved(derived):
        return _echo_raw(raw, unsolvable_issue())

    display = compose_display(raw, derived, sources)
    logger.debug(
        "Derivation complete",
        extra=log_context(sources=sources),
    )
    return DisplayResult(
        cost=display[Field.COST],
        price=display[Field.PRICE],
        profit=display[Field.PROFIT],
        margin=display[Field.MARGIN],
        sources=sources,
    )


def derive_from_text(
    cost: str = "",
    price: str = "",
    profit: str = "",
    margin: str = "",
    history=(),
) -> Dict[str, str]:
    """
    Plain-record entry point for hosts that hold raw strings and field names.

    Args:
        cost, price, profit, margin: Raw text per field
        history: Field names (or Field members), most recently edited first

    Returns:
        ``{"cost", "price", "profit", "margin"[, "error"]}``
    """
    raw = RawInputs(cost=cost, price=price, profit=profit, margin=margin)
    source_history = SourceHistory.from_edits(reversed([Field(name) for name in history]))
    return derive_display(raw, source_history).to_dict()
