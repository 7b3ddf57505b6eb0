"""
Property-Based Tests - The Hypothesis

Uses hypothesis library for property-based testing of the derivation engine.

Invariants:
1. Solving from any pair of a consistent quadruple reproduces the quadruple
2. Inputs outside the domain (price <= 0, cost < 0, margin outside (0, 100)) are rejected
3. Feeding display strings back as raw input reproduces the same display
4. The engine never raises for arbitrary text

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal
from itertools import combinations

from hypothesis import given, strategies as st, settings

from calculators.formatting import to_fixed
from calculators.margin_engine import derive_display
from calculators.margin_models import DisplayResult, Field, IssueCategory, RawInputs
from calculators.solvers import is_solved, solve_pair
from calculators.source_history import SourceHistory


price_strategy = st.decimals(
    min_value=Decimal("0.01"),
    max_value=Decimal("100000"),
    places=2,
    allow_nan=False,
    allow_infinity=False
)

cost_strategy = st.decimals(
    min_value=Decimal("0"),
    max_value=Decimal("100000"),
    places=2,
    allow_nan=False,
    allow_infinity=False
)

margin_strategy = st.decimals(
    min_value=Decimal("0.01"),
    max_value=Decimal("99.99"),
    places=2,
    allow_nan=False,
    allow_infinity=False
)

out_of_range_margin_strategy = st.one_of(
    st.decimals(min_value=Decimal("-1000"), max_value=Decimal("0"), places=2),
    st.decimals(min_value=Decimal("100"), max_value=Decimal("1000"), places=2),
)

PRICE_COST_HISTORY = SourceHistory((Field.PRICE, Field.COST))


@given(price=price_strategy, margin=margin_strategy)
@settings(max_examples=100)
def test_invariant_round_trip_through_every_pair(price, margin):
    """
    Invariant 1: Pair rules are mutually consistent.

    Build a full quadruple from (price, margin), then re-solve it from each
    of the six pairs; every value must come back.
    """
    base = solve_pair({Field.PRICE: price, Field.MARGIN: margin})
    assert is_solved(base)

    tolerance = Decimal("1e-12") * (1 + max(abs(v) for v in base.values()))

    for first, second in combinations(Field, 2):
        resolved = solve_pair({first: base[first], second: base[second]})
        assert is_solved(resolved)
        for field in Field:
            assert abs(resolved[field] - base[field]) <= tolerance, \
                f"{field.value} drifted when solving from {first.value}/{second.value}"


@given(price=price_strategy, cost=cost_strategy)
@settings(max_examples=100)
def test_invariant_valid_price_and_cost_always_solve(price, cost):
    """Any positive price with non-negative cost yields a result, never an error."""
    result = derive_display(RawInputs(price=str(price), cost=str(cost)), PRICE_COST_HISTORY)
    assert result.error is None
    assert Decimal(result.margin) <= 100


@given(margin=out_of_range_margin_strategy)
@settings(max_examples=50)
def test_invariant_margin_outside_open_interval_rejected(margin):
    """Invariant 2: margin must lie in (0, 100)."""
    result = derive_display(RawInputs(price="100", margin=str(margin)))
    assert result.category == IssueCategory.OUT_OF_RANGE
    assert result.error.startswith("Margin must be")


@given(price=st.decimals(min_value=Decimal("-1000"), max_value=Decimal("0"), places=2))
@settings(max_examples=50)
def test_invariant_non_positive_price_rejected(price):
    result = derive_display(RawInputs(price=str(price), cost="1"))
    assert result.error == "Price must be greater than zero"


@given(cost=st.decimals(min_value=Decimal("-1000"), max_value=Decimal("-0.01"), places=2))
@settings(max_examples=50)
def test_invariant_negative_cost_rejected(cost):
    result = derive_display(RawInputs(price="10", cost=str(cost)))
    assert result.error == "Cost cannot be negative"


@given(price=price_strategy, cost=cost_strategy)
@settings(max_examples=100)
def test_invariant_idempotent_on_display_strings(price, cost):
    """
    Invariant 3: Re-entering what is displayed changes nothing.

    Both the formatted source values and the derived strings (now stale
    non-source text) are fed back with the same history.
    """
    first = derive_display(RawInputs(price=str(price), cost=str(cost)), PRICE_COST_HISTORY)

    reformatted = derive_display(
        RawInputs(price=to_fixed(price), cost=to_fixed(cost)),
        PRICE_COST_HISTORY,
    )
    assert reformatted.profit == first.profit
    assert reformatted.margin == first.margin

    # Stale margin text is still range-checked, so only feed back in-range margins
    if Decimal(0) < Decimal(first.margin) < 100:
        again = derive_display(RawInputs(**first.to_dict()), PRICE_COST_HISTORY)
        assert again == first


field_text = st.one_of(
    st.text(max_size=12),
    st.decimals(allow_nan=True, allow_infinity=True).map(str),
)


@given(
    cost=field_text,
    price=field_text,
    profit=field_text,
    margin=field_text,
    edits=st.lists(st.sampled_from(list(Field)), max_size=6),
)
@settings(max_examples=200)
def test_invariant_engine_never_raises(cost, price, profit, margin, edits):
    """Invariant 4: every input produces a well-formed result."""
    raw = RawInputs(cost=cost, price=price, profit=profit, margin=margin)
    result = derive_display(raw, SourceHistory.from_edits(edits))

    assert isinstance(result, DisplayResult)
    if result.error is not None:
        assert result.to_dict()["error"] == result.error
        assert (result.cost, result.price, result.profit, result.margin) == (cost, price, profit, margin)
    else:
        assert len(result.sources) == 2
