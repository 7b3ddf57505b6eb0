"""
Pairwise Solvers

Closed-form rules deriving the two missing values from any two known ones.
Each unordered pair of fields has exactly one registered rule.

All arithmetic runs in a decimal context with every trap disabled, so
overflow yields Infinity and undefined operations yield NaN instead of
raising. Divisions go through ``safe_divide``, which returns NaN for a zero
denominator or an operand outside the IEEE double range. Callers check the
results with ``is_solved``.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Context, Decimal, localcontext
from typing import Callable, Dict, FrozenSet, List, Mapping, Tuple

from calculators.margin_config import PERCENT
from calculators.margin_models import Field
from calculators.parsing import within_range

NAN = Decimal("NaN")

# Default precision and rounding, no traps
SOLVER_CONTEXT = Context(traps=[])

SolverFunc = Callable[[Decimal, Decimal], Dict[Field, Decimal]]

# Registry of pair rules keyed by the unordered pair
_SOLVER_REGISTRY: Dict[FrozenSet[Field], Tuple[Tuple[Field, Field], SolverFunc]] = {}


def safe_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide, or return NaN when either operand is out of range or the denominator is zero."""
    if not within_range(numerator) or not within_range(denominator) or denominator.is_zero():
        return NAN
    return numerator / denominator


def register_solver(first: Field, second: Field):
    """
    Decorator to register the rule for the pair (first, second).

    The decorated function receives the two known values in the declared
    order and returns the full set of four values.

    Usage:
        @register_solver(Field.PRICE, Field.COST)
        def _solve_price_cost(price, cost):
            ...
    """
    def decorator(func: SolverFunc) -> SolverFunc:
        key = frozenset((first, second))
        if len(key) != 2:
            raise ValueError(f"Solver pair must name two distinct fields: {first}, {second}")
        if key in _SOLVER_REGISTRY:
            raise ValueError(f"Solver for {first.value}/{second.value} already registered")
        _SOLVER_REGISTRY[key] = ((first, second), func)
        return func
    return decorator


@register_solver(Field.PRICE, Field.COST)
def _solve_price_cost(price: Decimal, cost: Decimal) -> Dict[Field, Decimal]:
    profit = price - cost
    margin = safe_divide(profit, price) * PERCENT
    return {Field.PRICE: price, Field.COST: cost, Field.PROFIT: profit, Field.MARGIN: margin}


@register_solver(Field.PRICE, Field.PROFIT)
def _solve_price_profit(price: Decimal, profit: Decimal) -> Dict[Field, Decimal]:
    cost = price - profit
    margin = safe_divide(profit, price) * PERCENT
    return {Field.PRICE: price, Field.COST: cost, Field.PROFIT: profit, Field.MARGIN: margin}


@register_solver(Field.PRICE, Field.MARGIN)
def _solve_price_margin(price: Decimal, margin: Decimal) -> Dict[Field, Decimal]:
    profit = safe_divide(price * margin, PERCENT)
    cost = price - profit
    return {Field.PRICE: price, Field.COST: cost, Field.PROFIT: profit, Field.MARGIN: margin}


@register_solver(Field.COST, Field.PROFIT)
def _solve_cost_profit(cost: Decimal, profit: Decimal) -> Dict[Field, Decimal]:
    price = cost + profit
    margin = safe_divide(profit, price) * PERCENT
    return {Field.PRICE: price, Field.COST: cost, Field.PROFIT: profit, Field.MARGIN: margin}


@register_solver(Field.COST, Field.MARGIN)
def _solve_cost_margin(cost: Decimal, margin: Decimal) -> Dict[Field, Decimal]:
    price = safe_divide(cost, 1 - margin / PERCENT)
    profit = price - cost
    return {Field.PRICE: price, Field.COST: cost, Field.PROFIT: profit, Field.MARGIN: margin}


@register_solver(Field.PROFIT, Field.MARGIN)
def _solve_profit_margin(profit: Decimal, margin: Decimal) -> Dict[Field, Decimal]:
    price = safe_divide(profit, margin / PERCENT)
    cost = price - profit
    return {Field.PRICE: price, Field.COST: cost, Field.PROFIT: profit, Field.MARGIN: margin}


def solve_pair(known: Mapping[Field, Decimal]) -> Dict[Field, Decimal]:
    """
    Derive all four values from exactly two known ones.

    Args:
        known: Mapping of two distinct fields to their values

    Returns:
        Mapping of all four fields; the known values are passed through
        unchanged, derived values may be NaN or Infinity

    Raises:
        ValueError: If ``known`` does not hold exactly two fields
    """
    key = frozenset(known)
    if len(known) != 2 or key not in _SOLVER_REGISTRY:
        raise ValueError(
            f"Exactly two distinct fields required, got {sorted(Field(f).value for f in known)}"
        )

    (first, second), func = _SOLVER_REGISTRY[key]
    with localcontext(SOLVER_CONTEXT):
        return func(known[first], known[second])


def is_solved(values: Mapping[Field, Decimal]) -> bool:
    """True when no value carries a NaN marker."""
    return not any(value.is_nan() for value in values.values())


def list_solver_pairs() -> List[Tuple[Field, Field]]:
    """Registered pairs in declaration order."""
    return [pair for pair, _ in _SOLVER_REGISTRY.values()]
