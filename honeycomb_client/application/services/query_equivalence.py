"""Query specification equivalence.

The server substitutes defaults into the queries it stores and returns, and
drops fields that hold their default value. Two specifications are
equivalent when they describe the same query once those defaults are taken
into account.
"""

from collections import Counter
from collections.abc import Callable, Hashable, Sequence
from typing import TypeVar

from honeycomb_client.application.dto.query_spec import (
    DEFAULT_FILTER_COMBINATION,
    DEFAULT_GRANULARITY,
    DEFAULT_QUERY_LIMIT,
    DEFAULT_QUERY_TIME_RANGE,
    CalculationSpec,
    FilterSpec,
    HavingSpec,
    OrderSpec,
    QuerySpec,
    value_kind,
)
from honeycomb_client.domain.enums import CalculationOp, SortOrder

T = TypeVar("T")

DEFAULT_CALCULATIONS = (CalculationSpec(op=CalculationOp.COUNT),)


def equivalent_to(a: QuerySpec, b: QuerySpec) -> bool:
    """Determine if two query specifications are equivalent."""
    # the order of calculations matters for visualization rendering
    if not _calculations_match(a, b):
        return False

    if not _orders_match(a, b):
        return False

    # the order of filters does not matter, but their multiplicity does
    if not _same_multiset(a.filters, b.filters, _filter_key):
        return False
    if _or_default(a.filter_combination, DEFAULT_FILTER_COMBINATION) != _or_default(
        b.filter_combination, DEFAULT_FILTER_COMBINATION
    ):
        return False

    if (a.breakdowns or []) != (b.breakdowns or []):
        return False

    if not _same_multiset(a.havings, b.havings, _having_key):
        return False

    if _or_default(a.limit, DEFAULT_QUERY_LIMIT) != _or_default(b.limit, DEFAULT_QUERY_LIMIT):
        return False
    if _or_default(a.time_range, DEFAULT_QUERY_TIME_RANGE) != _or_default(b.time_range, DEFAULT_QUERY_TIME_RANGE):
        return False
    if a.start_time != b.start_time or a.end_time != b.end_time:
        return False
    # the server may export a literal 0 instead of omitting the field
    if _or_default(a.granularity, DEFAULT_GRANULARITY) != _or_default(b.granularity, DEFAULT_GRANULARITY):
        return False

    return a.compare_time_offset_seconds == b.compare_time_offset_seconds


def _or_default(value: T | None, default: T) -> T:
    return default if value is None else value


def _calculations_match(a: QuerySpec, b: QuerySpec) -> bool:
    """Order-sensitive; an empty list is the same as a single COUNT."""
    calcs_a = tuple(a.calculations or ())
    calcs_b = tuple(b.calculations or ())
    if calcs_a == calcs_b:
        return True
    return (calcs_a or DEFAULT_CALCULATIONS) == (calcs_b or DEFAULT_CALCULATIONS)


def _orders_match(a: QuerySpec, b: QuerySpec) -> bool:
    orders_a: Sequence[OrderSpec] = a.orders or ()
    orders_b: Sequence[OrderSpec] = b.orders or ()
    if len(orders_a) != len(orders_b):
        return False
    for x, y in zip(orders_a, orders_b):
        if _or_default(x.order, SortOrder.ASCENDING) != _or_default(y.order, SortOrder.ASCENDING):
            return False
        if x.column != y.column or x.op != y.op:
            return False
    return True


def _value_key(value: object) -> Hashable:
    # numbers compare by value, booleans and strings never equal numbers
    if isinstance(value, list):
        return value_kind(value), tuple(value)
    return value_kind(value), value


def _filter_key(f: FilterSpec) -> Hashable:
    return f.column, f.op, _value_key(f.value)


def _having_key(h: HavingSpec) -> Hashable:
    return h.calculate_op, h.column, h.op, _value_key(h.value)


def _same_multiset(
    a: Sequence[T] | None,
    b: Sequence[T] | None,
    key: Callable[[T], Hashable],
) -> bool:
    """Order-insensitive comparison that respects multiplicity."""
    a = a or ()
    b = b or ()
    if len(a) != len(b):
        return False
    return Counter(map(key, a)) == Counter(map(key, b))
