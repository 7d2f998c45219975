"""Validate query specifications before they are sent."""

from honeycomb_client.application.dto.query_spec import (
    DEFAULT_QUERY_LIMIT,
    VALID_TIME_COMPARE_OFFSETS,
    QuerySpec,
)
from honeycomb_client.domain.enums import CalculationOp
from honeycomb_client.domain.errors import InvalidQuerySpecError


def validate_query_spec(spec: QuerySpec) -> None:
    """Validate a query specification."""
    if spec.limit is not None and not 1 <= spec.limit <= DEFAULT_QUERY_LIMIT:
        raise InvalidQuerySpecError(f"limit must be between 1 and {DEFAULT_QUERY_LIMIT}, got {spec.limit}")

    if spec.start_time is not None and spec.end_time is not None and spec.time_range is not None:
        raise InvalidQuerySpecError("time_range cannot be combined with both start_time and end_time")

    if spec.start_time is not None and spec.end_time is not None and spec.start_time >= spec.end_time:
        raise InvalidQuerySpecError(f"start_time must be before end_time: {spec.start_time} >= {spec.end_time}")

    offset = spec.compare_time_offset_seconds
    if offset is not None and offset not in VALID_TIME_COMPARE_OFFSETS:
        raise InvalidQuerySpecError(
            f"compare_time_offset_seconds must be one of {list(VALID_TIME_COMPARE_OFFSETS)}, got {offset}",
        )

    for calculation in spec.calculations or []:
        if calculation.op.is_unary and calculation.column is not None:
            raise InvalidQuerySpecError(f"calculation {calculation.op.value} does not take a column")
        if not calculation.op.is_unary and not calculation.column:
            raise InvalidQuerySpecError(f"calculation {calculation.op.value} requires a column")


def validate_trigger_subset(spec: QuerySpec) -> None:
    """Validate that a query respects the subset allowed in a trigger.

    The query must contain exactly one calculation, which may not be a
    HEATMAP, and may not set orders or a limit.
    """
    calculations = spec.calculations or []
    if len(calculations) != 1:
        raise InvalidQuerySpecError("a trigger query should contain exactly one calculation")

    if calculations[0].op is CalculationOp.HEATMAP:
        raise InvalidQuerySpecError("a trigger query may not contain a HEATMAP calculation")

    if spec.orders is not None:
        raise InvalidQuerySpecError("orders is not allowed in a trigger query")

    if spec.limit is not None:
        raise InvalidQuerySpecError("limit is not allowed in a trigger query")
