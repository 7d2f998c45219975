"""Query specification DTOs.

API docs: https://docs.honeycomb.io/api/query-specification/
"""

from pydantic import BaseModel, ConfigDict, model_validator

from honeycomb_client.domain.enums import (
    CalculationOp,
    FilterCombination,
    FilterOp,
    FilterValueKind,
    HavingOp,
    SortOrder,
)
from honeycomb_client.domain.errors import InvalidFilterValueError
from honeycomb_client.domain.types import ScalarValue

DEFAULT_QUERY_LIMIT = 1000
DEFAULT_QUERY_TIME_RANGE = 2 * 60 * 60
DEFAULT_GRANULARITY = 0
DEFAULT_FILTER_COMBINATION = FilterCombination.AND

# 30m, 1h, 2h, 8h, 24h, 7d, 28d, 182d
VALID_TIME_COMPARE_OFFSETS = (1800, 3600, 7200, 28800, 86400, 604800, 2419200, 15724800)


def value_kind(value: ScalarValue | list[str] | None) -> FilterValueKind:
    """Return the variant of a filter or having value."""
    if value is None:
        return FilterValueKind.ABSENT
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return FilterValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return FilterValueKind.NUMBER
    if isinstance(value, str):
        return FilterValueKind.STRING
    return FilterValueKind.STRING_LIST


class CalculationSpec(BaseModel):
    """A calculation within a query."""

    model_config = ConfigDict(frozen=True)

    op: CalculationOp
    # Not needed with COUNT or CONCURRENCY
    column: str | None = None
    name: str | None = None


class CalculatedFieldSpec(BaseModel):
    """A query-scoped derived column."""

    model_config = ConfigDict(frozen=True)

    name: str
    expression: str


class FilterSpec(BaseModel):
    """A filter within a query.

    The value is a tagged union whose variant is dictated by the operator:
    exists/does-not-exist take no value, in/not-in take a list of strings
    and every other operator takes a single string, number or boolean.
    """

    # NaN and infinity have no JSON representation
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    column: str
    op: FilterOp
    value: bool | int | float | str | list[str] | None = None

    @model_validator(mode="after")
    def _check_value_variant(self) -> "FilterSpec":
        kind = self.value_kind
        if self.op.is_unary:
            if kind is not FilterValueKind.ABSENT:
                raise InvalidFilterValueError(f"filter op '{self.op.value}' does not take a value")
        elif self.op.takes_list:
            if kind is not FilterValueKind.STRING_LIST:
                raise InvalidFilterValueError(f"filter op '{self.op.value}' requires a list of strings")
        elif kind in (FilterValueKind.ABSENT, FilterValueKind.STRING_LIST):
            raise InvalidFilterValueError(f"filter op '{self.op.value}' requires a single value")
        return self

    @property
    def value_kind(self) -> FilterValueKind:
        """Variant of the filter value."""
        return value_kind(self.value)

    def string_list(self) -> list[str]:
        """Return the value of an in/not-in filter."""
        if self.value_kind is not FilterValueKind.STRING_LIST:
            raise InvalidFilterValueError(f"filter op '{self.op.value}' does not hold a list of strings")
        return list(self.value)


class OrderSpec(BaseModel):
    """How to order the results of a query."""

    model_config = ConfigDict(frozen=True)

    op: CalculationOp | None = None
    column: str | None = None
    order: SortOrder | None = None


class HavingSpec(BaseModel):
    """Filter restricting the returned groups."""

    # NaN and infinity have no JSON representation
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    calculate_op: CalculationOp | None = None
    column: str | None = None
    op: HavingOp | None = None
    value: bool | int | float | str | None = None


class QuerySpec(BaseModel):
    """A Honeycomb query specification.

    Every field is optional: the server fills in defaults and may omit
    fields that hold their default value when it returns a query.
    """

    model_config = ConfigDict(populate_by_name=True)

    # Only set on queries returned by the Queries API
    id: str | None = None

    calculations: list[CalculationSpec] | None = None
    calculated_fields: list[CalculatedFieldSpec] | None = None
    filters: list[FilterSpec] | None = None
    filter_combination: FilterCombination | None = None
    breakdowns: list[str] | None = None
    orders: list[OrderSpec] | None = None
    havings: list[HavingSpec] | None = None
    limit: int | None = None
    # Seconds, defaults to two hours
    time_range: int | None = None
    # Unix time
    start_time: int | None = None
    end_time: int | None = None
    granularity: int | None = None
    compare_time_offset_seconds: int | None = None
