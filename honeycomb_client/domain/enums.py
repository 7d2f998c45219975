"""Domain enums for query, trigger and resource types."""

from enum import Enum


class CalculationOp(str, Enum):
    """Calculation operator enum."""

    COUNT = "COUNT"
    CONCURRENCY = "CONCURRENCY"
    SUM = "SUM"
    AVG = "AVG"
    COUNT_DISTINCT = "COUNT_DISTINCT"
    MAX = "MAX"
    MIN = "MIN"
    P001 = "P001"
    P01 = "P01"
    P05 = "P05"
    P10 = "P10"
    P25 = "P25"
    P50 = "P50"
    P75 = "P75"
    P90 = "P90"
    P95 = "P95"
    P99 = "P99"
    P999 = "P999"
    HEATMAP = "HEATMAP"
    RATE_AVG = "RATE_AVG"
    RATE_SUM = "RATE_SUM"
    RATE_MAX = "RATE_MAX"

    @property
    def is_unary(self) -> bool:
        """True for operators that take no column."""
        return self in (CalculationOp.COUNT, CalculationOp.CONCURRENCY)


class FilterOp(str, Enum):
    """Filter operator enum."""

    EQUALS = "="
    NOT_EQUALS = "!="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    SMALLER_THAN = "<"
    SMALLER_THAN_OR_EQUAL = "<="
    STARTS_WITH = "starts-with"
    DOES_NOT_START_WITH = "does-not-start-with"
    EXISTS = "exists"
    DOES_NOT_EXIST = "does-not-exist"
    CONTAINS = "contains"
    DOES_NOT_CONTAIN = "does-not-contain"
    IN = "in"
    NOT_IN = "not-in"

    @property
    def is_unary(self) -> bool:
        """True for operators that take no value."""
        return self in (FilterOp.EXISTS, FilterOp.DOES_NOT_EXIST)

    @property
    def takes_list(self) -> bool:
        """True for operators whose value is a list of strings."""
        return self in (FilterOp.IN, FilterOp.NOT_IN)


class FilterValueKind(str, Enum):
    """Variant of a filter value."""

    ABSENT = "absent"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"


class FilterCombination(str, Enum):
    """How the filters of a query are combined."""

    AND = "AND"
    OR = "OR"


class SortOrder(str, Enum):
    """Sort order enum."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class HavingOp(str, Enum):
    """Having operator enum."""

    EQUALS = "="
    NOT_EQUALS = "!="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="


class ColumnType(str, Enum):
    """Column type enum."""

    STRING = "string"
    FLOAT = "float"
    INTEGER = "integer"
    BOOLEAN = "boolean"


class TriggerThresholdOp(str, Enum):
    """Trigger threshold operator enum."""

    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="


class TriggerAlertType(str, Enum):
    """Trigger alert type enum."""

    ON_CHANGE = "on_change"
    ON_TRUE = "on_true"


class TriggerEvaluationScheduleType(str, Enum):
    """Trigger evaluation schedule type enum."""

    FREQUENCY = "frequency"
    WINDOW = "window"


class BurnAlertAlertType(str, Enum):
    """Burn alert type enum."""

    EXHAUSTION_TIME = "exhaustion_time"
    BUDGET_RATE = "budget_rate"


class RecipientType(str, Enum):
    """Notification recipient type enum."""

    EMAIL = "email"
    MARKER = "marker"
    MSTEAMS = "msteams"
    MSTEAMS_WORKFLOW = "msteams_workflow"
    PAGERDUTY = "pagerduty"
    SLACK = "slack"
    WEBHOOK = "webhook"


class BoardPanelType(str, Enum):
    """Board panel type enum."""

    QUERY = "query"
    SLO = "slo"
    TEXT = "text"


class BoardQueryStyle(str, Enum):
    """How a query is displayed on a board."""

    GRAPH = "graph"
    TABLE = "table"
    COMBO = "combo"


class LayoutGeneration(str, Enum):
    """Board layout generation enum."""

    MANUAL = "manual"
    AUTO = "auto"
