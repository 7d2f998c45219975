"""Trigger, SLO, burn alert and recipient DTOs."""

from datetime import datetime

from pydantic import BaseModel

from honeycomb_client.application.dto.query_spec import QuerySpec
from honeycomb_client.domain.enums import (
    BurnAlertAlertType,
    RecipientType,
    TriggerAlertType,
    TriggerEvaluationScheduleType,
    TriggerThresholdOp,
)


class Tag(BaseModel):
    """Key-value pair used for tagging resources."""

    key: str
    value: str


class NotificationRecipientDetails(BaseModel):
    """Extra per-recipient notification settings."""

    pagerduty_severity: str | None = None


class NotificationRecipient(BaseModel):
    """Recipient notified by a trigger or burn alert."""

    id: str | None = None
    type: RecipientType | None = None
    target: str | None = None
    details: NotificationRecipientDetails | None = None


class Recipient(BaseModel):
    """A notification recipient.

    API docs: https://docs.honeycomb.io/api/recipients/
    """

    id: str | None = None
    type: RecipientType
    target: str | None = None
    # Type-specific settings, e.g. integration key for PagerDuty
    details: dict[str, str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TriggerThreshold(BaseModel):
    """Threshold of a trigger."""

    op: TriggerThresholdOp
    value: float
    exceeded_limit: int | None = None


class TriggerEvaluationWindow(BaseModel):
    """Days and UTC hours during which a trigger is evaluated."""

    days_of_week: list[str]
    # UTC time in HH:mm format
    start_time: str
    end_time: str


class TriggerEvaluationSchedule(BaseModel):
    """Evaluation schedule of a trigger."""

    window: TriggerEvaluationWindow


class TriggerBaselineDetails(BaseModel):
    """Baseline comparison settings of a trigger."""

    type: str
    offset_minutes: int


class Trigger(BaseModel):
    """A Honeycomb trigger.

    API docs: https://docs.honeycomb.io/api/triggers/
    """

    id: str | None = None
    name: str
    description: str | None = None
    disabled: bool = False
    # Conflicts with query_id, query_id wins when both are set
    query: QuerySpec | None = None
    query_id: str | None = None
    alert_type: TriggerAlertType | None = None
    threshold: TriggerThreshold | None = None
    evaluation_schedule_type: TriggerEvaluationScheduleType | None = None
    evaluation_schedule: TriggerEvaluationSchedule | None = None
    # Seconds, divisible by 60, between 60 and 86400
    frequency: int | None = None
    recipients: list[NotificationRecipient] | None = None
    baseline_details: TriggerBaselineDetails | None = None
    tags: list[Tag] | None = None


class SLIRef(BaseModel):
    """Reference to the derived column used as SLI."""

    alias: str


class SLO(BaseModel):
    """A Service Level Objective.

    API docs: https://docs.honeycomb.io/api/slos/
    """

    id: str | None = None
    name: str
    description: str | None = None
    time_period_days: int
    target_per_million: int
    dataset_slugs: list[str] | None = None
    sli: SLIRef
    tags: list[Tag] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SLORef(BaseModel):
    """Reference to an SLO."""

    id: str


class BurnAlert(BaseModel):
    """A burn alert on an SLO.

    API docs: https://docs.honeycomb.io/api/burn-alerts/
    """

    id: str | None = None
    alert_type: BurnAlertAlertType
    exhaustion_minutes: int | None = None
    budget_rate_window_minutes: int | None = None
    budget_rate_decrease_threshold_per_million: int | None = None
    description: str | None = None
    slo: SLORef
    recipients: list[NotificationRecipient] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
