"""Shape resources into their wire representation."""

from pydantic import BaseModel

from honeycomb_client.application.dto.alerting import Recipient, Trigger
from honeycomb_client.domain.enums import RecipientType
from honeycomb_client.domain.types import JsonValue


def to_wire(model: BaseModel) -> dict[str, JsonValue]:
    """Dump a model using API field names, omitting unset values."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def shape_trigger(trigger: Trigger) -> dict[str, JsonValue]:
    """Build the wire representation of a trigger.

    The API rejects a trigger carrying both an inline query and a query ID,
    so the query ID takes precedence and the inline query is dropped.
    """
    wire = to_wire(trigger)
    if trigger.query_id and trigger.query is not None:
        wire.pop("query", None)
    return wire


def shape_recipient(recipient: Recipient) -> dict[str, JsonValue]:
    """Build the wire representation of a recipient.

    PagerDuty recipients are addressed through their integration details
    and never carry a target.
    """
    wire = to_wire(recipient)
    if recipient.type is RecipientType.PAGERDUTY:
        wire.pop("target", None)
    return wire
