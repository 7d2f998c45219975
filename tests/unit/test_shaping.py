"""Unit tests for wire shaping of triggers and recipients."""

from honeycomb_client.application.dto.alerting import Recipient, Trigger, TriggerThreshold
from honeycomb_client.application.dto.query_spec import CalculationSpec, QuerySpec
from honeycomb_client.application.services.shaping import shape_recipient, shape_trigger
from honeycomb_client.domain.enums import CalculationOp, RecipientType, TriggerThresholdOp


def _trigger(**kwargs) -> Trigger:
    return Trigger(
        name="High latency",
        threshold=TriggerThreshold(op=TriggerThresholdOp.GREATER_THAN, value=500),
        frequency=300,
        **kwargs,
    )


def test_shape_trigger_prefers_query_id():
    """Test the inline query is dropped when a query ID is set."""
    trigger = _trigger(
        query_id="q-123",
        query=QuerySpec(calculations=[CalculationSpec(op=CalculationOp.P99, column="duration_ms")]),
    )

    wire = shape_trigger(trigger)

    assert wire["query_id"] == "q-123"
    assert "query" not in wire
    # the model itself is left untouched
    assert trigger.query is not None


def test_shape_trigger_keeps_inline_query():
    """Test an inline query is sent when no query ID is set."""
    trigger = _trigger(query=QuerySpec(calculations=[CalculationSpec(op=CalculationOp.COUNT)]))

    wire = shape_trigger(trigger)

    assert wire["query"] == {"calculations": [{"op": "COUNT"}]}
    assert "query_id" not in wire


def test_shape_trigger_omits_unset_fields():
    """Test unset fields are left out of the wire representation."""
    wire = shape_trigger(_trigger(query_id="q-123"))

    assert wire == {
        "name": "High latency",
        "disabled": False,
        "query_id": "q-123",
        "threshold": {"op": ">", "value": 500.0},
        "frequency": 300,
    }


def test_shape_recipient_drops_pagerduty_target():
    """Test PagerDuty recipients never carry a target."""
    recipient = Recipient(
        type=RecipientType.PAGERDUTY,
        target="ignored",
        details={"pagerduty_integration_name": "ops", "pagerduty_integration_key": "abc123"},
    )

    wire = shape_recipient(recipient)

    assert "target" not in wire
    assert wire["type"] == "pagerduty"
    assert wire["details"]["pagerduty_integration_key"] == "abc123"


def test_shape_recipient_keeps_other_targets():
    """Test other recipient types keep their target."""
    wire = shape_recipient(Recipient(type=RecipientType.EMAIL, target="oncall@example.com"))

    assert wire == {"type": "email", "target": "oncall@example.com"}
