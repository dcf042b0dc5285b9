"""Unit tests for order placed notifiers."""

from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from order_service.adapters.outbound import (
    BroadcastOrderPlacedNotifier,
    EmailNotifier,
    SMSNotifier,
)
from order_service.domain.entities.order import Order, OrderItem
from order_service.domain.value_objects.identifiers import OrderId, ProductId, UserId


@pytest.fixture
def order() -> Order:
    return Order.place(OrderId("o1"), UserId("u1"), [OrderItem(ProductId("p1"), 2, Decimal("10.0"))])


@pytest.mark.unit
class TestChannels:
    """Tests for the SMS and email stand-ins."""

    @pytest.mark.parametrize("notifier_cls, channel", [(SMSNotifier, "sms"), (EmailNotifier, "email")])
    def test_channel_logs_and_succeeds(self, notifier_cls, channel, order):
        """Test each channel records the notification."""
        with capture_logs() as logs:
            notifier_cls().notify_order_placed(order)

        assert len(logs) == 1
        assert logs[0]["event"] == "order_notification_sent"
        assert logs[0]["channel"] == channel
        assert logs[0]["order_id"] == "o1"
        assert logs[0]["total_amount"] == "20.0"


@pytest.mark.unit
class TestBroadcastOrderPlacedNotifier:
    """Tests for BroadcastOrderPlacedNotifier."""

    def test_all_notifiers_invoked(self, make_notifier, order):
        """Test every channel is notified when all succeed."""
        channels = [make_notifier(name=f"n{i}") for i in range(3)]
        broadcast = BroadcastOrderPlacedNotifier(channels)

        broadcast.notify_order_placed(order)

        assert [len(c.notified_orders) for c in channels] == [1, 1, 1]
        assert all(c.notified_orders[0] is order for c in channels)

    def test_stops_at_first_failure(self, make_notifier, order):
        """Test later channels are skipped after a failure."""
        error = ConnectionError("sms gateway down")
        channels = [
            make_notifier(name="first"),
            make_notifier(name="second", error=error),
            make_notifier(name="third"),
            make_notifier(name="fourth"),
        ]
        broadcast = BroadcastOrderPlacedNotifier(channels)

        with pytest.raises(ConnectionError) as excinfo:
            broadcast.notify_order_placed(order)

        assert excinfo.value is error
        assert [len(c.notified_orders) for c in channels] == [1, 1, 0, 0]

    def test_empty_broadcast(self, order):
        """Test broadcasting to no channels succeeds."""
        broadcast = BroadcastOrderPlacedNotifier()
        broadcast.notify_order_placed(order)
        assert len(broadcast) == 0

    def test_nested_broadcast(self, make_notifier, order):
        """Test a broadcast notifier can be one of the channels."""
        inner = make_notifier(name="inner")
        outer = make_notifier(name="outer")
        broadcast = BroadcastOrderPlacedNotifier([BroadcastOrderPlacedNotifier([inner]), outer])

        broadcast.notify_order_placed(order)

        assert len(inner.notified_orders) == 1
        assert len(outer.notified_orders) == 1
