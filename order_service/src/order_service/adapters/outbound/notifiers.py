"""Order placed notification channels.

SMS and email channels are stand-ins that only log the notification.
The broadcast notifier fans one event out to several channels.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from order_service.domain.entities.order import Order
from order_service.infrastructure.logging import get_logger
from order_service.ports.outbound import OrderPlacedNotifier


class _LoggingChannel:
    """Base for channels that record a notification and always succeed."""

    channel = "unknown"

    def __init__(self, logger: Optional[Any] = None) -> None:
        self._logger = logger or get_logger(__name__)

    def notify_order_placed(self, order: Order) -> None:
        self._logger.info(
            "order_notification_sent",
            channel=self.channel,
            order_id=order.order_id,
            user_id=order.user_id,
            total_amount=str(order.total_amount),
        )


class SMSNotifier(_LoggingChannel):
    """SMS channel stand-in."""

    channel = "sms"


class EmailNotifier(_LoggingChannel):
    """Email channel stand-in."""

    channel = "email"


class BroadcastOrderPlacedNotifier:
    """Notifies several channels in sequence.

    Channels are invoked in the order given. The first failure is
    raised unchanged and the remaining channels are not invoked.

    Example:
        notifier = BroadcastOrderPlacedNotifier([SMSNotifier(), EmailNotifier()])
        notifier.notify_order_placed(order)
    """

    def __init__(self, notifiers: Iterable[OrderPlacedNotifier] = ()) -> None:
        self._notifiers: tuple[OrderPlacedNotifier, ...] = tuple(notifiers)

    @property
    def notifiers(self) -> tuple[OrderPlacedNotifier, ...]:
        """Channels in invocation order."""
        return self._notifiers

    def notify_order_placed(self, order: Order) -> None:
        for notifier in self._notifiers:
            notifier.notify_order_placed(order)

    def __len__(self) -> int:
        return len(self._notifiers)
