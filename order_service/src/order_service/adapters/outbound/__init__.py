"""Outbound adapters - Implementations of outbound port interfaces.

Provides in-memory repositories for testing and development, and
notification channels composed through a broadcast notifier.
"""

from order_service.adapters.outbound.in_memory_cart_repository import InMemoryCartRepository
from order_service.adapters.outbound.in_memory_order_repository import InMemoryOrderRepository
from order_service.adapters.outbound.in_memory_product_repository import InMemoryProductRepository
from order_service.adapters.outbound.notifiers import (
    BroadcastOrderPlacedNotifier,
    EmailNotifier,
    SMSNotifier,
)

__all__ = [
    # Repositories
    "InMemoryCartRepository",
    "InMemoryOrderRepository",
    "InMemoryProductRepository",
    # Notifiers
    "BroadcastOrderPlacedNotifier",
    "EmailNotifier",
    "SMSNotifier",
]
