"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: APIs offered to clients (OrderAppPort)
- Outbound ports: Capabilities the application depends on (repositories, notifiers)

Adapters implement these ports with concrete functionality.
"""

from order_service.ports.inbound import OrderAppPort
from order_service.ports.outbound import (
    CapabilityNotConfiguredError,
    CartRepository,
    OrderPlacedNotifier,
    OrderRepository,
    OrderServiceError,
    ProductNotFoundError,
    ProductRepository,
)

__all__ = [
    # Inbound ports
    "OrderAppPort",
    # Outbound ports
    "CartRepository",
    "OrderPlacedNotifier",
    "OrderRepository",
    "ProductRepository",
    # Errors
    "CapabilityNotConfiguredError",
    "OrderServiceError",
    "ProductNotFoundError",
]
