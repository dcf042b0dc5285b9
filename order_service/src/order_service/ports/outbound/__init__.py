"""Outbound ports - Capability interfaces for the order service.

Outbound ports define the storage and notification capabilities the
order application is composed from. Each one can be supplied by a
different adapter.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, Sequence

from order_service.domain.entities.order import Order, OrderItem
from order_service.domain.entities.product import Product
from order_service.domain.value_objects.identifiers import ProductId, UserId


# =============================================================================
# Errors
# =============================================================================


class OrderServiceError(Exception):
    """Base class for order service errors."""

    pass


class ProductNotFoundError(OrderServiceError, LookupError):
    """Raised when a product ID is not in the catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class CapabilityNotConfiguredError(OrderServiceError):
    """Raised when an operation needs a capability that was never supplied."""

    def __init__(self, capability: str) -> None:
        super().__init__(f"{capability} is not configured for this order app")
        self.capability = capability


# =============================================================================
# Product Repository Port
# =============================================================================


class ProductRepository(Protocol):
    """Protocol for the product catalog.

    Thread Safety:
        Implementations shared across threads must be thread-safe.
    """

    @abstractmethod
    def import_products(self, products: Sequence[Product]) -> None:
        """Upsert products by ID.

        Args:
            products: Products to store.
        """
        ...

    @abstractmethod
    def get_product_by_id(self, product_id: ProductId) -> Product:
        """Get a product.

        Args:
            product_id: Product to look up.

        Returns:
            The product.

        Raises:
            ProductNotFoundError: If the product does not exist.
        """
        ...


# =============================================================================
# Cart Repository Port
# =============================================================================


class CartRepository(Protocol):
    """Protocol for per-user cart storage.

    Items are kept in insertion order.
    """

    @abstractmethod
    def add_item_to_cart(self, user_id: UserId, item: OrderItem) -> None:
        """Append an item to a user's cart."""
        ...

    @abstractmethod
    def get_cart_items(self, user_id: UserId) -> list[OrderItem]:
        """Get a user's cart items.

        Returns:
            Items in insertion order; empty if the user has no cart.
        """
        ...

    @abstractmethod
    def clear_cart(self, user_id: UserId) -> None:
        """Delete a user's cart. Clearing a missing cart is a no-op."""
        ...


# =============================================================================
# Order Repository Port
# =============================================================================


class OrderRepository(Protocol):
    """Protocol for order persistence."""

    @abstractmethod
    def save_order(self, order: Order) -> None:
        """Persist a placed order."""
        ...


# =============================================================================
# Order Placed Notifier Port
# =============================================================================


class OrderPlacedNotifier(Protocol):
    """Protocol for announcing placed orders (SMS, email, ...)."""

    @abstractmethod
    def notify_order_placed(self, order: Order) -> None:
        """Send a notification for a placed order.

        Raises:
            Exception: Any delivery failure, propagated to the caller.
        """
        ...
