"""Inbound ports - API contracts for the order service."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, Sequence

from order_service.domain.entities.order import Order
from order_service.domain.entities.product import Product
from order_service.domain.value_objects.identifiers import ProductId, UserId


class OrderAppPort(Protocol):
    """Protocol for catalog, cart and order operations.

    Inventory is not checked.

    Example:
        app.import_products([Product(ProductId("p1"), "Pen", Decimal("1.50"))])
        app.add_item_to_cart(UserId("u1"), ProductId("p1"), 3)
        order = app.place_order(UserId("u1"))
    """

    @abstractmethod
    def import_products(self, products: Sequence[Product]) -> None:
        """Import products into the catalog.

        Args:
            products: Products to import; existing IDs are overwritten.
        """
        ...

    @abstractmethod
    def add_item_to_cart(self, user_id: UserId, product_id: ProductId, quantity: int) -> None:
        """Add a product to a user's cart at its current price.

        Args:
            user_id: Cart owner.
            product_id: Product to add.
            quantity: Number of units, must be positive.

        Raises:
            ProductNotFoundError: If the product is not in the catalog.
            ValueError: If quantity is not a positive integer.
        """
        ...

    @abstractmethod
    def place_order(self, user_id: UserId) -> Order:
        """Turn a user's cart into an order.

        Args:
            user_id: Cart owner.

        Returns:
            The placed order. An empty cart yields an order with a zero total.
        """
        ...
