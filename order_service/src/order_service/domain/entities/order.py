"""Order and order line entities."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from order_service.domain.value_objects.identifiers import OrderId, ProductId, UserId


@dataclass(frozen=True)
class OrderItem:
    """A cart or order line.

    ``price`` is the unit price captured when the item was added to the
    cart, so later catalog price changes do not affect it.
    """
    product_id: ProductId
    quantity: int
    price: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Quantity must be an integer, got {self.quantity!r}")
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive, got {self.quantity}")

    @property
    def subtotal(self) -> Decimal:
        """Line total (unit price times quantity)."""
        return self.price * self.quantity


@dataclass(frozen=True)
class Order:
    """A placed order.

    The item snapshot and total are fixed at placement time and are
    never recomputed.
    """
    order_id: OrderId
    user_id: UserId
    items: tuple[OrderItem, ...]
    total_amount: Decimal

    @classmethod
    def place(cls, order_id: OrderId, user_id: UserId, items: Iterable[OrderItem]) -> Order:
        """Create an order from cart items.

        Args:
            order_id: Identity of the new order.
            user_id: Owning user.
            items: Cart items to snapshot.

        Returns:
            Order with total computed from the snapshot.
        """
        snapshot = tuple(items)
        total = sum((item.subtotal for item in snapshot), Decimal("0"))
        return cls(order_id=order_id, user_id=user_id, items=snapshot, total_amount=total)

    @property
    def item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(item.quantity for item in self.items)
