"""In-memory cart storage."""

from __future__ import annotations

import logging
import threading

from order_service.domain.entities.order import OrderItem
from order_service.domain.value_objects.identifiers import UserId


logger = logging.getLogger(__name__)


class InMemoryCartRepository:
    """Dict-backed implementation of CartRepository.

    Carts are created on first add and deleted on clear.
    """

    def __init__(self) -> None:
        self._carts: dict[UserId, list[OrderItem]] = {}
        self._lock = threading.Lock()

    def add_item_to_cart(self, user_id: UserId, item: OrderItem) -> None:
        with self._lock:
            self._carts.setdefault(user_id, []).append(item)
        logger.debug(f"Added {item.quantity} x {item.product_id} to cart of {user_id}")

    def get_cart_items(self, user_id: UserId) -> list[OrderItem]:
        with self._lock:
            return list(self._carts.get(user_id, []))

    def clear_cart(self, user_id: UserId) -> None:
        with self._lock:
            self._carts.pop(user_id, None)
        logger.debug(f"Cleared cart of {user_id}")

    def has_cart(self, user_id: UserId) -> bool:
        """Check whether a user currently has a cart."""
        with self._lock:
            return user_id in self._carts
