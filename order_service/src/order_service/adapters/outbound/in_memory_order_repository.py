"""In-memory order storage."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from order_service.domain.entities.order import Order


logger = logging.getLogger(__name__)


class InMemoryOrderRepository:
    """List-backed implementation of OrderRepository.

    Orders are kept in the order they were saved.
    """

    def __init__(self) -> None:
        self._orders: list[Order] = []
        self._lock = threading.Lock()

    def save_order(self, order: Order) -> None:
        """Persist a placed order."""
        with self._lock:
            self._orders.append(order)
        logger.debug(f"Saved order {order.order_id}")

    @property
    def orders(self) -> list[Order]:
        """Saved orders, oldest first."""
        with self._lock:
            return list(self._orders)

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get order by ID.

        Returns:
            Order or None if not found.
        """
        with self._lock:
            for order in self._orders:
                if order.order_id == order_id:
                    return order
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)
