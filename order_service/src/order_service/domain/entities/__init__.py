"""Domain entities."""

from order_service.domain.entities.order import Order, OrderItem
from order_service.domain.entities.product import Product

__all__ = [
    "Order",
    "OrderItem",
    "Product",
]
