"""Order service value objects."""

from order_service.domain.value_objects.identifiers import (
    OrderId,
    ProductId,
    UserId,
    create_order_id,
)

__all__ = [
    "OrderId",
    "ProductId",
    "UserId",
    "create_order_id",
]
