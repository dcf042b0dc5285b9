"""Order service value objects."""

import uuid
from typing import NewType

# Type-safe identifiers
ProductId = NewType('ProductId', str)
UserId = NewType('UserId', str)
OrderId = NewType('OrderId', str)


def create_order_id() -> OrderId:
    """Create a unique order ID.

    Returns:
        Order ID of the form "order-<32 hex chars>".
    """
    return OrderId(f"order-{uuid.uuid4().hex}")
