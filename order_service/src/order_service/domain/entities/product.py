"""Product catalog entity."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from order_service.domain.value_objects.identifiers import ProductId


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Products are immutable. Re-importing a product with the same ID
    replaces the catalog entry; carts keep the price they snapshotted.
    """
    product_id: ProductId
    name: str
    price: Decimal
