"""In-memory product catalog.

This adapter provides an in-memory implementation of the
ProductRepository protocol for testing and development.
"""

from __future__ import annotations

import logging
import threading
from typing import Sequence

from order_service.domain.entities.product import Product
from order_service.domain.value_objects.identifiers import ProductId
from order_service.ports.outbound import ProductNotFoundError


logger = logging.getLogger(__name__)


class InMemoryProductRepository:
    """Dict-backed implementation of ProductRepository.

    Example:
        repo = InMemoryProductRepository()
        repo.import_products([Product(ProductId("p1"), "Pen", Decimal("1.50"))])
        repo.get_product_by_id(ProductId("p1"))
    """

    def __init__(self) -> None:
        self._products: dict[ProductId, Product] = {}
        self._lock = threading.Lock()

    def import_products(self, products: Sequence[Product]) -> None:
        """Upsert products by ID."""
        with self._lock:
            for product in products:
                self._products[product.product_id] = product
        logger.debug(f"Imported {len(products)} products")

    def get_product_by_id(self, product_id: ProductId) -> Product:
        """Get a product.

        Raises:
            ProductNotFoundError: If the product was never imported.
        """
        with self._lock:
            product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def list_products(self) -> list[Product]:
        """List all products in the catalog."""
        with self._lock:
            return list(self._products.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)
