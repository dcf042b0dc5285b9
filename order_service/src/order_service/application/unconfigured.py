"""Placeholders for capabilities an OrderApp was built without.

Each placeholder satisfies its port but raises
CapabilityNotConfiguredError as soon as it is used, so an operation
that needs a missing capability fails with a clear message.
"""

from __future__ import annotations

from typing import NoReturn, Sequence

from order_service.domain.entities.order import Order, OrderItem
from order_service.domain.entities.product import Product
from order_service.domain.value_objects.identifiers import ProductId, UserId
from order_service.ports.outbound import CapabilityNotConfiguredError


class _Unconfigured:
    capability = "capability"

    def _fail(self) -> NoReturn:
        raise CapabilityNotConfiguredError(self.capability)

    def __repr__(self) -> str:
        return f"<unconfigured {self.capability}>"


class UnconfiguredProductRepository(_Unconfigured):
    capability = "ProductRepository"

    def import_products(self, products: Sequence[Product]) -> None:
        self._fail()

    def get_product_by_id(self, product_id: ProductId) -> Product:
        self._fail()


class UnconfiguredCartRepository(_Unconfigured):
    capability = "CartRepository"

    def add_item_to_cart(self, user_id: UserId, item: OrderItem) -> None:
        self._fail()

    def get_cart_items(self, user_id: UserId) -> list[OrderItem]:
        self._fail()

    def clear_cart(self, user_id: UserId) -> None:
        self._fail()


class UnconfiguredOrderRepository(_Unconfigured):
    capability = "OrderRepository"

    def save_order(self, order: Order) -> None:
        self._fail()
