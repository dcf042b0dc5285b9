"""Pytest configuration and fixtures for order service tests."""

from __future__ import annotations

from decimal import Decimal
from typing import Generator

import pytest
import structlog
from prometheus_client import CollectorRegistry

from order_service.adapters.outbound import (
    InMemoryCartRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)
from order_service.application.order_app import OrderApp
from order_service.domain.entities.order import Order
from order_service.domain.entities.product import Product
from order_service.domain.value_objects.identifiers import ProductId
from order_service.infrastructure.container import Container
from order_service.infrastructure.metrics import MetricsRegistry


class RecordingNotifier:
    """Notifier test double that records orders and can be told to fail."""

    def __init__(self, name: str = "recording", error: Exception | None = None) -> None:
        self.name = name
        self.error = error
        self.notified_orders: list[Order] = []

    def notify_order_placed(self, order: Order) -> None:
        self.notified_orders.append(order)
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def reset_globals() -> Generator[None, None, None]:
    """Reset the DI container and structlog config around each test."""
    Container.reset()
    structlog.reset_defaults()
    yield
    Container.reset()
    structlog.reset_defaults()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry."""
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def products() -> list[Product]:
    """Provide a small catalog."""
    return [
        Product(ProductId("prod1"), "Product 1", Decimal("10.0")),
        Product(ProductId("prod2"), "Product 2", Decimal("20.0")),
    ]


@pytest.fixture
def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def cart_repository() -> InMemoryCartRepository:
    return InMemoryCartRepository()


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def order_app(
    product_repository: InMemoryProductRepository,
    cart_repository: InMemoryCartRepository,
    order_repository: InMemoryOrderRepository,
    notifier: RecordingNotifier,
    metrics_registry: MetricsRegistry,
) -> OrderApp:
    """Provide an order app wired with every capability."""
    return OrderApp(
        product_repository=product_repository,
        cart_repository=cart_repository,
        order_repository=order_repository,
        order_placed_notifier=notifier,
        metrics=metrics_registry,
    )


@pytest.fixture
def make_notifier() -> type[RecordingNotifier]:
    """Provide the recording notifier class for building several channels."""
    return RecordingNotifier


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
