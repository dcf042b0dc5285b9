"""Prometheus metrics for the order service."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all order service metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Catalog metrics
        self.products_imported_total = Counter(
            "products_imported_total",
            "Total products imported into the catalog",
            registry=self._registry,
        )

        # Cart metrics
        self.cart_items_added_total = Counter(
            "cart_items_added_total",
            "Total units added to carts",
            registry=self._registry,
        )

        # Order metrics
        self.orders_placed_total = Counter(
            "orders_placed_total",
            "Total orders placed",
            registry=self._registry,
        )

        self.order_total_amount = Histogram(
            "order_total_amount",
            "Order total amount",
            buckets=(1.0, 5.0, 10.0, 25.0, 50.0, 100.0, 250.0, 500.0, 1000.0),
            registry=self._registry,
        )

        self.order_operations_total = Counter(
            "order_operations_total",
            "Total order app operations",
            ["operation", "status"],  # import_products/add_item_to_cart/place_order, success/error
            registry=self._registry,
        )

        # Service info
        self.info = Info(
            "order_service",
            "Order service information",
            registry=self._registry,
        )

        from order_service import __version__

        self.info.info({"version": __version__})

    @property
    def registry(self) -> CollectorRegistry:
        """Underlying Prometheus registry."""
        return self._registry


_metrics: MetricsRegistry | None = None


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
