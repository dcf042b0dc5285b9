"""Dependency injection container for the order service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Sequence

from opentelemetry import trace

from order_service.adapters.outbound import (
    BroadcastOrderPlacedNotifier,
    EmailNotifier,
    InMemoryCartRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    SMSNotifier,
)
from order_service.application.order_app import OrderApp
from order_service.infrastructure.config import Config, get_config
from order_service.infrastructure.logging import setup_logging, get_logger
from order_service.infrastructure.metrics import MetricsRegistry, get_metrics
from order_service.infrastructure.tracing import setup_tracing, get_tracer
from order_service.ports.outbound import OrderPlacedNotifier


_CHANNELS: dict[str, type] = {
    "sms": SMSNotifier,
    "email": EmailNotifier,
}


def build_notifier(channels: Sequence[str]) -> BroadcastOrderPlacedNotifier:
    """Build a broadcast notifier over the named channels, in order.

    Raises:
        ValueError: If a channel name is unknown.
    """
    notifiers: list[OrderPlacedNotifier] = []
    for channel in channels:
        try:
            notifiers.append(_CHANNELS[channel]())
        except KeyError:
            raise ValueError(f"Unknown notification channel: {channel}") from None
    return BroadcastOrderPlacedNotifier(notifiers)


@dataclass
class Container:
    """Dependency injection container for order service components."""

    config: Config
    logger: Any
    tracer: trace.Tracer
    metrics: MetricsRegistry
    product_repository: InMemoryProductRepository
    cart_repository: InMemoryCartRepository
    order_repository: InMemoryOrderRepository
    notifier: BroadcastOrderPlacedNotifier
    order_app: OrderApp

    _instance: ClassVar[Container | None] = None

    @classmethod
    def create(cls, config: Config | None = None, metrics: MetricsRegistry | None = None) -> Container:
        """Create and initialize the container with all dependencies."""
        if cls._instance is not None:
            return cls._instance

        config = config or get_config()
        observability = config.observability

        setup_logging(observability.log_level, observability.log_format)
        logger = get_logger("order_service")

        if observability.otel_endpoint:
            tracer = setup_tracing(observability.otel_service_name, observability.otel_endpoint)
        else:
            tracer = get_tracer()

        metrics = metrics or get_metrics()

        product_repository = InMemoryProductRepository()
        cart_repository = InMemoryCartRepository()
        order_repository = InMemoryOrderRepository()
        notifier = build_notifier(config.notification.channels)

        order_app = OrderApp(
            product_repository=product_repository,
            cart_repository=cart_repository,
            order_repository=order_repository,
            order_placed_notifier=notifier,
            metrics=metrics,
        )

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            metrics=metrics,
            product_repository=product_repository,
            cart_repository=cart_repository,
            order_repository=order_repository,
            notifier=notifier,
            order_app=order_app,
        )

        logger.info(
            "order_service_container_initialized",
            notification_channels=list(config.notification.channels),
            tracing_enabled=observability.otel_endpoint is not None,
        )

        return cls._instance

    @classmethod
    def get(cls) -> Container:
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
