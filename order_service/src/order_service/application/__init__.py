"""Application layer - orchestration of domain entities and outbound ports."""

from order_service.application.order_app import OrderApp, OrderAppBuilder

__all__ = [
    "OrderApp",
    "OrderAppBuilder",
]
