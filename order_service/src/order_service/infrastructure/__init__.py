"""Infrastructure layer - cross-cutting concerns."""

from order_service.infrastructure.config import Config, get_config
from order_service.infrastructure.logging import setup_logging, get_logger
from order_service.infrastructure.metrics import get_metrics, MetricsRegistry
from order_service.infrastructure.tracing import setup_tracing, get_tracer, trace_span

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
]
