"""OpenTelemetry tracing for order operations.

Spans carry the order's identity and totals so a placed order can be
followed from the cart read to the notification.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from order_service.domain.entities.order import Order

_tracer: trace.Tracer | None = None


def setup_tracing(
    service_name: str = "order_service",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """Install a tracer provider exporting to OTLP and/or the console."""
    global _tracer

    from order_service import __version__

    provider = TracerProvider(
        resource=Resource.create({"service.name": service_name, "service.version": __version__})
    )
    exporters = []
    if otlp_endpoint:
        exporters.append(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True))
    if console_export:
        exporters.append(ConsoleSpanExporter())
    for exporter in exporters:
        provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer(service_name)
    return _tracer


def get_tracer() -> trace.Tracer:
    """Get the order service tracer, falling back to the global provider."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer("order_service")
    return _tracer


def set_order_attributes(span: trace.Span, order: Order) -> None:
    """Attach an order's identity, size and total to a span."""
    span.set_attribute("order.id", order.order_id)
    span.set_attribute("order.user_id", order.user_id)
    span.set_attribute("order.item_count", len(order.items))
    span.set_attribute("order.total_amount", str(order.total_amount))


@contextmanager
def trace_span(name: str, attributes: dict[str, Any] | None = None) -> Generator[trace.Span, None, None]:
    """Run a block inside a span.

    Failures are tagged with ``error.type`` before being re-raised; the
    exception event and error status are recorded by the span itself.
    """
    with get_tracer().start_as_current_span(name, attributes=attributes) as span:
        try:
            yield span
        except Exception as e:
            span.set_attribute("error.type", type(e).__name__)
            raise
