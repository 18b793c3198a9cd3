"""
OpenTelemetry Trace Context Management

Provides tracer setup, client spans around API calls, and propagation of the
current trace context into outgoing HTTP headers.
"""

import logging
from typing import Any, Dict

from opentelemetry import trace
from opentelemetry.propagate import inject
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

logger = logging.getLogger(__name__)


def setup_tracer(service_name: str, otlp_endpoint: str = "localhost:4317"):
    """Configure OpenTelemetry tracer

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
    """
    provider = TracerProvider(sampler=ALWAYS_ON)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
    trace.set_tracer_provider(provider)

    tracer = trace.get_tracer(service_name)

    logger.info(f"OpenTelemetry trace configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return tracer


def inject_trace_headers() -> Dict[str, str]:
    """Return W3C trace context headers for the active span

    Returns:
        Dict[str, str]: traceparent/tracestate headers, empty when no span is active
    """
    carrier: Dict[str, str] = {}
    inject(carrier)
    return carrier


def create_span(name: str, attributes: Dict[str, Any] = None):
    """Create new client span

    Args:
        name: Span name
        attributes: Span attributes

    Returns:
        Context manager yielding the span
    """
    tracer = trace.get_tracer(__name__)
    return tracer.start_as_current_span(
        name,
        attributes=attributes or {},
        kind=trace.SpanKind.CLIENT,
    )
