"""
OpenTelemetry Integration Module

- tracer: client spans and trace context propagation into HTTP headers
- metrics: request counters and latency histograms

Nothing is exported until the host application calls setup_tracer/setup_metrics;
until then the OpenTelemetry API calls are no-ops.
"""

from .tracer import (
    setup_tracer,
    inject_trace_headers,
    create_span
)
from .metrics import (
    setup_metrics,
    increment_counter,
    record_latency
)

__all__ = [
    "setup_tracer",
    "inject_trace_headers",
    "create_span",
    "setup_metrics",
    "increment_counter",
    "record_latency"
]
