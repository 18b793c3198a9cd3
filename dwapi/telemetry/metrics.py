"""
OpenTelemetry Metrics Collection

Request counters and latency histograms for API calls.
"""

import logging
from typing import Dict, Any

from opentelemetry import metrics
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter

logger = logging.getLogger(__name__)

_counters = {}
_histograms = {}


def setup_metrics(service_name: str, otlp_endpoint: str = "localhost:4317", export_interval_ms: int = 5000):
    """Configure OpenTelemetry metrics collection

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
        export_interval_ms: Metrics export interval in milliseconds
    """
    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=otlp_endpoint),
        export_interval_millis=export_interval_ms
    )
    metrics.set_meter_provider(MeterProvider(metric_readers=[reader]))

    meter = metrics.get_meter(service_name)

    logger.info(f"OpenTelemetry metrics configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return meter


# Instruments emitted by DwApiClient.call
METRIC_DESCRIPTIONS = {
    "dwapi.client.requests": "API commands POSTed to the endpoint",
    "dwapi.client.success": "API commands answered with data.params",
    "dwapi.client.errors": "API commands that failed, labelled by failure type",
    "dwapi.client.latency": "Round trip of one POST to the endpoint",
}


def get_counter(name: str, description: str = None, unit: str = "1"):
    """Get or create the counter registered under name"""
    if name not in _counters:
        _counters[name] = metrics.get_meter(__name__).create_counter(
            name=name,
            description=description or METRIC_DESCRIPTIONS.get(name, name),
            unit=unit
        )
    return _counters[name]


def get_histogram(name: str, description: str = None, unit: str = "ms"):
    """Get or create the latency histogram registered under name"""
    if name not in _histograms:
        _histograms[name] = metrics.get_meter(__name__).create_histogram(
            name=name,
            description=description or METRIC_DESCRIPTIONS.get(name, name),
            unit=unit
        )
    return _histograms[name]


def increment_counter(name: str, amount: int = 1, attributes: Dict[str, Any] = None):
    """Count API commands

    Args:
        name: One of the dwapi.client.* counters
        amount: Amount to add
        attributes: Labels such as command and failure type
    """
    get_counter(name).add(amount, attributes or {})


def record_latency(name: str, value_ms: float, attributes: Dict[str, Any] = None):
    """Record the round trip of one POST

    Args:
        name: Histogram name, normally dwapi.client.latency
        value_ms: Milliseconds between sending the envelope and reading the body
        attributes: Labels such as command
    """
    get_histogram(name).record(value_ms, attributes or {})
