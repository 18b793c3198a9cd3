"""
Tests for telemetry helpers
"""
from unittest.mock import patch, MagicMock

from dwapi.telemetry import tracer, metrics
from dwapi.telemetry.tracer import create_span, inject_trace_headers


class TestTracer:
    """Test trace helpers"""

    def test_inject_without_span(self):
        """Test no headers are produced outside a recording span"""
        assert inject_trace_headers() == {}

    def test_create_span_is_context_manager(self):
        """Test create_span works with the default no-op provider"""
        with create_span("dwapi.gateway.list", {"dwapi.command": "gateway.list"}) as span:
            assert span is not None

    @patch.object(tracer, "trace")
    @patch.object(tracer, "BatchSpanProcessor")
    @patch.object(tracer, "OTLPSpanExporter")
    def test_setup_tracer(self, mock_exporter, mock_processor, mock_trace):
        """Test setup_tracer installs a provider and returns a tracer"""
        result = tracer.setup_tracer("dwapi-test", "collector:4317")
        mock_exporter.assert_called_once_with(endpoint="collector:4317")
        mock_trace.set_tracer_provider.assert_called_once()
        mock_trace.get_tracer.assert_called_once_with("dwapi-test")
        assert result is mock_trace.get_tracer.return_value


class TestMetrics:
    """Test metric helpers"""

    def test_counter_cached(self):
        """Test counters are created once per name"""
        first = metrics.get_counter("dwapi.test.counter", "test")
        second = metrics.get_counter("dwapi.test.counter", "test")
        assert first is second

    def test_increment_and_record(self):
        """Test counters and histograms receive values and attributes"""
        counter = MagicMock()
        histogram = MagicMock()
        with patch.dict(metrics._counters, {"dwapi.client.requests": counter}), \
                patch.dict(metrics._histograms, {"dwapi.client.latency": histogram}):
            metrics.increment_counter("dwapi.client.requests", 1, {"command": "api.ping"})
            metrics.record_latency("dwapi.client.latency", 12.5, {"command": "api.ping"})
        counter.add.assert_called_once_with(1, {"command": "api.ping"})
        histogram.record.assert_called_once_with(12.5, {"command": "api.ping"})

    def test_client_metric_descriptions(self):
        """Test client instruments are created with their own descriptions"""
        meter = MagicMock()
        with patch.object(metrics.metrics, "get_meter", return_value=meter), \
                patch.dict(metrics._counters, {}, clear=True), \
                patch.dict(metrics._histograms, {}, clear=True):
            metrics.increment_counter("dwapi.client.errors", 1, {"type": "transport"})
            metrics.record_latency("dwapi.client.latency", 3.0)
        meter.create_counter.assert_called_once_with(
            name="dwapi.client.errors",
            description=metrics.METRIC_DESCRIPTIONS["dwapi.client.errors"],
            unit="1"
        )
        meter.create_histogram.assert_called_once_with(
            name="dwapi.client.latency",
            description=metrics.METRIC_DESCRIPTIONS["dwapi.client.latency"],
            unit="ms"
        )
        meter.create_counter.return_value.add.assert_called_once_with(1, {"type": "transport"})
