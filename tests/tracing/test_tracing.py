"""Unit tests for span recorders."""

import pytest

from pkg.tracing.tracing import InMemorySpanRecorder, LoggingSpanRecorder
from pkg.tracing.type import TracingConfig


class TestInMemorySpanRecorder:
    def test_records_attributes_and_errors(self):
        recorder = InMemorySpanRecorder()

        with recorder.span("ok", key="k") as attrs:
            attrs["extra"] = 1

        with pytest.raises(ValueError):
            with recorder.span("boom"):
                raise ValueError("bad")

        assert recorder.names() == ["ok", "boom"]
        assert recorder.spans[0].attributes == {"key": "k", "extra": 1}
        assert recorder.spans[0].error is None
        assert "ValueError" in recorder.spans[1].error


class TestLoggingSpanRecorder:
    def test_disabled_recorder_still_yields(self):
        recorder = LoggingSpanRecorder(TracingConfig(enabled=False))
        with recorder.span("stage", key="k") as attrs:
            attrs["x"] = 1
        assert attrs == {"key": "k", "x": 1}

    def test_error_propagates(self):
        recorder = LoggingSpanRecorder()
        with pytest.raises(RuntimeError):
            with recorder.span("stage"):
                raise RuntimeError("fail")

    def test_invalid_slow_threshold(self):
        with pytest.raises(ValueError):
            TracingConfig(slow_span_ms=0)
