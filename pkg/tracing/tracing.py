import time
from contextlib import contextmanager
from typing import Iterator, List, Optional

from loguru import logger

from .interface import ISpanRecorder
from .type import SpanRecord, TracingConfig


class LoggingSpanRecorder(ISpanRecorder):
    """Span recorder that reports finished spans through loguru.

    Spans log at DEBUG; spans slower than ``slow_span_ms`` or ending in an
    exception log at WARNING.
    """

    def __init__(self, config: Optional[TracingConfig] = None):
        self.config = config or TracingConfig()

    @contextmanager
    def span(self, name: str, **attributes: object) -> Iterator[dict]:
        record = SpanRecord(name=name, attributes=dict(attributes))
        if not self.config.enabled:
            yield record.attributes
            return

        started = time.perf_counter()
        try:
            yield record.attributes
        except BaseException as exc:
            record.error = repr(exc)
            raise
        finally:
            record.duration_ms = (time.perf_counter() - started) * 1000
            self._report(record)

    def _report(self, record: SpanRecord) -> None:
        attrs = " ".join(f"{k}={v}" for k, v in record.attributes.items())
        message = f"span={record.name} duration_ms={record.duration_ms:.1f} {attrs}".rstrip()
        if record.error is not None:
            logger.warning(f"{message} error={record.error}")
        elif record.duration_ms >= self.config.slow_span_ms:
            logger.warning(f"{message} slow=true")
        else:
            logger.debug(message)


class InMemorySpanRecorder(ISpanRecorder):
    """Keeps finished spans in a list for inspection."""

    def __init__(self):
        self.spans: List[SpanRecord] = []

    @contextmanager
    def span(self, name: str, **attributes: object) -> Iterator[dict]:
        record = SpanRecord(name=name, attributes=dict(attributes))
        started = time.perf_counter()
        try:
            yield record.attributes
        except BaseException as exc:
            record.error = repr(exc)
            raise
        finally:
            record.duration_ms = (time.perf_counter() - started) * 1000
            self.spans.append(record)

    def names(self) -> List[str]:
        return [s.name for s in self.spans]


__all__ = ["LoggingSpanRecorder", "InMemorySpanRecorder"]
