from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class SpanRecord:
    """A finished span.

    Attributes:
        name: Stage name
        attributes: Attributes given when opening the span plus any added inside it
        duration_ms: Wall time spent inside the span
        error: repr of the exception that escaped the span, if any
    """

    name: str
    attributes: Dict[str, object] = field(default_factory=dict)
    duration_ms: float = 0.0
    error: Optional[str] = None


@dataclass
class TracingConfig:
    enabled: bool = True
    slow_span_ms: float = 5000.0

    def __post_init__(self):
        if self.slow_span_ms <= 0:
            raise ValueError(f"slow_span_ms must be positive, got {self.slow_span_ms}")


__all__ = ["SpanRecord", "TracingConfig"]
