"""Interface for recording spans around pipeline stages."""

from typing import ContextManager, Protocol, runtime_checkable


@runtime_checkable
class ISpanRecorder(Protocol):
    """Protocol for span recording.

    Stages wrap their work in ``with recorder.span("stage", key=...)``. The
    recorder is injected; nothing is patched onto functions at runtime.
    """

    def span(self, name: str, **attributes: object) -> ContextManager[dict]:
        """Open a span. The yielded dict accepts extra attributes."""
        ...


__all__ = ["ISpanRecorder"]
