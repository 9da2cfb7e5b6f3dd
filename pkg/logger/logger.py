import sys
from typing import Iterator, Optional, Protocol, runtime_checkable
from contextvars import ContextVar
from contextlib import contextmanager
from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# Current trace id; async-safe, so concurrently running per-key workflows
# each log under their own key.
_trace_id_var: ContextVar[Optional[str]] = ContextVar(TRACE_ID_KEY, default=None)


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def trace_context(self, trace_id: Optional[str] = None) -> Iterator[None]: ...

    def get_trace_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...


class Logger(ILogger):
    """Logger wrapper around loguru with trace id support.

    The batch commands run many per-key workflows concurrently on one event
    loop. Each workflow enters ``trace_context(trace_id=key)`` so that every
    line it logs, including lines from the adapters it calls, carries the
    object key.

    Usage:
        logger = Logger(LoggerConfig(level="INFO"))

        with logger.trace_context(trace_id="outfits/000/001/234/preview.png"):
            logger.info("Processing")
    """

    def __init__(self, config: LoggerConfig):
        """Initialize logger with configuration.

        Args:
            config: Logger configuration
        """
        self.config = config
        self._loguru = _loguru_logger.bind(service=config.service_name)

        # Replace loguru's default stderr handler with ours
        _loguru_logger.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        """Add console handler with colors and trace ID."""

        def inject_trace_id(record):
            record["extra"][TRACE_ID_KEY] = _trace_id_var.get() or "-"
            return True

        format_str = f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | "
        if self.config.enable_trace_id:
            format_str += f"{LOG_FORMAT_TRACE} | "
        format_str += f"{LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"

        _loguru_logger.add(
            sys.stdout,
            colorize=self.config.colorize,
            format=format_str,
            level=self.config.level.value,
            filter=inject_trace_id,
        )

    @contextmanager
    def trace_context(self, trace_id: Optional[str] = None):
        """Context manager binding a trace ID to the current task.

        Args:
            trace_id: Trace ID, usually the object key being processed
        """
        token = _trace_id_var.set(trace_id) if trace_id else None
        try:
            yield
        finally:
            if token is not None:
                _trace_id_var.reset(token)

    def get_trace_id(self) -> Optional[str]:
        """Get current trace ID.

        Returns:
            Current trace ID or None
        """
        return _trace_id_var.get()

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self._loguru.opt(depth=1).debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self._loguru.opt(depth=1).info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self._loguru.opt(depth=1).warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self._loguru.opt(depth=1).error(message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception with traceback."""
        self._loguru.opt(depth=1).exception(message, **kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
