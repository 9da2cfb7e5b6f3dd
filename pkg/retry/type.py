from dataclasses import dataclass
from typing import Optional

from .constant import *


class RetryExhaustedError(Exception):
    """Raised when every attempt of an operation failed.

    Attributes:
        attempts: Number of attempts made (max_retries + 1)
        last_error: Error raised by the final attempt
    """

    def __init__(self, retries: int, last_error: BaseException):
        self.attempts = retries + 1
        self.retries = retries
        self.last_error = last_error
        super().__init__(ERROR_GAVE_UP.format(retries=retries, error=last_error))


class AttemptTimeoutError(Exception):
    """Raised for a single attempt that exceeded the per-attempt timeout."""

    def __init__(self, attempt: int, timeout: float):
        self.attempt = attempt
        self.timeout = timeout
        super().__init__(ERROR_ATTEMPT_TIMEOUT.format(attempt=attempt, timeout=timeout))


@dataclass
class RetryConfig:
    """Retry configuration.

    Attributes:
        max_retries: Retries after the first attempt (total attempts = max_retries + 1)
        timeout_seconds: Per-attempt timeout, None to wait indefinitely
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    timeout_seconds: Optional[float] = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self):
        """Validate configuration."""
        if self.max_retries < 0:
            raise ValueError(ERROR_NEGATIVE_RETRIES.format(value=self.max_retries))

        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(ERROR_INVALID_TIMEOUT.format(value=self.timeout_seconds))


__all__ = [
    "RetryConfig",
    "RetryExhaustedError",
    "AttemptTimeoutError",
]
