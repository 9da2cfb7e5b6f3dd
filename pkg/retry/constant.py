DEFAULT_MAX_RETRIES = 5
DEFAULT_TIMEOUT_SECONDS = None

# Errors
ERROR_NEGATIVE_RETRIES = "max_retries must be non-negative, got {value}"
ERROR_INVALID_TIMEOUT = "timeout_seconds must be positive or None, got {value}"
ERROR_GAVE_UP = "gave up after {retries} retries: {error}"
ERROR_ATTEMPT_TIMEOUT = "attempt {attempt} timed out after {timeout}s"
