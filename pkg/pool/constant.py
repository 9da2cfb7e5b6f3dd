DEFAULT_CONCURRENCY = 20

ERROR_INVALID_CONCURRENCY = "concurrency must be positive, got {value}"
