DEFAULT_CAPACITY = 40

ERROR_INVALID_CAPACITY = "capacity must be positive, got {value}"
