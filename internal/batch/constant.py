DEFAULT_CONCURRENCY = 20
DEFAULT_LIST_RETRIES = 10
DEFAULT_KEY_RETRIES = 5
DEFAULT_ACTION = "backed up"

__all__ = [
    "DEFAULT_CONCURRENCY",
    "DEFAULT_LIST_RETRIES",
    "DEFAULT_KEY_RETRIES",
    "DEFAULT_ACTION",
]
