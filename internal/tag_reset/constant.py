# Settings of the tag reset run
DEFAULT_CONCURRENCY = 30
DEFAULT_KEY_TIMEOUT_SECONDS = 10.0
DEFAULT_KEY_RETRIES = 5
DEFAULT_LIST_TIMEOUT_SECONDS = 5.0
DEFAULT_LIST_RETRIES = 10
ACTION = "reset"

__all__ = [
    "DEFAULT_CONCURRENCY",
    "DEFAULT_KEY_TIMEOUT_SECONDS",
    "DEFAULT_KEY_RETRIES",
    "DEFAULT_LIST_TIMEOUT_SECONDS",
    "DEFAULT_LIST_RETRIES",
    "ACTION",
]
