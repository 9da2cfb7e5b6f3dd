from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


DEFAULT_SERVICE_NAME = "outfit-archiver"
DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_ENABLE_CONSOLE = True
DEFAULT_COLORIZE = True
DEFAULT_ENABLE_TRACE_ID = True

LOG_FORMAT_TIME = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green>"
LOG_FORMAT_LEVEL = "<level>{level: <7}</level>"
LOG_FORMAT_TRACE = "<cyan>{extra[trace_id]}</cyan>"
LOG_FORMAT_LOCATION = "<cyan>{name}</cyan>:<cyan>{line}</cyan>"
LOG_FORMAT_MESSAGE = "<level>{message}</level>"

TRACE_ID_KEY = "trace_id"
