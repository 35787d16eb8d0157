from .components import AppLogger, LogStatusFilter
from .singleton import AppLoggerSingleton, get_app_logger, get_log_status_filter
from .utils import log_operation, print_section

__all__ = [
    "AppLogger",
    "AppLoggerSingleton",
    "LogStatusFilter",
    "get_app_logger",
    "get_log_status_filter",
    "log_operation",
    "print_section",
]
