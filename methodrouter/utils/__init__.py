"""Utility functions for methodrouter."""

from methodrouter.utils.exceptions import (
    MethodRouterError,
    ConfigError,
    RouteLoadError,
    ErrorCategory,
    classify_exception,
    sanitize_error_message,
)
from methodrouter.utils.logging import configure_logging, ensure_rotating_log_file, reset_logging

__all__ = [
    "MethodRouterError",
    "ConfigError",
    "RouteLoadError",
    "ErrorCategory",
    "classify_exception",
    "sanitize_error_message",
    "configure_logging",
    "ensure_rotating_log_file",
    "reset_logging",
]
