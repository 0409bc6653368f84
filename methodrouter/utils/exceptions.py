"""
Exception hierarchy and error classification for methodrouter.

Provides:
- Library exception classes with error codes
- Error categorization used in fault log records
- Safe error message formatting (no sensitive data leak)

These are raised by the library itself (config loading, CLI target loading).
Handler faults never escape the dispatch pipeline; they are classified here
only to enrich the log line.
"""

from __future__ import annotations

import asyncio
import json
import re
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    RETRYABLE = "retryable"
    FATAL = "fatal"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"


class MethodRouterError(Exception):
    """Base exception for all methodrouter errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigError(MethodRouterError):
    """Settings file could not be read or validated."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, code="CONFIG_ERROR", category=ErrorCategory.VALIDATION, details=details)


class RouteLoadError(MethodRouterError):
    """A ``module:attr`` router reference could not be resolved."""

    def __init__(self, target: str, message: str):
        super().__init__(
            f"Cannot load router '{target}': {message}",
            code="ROUTER_LOAD_ERROR",
            category=ErrorCategory.NOT_FOUND,
            details={"target": target},
        )


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"[a-zA-Z0-9]{32,}"),
    re.compile(r"sk-[a-zA-Z0-9]{20,}"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove sensitive information from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def classify_exception(exc: BaseException) -> tuple[str, ErrorCategory]:
    """Classify an exception as (error_code, category) for a fault log record."""
    if isinstance(exc, MethodRouterError):
        return exc.code, exc.category

    if isinstance(exc, FileNotFoundError):
        return "FILE_NOT_FOUND", ErrorCategory.NOT_FOUND

    if isinstance(exc, PermissionError):
        return "PERMISSION_DENIED", ErrorCategory.FATAL

    if isinstance(exc, asyncio.TimeoutError):
        return "TIMEOUT", ErrorCategory.TIMEOUT

    if isinstance(exc, ConnectionError):
        return "CONNECTION_ERROR", ErrorCategory.RETRYABLE

    if isinstance(exc, json.JSONDecodeError):
        return "JSON_PARSE_ERROR", ErrorCategory.VALIDATION

    if isinstance(exc, ValueError):
        return "INVALID_VALUE", ErrorCategory.VALIDATION

    if isinstance(exc, KeyError):
        return "MISSING_KEY", ErrorCategory.VALIDATION

    if isinstance(exc, TypeError):
        return "TYPE_ERROR", ErrorCategory.VALIDATION

    exc_str = str(exc).lower()
    if "timeout" in exc_str or "timed out" in exc_str:
        return "TIMEOUT", ErrorCategory.TIMEOUT

    if "not found" in exc_str:
        return "NOT_FOUND", ErrorCategory.NOT_FOUND

    return "INTERNAL_ERROR", ErrorCategory.FATAL
