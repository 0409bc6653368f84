"""Error-boundary helpers that turn handler outcomes into ErrorResponse values."""

from __future__ import annotations

from typing import Callable

from methodrouter.router.responses import ErrorResponse, error_responses
from methodrouter.utils.exceptions import classify_exception, sanitize_error_message


def explicit_error_result(
    *,
    method: str,
    error: ErrorResponse,
    log_warning: Callable[..., None],
) -> ErrorResponse:
    """Pass a handler-chosen ErrorResponse through unchanged."""
    log_warning("Method {} returned error {}", method, error.type)
    return error


def unhandled_exception_result(
    *,
    method: str,
    exc: BaseException,
    log_exception: Callable[..., None] | None,
) -> ErrorResponse:
    """Map any other fault to UNKNOWN_ERROR; detail goes to the log only."""
    if log_exception is not None:
        code, category = classify_exception(exc)
        sanitized = sanitize_error_message(str(exc))
        log_exception("Method {} failed with [{}/{}]: {}", method, code, category.value, sanitized)
    return error_responses.unknown_error()
