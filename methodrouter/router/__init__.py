"""Method registry and dispatch pipeline."""

from methodrouter.router.context_models import RequestParams
from methodrouter.router.dispatch import handle_request, handle_request_sync
from methodrouter.router.registry import Handler, Route, RouteJSONSchema, Router
from methodrouter.router.responses import (
    INVALID_PARAMETER,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PIPELINE_ERROR_CODES,
    UNKNOWN_ERROR,
    ErrorResponse,
    ErrorResponses,
    Response,
    SuccessResponse,
    error_responses,
    is_error,
    is_success,
)

__all__ = [
    # Registry
    "Handler",
    "Route",
    "RouteJSONSchema",
    "Router",
    "RequestParams",
    # Dispatch
    "handle_request",
    "handle_request_sync",
    # Responses
    "ErrorResponse",
    "ErrorResponses",
    "Response",
    "SuccessResponse",
    "error_responses",
    "is_error",
    "is_success",
    # Error codes
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMETER",
    "UNKNOWN_ERROR",
    "PIPELINE_ERROR_CODES",
]
