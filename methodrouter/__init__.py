"""
methodrouter - validated RPC-style method dispatch with a JSON-Schema catalog.
"""

from loguru import logger

from methodrouter.router import (
    INVALID_PARAMETER,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    UNKNOWN_ERROR,
    ErrorResponse,
    RequestParams,
    Route,
    RouteJSONSchema,
    Router,
    SuccessResponse,
    error_responses,
    handle_request,
    handle_request_sync,
    is_error,
    is_success,
)

__version__ = "0.1.0"

# Library logs stay silent until configure_logging() enables them.
logger.disable("methodrouter")

__all__ = [
    "__version__",
    "Router",
    "Route",
    "RouteJSONSchema",
    "RequestParams",
    "SuccessResponse",
    "ErrorResponse",
    "error_responses",
    "handle_request",
    "handle_request_sync",
    "is_success",
    "is_error",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMETER",
    "UNKNOWN_ERROR",
]
