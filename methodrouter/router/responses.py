"""Discriminated dispatch responses and the fixed pipeline error codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar, Union

from methodrouter.validation.schema import Issue

T = TypeVar("T")

INVALID_REQUEST = "INVALID_REQUEST"
METHOD_NOT_FOUND = "METHOD_NOT_FOUND"
INVALID_PARAMETER = "INVALID_PARAMETER"
UNKNOWN_ERROR = "UNKNOWN_ERROR"

PIPELINE_ERROR_CODES = frozenset({INVALID_REQUEST, METHOD_NOT_FOUND, INVALID_PARAMETER, UNKNOWN_ERROR})


@dataclass(slots=True)
class SuccessResponse(Generic[T]):
    """Handler outcome wrapped as ``{success: True, response}``."""

    response: T | None = None
    success: Literal[True] = field(default=True, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "response": self.response}


class ErrorResponse(Exception):
    """``{success: False, type, additionalProperties?}``.

    Also an exception: a handler may ``raise`` it to stop with a specific
    error code, and the pipeline returns that same instance to the caller.
    """

    success: Literal[False] = False

    def __init__(self, type: str, additional_properties: Any = None):
        super().__init__(type)
        self.type = type
        self.additional_properties = additional_properties

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": False, "type": self.type}
        if self.additional_properties is not None:
            payload["additionalProperties"] = _plain(self.additional_properties)
        return payload

    def __repr__(self) -> str:
        if self.additional_properties is None:
            return f"ErrorResponse({self.type!r})"
        return f"ErrorResponse({self.type!r}, {self.additional_properties!r})"


Response = Union[SuccessResponse[Any], ErrorResponse]


def is_success(response: Any) -> bool:
    return isinstance(response, SuccessResponse)


def is_error(response: Any) -> bool:
    return isinstance(response, ErrorResponse)


def _plain(value: Any) -> Any:
    if isinstance(value, Issue):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


class ErrorResponses:
    """Factories for the pipeline's own error responses.

    Each call builds a new instance so a caller mutating one response never
    affects another dispatch.
    """

    @staticmethod
    def invalid_request(issues: list[Issue]) -> ErrorResponse:
        return ErrorResponse(INVALID_REQUEST, issues)

    @staticmethod
    def method_not_found() -> ErrorResponse:
        return ErrorResponse(METHOD_NOT_FOUND)

    @staticmethod
    def unknown_error() -> ErrorResponse:
        return ErrorResponse(UNKNOWN_ERROR)

    @staticmethod
    def invalid_parameter(issues: list[Issue]) -> ErrorResponse:
        return ErrorResponse(INVALID_PARAMETER, issues)


error_responses = ErrorResponses()
