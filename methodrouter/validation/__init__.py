"""Schema validation and JSON-Schema translation."""

from methodrouter.validation.schema import (
    Issue,
    SchemaValidator,
    ValidationOutcome,
    issues_from_error,
    validate,
)
from methodrouter.validation.json_schema import JSON_SCHEMA_DIALECT, to_json_schema
from methodrouter.validation.envelope import ENVELOPE, RouteRequest

__all__ = [
    "Issue",
    "SchemaValidator",
    "ValidationOutcome",
    "issues_from_error",
    "validate",
    "JSON_SCHEMA_DIALECT",
    "to_json_schema",
    "ENVELOPE",
    "RouteRequest",
]
