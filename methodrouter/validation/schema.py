"""Schema validation backed by pydantic TypeAdapter.

A schema is a pydantic model class or any type annotation pydantic can build
a TypeAdapter for. Validation never raises for bad input; it reports either
the typed value or a list of structured issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import TypeAdapter, ValidationError


@dataclass(frozen=True, slots=True)
class Issue:
    """One structured validation problem."""

    code: str
    path: list[str | int] = field(default_factory=list)
    message: str = ""

    @classmethod
    def from_pydantic(cls, error: dict[str, Any]) -> "Issue":
        return cls(code=str(error.get("type", "invalid")), path=list(error.get("loc", ())), message=str(error.get("msg", "")))

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "path": list(self.path), "message": self.message}


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Either a typed value (success) or the issues that rejected the input."""

    success: bool
    value: Any = None
    issues: list[Issue] = field(default_factory=list)


class SchemaValidator:
    """Pairs an opaque schema with the adapter used to validate and describe it."""

    __slots__ = ("schema", "strict", "_adapter")

    def __init__(self, schema: Any, *, strict: bool | None = None):
        self.schema = schema
        self.strict = strict  # None defers to the schema's own config
        self._adapter: TypeAdapter[Any] = TypeAdapter(schema)

    def validate(self, value: Any) -> ValidationOutcome:
        try:
            typed = self._adapter.validate_python(value, strict=self.strict)
        except ValidationError as e:
            return ValidationOutcome(success=False, issues=issues_from_error(e))
        return ValidationOutcome(success=True, value=typed)

    def json_schema(self, mode: str = "validation") -> dict[str, Any]:
        return self._adapter.json_schema(mode=mode)

    def __repr__(self) -> str:
        return f"SchemaValidator({self.schema!r})"


def issues_from_error(error: ValidationError) -> list[Issue]:
    """Flatten a pydantic ValidationError into Issue records."""
    return [Issue.from_pydantic(e) for e in error.errors(include_url=False)]


def validate(schema: Any, value: Any) -> ValidationOutcome:
    """Validate ``value`` against ``schema`` (a model, annotation or SchemaValidator)."""
    validator = schema if isinstance(schema, SchemaValidator) else SchemaValidator(schema)
    return validator.validate(value)
