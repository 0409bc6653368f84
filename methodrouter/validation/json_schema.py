"""Translate validation schemas into portable JSON-Schema descriptors."""

from __future__ import annotations

from typing import Any, Literal

from methodrouter.validation.schema import SchemaValidator

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

JsonSchemaMode = Literal["validation", "serialization"]


def to_json_schema(
    schema: Any,
    *,
    mode: JsonSchemaMode = "validation",
    include_schema_uri: bool = True,
) -> dict[str, Any]:
    """Build a JSON-Schema descriptor for ``schema``.

    A fresh dict is returned on every call so callers may mutate it freely.
    """
    validator = schema if isinstance(schema, SchemaValidator) else SchemaValidator(schema)
    descriptor = validator.json_schema(mode=mode)
    if include_schema_uri:
        return {"$schema": JSON_SCHEMA_DIALECT, **descriptor}
    return dict(descriptor)
