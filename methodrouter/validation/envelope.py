"""Request envelope shared by every method."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr

from methodrouter.validation.schema import SchemaValidator


class RouteRequest(BaseModel):
    """``{method, params?}``. Extra keys are ignored, ``method`` is never coerced."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    method: StrictStr
    params: Any = None


ENVELOPE = SchemaValidator(RouteRequest)
