"""Shared dataclass models for request dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from methodrouter.router.registry import Route
    from methodrouter.validation.envelope import RouteRequest

C = TypeVar("C")
D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class RequestParams(Generic[C, D]):
    """What a handler receives: shared context, (validated) data, raw request."""

    context: C
    data: D
    original_request: Any


@dataclass(slots=True)
class DispatchState:
    """Request-scoped values filled in as each gate passes."""

    request: Any
    envelope: RouteRequest | None = None
    route: Route | None = None
    data: Any = None
