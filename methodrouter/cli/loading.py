"""Resolve ``package.module:attr`` references to Router instances."""

from __future__ import annotations

import importlib
from typing import Any

from methodrouter.router.registry import Router
from methodrouter.utils.exceptions import RouteLoadError


def load_router(target: str) -> Router[Any]:
    """Import ``target`` and return the Router it names.

    ``attr`` may be dotted, and may name a zero-argument factory that returns
    a Router instead of a Router itself.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise RouteLoadError(target, "expected 'package.module:attribute'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise RouteLoadError(target, f"cannot import module {module_name!r} ({e})") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise RouteLoadError(target, f"no attribute {part!r}") from e

    if not isinstance(obj, Router) and callable(obj):
        obj = obj()
    if not isinstance(obj, Router):
        raise RouteLoadError(target, f"expected a Router, got {type(obj).__name__}")
    return obj
