"""Pytest hooks and fixtures."""

import sys
import types

import pytest
from pydantic import BaseModel

from methodrouter.router.registry import Router
from methodrouter.router.responses import ErrorResponse


class AddParams(BaseModel):
    a: int
    b: int


def build_sample_router() -> Router:
    router = Router({"service": "calc"})

    @router.route("math/add", schema=AddParams)
    def add(req):
        return req.data.a + req.data.b

    @router.route("service/name")
    async def service_name(req):
        return req.context["service"]

    @router.route("math/fail")
    def fail(_req):
        raise ErrorResponse("MATH_FAILED", {"reason": "always"})

    return router


@pytest.fixture
def sample_app_module(monkeypatch):
    """Importable ``sample_rpc_app`` module exposing ``router`` and ``make_router``."""
    module = types.ModuleType("sample_rpc_app")
    module.router = build_sample_router()
    module.make_router = build_sample_router
    module.not_a_router = 42
    monkeypatch.setitem(sys.modules, "sample_rpc_app", module)
    return module
