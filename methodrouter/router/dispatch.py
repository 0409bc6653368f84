"""Request dispatch pipeline.

Four gates run in order and the first one to produce a response ends the
dispatch: envelope validation, method lookup, parameter validation, handler
invocation. Every path yields a SuccessResponse or an ErrorResponse; handler
faults are converted to values here and never reach the caller.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Mapping
from functools import partial
from typing import Any

from loguru import logger

from methodrouter.router.context_models import DispatchState, RequestParams
from methodrouter.router.error_boundary import explicit_error_result, unhandled_exception_result
from methodrouter.router.gate_pipeline import run_gate_pipeline
from methodrouter.router.registry import Router
from methodrouter.router.responses import ErrorResponse, Response, SuccessResponse, error_responses
from methodrouter.validation.envelope import ENVELOPE


async def handle_request(router: Router[Any], request: Any) -> Response:
    """Dispatch one request against ``router``.

    Args:
        router: Registry holding the routes and the shared context.
        request: ``{"method": str, "params": Any}`` mapping or a RouteRequest.

    Returns:
        SuccessResponse with the handler's value, or an ErrorResponse.
    """
    gates = (
        partial(_check_envelope, router),
        partial(_resolve_route, router),
        partial(_check_params, router),
        partial(_invoke, router),
    )
    return await run_gate_pipeline(gates, DispatchState(request=request))


def handle_request_sync(router: Router[Any], request: Any) -> Response:
    """Blocking wrapper around handle_request for callers without an event loop."""
    return asyncio.run(handle_request(router, request))


def _fault_result(router: Router[Any], method: str, exc: Exception) -> ErrorResponse:
    return unhandled_exception_result(
        method=method,
        exc=exc,
        log_exception=logger.exception if router.settings.log_faults else None,
    )


def _check_envelope(router: Router[Any], state: DispatchState) -> ErrorResponse | None:
    try:
        outcome = ENVELOPE.validate(state.request)
    except Exception as exc:
        # Mapping subclasses can raise from their own accessors.
        return _fault_result(router, "<envelope>", exc)
    if not outcome.success:
        logger.debug("Rejected request envelope: {} issue(s)", len(outcome.issues))
        return error_responses.invalid_request(outcome.issues)
    state.envelope = outcome.value
    return None


def _resolve_route(router: Router[Any], state: DispatchState) -> ErrorResponse | None:
    method = state.envelope.method
    route = router.find_route(method)
    if route is None:
        logger.debug("Method not found: {}", method)
        return error_responses.method_not_found()
    state.route = route
    return None


def _check_params(router: Router[Any], state: DispatchState) -> ErrorResponse | None:
    route = state.route
    try:
        params = _raw_params(state)
        outcome = None if route.validator is None else route.validator.validate(params)
    except Exception as exc:
        # Only ValueError/AssertionError from user validators become issues.
        return _fault_result(router, route.method, exc)
    if outcome is None:
        state.data = params
        return None
    if not outcome.success:
        logger.debug("Invalid params for {}: {} issue(s)", route.method, len(outcome.issues))
        return error_responses.invalid_parameter(outcome.issues)
    state.data = outcome.value
    return None


def _raw_params(state: DispatchState) -> Any:
    # Read from the caller's object so unvalidated params keep their identity.
    if isinstance(state.request, Mapping):
        return state.request.get("params")
    return state.envelope.params


async def _invoke(router: Router[Any], state: DispatchState) -> Response:
    route = state.route
    request_params = RequestParams(context=router.context, data=state.data, original_request=state.request)
    try:
        outcome = route.callback(request_params)
        if inspect.isawaitable(outcome):
            outcome = await outcome
    except ErrorResponse as error:
        return explicit_error_result(method=route.method, error=error, log_warning=logger.warning)
    except Exception as exc:
        return _fault_result(router, route.method, exc)

    if isinstance(outcome, SuccessResponse):
        return outcome
    if isinstance(outcome, ErrorResponse):
        return explicit_error_result(method=route.method, error=outcome, log_warning=logger.warning)
    return SuccessResponse(outcome)
