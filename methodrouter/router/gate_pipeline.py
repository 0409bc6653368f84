"""Sequential gate runner for the dispatch pipeline."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Iterable, TypeVar

from loguru import logger

S = TypeVar("S")

Gate = Callable[[S], Any]  # may return an awaitable


def gate_name(gate: Callable[..., Any]) -> str:
    func = getattr(gate, "func", gate)  # functools.partial
    return getattr(func, "__name__", type(func).__name__).lstrip("_")


async def run_gate_pipeline(gates: Iterable[Gate[S]], state: S) -> Any | None:
    """Call each gate with ``state``; the first non-None result ends the run."""
    for gate in gates:
        outcome = gate(state)
        result = await outcome if inspect.isawaitable(outcome) else outcome
        if result is not None:
            logger.trace("Gate {} produced {}", gate_name(gate), type(result).__name__)
            return result
    return None
