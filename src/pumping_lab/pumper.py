"""Builds pumped strings from a decomposition."""

from __future__ import annotations

from .exceptions import InvalidPumpCountError
from .models import ContextFreeDecomposition, Decomposition, RegularDecomposition


def check_pump_count(pump_count: int) -> int:
    if isinstance(pump_count, bool) or not isinstance(pump_count, int) or pump_count < 0:
        raise InvalidPumpCountError(pump_count)
    return pump_count


def pump_regular(x: str, y: str, z: str, pump_count: int) -> str:
    check_pump_count(pump_count)
    if pump_count == 0:
        # pump down: y is dropped entirely
        return x + z
    return x + y * pump_count + z


def pump_context_free(u: str, v: str, w: str, x: str, y: str, pump_count: int) -> str:
    check_pump_count(pump_count)
    if pump_count == 0:
        return u + w + y
    return u + v * pump_count + w + x * pump_count + y


def pump(decomposition: Decomposition, pump_count: int) -> str:
    if isinstance(decomposition, RegularDecomposition):
        return pump_regular(decomposition.x, decomposition.y, decomposition.z, pump_count)
    if isinstance(decomposition, ContextFreeDecomposition):
        d = decomposition
        return pump_context_free(d.u, d.v, d.w, d.x, d.y, pump_count)
    raise TypeError(f"Unsupported decomposition type: {type(decomposition).__name__}")
