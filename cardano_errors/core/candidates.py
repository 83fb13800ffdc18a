"""
Candidate extraction over untyped error payloads.

Upstream SDKs wrap errors in each other under a handful of conventional
keys. collect_candidates() walks those keys breadth-first and returns every
distinct sub-value worth inspecting, in discovery order. Values are tracked
by identity so self-referencing or diamond-shaped payloads terminate and
never yield the same node twice.

Payloads may be dicts (decoded JSON) or arbitrary Python objects such as
exceptions carrying attributes; both are read through get_field(). An
exception without a cause field chains to __cause__, or to __context__ when
it was raised while handling another exception.
"""

from __future__ import annotations

from collections import deque
from numbers import Number
from typing import Any, Mapping

NESTED_KEYS: tuple[str, ...] = (
    "error",
    "cause",
    "reason",
    "data",
    "details",
    "innerError",
    "originalError",
)

_SCALAR_TYPES = (str, bytes, bytearray, Number, list, tuple, set, frozenset)


def is_object(value: Any) -> bool:
    """True for dicts and attribute-bearing objects; False for None, scalars and sequences."""
    if value is None:
        return False
    if isinstance(value, Mapping):
        return True
    return not isinstance(value, _SCALAR_TYPES)


def get_field(obj: Any, key: str) -> Any:
    """Read key from a mapping or attribute from an object. Never raises; missing -> None."""
    if not is_object(obj):
        return None
    try:
        if isinstance(obj, Mapping):
            return obj.get(key)
        return getattr(obj, key, None)
    except Exception:
        return None


def _exception_cause(exc: BaseException) -> BaseException | None:
    """Explicit cause (raise ... from), else the implicit context unless suppressed by "from None"."""
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def _children(obj: Any) -> list[Any]:
    out: list[Any] = []
    for key in NESTED_KEYS:
        value = get_field(obj, key)
        if value is None and key == "cause" and isinstance(obj, BaseException):
            value = _exception_cause(obj)
        if value is not None:
            out.append(value)
    response = get_field(obj, "response")
    if is_object(response):
        data = get_field(response, "data")
        if data is not None:
            out.append(data)
    return out


def collect_candidates(value: Any, include_root: bool = True) -> list[Any]:
    """
    Breadth-first list of distinct sub-values of value.

    include_root=True: the root itself is the first candidate (direct recognizers).
    include_root=False: only values strictly inside the root (wrapper unwrapping).
    """
    seen: set[int] = {id(value)}
    candidates: list[Any] = [value] if include_root else []
    queue: deque[Any] = deque([value])

    while queue:
        current = queue.popleft()
        if not is_object(current):
            continue
        for child in _children(current):
            if id(child) in seen:
                continue
            seen.add(id(child))
            candidates.append(child)
            queue.append(child)

    return candidates
