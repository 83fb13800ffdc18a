"""Type guards for untyped payload fields (decoded JSON or SDK objects)."""

from __future__ import annotations

import math
from typing import Any


def is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def as_int(value: Any) -> int | None:
    """
    Integer value of a payload field, or None.

    bool is rejected; integral floats (402.0 from a JS client) are accepted.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def as_finite_number(value: Any) -> float | int | None:
    """Finite int/float payload value, or None (bool rejected)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
