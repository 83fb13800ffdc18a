"""
Trace line extraction for diagnostics.

Collects trimmed, non-blank lines from trace-bearing fields (trace, traces,
stack and one level into a nested data object). Python exceptions
contribute their formatted traceback. At most MAX_TRACE_LINES are kept.
"""

from __future__ import annotations

import traceback
from typing import Any

from cardano_errors.core.candidates import get_field, is_object

MAX_TRACE_LINES = 10

_ROOT_TRACE_FIELDS = ("trace", "traces", "stack")
_DATA_TRACE_FIELDS = ("trace", "traces")


def _append_trace_value(target: list[str], value: Any) -> None:
    if isinstance(value, str):
        target.extend(line.strip() for line in value.splitlines() if line.strip())
        return
    if not isinstance(value, (list, tuple)):
        return
    for item in value:
        if isinstance(item, str) and item.strip():
            target.append(item.strip())


def _exception_trace(err: BaseException) -> str:
    if err.__traceback__ is None:
        return ""
    return "".join(traceback.format_tb(err.__traceback__))


def extract_trace_lines(err: Any) -> list[str]:
    """Up to MAX_TRACE_LINES trace lines from err; empty for scalars."""
    if not is_object(err):
        return []

    lines: list[str] = []
    for key in _ROOT_TRACE_FIELDS:
        _append_trace_value(lines, get_field(err, key))

    data = get_field(err, "data")
    if is_object(data):
        for key in _DATA_TRACE_FIELDS:
            _append_trace_value(lines, get_field(data, key))

    if isinstance(err, BaseException) and len(lines) < MAX_TRACE_LINES:
        _append_trace_value(lines, _exception_trace(err))

    return lines[:MAX_TRACE_LINES]
