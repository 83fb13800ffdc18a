"""
Recognizer pipeline: ordered, fault-isolated, first match wins.

A recognizer is any callable (err, ctx) -> Classification | None. A
recognizer that raises, or returns something other than a Classification,
counts as no match; it never stops the remaining recognizers from running.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from cardano_errors.core.models import Classification, NormalizeContext
from cardano_errors.errors_logging import get_logger

logger = get_logger(__name__)

Recognizer = Callable[[Any, NormalizeContext | None], Classification | None]


def recognizer_name(recognizer: Recognizer) -> str:
    return getattr(recognizer, "__name__", None) or type(recognizer).__name__


def run_recognizer(recognizer: Recognizer, err: Any, ctx: NormalizeContext | None) -> Classification | None:
    """Run one recognizer. Swallow all exceptions and log; never raise."""
    try:
        result = recognizer(err, ctx)
    except Exception as e:
        try:
            logger.debug(
                "recognizer_failed",
                recognizer=recognizer_name(recognizer),
                error=str(e),
                error_type=type(e).__name__,
            )
        except Exception:
            pass
        return None
    if result is None or not isinstance(result, Classification):
        return None
    return result


def run_recognizers(
    recognizers: Iterable[Recognizer],
    err: Any,
    ctx: NormalizeContext | None,
) -> Classification | None:
    """First non-None classification in recognizer order; None when nothing matches."""
    for recognizer in recognizers:
        result = run_recognizer(recognizer, err, ctx)
        if result is not None:
            return result
    return None
