"""
Blockfrost HTTP error recognizer.

Blockfrost answers failed requests with {"status_code", "error", "message"}.
The status is mapped to an ErrorCode; a few statuses carry a documented
provider-specific reason (402 daily limit, 418 auto ban, 425 mempool full).
"""

from __future__ import annotations

from typing import Any, NamedTuple

from cardano_errors.core.candidates import collect_candidates, get_field, is_object
from cardano_errors.core.codes import ErrorCode, ErrorSeverity
from cardano_errors.core.guards import as_int, is_non_empty_str
from cardano_errors.core.models import Classification, NormalizeContext

PROVIDER_NAME = "blockfrost"

STATUS_CODE_MAP: dict[int, ErrorCode] = {
    400: ErrorCode.BAD_REQUEST,
    402: ErrorCode.QUOTA_EXCEEDED,
    403: ErrorCode.UNAUTHORIZED,
    404: ErrorCode.NOT_FOUND,
    418: ErrorCode.FORBIDDEN,
    425: ErrorCode.MEMPOOL_FULL,
    429: ErrorCode.RATE_LIMITED,
}

STATUS_REASON_MAP: dict[int, str] = {
    402: "daily_limit",
    418: "auto_banned",
    425: "mempool_full",
}


class BlockfrostShape(NamedTuple):
    status_code: int
    error: str
    message: str


def map_status_to_code(status_code: int) -> ErrorCode | None:
    """Map an HTTP status to an ErrorCode; None outside 4xx/5xx."""
    if status_code in STATUS_CODE_MAP:
        return STATUS_CODE_MAP[status_code]
    if 500 <= status_code <= 599:
        return ErrorCode.PROVIDER_INTERNAL
    if 400 <= status_code <= 499:
        return ErrorCode.BAD_REQUEST
    return None


def extract_blockfrost_shape(err: Any) -> BlockfrostShape | None:
    """First candidate shaped like a Blockfrost error body, or None."""
    for candidate in collect_candidates(err):
        if not is_object(candidate):
            continue
        status_code = as_int(get_field(candidate, "status_code"))
        error = get_field(candidate, "error")
        message = get_field(candidate, "message")
        if status_code is None:
            continue
        if not is_non_empty_str(error) or not is_non_empty_str(message):
            continue
        return BlockfrostShape(status_code, error, message)
    return None


def recognize_blockfrost_error(err: Any, ctx: NormalizeContext | None = None) -> Classification | None:
    """Classify a Blockfrost HTTP error body (direct or nested); None when no candidate matches."""
    shape = extract_blockfrost_shape(err)
    if shape is None:
        return None

    code = map_status_to_code(shape.status_code)
    if code is None:
        return None

    meta: dict[str, Any] = {
        "blockfrost_status_code": shape.status_code,
        "blockfrost_error": shape.error,
        "blockfrost_message": shape.message,
    }
    reason = STATUS_REASON_MAP.get(shape.status_code)
    if reason:
        meta["blockfrost_reason"] = reason

    return Classification(
        code=code,
        severity=ErrorSeverity.ERROR if shape.status_code >= 500 else ErrorSeverity.WARN,
        provider=PROVIDER_NAME,
        message=shape.message,
        raw=err,
        meta=meta,
    )
