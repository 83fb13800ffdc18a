"""
Tests for Blockfrost HTTP error recognition (blockfrost.recognize_blockfrost_error).
"""

from __future__ import annotations

import pytest

from cardano_errors.core.codes import ErrorCode, ErrorSeverity
from cardano_errors.recognizers.blockfrost import map_status_to_code, recognize_blockfrost_error


def _body(status: int, error: str = "Error", message: str = "Something failed") -> dict:
    return {"status_code": status, "error": error, "message": message}


def test_quota_exceeded_daily_limit(blockfrost_quota_body):
    """402 -> QUOTA_EXCEEDED with daily_limit reason and raw fields in meta."""
    out = recognize_blockfrost_error(blockfrost_quota_body)
    assert out is not None
    assert out.code == ErrorCode.QUOTA_EXCEEDED
    assert out.severity == ErrorSeverity.WARN
    assert out.provider == "blockfrost"
    assert out.message == "Daily request limit has been exceeded"
    assert out.raw is blockfrost_quota_body
    assert out.meta == {
        "blockfrost_status_code": 402,
        "blockfrost_error": "Project Over Limit",
        "blockfrost_message": "Daily request limit has been exceeded",
        "blockfrost_reason": "daily_limit",
    }


@pytest.mark.parametrize(
    "status,code,reason",
    [
        (418, ErrorCode.FORBIDDEN, "auto_banned"),
        (425, ErrorCode.MEMPOOL_FULL, "mempool_full"),
        (429, ErrorCode.RATE_LIMITED, None),
        (400, ErrorCode.BAD_REQUEST, None),
        (403, ErrorCode.UNAUTHORIZED, None),
        (404, ErrorCode.NOT_FOUND, None),
        (409, ErrorCode.BAD_REQUEST, None),
    ],
)
def test_status_table(status, code, reason):
    out = recognize_blockfrost_error(_body(status))
    assert out.code == code
    assert out.severity == ErrorSeverity.WARN
    assert out.meta.get("blockfrost_reason") == reason


@pytest.mark.parametrize("status", [500, 503, 599])
def test_server_errors_are_provider_internal(status):
    out = recognize_blockfrost_error(_body(status))
    assert out.code == ErrorCode.PROVIDER_INTERNAL
    assert out.severity == ErrorSeverity.ERROR


@pytest.mark.parametrize("status", [200, 302, 399, 600])
def test_non_error_status_not_matched(status):
    assert map_status_to_code(status) is None
    assert recognize_blockfrost_error(_body(status)) is None


@pytest.mark.parametrize(
    "payload",
    [
        {"status_code": "402", "error": "x", "message": "y"},
        {"status_code": 402.5, "error": "x", "message": "y"},
        {"status_code": True, "error": "x", "message": "y"},
        {"status_code": 402, "error": "", "message": "y"},
        {"status_code": 402, "error": "x", "message": ""},
        {"status_code": 402, "error": "x"},
        "status_code 402",
        None,
        42,
    ],
)
def test_malformed_shapes_not_matched(payload):
    assert recognize_blockfrost_error(payload) is None


def test_integral_float_status_accepted():
    out = recognize_blockfrost_error({"status_code": 429.0, "error": "x", "message": "y"})
    assert out.code == ErrorCode.RATE_LIMITED
    assert out.meta["blockfrost_status_code"] == 429


def test_axios_style_response_data():
    """HTTP client wrapper: err.response.data holds the Blockfrost body."""
    err = {"message": "Request failed with status code 404", "response": {"data": _body(404, "Not Found", "The requested component has not been found.")}}
    out = recognize_blockfrost_error(err)
    assert out.code == ErrorCode.NOT_FOUND
    assert out.message == "The requested component has not been found."
    assert out.raw is err
