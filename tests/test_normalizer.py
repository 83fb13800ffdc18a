"""
End-to-end tests for the normalization facade (normalizer.ErrorNormalizer).
"""

from __future__ import annotations

import json
from types import MappingProxyType
from unittest.mock import MagicMock

import pytest

from cardano_errors import normalize_error
from cardano_errors.core.codes import ErrorCode, ErrorSeverity, ErrorSource, ErrorStage
from cardano_errors.core.fingerprint import create_fingerprint
from cardano_errors.core.messages import NO_USABLE_MESSAGE
from cardano_errors.core.models import Classification, ErrorResolution
from cardano_errors.core.resolutions import get_resolution
from cardano_errors.normalizer import NormalizerConfig, create_normalizer, get_default_normalizer


@pytest.mark.parametrize("err", [None, 42, 3.5, True, [], [1, 2], {}, "", object()])
def test_malformed_input_never_raises(normalizer, err):
    out = normalizer.normalize(err)
    assert out.code == ErrorCode.UNKNOWN
    assert out.severity == ErrorSeverity.ERROR
    assert out.message == NO_USABLE_MESSAGE
    assert out.raw is err
    assert out.source == ErrorSource.PROVIDER_QUERY
    assert out.stage == ErrorStage.BUILD
    assert out.network == "unknown"
    assert out.timestamp


def test_plain_string_message_kept(normalizer):
    out = normalizer.normalize("Something odd happened")
    assert out.code == ErrorCode.UNKNOWN
    assert out.message == "Something odd happened"
    assert out.resolution.title == "Inspect error details"


def test_blockfrost_quota(normalizer, blockfrost_quota_body):
    out = normalizer.normalize(blockfrost_quota_body, {"network": "mainnet"})
    assert out.code == ErrorCode.QUOTA_EXCEEDED
    assert out.severity == ErrorSeverity.WARN
    assert out.provider == "blockfrost"
    assert out.network == "mainnet"
    assert out.meta["blockfrost_reason"] == "daily_limit"
    assert out.resolution.title == "Increase or reset provider quota"
    assert out.raw is blockfrost_quota_body
    assert "mesh_unwrapped" not in out.meta


@pytest.mark.parametrize(
    "status,code",
    [(418, ErrorCode.FORBIDDEN), (425, ErrorCode.MEMPOOL_FULL), (429, ErrorCode.RATE_LIMITED), (502, ErrorCode.PROVIDER_INTERNAL)],
)
def test_blockfrost_statuses(normalizer, status, code):
    out = normalizer.normalize({"status_code": status, "error": "Err", "message": "Provider said no"})
    assert out.code == code


def test_wallet_user_declined(normalizer):
    out = normalizer.normalize({"code": 2, "info": "UserDeclined"}, {"walletHint": "eternl"})
    assert out.code == ErrorCode.WALLET_SIGN_USER_DECLINED
    assert out.source == ErrorSource.WALLET_SIGN
    assert out.stage == ErrorStage.SIGN
    assert out.wallet.name == "eternl"


def test_wallet_internal_escalates_when_submitting(normalizer):
    out = normalizer.normalize(
        {"code": -2, "info": "unknown error submitTx"},
        {"source": "wallet_submit", "stage": "submit"},
    )
    assert out.code == ErrorCode.WALLET_SUBMIT_FAILURE
    assert out.resolution.title == "Retry wallet submission"


def test_node_text(normalizer):
    out = normalizer.normalize(RuntimeError("ApplyTxError [BadInputsUTxO (fromList [TxIn ...])]"))
    assert out.code == ErrorCode.TX_INPUTS_MISSING_OR_SPENT
    assert out.source == ErrorSource.NODE_SUBMIT
    assert out.stage == ErrorStage.SUBMIT


def test_wrapped_blockfrost_marked_unwrapped(normalizer, blockfrost_quota_body):
    err = {"message": "Mesh provider error", "cause": {"response": {"data": blockfrost_quota_body}}}
    out = normalizer.normalize(err)
    assert out.code == ErrorCode.QUOTA_EXCEEDED
    assert out.meta["mesh_unwrapped"] is True
    assert out.raw is err


def test_exception_chain_unwrapped(normalizer):
    class WalletApiError(Exception):
        def __init__(self, code, info):
            super().__init__(info)
            self.code = code
            self.info = info

    try:
        try:
            raise WalletApiError(-3, "Refused")
        except WalletApiError as inner:
            raise RuntimeError("Mesh wallet call failed") from inner
    except RuntimeError as outer:
        out = normalizer.normalize(outer)

    assert out.code == ErrorCode.WALLET_REFUSED
    assert out.meta["mesh_unwrapped"] is True


def test_implicitly_chained_wallet_error_unwrapped(normalizer):
    class WalletApiError(Exception):
        def __init__(self, code, info):
            super().__init__(info)
            self.code = code
            self.info = info

    try:
        try:
            raise WalletApiError(-3, "Refused")
        except WalletApiError:
            raise RuntimeError("Mesh wallet call failed")
    except RuntimeError as outer:
        out = normalizer.normalize(outer)

    assert out.code == ErrorCode.WALLET_REFUSED
    assert out.meta["mesh_unwrapped"] is True


def test_message_fallback_timeout(normalizer):
    out = normalizer.normalize(TimeoutError("operation timed out"))
    assert out.code == ErrorCode.TIMEOUT
    assert out.severity == ErrorSeverity.WARN
    assert out.meta["smart_matcher"] == "timeout"
    assert out.resolution.title == "Retry timed-out request"


def test_classification_fields_win_over_context(normalizer):
    out = normalizer.normalize(
        {"status_code": 429, "error": "Too Many", "message": "slow down"},
        {"provider": "koios", "source": "provider_submit", "stage": "submit"},
    )
    assert out.provider == "blockfrost"
    assert out.source == ErrorSource.PROVIDER_SUBMIT
    assert out.stage == ErrorStage.SUBMIT


def test_context_fields_copied(normalizer):
    out = normalizer.normalize("x", {"network": "preprod", "provider": "ogmios", "tx_hash": "ab12", "timestamp": "2024-01-01T00:00:00Z"})
    assert out.network == "preprod"
    assert out.provider == "ogmios"
    assert out.tx_hash == "ab12"
    assert out.timestamp == "2024-01-01T00:00:00Z"


def test_bound_defaults_and_with_defaults():
    base = create_normalizer(defaults={"network": "preview", "provider": "blockfrost"})
    derived = base.with_defaults(network="mainnet")
    assert base.normalize("x").network == "preview"
    assert derived.normalize("x").network == "mainnet"
    assert derived.normalize("x").provider == "blockfrost"
    assert derived.normalize("x", {"network": "sanchonet"}).network == "sanchonet"
    assert derived.config is base.config


def test_fingerprint_off_by_default(normalizer):
    assert normalizer.normalize("x").fingerprint is None


def test_fingerprint_groups_by_classification(fingerprinting_normalizer):
    a = fingerprinting_normalizer.normalize({"status_code": 429, "error": "a", "message": "first"})
    b = fingerprinting_normalizer.normalize({"status_code": 429, "error": "b", "message": "second"})
    c = fingerprinting_normalizer.normalize({"status_code": 404, "error": "c", "message": "third"})
    assert a.fingerprint == b.fingerprint
    assert a.fingerprint != c.fingerprint
    assert a.fingerprint == create_fingerprint("provider_query", "build", "RATE_LIMITED", "blockfrost")


def test_fingerprint_uses_classifier_result(fingerprinting_normalizer):
    out = fingerprinting_normalizer.normalize("request timeout")
    assert out.fingerprint == create_fingerprint("provider_query", "build", "TIMEOUT", None)


def test_resolution_cannot_be_mutated(normalizer):
    first = normalizer.normalize({"status_code": 429, "error": "x", "message": "y"})
    with pytest.raises(AttributeError):
        first.resolution.steps.append("mutated")  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        first.resolution.title = "changed"  # type: ignore[misc]
    second = normalizer.normalize({"status_code": 429, "error": "x", "message": "y"})
    assert second.resolution == first.resolution
    assert second.resolution.steps[0] == "Wait for rate limit reset before retrying"


def test_recognizer_resolution_kept():
    steps = ["do it"]
    custom = ErrorResolution(title="Custom", steps=steps)

    def recognizer(err, ctx=None):
        return Classification(code=ErrorCode.NOT_FOUND, resolution=custom, meta={"custom": True})

    out = create_normalizer(NormalizerConfig(recognizers=[recognizer])).normalize({})
    steps.append("later edit")
    assert out.resolution == ErrorResolution(title="Custom", steps=("do it",))
    assert out.meta["custom"] is True


def test_recognizer_plain_string_fields_coerced():
    def recognizer(err, ctx=None):
        return Classification(code="TIMEOUT", source="node_submit", stage="submit", severity="warn")

    out = create_normalizer(NormalizerConfig(recognizers=[recognizer])).normalize({})
    assert out.code is ErrorCode.TIMEOUT
    assert out.source is ErrorSource.NODE_SUBMIT
    assert out.stage is ErrorStage.SUBMIT
    assert out.severity is ErrorSeverity.WARN
    assert out.resolution.title == get_resolution(ErrorCode.TIMEOUT).title
    payload = out.to_dict()
    assert payload["code"] == "TIMEOUT"
    assert payload["source"] == "node_submit"
    assert payload["severity"] == "warn"


def test_recognizer_invalid_fields_fall_back():
    def recognizer(err, ctx=None):
        return Classification(code="bogus", source="bogus", stage="bogus", severity="bogus")

    n = create_normalizer(NormalizerConfig(recognizers=[recognizer]))
    out = n.normalize({}, {"source": "wallet_sign", "stage": "sign"})
    assert out.code is ErrorCode.UNKNOWN
    assert out.source is ErrorSource.WALLET_SIGN
    assert out.stage is ErrorStage.SIGN
    assert out.severity is ErrorSeverity.ERROR
    assert out.resolution == get_resolution(ErrorCode.UNKNOWN)
    json.dumps(out.to_dict(), default=str)


def test_result_is_immutable(normalizer):
    out = normalizer.normalize({"status_code": 404, "error": "x", "message": "y"})
    assert isinstance(out.meta, MappingProxyType)
    with pytest.raises(TypeError):
        out.meta["x"] = 1  # type: ignore[index]
    with pytest.raises(AttributeError):
        out.code = ErrorCode.UNKNOWN  # type: ignore[misc]


def test_parse_traces():
    traced = create_normalizer(NormalizerConfig(parse_traces=True))
    err = {"message": "boom", "stack": "Error: boom\n    at a.js:1\n\n    at b.js:2", "data": {"trace": ["c.hs:3", " "]}}
    out = traced.normalize(err)
    assert out.meta["traces"] == ("Error: boom", "at a.js:1", "at b.js:2", "c.hs:3")


def test_parse_traces_caps_lines():
    traced = create_normalizer(NormalizerConfig(parse_traces=True))
    out = traced.normalize({"trace": [f"line {i}" for i in range(25)]})
    assert len(out.meta["traces"]) == 10


def test_traces_off_by_default(normalizer):
    assert "traces" not in normalizer.normalize({"stack": "a\nb"}).meta


def test_debug_logging_does_not_change_result(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr("cardano_errors.normalizer.logger", fake_logger)
    debug = create_normalizer(NormalizerConfig(debug=True))
    out = debug.normalize({"code": -3, "info": "Refused"})
    assert out.code == ErrorCode.WALLET_REFUSED
    fake_logger.info.assert_called_once()
    assert fake_logger.info.call_args.args == ("normalize_debug",)
    assert fake_logger.info.call_args.kwargs["output"]["code"] == "WALLET_REFUSED"


def test_debug_logging_failure_swallowed(monkeypatch):
    fake_logger = MagicMock()
    fake_logger.info.side_effect = RuntimeError("log sink down")
    monkeypatch.setattr("cardano_errors.normalizer.logger", fake_logger)
    out = create_normalizer(NormalizerConfig(debug=True)).normalize("x")
    assert out.code == ErrorCode.UNKNOWN


def test_to_dict_is_json_serializable(normalizer, blockfrost_quota_body):
    err = {"cause": {"response": {"data": blockfrost_quota_body}}, "obj": object()}
    data = normalizer.normalize(err, {"walletHint": "lace"}).to_dict()
    encoded = json.loads(json.dumps(data))
    assert encoded["code"] == "QUOTA_EXCEEDED"
    assert encoded["wallet"] == {"name": "lace"}
    assert encoded["resolution"]["docs_url"].startswith("https://")
    assert isinstance(encoded["raw"], str)


def test_default_normalizer_from_env(monkeypatch):
    monkeypatch.setenv("CARDANO_ERRORS_FINGERPRINT", "true")
    monkeypatch.setenv("CARDANO_NETWORK", "preprod")
    get_default_normalizer.cache_clear()
    out = normalize_error({"status_code": 429, "error": "x", "message": "y"})
    assert out.fingerprint is not None
    assert out.network == "preprod"
    assert get_default_normalizer() is get_default_normalizer()
