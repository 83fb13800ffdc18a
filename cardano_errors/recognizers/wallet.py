"""
CIP-30 wallet error recognizers.

Wallets reject requests with {"code": int, "info": str}. Negative codes are
the generic APIError family; positive codes are reused by TxSignError,
DataSignError and TxSendError, so the same number means different things
depending on the family. The family is resolved from keywords in info and,
for collisions, from sibling descriptive fields (name, type, method, ...).

Paginate errors only carry {"maxSize": n} and are recognized separately.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple

from cardano_errors.core.candidates import collect_candidates, get_field, is_object
from cardano_errors.core.codes import ErrorCode, ErrorSeverity, ErrorSource, ErrorStage
from cardano_errors.core.guards import as_finite_number, as_int, is_non_empty_str
from cardano_errors.core.messages import letters_only
from cardano_errors.core.models import Classification, NormalizeContext

FAMILY_DATA_SIGN = "data_sign"
FAMILY_TX_SIGN = "tx_sign"
FAMILY_TX_SEND = "tx_send"

_FAMILY_FIELDS = ("name", "type", "kind", "errorType", "method", "message")

# Keyword tokens searched in the letters-only, lower-cased info string
KEYWORD_PROOF_GENERATION = "proofgeneration"
KEYWORD_USER_DECLINED = "userdeclined"
KEYWORD_DEPRECATED_CERTIFICATE = "deprecatedcertificate"
KEYWORD_ADDRESS_NOT_PK = "addressnotpk"
KEYWORD_REFUSED = "refused"
KEYWORD_FAILURE = "failure"


@dataclass(frozen=True)
class WalletMapping:
    code: ErrorCode
    source: ErrorSource
    stage: ErrorStage
    severity: ErrorSeverity


class WalletErrorShape(NamedTuple):
    code: int
    info: str
    family: str | None


class PaginateErrorShape(NamedTuple):
    max_size: float | int
    message: str


def _sign(code: ErrorCode, severity: ErrorSeverity) -> WalletMapping:
    return WalletMapping(code, ErrorSource.WALLET_SIGN, ErrorStage.SIGN, severity)


def _submit(code: ErrorCode, severity: ErrorSeverity) -> WalletMapping:
    return WalletMapping(code, ErrorSource.WALLET_SUBMIT, ErrorStage.SUBMIT, severity)


API_ERROR_MAP: dict[int, WalletMapping] = {
    -1: _sign(ErrorCode.WALLET_INVALID_REQUEST, ErrorSeverity.WARN),
    -2: _sign(ErrorCode.WALLET_INTERNAL, ErrorSeverity.ERROR),
    -3: _sign(ErrorCode.WALLET_REFUSED, ErrorSeverity.WARN),
    -4: _sign(ErrorCode.WALLET_ACCOUNT_CHANGED, ErrorSeverity.WARN),
}

SUBMIT_FAILURE_MAPPING = _submit(ErrorCode.WALLET_SUBMIT_FAILURE, ErrorSeverity.ERROR)

POSITIVE_CODE_INFO_MAP: dict[tuple[int, str], WalletMapping] = {
    (1, KEYWORD_PROOF_GENERATION): _sign(ErrorCode.WALLET_SIGN_PROOF_GENERATION, ErrorSeverity.ERROR),
    (2, KEYWORD_USER_DECLINED): _sign(ErrorCode.WALLET_SIGN_USER_DECLINED, ErrorSeverity.WARN),
    (3, KEYWORD_DEPRECATED_CERTIFICATE): _sign(ErrorCode.TX_LEDGER_VALIDATION_FAILED, ErrorSeverity.ERROR),
    (1, KEYWORD_REFUSED): _submit(ErrorCode.WALLET_SUBMIT_REFUSED, ErrorSeverity.WARN),
    (2, KEYWORD_FAILURE): _submit(ErrorCode.WALLET_SUBMIT_FAILURE, ErrorSeverity.ERROR),
}

DATA_SIGN_MAP: dict[tuple[int, str], WalletMapping] = {
    (1, KEYWORD_PROOF_GENERATION): _sign(ErrorCode.WALLET_DATA_SIGN_PROOF_GENERATION, ErrorSeverity.ERROR),
    (2, KEYWORD_ADDRESS_NOT_PK): _sign(ErrorCode.WALLET_DATA_SIGN_ADDRESS_NOT_PK, ErrorSeverity.WARN),
    (3, KEYWORD_USER_DECLINED): _sign(ErrorCode.WALLET_DATA_SIGN_USER_DECLINED, ErrorSeverity.WARN),
}


def infer_wallet_family(candidate: Any) -> str | None:
    """Family hint from descriptive sibling fields; None when nothing hints at a family."""
    parts = [get_field(candidate, key) for key in _FAMILY_FIELDS]
    if isinstance(candidate, BaseException):
        parts.append(type(candidate).__name__)
    text = " ".join(p for p in parts if isinstance(p, str)).lower()

    if "datasign" in text or "signdata" in text:
        return FAMILY_DATA_SIGN
    if "txsign" in text or "signtx" in text:
        return FAMILY_TX_SIGN
    if "txsend" in text or "submittx" in text:
        return FAMILY_TX_SEND
    return None


def resolve_info_keys(info: str) -> list[str]:
    """
    Ordered keyword list for info: the whole normalized string first, then
    each known token it contains. Empty when info has no letters.
    """
    normalized = letters_only(info)
    if not normalized:
        return []

    keys = [normalized]

    def add(key: str) -> None:
        if key not in keys:
            keys.append(key)

    if KEYWORD_PROOF_GENERATION in normalized:
        add(KEYWORD_PROOF_GENERATION)
    if KEYWORD_USER_DECLINED in normalized:
        add(KEYWORD_USER_DECLINED)
    if KEYWORD_DEPRECATED_CERTIFICATE in normalized:
        add(KEYWORD_DEPRECATED_CERTIFICATE)
    if KEYWORD_ADDRESS_NOT_PK in normalized or (
        "address" in normalized and "pk" in normalized and "not" in normalized
    ):
        add(KEYWORD_ADDRESS_NOT_PK)
    if KEYWORD_REFUSED in normalized:
        add(KEYWORD_REFUSED)
    if KEYWORD_FAILURE in normalized:
        add(KEYWORD_FAILURE)
    return keys


def info_looks_like_submit_failure(info: str) -> bool:
    return "submittx" in letters_only(info)


def extract_wallet_error(err: Any) -> WalletErrorShape | None:
    for candidate in collect_candidates(err):
        if not is_object(candidate):
            continue
        code = as_int(get_field(candidate, "code"))
        info = get_field(candidate, "info")
        if code is None or not is_non_empty_str(info):
            continue
        return WalletErrorShape(code, info, infer_wallet_family(candidate))
    return None


def _format_max_size(max_size: float | int) -> str:
    if isinstance(max_size, float) and max_size.is_integer():
        return str(int(max_size))
    return str(max_size)


def extract_paginate_error(err: Any) -> PaginateErrorShape | None:
    for candidate in collect_candidates(err):
        if not is_object(candidate):
            continue
        max_size = as_finite_number(get_field(candidate, "maxSize"))
        if max_size is None or max_size < 0:
            continue
        message = get_field(candidate, "message")
        if not is_non_empty_str(message):
            message = f"Pagination out of range (maxSize={_format_max_size(max_size)})"
        return PaginateErrorShape(max_size, message)
    return None


def _resolve_api_mapping(shape: WalletErrorShape, ctx: NormalizeContext | None) -> WalletMapping | None:
    mapping = API_ERROR_MAP.get(shape.code)
    if mapping is None:
        return None
    if shape.code == -2:
        submitting = ctx is not None and (
            ctx.source == ErrorSource.WALLET_SUBMIT or ctx.stage == ErrorStage.SUBMIT
        )
        if submitting or info_looks_like_submit_failure(shape.info):
            return SUBMIT_FAILURE_MAPPING
    return mapping


def _resolve_data_sign_mapping(shape: WalletErrorShape, keys: list[str]) -> WalletMapping | None:
    if shape.family != FAMILY_DATA_SIGN and KEYWORD_ADDRESS_NOT_PK not in keys:
        return None
    for key in keys:
        mapping = DATA_SIGN_MAP.get((shape.code, key))
        if mapping is not None:
            return mapping
    return None


def _build_result(
    mapping: WalletMapping,
    shape: WalletErrorShape,
    raw: Any,
    extra_meta: dict[str, Any] | None = None,
) -> Classification:
    meta: dict[str, Any] = {"wallet_code": shape.code, "wallet_info": shape.info}
    if shape.family:
        meta["wallet_family"] = shape.family
    if extra_meta:
        meta.update(extra_meta)
    return Classification(
        code=mapping.code,
        severity=mapping.severity,
        source=mapping.source,
        stage=mapping.stage,
        message=shape.info,
        raw=raw,
        meta=meta,
    )


def recognize_wallet_pagination(err: Any, ctx: NormalizeContext | None = None) -> Classification | None:
    """Classify a CIP-30 PaginateError ({"maxSize": n}); None when no candidate carries maxSize."""
    shape = extract_paginate_error(err)
    if shape is None:
        return None
    return Classification(
        code=ErrorCode.WALLET_PAGINATION_OUT_OF_RANGE,
        severity=ErrorSeverity.WARN,
        source=ErrorSource.WALLET_QUERY,
        stage=ErrorStage.BUILD,
        message=shape.message,
        raw=err,
        meta={"wallet_paginate_max_size": shape.max_size},
    )


def recognize_wallet_numeric(err: Any, ctx: NormalizeContext | None = None) -> Classification | None:
    """
    Classify a CIP-30 {"code", "info"} error.

    APIError codes (-1..-4) map directly; -2 becomes a submit failure when the
    call was a submission. Positive codes need a known (code, keyword) pair;
    unknown pairs are not classified.
    """
    shape = extract_wallet_error(err)
    if shape is None:
        return None

    api_mapping = _resolve_api_mapping(shape, ctx)
    if api_mapping is not None:
        return _build_result(api_mapping, shape, err)

    keys = resolve_info_keys(shape.info)
    if not keys:
        return None

    data_sign_mapping = _resolve_data_sign_mapping(shape, keys)
    if data_sign_mapping is not None:
        return _build_result(data_sign_mapping, shape, err)

    for key in keys:
        mapping = POSITIVE_CODE_INFO_MAP.get((shape.code, key))
        if mapping is None:
            continue
        extra = None
        if shape.code == 3 and key == KEYWORD_DEPRECATED_CERTIFICATE:
            # CIP-95 removed the deprecated certificate types
            extra = {"cip95_deprecated_certificate": True}
        return _build_result(mapping, shape, err, extra)

    return None


def recognize_wallet_error(err: Any, ctx: NormalizeContext | None = None) -> Classification | None:
    """Wallet recognizer used by the pipeline: pagination shape first, then numeric code/info."""
    paginated = recognize_wallet_pagination(err, ctx)
    if paginated is not None:
        return paginated
    return recognize_wallet_numeric(err, ctx)
