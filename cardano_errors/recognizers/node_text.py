"""
Cardano node / ledger text error recognizer.

Node submit endpoints (cardano-submit-api, Ogmios, provider passthrough)
report ledger rule failures as text. Matching is heuristic and ordered:
the first category whose pattern is found wins, so a message naming
several rules resolves to the earliest category below.
"""

from __future__ import annotations

import re
from typing import Any, NamedTuple

from cardano_errors.core.codes import ErrorCode, ErrorSeverity, ErrorSource, ErrorStage
from cardano_errors.core.messages import extract_error_message, has_usable_message
from cardano_errors.core.models import Classification, NormalizeContext


class LedgerPattern(NamedTuple):
    name: str
    pattern: re.Pattern[str]
    code: ErrorCode


LEDGER_PATTERNS: tuple[LedgerPattern, ...] = (
    LedgerPattern(
        "deserialise",
        re.compile(r"DeserialiseFailure|DecoderFailure|expected word", re.IGNORECASE),
        ErrorCode.TX_DESERIALISE_FAILURE,
    ),
    LedgerPattern(
        "bad_inputs",
        re.compile(r"BadInputsUTxO", re.IGNORECASE),
        ErrorCode.TX_INPUTS_MISSING_OR_SPENT,
    ),
    LedgerPattern(
        "output_too_small",
        re.compile(r"OutputTooSmallUTxO|BabbageOutputTooSmallUTxO", re.IGNORECASE),
        ErrorCode.TX_OUTPUT_TOO_SMALL,
    ),
    LedgerPattern(
        "value_not_conserved",
        re.compile(r"ValueNotConservedUTxO", re.IGNORECASE),
        ErrorCode.TX_VALUE_NOT_CONSERVED,
    ),
    LedgerPattern(
        "script_failure",
        re.compile(
            r"ScriptFailure|PlutusFailure|EvaluationFailure|ValidationTagMismatch|redeemer.*execution units",
            re.IGNORECASE,
        ),
        ErrorCode.TX_SCRIPT_EVALUATION_FAILED,
    ),
    LedgerPattern(
        "ledger_validation",
        re.compile(r"ShelleyTxValidationError|ApplyTxError", re.IGNORECASE),
        ErrorCode.TX_LEDGER_VALIDATION_FAILED,
    ),
)

NODE_LEDGER_PATTERN = re.compile(
    "|".join(p.pattern.pattern for p in LEDGER_PATTERNS),
    re.IGNORECASE,
)


def match_ledger_pattern(message: str) -> LedgerPattern | None:
    """First ledger category found in message, in fixed precedence order."""
    for entry in LEDGER_PATTERNS:
        if entry.pattern.search(message):
            return entry
    return None


def recognize_node_text_error(err: Any, ctx: NormalizeContext | None = None) -> Classification | None:
    """Classify node/ledger error text; None when there is no usable message or no category matches."""
    message = extract_error_message(err)
    if not has_usable_message(message):
        return None

    matched = match_ledger_pattern(message)
    if matched is None:
        return None

    return Classification(
        code=matched.code,
        severity=ErrorSeverity.ERROR,
        source=ErrorSource.NODE_SUBMIT,
        stage=ErrorStage.SUBMIT,
        message=message,
        raw=err,
        meta={"node_pattern": matched.name},
    )
