"""
Origin hints for arbitrary error payloads.

infer_error_meta() does not classify; it reports which upstream family a
payload most likely came from (Blockfrost HTTP, CIP-30 wallet, node ledger
text, connectivity) so callers can log or route errors that normalize() left
as UNKNOWN or that they want to inspect before normalizing.
"""

from __future__ import annotations

from typing import Any

from cardano_errors.core.candidates import collect_candidates, get_field, is_object
from cardano_errors.core.guards import as_int, is_non_empty_str
from cardano_errors.core.message_classifier import CONNECTIVITY_PATTERN
from cardano_errors.core.messages import extract_error_message
from cardano_errors.recognizers.blockfrost import STATUS_REASON_MAP
from cardano_errors.recognizers.node_text import NODE_LEDGER_PATTERN


def _infer_blockfrost_meta(err: Any) -> dict[str, Any] | None:
    for candidate in collect_candidates(err):
        if not is_object(candidate):
            continue
        status_code = as_int(get_field(candidate, "status_code"))
        if status_code is None:
            continue
        inferred: dict[str, Any] = {
            "inferred_provider": "blockfrost",
            "inferred_kind": "blockfrost_http",
            "http_status": status_code,
        }
        reason = STATUS_REASON_MAP.get(status_code)
        if reason:
            inferred["blockfrost_reason"] = reason
        return inferred
    return None


def _infer_wallet_meta(err: Any) -> dict[str, Any] | None:
    for candidate in collect_candidates(err):
        if not is_object(candidate):
            continue
        if as_int(get_field(candidate, "code")) is None:
            continue
        if not is_non_empty_str(get_field(candidate, "info")):
            continue
        return {"inferred_provider": "wallet", "inferred_kind": "wallet_cip_numeric"}
    return None


def _infer_node_meta(message: str) -> dict[str, Any] | None:
    if not NODE_LEDGER_PATTERN.search(message):
        return None
    return {"inferred_provider": "cardano-node", "inferred_kind": "node_ledger_string"}


def _infer_connectivity_meta(message: str) -> dict[str, Any] | None:
    if not CONNECTIVITY_PATTERN.search(message):
        return None
    return {"inferred_provider": "network", "inferred_kind": "connectivity_unreachable"}


def infer_error_meta(err: Any) -> dict[str, Any]:
    """Origin hints for err; empty dict when nothing is recognizable."""
    for inferred in (_infer_blockfrost_meta(err), _infer_wallet_meta(err)):
        if inferred is not None:
            return inferred

    message = extract_error_message(err)
    for inferred in (_infer_node_meta(message), _infer_connectivity_meta(message)):
        if inferred is not None:
            return inferred
    return {}
