"""
Remediation guidance per error code.

The catalog is module-level read-only data. get_resolution() hands out an
immutable ErrorResolution (steps as a tuple), so no caller can alter the
guidance seen by later lookups or attached to other results.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

from cardano_errors.core.codes import ErrorCode
from cardano_errors.core.models import ErrorResolution

BLOCKFROST_ERRORS_DOCS = "https://blockfrost.dev/start-building/errors"
CIP30_DOCS = "https://cips.cardano.org/cip/CIP-0030"


class _CatalogEntry(NamedTuple):
    title: str
    steps: tuple[str, ...]
    docs_url: str | None = None


_RESOLUTIONS: dict[ErrorCode, _CatalogEntry] = {
    ErrorCode.UNKNOWN: _CatalogEntry(
        "Inspect error details",
        (
            "Log the full normalized error payload",
            "Capture provider/wallet context and retry with diagnostics enabled",
        ),
    ),
    ErrorCode.UNEXPECTED_SHAPE: _CatalogEntry(
        "Validate incoming error shape",
        (
            "Log the original payload and recognizer metadata",
            "Update parsing guards for the observed provider or wallet response",
        ),
    ),
    ErrorCode.NETWORK_UNREACHABLE: _CatalogEntry(
        "Check network connectivity",
        (
            "Verify internet and provider endpoint reachability",
            "Retry request with exponential backoff",
        ),
    ),
    ErrorCode.TIMEOUT: _CatalogEntry(
        "Retry timed-out request",
        (
            "Retry the operation with a longer timeout window",
            "If repeated, reduce payload size or split operations",
        ),
    ),
    ErrorCode.RATE_LIMITED: _CatalogEntry(
        "Back off and retry",
        (
            "Wait for rate limit reset before retrying",
            "Reduce request burst size and add backoff",
        ),
        BLOCKFROST_ERRORS_DOCS,
    ),
    ErrorCode.QUOTA_EXCEEDED: _CatalogEntry(
        "Increase or reset provider quota",
        (
            "Check current Blockfrost project usage",
            "Switch project key or upgrade quota plan",
            "Retry once quota has reset",
        ),
        BLOCKFROST_ERRORS_DOCS,
    ),
    ErrorCode.UNAUTHORIZED: _CatalogEntry(
        "Verify API credentials",
        (
            "Confirm project/API key is present and valid",
            "Ensure the key matches the selected network",
        ),
    ),
    ErrorCode.FORBIDDEN: _CatalogEntry(
        "Resolve provider access restrictions",
        (
            "Confirm API key permissions and account status",
            "If auto-banned, pause traffic and retry later",
        ),
        BLOCKFROST_ERRORS_DOCS,
    ),
    ErrorCode.NOT_FOUND: _CatalogEntry(
        "Verify resource identifiers",
        (
            "Check tx hash, address, or endpoint path for typos",
            "Confirm resource exists on the selected network",
        ),
    ),
    ErrorCode.BAD_REQUEST: _CatalogEntry(
        "Fix request payload",
        (
            "Validate request parameters against provider schema",
            "Rebuild request with strict typing and retry",
        ),
    ),
    ErrorCode.PROVIDER_INTERNAL: _CatalogEntry(
        "Retry after provider error",
        (
            "Retry request with backoff",
            "Fail over to an alternate provider if available",
        ),
    ),
    ErrorCode.MEMPOOL_FULL: _CatalogEntry(
        "Resubmit when mempool clears",
        (
            "Wait for lower network congestion",
            "Retry submission with adjusted fee strategy",
        ),
    ),
    ErrorCode.WALLET_INVALID_REQUEST: _CatalogEntry(
        "Correct wallet API input",
        (
            "Validate wallet method arguments and CBOR format",
            "Retry with a freshly built transaction payload",
        ),
        CIP30_DOCS,
    ),
    ErrorCode.WALLET_INTERNAL: _CatalogEntry(
        "Recover from wallet internal failure",
        (
            "Reconnect wallet extension and refresh app state",
            "Retry operation and inspect wallet logs if repeated",
        ),
    ),
    ErrorCode.WALLET_REFUSED: _CatalogEntry(
        "Handle wallet refusal",
        (
            "Prompt user to reconnect or re-enable wallet permissions",
            "Retry operation after wallet confirmation",
        ),
    ),
    ErrorCode.WALLET_ACCOUNT_CHANGED: _CatalogEntry(
        "Sync with active wallet account",
        (
            "Reload dApp state with the newly selected account",
            "Rebuild and retry the pending operation",
        ),
    ),
    ErrorCode.WALLET_SIGN_USER_DECLINED: _CatalogEntry(
        "Ask user to re-approve signing",
        (
            "Explain why signature is required",
            "Prompt signing again when user is ready",
        ),
    ),
    ErrorCode.WALLET_SIGN_PROOF_GENERATION: _CatalogEntry(
        "Rebuild transaction before signing",
        (
            "Ensure transaction body and witness requirements are valid",
            "Retry signing with latest wallet/session state",
        ),
    ),
    ErrorCode.WALLET_DATA_SIGN_PROOF_GENERATION: _CatalogEntry(
        "Retry data signing with a supported payload",
        (
            "Confirm payload encoding and address format are valid",
            "Retry signData after refreshing wallet/session state",
        ),
    ),
    ErrorCode.WALLET_DATA_SIGN_ADDRESS_NOT_PK: _CatalogEntry(
        "Use a payment-key address for signData",
        (
            "Call signData with a base, enterprise, or pointer address",
            "Avoid reward/script addresses that do not expose a payment key",
        ),
        CIP30_DOCS,
    ),
    ErrorCode.WALLET_DATA_SIGN_USER_DECLINED: _CatalogEntry(
        "Ask user to re-approve data signing",
        (
            "Explain why the message signature is needed",
            "Prompt signData again when the user is ready",
        ),
    ),
    ErrorCode.WALLET_PAGINATION_OUT_OF_RANGE: _CatalogEntry(
        "Adjust wallet pagination bounds",
        (
            "Request fewer pages or use a lower page index",
            "Respect the wallet-provided maxSize limit",
        ),
    ),
    ErrorCode.WALLET_SUBMIT_REFUSED: _CatalogEntry(
        "Resolve submit refusal",
        (
            "Re-check wallet permissions and active account",
            "Retry submit after reconnecting wallet",
        ),
    ),
    ErrorCode.WALLET_SUBMIT_FAILURE: _CatalogEntry(
        "Retry wallet submission",
        (
            "Retry submit with fresh wallet connection",
            "Fallback to provider submit path if available",
        ),
    ),
    ErrorCode.TX_DESERIALISE_FAILURE: _CatalogEntry(
        "Rebuild transaction encoding",
        (
            "Recreate transaction CBOR with the correct schema",
            "Validate serialization before submit",
        ),
    ),
    ErrorCode.TX_INPUTS_MISSING_OR_SPENT: _CatalogEntry(
        "Refresh UTxOs and rebuild tx",
        (
            "Refetch wallet UTxO set",
            "Rebuild transaction with currently spendable inputs",
        ),
    ),
    ErrorCode.TX_OUTPUT_TOO_SMALL: _CatalogEntry(
        "Increase output lovelace",
        (
            "Raise each affected output to protocol minimum",
            "Recalculate fees and rebuild transaction",
        ),
    ),
    ErrorCode.TX_VALUE_NOT_CONSERVED: _CatalogEntry(
        "Rebalance transaction values",
        (
            "Recompute inputs/outputs including fees and change",
            "Ensure multi-asset totals are conserved",
        ),
    ),
    ErrorCode.TX_LEDGER_VALIDATION_FAILED: _CatalogEntry(
        "Inspect ledger validation errors",
        (
            "Check script witnesses, redeemers, and protocol params",
            "Rebuild and resubmit after correcting ledger constraints",
        ),
    ),
    ErrorCode.TX_SCRIPT_EVALUATION_FAILED: _CatalogEntry(
        "Fix script execution failure",
        (
            "Inspect script/redeemer data and execution units",
            "Adjust datum/redeemer or budget and retry",
        ),
    ),
}

RESOLUTIONS_BY_CODE: Mapping[ErrorCode, _CatalogEntry] = MappingProxyType(_RESOLUTIONS)


def get_resolution(code: ErrorCode | str) -> ErrorResolution | None:
    """Resolution for code, or None for codes without guidance (or unknown strings)."""
    try:
        key = ErrorCode(code)
    except ValueError:
        return None
    entry = RESOLUTIONS_BY_CODE.get(key)
    if entry is None:
        return None
    return ErrorResolution(title=entry.title, steps=entry.steps, docs_url=entry.docs_url)
