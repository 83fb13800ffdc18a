"""
Closed enumerations for normalized Cardano errors.

ErrorCode is the taxonomy consumers branch on; messages are heuristic and
not contractually stable. Source and stage describe which subsystem and
lifecycle phase produced the error.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    # Generic
    UNKNOWN = "UNKNOWN"
    UNEXPECTED_SHAPE = "UNEXPECTED_SHAPE"

    # Connectivity
    NETWORK_UNREACHABLE = "NETWORK_UNREACHABLE"
    TIMEOUT = "TIMEOUT"

    # Provider / HTTP
    RATE_LIMITED = "RATE_LIMITED"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    PROVIDER_INTERNAL = "PROVIDER_INTERNAL"
    MEMPOOL_FULL = "MEMPOOL_FULL"

    # Wallet API (CIP-30 APIError)
    WALLET_INVALID_REQUEST = "WALLET_INVALID_REQUEST"
    WALLET_INTERNAL = "WALLET_INTERNAL"
    WALLET_REFUSED = "WALLET_REFUSED"
    WALLET_ACCOUNT_CHANGED = "WALLET_ACCOUNT_CHANGED"

    # Wallet signing
    WALLET_SIGN_USER_DECLINED = "WALLET_SIGN_USER_DECLINED"
    WALLET_SIGN_PROOF_GENERATION = "WALLET_SIGN_PROOF_GENERATION"

    # Wallet data signing
    WALLET_DATA_SIGN_PROOF_GENERATION = "WALLET_DATA_SIGN_PROOF_GENERATION"
    WALLET_DATA_SIGN_ADDRESS_NOT_PK = "WALLET_DATA_SIGN_ADDRESS_NOT_PK"
    WALLET_DATA_SIGN_USER_DECLINED = "WALLET_DATA_SIGN_USER_DECLINED"

    # Wallet query / submit
    WALLET_PAGINATION_OUT_OF_RANGE = "WALLET_PAGINATION_OUT_OF_RANGE"
    WALLET_SUBMIT_REFUSED = "WALLET_SUBMIT_REFUSED"
    WALLET_SUBMIT_FAILURE = "WALLET_SUBMIT_FAILURE"

    # Ledger / script
    TX_DESERIALISE_FAILURE = "TX_DESERIALISE_FAILURE"
    TX_INPUTS_MISSING_OR_SPENT = "TX_INPUTS_MISSING_OR_SPENT"
    TX_OUTPUT_TOO_SMALL = "TX_OUTPUT_TOO_SMALL"
    TX_VALUE_NOT_CONSERVED = "TX_VALUE_NOT_CONSERVED"
    TX_LEDGER_VALIDATION_FAILED = "TX_LEDGER_VALIDATION_FAILED"
    TX_SCRIPT_EVALUATION_FAILED = "TX_SCRIPT_EVALUATION_FAILED"


class ErrorSeverity(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class ErrorSource(str, Enum):
    MESH_BUILD = "mesh_build"
    WALLET_SIGN = "wallet_sign"
    WALLET_SUBMIT = "wallet_submit"
    WALLET_QUERY = "wallet_query"
    PROVIDER_QUERY = "provider_query"
    PROVIDER_SUBMIT = "provider_submit"
    NODE_SUBMIT = "node_submit"


class ErrorStage(str, Enum):
    BUILD = "build"
    SIGN = "sign"
    SUBMIT = "submit"


CARDANO_ERROR_CODES: tuple[ErrorCode, ...] = tuple(ErrorCode)
