"""
cardano_errors: normalize Cardano provider, wallet, node and SDK errors.

Turns loosely typed error values (Blockfrost HTTP bodies, CIP-30 wallet
errors, ledger rule failure text, Mesh-style wrappers) into one immutable
NormalizedError with a closed ErrorCode, severity, provenance, remediation
steps and an optional fingerprint.
"""

__version__ = "0.1.0"

from cardano_errors.core.analyzers import infer_error_meta
from cardano_errors.core.codes import (
    CARDANO_ERROR_CODES,
    ErrorCode,
    ErrorSeverity,
    ErrorSource,
    ErrorStage,
)
from cardano_errors.core.exceptions import CardanoAppError, CardanoErrorsException
from cardano_errors.core.models import (
    Classification,
    ErrorResolution,
    NormalizeContext,
    NormalizedError,
    WalletDescriptor,
)
from cardano_errors.core.resolutions import get_resolution
from cardano_errors.normalizer import (
    ErrorNormalizer,
    NormalizerConfig,
    create_normalizer,
    get_default_normalizer,
    normalize_error,
)
from cardano_errors.recognizers import (
    DEFAULT_RECOGNIZERS,
    recognize_blockfrost_error,
    recognize_mesh_error,
    recognize_node_text_error,
    recognize_wallet_error,
)
from cardano_errors.safety import cip30_wallet_preset, mesh_provider_preset, with_error_safety

__all__ = [
    "CARDANO_ERROR_CODES",
    "CardanoAppError",
    "CardanoErrorsException",
    "Classification",
    "DEFAULT_RECOGNIZERS",
    "ErrorCode",
    "ErrorNormalizer",
    "ErrorResolution",
    "ErrorSeverity",
    "ErrorSource",
    "ErrorStage",
    "NormalizeContext",
    "NormalizedError",
    "NormalizerConfig",
    "WalletDescriptor",
    "cip30_wallet_preset",
    "create_normalizer",
    "get_default_normalizer",
    "get_resolution",
    "infer_error_meta",
    "mesh_provider_preset",
    "normalize_error",
    "recognize_blockfrost_error",
    "recognize_mesh_error",
    "recognize_node_text_error",
    "recognize_wallet_error",
    "with_error_safety",
]
