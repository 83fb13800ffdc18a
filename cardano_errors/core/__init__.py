"""
Normalization core: data model, candidate extraction, pipeline, fallback
classification, resolutions, context merging and fingerprints.
"""

from cardano_errors.core.codes import ErrorCode, ErrorSeverity, ErrorSource, ErrorStage
from cardano_errors.core.models import (
    Classification,
    ErrorResolution,
    NormalizeContext,
    NormalizedError,
    WalletDescriptor,
)

__all__ = [
    "Classification",
    "ErrorCode",
    "ErrorResolution",
    "ErrorSeverity",
    "ErrorSource",
    "ErrorStage",
    "NormalizeContext",
    "NormalizedError",
    "WalletDescriptor",
]
