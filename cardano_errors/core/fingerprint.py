"""
Deterministic error fingerprints for grouping and deduplication.

The fingerprint covers the classification tuple only (source, stage, code,
provider), never the raw payload, so repeated occurrences of the same
failure group together across processes.
"""

from __future__ import annotations

import hashlib

from cardano_errors.core.codes import ErrorCode, ErrorSource, ErrorStage

FINGERPRINT_LENGTH = 16
UNKNOWN_PROVIDER = "unknown"


def fingerprint_key(
    source: ErrorSource | str,
    stage: ErrorStage | str,
    code: ErrorCode | str,
    provider: str | None = None,
) -> str:
    parts = [
        source.value if isinstance(source, ErrorSource) else str(source),
        stage.value if isinstance(stage, ErrorStage) else str(stage),
        code.value if isinstance(code, ErrorCode) else str(code),
        provider or UNKNOWN_PROVIDER,
    ]
    return "|".join(parts)


def create_fingerprint(
    source: ErrorSource | str,
    stage: ErrorStage | str,
    code: ErrorCode | str,
    provider: str | None = None,
) -> str:
    """Fixed-length hex digest of "source|stage|code|provider"."""
    key = fingerprint_key(source, stage, code, provider)
    return hashlib.sha256(key.encode("utf-8")).hexdigest()[:FINGERPRINT_LENGTH]
