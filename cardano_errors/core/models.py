"""
Data models for normalization input and output.

- NormalizeContext: caller-supplied provenance merged per call.
- Classification: partial result produced by a recognizer or classifier.
- NormalizedError: the immutable record returned by normalize().
- ErrorResolution / WalletDescriptor: value objects carried by the result.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from cardano_errors.core.codes import ErrorCode, ErrorSeverity, ErrorSource, ErrorStage

UNKNOWN_NETWORK = "unknown"


@dataclass(frozen=True)
class ErrorResolution:
    """
    Remediation guidance for one error code.

    Immutable: steps is stored as a tuple, so a resolution attached to a
    NormalizedError cannot be edited through the record or by whoever
    built it.
    """

    title: str
    steps: tuple[str, ...] = ()
    docs_url: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"title": self.title, "steps": list(self.steps)}
        if self.docs_url:
            out["docs_url"] = self.docs_url
        return out


@dataclass(frozen=True)
class WalletDescriptor:
    """Wallet that produced the error (name from CIP-30 injection key or caller hint)."""

    name: str | None = None
    version: str | None = None
    api_version: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in (("name", self.name), ("version", self.version), ("api_version", self.api_version)) if v}


@dataclass(frozen=True)
class NormalizeContext:
    """
    Effective provenance for one normalize call.

    Built by merge_context() from call overrides, bound defaults and the
    built-in defaults; source and stage are always resolved.
    """

    source: ErrorSource
    stage: ErrorStage
    network: str | None = None
    provider: str | None = None
    wallet_hint: str | None = None
    tx_hash: str | None = None
    timestamp: str | None = None


@dataclass
class Classification:
    """
    Partial classification from a recognizer.

    Every field is optional; unset fields are filled from the context and
    the raw input when the final NormalizedError is built. meta is merged
    additively by later stages.
    """

    code: ErrorCode | None = None
    severity: ErrorSeverity | None = None
    source: ErrorSource | None = None
    stage: ErrorStage | None = None
    message: str | None = None
    detail: str | None = None
    provider: str | None = None
    wallet: WalletDescriptor | None = None
    tx_hash: str | None = None
    raw: Any = None
    resolution: ErrorResolution | None = None
    fingerprint: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)


def _json_safe(value: Any) -> Any:
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return repr(value)


@dataclass(frozen=True)
class NormalizedError:
    """
    Stable, strongly classified error record.

    raw holds the exact value passed to normalize() (never copied); meta is
    a read-only view so the record cannot be changed after it is produced.
    """

    code: ErrorCode
    severity: ErrorSeverity
    source: ErrorSource
    stage: ErrorStage
    message: str
    timestamp: str
    raw: Any = None
    detail: str | None = None
    network: str = UNKNOWN_NETWORK
    provider: str | None = None
    wallet: WalletDescriptor | None = None
    tx_hash: str | None = None
    resolution: ErrorResolution | None = None
    fingerprint: str | None = None
    meta: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "code": self.code.value,
            "severity": self.severity.value,
            "source": self.source.value,
            "stage": self.stage.value,
            "message": self.message,
            "timestamp": self.timestamp,
            "network": self.network,
        }
        if self.detail:
            out["detail"] = self.detail
        if self.provider:
            out["provider"] = self.provider
        if self.wallet is not None:
            out["wallet"] = self.wallet.to_dict()
        if self.tx_hash:
            out["tx_hash"] = self.tx_hash
        if self.resolution is not None:
            out["resolution"] = self.resolution.to_dict()
        if self.fingerprint:
            out["fingerprint"] = self.fingerprint
        out["meta"] = {k: _json_safe(v) for k, v in self.meta.items()}
        out["raw"] = _json_safe(self.raw)
        return out
