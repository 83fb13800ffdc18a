"""
Normalization facade: one normalize(err, context) entry point.

Per call, strictly in order:
  1. merge context (call override > bound defaults > built-in defaults)
  2. run the recognizer pipeline (first match wins, faults isolated)
  3. message-pattern fallback while the code is still UNKNOWN
  4. attach the catalog resolution unless a recognizer supplied one
  5. collect trace lines (parse_traces)
  6. compute the fingerprint (include_fingerprint)
  7. return the immutable NormalizedError

The engine never raises for malformed input; the worst outcome is UNKNOWN
with a best-effort message. Configuration is fixed at construction;
with_defaults() derives a new normalizer instead of mutating this one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping, Sequence, TypeVar

from cardano_errors.config import get_settings
from cardano_errors.core.codes import ErrorCode, ErrorSeverity, ErrorSource, ErrorStage
from cardano_errors.core.context import ContextLayer, context_fields, merge_context
from cardano_errors.core.fingerprint import create_fingerprint
from cardano_errors.core.message_classifier import apply_message_classifier
from cardano_errors.core.messages import extract_error_message
from cardano_errors.core.models import (
    UNKNOWN_NETWORK,
    Classification,
    NormalizeContext,
    NormalizedError,
    WalletDescriptor,
)
from cardano_errors.core.pipeline import Recognizer, run_recognizers
from cardano_errors.core.resolutions import get_resolution
from cardano_errors.core.traces import extract_trace_lines
from cardano_errors.errors_logging import get_logger
from cardano_errors.recognizers import DEFAULT_RECOGNIZERS

logger = get_logger(__name__)

TRACES_META_KEY = "traces"
_DEBUG_REPR_LIMIT = 2000

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class NormalizerConfig:
    """
    Construction-time configuration of an ErrorNormalizer.

    recognizers: Ordered recognizer functions; the first match wins.
    include_fingerprint: Attach a fingerprint of (source, stage, code, provider).
    parse_traces: Copy up to 10 trace/stack lines into meta["traces"].
    debug: Log input, context and output of every call (never raises).
    """

    recognizers: Sequence[Recognizer] = DEFAULT_RECOGNIZERS
    include_fingerprint: bool = False
    parse_traces: bool = False
    debug: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "recognizers", tuple(self.recognizers))


class ErrorNormalizer:
    """Normalizes raw upstream errors into NormalizedError records."""

    def __init__(self, config: NormalizerConfig | None = None, defaults: ContextLayer = None) -> None:
        self._config = config or NormalizerConfig()
        self._defaults: Mapping[str, Any] = MappingProxyType(context_fields(defaults))

    @property
    def config(self) -> NormalizerConfig:
        return self._config

    @property
    def defaults(self) -> Mapping[str, Any]:
        return self._defaults

    def with_defaults(self, defaults: ContextLayer = None, **fields: Any) -> "ErrorNormalizer":
        """New normalizer with the same config and these defaults layered over the current ones."""
        merged = dict(self._defaults)
        merged.update(context_fields(defaults))
        merged.update(context_fields(fields))
        return ErrorNormalizer(self._config, merged)

    def normalize(self, err: Any, context: ContextLayer = None) -> NormalizedError:
        ctx = merge_context(self._defaults, context)

        classification = run_recognizers(self._config.recognizers, err, ctx)
        if classification is None:
            classification = Classification(
                code=ErrorCode.UNKNOWN,
                severity=ErrorSeverity.ERROR,
                message=extract_error_message(err),
            )

        classification = apply_message_classifier(classification, err)

        if classification.resolution is None:
            classification = replace(classification, resolution=get_resolution(classification.code or ErrorCode.UNKNOWN))

        if self._config.parse_traces:
            classification = _attach_traces(classification, err)

        result = _finalize(classification, err, ctx, self._config.include_fingerprint)

        if self._config.debug:
            _debug_normalize(err, context, ctx, result)
        return result


def _attach_traces(classification: Classification, err: Any) -> Classification:
    lines = extract_trace_lines(err)
    if not lines:
        return classification
    meta = dict(classification.meta)
    meta[TRACES_META_KEY] = tuple(lines)
    return replace(classification, meta=meta)


def _as_member(enum_cls: type[E], value: Any, fallback: E) -> E:
    """Coerce a recognizer-supplied value (member or raw string) to enum_cls; fallback when unset or invalid."""
    if value is None:
        return fallback
    try:
        return enum_cls(value)
    except (TypeError, ValueError):
        logger.warning(
            "classification_invalid_field",
            field=enum_cls.__name__,
            value=repr(value)[:_DEBUG_REPR_LIMIT],
        )
        return fallback


def _finalize(
    classification: Classification,
    err: Any,
    ctx: NormalizeContext,
    include_fingerprint: bool,
) -> NormalizedError:
    source = _as_member(ErrorSource, classification.source, ctx.source)
    stage = _as_member(ErrorStage, classification.stage, ctx.stage)
    code = _as_member(ErrorCode, classification.code, ErrorCode.UNKNOWN)
    severity = _as_member(ErrorSeverity, classification.severity, ErrorSeverity.ERROR)
    provider = classification.provider or ctx.provider

    wallet = classification.wallet
    if wallet is None and ctx.wallet_hint:
        wallet = WalletDescriptor(name=ctx.wallet_hint)

    fingerprint = classification.fingerprint
    if include_fingerprint and fingerprint is None:
        fingerprint = create_fingerprint(source, stage, code, provider)

    return NormalizedError(
        code=code,
        severity=severity,
        source=source,
        stage=stage,
        message=classification.message or extract_error_message(err),
        timestamp=ctx.timestamp,
        raw=err,
        detail=classification.detail,
        network=ctx.network or UNKNOWN_NETWORK,
        provider=provider,
        wallet=wallet,
        tx_hash=classification.tx_hash or ctx.tx_hash,
        resolution=classification.resolution or get_resolution(code),
        fingerprint=fingerprint,
        meta=MappingProxyType(dict(classification.meta)),
    )


def _debug_normalize(
    err: Any,
    context: ContextLayer,
    ctx: NormalizeContext,
    result: NormalizedError,
) -> None:
    """Diagnostic side channel; must never break normalization."""
    try:
        logger.info(
            "normalize_debug",
            context=repr(context),
            effective_source=ctx.source.value,
            effective_stage=ctx.stage.value,
            input=repr(err)[:_DEBUG_REPR_LIMIT],
            output=result.to_dict(),
        )
    except Exception:
        pass


def create_normalizer(config: NormalizerConfig | None = None, defaults: ContextLayer = None) -> ErrorNormalizer:
    """Build a normalizer; config None uses the default recognizer order with all options off."""
    return ErrorNormalizer(config, defaults)


@lru_cache(maxsize=1)
def get_default_normalizer() -> ErrorNormalizer:
    """
    Process-wide default normalizer, constructed once from environment
    settings (CARDANO_ERRORS_* flags, CARDANO_NETWORK, CARDANO_PROVIDER).
    Call get_default_normalizer.cache_clear() to rebuild after changing the environment.
    """
    settings = get_settings()
    config = NormalizerConfig(
        include_fingerprint=settings.include_fingerprint,
        parse_traces=settings.parse_traces,
        debug=settings.debug,
    )
    return ErrorNormalizer(config, settings.default_context())


def normalize_error(err: Any, context: ContextLayer = None) -> NormalizedError:
    """Normalize err with the default normalizer."""
    return get_default_normalizer().normalize(err, context)
