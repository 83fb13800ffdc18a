"""
Context merging for normalize calls.

Per field, highest wins: per-call override > bound defaults > built-in
defaults (provider_query / build). A layer is a dict, a NormalizeContext
or None; None values never override. Whole values are replaced, never
merged within a field.
"""

from __future__ import annotations

from dataclasses import fields
from datetime import datetime, timezone
from typing import Any, Mapping, Union

from cardano_errors.core.codes import ErrorSource, ErrorStage
from cardano_errors.core.models import NormalizeContext
from cardano_errors.errors_logging import get_logger

logger = get_logger(__name__)

ContextLayer = Union[Mapping[str, Any], NormalizeContext, None]

DEFAULT_SOURCE = ErrorSource.PROVIDER_QUERY
DEFAULT_STAGE = ErrorStage.BUILD

CONTEXT_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(NormalizeContext))

# camelCase keys as sent by JS callers / JSON fixtures
_FIELD_ALIASES = {
    "walletHint": "wallet_hint",
    "txHash": "tx_hash",
}


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _coerce(name: str, value: Any) -> Any:
    """Field value in canonical form; None when the value is unusable for that field."""
    if value is None:
        return None
    try:
        if name == "source":
            return ErrorSource(value)
        if name == "stage":
            return ErrorStage(value)
    except ValueError:
        logger.warning("normalize_context_invalid_field", field=name, value=str(value))
        return None
    if name == "timestamp" and isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    if isinstance(value, str):
        return value or None
    return str(value)


def context_fields(layer: ContextLayer) -> dict[str, Any]:
    """Known, non-None, coerced fields of one layer."""
    if layer is None:
        return {}
    if isinstance(layer, NormalizeContext):
        raw_items = {name: getattr(layer, name) for name in CONTEXT_FIELDS}
    elif isinstance(layer, Mapping):
        raw_items = {_FIELD_ALIASES.get(str(k), str(k)): v for k, v in layer.items()}
    else:
        logger.warning("normalize_context_invalid_layer", layer_type=type(layer).__name__)
        return {}

    out: dict[str, Any] = {}
    for name in CONTEXT_FIELDS:
        value = _coerce(name, raw_items.get(name))
        if value is not None:
            out[name] = value
    return out


def merge_context(defaults: ContextLayer = None, override: ContextLayer = None) -> NormalizeContext:
    """Effective NormalizeContext for one call; timestamp defaults to now (UTC)."""
    merged: dict[str, Any] = {"source": DEFAULT_SOURCE, "stage": DEFAULT_STAGE}
    merged.update(context_fields(defaults))
    merged.update(context_fields(override))
    if "timestamp" not in merged:
        merged["timestamp"] = now_iso()
    return NormalizeContext(**merged)
