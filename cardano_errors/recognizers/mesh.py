"""
Mesh / meta-SDK wrapper recognizer.

SDKs such as Mesh wrap provider, wallet and node errors in their own error
objects (cause, innerError, response.data, ...). This recognizer never
classifies the wrapper itself: it walks the nested values (root excluded)
and retries the shape recognizers on each one, in traversal order. The
first match is adopted with the outer value kept as raw and
meta["mesh_unwrapped"] set.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Sequence

from cardano_errors.core.candidates import collect_candidates
from cardano_errors.core.models import Classification, NormalizeContext
from cardano_errors.core.pipeline import Recognizer, run_recognizer
from cardano_errors.recognizers.blockfrost import recognize_blockfrost_error
from cardano_errors.recognizers.node_text import recognize_node_text_error
from cardano_errors.recognizers.wallet import recognize_wallet_error

UNWRAPPED_META_KEY = "mesh_unwrapped"

DEFAULT_DELEGATES: tuple[Recognizer, ...] = (
    recognize_wallet_error,
    recognize_blockfrost_error,
    recognize_node_text_error,
)


def recognize_mesh_error(
    err: Any,
    ctx: NormalizeContext | None = None,
    delegates: Sequence[Recognizer] = DEFAULT_DELEGATES,
) -> Classification | None:
    """Classify the first nested value any delegate recognizes; None for unwrappable or opaque input."""
    nested = collect_candidates(err, include_root=False)
    if not nested:
        return None

    for candidate in nested:
        for delegate in delegates:
            mapped = run_recognizer(delegate, candidate, ctx)
            if mapped is None:
                continue
            meta = dict(mapped.meta)
            meta[UNWRAPPED_META_KEY] = True
            return replace(mapped, raw=err, meta=meta)

    return None
