"""
Shape recognizers for upstream Cardano error payloads.

Each recognizer is a plain function (err, ctx) -> Classification | None.
DEFAULT_RECOGNIZERS is the pipeline order used by the normalizer: wrapper
unwrapping first so nested payloads are tagged, then the direct shapes.
"""

from cardano_errors.recognizers.blockfrost import recognize_blockfrost_error
from cardano_errors.recognizers.mesh import recognize_mesh_error
from cardano_errors.recognizers.node_text import recognize_node_text_error
from cardano_errors.recognizers.wallet import (
    recognize_wallet_error,
    recognize_wallet_numeric,
    recognize_wallet_pagination,
)

DEFAULT_RECOGNIZERS = (
    recognize_mesh_error,
    recognize_wallet_error,
    recognize_blockfrost_error,
    recognize_node_text_error,
)

__all__ = [
    "DEFAULT_RECOGNIZERS",
    "recognize_blockfrost_error",
    "recognize_mesh_error",
    "recognize_node_text_error",
    "recognize_wallet_error",
    "recognize_wallet_numeric",
    "recognize_wallet_pagination",
]
