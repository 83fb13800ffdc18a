"""
Error-safety wrappers: intercept failures from provider and wallet objects
and re-raise them as normalized CardanoAppError.
"""

from cardano_errors.safety.presets import cip30_wallet_preset, mesh_provider_preset
from cardano_errors.safety.safe_provider import SafeProxy, annotate_wrapped, with_error_safety

__all__ = [
    "SafeProxy",
    "annotate_wrapped",
    "cip30_wallet_preset",
    "mesh_provider_preset",
    "with_error_safety",
]
