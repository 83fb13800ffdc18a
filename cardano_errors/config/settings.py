"""
Normalizer settings resolved from environment configuration.

Settings are read once per call to get_settings(); the default normalizer
caches the result, so changes to the environment after first use only
affect normalizers built explicitly from a fresh Settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cardano_errors.config.env import (
    get_cardano_network,
    get_cardano_provider,
    get_debug_enabled,
    get_fingerprint_enabled,
    get_parse_traces_enabled,
)


@dataclass(frozen=True)
class Settings:
    """Environment-derived defaults for the error normalizer."""

    include_fingerprint: bool = False
    parse_traces: bool = False
    debug: bool = False
    network: str | None = None
    provider: str | None = None

    def default_context(self) -> dict[str, Any]:
        """Bound context defaults contributed by the environment (only fields that are set)."""
        out: dict[str, Any] = {}
        if self.network:
            out["network"] = self.network
        if self.provider:
            out["provider"] = self.provider
        return out


def get_settings() -> Settings:
    """Return Settings built from the current environment (and .env)."""
    return Settings(
        include_fingerprint=get_fingerprint_enabled(),
        parse_traces=get_parse_traces_enabled(),
        debug=get_debug_enabled(),
        network=get_cardano_network(),
        provider=get_cardano_provider(),
    )
