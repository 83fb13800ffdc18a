"""
Environment variable loading for the error normalizer.

- CARDANO_ERRORS_FINGERPRINT: attach fingerprints to normalized errors (default: off)
- CARDANO_ERRORS_PARSE_TRACES: collect trace/stack lines into meta (default: off)
- CARDANO_ERRORS_DEBUG: log input, context and output of every normalize call (default: off)
- CARDANO_NETWORK: default network tag (mainnet | preprod | preview | sanchonet)
- CARDANO_PROVIDER: default provider name (blockfrost, koios, ogmios, ...)
- Loads .env from the working directory when available.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

KNOWN_NETWORKS = ("mainnet", "preprod", "preview", "sanchonet")

_TRUE_VALUES = ("1", "true", "yes", "on")


def load_normalizer_env() -> None:
    """Load .env from the current directory. Safe to call multiple times."""
    load_dotenv(override=False)


def _env_flag(name: str, default: bool = False) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in _TRUE_VALUES


def get_fingerprint_enabled() -> bool:
    """CARDANO_ERRORS_FINGERPRINT as bool."""
    load_normalizer_env()
    return _env_flag("CARDANO_ERRORS_FINGERPRINT")


def get_parse_traces_enabled() -> bool:
    """CARDANO_ERRORS_PARSE_TRACES as bool."""
    load_normalizer_env()
    return _env_flag("CARDANO_ERRORS_PARSE_TRACES")


def get_debug_enabled() -> bool:
    """CARDANO_ERRORS_DEBUG as bool."""
    load_normalizer_env()
    return _env_flag("CARDANO_ERRORS_DEBUG")


def get_cardano_network() -> str | None:
    """
    Return CARDANO_NETWORK from env, lower-cased.
    Unrecognised values are kept as-is so custom devnets still show up; empty -> None.
    """
    load_normalizer_env()
    raw = (os.getenv("CARDANO_NETWORK") or "").strip().lower()
    if not raw:
        return None
    if raw == "mainnet-beta":
        return "mainnet"
    return raw


def get_cardano_provider() -> str | None:
    """Return CARDANO_PROVIDER from env; empty -> None."""
    load_normalizer_env()
    raw = (os.getenv("CARDANO_PROVIDER") or "").strip()
    return raw or None
