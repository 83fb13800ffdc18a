"""
Pytest fixtures for cardano_errors tests.

Environment flags are cleared per test and the default normalizer cache is
reset, so tests never see settings leaked from the shell or another test.
"""

from __future__ import annotations

import pytest

from cardano_errors.normalizer import NormalizerConfig, create_normalizer, get_default_normalizer

ENV_VARS = (
    "CARDANO_ERRORS_FINGERPRINT",
    "CARDANO_ERRORS_PARSE_TRACES",
    "CARDANO_ERRORS_DEBUG",
    "CARDANO_NETWORK",
    "CARDANO_PROVIDER",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset normalizer env vars, skip .env loading and rebuild the default normalizer."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("cardano_errors.config.env.load_normalizer_env", lambda: None)
    get_default_normalizer.cache_clear()
    yield
    get_default_normalizer.cache_clear()


@pytest.fixture
def normalizer():
    """Normalizer with default recognizers and all options off."""
    return create_normalizer()


@pytest.fixture
def fingerprinting_normalizer():
    return create_normalizer(NormalizerConfig(include_fingerprint=True))


@pytest.fixture
def blockfrost_quota_body() -> dict:
    return {
        "status_code": 402,
        "error": "Project Over Limit",
        "message": "Daily request limit has been exceeded",
    }
