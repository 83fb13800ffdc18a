"""
Configuration management for the error normalizer.

Loads defaults from environment variables and an optional .env file.
"""

from cardano_errors.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
