"""
Structured logging for cardano_errors.

Use get_logger(__name__) in every module; configure_logging() changes level
or renderer at runtime (the CLI uses it for --log-level / --log-format).
"""

from cardano_errors.errors_logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
