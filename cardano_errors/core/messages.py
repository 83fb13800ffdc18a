"""
Best-effort message extraction.

Order: non-empty string verbatim, exception text, object/dict "message"
field, else the NO_USABLE_MESSAGE sentinel.
"""

from __future__ import annotations

from typing import Any

from cardano_errors.core.candidates import get_field

NO_USABLE_MESSAGE = "Unknown Cardano error"


def extract_error_message(err: Any) -> str:
    """Return a non-empty human message for err; NO_USABLE_MESSAGE when none is found."""
    if isinstance(err, str):
        return err if err else NO_USABLE_MESSAGE

    if isinstance(err, BaseException):
        try:
            text = str(err)
        except Exception:
            text = ""
        if text:
            return text

    message = get_field(err, "message")
    if isinstance(message, str) and message:
        return message

    return NO_USABLE_MESSAGE


def has_usable_message(message: str) -> bool:
    return message != NO_USABLE_MESSAGE


def letters_only(text: str) -> str:
    """Lower-case text with every non a-z character removed."""
    return "".join(ch for ch in text.lower() if "a" <= ch <= "z")
