"""
Message-pattern fallback for errors no recognizer understood.

Only applied while the classification is still UNKNOWN. Matchers are tried
in fixed order and the first hit wins; text matching several categories
(e.g. "too many requests" plus "daily request limit") resolves to the
earlier matcher.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Any, NamedTuple

from cardano_errors.core.codes import ErrorCode, ErrorSeverity
from cardano_errors.core.messages import extract_error_message, has_usable_message
from cardano_errors.core.models import Classification

MATCHER_META_KEY = "smart_matcher"

CONNECTIVITY_PATTERN = re.compile(
    r"failed to fetch|no connection|network(?:\s+is)?\s+(?:offline|down|unreachable)|econnrefused|enotfound|ehostunreach",
    re.IGNORECASE,
)


class MessageMatcher(NamedTuple):
    id: str
    pattern: re.Pattern[str]
    code: ErrorCode
    severity: ErrorSeverity


MESSAGE_MATCHERS: tuple[MessageMatcher, ...] = (
    MessageMatcher(
        "timeout",
        re.compile(r"\btimeout\b|timed out|request timeout|operation timeout", re.IGNORECASE),
        ErrorCode.TIMEOUT,
        ErrorSeverity.WARN,
    ),
    MessageMatcher(
        "network_unreachable",
        CONNECTIVITY_PATTERN,
        ErrorCode.NETWORK_UNREACHABLE,
        ErrorSeverity.ERROR,
    ),
    MessageMatcher(
        "rate_limited",
        re.compile(r"too many requests|rate.?limit", re.IGNORECASE),
        ErrorCode.RATE_LIMITED,
        ErrorSeverity.WARN,
    ),
    MessageMatcher(
        "quota_exceeded",
        re.compile(r"daily request limit|quota exceeded|project over limit|usage is over limit", re.IGNORECASE),
        ErrorCode.QUOTA_EXCEEDED,
        ErrorSeverity.WARN,
    ),
)


def match_message(message: str) -> MessageMatcher | None:
    for matcher in MESSAGE_MATCHERS:
        if matcher.pattern.search(message):
            return matcher
    return None


def apply_message_classifier(classification: Classification, err: Any) -> Classification:
    """
    Reclassify an UNKNOWN result from the error's message text.

    Returns a new Classification on a match (code, severity and message
    replaced, meta["smart_matcher"] added); otherwise the input unchanged.
    """
    if classification.code not in (None, ErrorCode.UNKNOWN):
        return classification

    message = extract_error_message(err)
    if not has_usable_message(message):
        return classification

    matcher = match_message(message)
    if matcher is None:
        return classification

    meta = dict(classification.meta)
    meta[MATCHER_META_KEY] = matcher.id
    return replace(
        classification,
        code=matcher.code,
        severity=matcher.severity,
        message=message,
        meta=meta,
    )
