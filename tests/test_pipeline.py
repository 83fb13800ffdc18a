"""
Tests for the recognizer pipeline (pipeline.run_recognizers).
"""

from __future__ import annotations

from unittest.mock import MagicMock

from cardano_errors.core.codes import ErrorCode
from cardano_errors.core.models import Classification
from cardano_errors.core.pipeline import recognizer_name, run_recognizer, run_recognizers
from cardano_errors.normalizer import NormalizerConfig, create_normalizer


def _returning(code):
    def recognizer(err, ctx=None):
        return Classification(code=code)

    return recognizer


def _raising(err, ctx=None):
    raise ValueError("recognizer bug")


def _none(err, ctx=None):
    return None


def test_first_match_wins():
    out = run_recognizers([_none, _returning(ErrorCode.TIMEOUT), _returning(ErrorCode.NOT_FOUND)], {}, None)
    assert out.code == ErrorCode.TIMEOUT


def test_raising_recognizer_is_skipped():
    out = run_recognizers([_raising, _returning(ErrorCode.NOT_FOUND)], {}, None)
    assert out.code == ErrorCode.NOT_FOUND


def test_non_classification_result_is_no_match():
    bogus = MagicMock(return_value={"code": "TIMEOUT"})
    assert run_recognizer(bogus, {}, None) is None
    bogus.assert_called_once_with({}, None)


def test_no_match_returns_none():
    assert run_recognizers([], {}, None) is None
    assert run_recognizers([_none, _raising], {}, None) is None


def test_later_recognizers_not_called_after_match():
    later = MagicMock()
    run_recognizers([_returning(ErrorCode.TIMEOUT), later], {}, None)
    later.assert_not_called()


def test_recognizer_name():
    assert recognizer_name(_raising) == "_raising"


def test_normalizer_survives_all_recognizers_raising():
    normalizer = create_normalizer(NormalizerConfig(recognizers=[_raising, _raising]))
    out = normalizer.normalize({"message": "opaque failure"})
    assert out.code == ErrorCode.UNKNOWN
    assert out.message == "opaque failure"
