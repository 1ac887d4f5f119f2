"""Tests for ResultAssertions."""

from __future__ import annotations

import pytest

from railway import ErrorCode, Result, ResultAssertions


class TestResultAssertions:
    def test_assert_success_returns_value(self):
        assert ResultAssertions.assert_success(Result.success("dn")) == "dn"

    def test_assert_success_on_failure_raises(self):
        with pytest.raises(AssertionError, match="Expected Success"):
            ResultAssertions.assert_success(Result.failure(ErrorCode.NOT_FOUND, "missing"))

    def test_assert_failure_checks_code(self):
        result = Result.failure(ErrorCode.VALIDATION_ERROR, "bad subject")
        error = ResultAssertions.assert_failure(result, ErrorCode.VALIDATION_ERROR)
        assert error.message == "bad subject"
        with pytest.raises(AssertionError, match="Expected error code"):
            ResultAssertions.assert_failure(result, ErrorCode.NOT_FOUND)

    def test_assert_failure_message_contains_is_case_insensitive(self):
        ResultAssertions.assert_failure_message_contains(
            Result.failure(ErrorCode.NOT_FOUND, "Topology file missing"), "topology"
        )
