# SPDX-License-Identifier: MIT
"""Tests for checker base types."""

import pytest

from devready.services.checkers.base import Absent, CheckResult, Present


class TestProbeOutcome:
    def test_present_is_ok(self) -> None:
        assert Present().ok is True

    def test_absent_is_not_ok(self) -> None:
        outcome = Absent("node: not found")
        assert outcome.ok is False
        assert outcome.reason == "node: not found"


class TestCheckResult:
    """Tests for CheckResult dataclass."""

    def test_present(self) -> None:
        result = CheckResult.present("Used for things.")
        assert result.installed is True
        assert result.info == "Used for things."
        assert result.error is None

    def test_absent(self) -> None:
        result = CheckResult.absent("Used for things.", "Thing was not found.")
        assert result.installed is False
        assert result.error == "Thing was not found."

    def test_installed_with_error_rejected(self) -> None:
        with pytest.raises(ValueError):
            CheckResult(installed=True, info="info", error="boom")

    def test_missing_without_error_rejected(self) -> None:
        with pytest.raises(ValueError):
            CheckResult(installed=False, info="info")

    def test_to_dict_present_omits_error(self) -> None:
        assert CheckResult.present("info").to_dict() == {"installed": True, "info": "info"}

    def test_to_dict_absent(self) -> None:
        assert CheckResult.absent("info", "missing").to_dict() == {
            "installed": False,
            "info": "info",
            "error": "missing",
        }

    def test_frozen(self) -> None:
        result = CheckResult.present("info")
        with pytest.raises(AttributeError):
            result.installed = False  # type: ignore[misc]
