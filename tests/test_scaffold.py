"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from greetme import __version__
from greetme.cli import exit_codes
from greetme.exceptions import (
    BackendUnavailableError,
    EnvironmentError,
    GreetmeError,
    PromptCancelledError,
    StorageError,
    StorageIOError,
    UsageError,
    usage_examples,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            PromptCancelledError,
            EnvironmentError,
            StorageError,
            BackendUnavailableError,
            StorageIOError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[GreetmeError]
    ) -> None:
        assert issubclass(exc_class, GreetmeError)

    @pytest.mark.parametrize("exc_class", [BackendUnavailableError, StorageIOError])
    def test_storage_errors_share_base(self, exc_class: type[GreetmeError]) -> None:
        assert issubclass(exc_class, StorageError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(GreetmeError, Exception)

    def test_hint_is_stored(self) -> None:
        err = GreetmeError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = GreetmeError("boom")
        assert err.hint is None

    def test_usage_examples_mention_save(self) -> None:
        text = usage_examples()
        assert "--save" in text
        assert "--name=John" in text


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2
