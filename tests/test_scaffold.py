"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from build_args import __version__
from build_args.cli import exit_codes
from build_args.cli.app import main
from build_args.exceptions import (
    ArgumentSyntaxError,
    BuildArgsError,
    ConversionError,
    EnvironmentError,
    InvalidInputError,
    MissingArgumentError,
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
            InvalidInputError,
            MissingArgumentError,
            ConversionError,
            ArgumentSyntaxError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[BuildArgsError]
    ) -> None:
        assert issubclass(exc_class, BuildArgsError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(BuildArgsError, Exception)

    def test_hint_is_stored(self) -> None:
        err = BuildArgsError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = BuildArgsError("boom")
        assert err.hint is None

    def test_missing_argument_carries_name(self) -> None:
        err = MissingArgumentError("loopCount")
        assert err.name == "loopCount"
        assert "loopCount" in str(err)
        assert err.hint is not None and "-loopCount=" in err.hint

    def test_conversion_error_carries_raw_and_type(self) -> None:
        err = ConversionError("abc", int, reason="not a number")
        assert err.raw_value == "abc"
        assert err.target_type is int
        assert str(err) == "Cannot convert 'abc' to int: not a number"

    def test_conversion_error_accepts_string_tag(self) -> None:
        err = ConversionError("x", "widget")
        assert str(err) == "Cannot convert 'x' to widget"


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


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "build-args" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_list_routes_to_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from build_args.cli import app as app_module

        seen: list[list[str]] = []
        monkeypatch.setattr(
            app_module,
            "_handle_list",
            lambda build_argv: seen.append(list(build_argv)) or exit_codes.SUCCESS,
        )
        code = main(["list", "--", "-configuration=Release"])
        assert code == exit_codes.SUCCESS
        assert seen == [["-configuration=Release"]]
