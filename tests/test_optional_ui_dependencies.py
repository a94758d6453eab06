"""Regression tests for the optional Rich dependency.

These tests verify bootstrap commands and every sub-command keep
working when Rich is missing, falling back to plain stderr output.
"""

from __future__ import annotations

import logging
import sys

import pytest

from build_args.cli import exit_codes
from build_args.cli.app import main
from build_args.cli.console import get_rich_console
from build_args.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_list_falls_back_to_plain_table(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["list", "--", "-configuration=Release"])
    assert code == exit_codes.SUCCESS
    err = capsys.readouterr().err
    assert "configuration" in err
    assert "Release" in err


def test_verbose_logging_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    main(["--verbose", "has", "x"])
    handlers = logging.getLogger("build_args").handlers
    assert len(handlers) == 1
    assert type(handlers[0]) is logging.StreamHandler


def test_rich_console_reports_missing_dependency(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()
