"""Regression tests for the optional Rich dependency.

Bootstrap commands and validation messages must keep working when
Rich is missing; output then falls back to plain stderr text.
"""

from __future__ import annotations

import sys

import pytest

from pumpfun_cli.cli import exit_codes
from pumpfun_cli.cli.app import main
from pumpfun_cli.cli.console import escape, get_rich_console, strip_markup
from pumpfun_cli.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_get_rich_console_raises_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_validation_message_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["migrate"], environ={})

    assert code == exit_codes.VALIDATION_ERROR
    err = capsys.readouterr().err
    assert "Error: missing token address" in err
    assert "[bold" not in err


def test_strip_markup() -> None:
    assert strip_markup("[bold red]Error:[/bold red] boom") == "Error: boom"
    assert strip_markup("plain [1, 2]") == "plain [1, 2]"


def test_escaped_text_survives_strip_markup(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    for text in ("./keys/[dev]/id.json", "[/]", "bad [red]x", "C:\\keys\\[id].json"):
        assert strip_markup(escape(text)) == text


def test_bracketed_keypair_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["withdraw", "-k", "./keys/[dev]/id.json", "-e", "[/]"], environ={})

    assert code == exit_codes.VALIDATION_ERROR
    err = capsys.readouterr().err
    assert "Keypair Path: ./keys/[dev]/id.json" in err
    assert "Solana Cluster: [/]" in err
