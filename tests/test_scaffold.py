"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from pumpfun_cli import __version__
from pumpfun_cli.cli import exit_codes
from pumpfun_cli.cli.app import main
from pumpfun_cli.exceptions import (
    BackendNotFoundError,
    ClusterConfigError,
    EnvironmentError,
    InvalidAddressError,
    InvalidParameterError,
    MissingParameterError,
    OperationError,
    PumpfunCliError,
    ValidationError,
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
            ValidationError,
            MissingParameterError,
            InvalidParameterError,
            InvalidAddressError,
            ClusterConfigError,
            OperationError,
            EnvironmentError,
            BackendNotFoundError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[PumpfunCliError]
    ) -> None:
        assert issubclass(exc_class, PumpfunCliError)

    @pytest.mark.parametrize(
        "exc_class",
        [MissingParameterError, InvalidParameterError, InvalidAddressError],
    )
    def test_local_checks_are_validation_errors(
        self, exc_class: type[PumpfunCliError]
    ) -> None:
        assert issubclass(exc_class, ValidationError)

    def test_backend_errors_are_not_validation_errors(self) -> None:
        assert not issubclass(ClusterConfigError, ValidationError)
        assert not issubclass(OperationError, ValidationError)

    def test_hint_is_stored(self) -> None:
        err = PumpfunCliError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = PumpfunCliError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_validation_error_is_one(self) -> None:
        assert exit_codes.VALIDATION_ERROR == 1

    def test_operation_error_is_two(self) -> None:
        assert exit_codes.OPERATION_ERROR == 2

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI bootstrap
# ---------------------------------------------------------------------------

class TestCLIBootstrap:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([], environ={})
        assert code == exit_codes.SUCCESS
        assert "swap" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_unknown_command_is_rejected_by_parser(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["removeWl"], environ={})
        assert exc_info.value.code == 2

    def test_command_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["swap", "--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "--token" in out
        assert "0: buy token, 1: sell token" in out
