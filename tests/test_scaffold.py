"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* Logging is routed through a single Rich handler.
"""

from __future__ import annotations

import io
import logging
from unittest.mock import MagicMock, patch

import pytest
from rich.logging import RichHandler

from oll_cli import __version__
from oll_cli.cli import exit_codes
from oll_cli.cli.app import cli, main
from oll_cli.cli.console import configure_logging
from oll_cli.exceptions import (
    CanNotExitError,
    CommandNotExistError,
    ConfigurationError,
    DecodingError,
    InvalidIntegerError,
    InvalidMappingError,
    InvalidSequenceError,
    NoInstanceSelectedError,
    NotEnoughArgumentsError,
    OllCliError,
    StoreConnectionError,
    StoreError,
    StoreResponseError,
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
            NotEnoughArgumentsError,
            CommandNotExistError,
            DecodingError,
            StoreError,
            ConfigurationError,
            CanNotExitError,
        ],
    )
    def test_all_exceptions_inherit_from_base(self, exc_class: type[OllCliError]) -> None:
        assert issubclass(exc_class, OllCliError)

    @pytest.mark.parametrize(
        "exc_class", [InvalidIntegerError, InvalidSequenceError, InvalidMappingError],
    )
    def test_decoding_errors(self, exc_class: type[OllCliError]) -> None:
        assert issubclass(exc_class, DecodingError)

    @pytest.mark.parametrize(
        "exc_class", [StoreConnectionError, StoreResponseError, NoInstanceSelectedError],
    )
    def test_store_errors(self, exc_class: type[OllCliError]) -> None:
        assert issubclass(exc_class, StoreError)

    def test_default_messages(self) -> None:
        assert str(NotEnoughArgumentsError()) == "Not enough arguments"
        assert str(CommandNotExistError()) == "Command is not exist"
        assert str(CanNotExitError()) == "Something really went wrong"

    def test_hint_is_stored(self) -> None:
        err = OllCliError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert OllCliError("boom").hint is None

    def test_response_error_keeps_status(self) -> None:
        err = StoreResponseError("gone", status_code=404)
        assert err.status_code == 404


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
    @pytest.mark.parametrize("flag", ["-version", "--version"])
    def test_version_flag(self, flag: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([flag])
        assert exc_info.value.code == 0
        assert f"O(lya-lya) client build: {__version__}" in capsys.readouterr().out

    def test_unknown_flag_is_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-nope"])
        assert exc_info.value.code == 2

    @patch("oll_cli.cli.app.HttpStoreClient")
    def test_default_address(
        self,
        client_cls: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("OLL_HTTP_ADDR", raising=False)
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main([]) == exit_codes.SUCCESS
        assert client_cls.call_args.args[0] == "http://localhost:3000"

    @patch("oll_cli.cli.app.HttpStoreClient")
    def test_http_addr_flag_overrides_environment(
        self,
        client_cls: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("OLL_HTTP_ADDR", "http://env:1")
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        main(["-http.addr", "http://flag:2"])
        assert client_cls.call_args.args[0] == "http://flag:2"

    @patch("oll_cli.cli.app.HttpStoreClient")
    def test_session_runs_commands_from_stdin(
        self,
        client_cls: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        client = client_cls.return_value.__enter__.return_value
        client.current_instance_name.return_value = "main"
        client.get.return_value = "value"
        monkeypatch.setattr("sys.stdin", io.StringIO("GET name\nEXIT\n"))

        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "O(lya-lya) greets you" in out
        assert "value" in out
        assert "Bye!" in out
        client.get.assert_called_once_with("name")
        client_cls.return_value.__exit__.assert_called_once()


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    @pytest.mark.parametrize(
        ("raised", "expected"),
        [
            (ConfigurationError("bad"), exit_codes.GENERAL_ERROR),
            (CanNotExitError(), exit_codes.UNEXPECTED_ERROR),
            (KeyboardInterrupt(), exit_codes.KEYBOARD_INTERRUPT),
            (RuntimeError("bug"), exit_codes.UNEXPECTED_ERROR),
        ],
    )
    def test_exception_maps_to_exit_code(self, raised: BaseException, expected: int) -> None:
        with patch("oll_cli.cli.app.main", side_effect=raised):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == expected

    def test_clean_return_exits_with_code(self) -> None:
        with patch("oll_cli.cli.app.main", return_value=exit_codes.SUCCESS):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestLogging:
    def test_single_rich_handler_after_reconfigure(self) -> None:
        configure_logging("INFO")
        configure_logging("DEBUG")
        root = logging.getLogger()
        handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert root.level == logging.DEBUG
        configure_logging("WARNING")
