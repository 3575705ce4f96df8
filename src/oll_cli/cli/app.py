"""CLI application entry point for oll-cli.

This module is the **sole error boundary** for the entire application.
Command errors are handled inside the REPL; anything that escapes it
(configuration problems, a failed shutdown, bugs) is caught here,
rendered via Rich on stderr, and turned into a well-defined exit code.

Architecture notes
------------------
* No business logic lives here — commands run in the core layer and
  store access in the infrastructure layer.
* This module is the only place that wires concrete collaborators
  (:class:`HttpStoreClient`) into a :class:`Session`.
"""

from __future__ import annotations

import argparse
import logging
import sys

from oll_cli.cli import exit_codes
from oll_cli.cli.console import configure_logging, console
from oll_cli.cli.repl import Repl
from oll_cli.config import DEFAULT_HTTP_ADDR, load_settings
from oll_cli.core.dispatcher import Dispatcher
from oll_cli.core.handlers import build_registry
from oll_cli.core.session import Session
from oll_cli.exceptions import CanNotExitError, OllCliError
from oll_cli.infra.http_client import HttpStoreClient
from oll_cli.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Single-dash long flags (``-http.addr``, ``-version``) are the
    canonical spelling; double-dash aliases are accepted as well.
    """
    parser = argparse.ArgumentParser(
        prog="oll-cli",
        description="Interactive shell for the O(lya-lya) key-value store.",
    )
    parser.add_argument(
        "-version",
        "--version",
        action="version",
        version=f"O(lya-lya) client build: {__version__}",
        help="Print the client build and exit.",
    )
    parser.add_argument(
        "-http.addr",
        "--http.addr",
        dest="http_addr",
        default=None,
        metavar="URL",
        help=f"Store address (default: $OLL_HTTP_ADDR or {DEFAULT_HTTP_ADDR}).",
    )
    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the oll-cli shell.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code once input runs out.  ``EXIT`` leaves
        through :func:`sys.exit` from inside the REPL.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = load_settings().with_overrides(http_addr=args.http_addr)
    configure_logging(settings.log_level)
    logger.debug("Connecting to store at %s", settings.http_addr)

    with HttpStoreClient(settings.http_addr, timeout=settings.timeout) as client:
        session = Session(registry=build_registry(), client=client)
        return Repl(Dispatcher(session)).run()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CanNotExitError as exc:
        console.print(f"[bold red]Fatal:[/bold red] {exc}")
        sys.exit(exit_codes.UNEXPECTED_ERROR)
    except OllCliError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
