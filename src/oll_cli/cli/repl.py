"""Interactive read-dispatch-print loop.

The loop has two states, running and terminated.  It only leaves the
running state through ``EXIT`` (a :class:`~oll_cli.core.models.Terminate`
result) or end of input.  Every error raised by a command is printed
as an ``ERROR:`` line and the loop carries on.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import IO, Any, NoReturn

from rich.console import Console
from rich.text import Text

from oll_cli.cli import exit_codes
from oll_cli.cli.console import make_output_console
from oll_cli.core.dispatcher import Dispatcher
from oll_cli.core.models import Terminate
from oll_cli.exceptions import CanNotExitError, CommandNotExistError, OllCliError

logger = logging.getLogger(__name__)

GREETING = "O(lya-lya) greets you"

HELP_INFORMATION = (
    "Command is not exist.\n"
    "Run 'HELP' for usage or read more on https://github.com/dzyanis/olyalya"
)


class Repl:
    """Drive a :class:`Dispatcher` from a line-oriented input stream.

    Parameters
    ----------
    dispatcher:
        Executes each line against the session.
    console:
        Where prompts, results and errors go (default: stdout).
    stream:
        Where lines come from.  ``None`` reads through :func:`input`, which
        gives line editing on a terminal.
    exit_fn:
        Process-termination primitive called after ``EXIT``.  It must not
        return; if it does, :class:`CanNotExitError` is raised.
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        *,
        console: Console | None = None,
        stream: IO[str] | None = None,
        exit_fn: Callable[[int], Any] = sys.exit,
    ) -> None:
        self._dispatcher: Dispatcher = dispatcher
        self._console: Console = console or make_output_console()
        self._stream: IO[str] | None = stream
        self._exit_fn: Callable[[int], Any] = exit_fn
        self._running: bool = False

    @property
    def running(self) -> bool:
        return self._running

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Greet, then loop until ``EXIT`` or end of input.

        Returns
        -------
        int
            :data:`exit_codes.SUCCESS` when input runs out.  ``EXIT`` never
            returns here: it goes through *exit_fn*.
        """
        self._console.print(Text(GREETING))
        self._running = True
        while self._running:
            try:
                line = self._read_line()
            except EOFError:
                self._console.print()
                self._running = False
                break
            except KeyboardInterrupt:
                self._console.print()
                continue
            except (OSError, UnicodeDecodeError) as exc:
                self._print_error(str(exc))
                continue

            self.execute(line)
        return exit_codes.SUCCESS

    def execute(self, line: str) -> None:
        """Run one line and print its outcome."""
        try:
            result = self._dispatcher.run(line)
        except CommandNotExistError:
            self._console.print(Text(HELP_INFORMATION))
            return
        except OllCliError as exc:
            logger.debug("Command failed: %r", line, exc_info=True)
            self._print_error(str(exc), hint=exc.hint)
            return
        except Exception as exc:  # noqa: BLE001
            logger.debug("Unexpected failure running %r", line, exc_info=True)
            self._print_error(str(exc) or type(exc).__name__)
            return

        if isinstance(result, Terminate):
            self._terminate(result)
        if result:
            self._console.print(Text(result))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _read_line(self) -> str:
        prompt = Text(self._dispatcher.session.prompt)
        if self._stream is None:
            return self._console.input(prompt)
        line = self._console.input(prompt, stream=self._stream)
        if line == "":
            raise EOFError
        return line

    def _print_error(self, message: str, *, hint: str | None = None) -> None:
        self._console.print(Text.assemble(("ERROR: ", "bold red"), message))
        if hint:
            self._console.print(Text.assemble(("Hint: ", "yellow"), hint))

    def _terminate(self, result: Terminate) -> NoReturn:
        self._console.print(Text(result.message))
        self._running = False
        self._exit_fn(result.exit_code)
        raise CanNotExitError()
