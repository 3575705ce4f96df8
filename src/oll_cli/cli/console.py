"""Rich consoles and logging setup for the CLI layer.

Two destinations are kept apart:

* **stdout** — the REPL prompt, command results and ``ERROR:`` lines.
* **stderr** — log records and the process-level error boundary.

Keeping logs on stderr means ``oll-cli < script.txt > out.txt`` captures
command output only.
"""

from __future__ import annotations

import logging
from typing import IO

from rich.console import Console
from rich.logging import RichHandler


def make_output_console(file: IO[str] | None = None) -> Console:
    """Create the console the REPL writes to.

    Soft wrapping keeps long values on one line and ``highlight=False``
    stops Rich from colouring numbers and brackets inside stored data.
    """
    return Console(file=file, soft_wrap=True, highlight=False)


def configure_logging(level: str = "WARNING", *, target: Console | None = None) -> None:
    """Route the root logger through a single :class:`RichHandler`.

    Calling it again replaces the previous handler rather than stacking
    a second one.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=target or console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    root_logger.setLevel(level)
    root_logger.addHandler(rich_handler)


console = Console(stderr=True)
"""Shared stderr console for diagnostics and the error boundary."""
