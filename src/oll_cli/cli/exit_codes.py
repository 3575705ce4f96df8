"""Process exit codes.

Every path out of the process uses one of these names so tests can
assert on them.
"""

from __future__ import annotations

SUCCESS: int = 0
"""``EXIT``, end of input, or ``-version``."""

GENERAL_ERROR: int = 1
"""An :class:`~oll_cli.exceptions.OllCliError` escaped the REPL (e.g. bad configuration)."""

UNEXPECTED_ERROR: int = 2
"""A bug, or the shell could not terminate after ``EXIT``."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C outside the prompt (128 + SIGINT)."""
