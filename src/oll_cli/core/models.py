"""Domain models for oll-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from oll_cli.core.session import Session


# ---------------------------------------------------------------------------
# Handler results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Terminate:
    """Result variant asking the REPL to end the process.

    Only ``EXIT`` produces it.  The handler layer never stops the
    process itself; the REPL prints :attr:`message` and performs the
    shutdown.
    """

    message: str = "Bye!"
    """Farewell text printed before the process ends."""

    exit_code: int = 0
    """Process exit code handed to the termination primitive."""


CommandResult = Union[str, Terminate]
"""What a handler returns: rendered text, or a :class:`Terminate` request."""

Handler = Callable[["Session", Sequence[str], str], CommandResult]
"""Handler signature: ``(session, tokens, raw_line) -> CommandResult``."""


# ---------------------------------------------------------------------------
# Command descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    """Binding of a human title and help text to a handler function."""

    title: str
    """One-line summary shown in the ``HELP`` listing."""

    description: str
    """Usage text shown by ``HELP <KEYWORD>``."""

    handler: Handler
    """Callable executed when the keyword is dispatched."""


# ---------------------------------------------------------------------------
# Per-line invocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Invocation:
    """A tokenized input line, alive for one dispatch only."""

    raw_line: str
    tokens: tuple[str, ...]

    @property
    def keyword(self) -> str:
        """First token, or ``""`` for a blank line."""
        return self.tokens[0] if self.tokens else ""

    def __bool__(self) -> bool:
        return len(self.tokens) > 0
