"""Dispatcher — resolves a raw line to a handler and runs it.

Guarantees
----------
* No ``print()``; the REPL owns all output.
* Handler errors propagate unchanged (no wrapping).
* Blank lines are a no-op, never an unknown command.
"""

from __future__ import annotations

import logging

from oll_cli.core.models import CommandResult, Invocation
from oll_cli.core.protocols import Tokenizer
from oll_cli.core.session import Session
from oll_cli.core.tokenizer import split_line

logger = logging.getLogger(__name__)


class Dispatcher:
    """Turns input lines into handler calls.

    Parameters
    ----------
    session:
        Registry and store client handed to every handler.
    tokenizer:
        Line splitter; defaults to :func:`~oll_cli.core.tokenizer.split_line`.
    """

    def __init__(self, session: Session, tokenizer: Tokenizer = split_line) -> None:
        self._session: Session = session
        self._tokenizer: Tokenizer = tokenizer

    @property
    def session(self) -> Session:
        return self._session

    def parse(self, raw_line: str) -> Invocation:
        """Tokenize *raw_line* without executing anything."""
        return Invocation(raw_line=raw_line, tokens=tuple(self._tokenizer(raw_line)))

    def run(self, raw_line: str) -> CommandResult:
        """Execute one command line.

        Returns
        -------
        str | Terminate
            Whatever the handler returned; ``""`` for a blank line.

        Raises
        ------
        CommandNotExistError
            When the keyword is not registered (exact-case match).
        OllCliError
            Any error raised by the handler, unchanged.
        """
        invocation = self.parse(raw_line)
        if not invocation:
            return ""

        descriptor = self._session.registry.lookup(invocation.keyword)
        logger.debug(
            "Dispatching %s with %d argument(s)",
            invocation.keyword,
            len(invocation.tokens) - 1,
        )
        return descriptor.handler(self._session, list(invocation.tokens), invocation.raw_line)
