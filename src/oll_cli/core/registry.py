"""Command registry — keyword to :class:`CommandDescriptor` mapping."""

from __future__ import annotations

from collections.abc import Iterator

from oll_cli.core.models import CommandDescriptor
from oll_cli.exceptions import CommandNotExistError


class CommandRegistry:
    """Mutable during start-up, read-only once the REPL is running.

    Keywords are matched exactly; ``set`` and ``SET`` are different
    keys.  Registering an existing keyword replaces its descriptor.
    """

    def __init__(self) -> None:
        self._commands: dict[str, CommandDescriptor] = {}

    def register(self, keyword: str, descriptor: CommandDescriptor) -> None:
        self._commands[keyword] = descriptor

    def get(self, keyword: str) -> CommandDescriptor | None:
        return self._commands.get(keyword)

    def lookup(self, keyword: str) -> CommandDescriptor:
        """Return the descriptor for *keyword*.

        Raises
        ------
        CommandNotExistError
            When nothing is registered under *keyword*.
        """
        descriptor = self._commands.get(keyword)
        if descriptor is None:
            raise CommandNotExistError()
        return descriptor

    def list_all(self) -> list[tuple[str, CommandDescriptor]]:
        """Return every ``(keyword, descriptor)`` pair, sorted by keyword."""
        return sorted(self._commands.items())

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._commands

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
