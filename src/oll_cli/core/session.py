"""Session context shared by the dispatcher and every handler."""

from __future__ import annotations

from dataclasses import dataclass

from oll_cli.core.protocols import StoreClient
from oll_cli.core.registry import CommandRegistry


@dataclass(frozen=True, slots=True)
class Session:
    """Everything a handler may touch during one REPL run.

    Built once at start-up and passed down explicitly; there is no
    module-level client or registry.
    """

    registry: CommandRegistry
    client: StoreClient

    @property
    def prompt(self) -> str:
        """Prompt text, e.g. ``"users> "``, or ``"> "`` before ``SELECT``."""
        return f"{self.client.current_instance_name()}> "
