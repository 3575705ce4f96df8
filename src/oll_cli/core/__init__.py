"""Core layer — command registry, dispatch, decoding and handlers.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O; the store is reached only through the
  :class:`~oll_cli.core.protocols.StoreClient` protocol.
* No imports from ``cli`` or ``infra``.
"""

from oll_cli.core.dispatcher import Dispatcher
from oll_cli.core.handlers import DEFAULT_COMMANDS, build_registry
from oll_cli.core.models import CommandDescriptor, CommandResult, Invocation, Terminate
from oll_cli.core.protocols import StoreClient, Tokenizer
from oll_cli.core.registry import CommandRegistry
from oll_cli.core.session import Session
from oll_cli.core.tokenizer import split_line

__all__: list[str] = [
    "DEFAULT_COMMANDS",
    "CommandDescriptor",
    "CommandRegistry",
    "CommandResult",
    "Dispatcher",
    "Invocation",
    "Session",
    "StoreClient",
    "Terminate",
    "Tokenizer",
    "build_registry",
    "split_line",
]
