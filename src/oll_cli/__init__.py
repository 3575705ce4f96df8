"""oll-cli — interactive shell for the O(lya-lya) key-value store.

Typed commands are parsed, validated and dispatched to handlers that talk
to the store over HTTP.
"""

from oll_cli.version import __version__

__all__: list[str] = ["__version__"]
