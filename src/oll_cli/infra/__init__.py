"""Infrastructure layer — external system integration.

This layer wraps all interaction with the O(lya-lya) HTTP server.  Every
raw third-party exception must be caught here and re-raised as a
:class:`~oll_cli.exceptions.StoreError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from oll_cli.infra.http_client import HttpStoreClient

__all__: list[str] = [
    "HttpStoreClient",
]
