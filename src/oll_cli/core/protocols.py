"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol


class Tokenizer(Protocol):
    """Contract for the line splitter used by the dispatcher.

    Implementations split on whitespace at minimum and must keep quoted
    strings and JSON literals intact — handlers decode those tokens
    themselves.
    """

    def __call__(self, raw_line: str) -> list[str]:
        ...  # pragma: no cover


class StoreClient(Protocol):
    """Contract for key-value store backends.

    Every method either returns its value or raises a
    :class:`~oll_cli.exceptions.StoreError` subclass.  The command layer
    does not look inside those errors; it only forwards them to the
    user.

    Instance-scoped methods (everything except the instance management
    group) operate on the instance chosen by :meth:`select_instance`.
    """

    # -- instances ---------------------------------------------------------

    def list_instances(self) -> list[str]:
        """Return the names of all instances on the store."""
        ...  # pragma: no cover

    def create_instance(self, name: str) -> None:
        ...  # pragma: no cover

    def select_instance(self, name: str) -> None:
        """Make *name* the current instance for later calls."""
        ...  # pragma: no cover

    def current_instance_name(self) -> str:
        """Return the selected instance name, or ``""`` when none is."""
        ...  # pragma: no cover

    def destroy(self, name: str) -> None:
        ...  # pragma: no cover

    # -- scalars -----------------------------------------------------------

    def keys(self) -> list[str]:
        ...  # pragma: no cover

    def set(self, name: str, value: str, ttl: int) -> None:
        """Store a scalar.  *ttl* is in seconds; ``0`` means no expiry."""
        ...  # pragma: no cover

    def get(self, name: str) -> str:
        ...  # pragma: no cover

    def delete(self, name: str) -> None:
        ...  # pragma: no cover

    def set_ttl(self, name: str, seconds: int) -> None:
        ...  # pragma: no cover

    def delete_ttl(self, name: str) -> None:
        ...  # pragma: no cover

    # -- arrays ------------------------------------------------------------

    def set_array(self, name: str, elements: Sequence[str], ttl: int) -> None:
        ...  # pragma: no cover

    def get_array(self, name: str) -> list[str]:
        ...  # pragma: no cover

    def get_array_element(self, name: str, index: int) -> str:
        """Return the element at the 0-based *index*."""
        ...  # pragma: no cover

    def add_array_element(self, name: str, value: str) -> None:
        ...  # pragma: no cover

    def set_array_element(self, name: str, index: int, value: str) -> None:
        ...  # pragma: no cover

    def delete_array_element(self, name: str, index: int) -> None:
        ...  # pragma: no cover

    # -- hashes ------------------------------------------------------------

    def set_hash(self, name: str, mapping: Mapping[str, str], ttl: int) -> None:
        ...  # pragma: no cover

    def get_hash(self, name: str) -> dict[str, str]:
        ...  # pragma: no cover

    def get_hash_element(self, name: str, key: str) -> str:
        ...  # pragma: no cover

    def set_hash_element(self, name: str, key: str, value: str) -> None:
        ...  # pragma: no cover

    def delete_hash_element(self, name: str, key: str) -> None:
        ...  # pragma: no cover
