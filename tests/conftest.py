"""Shared pytest fixtures and configuration for the oll-cli test suite.

Guidelines
----------
* No network access in any test.
* The store is replaced either by :class:`FakeStoreClient` (round trips)
  or by a ``MagicMock`` (call assertions).
* httpx is exercised only through ``httpx.MockTransport``.
"""

from __future__ import annotations

import io
from collections.abc import Mapping, Sequence
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from oll_cli.core.dispatcher import Dispatcher
from oll_cli.core.handlers import build_registry
from oll_cli.core.protocols import StoreClient
from oll_cli.core.session import Session
from oll_cli.exceptions import NoInstanceSelectedError, StoreResponseError


class FakeStoreClient:
    """In-memory :class:`StoreClient` with the server's error behaviour."""

    def __init__(self, instances: Sequence[str] = ()) -> None:
        self.data: dict[str, dict[str, object]] = {name: {} for name in instances}
        self.ttls: dict[tuple[str, str], int] = {}
        self.current: str = ""

    # -- helpers -----------------------------------------------------------

    def _bucket(self) -> dict[str, object]:
        if not self.current:
            raise NoInstanceSelectedError("No instance selected")
        return self.data[self.current]

    def _entry(self, name: str, kind: type) -> object:
        bucket = self._bucket()
        if name not in bucket:
            raise StoreResponseError(f"Key {name} not found", status_code=404)
        value = bucket[name]
        if not isinstance(value, kind):
            raise StoreResponseError(f"Key {name} has another type", status_code=409)
        return value

    def _array(self, name: str) -> list[str]:
        return self._entry(name, list)  # type: ignore[return-value]

    def _hash(self, name: str) -> dict[str, str]:
        return self._entry(name, dict)  # type: ignore[return-value]

    def _checked_index(self, name: str, index: int) -> list[str]:
        array = self._array(name)
        if not 0 <= index < len(array):
            raise StoreResponseError("Index out of range", status_code=404)
        return array

    # -- instances ---------------------------------------------------------

    def list_instances(self) -> list[str]:
        return list(self.data)

    def create_instance(self, name: str) -> None:
        if name in self.data:
            raise StoreResponseError(f"Instance {name} already exists", status_code=409)
        self.data[name] = {}

    def select_instance(self, name: str) -> None:
        if name not in self.data:
            raise StoreResponseError(f"Instance {name} not found", status_code=404)
        self.current = name

    def current_instance_name(self) -> str:
        return self.current

    def destroy(self, name: str) -> None:
        if name not in self.data:
            raise StoreResponseError(f"Instance {name} not found", status_code=404)
        del self.data[name]
        if name == self.current:
            self.current = ""

    # -- scalars -----------------------------------------------------------

    def keys(self) -> list[str]:
        return list(self._bucket())

    def set(self, name: str, value: str, ttl: int) -> None:
        self._bucket()[name] = value
        self.ttls[(self.current, name)] = ttl

    def get(self, name: str) -> str:
        return self._entry(name, str)  # type: ignore[return-value]

    def delete(self, name: str) -> None:
        self._entry(name, object)
        del self._bucket()[name]

    def set_ttl(self, name: str, seconds: int) -> None:
        self._entry(name, object)
        self.ttls[(self.current, name)] = seconds

    def delete_ttl(self, name: str) -> None:
        self._entry(name, object)
        self.ttls[(self.current, name)] = 0

    # -- arrays ------------------------------------------------------------

    def set_array(self, name: str, elements: Sequence[str], ttl: int) -> None:
        self._bucket()[name] = list(elements)
        self.ttls[(self.current, name)] = ttl

    def get_array(self, name: str) -> list[str]:
        return list(self._array(name))

    def get_array_element(self, name: str, index: int) -> str:
        return self._checked_index(name, index)[index]

    def add_array_element(self, name: str, value: str) -> None:
        self._array(name).append(value)

    def set_array_element(self, name: str, index: int, value: str) -> None:
        self._checked_index(name, index)[index] = value

    def delete_array_element(self, name: str, index: int) -> None:
        del self._checked_index(name, index)[index]

    # -- hashes ------------------------------------------------------------

    def set_hash(self, name: str, mapping: Mapping[str, str], ttl: int) -> None:
        self._bucket()[name] = dict(mapping)
        self.ttls[(self.current, name)] = ttl

    def get_hash(self, name: str) -> dict[str, str]:
        return dict(self._hash(name))

    def get_hash_element(self, name: str, key: str) -> str:
        mapping = self._hash(name)
        if key not in mapping:
            raise StoreResponseError(f"Field {key} not found", status_code=404)
        return mapping[key]

    def set_hash_element(self, name: str, key: str, value: str) -> None:
        self._hash(name)[key] = value

    def delete_hash_element(self, name: str, key: str) -> None:
        mapping = self._hash(name)
        if key not in mapping:
            raise StoreResponseError(f"Field {key} not found", status_code=404)
        del mapping[key]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def fake_client() -> FakeStoreClient:
    """Store with one selected, empty instance called ``main``."""
    client = FakeStoreClient(instances=["main"])
    client.select_instance("main")
    return client


@pytest.fixture()
def mock_client() -> MagicMock:
    client = MagicMock(spec=StoreClient)
    client.current_instance_name.return_value = "main"
    return client


@pytest.fixture()
def session(fake_client: FakeStoreClient) -> Session:
    return Session(registry=build_registry(), client=fake_client)


@pytest.fixture()
def dispatcher(session: Session) -> Dispatcher:
    return Dispatcher(session)


@pytest.fixture()
def mock_dispatcher(mock_client: MagicMock) -> Dispatcher:
    return Dispatcher(Session(registry=build_registry(), client=mock_client))


@pytest.fixture()
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def plain_console(output: io.StringIO) -> Console:
    """Colourless console writing into :func:`output`."""
    return Console(
        file=output,
        force_terminal=False,
        color_system=None,
        soft_wrap=True,
        highlight=False,
        width=200,
    )
