"""httpx backed implementation of :class:`~oll_cli.core.protocols.StoreClient`.

This module is the **only** place in the codebase that imports ``httpx``.
All httpx exceptions are caught here and re-raised as typed
:class:`~oll_cli.exceptions.StoreError` subclasses — nothing raw escapes
the infrastructure boundary.

Wire format
-----------
JSON bodies over instance-scoped REST paths::

    GET    /instances                         -> {"instances": [...]}
    POST   /instances                         <- {"name": ...}
    GET    /instances/{i}                     (existence check)
    DELETE /instances/{i}
    GET    /instances/{i}/keys                -> {"keys": [...]}
    PUT    /instances/{i}/values/{name}       <- {"value": ..., "ttl": ...}
    PUT    /instances/{i}/ttl/{name}          <- {"ttl": ...}
    PUT    /instances/{i}/arrays/{name}       <- {"value": [...], "ttl": ...}
    POST   /instances/{i}/arrays/{name}       <- {"value": ...}   (append)
    GET    /instances/{i}/arrays/{name}/{n}   -> {"value": ...}
    PUT    /instances/{i}/hashes/{name}       <- {"value": {...}, "ttl": ...}
    GET    /instances/{i}/hashes/{name}/{key} -> {"value": ...}

Errors come back as a non-2xx status with ``{"error": "..."}``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

import httpx

from oll_cli.exceptions import (
    NoInstanceSelectedError,
    StoreConnectionError,
    StoreResponseError,
)

logger = logging.getLogger(__name__)


def _segment(value: str | int) -> str:
    """Percent-encode one path segment (``/`` included).

    ``.`` and ``..`` are escaped too, otherwise URL normalisation would
    collapse them into the parent path.
    """
    encoded = quote(str(value), safe="")
    if encoded in (".", ".."):
        return encoded.replace(".", "%2E")
    return encoded



class HttpStoreClient:
    """Concrete :class:`StoreClient` talking to an O(lya-lya) server.

    Usage::

        with HttpStoreClient("http://localhost:3000") as client:
            client.select_instance("users")
            client.set("alice", "admin", 0)

    The selected instance lives in this object only; the server is
    stateless with respect to it.

    Parameters
    ----------
    base_url:
        Server address, e.g. ``http://localhost:3000``.
    timeout:
        Per-request timeout in seconds.
    transport:
        Optional httpx transport, used by tests to avoid the network.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url: str = base_url
        self._http: httpx.Client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )
        self._current: str = ""

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> HttpStoreClient:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    # ------------------------------------------------------------------
    # Instances
    # ------------------------------------------------------------------

    def list_instances(self) -> list[str]:
        body = self._request("GET", "/instances")
        return self._string_list(body, "instances")

    def create_instance(self, name: str) -> None:
        self._request("POST", "/instances", json={"name": name})

    def select_instance(self, name: str) -> None:
        self._request("GET", f"/instances/{_segment(name)}")
        self._current = name

    def current_instance_name(self) -> str:
        return self._current

    def destroy(self, name: str) -> None:
        self._request("DELETE", f"/instances/{_segment(name)}")
        if name == self._current:
            self._current = ""

    # ------------------------------------------------------------------
    # Scalars and TTL
    # ------------------------------------------------------------------

    def keys(self) -> list[str]:
        body = self._request("GET", self._scoped("keys"))
        return self._string_list(body, "keys")

    def set(self, name: str, value: str, ttl: int) -> None:
        self._request("PUT", self._scoped("values", name), json={"value": value, "ttl": ttl})

    def get(self, name: str) -> str:
        return self._string_value(self._request("GET", self._scoped("values", name)))

    def delete(self, name: str) -> None:
        self._request("DELETE", self._scoped("values", name))

    def set_ttl(self, name: str, seconds: int) -> None:
        self._request("PUT", self._scoped("ttl", name), json={"ttl": seconds})

    def delete_ttl(self, name: str) -> None:
        self._request("DELETE", self._scoped("ttl", name))

    # ------------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------------

    def set_array(self, name: str, elements: Sequence[str], ttl: int) -> None:
        self._request(
            "PUT", self._scoped("arrays", name), json={"value": list(elements), "ttl": ttl},
        )

    def get_array(self, name: str) -> list[str]:
        body = self._request("GET", self._scoped("arrays", name))
        return self._string_list(body, "value")

    def get_array_element(self, name: str, index: int) -> str:
        return self._string_value(self._request("GET", self._scoped("arrays", name, index)))

    def add_array_element(self, name: str, value: str) -> None:
        self._request("POST", self._scoped("arrays", name), json={"value": value})

    def set_array_element(self, name: str, index: int, value: str) -> None:
        self._request("PUT", self._scoped("arrays", name, index), json={"value": value})

    def delete_array_element(self, name: str, index: int) -> None:
        self._request("DELETE", self._scoped("arrays", name, index))

    # ------------------------------------------------------------------
    # Hashes
    # ------------------------------------------------------------------

    def set_hash(self, name: str, mapping: Mapping[str, str], ttl: int) -> None:
        self._request(
            "PUT", self._scoped("hashes", name), json={"value": dict(mapping), "ttl": ttl},
        )

    def get_hash(self, name: str) -> dict[str, str]:
        body = self._request("GET", self._scoped("hashes", name))
        value = body.get("value")
        if not isinstance(value, dict):
            raise StoreResponseError("Store returned a malformed hash")
        return {str(key): str(item) for key, item in value.items()}

    def get_hash_element(self, name: str, key: str) -> str:
        return self._string_value(self._request("GET", self._scoped("hashes", name, key)))

    def set_hash_element(self, name: str, key: str, value: str) -> None:
        self._request("PUT", self._scoped("hashes", name, key), json={"value": value})

    def delete_hash_element(self, name: str, key: str) -> None:
        self._request("DELETE", self._scoped("hashes", name, key))

    # ------------------------------------------------------------------
    # Request plumbing
    # ------------------------------------------------------------------

    def _scoped(self, *parts: str | int) -> str:
        """Build a path under the selected instance."""
        if not self._current:
            raise NoInstanceSelectedError(
                "No instance selected",
                hint="Run 'SELECT <instance>' first, or 'LIST' to see instances.",
            )
        tail = "/".join(_segment(part) for part in parts)
        return f"/instances/{_segment(self._current)}/{tail}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send one request and return the decoded JSON body (``{}`` if empty)."""
        try:
            response = self._http.request(method, path, json=json)
        except httpx.HTTPError as exc:
            raise StoreConnectionError(
                f"Cannot reach store at {self._base_url}: {exc}",
                hint="Check that the server is running and -http.addr is correct.",
            ) from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)

        if not response.is_success:
            raise StoreResponseError(
                self._error_message(response),
                status_code=response.status_code,
            )

        if not response.content:
            return {}
        try:
            body: Any = response.json()
        except ValueError as exc:
            raise StoreResponseError(
                "Store returned a body that is not JSON",
                status_code=response.status_code,
            ) from exc
        if not isinstance(body, dict):
            raise StoreResponseError(
                "Store returned an unexpected data structure",
                status_code=response.status_code,
            )
        return body

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Prefer the server's ``{"error": ...}`` text over the HTTP reason."""
        try:
            body: Any = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return f"{response.status_code} {response.reason_phrase}".strip()

    @staticmethod
    def _string_value(body: dict[str, Any]) -> str:
        value = body.get("value")
        if value is None:
            raise StoreResponseError("Store response has no value")
        return str(value)

    @staticmethod
    def _string_list(body: dict[str, Any], field: str) -> list[str]:
        value = body.get(field)
        if value is None:
            return []
        if not isinstance(value, list):
            raise StoreResponseError(f"Store returned a malformed '{field}' list")
        return [str(item) for item in value]
