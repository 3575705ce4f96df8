"""Runtime settings read from the environment.

Command-line flags override these values; see
:func:`oll_cli.cli.app.main`.

Variables
---------
``OLL_HTTP_ADDR``
    Base URL of the store (default ``http://localhost:3000``).
``OLL_HTTP_TIMEOUT``
    Request timeout in seconds (default ``10``).
``OLL_LOG_LEVEL``
    Name of a :mod:`logging` level (default ``WARNING``).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from oll_cli.exceptions import ConfigurationError

DEFAULT_HTTP_ADDR = "http://localhost:3000"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    http_addr: str = DEFAULT_HTTP_ADDR
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    def with_overrides(self, *, http_addr: str | None = None) -> Settings:
        """Return a copy with command-line values applied."""
        if http_addr is None:
            return self
        return replace(self, http_addr=_validate_addr(http_addr))


def _validate_addr(raw: str) -> str:
    addr = raw.strip()
    if not addr.startswith(("http://", "https://")):
        raise ConfigurationError(
            f"Invalid store address: {raw!r}",
            hint="The address must start with http:// or https://",
        )
    return addr


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"OLL_HTTP_TIMEOUT is not a number: {raw!r}") from exc
    if timeout <= 0:
        raise ConfigurationError(f"OLL_HTTP_TIMEOUT must be positive, got {raw!r}")
    return timeout


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(
            f"OLL_LOG_LEVEL is not a logging level: {raw!r}",
            hint="Use DEBUG, INFO, WARNING, ERROR or CRITICAL.",
        )
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (default: ``os.environ``).

    Raises
    ------
    ConfigurationError
        When a variable is set to an unusable value.
    """
    env = os.environ if environ is None else environ
    settings = Settings()

    if env.get("OLL_HTTP_ADDR"):
        settings = replace(settings, http_addr=_validate_addr(env["OLL_HTTP_ADDR"]))
    if env.get("OLL_HTTP_TIMEOUT"):
        settings = replace(settings, timeout=_parse_timeout(env["OLL_HTTP_TIMEOUT"]))
    if env.get("OLL_LOG_LEVEL"):
        settings = replace(settings, log_level=_parse_log_level(env["OLL_LOG_LEVEL"]))
    return settings
