"""Custom exception hierarchy for oll-cli.

Every error that reaches the REPL must inherit from :class:`OllCliError`.
Raw third-party exceptions (e.g. from httpx) must NEVER propagate beyond
the infrastructure layer — they are caught there and re-raised as a
typed :class:`StoreError` subclass.

Hierarchy
---------
OllCliError
├── NotEnoughArgumentsError
├── CommandNotExistError
├── DecodingError
│   ├── InvalidIntegerError
│   ├── InvalidSequenceError
│   └── InvalidMappingError
├── StoreError
│   ├── StoreConnectionError
│   ├── StoreResponseError
│   └── NoInstanceSelectedError
├── ConfigurationError
└── CanNotExitError
"""

from __future__ import annotations


class OllCliError(Exception):
    """Base exception for all oll-cli errors.

    The REPL renders any subclass as ``ERROR: <message>`` and keeps
    running, so handlers never need to catch these themselves.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command layer ---------------------------------------------------------

class NotEnoughArgumentsError(OllCliError):
    """Raised when a command line carries fewer tokens than required."""

    def __init__(self, message: str = "Not enough arguments", **kwargs: str | None) -> None:
        super().__init__(message, **kwargs)


class CommandNotExistError(OllCliError):
    """Raised when a keyword is not present in the registry."""

    def __init__(self, message: str = "Command is not exist", **kwargs: str | None) -> None:
        super().__init__(message, **kwargs)


# --- Argument decoding -----------------------------------------------------

class DecodingError(OllCliError):
    """Base class for argument tokens that cannot be decoded."""


class InvalidIntegerError(DecodingError):
    """Raised when a token is not a base-10 integer literal."""


class InvalidSequenceError(DecodingError):
    """Raised when a token is not a JSON array of strings."""


class InvalidMappingError(DecodingError):
    """Raised when a token is not a JSON object of string values."""


# --- Store client ----------------------------------------------------------

class StoreError(OllCliError):
    """Base class for failures reported by the store client."""


class StoreConnectionError(StoreError):
    """Raised when the store cannot be reached at all."""


class StoreResponseError(StoreError):
    """Raised when the store answers with an error or a malformed body."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code: int | None = status_code


class NoInstanceSelectedError(StoreError):
    """Raised for instance-scoped operations before ``SELECT``."""


# --- Environment / process -------------------------------------------------

class ConfigurationError(OllCliError):
    """Raised when settings from the environment are invalid."""


class CanNotExitError(OllCliError):
    """Raised when the process-termination primitive returned control."""

    def __init__(self, message: str = "Something really went wrong", **kwargs: str | None) -> None:
        super().__init__(message, **kwargs)
