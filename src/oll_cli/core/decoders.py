"""Argument decoders — raw token to typed value.

Each decoder is a pure function of one token.  Failures raise a
:class:`~oll_cli.exceptions.DecodingError` subclass, which handlers let
propagate untouched so the user sees exactly which argument was wrong.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Sequence
from typing import Any

from oll_cli.exceptions import (
    InvalidIntegerError,
    InvalidMappingError,
    InvalidSequenceError,
    NotEnoughArgumentsError,
)

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Arity
# ---------------------------------------------------------------------------

def require_arguments(args: Sequence[str], minimum: int) -> None:
    """Raise :class:`NotEnoughArgumentsError` if *args* is shorter than *minimum*.

    *minimum* counts the keyword itself, so ``GET name`` needs ``2``.
    """
    if len(args) < minimum:
        raise NotEnoughArgumentsError()


# ---------------------------------------------------------------------------
# Scalar decoders
# ---------------------------------------------------------------------------

def decode_int(token: str) -> int:
    """Parse a base-10 integer literal with an optional sign.

    Python's ``int()`` is more permissive than wanted here (it accepts
    surrounding whitespace and ``1_000``), so the token is matched first.
    """
    if not _INT_PATTERN.fullmatch(token):
        raise InvalidIntegerError(f"Invalid integer: {token!r}")
    return int(token)


def decode_name(token: str) -> str:
    """Return *token* unchanged."""
    return token


def decode_string(token: str) -> str:
    """Strip one layer of surrounding double quotes, if present.

    Malformed quoting is never an error: ``"abc`` becomes ``abc``.
    """
    if token.startswith('"'):
        token = token[1:]
    if token.endswith('"'):
        token = token[:-1]
    return token


# ---------------------------------------------------------------------------
# JSON decoders
# ---------------------------------------------------------------------------

def _load_json(token: str) -> Any:
    return json.loads(token)


def decode_sequence(token: str) -> list[str]:
    """Parse a JSON array of strings, e.g. ``["a","b"]``."""
    try:
        value = _load_json(token)
    except ValueError as exc:
        raise InvalidSequenceError(f"Invalid array: {exc}") from exc

    if not isinstance(value, list):
        raise InvalidSequenceError(
            f"Invalid array: expected a JSON array, got {type(value).__name__}",
            hint='Example: ["first","second"]',
        )
    if not all(isinstance(item, str) for item in value):
        raise InvalidSequenceError(
            "Invalid array: every element must be a string",
            hint='Quote numbers too: ["1","2"]',
        )
    return value


def decode_mapping(token: str) -> dict[str, str]:
    """Parse a JSON object with string values, e.g. ``{"k":"v"}``."""
    try:
        value = _load_json(token)
    except ValueError as exc:
        raise InvalidMappingError(f"Invalid hash: {exc}") from exc

    if not isinstance(value, dict):
        raise InvalidMappingError(
            f"Invalid hash: expected a JSON object, got {type(value).__name__}",
            hint='Example: {"key":"value"}',
        )
    if not all(isinstance(item, str) for item in value.values()):
        raise InvalidMappingError(
            "Invalid hash: every value must be a string",
            hint='Quote numbers too: {"age":"42"}',
        )
    return value


# ---------------------------------------------------------------------------
# Optional trailing arguments
# ---------------------------------------------------------------------------

def decode_optional_ttl(args: Sequence[str], index: int) -> int:
    """Return the TTL at ``args[index]``, or ``0`` when absent or malformed.

    A malformed TTL does not fail the command; the entry is stored
    without expiry.
    """
    if len(args) <= index:
        return 0
    try:
        return decode_int(args[index])
    except InvalidIntegerError:
        logger.debug("Ignoring malformed TTL %r; using 0", args[index])
        return 0
