"""Command handlers and the default command table.

Every handler has the same shape::

    handler(session, args, line) -> str | Terminate

``args[0]`` is the keyword itself.  A handler checks arity first,
decodes its arguments, makes exactly one store-client call and renders
the result.  Nothing here catches errors: decoding and store failures
travel up to the REPL unchanged.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence

from oll_cli.core.decoders import (
    decode_int,
    decode_mapping,
    decode_name,
    decode_optional_ttl,
    decode_sequence,
    decode_string,
    require_arguments,
)
from oll_cli.core.models import CommandDescriptor, Terminate
from oll_cli.core.registry import CommandRegistry
from oll_cli.core.session import Session

logger = logging.getLogger(__name__)

OK = "OK"


# ---------------------------------------------------------------------------
# Rendering helpers (pure)
# ---------------------------------------------------------------------------

def render_numbered(items: Iterable[str]) -> str:
    """Render ``["a", "b"]`` as ``"1) a\\n2) b"``."""
    result = "".join(f"{index}) {item}\n" for index, item in enumerate(items, start=1))
    return result.removesuffix("\n")


def render_json(value: object) -> str:
    """Render an array or hash in the same syntax ``ARR/SET``/``HASH/SET`` accept."""
    return json.dumps(value, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Shell
# ---------------------------------------------------------------------------

def handle_help(session: Session, args: Sequence[str], line: str) -> str:
    registry = session.registry
    if len(args) > 1:
        command = registry.lookup(decode_name(args[1]))
        return f"{command.title}\n{command.description}"

    own = registry.get(args[0])
    header = f"{own.title}\n{own.description}" if own is not None else ""
    listing = "".join(
        f"\n{keyword} - {command.title}" for keyword, command in registry.list_all()
    )
    return f"{header}\n\nList of commands:{listing}"


def handle_echo(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 2)
    return decode_string(args[1])


def handle_exit(session: Session, args: Sequence[str], line: str) -> Terminate:
    return Terminate()


# ---------------------------------------------------------------------------
# Instances
# ---------------------------------------------------------------------------

def handle_list(session: Session, args: Sequence[str], line: str) -> str:
    return render_numbered(session.client.list_instances())


def handle_create(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 2)
    name = decode_name(args[1])
    session.client.create_instance(name)
    return OK


def handle_select(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 2)
    name = decode_name(args[1])
    session.client.select_instance(name)
    return OK


def handle_destroy(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 2)
    name = decode_name(args[1])
    session.client.destroy(name)
    return OK


# ---------------------------------------------------------------------------
# Scalars and TTL
# ---------------------------------------------------------------------------

def handle_keys(session: Session, args: Sequence[str], line: str) -> str:
    return render_numbered(session.client.keys())


def handle_set(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 3)
    name = decode_name(args[1])
    value = decode_string(args[2])
    ttl = decode_optional_ttl(args, 3)
    session.client.set(name, value, ttl)
    return OK


def handle_get(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 2)
    name = decode_name(args[1])
    return session.client.get(name)


def handle_delete(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 2)
    name = decode_name(args[1])
    session.client.delete(name)
    return OK


def handle_ttl_set(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 3)
    name = decode_name(args[1])
    seconds = decode_int(args[2])
    session.client.set_ttl(name, seconds)
    return OK


def handle_ttl_delete(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 2)
    name = decode_name(args[1])
    session.client.delete_ttl(name)
    return OK


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------

def handle_array_set(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 3)
    name = decode_name(args[1])
    elements = decode_sequence(args[2])
    ttl = decode_optional_ttl(args, 3)
    logger.debug("ARR/SET %s with %d element(s), ttl=%d", name, len(elements), ttl)
    session.client.set_array(name, elements, ttl)
    return OK


def handle_array_get(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 2)
    name = decode_name(args[1])
    return render_json(session.client.get_array(name))


def handle_array_element_get(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 3)
    name = decode_name(args[1])
    index = decode_int(args[2])
    return session.client.get_array_element(name, index)


def handle_array_element_add(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 3)
    name = decode_name(args[1])
    value = decode_string(args[2])
    session.client.add_array_element(name, value)
    return OK


def handle_array_element_set(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 4)
    name = decode_name(args[1])
    index = decode_int(args[2])
    value = decode_string(args[3])
    session.client.set_array_element(name, index, value)
    return OK


def handle_array_element_delete(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 3)
    name = decode_name(args[1])
    index = decode_int(args[2])
    session.client.delete_array_element(name, index)
    return OK


# ---------------------------------------------------------------------------
# Hashes
# ---------------------------------------------------------------------------

def handle_hash_set(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 3)
    name = decode_name(args[1])
    mapping = decode_mapping(args[2])
    ttl = decode_optional_ttl(args, 3)
    session.client.set_hash(name, mapping, ttl)
    return OK


def handle_hash_get(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 2)
    name = decode_name(args[1])
    return render_json(session.client.get_hash(name))


def handle_hash_element_get(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 3)
    name = decode_name(args[1])
    key = decode_name(args[2])
    return session.client.get_hash_element(name, key)


def handle_hash_element_set(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 4)
    name = decode_name(args[1])
    key = decode_name(args[2])
    value = decode_string(args[3])
    session.client.set_hash_element(name, key, value)
    return OK


def handle_hash_element_delete(session: Session, args: Sequence[str], line: str) -> str:
    require_arguments(args, 3)
    name = decode_name(args[1])
    key = decode_name(args[2])
    session.client.delete_hash_element(name, key)
    return OK


# ---------------------------------------------------------------------------
# Default command table
# ---------------------------------------------------------------------------

DEFAULT_COMMANDS: dict[str, CommandDescriptor] = {
    "HELP": CommandDescriptor(
        "Function show information about other functions",
        "Example: HELP <FUNCTION_NAME>",
        handle_help,
    ),
    "ECHO": CommandDescriptor("Prints string", 'Example: ECHO "Hello World!"', handle_echo),
    "EXIT": CommandDescriptor("Exit from the program", "Example: EXIT", handle_exit),
    "CREATE": CommandDescriptor("Create an instance", "Example: CREATE dbname", handle_create),
    "LIST": CommandDescriptor("Show list of instance", "Example: LIST", handle_list),
    "SELECT": CommandDescriptor(
        "Select an instance", "Example: SELECT instance_name", handle_select,
    ),
    "DESTROY": CommandDescriptor(
        "Remove instance", "Example: DESTROY instance_name", handle_destroy,
    ),
    "KEYS": CommandDescriptor("Show all keys", "Example: KEYS", handle_keys),
    "SET": CommandDescriptor("Set value", 'Example: SET name "value" ttl', handle_set),
    "GET": CommandDescriptor("Get value", "Example: GET name", handle_get),
    "DEL": CommandDescriptor("Delete value", "Example: DEL name", handle_delete),
    "TTL/SET": CommandDescriptor(
        "Set time to live", "Example: TTL/SET mayfly 86400", handle_ttl_set,
    ),
    "TTL/DEL": CommandDescriptor(
        "Remove time to live", "Example: TTL/DEL mayfly", handle_ttl_delete,
    ),
    "ARR/SET": CommandDescriptor(
        "Set array", 'Example: ARR/SET name ["a","b"] ttl', handle_array_set,
    ),
    "ARR/GET": CommandDescriptor("Get array", "Example: ARR/GET name", handle_array_get),
    "ARR/EL/GET": CommandDescriptor(
        "Returns the element associated with index",
        "Example: ARR/EL/GET name index",
        handle_array_element_get,
    ),
    "ARR/EL/ADD": CommandDescriptor(
        "Add the element to an array",
        'Example: ARR/EL/ADD name "value"',
        handle_array_element_add,
    ),
    "ARR/EL/SET": CommandDescriptor(
        "Set the element of an array",
        'Example: ARR/EL/SET name index "value"',
        handle_array_element_set,
    ),
    "ARR/EL/DEL": CommandDescriptor(
        "Delete the element of an array",
        "Example: ARR/EL/DEL name index",
        handle_array_element_delete,
    ),
    "HASH/SET": CommandDescriptor(
        "Set a hash", 'Example: HASH/SET name {"key":"value"} ttl', handle_hash_set,
    ),
    "HASH/GET": CommandDescriptor("Get a hash", "Example: HASH/GET name", handle_hash_get),
    "HASH/EL/GET": CommandDescriptor(
        "Get the element of a hash",
        "Example: HASH/EL/GET name key",
        handle_hash_element_get,
    ),
    "HASH/EL/SET": CommandDescriptor(
        "Set the element of a hash",
        'Example: HASH/EL/SET name key "value"',
        handle_hash_element_set,
    ),
    "HASH/EL/DEL": CommandDescriptor(
        "Delete the element of a hash",
        "Example: HASH/EL/DEL name key",
        handle_hash_element_delete,
    ),
}


def build_registry(
    commands: dict[str, CommandDescriptor] | None = None,
) -> CommandRegistry:
    """Return a registry populated with *commands* (default: the full table)."""
    registry = CommandRegistry()
    for keyword, descriptor in (DEFAULT_COMMANDS if commands is None else commands).items():
        registry.register(keyword, descriptor)
    return registry
