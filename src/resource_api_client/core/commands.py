"""Command names and their HTTP methods."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from .errors import ResourceValidationError


class Command(str, Enum):
    """Logical operation requested against a resource."""

    CREATE = "create"
    GET = "get"
    LIST = "list"
    UPDATE = "update"
    PATCH = "patch"
    DELETE = "delete"
    DELETE_COLLECTION = "deletecollection"


COMMAND_METHODS: Mapping[Command, str] = MappingProxyType(
    {
        Command.CREATE: "POST",
        Command.GET: "GET",
        Command.LIST: "GET",
        Command.UPDATE: "PUT",
        Command.PATCH: "PATCH",
        Command.DELETE: "DELETE",
        Command.DELETE_COLLECTION: "DELETE",
    }
)


def parse_command(value: Command | str | None) -> Command:
    """Coerce a command name, treating ``None`` as ``get``."""

    if value is None:
        return Command.GET
    if isinstance(value, Command):
        return value
    try:
        return Command(value)
    except ValueError as exc:
        raise ResourceValidationError(f"unknown command: {value!r}") from exc


def method_for(command: Command | str | None) -> str:
    return COMMAND_METHODS[parse_command(command)]


__all__ = [
    "Command",
    "COMMAND_METHODS",
    "parse_command",
    "method_for",
]
