"""Request option and descriptor models."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from ..core.commands import Command, parse_command

DEFAULT_FORMAT = "json"


class _Unset:
    """Marker for a query value that must not be sent at all."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNSET"


UNSET = _Unset()


@dataclass(slots=True, frozen=True)
class RequestOptions:
    """Caller-facing options for a single command.

    Pass-through fields left as ``None`` are omitted from the query string.
    ``extra`` carries additional wire-level query keys as-is.
    """

    resource: str
    data: object = None
    nonce: str | None = None
    no_reply: bool | None = None
    query: Mapping[str, object] | None = None
    pk: str | Sequence[str] | None = None
    where: Mapping[str, object] | None = None
    token: str | None = field(default=None, repr=False)
    timeout_seconds: float | None = None
    format: str | None = None
    content_type: str | None = None

    include: str | Sequence[str] | None = None
    except_: str | Sequence[str] | None = None
    exclude: str | Sequence[str] | None = None
    group_by: str | Sequence[str] | None = None
    order: str | None = None
    order_by: str | None = None
    limit: int | None = None
    skip: int | None = None
    changes: bool | None = None
    count: bool | None = None
    distinct: bool | None = None

    extra: Mapping[str, object] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class RequestDescriptor:
    """Fully resolved request, ready for URL/header/body assembly."""

    resource: str
    command: Command = Command.GET
    query: Mapping[str, object] = field(default_factory=dict)
    data: object = None
    content_type: str | None = None
    format: str = DEFAULT_FORMAT
    nonce: str | None = None
    no_reply: bool | None = None
    include: str | Sequence[str] | None = None
    timeout_seconds: float | None = None
    token: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "command", parse_command(self.command))
        object.__setattr__(self, "format", self.format or DEFAULT_FORMAT)
        object.__setattr__(self, "query", MappingProxyType(dict(self.query or {})))


__all__ = [
    "DEFAULT_FORMAT",
    "UNSET",
    "RequestOptions",
    "RequestDescriptor",
]
