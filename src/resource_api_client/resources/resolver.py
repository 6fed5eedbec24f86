"""Resolve caller options into a canonical request descriptor."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from ..core.commands import Command, parse_command
from .options import RequestDescriptor, RequestOptions

logger = logging.getLogger("resource_api_client")

RESERVED_QUERY_KEYS = frozenset(
    {"data", "nonce", "noReply", "resource", "where", "timeout", "token"}
)

# attribute name -> wire query key
PASS_THROUGH_FIELDS: Mapping[str, str] = MappingProxyType(
    {
        "include": "include",
        "except_": "except",
        "exclude": "exclude",
        "group_by": "groupBy",
        "order": "order",
        "order_by": "orderBy",
        "limit": "limit",
        "skip": "skip",
        "changes": "changes",
        "count": "count",
        "distinct": "distinct",
    }
)


def build_query(options: RequestOptions) -> dict[str, object]:
    """Merge query sources; later layers win: pass-through, then ``pk``, then ``where``."""

    query: dict[str, object] = {}
    if options.query:
        query.update(options.query)
    query.update(options.extra)
    for attr, key in PASS_THROUGH_FIELDS.items():
        value = getattr(options, attr)
        if value is not None:
            query[key] = value

    if options.pk:
        query["pk"] = options.pk

    if options.where:
        query.update(options.where)

    dropped = sorted(RESERVED_QUERY_KEYS.intersection(query))
    if dropped:
        logger.warning(
            "reserved query keys dropped resource=%s keys=%s",
            options.resource,
            ",".join(dropped),
        )
        for key in dropped:
            del query[key]
    return query


def resolve_request_options(
    command: Command | str | None,
    options: RequestOptions,
) -> RequestDescriptor:
    return RequestDescriptor(
        command=parse_command(command),
        content_type=options.content_type,
        format=options.format,
        data=options.data,
        nonce=options.nonce,
        no_reply=options.no_reply,
        resource=options.resource,
        include=options.include,
        timeout_seconds=options.timeout_seconds,
        token=options.token,
        query=build_query(options),
    )


__all__ = [
    "RESERVED_QUERY_KEYS",
    "PASS_THROUGH_FIELDS",
    "build_query",
    "resolve_request_options",
]
