"""Query string serialization for resource requests."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from datetime import date, datetime, timezone

from .options import UNSET


def format_instant(value: date) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. ``2024-01-02T03:04:05.000Z``.

    Naive datetimes are taken as UTC; a bare date is midnight UTC.
    """

    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def _json_default(value: object) -> object:
    if isinstance(value, date):
        return format_instant(value)
    return str(value)


def _strip_unset(value: object) -> object:
    # unset members are omitted; unset sequence items become null
    if isinstance(value, Mapping):
        return {key: _strip_unset(item) for key, item in value.items() if item is not UNSET}
    if isinstance(value, (list, tuple)):
        return [None if item is UNSET else _strip_unset(item) for item in value]
    return value


def format_number(value: float) -> str:
    """Number text as JSON clients write it: ``1.0`` is ``1``, ``inf`` is ``Infinity``."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return str(value)


def encode_json(value: object) -> str:
    return json.dumps(
        _strip_unset(value),
        separators=(",", ":"),
        ensure_ascii=False,
        default=_json_default,
    )


def serialize_query_value(value: object) -> str:
    if isinstance(value, date):
        return format_instant(value)
    if isinstance(value, Mapping):
        return encode_json(value)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(serialize_query_value(item) for item in value)
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def build_query_params(query: Mapping[str, object]) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    for key, value in query.items():
        if value is UNSET:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                if item is UNSET:
                    continue
                params.append((key, serialize_query_value(item)))
            continue
        params.append((key, serialize_query_value(value)))
    return params


__all__ = [
    "format_instant",
    "format_number",
    "encode_json",
    "serialize_query_value",
    "build_query_params",
]
