"""Build wire-level httpx requests from resolved descriptors."""

from __future__ import annotations

from collections.abc import Sequence

import httpx

from ..config import ResourceClientConfig
from ..core.commands import method_for
from ..core.errors import ResourceValidationError
from .options import RequestDescriptor
from .params import build_query_params, encode_json

DEFAULT_CONTENT_TYPE = "application/json; charset=utf-8"


def build_url(
    config: ResourceClientConfig,
    resource: str,
    params: Sequence[tuple[str, str]] = (),
) -> httpx.URL:
    if not resource:
        raise ResourceValidationError("resource must not be empty")
    try:
        url = httpx.URL(f"{config.base_url}{resource}")
    except httpx.InvalidURL as exc:
        raise ResourceValidationError(f"invalid request URL for resource {resource!r}") from exc
    if not params:
        return url
    return url.copy_merge_params(list(params))


def build_headers(
    config: ResourceClientConfig,
    *,
    content_type: str | None,
    token: str | None,
) -> dict[str, str]:
    headers = {"Content-Type": content_type or DEFAULT_CONTENT_TYPE}
    # per-request token takes priority over the configured secret
    if token:
        headers["Authorization"] = f"Bearer {token}"
    elif config.secret:
        headers["X-Secret"] = config.secret
    return headers


def build_body(data: object, *, content_type: str | None) -> str | bytes | None:
    if data is None:
        return None
    if content_type:
        # sent verbatim; caller pre-encodes (multipart, form, csv)
        if isinstance(data, (str, bytes)):
            return data
        return str(data)
    return encode_json(data).encode("utf-8")


def build_request(config: ResourceClientConfig, descriptor: RequestDescriptor) -> httpx.Request:
    """Assemble method, URL, headers and body for ``descriptor``.

    Raises ``ResourceValidationError`` for an empty resource or an invalid URL.
    """

    url = build_url(config, descriptor.resource, build_query_params(descriptor.query))
    return httpx.Request(
        method_for(descriptor.command),
        url,
        headers=build_headers(
            config,
            content_type=descriptor.content_type,
            token=descriptor.token,
        ),
        content=build_body(descriptor.data, content_type=descriptor.content_type),
    )


__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "build_url",
    "build_headers",
    "build_body",
    "build_request",
]
