"""Async HTTP transport that honours a per-request abort signal."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import ResourceClientConfig
from .abort import AbortSignal, run_until_aborted
from .errors import ResourceAbortError, ResourceClientClosedError, ResourceTransportError
from .transport_shared import build_default_headers, build_default_timeout

logger = logging.getLogger("resource_api_client")


class AsyncTransportClient(Protocol):
    async def send(self, request: httpx.Request) -> httpx.Response: ...
    async def aclose(self) -> None: ...


class AsyncSender(Protocol):
    async def send(self, request: httpx.Request, *, signal: AbortSignal) -> httpx.Response: ...
    async def close(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport backed by ``httpx.AsyncClient``.

    No retries are attempted; every failure is raised to the caller.
    """

    def __init__(
        self,
        config: ResourceClientConfig,
        *,
        client: AsyncTransportClient | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
            follow_redirects=True,
            transport=http_transport,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def send(self, request: httpx.Request, *, signal: AbortSignal) -> httpx.Response:
        if self._closed:
            raise ResourceClientClosedError("transport is already closed")

        self._apply_default_headers(request)
        logger.debug("request start method=%s url=%s", request.method, request.url)
        try:
            response = await run_until_aborted(self._client.send(request), signal)
        except ResourceAbortError as exc:
            logger.warning(
                "request aborted method=%s url=%s reason=%s",
                request.method,
                request.url,
                exc.reason,
            )
            raise
        except httpx.TransportError as exc:
            logger.error(
                "request network error method=%s url=%s error=%s",
                request.method,
                request.url,
                exc.__class__.__name__,
            )
            cause = "timeout" if isinstance(exc, httpx.TimeoutException) else "network"
            raise ResourceTransportError("network/transport error", cause=cause) from exc

        logger.debug(
            "response received method=%s url=%s http_status=%s",
            request.method,
            request.url,
            response.status_code,
        )
        return response

    def _apply_default_headers(self, request: httpx.Request) -> None:
        # send() skips the client-level header merge done by build_request()
        for key, value in getattr(self._client, "headers", {}).items():
            request.headers.setdefault(key, value)


__all__ = [
    "AsyncTransportClient",
    "AsyncSender",
    "AsyncTransport",
]
