"""Execution of a single resolved request."""

from __future__ import annotations

import asyncio
import logging

import httpx

from ..config import ResourceClientConfig
from ..core.abort import AbortSignal, schedule_abort
from ..core.async_transport import AsyncSender
from ..core.pending import PendingResult
from ..core.response_parsing import classify_response
from .options import RequestDescriptor
from .request_builder import build_request

logger = logging.getLogger("resource_api_client")


class RequestExecutor:
    """Turns descriptors into in-flight requests.

    Request assembly runs synchronously so invalid input raises immediately.
    Sending, timing out and decoding happen in a task owned by the returned
    ``PendingResult``.
    """

    def __init__(self, config: ResourceClientConfig, transport: AsyncSender) -> None:
        self._config = config
        self._transport = transport

    def execute(self, descriptor: RequestDescriptor) -> PendingResult[object]:
        request = build_request(self._config, descriptor)
        signal = AbortSignal()
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._run(request, descriptor, signal))
        return PendingResult(task, signal)

    async def _run(
        self,
        request: httpx.Request,
        descriptor: RequestDescriptor,
        signal: AbortSignal,
    ) -> object:
        timer = schedule_abort(signal, descriptor.timeout_seconds)
        try:
            response = await self._transport.send(request, signal=signal)
            body, error = classify_response(response, format=descriptor.format)
            if error is not None:
                logger.error(
                    "request failed method=%s url=%s http_status=%s code=%s",
                    request.method,
                    request.url,
                    error.http_status,
                    error.code,
                )
                raise error
            logger.info(
                "request success method=%s url=%s http_status=%s",
                request.method,
                request.url,
                response.status_code,
            )
            return body
        finally:
            if timer is not None:
                timer.cancel()


__all__ = [
    "RequestExecutor",
]
