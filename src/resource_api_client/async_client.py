"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import validate_client_config
from .config import ResourceClientConfig
from .core.async_transport import AsyncSender, AsyncTransport
from .core.commands import Command
from .core.errors import ResourceClientClosedError
from .core.pending import PendingResult
from .resources.executor import RequestExecutor
from .resources.options import RequestDescriptor, RequestOptions
from .resources.resolver import resolve_request_options


class AsyncResourceClient:
    """Public async resource API client.

    Every call returns a ``PendingResult`` right away; await it for the parsed
    body or call ``cancel()`` on it to abort the request. Calls must be made
    from a running event loop.
    """

    def __init__(
        self,
        *,
        config: ResourceClientConfig,
        transport: AsyncSender | None = None,
    ) -> None:
        self._config = config
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._executor = RequestExecutor(self._config, self._transport)
        self._closed = False

    @property
    def config(self) -> ResourceClientConfig:
        return self._config

    def _ensure_open(self) -> None:
        if self._closed:
            raise ResourceClientClosedError("AsyncResourceClient is already closed")

    def request(self, descriptor: RequestDescriptor) -> PendingResult[object]:
        self._ensure_open()
        return self._executor.execute(descriptor)

    def _submit(self, command: Command, options: RequestOptions) -> PendingResult[object]:
        return self.request(resolve_request_options(command, options))

    def create(self, options: RequestOptions) -> PendingResult[object]:
        return self._submit(Command.CREATE, options)

    def get(self, options: RequestOptions) -> PendingResult[object]:
        return self._submit(Command.GET, options)

    def list(self, options: RequestOptions) -> PendingResult[object]:
        return self._submit(Command.LIST, options)

    def update(self, options: RequestOptions) -> PendingResult[object]:
        return self._submit(Command.UPDATE, options)

    def patch(self, options: RequestOptions) -> PendingResult[object]:
        return self._submit(Command.PATCH, options)

    def delete(self, options: RequestOptions) -> PendingResult[object]:
        return self._submit(Command.DELETE, options)

    def delete_collection(self, options: RequestOptions) -> PendingResult[object]:
        return self._submit(Command.DELETE_COLLECTION, options)

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncResourceClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncResourceClient",
]
