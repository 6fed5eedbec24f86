from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence

import httpx

from resource_api_client.core.abort import AbortSignal, run_until_aborted


def make_response(
    status_code: int,
    *,
    json: object = None,
    text: str | None = None,
) -> httpx.Response:
    if json is not None:
        return httpx.Response(status_code, json=json)
    return httpx.Response(status_code, text=text or "")


Step = httpx.Response | Exception


class SequencedSender:
    """Fake sender replaying queued steps; honours the abort signal like the real transport."""

    def __init__(self, steps: Sequence[Step], *, delay_seconds: float = 0.0):
        self.steps = list(steps)
        self.delay_seconds = delay_seconds
        self.requests: list[httpx.Request] = []
        self.signals: list[AbortSignal] = []
        self.closed = False

    async def send(self, request: httpx.Request, *, signal: AbortSignal) -> httpx.Response:
        self.requests.append(request)
        self.signals.append(signal)
        step = self.steps.pop(0)
        return await run_until_aborted(self._respond(step), signal)

    async def _respond(self, step: Step) -> httpx.Response:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if isinstance(step, Exception):
            raise step
        return step

    async def close(self) -> None:
        self.closed = True


class GatedSender(SequencedSender):
    """Holds every response until ``release()`` is called."""

    def __init__(self, steps: Sequence[Step]):
        super().__init__(steps)
        self.gate = asyncio.Event()
        self.finished = 0

    def release(self) -> None:
        self.gate.set()

    async def _respond(self, step: Step) -> httpx.Response:
        await self.gate.wait()
        self.finished += 1
        return await super()._respond(step)


def mock_async_client(handler: Callable[[httpx.Request], object]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
