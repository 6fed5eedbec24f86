"""Cooperative cancellation shared by the request timer and manual cancel."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from .errors import ABORT_REASON_CANCELLED, ABORT_REASON_TIMEOUT, abort_error

T = TypeVar("T")


class AbortSignal:
    """One-shot flag raised by a timer or by the caller.

    The first ``abort`` call records the reason; later calls are ignored.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: str | None = None

    @property
    def aborted(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    def abort(self, reason: str = ABORT_REASON_CANCELLED) -> None:
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()

    async def wait(self) -> str | None:
        await self._event.wait()
        return self._reason

    def raise_if_aborted(self) -> None:
        if self.aborted:
            raise abort_error(self._reason)


def schedule_abort(
    signal: AbortSignal,
    delay_seconds: float | None,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.TimerHandle | None:
    if not delay_seconds or delay_seconds <= 0:
        return None
    running = loop or asyncio.get_running_loop()
    return running.call_later(delay_seconds, signal.abort, ABORT_REASON_TIMEOUT)


async def run_until_aborted(awaitable: Awaitable[T], signal: AbortSignal) -> T:
    """Await ``awaitable`` unless ``signal`` fires first.

    When the signal wins, the pending work is cancelled and awaited before the
    abort error is raised.
    """

    if signal.aborted:
        if asyncio.iscoroutine(awaitable):
            awaitable.close()
        raise abort_error(signal.reason)
    work = asyncio.ensure_future(awaitable)
    watcher = asyncio.ensure_future(signal.wait())
    try:
        done, _ = await asyncio.wait({work, watcher}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        work.cancel()
        watcher.cancel()
        raise

    if work in done:
        watcher.cancel()
        return work.result()

    work.cancel()
    await asyncio.gather(work, return_exceptions=True)
    raise abort_error(signal.reason)


__all__ = [
    "AbortSignal",
    "schedule_abort",
    "run_until_aborted",
]
