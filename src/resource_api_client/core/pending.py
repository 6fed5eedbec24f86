"""Awaitable handle for a single in-flight request."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Generator
from typing import Any, Generic, TypeVar

from .abort import AbortSignal
from .errors import ABORT_REASON_CANCELLED

T = TypeVar("T")


class PendingResult(Generic[T]):
    """Single-resolution result of a request, cancellable until it settles."""

    def __init__(self, task: asyncio.Task[T], signal: AbortSignal) -> None:
        self._task = task
        self._signal = signal

    @property
    def signal(self) -> AbortSignal:
        return self._signal

    def cancel(self) -> bool:
        """Abort the request; returns ``False`` once the result has settled."""

        if self._task.done():
            return False
        self._signal.abort(ABORT_REASON_CANCELLED)
        return True

    def done(self) -> bool:
        return self._task.done()

    def result(self) -> T:
        return self._task.result()

    def exception(self) -> BaseException | None:
        return self._task.exception()

    def add_done_callback(self, callback: Callable[["PendingResult[T]"], object]) -> None:
        self._task.add_done_callback(lambda _task: callback(self))

    def __await__(self) -> Generator[Any, None, T]:
        return self._task.__await__()


__all__ = [
    "PendingResult",
]
