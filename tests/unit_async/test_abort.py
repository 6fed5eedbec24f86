from __future__ import annotations

import asyncio

import pytest

from resource_api_client.core.abort import AbortSignal, run_until_aborted, schedule_abort
from resource_api_client.core.errors import ResourceAbortError, ResourceTimeoutError


@pytest.mark.asyncio
async def test_signal_keeps_first_reason():
    signal = AbortSignal()
    signal.abort("timeout")
    signal.abort("cancelled")
    assert signal.aborted is True
    assert signal.reason == "timeout"
    assert await signal.wait() == "timeout"


@pytest.mark.asyncio
async def test_schedule_abort_fires_timeout_reason():
    signal = AbortSignal()
    handle = schedule_abort(signal, 0.01)
    assert handle is not None
    assert await asyncio.wait_for(signal.wait(), timeout=1.0) == "timeout"


@pytest.mark.asyncio
@pytest.mark.parametrize("delay", [None, 0, -1.0])
async def test_schedule_abort_ignores_non_positive_delay(delay):
    assert schedule_abort(AbortSignal(), delay) is None


@pytest.mark.asyncio
async def test_cancelled_timer_never_fires():
    signal = AbortSignal()
    handle = schedule_abort(signal, 0.01)
    handle.cancel()
    await asyncio.sleep(0.03)
    assert signal.aborted is False


@pytest.mark.asyncio
async def test_run_until_aborted_returns_work_result():
    async def work() -> int:
        return 7

    assert await run_until_aborted(work(), AbortSignal()) == 7


@pytest.mark.asyncio
async def test_run_until_aborted_cancels_work_when_signal_fires():
    started = asyncio.Event()
    cancelled = False

    async def work() -> int:
        nonlocal cancelled
        started.set()
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled = True
            raise
        return 1

    signal = AbortSignal()
    runner = asyncio.ensure_future(run_until_aborted(work(), signal))
    await started.wait()
    signal.abort()

    with pytest.raises(ResourceAbortError) as exc_info:
        await runner
    assert exc_info.value.reason == "cancelled"
    assert cancelled is True


@pytest.mark.asyncio
async def test_run_until_aborted_fails_fast_on_aborted_signal():
    calls = 0

    async def work() -> int:
        nonlocal calls
        calls += 1
        return 1

    signal = AbortSignal()
    signal.abort("timeout")
    with pytest.raises(ResourceTimeoutError):
        await run_until_aborted(work(), signal)
    assert calls == 0
