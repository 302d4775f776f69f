import asyncio
from datetime import timedelta

import pytest

from kadroute.timer import Timer


@pytest.mark.asyncio
async def test_callbacks_fire_in_expiration_order():
    timer = Timer()
    fired = []
    timer.expires_from_now(0.05, lambda: fired.append("late"))
    timer.expires_from_now(0.01, lambda: fired.append("early"))
    assert timer.pending() == 2
    await asyncio.sleep(0.15)
    assert fired == ["early", "late"]
    assert timer.pending() == 0


@pytest.mark.asyncio
async def test_callback_does_not_fire_before_timeout():
    timer = Timer(asyncio.get_running_loop())
    fired = []
    timer.expires_from_now(0.5, lambda: fired.append(1))
    await asyncio.sleep(0.01)
    assert fired == []
    assert timer.pending() == 1
    timer.cancel()


@pytest.mark.asyncio
async def test_cancel_drops_callbacks():
    timer = Timer()
    fired = []
    timer.expires_from_now(0.01, lambda: fired.append(1))
    timer.expires_from_now(0.02, lambda: fired.append(2))
    timer.cancel()
    assert timer.pending() == 0
    await asyncio.sleep(0.06)
    assert fired == []


@pytest.mark.asyncio
async def test_callback_can_schedule_another():
    timer = Timer()
    fired = []

    def first():
        fired.append("first")
        timer.expires_from_now(0.01, lambda: fired.append("second"))

    timer.expires_from_now(0.01, first)
    await asyncio.sleep(0.1)
    assert fired == ["first", "second"]
    assert timer.pending() == 0


@pytest.mark.asyncio
async def test_accepts_timedelta():
    timer = Timer()
    fired = []
    timer.expires_from_now(timedelta(milliseconds=10), lambda: fired.append(True))
    await asyncio.sleep(0.08)
    assert fired == [True]