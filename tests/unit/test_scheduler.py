"""Unit tests for the refresh scheduler."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from application.scheduler import RefreshScheduler


@pytest.mark.asyncio
async def test_run_cycle_merges_every_dataset():
    merge_service = AsyncMock()
    merge_service.run_all.return_value = {"September": True, "January": False}
    scheduler = RefreshScheduler(merge_service, interval=3600)

    ran = await scheduler.run_cycle()

    assert ran is True
    merge_service.run_all.assert_awaited_once()


@pytest.mark.asyncio
async def test_overlapping_cycle_is_skipped():
    release = asyncio.Event()

    async def slow_run_all():
        await release.wait()
        return {"September": True}

    merge_service = AsyncMock()
    merge_service.run_all.side_effect = slow_run_all
    scheduler = RefreshScheduler(merge_service, interval=3600)

    first = asyncio.create_task(scheduler.run_cycle())
    await asyncio.sleep(0)

    assert await scheduler.run_cycle() is False

    release.set()
    assert await first is True
    assert merge_service.run_all.await_count == 1


@pytest.mark.asyncio
async def test_start_runs_immediately_and_on_interval():
    merge_service = AsyncMock()
    merge_service.run_all.return_value = {}
    scheduler = RefreshScheduler(merge_service, interval=0.01)

    scheduler.start()
    await asyncio.sleep(0.05)
    await scheduler.stop()

    assert merge_service.run_all.await_count >= 2
    assert not scheduler.running


@pytest.mark.asyncio
async def test_stop_cancels_in_flight_cycle():
    never = asyncio.Event()

    async def hung_run_all():
        await never.wait()

    merge_service = AsyncMock()
    merge_service.run_all.side_effect = hung_run_all
    scheduler = RefreshScheduler(merge_service, interval=3600)

    scheduler.start()
    await asyncio.sleep(0.01)
    await scheduler.stop()

    assert not scheduler.running
    assert merge_service.run_all.await_count == 1
