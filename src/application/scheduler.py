"""Periodic refresh of every dataset document."""

import asyncio

from loguru import logger

from services.merge import MergeService


class RefreshScheduler:
    """Runs a full merge cycle at startup and then on a fixed interval.

    Cycles never overlap: if the previous cycle is still running when the
    timer fires, the new one is skipped. The interval should comfortably
    exceed a full cycle, which is the sum of per-row fetch latencies.
    """

    def __init__(self, merge_service: MergeService, interval: float):
        self.merge_service = merge_service
        self.interval = interval
        self._cycle_lock = asyncio.Lock()
        self._task: asyncio.Task | None = None
        self._cycles: set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_cycle(self) -> bool:
        """Merge every dataset once. Returns False if a cycle was already in flight."""
        if self._cycle_lock.locked():
            logger.warning("Previous refresh cycle still running, skipping this one")
            return False

        async with self._cycle_lock:
            logger.info("Starting refresh cycle")
            results = await self.merge_service.run_all()
            succeeded = [name for name, ok in results.items() if ok]
            logger.info(f"Refresh cycle finished: {len(succeeded)}/{len(results)} datasets saved")
        return True

    async def _loop(self) -> None:
        while True:
            cycle = asyncio.create_task(self.run_cycle())
            self._cycles.add(cycle)
            cycle.add_done_callback(self._cycles.discard)
            await asyncio.sleep(self.interval)

    def start(self) -> None:
        if self.running:
            return
        logger.info(f"Starting refresh scheduler (every {self.interval:.0f}s)")
        self._task = asyncio.create_task(self._loop())

    async def stop(self) -> None:
        if self._task is None:
            return
        tasks = [self._task, *self._cycles]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._task = None
        logger.info("Refresh scheduler stopped")
