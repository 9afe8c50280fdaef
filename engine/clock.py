"""
Simulation Clock

A single periodic ticker that drives all live-state mutation. On each
tick every registered asset is regenerated, then each asset's
subscribers are notified with its fresh snapshot.

States:
    Stopped (initial) --start()--> Running
    Running --start()--> Running (old ticker replaced, never duplicated)
    Running --stop()--> Stopped
    Stopped --stop()--> Stopped (no-op)

The ticker is an asyncio task on the running event loop. start() and
stop() must be called from that loop's thread. A tick itself is fully
synchronous, so once stop() returns no further tick can run.

tick() may also be called directly from any thread. Ticks are
serialized: the next one starts only after every subscriber of the
previous one has been notified.
"""

import asyncio
import logging
import threading
from typing import Optional

from core.assets import AssetRegistry
from .subscriptions import SubscriptionDirectory

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 5.0  # seconds


class SimulationClock:
    """
    Periodic regenerate-and-notify loop.

    Example:
        clock = SimulationClock(registry, directory)
        clock.start(interval=5.0)   # inside a running event loop
        ...
        clock.stop()
    """

    def __init__(
        self,
        registry: AssetRegistry,
        directory: SubscriptionDirectory,
        default_interval: float = DEFAULT_TICK_INTERVAL
    ):
        self.registry = registry
        self.directory = directory
        self.default_interval = default_interval

        self._task: Optional[asyncio.Task] = None
        self._interval: Optional[float] = None
        self._tick_count = 0
        self._tick_lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def interval(self) -> Optional[float]:
        """Interval of the active ticker, or None when stopped."""
        return self._interval if self.is_running else None

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def start(self, interval: Optional[float] = None) -> None:
        """
        Start ticking every `interval` seconds.

        Any ticker already running is stopped first, so there is only
        ever one.

        Raises:
            ValueError: If interval is not positive
            RuntimeError: If there is no running event loop
        """
        interval = self.default_interval if interval is None else interval
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")

        loop = asyncio.get_running_loop()
        if self._task is not None:
            self.stop()

        self._interval = interval
        self._task = loop.create_task(self._run(interval))
        logger.info("BMS simulation started (update interval: %.3fs)", interval)

    def stop(self) -> None:
        """Cancel the active ticker. Does nothing when already stopped."""
        if self._task is None:
            return
        self._task.cancel()
        self._task = None
        self._interval = None
        logger.info("BMS simulation stopped")

    def tick(self) -> int:
        """
        Run one tick synchronously.

        All assets are regenerated as one batch before any subscriber
        is notified. Concurrent callers wait for the running tick to
        finish, so subscribers never see an older snapshot after a
        newer one.

        Returns:
            Number of assets updated
        """
        with self._tick_lock:
            snapshots = self.registry.tick_all()
            for asset_id, snapshot in snapshots.items():
                self.directory.notify_all(asset_id, snapshot)
            self._tick_count += 1
            logger.debug("Tick %d updated %d assets", self._tick_count, len(snapshots))
        return len(snapshots)

    async def _run(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            try:
                self.tick()
            except Exception:
                logger.exception("Simulation tick failed")
