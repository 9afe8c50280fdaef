"""
BMS Telemetry Engine

The external-facing API of the telemetry simulation. One engine
instance owns the asset registry, the subscription directory and the
simulation clock; the application constructs it once and hands it to
whatever needs live sensor data.

Point, bulk and history queries are async and simulate BMS latency so
callers keep their asynchronous handling honest. The latency is
advisory only - LatencyProfile.none() removes it without changing any
result.

Example:
    engine = TelemetryEngine(latency=LatencyProfile.none())
    engine.initialize()                     # inside a running event loop

    asset = await engine.get_one("1hOSwPNfz2Bw_3Z7ePjS2T")
    cancel = engine.subscribe(asset.asset_id, on_update)
    history = await engine.get_history(asset.asset_id, ChannelKind.TEMPERATURE, 24)
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

from core.assets import AssetRegistry, MonitoredAsset
from core.profiles import ChannelKind, ChannelProfile, get_profile
from .clock import DEFAULT_TICK_INTERVAL, SimulationClock
from .config import EngineSettings
from .history import HistoricalPoint, synthesize_history
from .seed import SEED_DATABASE, SeedEntry
from .subscriptions import CancelFunc, SubscriptionDirectory, UpdateCallback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LatencyProfile:
    """Simulated response delay ranges in seconds, as (low, high)."""
    point: Tuple[float, float] = (0.05, 0.15)
    batch: Tuple[float, float] = (0.05, 0.20)
    history: Tuple[float, float] = (0.10, 0.30)

    @classmethod
    def none(cls) -> "LatencyProfile":
        """No simulated latency (deterministic tests)."""
        return cls(point=(0.0, 0.0), batch=(0.0, 0.0), history=(0.0, 0.0))


class TelemetryEngine:
    """
    Simulated BMS telemetry for a fleet of monitored assets.

    Args:
        latency: Simulated latency ranges (realistic defaults if None)
        random_seed: Seed for reproducible values (unseeded if None)
        tick_interval: Default seconds between simulation ticks
    """

    def __init__(
        self,
        latency: Optional[LatencyProfile] = None,
        random_seed: Optional[int] = None,
        tick_interval: float = DEFAULT_TICK_INTERVAL
    ):
        self.latency = latency or LatencyProfile()
        self._rng = random.Random(random_seed)
        # Delays must not consume the seeded value stream
        self._latency_rng = random.Random()

        self.registry = AssetRegistry(rng=self._rng)
        self.subscriptions = SubscriptionDirectory()
        self.clock = SimulationClock(
            self.registry, self.subscriptions, default_interval=tick_interval
        )

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> "TelemetryEngine":
        """Build an engine from environment-derived settings."""
        return cls(
            latency=None if settings.simulate_latency else LatencyProfile.none(),
            random_seed=settings.random_seed,
            tick_interval=settings.tick_interval_seconds,
        )

    # =========================================
    # Lifecycle
    # =========================================

    def load_seed(self, entries: Optional[Iterable[SeedEntry]] = None) -> int:
        """
        Register every seed entry. Returns the number of entries loaded.
        """
        entries = SEED_DATABASE if entries is None else list(entries)
        logger.info("Loading BMS seed database (%d entries)...", len(entries))
        for entry in entries:
            self.registry.register(entry.asset_id, entry.display_name, entry.kinds)
        logger.info("BMS database initialized with %d elements", len(self.registry))
        return len(entries)

    def initialize(
        self,
        seed: Optional[Iterable[SeedEntry]] = None,
        interval: Optional[float] = None
    ) -> None:
        """
        Load seed data (only when no assets are registered yet) and
        start the simulation clock. Must run inside an event loop.
        """
        if len(self.registry) == 0:
            self.load_seed(seed)
        self.start(interval)

    def start(self, interval: Optional[float] = None) -> None:
        """Start (or restart) the simulation clock."""
        self.clock.start(interval)

    def stop(self) -> None:
        """Stop the simulation clock. Safe to call when already stopped."""
        self.clock.stop()

    @property
    def is_running(self) -> bool:
        return self.clock.is_running

    # =========================================
    # Registration
    # =========================================

    def register(
        self,
        asset_id: str,
        display_name: str,
        kinds: Iterable[Union[ChannelKind, str]]
    ) -> MonitoredAsset:
        """Register (or replace) an asset and its channels."""
        return self.registry.register(asset_id, display_name, kinds)

    def add_asset(
        self,
        asset_id: str,
        display_name: str,
        kinds: Iterable[Union[ChannelKind, str]]
    ) -> MonitoredAsset:
        """Register an asset at runtime, e.g. when a new model is loaded."""
        asset = self.register(asset_id, display_name, kinds)
        logger.info(
            "BMS: Added element %s (%s) with sensors: %s",
            display_name, asset_id, ", ".join(k.value for k in asset.kinds)
        )
        return asset

    # =========================================
    # Synchronous Queries
    # =========================================

    def has(self, asset_id: str) -> bool:
        return self.registry.has(asset_id)

    def all_ids(self) -> List[str]:
        return self.registry.all_ids()

    def assets_with_alerts(self) -> Dict[str, MonitoredAsset]:
        return self.registry.assets_with_alerts()

    def profile(self, kind: Union[ChannelKind, str]) -> ChannelProfile:
        return get_profile(kind)

    def subscribe(self, asset_id: str, callback: UpdateCallback) -> CancelFunc:
        return self.subscriptions.subscribe(asset_id, callback)

    # =========================================
    # Async Queries (simulated latency)
    # =========================================

    async def get_one(self, asset_id: str) -> Optional[MonitoredAsset]:
        """Current snapshot of one asset, or None if it is not registered."""
        await self._delay(self.latency.point)
        return self.registry.get(asset_id)

    async def get_many(self, asset_ids: Iterable[str]) -> Dict[str, MonitoredAsset]:
        """
        Snapshots for several assets. Ids that are not registered are
        left out of the result; latency is paid once for the batch.
        """
        asset_ids = list(asset_ids)
        await self._delay(self.latency.batch)

        result = {}
        for asset_id in asset_ids:
            asset = self.registry.get(asset_id)
            if asset is not None:
                result[asset_id] = asset
            else:
                logger.debug("No BMS data for asset %s", asset_id)
        return result

    async def get_history(
        self,
        asset_id: str,
        kind: Union[ChannelKind, str],
        hours: int = 24
    ) -> List[HistoricalPoint]:
        """
        Synthesized history for one channel.

        Depends only on the channel profile; the asset does not have to
        expose the channel, or be registered at all.

        Raises:
            ValueError: If kind is not a known channel kind
        """
        profile = get_profile(kind)
        await self._delay(self.latency.history)
        logger.debug("Synthesizing %dh of %s history for %s", hours, profile.kind.value, asset_id)
        return synthesize_history(profile, hours, rng=self._rng)

    async def _delay(self, bounds: Tuple[float, float]) -> None:
        low, high = bounds
        if high <= 0:
            return
        await asyncio.sleep(self._latency_rng.uniform(low, high))
