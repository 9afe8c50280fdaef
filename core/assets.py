"""
Asset Registry

Owns all live sensor state: which channels every monitored asset
exposes and the current reading of each channel.

Asset identifiers are opaque external keys (in a BIM model these are
IFC GlobalIds). Assets are immutable snapshots: a tick or an injected
value replaces the stored asset with a new one, so a snapshot handed
to one caller can never change under another.

All operations are serialized behind a single re-entrant lock, so an
asset is never observable with only some of its channels updated.
"""

import logging
import random
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Union

from .profiles import ChannelKind, get_profile, to_channel_kind
from .readings import Reading, Severity, generate_value, make_reading

logger = logging.getLogger(__name__)

ALERT_SEVERITIES = (Severity.WARNING, Severity.ALARM)


@dataclass(frozen=True)
class MonitoredAsset:
    """
    A monitored asset and the current reading of each of its channels.

    Attributes:
        asset_id: Opaque external identifier (e.g. an IFC GlobalId)
        display_name: Human-readable element name
        readings: Current reading per channel kind, in registration order
            (read-only view)
        last_updated: Time of the last registration or tick
    """
    asset_id: str
    display_name: str
    readings: Mapping[ChannelKind, Reading] = field(default_factory=dict)
    last_updated: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        object.__setattr__(self, "readings", MappingProxyType(dict(self.readings)))

    @property
    def kinds(self) -> List[ChannelKind]:
        return list(self.readings.keys())

    @property
    def has_alert(self) -> bool:
        """True if any channel is in warning or alarm."""
        return any(r.severity in ALERT_SEVERITIES for r in self.readings.values())

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "asset_id": self.asset_id,
            "display_name": self.display_name,
            "readings": {k.value: r.to_dict() for k, r in self.readings.items()},
            "last_updated": self.last_updated.isoformat(),
        }


class AssetRegistry:
    """
    In-memory registry of monitored assets.

    Example:
        registry = AssetRegistry()
        registry.register("A1", "Pump-01", [ChannelKind.TEMPERATURE, ChannelKind.PRESSURE])
        registry.tick_one("A1")
        asset = registry.get("A1")
        print(asset.readings[ChannelKind.TEMPERATURE].value)
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize an empty registry.

        Args:
            rng: Random source for value generation (module-level random if None)
        """
        self._rng = rng
        self._assets: Dict[str, MonitoredAsset] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._assets)

    def register(
        self,
        asset_id: str,
        display_name: str,
        kinds: Iterable[Union[ChannelKind, str]]
    ) -> MonitoredAsset:
        """
        Register an asset, replacing any existing channel set and readings.

        Each channel starts from a fresh value around its range midpoint.

        Raises:
            ValueError: If any kind is not a known channel kind
        """
        resolved = [to_channel_kind(k) for k in kinds]
        now = datetime.now()
        readings = {}
        for kind in resolved:
            profile = get_profile(kind)
            value = generate_value(profile, None, self._rng)
            readings[kind] = make_reading(profile, value, now)

        asset = MonitoredAsset(
            asset_id=asset_id,
            display_name=display_name,
            readings=readings,
            last_updated=now,
        )
        with self._lock:
            replaced = asset_id in self._assets
            self._assets[asset_id] = asset

        logger.debug(
            "%s asset %s (%s) with channels: %s",
            "Re-registered" if replaced else "Registered",
            asset_id, display_name, ", ".join(k.value for k in resolved)
        )
        return asset

    def get(self, asset_id: str) -> Optional[MonitoredAsset]:
        """Return a snapshot of the asset, or None if it is not registered."""
        with self._lock:
            asset = self._assets.get(asset_id)
            return asset

    def has(self, asset_id: str) -> bool:
        with self._lock:
            return asset_id in self._assets

    def all_ids(self) -> List[str]:
        """Return every registered asset id in registration order."""
        with self._lock:
            return list(self._assets.keys())

    def tick_one(self, asset_id: str) -> Optional[MonitoredAsset]:
        """
        Regenerate every channel of one asset.

        Each channel walks from its current value, so consecutive ticks
        are correlated rather than independent draws.

        Returns:
            Snapshot of the updated asset, or None if it is not registered
        """
        with self._lock:
            asset = self._assets.get(asset_id)
            if asset is None:
                return None

            now = datetime.now()
            readings = {}
            for kind, current in asset.readings.items():
                profile = get_profile(kind)
                value = generate_value(profile, current.value, self._rng)
                readings[kind] = make_reading(profile, value, now)

            updated = replace(asset, readings=readings, last_updated=now)
            self._assets[asset_id] = updated
            return updated

    def tick_all(self) -> Dict[str, MonitoredAsset]:
        """Tick every asset as one batch and return the updated snapshots."""
        with self._lock:
            updated = {}
            for asset_id in list(self._assets.keys()):
                updated[asset_id] = self.tick_one(asset_id)
            return updated

    def set_value(
        self,
        asset_id: str,
        kind: Union[ChannelKind, str],
        value: float
    ) -> Optional[MonitoredAsset]:
        """
        Replace one channel's reading with a given value.

        Used to inject conditions (e.g. force an alarm) in tests and demos.
        The value is clamped to the profile bounds and re-classified.

        Returns:
            Snapshot of the updated asset, or None if the asset is not
            registered

        Raises:
            ValueError: If the kind is unknown or not exposed by the asset
        """
        kind = to_channel_kind(kind)
        profile = get_profile(kind)
        value = min(profile.max_value, max(profile.min_value, value))

        with self._lock:
            asset = self._assets.get(asset_id)
            if asset is None:
                return None
            if kind not in asset.readings:
                raise ValueError(
                    f"Asset {asset_id} does not expose channel {kind.value}"
                )
            now = datetime.now()
            readings = dict(asset.readings)
            readings[kind] = make_reading(profile, value, now)
            updated = replace(asset, readings=readings, last_updated=now)
            self._assets[asset_id] = updated
            return updated

    def assets_with_alerts(self) -> Dict[str, MonitoredAsset]:
        """Return snapshots of every asset with a channel in warning or alarm."""
        with self._lock:
            return {
                asset_id: asset
                for asset_id, asset in self._assets.items()
                if asset.has_alert
            }
