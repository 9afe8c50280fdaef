"""
Channel Profile Registry

Static per-channel configuration for every kind of quantity the BMS
can monitor: value bounds, engineering unit, and the warning/alarm
thresholds used by the severity classifier.

Profiles are read-only after the module is imported. The set of
channel kinds is closed - asking for a kind that does not exist is a
programming error and fails immediately.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Union
import logging

logger = logging.getLogger(__name__)


class ChannelKind(Enum):
    """Kinds of monitored channels supported by the BMS."""
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    OCCUPANCY = "occupancy"
    CO2 = "co2"
    ENERGY = "energy"
    LIGHTING = "lighting"
    AIRFLOW = "airflow"
    PRESSURE = "pressure"


@dataclass(frozen=True)
class ChannelProfile:
    """
    Configuration for a single channel kind.

    Attributes:
        kind: The channel kind this profile describes
        min_value: Lowest value a reading can take
        max_value: Highest value a reading can take
        unit: Engineering unit shown next to values
        warning_threshold: Readings at or above this are warnings
        alarm_threshold: Readings at or above this are alarms
    """
    kind: ChannelKind
    min_value: float
    max_value: float
    unit: str
    warning_threshold: float
    alarm_threshold: float

    @property
    def value_range(self) -> float:
        return self.max_value - self.min_value

    @property
    def midpoint(self) -> float:
        return self.min_value + self.value_range * 0.5

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "kind": self.kind.value,
            "min_value": self.min_value,
            "max_value": self.max_value,
            "unit": self.unit,
            "warning_threshold": self.warning_threshold,
            "alarm_threshold": self.alarm_threshold,
        }


# Thresholds are authored by hand per kind; keep them as configured.
_PROFILES: Dict[ChannelKind, ChannelProfile] = {
    ChannelKind.TEMPERATURE: ChannelProfile(ChannelKind.TEMPERATURE, 15, 35, "°C", 28, 32),
    ChannelKind.HUMIDITY: ChannelProfile(ChannelKind.HUMIDITY, 20, 90, "%", 70, 85),
    ChannelKind.OCCUPANCY: ChannelProfile(ChannelKind.OCCUPANCY, 0, 100, "people", 80, 95),
    ChannelKind.CO2: ChannelProfile(ChannelKind.CO2, 400, 2000, "ppm", 1000, 1500),
    ChannelKind.ENERGY: ChannelProfile(ChannelKind.ENERGY, 0, 500, "kWh", 350, 450),
    ChannelKind.LIGHTING: ChannelProfile(ChannelKind.LIGHTING, 0, 100, "%", 90, 100),
    ChannelKind.AIRFLOW: ChannelProfile(ChannelKind.AIRFLOW, 0, 2000, "m³/h", 1500, 1800),
    ChannelKind.PRESSURE: ChannelProfile(ChannelKind.PRESSURE, 95, 105, "kPa", 102, 104),
}


def to_channel_kind(kind: Union[ChannelKind, str]) -> ChannelKind:
    """
    Coerce a kind or its string value to a ChannelKind.

    Raises:
        ValueError: If the value does not name a known channel kind
    """
    if isinstance(kind, ChannelKind):
        return kind
    try:
        return ChannelKind(kind)
    except ValueError:
        raise ValueError(f"Unknown channel kind: {kind!r}") from None


def get_profile(kind: Union[ChannelKind, str]) -> ChannelProfile:
    """
    Look up the profile for a channel kind.

    Args:
        kind: A ChannelKind member or its string value

    Returns:
        The ChannelProfile configured for that kind

    Raises:
        ValueError: If the kind is not part of the closed ChannelKind set
    """
    return _PROFILES[to_channel_kind(kind)]


def all_profiles() -> List[ChannelProfile]:
    """Return every configured profile in ChannelKind order."""
    return [_PROFILES[kind] for kind in ChannelKind]


def check_profile_ordering(profile: ChannelProfile) -> List[str]:
    """
    Check min < warning <= alarm <= max for a profile.

    Returns a list of human-readable problems (empty when the profile is
    well ordered). Problems are reported, not corrected.
    """
    problems = []
    if not profile.min_value < profile.warning_threshold:
        problems.append(
            f"{profile.kind.value}: warning threshold {profile.warning_threshold} "
            f"is not above min value {profile.min_value}"
        )
    if not profile.warning_threshold <= profile.alarm_threshold:
        problems.append(
            f"{profile.kind.value}: alarm threshold {profile.alarm_threshold} "
            f"is below warning threshold {profile.warning_threshold}"
        )
    if not profile.alarm_threshold <= profile.max_value:
        problems.append(
            f"{profile.kind.value}: alarm threshold {profile.alarm_threshold} "
            f"exceeds max value {profile.max_value}"
        )
    return problems


def _log_profile_problems() -> None:
    for profile in _PROFILES.values():
        for problem in check_profile_ordering(profile):
            logger.warning("Channel profile out of order: %s", problem)


_log_profile_problems()
