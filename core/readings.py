"""
Reading Generator and Severity Classifier

Produces new bounded channel values as a random walk around a base
value, and classifies values into normal/warning/alarm.

The classifier is ascending and one-sided: only high values raise a
warning or alarm. A value close to the bottom of its range is still
normal - there is no low-side alarm.
"""

import random
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from .profiles import ChannelProfile

# Noise is drawn from +/- this fraction of the profile's value range
NOISE_FRACTION = 0.05


class Severity(Enum):
    """Severity levels for a channel reading."""
    NORMAL = "normal"
    WARNING = "warning"
    ALARM = "alarm"


# Status colours used by gauges and element highlighting (0xRRGGBB)
SEVERITY_COLORS: Dict[Severity, int] = {
    Severity.ALARM: 0xFF4444,
    Severity.WARNING: 0xFFAA00,
    Severity.NORMAL: 0x44FF44,
}


@dataclass(frozen=True)
class Reading:
    """
    A single channel reading. Never mutated - each tick replaces it.

    Attributes:
        value: Channel value, always within the profile bounds
        unit: Engineering unit copied from the profile
        timestamp: When the reading was generated
        severity: Classification of value against the profile thresholds
    """
    value: float
    unit: str
    timestamp: datetime
    severity: Severity

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "value": self.value,
            "unit": self.unit,
            "timestamp": self.timestamp.isoformat(),
            "severity": self.severity.value,
        }


def generate_value(
    profile: ChannelProfile,
    previous: Optional[float] = None,
    rng: Optional[random.Random] = None
) -> float:
    """
    Generate a new value for a channel.

    Args:
        profile: Profile giving the value bounds
        previous: Base value to walk from (uses the range midpoint if None)
        rng: Random source (module-level random if None)

    Returns:
        base + uniform noise of +/-5% of the range, clamped to the
        profile bounds and rounded to one decimal place
    """
    rng = rng or random
    span = profile.value_range
    base = previous if previous is not None else profile.midpoint
    noise = rng.uniform(-NOISE_FRACTION * span, NOISE_FRACTION * span)
    value = min(profile.max_value, max(profile.min_value, base + noise))
    return round(value, 1)


def classify(value: float, profile: ChannelProfile) -> Severity:
    """Classify a value against the profile's ascending thresholds."""
    if value >= profile.alarm_threshold:
        return Severity.ALARM
    if value >= profile.warning_threshold:
        return Severity.WARNING
    return Severity.NORMAL


def make_reading(
    profile: ChannelProfile,
    value: float,
    timestamp: Optional[datetime] = None
) -> Reading:
    """Build a Reading for an already generated value."""
    return Reading(
        value=value,
        unit=profile.unit,
        timestamp=timestamp or datetime.now(),
        severity=classify(value, profile),
    )


def format_reading(reading: Reading) -> str:
    """Format a reading as '<value> <unit>' for display."""
    return f"{reading.value} {reading.unit}"


def severity_color(severity: Severity) -> int:
    """Return the display colour for a severity as a 0xRRGGBB integer."""
    return SEVERITY_COLORS[severity]
