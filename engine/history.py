"""
Historical Data Synthesizer

Generates plausible historical time series for a channel on demand.
Nothing is recorded - each call produces a fresh series.

Features:
- Fixed point spacing (15 minutes by default), ending at "now"
- Diurnal modulation (values peak around midday, dip at night)
- Bounded random walk: each point walks from the previous one, so
  successive points are correlated instead of independent samples
"""

import math
import random
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from core.profiles import ChannelProfile
from core.readings import generate_value

DEFAULT_POINT_INTERVAL_MINUTES = 15


@dataclass(frozen=True)
class HistoricalPoint:
    """A single timestamped value in a synthesized series."""
    timestamp: datetime
    value: float

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {"timestamp": self.timestamp.isoformat(), "value": self.value}


def diurnal_multiplier(hour: int) -> float:
    """
    Daily modulation factor for an hour of day (0-23).

    Follows the same sine curve the building load profile uses:
    1.0 at 06:00 and 18:00, peak 1.3 at noon, trough 0.7 at midnight.
    """
    return math.sin((hour - 6) * math.pi / 12) * 0.3 + 1


def point_count(hours: int, point_interval_minutes: int = DEFAULT_POINT_INTERVAL_MINUTES) -> int:
    """Number of points a series covering `hours` contains, including now."""
    if point_interval_minutes <= 0:
        raise ValueError(f"Point interval must be positive, got {point_interval_minutes}")
    return max(0, int(hours * 60 // point_interval_minutes)) + 1


def synthesize_history(
    profile: ChannelProfile,
    hours: int = 24,
    point_interval_minutes: int = DEFAULT_POINT_INTERVAL_MINUTES,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None
) -> List[HistoricalPoint]:
    """
    Synthesize a historical series for a channel profile.

    Args:
        profile: Profile giving bounds for every value
        hours: How far back the series reaches
        point_interval_minutes: Spacing between points
        now: Timestamp of the newest point (current time if None)
        rng: Random source (module-level random if None)

    Returns:
        Points in ascending timestamp order, oldest first, the last
        one stamped exactly `now`

    Raises:
        ValueError: If point_interval_minutes is not positive
    """
    count = point_count(hours, point_interval_minutes)
    now = now or datetime.now()
    step = timedelta(minutes=point_interval_minutes)

    points = []
    base = profile.midpoint
    for i in range(count - 1, -1, -1):
        timestamp = now - i * step
        target = base * diurnal_multiplier(timestamp.hour)
        value = generate_value(profile, target, rng)
        points.append(HistoricalPoint(timestamp=timestamp, value=value))
        base = value

    return points
