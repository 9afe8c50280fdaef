"""
Engine Configuration

Settings for the telemetry engine, read from environment variables.

Variables:
- BMS_TICK_INTERVAL_SECONDS: seconds between simulation ticks (default: 5.0)
- BMS_SIMULATE_LATENCY: "true" to delay async queries (default: true)
- BMS_RANDOM_SEED: integer seed for reproducible readings (default: unseeded)
- BMS_LOAD_SEED_DATA: "true" to register the built-in assets (default: true)
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class EngineSettings:
    tick_interval_seconds: float
    simulate_latency: bool
    random_seed: Optional[int]
    load_seed_data: bool


def get_settings() -> EngineSettings:
    seed = os.getenv("BMS_RANDOM_SEED")

    return EngineSettings(
        tick_interval_seconds=float(os.getenv("BMS_TICK_INTERVAL_SECONDS", "5.0")),
        simulate_latency=_env_bool("BMS_SIMULATE_LATENCY", "true"),
        random_seed=int(seed) if seed else None,
        load_seed_data=_env_bool("BMS_LOAD_SEED_DATA", "true"),
    )
