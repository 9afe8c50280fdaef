"""
Engine Module - Telemetry Simulation & Subscriptions

This module drives the live telemetry simulation on top of the core
registry.

Key Components:
- TelemetryEngine: Query facade, lifecycle and registration
- SimulationClock: Periodic regenerate-and-notify ticker
- SubscriptionDirectory: Per-asset update callbacks
- synthesize_history: On-demand historical series

Usage:
    from engine import TelemetryEngine, LatencyProfile

    engine = TelemetryEngine(latency=LatencyProfile.none())
    engine.initialize()  # loads the seed database, starts ticking

    cancel = engine.subscribe("1hOSwPNfz2Bw_3Z7ePjS2T", print)
    ...
    cancel()
    engine.stop()
"""

from .clock import SimulationClock, DEFAULT_TICK_INTERVAL
from .history import HistoricalPoint, synthesize_history, diurnal_multiplier
from .seed import SEED_DATABASE, SeedEntry
from .subscriptions import SubscriptionDirectory
from .telemetry import TelemetryEngine, LatencyProfile

__all__ = [
    # Facade
    "TelemetryEngine",
    "LatencyProfile",

    # Live updates
    "SimulationClock",
    "SubscriptionDirectory",
    "DEFAULT_TICK_INTERVAL",

    # History
    "HistoricalPoint",
    "synthesize_history",
    "diurnal_multiplier",

    # Seed data
    "SEED_DATABASE",
    "SeedEntry",
]

__version__ = "0.1.0"
