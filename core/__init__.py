"""
Core Module - BMS Telemetry

This module contains the live-state building blocks of the telemetry
simulation:
- Channel profiles (bounds, units, thresholds)
- Reading generation and severity classification
- Asset registry (all live sensor state)

These components are framework-agnostic and are used by both the
engine and the API.
"""

from .profiles import ChannelKind, ChannelProfile, get_profile, all_profiles
from .readings import Reading, Severity, generate_value, classify, format_reading, severity_color
from .assets import AssetRegistry, MonitoredAsset

__all__ = [
    # Profiles
    "ChannelKind",
    "ChannelProfile",
    "get_profile",
    "all_profiles",

    # Readings
    "Reading",
    "Severity",
    "generate_value",
    "classify",
    "format_reading",
    "severity_color",

    # Registry
    "AssetRegistry",
    "MonitoredAsset",
]

__version__ = "0.1.0"
