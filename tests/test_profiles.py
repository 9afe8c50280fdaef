"""
Tests for Channel Profiles

Run with: pytest tests/test_profiles.py -v
"""

import dataclasses

import pytest
from core.profiles import (
    ChannelKind,
    ChannelProfile,
    all_profiles,
    check_profile_ordering,
    get_profile,
    to_channel_kind,
)


class TestChannelKind:
    """Test the closed set of channel kinds."""

    def test_kind_values(self):
        """Test all channel kinds exist."""
        assert {k.value for k in ChannelKind} == {
            "temperature", "humidity", "occupancy", "co2",
            "energy", "lighting", "airflow", "pressure",
        }

    def test_string_coercion(self):
        """Channel kinds resolve from their names."""
        assert to_channel_kind("co2") is ChannelKind.CO2
        assert to_channel_kind(ChannelKind.CO2) is ChannelKind.CO2


class TestGetProfile:
    """Test profile lookup."""

    def test_every_kind_has_a_profile(self):
        """No channel kind is missing a profile."""
        for kind in ChannelKind:
            assert get_profile(kind).kind is kind

    def test_temperature_profile(self):
        """Temperature profile carries the configured values."""
        profile = get_profile(ChannelKind.TEMPERATURE)

        assert profile.min_value == 15
        assert profile.max_value == 35
        assert profile.unit == "°C"
        assert profile.warning_threshold == 28
        assert profile.alarm_threshold == 32

    def test_lookup_by_string(self):
        """Profiles can be looked up by name."""
        assert get_profile("pressure") is get_profile(ChannelKind.PRESSURE)

    def test_unknown_kind_fails_fast(self):
        """Unknown kinds raise ValueError."""
        with pytest.raises(ValueError, match="Unknown channel kind"):
            get_profile("radiation")

    def test_profiles_are_read_only(self):
        """Profiles cannot be modified."""
        profile = get_profile(ChannelKind.HUMIDITY)
        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.max_value = 200

    def test_all_profiles_order(self):
        """Profiles are listed in enum order."""
        assert [p.kind for p in all_profiles()] == list(ChannelKind)

    def test_midpoint_and_range(self):
        """Midpoint and range derive from the bounds."""
        profile = get_profile(ChannelKind.CO2)
        assert profile.value_range == 1600
        assert profile.midpoint == 1200


class TestProfileOrdering:
    """Test threshold ordering checks."""

    def test_configured_profiles_are_ordered(self):
        """Built-in profiles pass the ordering check."""
        for profile in all_profiles():
            assert check_profile_ordering(profile) == []

    def test_alarm_equal_to_max_is_allowed(self):
        """An alarm threshold at the maximum is valid."""
        # lighting alarms at exactly its maximum
        assert check_profile_ordering(get_profile(ChannelKind.LIGHTING)) == []

    def test_out_of_order_thresholds_are_reported(self):
        """Warning above alarm is reported."""
        profile = ChannelProfile(ChannelKind.TEMPERATURE, 15, 35, "°C", 33, 30)
        problems = check_profile_ordering(profile)

        assert len(problems) == 1
        assert "below warning threshold" in problems[0]

    def test_thresholds_outside_bounds_are_reported(self):
        """Thresholds outside the bounds are reported."""
        profile = ChannelProfile(ChannelKind.PRESSURE, 95, 105, "kPa", 90, 110)
        problems = check_profile_ordering(profile)

        assert len(problems) == 2

    def test_to_dict(self):
        """Profiles serialize with the kind name."""
        d = get_profile(ChannelKind.AIRFLOW).to_dict()

        assert d["kind"] == "airflow"
        assert d["unit"] == "m³/h"
        assert d["alarm_threshold"] == 1800
