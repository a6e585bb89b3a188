# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for bundled sample profiles."""

from __future__ import annotations

import pytest

from space_compliance.data.profiles import (
    PROFILES,
    SampleProfile,
    get_profile,
    profiles_for_domain,
)
from space_compliance.domains import get_domain


class TestProfiles:
    """Tests for profile registration and retrieval."""

    @pytest.mark.parametrize("key", list(PROFILES.keys()))
    def test_get_profile_returns_correct_type(self, key: str):
        profile = get_profile(key)
        assert isinstance(profile, SampleProfile)
        assert profile.key == key

    def test_get_profile_unknown_raises(self):
        with pytest.raises(KeyError, match="Available profiles"):
            get_profile("nonexistent_profile")

    def test_all_profiles_registered(self):
        assert set(PROFILES.keys()) == {
            "smallsat_startup",
            "defense_prime",
            "unregistered_supplier",
            "university_lab",
            "leo_constellation",
            "geo_comsat",
            "cubesat_demo",
        }

    def test_profiles_for_domain(self):
        assert [p.key for p in profiles_for_domain("debris")] == [
            "leo_constellation",
            "geo_comsat",
            "cubesat_demo",
        ]
        assert len(profiles_for_domain("export_control")) == 4
        assert profiles_for_domain("spectrum") == []

    @pytest.mark.parametrize("key", list(PROFILES.keys()))
    def test_profile_validates_in_its_domain(self, key: str):
        sample = get_profile(key)
        profile = get_domain(sample.domain).validate_profile(sample.data)
        assert profile.name == sample.name
