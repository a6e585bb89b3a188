# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Mission profile for debris mitigation (EU Space Act)."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field, computed_field

from space_compliance.data.models import Profile


class OrbitType(str, Enum):
    LEO = "LEO"
    MEO = "MEO"
    GEO = "GEO"
    HEO = "HEO"
    CISLUNAR = "cislunar"


class ManeuverabilityLevel(str, Enum):
    FULL = "full"
    LIMITED = "limited"
    NONE = "none"


class DeorbitStrategy(str, Enum):
    ACTIVE_DEORBIT = "active_deorbit"
    PASSIVE_DECAY = "passive_decay"
    GRAVEYARD_ORBIT = "graveyard_orbit"
    ADR_CONTRACTED = "adr_contracted"


class ConstellationTier(str, Enum):
    SINGLE = "single"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    MEGA = "mega"


# Disposal strategies physically available from each orbital regime.
AVAILABLE_STRATEGIES: dict[OrbitType, tuple[DeorbitStrategy, ...]] = {
    OrbitType.LEO: (
        DeorbitStrategy.ACTIVE_DEORBIT,
        DeorbitStrategy.PASSIVE_DECAY,
        DeorbitStrategy.ADR_CONTRACTED,
    ),
    OrbitType.MEO: (
        DeorbitStrategy.ACTIVE_DEORBIT,
        DeorbitStrategy.GRAVEYARD_ORBIT,
        DeorbitStrategy.ADR_CONTRACTED,
    ),
    OrbitType.GEO: (
        DeorbitStrategy.GRAVEYARD_ORBIT,
        DeorbitStrategy.ADR_CONTRACTED,
    ),
    OrbitType.HEO: (
        DeorbitStrategy.ACTIVE_DEORBIT,
        DeorbitStrategy.GRAVEYARD_ORBIT,
        DeorbitStrategy.ADR_CONTRACTED,
    ),
    OrbitType.CISLUNAR: (
        DeorbitStrategy.ACTIVE_DEORBIT,
        DeorbitStrategy.ADR_CONTRACTED,
    ),
}


def constellation_tier(satellite_count: int) -> ConstellationTier:
    if satellite_count >= 1000:
        return ConstellationTier.MEGA
    if satellite_count >= 100:
        return ConstellationTier.LARGE
    if satellite_count >= 10:
        return ConstellationTier.MEDIUM
    if satellite_count >= 2:
        return ConstellationTier.SMALL
    return ConstellationTier.SINGLE


class DebrisProfile(Profile):
    """Orbit, fleet size and end-of-life capabilities of a mission."""

    primary_fields: ClassVar[dict[str, str]] = {
        "orbit_type": "Orbit type is required",
    }

    orbit_type: Optional[OrbitType] = None
    altitude_km: Optional[float] = Field(default=None, gt=0)
    satellite_count: int = Field(default=1, ge=1)

    maneuverability: ManeuverabilityLevel = ManeuverabilityLevel.NONE
    has_propulsion: bool = False
    has_passivation_capability: bool = False

    planned_mission_duration_years: Optional[float] = Field(default=None, ge=0)
    deorbit_strategy: Optional[DeorbitStrategy] = None
    deorbit_timeline_years: Optional[float] = Field(default=None, ge=0)

    has_debris_mitigation_plan: bool = False
    has_collision_avoidance_service: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def constellation_tier(self) -> ConstellationTier:
        return constellation_tier(self.satellite_count)

    @property
    def available_strategies(self) -> tuple[DeorbitStrategy, ...]:
        if self.orbit_type is None:
            return ()
        return AVAILABLE_STRATEGIES[self.orbit_type]

    @property
    def is_maneuverable(self) -> bool:
        return self.maneuverability != ManeuverabilityLevel.NONE
