# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""End-of-life disposal feasibility for debris profiles."""

from __future__ import annotations

from space_compliance.analysis.models import DeorbitAssessment
from space_compliance.config import DEFAULT_SETTINGS, EngineSettings
from space_compliance.domains.debris.profile import ConstellationTier, DebrisProfile, OrbitType


def assess_deorbit(
    profile: DebrisProfile,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> DeorbitAssessment:
    """Check the declared disposal strategy and timeline against the orbit.

    Only LEO carries a numeric disposal deadline; for other regimes
    ``meets_deadline`` stays ``None``.
    """
    available = [s.value for s in profile.available_strategies]
    declared = profile.deorbit_strategy.value if profile.deorbit_strategy else None
    strategy_available = declared is not None and declared in available

    deadline = settings.leo_disposal_years if profile.orbit_type == OrbitType.LEO else None
    timeline = profile.deorbit_timeline_years
    meets = None if deadline is None or timeline is None else timeline <= deadline

    orbit = profile.orbit_type.value if profile.orbit_type else "unknown"
    notes: list[str] = []
    if declared is None:
        notes.append("No deorbit strategy declared")
    elif not strategy_available:
        notes.append(f"'{declared}' is not available from {orbit}; choose one of {', '.join(available)}")
    if meets is False:
        notes.append(
            f"Declared timeline of {timeline:g} years exceeds the {deadline:g}-year LEO disposal deadline"
        )
    if profile.orbit_type == OrbitType.GEO:
        notes.append("Reserve propellant for a graveyard transfer at least 300 km above GEO")
    if profile.constellation_tier in (ConstellationTier.LARGE, ConstellationTier.MEGA):
        notes.append("Large constellations must demonstrate a disposal success rate above 95%")

    return DeorbitAssessment(
        orbit_type=orbit,
        constellation_tier=profile.constellation_tier.value,
        available_strategies=tuple(available),
        declared_strategy=declared,
        strategy_available=strategy_available,
        disposal_deadline_years=deadline,
        declared_timeline_years=timeline,
        meets_deadline=meets,
        notes=tuple(notes),
    )
