# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Risk, disposal-regime and recommendation tables for debris mitigation."""

from __future__ import annotations

from space_compliance.applicability.predicates import all_of, at_least, field_in, flag, not_
from space_compliance.classification.rules import JurisdictionRule, RiskRule, RuleTable
from space_compliance.config import DEFAULT_SETTINGS, EngineSettings
from space_compliance.data.models import Gap, RiskLevel
from space_compliance.domains.debris.profile import DebrisProfile, OrbitType
from space_compliance.recommendations import templates as T
from space_compliance.recommendations.engine import RecommendationRule, RuleContext
from space_compliance.scoring.thresholds import STANDARD_BANDS

MANEUVERABLE = flag("is_maneuverable")
CONGESTED = field_in("orbit_type", OrbitType.LEO, OrbitType.MEO)


def strategy_unavailable(profile: DebrisProfile) -> bool:
    """A declared strategy that cannot be executed from the profile's orbit."""
    return (
        profile.deorbit_strategy is not None
        and profile.deorbit_strategy not in profile.available_strategies
    )


def exceeds_leo_deadline(
    profile: DebrisProfile,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> bool:
    return (
        profile.orbit_type == OrbitType.LEO
        and profile.deorbit_timeline_years is not None
        and profile.deorbit_timeline_years > settings.leo_disposal_years
    )


def build_risk_rules(settings: EngineSettings = DEFAULT_SETTINGS) -> RuleTable[RiskRule]:
    """Risk table whose LEO disposal deadline comes from *settings*."""
    return RuleTable([
        RiskRule(
            name="large_constellation_unmaneuverable",
            reason="Constellation of 100+ satellites without manoeuvre capability",
            level=RiskLevel.CRITICAL,
            predicate=all_of(at_least("satellite_count", 100), not_(MANEUVERABLE)),
        ),
        RiskRule(
            name="disposal_strategy_unavailable",
            reason="Declared deorbit strategy is not available from this orbit",
            level=RiskLevel.CRITICAL,
            predicate=strategy_unavailable,
        ),
        RiskRule(
            name="leo_disposal_deadline_exceeded",
            reason="LEO disposal timeline exceeds the disposal deadline",
            level=RiskLevel.HIGH,
            predicate=lambda profile: exceeds_leo_deadline(profile, settings),
        ),
        RiskRule(
            name="congested_unmaneuverable",
            reason="Non-manoeuvrable spacecraft in a congested orbital regime",
            level=RiskLevel.HIGH,
            predicate=all_of(CONGESTED, not_(MANEUVERABLE)),
        ),
        RiskRule(
            name="no_passivation",
            reason="No end-of-life passivation capability",
            level=RiskLevel.MEDIUM,
            predicate=not_(flag("has_passivation_capability")),
        ),
        RiskRule(
            name="constellation",
            reason="Constellation of 10 or more satellites",
            level=RiskLevel.MEDIUM,
            predicate=at_least("satellite_count", 10),
        ),
        RiskRule(
            name="baseline",
            reason="Manoeuvrable or low-exposure mission with passivation capability",
            level=RiskLevel.LOW,
            predicate=lambda profile: True,
        ),
    ])


RISK_RULES: RuleTable[RiskRule] = build_risk_rules()


# Disposal regime stands in for jurisdiction in this domain.
JURISDICTION_RULES: RuleTable[JurisdictionRule] = RuleTable([
    JurisdictionRule(
        name="leo_reentry",
        reason="LEO spacecraft dispose by reentry",
        tag="leo_reentry",
        predicate=field_in("orbit_type", OrbitType.LEO),
    ),
    JurisdictionRule(
        name="geo_graveyard",
        reason="GEO spacecraft dispose to a graveyard orbit",
        tag="geo_graveyard",
        predicate=field_in("orbit_type", OrbitType.GEO),
    ),
    JurisdictionRule(
        name="meo_heo_disposal",
        reason="MEO and HEO disposal depends on altitude",
        tag="meo_heo_disposal",
        predicate=field_in("orbit_type", OrbitType.MEO, OrbitType.HEO),
    ),
    JurisdictionRule(
        name="cislunar_disposal",
        reason="Cislunar disposal under an emerging framework",
        tag="cislunar_disposal",
        predicate=lambda profile: True,
    ),
])


def _category(category: str):
    def check(gap: Gap) -> bool:
        return gap.category == category

    return check


def _orbit_label(ctx: RuleContext) -> dict[str, str]:
    orbit = ctx.profile.orbit_type
    return {"orbit_type": orbit.value if orbit is not None else "Unknown orbit"}


RECOMMENDATION_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        key="debris_mitigation_plan",
        template=T.DEBRIS_MITIGATION_PLAN,
        when=lambda ctx: not ctx.profile.has_debris_mitigation_plan,
        gap_filter=_category("PLANNING"),
        context=lambda ctx: {"satellite_count": ctx.profile.satellite_count},
    ),
    RecommendationRule(
        key="collision_avoidance",
        template=T.COLLISION_AVOIDANCE,
        gap_filter=_category("COLLISION_AVOIDANCE"),
        context=_orbit_label,
    ),
    RecommendationRule(
        key="disposal_strategy",
        template=T.DISPOSAL_STRATEGY,
        gap_filter=_category("DISPOSAL"),
        context=_orbit_label,
    ),
    RecommendationRule(
        key="passivation",
        template=T.PASSIVATION,
        gap_filter=_category("PASSIVATION"),
    ),
    RecommendationRule(
        key="surveillance_registration",
        template=T.SURVEILLANCE_REGISTRATION,
        gap_filter=_category("TRACKABILITY"),
    ),
)

REGULATION_BANDS = {"EU_SPACE_ACT": STANDARD_BANDS}
