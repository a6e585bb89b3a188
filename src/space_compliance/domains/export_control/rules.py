# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Risk, jurisdiction and recommendation tables for export control.

Order matters in every table here: the first matching rule wins for risk
and jurisdiction, and recommendations are numbered in table order.
"""

from __future__ import annotations

from dataclasses import dataclass

from space_compliance.applicability.predicates import all_of, any_of, flag, not_
from space_compliance.classification.rules import JurisdictionRule, RiskRule, RuleTable
from space_compliance.config import DEFAULT_SETTINGS, EngineSettings
from space_compliance.data.models import Gap, RiskLevel
from space_compliance.domains.export_control.profile import ExportControlProfile
from space_compliance.recommendations import templates as T
from space_compliance.recommendations.engine import RecommendationRule, RuleContext
from space_compliance.scoring.thresholds import STANDARD_BANDS, STRICT_BANDS

ITAR = flag("has_itar_items")
EAR = flag("has_ear_items")
CONTROLLED = any_of(ITAR, EAR)
FOREIGN_NATIONALS = flag("has_foreign_nationals")


def exports_to_restricted(
    profile: ExportControlProfile,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> bool:
    return any(settings.is_restricted(c) for c in profile.exports_to_countries)


def contributing_factors(
    profile: ExportControlProfile,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> list[str]:
    """Names of the exposure flags that raise risk on top of item control."""
    factors = {
        "technology transfer": profile.has_technology_transfer,
        "defense contracts": profile.has_defense_contracts,
        "joint ventures": profile.has_joint_ventures,
        "foreign nationals": profile.has_foreign_nationals,
        "exports to restricted countries": exports_to_restricted(profile, settings),
    }
    return [name for name, present in factors.items() if present]


# ---------------------------------------------------------------------------
# Overall risk
# ---------------------------------------------------------------------------

def build_risk_rules(settings: EngineSettings = DEFAULT_SETTINGS) -> RuleTable[RiskRule]:
    """Risk table whose restricted-country checks use *settings*."""

    def multiple_factors(profile: ExportControlProfile) -> bool:
        return len(contributing_factors(profile, settings)) >= 2

    def any_factor(profile: ExportControlProfile) -> bool:
        return bool(contributing_factors(profile, settings))

    return RuleTable([
        RiskRule(
            name="itar_unregistered",
            reason="ITAR items handled without DDTC registration",
            level=RiskLevel.CRITICAL,
            predicate=all_of(ITAR, not_(flag("registered_with_ddtc"))),
        ),
        RiskRule(
            name="itar_foreign_nationals_no_tcp",
            reason="Foreign nationals with access to ITAR items and no Technology Control Plan",
            level=RiskLevel.CRITICAL,
            predicate=all_of(ITAR, FOREIGN_NATIONALS, not_(flag("has_tcp"))),
        ),
        RiskRule(
            name="itar_manufacturing_abroad",
            reason="ITAR items manufactured abroad",
            level=RiskLevel.HIGH,
            predicate=all_of(ITAR, flag("has_manufacturing_abroad")),
        ),
        RiskRule(
            name="itar_foreign_nationals",
            reason="Foreign nationals with access to ITAR items under a Technology Control Plan",
            level=RiskLevel.HIGH,
            predicate=all_of(ITAR, FOREIGN_NATIONALS),
        ),
        RiskRule(
            name="ear_joint_ventures",
            reason="EAR items shared through joint ventures",
            level=RiskLevel.HIGH,
            predicate=all_of(EAR, flag("has_joint_ventures")),
        ),
        RiskRule(
            name="controlled_multiple_factors",
            reason="Controlled items with multiple contributing risk factors",
            level=RiskLevel.HIGH,
            predicate=all_of(CONTROLLED, multiple_factors),
        ),
        RiskRule(
            name="controlled_items",
            reason="Handles export-controlled items",
            level=RiskLevel.MEDIUM,
            predicate=CONTROLLED,
        ),
        RiskRule(
            name="uncontrolled_with_factors",
            reason="No controlled items but foreign exposure present",
            level=RiskLevel.MEDIUM,
            predicate=any_factor,
        ),
        RiskRule(
            name="baseline",
            reason="No controlled items or foreign exposure",
            level=RiskLevel.LOW,
            predicate=lambda profile: True,
        ),
    ])


RISK_RULES: RuleTable[RiskRule] = build_risk_rules()


# ---------------------------------------------------------------------------
# Profile jurisdiction
# ---------------------------------------------------------------------------

JURISDICTION_RULES: RuleTable[JurisdictionRule] = RuleTable([
    JurisdictionRule(
        name="itar_with_ear_parts",
        reason="Handles both USML defense articles and CCL dual-use items",
        tag="itar_with_ear_parts",
        predicate=all_of(ITAR, EAR),
    ),
    JurisdictionRule(
        name="itar_only",
        reason="Handles USML defense articles only",
        tag="itar_only",
        predicate=ITAR,
    ),
    JurisdictionRule(
        name="ear_only",
        reason="Handles CCL dual-use items only",
        tag="ear_only",
        predicate=EAR,
    ),
    JurisdictionRule(
        name="ear99",
        reason="No listed items; EAR99 designation likely",
        tag="ear99",
        predicate=lambda profile: True,
    ),
])


# ---------------------------------------------------------------------------
# Item jurisdiction
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ItemFacts:
    """The three facts that decide a single item's jurisdiction."""

    military_designed: bool
    has_commercial_equivalent: bool
    on_controlled_list: bool


ITEM_JURISDICTION_RULES: RuleTable[JurisdictionRule] = RuleTable([
    JurisdictionRule(
        name="listed",
        reason="Enumerated on the U.S. Munitions List",
        tag="itar_only",
        predicate=lambda item: item.on_controlled_list,
    ),
    JurisdictionRule(
        name="military_no_commercial_equivalent",
        reason="Specially designed for military use with no commercial equivalent",
        tag="itar_only",
        predicate=lambda item: item.military_designed and not item.has_commercial_equivalent,
    ),
    JurisdictionRule(
        name="military_with_commercial_equivalent",
        reason="Military design with a commercial equivalent; commodity jurisdiction request advised",
        tag="dual_use",
        predicate=lambda item: item.military_designed,
    ),
    JurisdictionRule(
        name="commercial",
        reason="Commercial item with a commercial equivalent",
        tag="ear_only",
        predicate=lambda item: item.has_commercial_equivalent,
    ),
    JurisdictionRule(
        name="undetermined",
        reason="Jurisdiction unclear; commodity jurisdiction request required",
        tag="dual_use",
        predicate=lambda item: True,
    ),
])


def determine_item_jurisdiction(
    military_designed: bool,
    has_commercial_equivalent: bool,
    on_controlled_list: bool,
) -> str:
    """Return 'itar_only', 'ear_only' or 'dual_use' for a single item."""
    facts = ItemFacts(military_designed, has_commercial_equivalent, on_controlled_list)
    return ITEM_JURISDICTION_RULES.first_match(facts).tag


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

def _category(*categories: str):
    wanted = set(categories)

    def check(gap: Gap) -> bool:
        return gap.category in wanted

    return check


def _foreign_national_summary(ctx: RuleContext) -> dict[str, str]:
    countries = ctx.profile.foreign_national_countries
    if countries:
        summary = f"Foreign nationals from {', '.join(countries)} are employed."
    else:
        summary = "Foreign nationals are employed."
    return {"foreign_national_summary": summary}


RECOMMENDATION_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        key="ddtc_registration",
        template=T.DDTC_REGISTRATION,
        when=lambda ctx: ctx.profile.has_itar_items and not ctx.profile.registered_with_ddtc,
        gap_filter=_category("REGISTRATION"),
    ),
    RecommendationRule(
        key="technology_control_plan",
        template=T.TECHNOLOGY_CONTROL_PLAN,
        when=lambda ctx: ctx.profile.has_foreign_nationals and not ctx.profile.has_tcp,
        gap_filter=_category("TECHNOLOGY_CONTROL", "DEEMED_EXPORT"),
        context=_foreign_national_summary,
    ),
    RecommendationRule(
        key="restricted_party_screening",
        template=T.RESTRICTED_PARTY_SCREENING,
        gap_filter=_category("SCREENING"),
    ),
    RecommendationRule(
        key="export_licenses",
        template=T.EXPORT_LICENSES,
        gap_filter=_category("LICENSING"),
    ),
    RecommendationRule(
        key="compliance_program",
        template=T.COMPLIANCE_PROGRAM,
        when=lambda ctx: ctx.score.overall < ctx.settings.program_score_threshold,
    ),
    RecommendationRule(
        key="export_training",
        template=T.EXPORT_TRAINING,
        gap_filter=_category("TRAINING"),
    ),
    RecommendationRule(
        key="internal_audit",
        template=T.INTERNAL_AUDIT,
        when=lambda ctx: ctx.profile.has_controlled_items,
    ),
)

REGULATION_BANDS = {"ITAR": STRICT_BANDS, "EAR": STANDARD_BANDS}
