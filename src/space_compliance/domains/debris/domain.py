# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Debris mitigation (EU Space Act) domain definition."""

from __future__ import annotations

from space_compliance.analysis.deorbit import assess_deorbit
from space_compliance.analysis.models import DeorbitAssessment
from space_compliance.data.models import AssessmentResult
from space_compliance.domains import register_domain
from space_compliance.domains.base import RegulatoryDomain
from space_compliance.domains.debris.profile import DebrisProfile
from space_compliance.domains.debris.requirements import DEBRIS_CORPUS
from space_compliance.domains.debris.rules import (
    JURISDICTION_RULES,
    RECOMMENDATION_RULES,
    REGULATION_BANDS,
    RISK_RULES,
    build_risk_rules,
)


class DebrisResult(AssessmentResult):
    profile: DebrisProfile
    deorbit: DeorbitAssessment


DEBRIS = RegulatoryDomain(
    name="debris",
    title="Debris Mitigation (EU Space Act)",
    corpus=DEBRIS_CORPUS,
    profile_model=DebrisProfile,
    risk_rules=RISK_RULES,
    risk_rule_builder=build_risk_rules,
    jurisdiction_rules=JURISDICTION_RULES,
    recommendation_rules=RECOMMENDATION_RULES,
    result_model=DebrisResult,
    sub_assessors={
        "deorbit": lambda profile, settings, applicable: assess_deorbit(profile, settings),
    },
    regulation_bands=REGULATION_BANDS,
    quick_categories=frozenset({"TRACKABILITY", "SUPPLY_CHAIN"}),
)

register_domain(DEBRIS)
