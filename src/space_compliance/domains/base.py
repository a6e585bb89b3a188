# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""The bundle of data and rules that parameterizes the generic engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from pydantic import BaseModel

from space_compliance.applicability.resolver import ApplicabilityResolver
from space_compliance.classification.rules import JurisdictionRule, RiskRule, RuleTable
from space_compliance.config import EngineSettings
from space_compliance.data.models import (
    AssessmentResult,
    Profile,
    Requirement,
    RequirementCorpus,
)
from space_compliance.gaps.analyzer import DEFAULT_QUICK_CATEGORIES
from space_compliance.recommendations.engine import RecommendationRule
from space_compliance.scoring.thresholds import RiskBands

SubAssessor = Callable[[Profile, EngineSettings, list[Requirement]], BaseModel | list]


@dataclass(frozen=True)
class RegulatoryDomain:
    """One regulatory domain: its corpus, profile shape and rule tables.

    ``risk_rules`` is the table under default settings; ``risk_rule_builder``
    rebuilds it for other settings.  ``sub_assessors`` maps a field name on
    ``result_model`` to a callable producing that field's value.  They run
    after scoring and never see assessment statuses.
    """

    name: str
    title: str
    corpus: RequirementCorpus
    profile_model: type[Profile]
    risk_rules: RuleTable[RiskRule]
    jurisdiction_rules: RuleTable[JurisdictionRule]
    recommendation_rules: tuple[RecommendationRule, ...]
    result_model: type[AssessmentResult] = AssessmentResult
    sub_assessors: Mapping[str, SubAssessor] = field(default_factory=dict)
    regulation_bands: Mapping[str, RiskBands] = field(default_factory=dict)
    license_gates: Mapping[str, Callable[[Any], bool]] = field(default_factory=dict)
    quick_categories: frozenset[str] = DEFAULT_QUICK_CATEGORIES
    risk_rule_builder: Callable[[EngineSettings], RuleTable[RiskRule]] | None = None

    def validate_profile(self, data: Any) -> Profile:
        return self.profile_model.validate_profile(data)

    def resolver(self) -> ApplicabilityResolver:
        return ApplicabilityResolver(self.corpus, self.license_gates)

    def risk_rules_for(self, settings: EngineSettings) -> RuleTable[RiskRule]:
        """The risk table evaluated under *settings*."""
        if self.risk_rule_builder is None:
            return self.risk_rules
        return self.risk_rule_builder(settings)
