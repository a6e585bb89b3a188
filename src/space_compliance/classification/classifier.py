# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Profile-level risk and jurisdiction classification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from space_compliance.classification.rules import JurisdictionRule, RiskRule, RuleTable
from space_compliance.data.models import Profile, RiskClassification

if TYPE_CHECKING:
    from space_compliance.config import EngineSettings
    from space_compliance.domains.base import RegulatoryDomain

logger = logging.getLogger(__name__)


class RiskClassifier:
    """Classify a profile with a domain's ordered rule tables.

    Classification reads only the profile, never assessment statuses, so an
    organization's inherent exposure does not change as it closes gaps.
    """

    def __init__(
        self,
        risk_rules: RuleTable[RiskRule],
        jurisdiction_rules: RuleTable[JurisdictionRule],
    ) -> None:
        self.risk_rules = risk_rules
        self.jurisdiction_rules = jurisdiction_rules

    @classmethod
    def for_domain(
        cls,
        domain: RegulatoryDomain,
        settings: EngineSettings | None = None,
    ) -> RiskClassifier:
        risk_rules = domain.risk_rules if settings is None else domain.risk_rules_for(settings)
        return cls(risk_rules, domain.jurisdiction_rules)

    def classify_risk(self, profile: Profile) -> RiskRule:
        return self.risk_rules.first_match(profile)

    def classify_jurisdiction(self, profile: Profile) -> JurisdictionRule:
        return self.jurisdiction_rules.first_match(profile)

    def classify(self, profile: Profile) -> RiskClassification:
        risk = self.classify_risk(profile)
        jurisdiction = self.classify_jurisdiction(profile)
        logger.debug("Risk rule '%s' -> %s; jurisdiction rule '%s' -> %s",
                     risk.name, risk.level.value, jurisdiction.name, jurisdiction.tag)
        return RiskClassification(
            overall_risk=risk.level,
            jurisdiction=jurisdiction.tag,
            reason=risk.reason,
            jurisdiction_reason=jurisdiction.reason,
        )
