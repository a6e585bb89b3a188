# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for rule tables and risk / jurisdiction classification."""

from __future__ import annotations

import pytest

from space_compliance.classification.classifier import RiskClassifier
from space_compliance.classification.rules import JurisdictionRule, RiskRule, RuleTable
from space_compliance.config import EngineSettings
from space_compliance.data.models import RiskLevel
from space_compliance.domains.export_control.rules import (
    JURISDICTION_RULES,
    RISK_RULES,
    build_risk_rules,
    contributing_factors,
    determine_item_jurisdiction,
)


def _risk_rule(name: str, level: RiskLevel, result: bool) -> RiskRule:
    return RiskRule(name=name, reason=name, level=level, predicate=lambda _: result)


class TestRuleTable:
    def test_empty_table_rejected(self):
        with pytest.raises(ValueError, match="at least one rule"):
            RuleTable([])

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate rule names: a"):
            RuleTable([
                _risk_rule("a", RiskLevel.HIGH, True),
                _risk_rule("a", RiskLevel.LOW, True),
            ])

    def test_first_match_wins(self):
        table = RuleTable([
            _risk_rule("never", RiskLevel.CRITICAL, False),
            _risk_rule("first", RiskLevel.HIGH, True),
            _risk_rule("second", RiskLevel.MEDIUM, True),
            _risk_rule("fallback", RiskLevel.LOW, True),
        ])
        assert table.first_match(object()).name == "first"

    def test_last_rule_is_catch_all(self):
        table = RuleTable([
            _risk_rule("never", RiskLevel.CRITICAL, False),
            _risk_rule("fallback", RiskLevel.LOW, False),
        ])
        assert table.first_match(object()).name == "fallback"

    def test_sequence_protocol(self):
        assert len(RISK_RULES) == 9
        assert RISK_RULES[-1].name == "baseline"
        assert RISK_RULES.names[0] == "itar_unregistered"
        assert [r.name for r in RISK_RULES] == RISK_RULES.names


class TestExportControlRisk:
    def _classify(self, make_export_profile, **fields):
        classifier = RiskClassifier(RISK_RULES, JURISDICTION_RULES)
        return classifier.classify_risk(make_export_profile(**fields))

    def test_unregistered_itar_is_critical(self, make_export_profile):
        rule = self._classify(
            make_export_profile, has_itar_items=True, has_foreign_nationals=True,
        )
        assert rule.name == "itar_unregistered"
        assert rule.level == RiskLevel.CRITICAL

    def test_foreign_nationals_without_tcp_is_critical(self, make_export_profile):
        rule = self._classify(
            make_export_profile,
            has_itar_items=True, registered_with_ddtc=True, has_foreign_nationals=True,
        )
        assert rule.name == "itar_foreign_nationals_no_tcp"
        assert rule.level == RiskLevel.CRITICAL

    def test_manufacturing_abroad_is_high(self, make_export_profile):
        rule = self._classify(
            make_export_profile,
            has_itar_items=True, registered_with_ddtc=True, has_manufacturing_abroad=True,
        )
        assert rule.name == "itar_manufacturing_abroad"
        assert rule.level == RiskLevel.HIGH

    def test_foreign_nationals_with_tcp_is_high(self, make_export_profile):
        rule = self._classify(
            make_export_profile,
            has_itar_items=True, registered_with_ddtc=True,
            has_foreign_nationals=True, has_tcp=True,
        )
        assert rule.name == "itar_foreign_nationals"
        assert rule.level == RiskLevel.HIGH

    def test_ear_joint_ventures_is_high(self, make_export_profile):
        rule = self._classify(make_export_profile, has_ear_items=True, has_joint_ventures=True)
        assert rule.name == "ear_joint_ventures"

    def test_multiple_factors_is_high(self, make_export_profile):
        rule = self._classify(
            make_export_profile,
            has_ear_items=True, has_technology_transfer=True, has_defense_contracts=True,
        )
        assert rule.name == "controlled_multiple_factors"
        assert rule.level == RiskLevel.HIGH

    def test_single_factor_stays_medium(self, make_export_profile):
        rule = self._classify(make_export_profile, has_ear_items=True, has_technology_transfer=True)
        assert rule.name == "controlled_items"
        assert rule.level == RiskLevel.MEDIUM

    def test_registered_itar_without_exposure_is_medium(self, make_export_profile):
        rule = self._classify(make_export_profile, has_itar_items=True, registered_with_ddtc=True)
        assert rule.level == RiskLevel.MEDIUM

    def test_uncontrolled_with_restricted_exports(self, make_export_profile):
        rule = self._classify(make_export_profile, exports_to_countries=["cn"])
        assert rule.name == "uncontrolled_with_factors"
        assert rule.level == RiskLevel.MEDIUM

    def test_baseline_is_low(self, make_export_profile):
        rule = self._classify(make_export_profile, exports_to_countries=["DE"])
        assert rule.name == "baseline"
        assert rule.level == RiskLevel.LOW

    def test_classification_ignores_statuses(self, make_export_profile):
        classifier = RiskClassifier(RISK_RULES, JURISDICTION_RULES)
        profile = make_export_profile(has_itar_items=True)
        assert classifier.classify(profile) == classifier.classify(profile)
        assert classifier.classify(profile).reason == "ITAR items handled without DDTC registration"


class TestContributingFactors:
    def test_names_present_factors(self, make_export_profile):
        profile = make_export_profile(
            has_foreign_nationals=True, exports_to_countries=["IR", "DE"],
        )
        assert contributing_factors(profile) == [
            "foreign nationals",
            "exports to restricted countries",
        ]

    def test_none(self, make_export_profile):
        assert contributing_factors(make_export_profile()) == []


class TestJurisdiction:
    @pytest.mark.parametrize(
        "fields,expected",
        [
            ({"has_itar_items": True, "has_ear_items": True}, "itar_with_ear_parts"),
            ({"has_itar_items": True}, "itar_only"),
            ({"has_ear_items": True}, "ear_only"),
            ({}, "ear99"),
        ],
    )
    def test_profile_jurisdiction(self, make_export_profile, fields, expected):
        classifier = RiskClassifier(RISK_RULES, JURISDICTION_RULES)
        assert classifier.classify(make_export_profile(**fields)).jurisdiction == expected

    def test_for_domain(self, export_domain, make_export_profile):
        classifier = RiskClassifier.for_domain(export_domain)
        result = classifier.classify(make_export_profile(has_ear_items=True))
        assert result.jurisdiction == "ear_only"
        assert result.jurisdiction_reason == "Handles CCL dual-use items only"

    def test_for_domain_uses_settings(self, export_domain, make_export_profile):
        profile = make_export_profile(
            has_ear_items=True, has_defense_contracts=True, exports_to_countries=["XX"]
        )
        default = RiskClassifier.for_domain(export_domain).classify(profile)
        assert default.overall_risk == RiskLevel.MEDIUM

        settings = EngineSettings(restricted_countries=["XX"])
        assert contributing_factors(profile, settings) == [
            "defense contracts",
            "exports to restricted countries",
        ]
        configured = RiskClassifier.for_domain(export_domain, settings).classify(profile)
        assert configured.overall_risk == RiskLevel.HIGH
        assert configured.reason == "Controlled items with multiple contributing risk factors"

    def test_default_table_matches_default_settings(self):
        assert build_risk_rules().names == RISK_RULES.names
        assert build_risk_rules(EngineSettings()).names == RISK_RULES.names


class TestItemJurisdiction:
    @pytest.mark.parametrize(
        "military,commercial,listed,expected",
        [
            (False, False, True, "itar_only"),
            (True, True, True, "itar_only"),
            (True, False, False, "itar_only"),
            (True, True, False, "dual_use"),
            (False, True, False, "ear_only"),
            (False, False, False, "dual_use"),
        ],
    )
    def test_determine(self, military, commercial, listed, expected):
        assert determine_item_jurisdiction(military, commercial, listed) == expected

    def test_jurisdiction_rule_matches(self):
        rule = JurisdictionRule(name="x", reason="", tag="t", predicate=lambda s: s == 1)
        assert rule.matches(1)
        assert not rule.matches(2)
