# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the recommendation engine and the export-control rule table."""

from __future__ import annotations

from space_compliance.config import EngineSettings
from space_compliance.data.models import ComplianceScore, Timeframe
from space_compliance.domains.export_control.rules import RECOMMENDATION_RULES
from space_compliance.gaps.analyzer import GapAnalyzer
from space_compliance.recommendations.engine import RecommendationEngine, RecommendationRule
from space_compliance.recommendations.templates import RecommendationTemplate


def _score(overall: int = 50) -> ComplianceScore:
    return ComplianceScore(overall=overall, mandatory=overall)


def _template(title: str, description: str = "{gap_count} gap(s) at {score}%") -> RecommendationTemplate:
    return RecommendationTemplate(
        title=title,
        description_template=description,
        category="test",
        timeframe=Timeframe.DAYS_30,
        resources=("Resource",),
    )


class TestRecommendationEngine:
    def test_gap_filter_links_gaps(self, make_requirement, make_export_profile):
        gaps = GapAnalyzer().analyze(
            [
                make_requirement("S1", category="SCREENING"),
                make_requirement("L1", category="LICENSING"),
                make_requirement("S2", category="SCREENING"),
            ],
            {},
        )
        rules = [
            RecommendationRule(
                key="screen",
                template=_template("Screen"),
                gap_filter=lambda g: g.category == "SCREENING",
            ),
            RecommendationRule(
                key="train",
                template=_template("Train"),
                gap_filter=lambda g: g.category == "TRAINING",
            ),
        ]
        recs = RecommendationEngine(rules).generate(make_export_profile(), gaps, _score(40))
        assert len(recs) == 1
        assert recs[0].title == "Screen"
        assert recs[0].gap_ids == ("S1", "S2")
        assert recs[0].description == "2 gap(s) at 40%"
        assert recs[0].resources == ("Resource",)

    def test_when_overrides_gap_filter(self, make_export_profile):
        rules = [
            RecommendationRule(key="always", template=_template("Always"), when=lambda ctx: True),
            RecommendationRule(key="never", template=_template("Never"), when=lambda ctx: False),
        ]
        recs = RecommendationEngine(rules).generate(make_export_profile(), [], _score())
        assert [r.title for r in recs] == ["Always"]
        assert recs[0].gap_ids == ()

    def test_priorities_are_contiguous(self, make_export_profile):
        rules = [
            RecommendationRule(key=f"r{i}", template=_template(f"R{i}"), when=lambda ctx: True)
            for i in range(4)
        ]
        recs = RecommendationEngine(rules).generate(make_export_profile(), [], _score())
        assert [r.priority for r in recs] == [1, 2, 3, 4]

    def test_duplicate_keys_emit_once(self, make_export_profile):
        rules = [
            RecommendationRule(key="same", template=_template("First"), when=lambda ctx: True),
            RecommendationRule(key="same", template=_template("Second"), when=lambda ctx: True),
        ]
        recs = RecommendationEngine(rules).generate(make_export_profile(), [], _score())
        assert [r.title for r in recs] == ["First"]

    def test_capped_by_settings(self, make_export_profile):
        rules = [
            RecommendationRule(key=f"r{i}", template=_template(f"R{i}"), when=lambda ctx: True)
            for i in range(5)
        ]
        recs = RecommendationEngine(rules).generate(
            make_export_profile(), [], _score(), EngineSettings(max_recommendations=2)
        )
        assert [r.title for r in recs] == ["R0", "R1"]

    def test_context_values(self, make_export_profile):
        rules = [
            RecommendationRule(
                key="ctx",
                template=_template("Ctx", "Hello {who}"),
                when=lambda ctx: True,
                context=lambda ctx: {"who": ctx.profile.name},
            ),
        ]
        recs = RecommendationEngine(rules).generate(make_export_profile(name="Acme"), [], _score())
        assert recs[0].description == "Hello Acme"


class TestExportControlRecommendations:
    def test_tcp_recommendation_names_countries(self, make_export_profile):
        profile = make_export_profile(
            has_foreign_nationals=True, foreign_national_countries=["CN", "IN"],
        )
        recs = RecommendationEngine(RECOMMENDATION_RULES).generate(profile, [], _score(100))
        assert len(recs) == 1
        assert recs[0].title == "Implement Technology Control Plan (TCP)"
        assert recs[0].description.startswith("Foreign nationals from CN, IN are employed.")
        assert recs[0].timeframe == Timeframe.IMMEDIATE

    def test_compliance_program_below_threshold(self, make_export_profile):
        engine = RecommendationEngine(RECOMMENDATION_RULES)
        low = engine.generate(make_export_profile(), [], _score(69))
        assert [r.title for r in low] == ["Establish Comprehensive Export Compliance Program"]
        assert "69%" in low[0].description
        assert engine.generate(make_export_profile(), [], _score(70)) == []

    def test_threshold_from_settings(self, make_export_profile):
        engine = RecommendationEngine(RECOMMENDATION_RULES)
        recs = engine.generate(
            make_export_profile(), [], _score(85), EngineSettings(program_score_threshold=90)
        )
        assert len(recs) == 1

    def test_registered_profile_skips_registration(self, make_export_profile):
        profile = make_export_profile(has_itar_items=True, registered_with_ddtc=True)
        recs = RecommendationEngine(RECOMMENDATION_RULES).generate(profile, [], _score(100))
        assert [r.title for r in recs] == ["Conduct Internal Compliance Audit"]
