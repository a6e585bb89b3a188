# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the risk-weighted scoring engine."""

from __future__ import annotations

import pytest

from space_compliance.data.models import ComplianceStatus, RiskLevel
from space_compliance.scoring.engine import ScoringEngine, group_score
from space_compliance.scoring.thresholds import (
    STANDARD_BANDS,
    STRICT_BANDS,
    score_to_color,
)
from space_compliance.scoring.weights import RISK_MULTIPLIERS, STATUS_UNITS

C = ComplianceStatus


class TestWeights:
    def test_units(self):
        assert STATUS_UNITS == {
            C.COMPLIANT: 2,
            C.PARTIAL: 1,
            C.NON_COMPLIANT: 0,
            C.NOT_ASSESSED: 0,
        }

    def test_multipliers_decrease_with_risk(self):
        values = [RISK_MULTIPLIERS[lvl] for lvl in RiskLevel]
        assert values == sorted(values, reverse=True)


class TestGroupScore:
    def test_all_compliant_is_100(self, make_requirement):
        reqs = [make_requirement("A", RiskLevel.CRITICAL), make_requirement("B", RiskLevel.LOW)]
        assert group_score(reqs, {"A": C.COMPLIANT, "B": C.COMPLIANT}) == 100

    def test_all_non_compliant_is_0(self, make_requirement):
        reqs = [make_requirement("A"), make_requirement("B")]
        assert group_score(reqs, {"A": C.NON_COMPLIANT, "B": C.NOT_ASSESSED}) == 0

    def test_all_partial_is_50(self, make_requirement):
        reqs = [make_requirement("A", RiskLevel.CRITICAL), make_requirement("B", RiskLevel.MEDIUM)]
        assert group_score(reqs, {"A": C.PARTIAL, "B": C.PARTIAL}) == 50

    def test_missing_status_counts_as_not_assessed(self, make_requirement):
        reqs = [make_requirement("A"), make_requirement("B")]
        assert group_score(reqs, {"A": C.COMPLIANT}) == 50

    def test_not_applicable_excluded(self, make_requirement):
        reqs = [make_requirement("A"), make_requirement("B", RiskLevel.CRITICAL)]
        assert group_score(reqs, {"A": C.COMPLIANT, "B": C.NOT_APPLICABLE}) == 100

    def test_empty_and_all_not_applicable_score_zero(self, make_requirement):
        assert group_score([], {}) == 0
        reqs = [make_requirement("A")]
        assert group_score(reqs, {"A": C.NOT_APPLICABLE}) == 0

    def test_risk_weighting(self, make_requirement):
        reqs = [make_requirement("A", RiskLevel.CRITICAL), make_requirement("B", RiskLevel.LOW)]
        assert group_score(reqs, {"A": C.COMPLIANT, "B": C.NON_COMPLIANT}) == 80
        assert group_score(reqs, {"A": C.NON_COMPLIANT, "B": C.COMPLIANT}) == 20

    def test_rounds_half_up(self, make_requirement):
        # 100 * 1 / 8 = 12.5
        reqs = [make_requirement("A", RiskLevel.LOW), make_requirement("B", RiskLevel.HIGH)]
        assert group_score(reqs, {"A": C.PARTIAL, "B": C.NON_COMPLIANT}) == 13

    @pytest.mark.parametrize(
        "before,after",
        [
            (C.NON_COMPLIANT, C.PARTIAL),
            (C.PARTIAL, C.COMPLIANT),
            (C.NOT_ASSESSED, C.COMPLIANT),
        ],
    )
    def test_improving_status_never_lowers_score(self, make_requirement, before, after):
        reqs = [
            make_requirement("A", RiskLevel.CRITICAL),
            make_requirement("B", RiskLevel.MEDIUM),
            make_requirement("C", RiskLevel.LOW),
        ]
        base = {"A": C.PARTIAL, "B": C.NON_COMPLIANT}
        assert group_score(reqs, {**base, "C": after}) >= group_score(reqs, {**base, "C": before})


class TestScoringEngine:
    def _reqs(self, make_requirement):
        return [
            make_requirement("ITAR-1", RiskLevel.CRITICAL, regulation="ITAR", category="REGISTRATION"),
            make_requirement("ITAR-2", RiskLevel.HIGH, regulation="ITAR", category="LICENSING", mandatory=False),
            make_requirement("EAR-1", RiskLevel.MEDIUM, regulation="EAR", category="LICENSING"),
        ]

    def test_scores_by_group(self, make_requirement):
        score = ScoringEngine().score(
            self._reqs(make_requirement),
            {"ITAR-1": "compliant", "ITAR-2": "non_compliant", "EAR-1": "partial"},
        )
        # overall: (2*4 + 0*3 + 1*2) / (2*9) = 10/18
        assert score.overall == 56
        assert score.mandatory == 83
        assert score.critical == 100
        assert score.by_regulation == {"ITAR": 57, "EAR": 50}
        assert score.by_category == {"REGISTRATION": 100, "LICENSING": 20}

    def test_regulation_scores_are_independent(self, make_requirement):
        reqs = self._reqs(make_requirement)
        engine = ScoringEngine()
        first = engine.score(reqs, {"ITAR-1": "compliant", "EAR-1": "partial"})
        second = engine.score(reqs, {"ITAR-1": "compliant", "EAR-1": "compliant"})
        assert first.by_regulation["ITAR"] == second.by_regulation["ITAR"]
        assert second.by_regulation["EAR"] == 100

    def test_unknown_ids_ignored(self, make_requirement):
        reqs = self._reqs(make_requirement)
        engine = ScoringEngine()
        assert engine.score(reqs, {"OTHER-9": "compliant"}) == engine.score(reqs, {})

    def test_idempotent(self, make_requirement):
        reqs = self._reqs(make_requirement)
        statuses = {"ITAR-1": "partial", "EAR-1": "compliant"}
        engine = ScoringEngine()
        assert engine.score(reqs, statuses) == engine.score(reqs, statuses)

    def test_no_applicable_requirements(self):
        score = ScoringEngine().score([], {})
        assert score.overall == 0
        assert score.by_regulation == {}

    def test_invalid_status_rejected(self, make_requirement):
        with pytest.raises(ValueError):
            ScoringEngine().score(self._reqs(make_requirement), {"ITAR-1": "mostly"})


class TestRegulationStatuses:
    def test_counts_and_bands(self, make_requirement):
        reqs = [
            make_requirement("I1", regulation="ITAR"),
            make_requirement("I2", regulation="ITAR"),
            make_requirement("I3", regulation="ITAR"),
            make_requirement("E1", regulation="EAR"),
        ]
        rollups = ScoringEngine().regulation_statuses(
            reqs,
            {"I1": "compliant", "I2": "partial", "E1": "compliant"},
            {"ITAR": STRICT_BANDS},
        )
        itar, ear = rollups
        assert itar.regulation == "ITAR"
        assert (itar.total_requirements, itar.assessed, itar.compliant, itar.partial) == (3, 2, 1, 1)
        assert itar.gap_count == 2
        assert itar.score == 50
        assert itar.risk_level == RiskLevel.HIGH
        assert ear.score == 100
        assert ear.risk_level == RiskLevel.LOW

    def test_all_not_applicable_is_low(self, make_requirement):
        rollup, = ScoringEngine().regulation_statuses(
            [make_requirement("I1")], {"I1": "not_applicable"}
        )
        assert rollup.score == 0
        assert rollup.risk_level == RiskLevel.LOW


class TestBands:
    @pytest.mark.parametrize(
        "score,non_compliant,expected",
        [
            (100, 0, RiskLevel.LOW),
            (84, 0, RiskLevel.MEDIUM),
            (69, 0, RiskLevel.HIGH),
            (100, 3, RiskLevel.HIGH),
            (49, 0, RiskLevel.CRITICAL),
            (90, 6, RiskLevel.CRITICAL),
        ],
    )
    def test_strict(self, score, non_compliant, expected):
        assert STRICT_BANDS.classify(score, non_compliant) == expected

    def test_standard_is_more_lenient(self):
        assert STANDARD_BANDS.classify(45, 0) == RiskLevel.HIGH
        assert STRICT_BANDS.classify(45, 0) == RiskLevel.CRITICAL


class TestScoreColors:
    def test_colors(self):
        assert score_to_color(80) == "green"
        assert score_to_color(79) == "yellow"
        assert score_to_color(50) == "yellow"
        assert score_to_color(49) == "red"
