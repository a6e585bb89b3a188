# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Per-regulation risk bands and display color thresholds."""

from __future__ import annotations

from dataclasses import dataclass

from space_compliance.data.models import RiskLevel

# ---------------------------------------------------------------------------
# Color thresholds
# ---------------------------------------------------------------------------
GREEN_MIN = 80
YELLOW_MIN = 50
# Below 50 = Red


@dataclass(frozen=True)
class RiskBands:
    """Score and non-compliant-count cutoffs mapping a regulation to a risk level.

    A regulation is at a level when its score is below ``*_score`` or its
    non-compliant count exceeds ``*_non_compliant``, checked from critical
    downward.
    """

    critical_score: int
    critical_non_compliant: int
    high_score: int
    high_non_compliant: int
    medium_score: int

    def classify(self, score: int, non_compliant: int) -> RiskLevel:
        if score < self.critical_score or non_compliant > self.critical_non_compliant:
            return RiskLevel.CRITICAL
        if score < self.high_score or non_compliant > self.high_non_compliant:
            return RiskLevel.HIGH
        if score < self.medium_score:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW


# Munitions-list regimes carry stricter bands than dual-use regimes.
STRICT_BANDS = RiskBands(
    critical_score=50, critical_non_compliant=5,
    high_score=70, high_non_compliant=2,
    medium_score=85,
)
STANDARD_BANDS = RiskBands(
    critical_score=40, critical_non_compliant=8,
    high_score=60, high_non_compliant=4,
    medium_score=80,
)


def score_to_color(score: float) -> str:
    """Convert a 0-100 score to 'green', 'yellow', or 'red'."""
    if score >= GREEN_MIN:
        return "green"
    if score >= YELLOW_MIN:
        return "yellow"
    return "red"
