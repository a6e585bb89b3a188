# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Risk-weighted compliance scoring.

Every group score is

    round_half_up(100 * sum(weight * multiplier) / sum(multiplier))

over the non-N/A requirements of the group, where *weight* comes from the
requirement's status and *multiplier* from its risk level.  Weights are
held as integer units (compliant 2, partial 1, otherwise 0) so the ratio is
evaluated exactly and results are identical across platforms.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping

from space_compliance.data.models import (
    Assessments,
    ComplianceScore,
    ComplianceStatus,
    RegulationStatus,
    Requirement,
    RiskLevel,
    status_index,
)
from space_compliance.scoring.thresholds import STANDARD_BANDS, RiskBands
from space_compliance.scoring.weights import RISK_MULTIPLIERS, STATUS_UNITS, WEIGHT_SCALE

logger = logging.getLogger(__name__)


def group_score(
    requirements: Iterable[Requirement],
    statuses: Mapping[str, ComplianceStatus],
) -> int:
    """Score one group of requirements; an empty or all-N/A group scores 0."""
    numerator = 0
    denominator = 0
    for req in requirements:
        status = statuses.get(req.id, ComplianceStatus.NOT_ASSESSED)
        if status == ComplianceStatus.NOT_APPLICABLE:
            continue
        multiplier = RISK_MULTIPLIERS[req.risk_level]
        numerator += STATUS_UNITS[status] * multiplier
        denominator += WEIGHT_SCALE * multiplier

    if denominator == 0:
        return 0
    # Half-up rounding of 100 * numerator / denominator.
    return (200 * numerator + denominator) // (2 * denominator)


def _grouped(
    requirements: list[Requirement], key: Callable[[Requirement], str]
) -> dict[str, list[Requirement]]:
    groups: dict[str, list[Requirement]] = {}
    for req in requirements:
        groups.setdefault(key(req), []).append(req)
    return groups


class ScoringEngine:
    """Compute overall, mandatory and per-group compliance scores.

    Usage::

        engine = ScoringEngine()
        score = engine.score(applicable, assessments)
    """

    def score(
        self,
        applicable: list[Requirement],
        assessments: Assessments | None = None,
    ) -> ComplianceScore:
        """Score the applicable requirements against recorded statuses.

        Args:
            applicable: Requirements returned by the applicability resolver.
            assessments: Recorded statuses; entries for requirements outside
                *applicable* are ignored and missing entries count as
                not assessed.

        Returns:
            A :class:`ComplianceScore` with integer scores in 0-100.
        """
        statuses = status_index(assessments)

        by_regulation = {
            tag: group_score(reqs, statuses)
            for tag, reqs in _grouped(applicable, lambda r: r.regulation).items()
        }
        by_category = {
            category: group_score(reqs, statuses)
            for category, reqs in _grouped(applicable, lambda r: r.category).items()
        }

        result = ComplianceScore(
            overall=group_score(applicable, statuses),
            mandatory=group_score((r for r in applicable if r.mandatory), statuses),
            by_regulation=by_regulation,
            by_category=by_category,
            critical=group_score(
                (r for r in applicable if r.risk_level == RiskLevel.CRITICAL), statuses
            ),
        )
        logger.debug(
            "Scored %d requirements: overall=%d mandatory=%d",
            len(applicable), result.overall, result.mandatory,
        )
        return result

    def regulation_statuses(
        self,
        applicable: list[Requirement],
        assessments: Assessments | None = None,
        bands: Mapping[str, RiskBands] | None = None,
    ) -> list[RegulationStatus]:
        """Roll up counts, score and risk per regulation tag, in first-seen order."""
        statuses = status_index(assessments)
        bands = bands or {}

        rollups: list[RegulationStatus] = []
        for tag, reqs in _grouped(applicable, lambda r: r.regulation).items():
            counts = {status: 0 for status in ComplianceStatus}
            for req in reqs:
                counts[statuses.get(req.id, ComplianceStatus.NOT_ASSESSED)] += 1

            score = group_score(reqs, statuses)
            non_compliant = counts[ComplianceStatus.NON_COMPLIANT]
            if counts[ComplianceStatus.NOT_APPLICABLE] == len(reqs):
                risk = RiskLevel.LOW
            else:
                risk = bands.get(tag, STANDARD_BANDS).classify(score, non_compliant)
            rollups.append(
                RegulationStatus(
                    regulation=tag,
                    total_requirements=len(reqs),
                    assessed=len(reqs) - counts[ComplianceStatus.NOT_ASSESSED],
                    compliant=counts[ComplianceStatus.COMPLIANT],
                    partial=counts[ComplianceStatus.PARTIAL],
                    non_compliant=non_compliant,
                    score=score,
                    risk_level=risk,
                    gap_count=sum(counts[s] for s in ComplianceStatus if s.is_gap),
                )
            )
        return rollups
