# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Gap analysis over applicable requirements.

A gap is emitted for every applicable requirement that is partial,
non-compliant or not yet assessed.  Gaps are ordered by risk level with
corpus order preserved inside each level.
"""

from __future__ import annotations

import logging

from space_compliance.data.models import (
    Assessments,
    ComplianceStatus,
    Gap,
    PenaltyInfo,
    Requirement,
    RiskLevel,
    status_index,
)

logger = logging.getLogger(__name__)

_STATUS_PREFIX = {
    ComplianceStatus.NON_COMPLIANT: "Not currently compliant with",
    ComplianceStatus.PARTIAL: "Partially compliant with",
    ComplianceStatus.NOT_ASSESSED: "Not yet assessed against",
}

# Categories whose gaps are usually closed by a procedure change, not a project.
DEFAULT_QUICK_CATEGORIES = frozenset({"SCREENING", "RECORDKEEPING", "TRAINING"})


def format_penalty(amount: int) -> str:
    """Format a USD amount: millions as ``$1.2M``, otherwise ``$353,534``."""
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    return f"${amount:,}"


def describe_penalty(penalty: PenaltyInfo | None) -> str:
    if penalty is None:
        return ""
    parts: list[str] = []
    if penalty.max_civil_penalty > 0:
        parts.append(f"Civil: up to {format_penalty(penalty.max_civil_penalty)}")
    if penalty.max_criminal_penalty > 0:
        parts.append(f"Criminal: up to {format_penalty(penalty.max_criminal_penalty)}")
    if penalty.max_imprisonment_years > 0:
        parts.append(f"Imprisonment: up to {penalty.max_imprisonment_years} years")
    return "; ".join(parts)


class GapAnalyzer:
    """Turn applicable requirements plus statuses into a risk-ordered gap list."""

    def __init__(self, quick_categories: frozenset[str] = DEFAULT_QUICK_CATEGORIES) -> None:
        self.quick_categories = quick_categories

    def analyze(
        self,
        applicable: list[Requirement],
        assessments: Assessments | None = None,
    ) -> list[Gap]:
        statuses = status_index(assessments)
        gaps: list[Gap] = []
        for req in applicable:
            status = statuses.get(req.id, ComplianceStatus.NOT_ASSESSED)
            if not status.is_gap:
                continue
            gaps.append(
                Gap(
                    requirement_id=req.id,
                    title=req.title,
                    regulation=req.regulation,
                    category=req.category,
                    risk_level=req.risk_level,
                    current_status=status,
                    description=self._describe(req, status),
                    recommendation=self._recommend(req, status),
                    potential_penalty=describe_penalty(req.penalty),
                    estimated_effort=self.estimate_effort(req),
                )
            )

        # sorted() is stable, so corpus order survives within a level
        gaps = sorted(gaps, key=lambda g: g.risk_level.rank)
        logger.debug("Found %d gaps across %d applicable requirements", len(gaps), len(applicable))
        return gaps

    def estimate_effort(self, req: Requirement) -> str:
        if req.category in self.quick_categories:
            return "days"
        if req.risk_level == RiskLevel.CRITICAL or len(req.documentation_required) > 4:
            return "months"
        return "weeks"

    @staticmethod
    def _describe(req: Requirement, status: ComplianceStatus) -> str:
        text = f"{_STATUS_PREFIX[status]} {req.title}"
        if req.reference:
            text += f" ({req.reference})"
        return text

    @staticmethod
    def _recommend(req: Requirement, status: ComplianceStatus) -> str:
        if req.compliance_actions:
            first = req.compliance_actions[0]
            if status == ComplianceStatus.NOT_ASSESSED:
                return f"Assess compliance with {req.title}. Key actions: {first}"
            return first
        if req.reference:
            return f"Review and implement {req.title} requirements per {req.reference}"
        return f"Review and implement {req.title} requirements"
