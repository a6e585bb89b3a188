# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data models and bundled sample profiles."""

from space_compliance.data.models import (
    AssessmentResult,
    ComplianceScore,
    ComplianceStatus,
    Gap,
    PenaltyInfo,
    Profile,
    Recommendation,
    RegulationStatus,
    Requirement,
    RequirementAssessment,
    RequirementCorpus,
    RiskClassification,
    RiskLevel,
    Timeframe,
)

__all__ = [
    "AssessmentResult",
    "ComplianceScore",
    "ComplianceStatus",
    "Gap",
    "PenaltyInfo",
    "Profile",
    "Recommendation",
    "RegulationStatus",
    "Requirement",
    "RequirementAssessment",
    "RequirementCorpus",
    "RiskClassification",
    "RiskLevel",
    "Timeframe",
]
