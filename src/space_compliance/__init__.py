# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Space Compliance - regulatory compliance assessment for space operators."""

__version__ = "0.1.0"

from space_compliance.data.models import (
    AssessmentResult,
    ComplianceScore,
    ComplianceStatus,
    Gap,
    Recommendation,
    Requirement,
    RequirementAssessment,
    RequirementCorpus,
    RiskClassification,
    RiskLevel,
)
from space_compliance.data.profiles import PROFILES, SampleProfile, get_profile
from space_compliance.config import EngineSettings, load_settings
from space_compliance.exceptions import ComplianceError, ProfileValidationError
from space_compliance.domains import available_domains, get_domain
from space_compliance.scoring.engine import ScoringEngine
from space_compliance.recommendations.engine import RecommendationEngine
from space_compliance.assessment.engine import AssessmentEngine

__all__ = [
    "AssessmentEngine",
    "AssessmentResult",
    "ComplianceError",
    "ComplianceScore",
    "ComplianceStatus",
    "EngineSettings",
    "Gap",
    "PROFILES",
    "ProfileValidationError",
    "Recommendation",
    "RecommendationEngine",
    "Requirement",
    "RequirementAssessment",
    "RequirementCorpus",
    "RiskClassification",
    "RiskLevel",
    "SampleProfile",
    "ScoringEngine",
    "available_domains",
    "get_domain",
    "get_profile",
    "load_settings",
]
