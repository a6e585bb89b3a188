# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Recommendation engine and templates."""

from space_compliance.recommendations.engine import (
    RecommendationEngine,
    RecommendationRule,
    RuleContext,
)
from space_compliance.recommendations.templates import RecommendationTemplate

__all__ = [
    "RecommendationEngine",
    "RecommendationRule",
    "RecommendationTemplate",
    "RuleContext",
]
