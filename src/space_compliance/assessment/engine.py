# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Assessment orchestrator: one profile, one domain, one immutable result.

The engine runs the pipeline

    validate -> resolve -> score -> classify -> gaps -> regulation statuses
             -> sub-assessments -> recommendations

and performs no I/O.  Equal inputs give equal results, so a result can be
cached or compared field by field.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from space_compliance.classification.classifier import RiskClassifier
from space_compliance.config import DEFAULT_SETTINGS, EngineSettings
from space_compliance.data.models import (
    Assessments,
    AssessmentResult,
    ComplianceStatus,
    status_index,
)
from space_compliance.domains import get_domain
from space_compliance.domains.base import RegulatoryDomain
from space_compliance.gaps.analyzer import GapAnalyzer
from space_compliance.recommendations.engine import RecommendationEngine
from space_compliance.scoring.engine import ScoringEngine

logger = logging.getLogger(__name__)


class AssessmentEngine:
    """Assess organization profiles against one regulatory domain.

    Usage::

        engine = AssessmentEngine("export_control")
        result = engine.assess({"company_type": ["satellite_operator"]})
    """

    def __init__(
        self,
        domain: RegulatoryDomain | str,
        settings: EngineSettings | None = None,
    ) -> None:
        self.domain = get_domain(domain) if isinstance(domain, str) else domain
        self.settings = settings or DEFAULT_SETTINGS
        self.resolver = self.domain.resolver()
        self.scorer = ScoringEngine()
        self.classifier = RiskClassifier.for_domain(self.domain, self.settings)
        self.gap_analyzer = GapAnalyzer(self.domain.quick_categories)
        self.recommender = RecommendationEngine(self.domain.recommendation_rules)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def assess(
        self,
        profile_data: Any,
        assessments: Assessments | None = None,
    ) -> AssessmentResult:
        """Run the full pipeline and return the domain's result model.

        Raises:
            ProfileValidationError: the profile is missing a primary field
                or has a malformed value.  Nothing else is computed.
        """
        profile = self.domain.validate_profile(profile_data)
        statuses, ignored = self.split_assessments(assessments)

        applicable = self.resolver.resolve(profile)
        score = self.scorer.score(applicable, statuses)
        classification = self.classifier.classify(profile)
        gaps = self.gap_analyzer.analyze(applicable, statuses)
        regulation_statuses = self.scorer.regulation_statuses(
            applicable, statuses, self.domain.regulation_bands
        )

        extras: dict[str, Any] = {}
        for field_name, sub_assessor in self.domain.sub_assessors.items():
            value = sub_assessor(profile, self.settings, applicable)
            extras[field_name] = tuple(value) if isinstance(value, list) else value

        recommendations = self.recommender.generate(profile, gaps, score, self.settings)

        logger.debug(
            "Assessed %s profile '%s': %d applicable, %d gaps, %d recommendations",
            self.domain.name, profile.name, len(applicable), len(gaps), len(recommendations),
        )

        return self.domain.result_model(
            domain=self.domain.name,
            corpus_version=self.domain.corpus.version,
            profile=profile,
            applicable_requirement_ids=tuple(r.id for r in applicable),
            score=score,
            gaps=tuple(gaps),
            classification=classification,
            recommendations=tuple(recommendations),
            regulation_statuses=tuple(regulation_statuses),
            required_registrations=tuple(
                self.resolver.required_registrations(profile, applicable)
            ),
            required_license_types=tuple(
                self.resolver.required_license_types(profile, applicable)
            ),
            evidence_by_category={
                category: tuple(docs)
                for category, docs in self.resolver.evidence_by_category(profile, applicable).items()
            },
            ignored_assessment_ids=tuple(ignored),
            **extras,
        )

    def split_assessments(
        self, assessments: Assessments | None
    ) -> tuple[dict[str, ComplianceStatus], list[str]]:
        """Separate statuses for known requirement ids from unknown ids.

        Unknown ids are dropped before their status is read, so a stale
        entry with a retired status value cannot fail the assessment.
        """
        known: dict[str, ComplianceStatus] = {}
        ignored: list[str] = []
        if not assessments:
            return known, ignored
        if isinstance(assessments, Mapping):
            entries = list(assessments.items())
        else:
            entries = [(a.requirement_id, a) for a in assessments]
        for req_id, value in entries:
            if req_id not in self.domain.corpus:
                if req_id not in ignored:
                    ignored.append(req_id)
                continue
            known.update(status_index({req_id: value}))
        if ignored:
            logger.debug("Ignoring assessments for unknown requirement ids: %s", ", ".join(ignored))
        return known, ignored
