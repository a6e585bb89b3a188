# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Recommendation engine.

Evaluates a domain's ordered rule table against the profile, gap list and
score, and produces a prioritized list of
:class:`~space_compliance.data.models.Recommendation` objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from space_compliance.config import DEFAULT_SETTINGS, EngineSettings
from space_compliance.data.models import ComplianceScore, Gap, Profile, Recommendation
from space_compliance.recommendations.templates import RecommendationTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """Everything a recommendation rule may look at."""

    profile: Profile
    gaps: tuple[Gap, ...]
    score: ComplianceScore
    settings: EngineSettings


@dataclass(frozen=True)
class RecommendationRule:
    """One row of a recommendation table.

    The rule fires when ``when`` holds; without ``when`` it fires whenever
    ``gap_filter`` selects at least one gap.  ``context`` supplies extra
    placeholder values for the template description.
    """

    key: str
    template: RecommendationTemplate
    when: Callable[[RuleContext], bool] | None = None
    gap_filter: Callable[[Gap], bool] | None = None
    context: Callable[[RuleContext], dict[str, Any]] | None = None

    def linked_gaps(self, gaps: Sequence[Gap]) -> list[Gap]:
        if self.gap_filter is None:
            return []
        return [g for g in gaps if self.gap_filter(g)]

    def fires(self, ctx: RuleContext, linked: list[Gap]) -> bool:
        if self.when is not None:
            return bool(self.when(ctx))
        return bool(linked)


class RecommendationEngine:
    """Generate prioritized recommendations from a rule table.

    Usage::

        engine = RecommendationEngine(rules)
        recommendations = engine.generate(profile, gaps, score)
    """

    def __init__(self, rules: Sequence[RecommendationRule]) -> None:
        self.rules = tuple(rules)

    def generate(
        self,
        profile: Profile,
        gaps: Sequence[Gap],
        score: ComplianceScore,
        settings: EngineSettings | None = None,
    ) -> list[Recommendation]:
        """Fire rules in table order and number them 1..n.

        Overlapping rules may all fire; a rule key that appears more than
        once in the table is only emitted the first time.  The list is
        capped at ``settings.max_recommendations``.
        """
        settings = settings or DEFAULT_SETTINGS
        ctx = RuleContext(profile=profile, gaps=tuple(gaps), score=score, settings=settings)

        recommendations: list[Recommendation] = []
        seen: set[str] = set()
        for rule in self.rules:
            if rule.key in seen:
                continue
            linked = rule.linked_gaps(ctx.gaps)
            if not rule.fires(ctx, linked):
                continue
            seen.add(rule.key)

            values: dict[str, Any] = {"gap_count": len(linked), "score": score.overall}
            if rule.context is not None:
                values.update(rule.context(ctx))
            template = rule.template
            recommendations.append(
                Recommendation(
                    priority=len(recommendations) + 1,
                    title=template.title,
                    description=template.description_template.format(**values),
                    category=template.category,
                    timeframe=template.timeframe,
                    gap_ids=tuple(g.requirement_id for g in linked),
                    resources=template.resources,
                )
            )
            if len(recommendations) >= settings.max_recommendations:
                break

        logger.debug("Generated %d recommendations", len(recommendations))
        return recommendations
