# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Statutory penalty exposure for display alongside the score."""

from __future__ import annotations

from space_compliance.analysis.models import PenaltyExposure
from space_compliance.data.models import Requirement, RequirementCorpus
from space_compliance.domains.export_control.catalogs import GENERAL_PENALTY_CONSEQUENCES
from space_compliance.domains.export_control.profile import ExportControlProfile


def assess_penalty_exposure(
    profile: ExportControlProfile,
    corpus: RequirementCorpus,
    applicable: list[Requirement] | None = None,
) -> PenaltyExposure:
    """Maximum per-violation penalties over the requirements that apply.

    Mitigating and aggravating factors are descriptive only; they never
    alter the compliance score.
    """
    if applicable is None:
        applicable = [r for r in corpus.requirements if r.is_applicable(profile)]
    penalties = [r.penalty for r in applicable if r.penalty is not None]

    mitigating: list[str] = []
    if profile.has_compliance_program:
        mitigating.append("Existence of compliance program")
    if profile.voluntary_disclosure_filed:
        mitigating.append("Voluntary disclosure (typically 50%+ penalty reduction)")

    aggravating: list[str] = []
    if profile.has_itar_items and not profile.registered_with_ddtc:
        aggravating.append("Operating without required DDTC registration")
    if profile.has_foreign_nationals and profile.has_controlled_items and not profile.has_tcp:
        aggravating.append("Potential deemed exports without a Technology Control Plan")

    return PenaltyExposure(
        max_civil_per_violation=max((p.max_civil_penalty for p in penalties), default=0),
        max_criminal_per_violation=max((p.max_criminal_penalty for p in penalties), default=0),
        max_imprisonment_years=max((p.max_imprisonment_years for p in penalties), default=0),
        additional_consequences=GENERAL_PENALTY_CONSEQUENCES if penalties else (),
        mitigating_factors=tuple(mitigating),
        aggravating_factors=tuple(aggravating),
    )
