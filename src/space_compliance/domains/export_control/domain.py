# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""US export control (ITAR / EAR) domain definition."""

from __future__ import annotations

from pydantic import Field

from space_compliance.analysis.deemed_export import assess_deemed_export
from space_compliance.analysis.documentation import generate_documentation_checklist
from space_compliance.analysis.license_exceptions import analyze_license_exceptions
from space_compliance.analysis.models import (
    DeemedExportAssessment,
    DocumentationCategory,
    LicenseException,
    PenaltyExposure,
    ScreeningAssessment,
    TCPAssessment,
)
from space_compliance.analysis.penalty_exposure import assess_penalty_exposure
from space_compliance.analysis.screening import assess_screening
from space_compliance.analysis.tcp import assess_tcp
from space_compliance.data.models import AssessmentResult
from space_compliance.domains import register_domain
from space_compliance.domains.base import RegulatoryDomain
from space_compliance.domains.export_control.profile import ExportControlProfile
from space_compliance.domains.export_control.requirements import (
    EXPORT_CONTROL_CORPUS,
    LICENSE_GATES,
)
from space_compliance.domains.export_control.rules import (
    JURISDICTION_RULES,
    RECOMMENDATION_RULES,
    REGULATION_BANDS,
    RISK_RULES,
    build_risk_rules,
)


class ExportControlResult(AssessmentResult):
    """Assessment result with the export-control sub-assessments attached."""

    profile: ExportControlProfile
    deemed_export: DeemedExportAssessment
    screening: ScreeningAssessment
    tcp: TCPAssessment
    license_exceptions: tuple[LicenseException, ...] = ()
    documentation_checklist: tuple[DocumentationCategory, ...] = ()
    penalty_exposure: PenaltyExposure = Field(default_factory=PenaltyExposure)


EXPORT_CONTROL = RegulatoryDomain(
    name="export_control",
    title="US Export Control (ITAR / EAR)",
    corpus=EXPORT_CONTROL_CORPUS,
    profile_model=ExportControlProfile,
    risk_rules=RISK_RULES,
    risk_rule_builder=build_risk_rules,
    jurisdiction_rules=JURISDICTION_RULES,
    recommendation_rules=RECOMMENDATION_RULES,
    result_model=ExportControlResult,
    sub_assessors={
        "deemed_export": lambda profile, settings, applicable: assess_deemed_export(profile, settings),
        "screening": lambda profile, settings, applicable: assess_screening(profile, settings),
        "tcp": lambda profile, settings, applicable: assess_tcp(profile),
        "license_exceptions": lambda profile, settings, applicable: analyze_license_exceptions(profile),
        "documentation_checklist": (
            lambda profile, settings, applicable: generate_documentation_checklist(profile)
        ),
        "penalty_exposure": lambda profile, settings, applicable: assess_penalty_exposure(
            profile, EXPORT_CONTROL_CORPUS, applicable
        ),
    },
    regulation_bands=REGULATION_BANDS,
    license_gates=LICENSE_GATES,
)

register_domain(EXPORT_CONTROL)
