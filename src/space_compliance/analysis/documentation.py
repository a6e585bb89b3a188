# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Documentation checklist grouped by category."""

from __future__ import annotations

from space_compliance.analysis.models import DocumentationCategory, DocumentItem
from space_compliance.domains.export_control.catalogs import (
    COMPLIANCE_PROGRAM_DOCS,
    EAR_DOCS,
    SCREENING_DOCS,
    TCP_DOCS,
)
from space_compliance.domains.export_control.profile import ExportControlProfile


def _itar_docs(profile: ExportControlProfile) -> DocumentationCategory:
    return DocumentationCategory(
        category="ITAR Registration & Licensing",
        documents=(
            DocumentItem(
                name="DDTC Registration Certificate",
                description="Current registration with State Department DDTC",
                retention_period="Duration of activities + 5 years",
            ),
            DocumentItem(
                name="Empowered Official Designation",
                description="Formal designation of authorized signatories",
                retention_period="Duration of employment + 5 years",
            ),
            DocumentItem(
                name="DSP-5 Licenses",
                description="All permanent export licenses",
                retention_period="5 years from license expiration",
            ),
            DocumentItem(
                name="TAAs and MLAs",
                required=profile.has_technology_transfer or profile.has_manufacturing_abroad,
                description="Technical assistance and manufacturing agreements",
                retention_period="5 years from agreement expiration",
            ),
            DocumentItem(
                name="Shipping Documentation",
                description="Export manifests, bills of lading, customs entries",
                retention_period="5 years from export",
            ),
        ),
    )


def generate_documentation_checklist(profile: ExportControlProfile) -> list[DocumentationCategory]:
    checklist: list[DocumentationCategory] = []
    if profile.has_itar_items:
        checklist.append(_itar_docs(profile))
    if profile.has_ear_items:
        checklist.append(EAR_DOCS)
    checklist.append(SCREENING_DOCS)
    checklist.append(COMPLIANCE_PROGRAM_DOCS)
    if profile.has_foreign_nationals:
        checklist.append(TCP_DOCS)
    return checklist
