# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Deemed export exposure from foreign-national access to controlled technology."""

from __future__ import annotations

from space_compliance.analysis.models import DeemedExportAssessment
from space_compliance.config import DEFAULT_SETTINGS, EngineSettings
from space_compliance.domains.export_control.catalogs import DEEMED_EXPORT_RULES
from space_compliance.domains.export_control.profile import ExportControlProfile


def assess_deemed_export(
    profile: ExportControlProfile,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> DeemedExportAssessment:
    """Assess releases of controlled technology to foreign persons.

    A license line is produced per foreign-national country: TAA/DSP-5 when
    ITAR items are handled, and a deemed export license for every country in
    the restricted set whatever the item flags say.
    """
    if not profile.has_foreign_nationals:
        return DeemedExportAssessment(
            has_foreign_nationals=False,
            tcp_required=profile.has_joint_ventures,
        )

    countries = list(dict.fromkeys(profile.foreign_national_countries))
    restricted = [c for c in countries if settings.is_restricted(c)]

    itar_risks = tuple(r for r in DEEMED_EXPORT_RULES if r.regulation == "ITAR") if profile.has_itar_items else ()
    ear_risks = tuple(r for r in DEEMED_EXPORT_RULES if r.regulation == "EAR") if profile.has_ear_items else ()

    licenses: list[str] = []
    for country in countries:
        if profile.has_itar_items:
            licenses.append(f"TAA/DSP-5 required for {country} nationals accessing ITAR technical data")
        if country in restricted:
            licenses.append(f"Deemed export license required for {country} nationals (restricted destination)")

    recommendations: list[str] = []
    if not profile.has_tcp:
        recommendations.append("Implement Technology Control Plan to protect controlled technology")
    if restricted:
        recommendations.append(
            "Obtain deemed export licenses before releasing technology to nationals of "
            + ", ".join(restricted)
        )
    recommendations.extend([
        "Screen all foreign national employees for denied party list matches",
        "Maintain documentation of citizenship/residency for all employees",
        "Implement physical and IT access controls for controlled areas",
    ])

    return DeemedExportAssessment(
        has_foreign_nationals=True,
        foreign_national_countries=tuple(countries),
        itar_risks=itar_risks,
        ear_risks=ear_risks,
        tcp_required=True,
        licenses_required=tuple(licenses),
        restricted_countries=tuple(restricted),
        recommendations=tuple(recommendations),
    )
