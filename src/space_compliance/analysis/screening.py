# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Restricted-party screening obligations."""

from __future__ import annotations

from space_compliance.analysis.models import ScreeningAssessment, ScreeningScope
from space_compliance.config import DEFAULT_SETTINGS, EngineSettings
from space_compliance.domains.export_control.catalogs import SCREENING_LISTS
from space_compliance.domains.export_control.profile import ExportControlProfile


def screening_frequency(annual_export_value: float | None, settings: EngineSettings) -> str:
    value = annual_export_value or 0
    if value >= settings.screening.daily_threshold:
        return "daily"
    if value >= settings.screening.weekly_threshold:
        return "weekly"
    return "per_transaction"


def assess_screening(
    profile: ExportControlProfile,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> ScreeningAssessment:
    """Determine lists, cadence and automation needed for party screening."""
    export_activity = profile.has_controlled_items or bool(profile.exports_to_countries)

    required = tuple(
        s for s in SCREENING_LISTS
        if s.scope == ScreeningScope.ALL_TRANSACTIONS or export_activity
    )

    value = profile.annual_export_value or 0
    automated = profile.has_itar_items or value >= settings.screening.automated_threshold

    return ScreeningAssessment(
        required_lists=required,
        red_flag_procedures_required=export_activity,
        automated_screening_required=automated,
        screening_frequency=screening_frequency(profile.annual_export_value, settings),
        restricted_destinations=tuple(
            c for c in dict.fromkeys(profile.exports_to_countries) if settings.is_restricted(c)
        ),
    )
