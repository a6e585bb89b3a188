# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""EAR license exceptions a profile may be able to rely on."""

from __future__ import annotations

from space_compliance.analysis.models import LicenseException
from space_compliance.domains.export_control.catalogs import GOV, RPL, STA, TMP, TSR
from space_compliance.domains.export_control.profile import ExportControlProfile


def analyze_license_exceptions(profile: ExportControlProfile) -> list[LicenseException]:
    candidates = [
        (TMP, not profile.itar_only),
        (RPL, profile.has_ear_items),
        (GOV, profile.has_defense_contracts),
        (TSR, profile.has_ear_items and profile.has_technology_transfer),
        (STA, profile.has_ear_items),
    ]
    return [exception for exception, eligible in candidates if eligible]
