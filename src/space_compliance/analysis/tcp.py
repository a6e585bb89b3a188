# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Technology Control Plan necessity and priority."""

from __future__ import annotations

from space_compliance.analysis.models import TCPAssessment
from space_compliance.domains.export_control.profile import ExportControlProfile

TCP_ELEMENTS = (
    "Physical security measures (locked storage, access badges)",
    "IT security controls (access restrictions, encryption)",
    "Personnel security procedures (background checks, clearances)",
    "Visitor control procedures",
    "Foreign national identification and tracking",
    "Training and awareness program",
    "Audit and monitoring procedures",
    "Incident response procedures",
    "Documentation and record keeping",
)


def assess_tcp(profile: ExportControlProfile) -> TCPAssessment:
    """A TCP is required exactly when foreign nationals or joint ventures exist."""
    reasons: list[str] = []
    if profile.has_foreign_nationals:
        reasons.append("Foreign national employees may access controlled technology")
    if profile.has_joint_ventures:
        reasons.append("Joint ventures may involve foreign party access to controlled technology")

    required = bool(reasons)
    if required and profile.has_itar_items and profile.has_manufacturing_abroad:
        reasons.append("Foreign manufacturing requires protection of ITAR technical data")

    if profile.has_foreign_nationals and not profile.has_tcp:
        priority = "immediate"
    elif required and not profile.has_tcp:
        priority = "high"
    else:
        priority = "medium"

    return TCPAssessment(
        tcp_required=required,
        has_existing_plan=profile.has_tcp,
        reasons=tuple(reasons),
        required_elements=TCP_ELEMENTS if required else (),
        implementation_priority=priority,
    )
