# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Load assessment snapshots (profile plus statuses) from YAML or JSON.

A snapshot file looks like::

    domain: export_control
    profile:
      name: Orbital Dynamics Inc
      company_type: [satellite_operator]
      has_ear_items: true
    assessments:
      EAR-CLASS-001: compliant
      EAR-LIC-001: partial
      EAR-SCREEN-001:
        status: non_compliant
        notes: Manual screening only
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from space_compliance.data.models import ComplianceStatus, Profile, RequirementAssessment
from space_compliance.domains import get_domain
from space_compliance.exceptions import ComplianceError

logger = logging.getLogger(__name__)

DEFAULT_DOMAIN = "export_control"
_VALID_STATUSES = {s.value for s in ComplianceStatus}


@dataclass
class Snapshot:
    """A parsed snapshot ready to hand to the assessment engine."""

    domain: str
    profile: Profile
    assessments: list[RequirementAssessment] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def _parse_entries(raw: Any) -> tuple[list[RequirementAssessment], list[str]]:
    """Accept either ``{id: status}`` / ``{id: {status: ...}}`` or a list of records."""
    if raw is None:
        return [], []
    if isinstance(raw, dict):
        items = []
        for req_id, value in raw.items():
            entry = dict(value) if isinstance(value, dict) else {"status": value}
            entry["requirement_id"] = req_id
            items.append(entry)
    elif isinstance(raw, list):
        items = [dict(item) for item in raw]
    else:
        raise ComplianceError("Snapshot 'assessments' must be a mapping or a list")

    entries: list[RequirementAssessment] = []
    skipped: list[str] = []
    for item in items:
        req_id = str(item.get("requirement_id", ""))
        status = item.get("status", ComplianceStatus.NOT_ASSESSED.value)
        if status not in _VALID_STATUSES:
            logger.warning("Skipping '%s': unknown status '%s'", req_id, status)
            skipped.append(req_id)
            continue
        try:
            entries.append(RequirementAssessment.model_validate(item))
        except ValidationError as exc:
            raise ComplianceError(f"Invalid assessment entry '{req_id}': {exc.errors()[0]['msg']}") from exc
    return entries, skipped


def parse_snapshot(data: dict[str, Any]) -> Snapshot:
    """Build a :class:`Snapshot` from already-decoded data."""
    if not isinstance(data, dict):
        raise ComplianceError("Snapshot must be a mapping")
    domain_name = data.get("domain", DEFAULT_DOMAIN)
    domain = get_domain(domain_name)
    profile = domain.validate_profile(data.get("profile") or {})
    entries, skipped = _parse_entries(data.get("assessments"))
    return Snapshot(domain=domain.name, profile=profile, assessments=entries, skipped=skipped)


def load_snapshot(path: str | Path) -> Snapshot:
    """Read a YAML or JSON snapshot from disk.

    Raises:
        FileNotFoundError: *path* does not exist.
        ProfileValidationError: the embedded profile is invalid.
    """
    snapshot_path = Path(path)
    if not snapshot_path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {snapshot_path}")

    text = snapshot_path.read_text()
    if snapshot_path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text) or {}

    snapshot = parse_snapshot(data)
    logger.info(
        "Loaded %s snapshot from %s with %d assessments",
        snapshot.domain, snapshot_path, len(snapshot.assessments),
    )
    return snapshot
