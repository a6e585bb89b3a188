# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Keep stored assessment records in step with a changing profile."""

from __future__ import annotations

import logging
from typing import Mapping

from space_compliance.data.models import (
    Assessments,
    RequirementAssessment,
    Requirement,
)

logger = logging.getLogger(__name__)


def _records(existing: Assessments | None) -> dict[str, RequirementAssessment]:
    if not existing:
        return {}
    if isinstance(existing, Mapping):
        records = {}
        for req_id, value in existing.items():
            if isinstance(value, RequirementAssessment):
                records[req_id] = value
            else:
                records[req_id] = RequirementAssessment(requirement_id=req_id, status=value)
        return records
    return {entry.requirement_id: entry for entry in existing}


def reconcile_assessments(
    applicable: list[Requirement],
    existing: Assessments | None = None,
) -> list[RequirementAssessment]:
    """Return one record per applicable requirement, in corpus order.

    Existing records are kept as they are; newly applicable requirements get
    a ``not_assessed`` record and records for requirements that no longer
    apply are dropped.  The caller persists the returned list.
    """
    records = _records(existing)
    reconciled: list[RequirementAssessment] = []
    created = 0
    for req in applicable:
        record = records.get(req.id)
        if record is None:
            record = RequirementAssessment(requirement_id=req.id)
            created += 1
        reconciled.append(record)

    applicable_ids = {r.id for r in applicable}
    dropped = sum(1 for req_id in records if req_id not in applicable_ids)
    logger.debug("Reconciled assessments: %d created, %d dropped", created, dropped)
    return reconciled
