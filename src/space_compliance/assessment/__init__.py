# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Assessment orchestration, record reconciliation and result history."""

from space_compliance.assessment.engine import AssessmentEngine
from space_compliance.assessment.history import compare_results, load_result, save_result
from space_compliance.assessment.lifecycle import reconcile_assessments
from space_compliance.assessment.snapshot import Snapshot, load_snapshot, parse_snapshot

__all__ = [
    "AssessmentEngine",
    "Snapshot",
    "compare_results",
    "load_result",
    "load_snapshot",
    "parse_snapshot",
    "reconcile_assessments",
    "save_result",
]
