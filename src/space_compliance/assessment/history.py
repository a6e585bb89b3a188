# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Persistence and comparison of assessment results.

Results are saved to ``~/.space-compliance/results/`` with a lightweight
index at ``~/.space-compliance/result_history.json`` for fast lookups.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field

from space_compliance.data.models import AssessmentResult, RiskLevel
from space_compliance.domains import get_domain

DEFAULT_BASE_DIR = Path.home() / ".space-compliance"
RESULTS_DIR_NAME = "results"
HISTORY_INDEX_NAME = "result_history.json"


class HistoryEntry(BaseModel):
    domain: str
    profile_name: str
    saved_at: datetime
    overall_score: int
    overall_risk: RiskLevel
    gap_count: int
    file_path: str


class ResultHistory(BaseModel):
    entries: list[HistoryEntry] = Field(default_factory=list)


def _ensure_dirs(base_dir: Path) -> Path:
    results_dir = base_dir / RESULTS_DIR_NAME
    results_dir.mkdir(parents=True, exist_ok=True)
    return results_dir


def _load_index(base_dir: Path) -> ResultHistory:
    index_path = base_dir / HISTORY_INDEX_NAME
    if index_path.exists():
        return ResultHistory.model_validate(json.loads(index_path.read_text()))
    return ResultHistory()


def _save_index(history: ResultHistory, base_dir: Path) -> None:
    base_dir.mkdir(parents=True, exist_ok=True)
    (base_dir / HISTORY_INDEX_NAME).write_text(history.model_dump_json(indent=2))


def save_result(
    result: AssessmentResult,
    base_dir: Path = DEFAULT_BASE_DIR,
    saved_at: datetime | None = None,
) -> Path:
    """Save a result and append it to the history index.

    Returns the path to the saved JSON file.
    """
    results_dir = _ensure_dirs(base_dir)
    saved_at = saved_at or datetime.now(timezone.utc)

    # domain_name_YYYYMMDD_HHMMSS.json
    safe_name = (result.profile.name or "unnamed").lower().replace(" ", "_").replace("/", "_")
    filename = f"{result.domain}_{safe_name}_{saved_at.strftime('%Y%m%d_%H%M%S')}.json"
    file_path = results_dir / filename
    file_path.write_text(result.model_dump_json(indent=2))

    history = _load_index(base_dir)
    history.entries.append(HistoryEntry(
        domain=result.domain,
        profile_name=result.profile.name,
        saved_at=saved_at,
        overall_score=result.score.overall,
        overall_risk=result.classification.overall_risk,
        gap_count=result.gap_count,
        file_path=str(file_path),
    ))
    _save_index(history, base_dir)
    return file_path


def load_result(file_path: str | Path) -> AssessmentResult:
    """Load a saved result as its domain's result model."""
    data = json.loads(Path(file_path).read_text())
    domain = get_domain(data["domain"])
    return domain.result_model.model_validate(data)


def get_history(
    profile_name: str | None = None,
    base_dir: Path = DEFAULT_BASE_DIR,
) -> list[HistoryEntry]:
    """Return history entries, newest first, optionally for one profile."""
    entries = sorted(_load_index(base_dir).entries, key=lambda e: e.saved_at, reverse=True)
    if profile_name is not None:
        entries = [e for e in entries if e.profile_name.lower() == profile_name.lower()]
    return entries


def compare_results(
    result_a: AssessmentResult,
    result_b: AssessmentResult,
) -> dict[str, dict]:
    """Compare two results, returning score deltas per regulation and overall.

    Returns a dict keyed by regulation tag (plus ``"Overall"``) with:
      - score_a, score_b, delta
      - risk_a, risk_b
      - improved (bool)
    """
    statuses_a = {rs.regulation: rs for rs in result_a.regulation_statuses}
    statuses_b = {rs.regulation: rs for rs in result_b.regulation_statuses}

    comparison: dict[str, dict] = {}
    for tag, rs_a in statuses_a.items():
        rs_b = statuses_b.get(tag)
        if rs_b is None:
            continue
        delta = rs_b.score - rs_a.score
        comparison[tag] = {
            "score_a": rs_a.score,
            "score_b": rs_b.score,
            "delta": delta,
            "risk_a": rs_a.risk_level.value,
            "risk_b": rs_b.risk_level.value,
            "improved": delta > 0,
        }

    overall_delta = result_b.score.overall - result_a.score.overall
    comparison["Overall"] = {
        "score_a": result_a.score.overall,
        "score_b": result_b.score.overall,
        "delta": overall_delta,
        "risk_a": result_a.classification.overall_risk.value,
        "risk_b": result_b.classification.overall_risk.value,
        "improved": overall_delta > 0,
    }
    return comparison
