# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for snapshot and settings loading."""

from __future__ import annotations

import json

import pytest
import yaml

from space_compliance.assessment.snapshot import load_snapshot, parse_snapshot
from space_compliance.config import DEFAULT_SETTINGS, EngineSettings, load_settings
from space_compliance.data.models import ComplianceStatus
from space_compliance.domains.debris.profile import DebrisProfile, OrbitType
from space_compliance.domains.export_control.profile import ExportControlProfile
from space_compliance.exceptions import ComplianceError, ProfileValidationError


class TestParseSnapshot:
    def test_mapping_entries(self):
        snap = parse_snapshot({
            "profile": {"company_type": ["satellite_operator"], "has_ear_items": True},
            "assessments": {
                "EAR-CLASS-001": "compliant",
                "EAR-LIC-001": {"status": "partial", "notes": "Awaiting BIS"},
            },
        })
        assert snap.domain == "export_control"
        assert isinstance(snap.profile, ExportControlProfile)
        by_id = {a.requirement_id: a for a in snap.assessments}
        assert by_id["EAR-CLASS-001"].status == ComplianceStatus.COMPLIANT
        assert by_id["EAR-LIC-001"].notes == "Awaiting BIS"
        assert snap.skipped == []

    def test_list_entries(self):
        snap = parse_snapshot({
            "profile": {"company_type": ["university"]},
            "assessments": [
                {"requirement_id": "TRAINING-001", "status": "non_compliant"},
                {"requirement_id": "AUDIT-001"},
            ],
        })
        statuses = [a.status for a in snap.assessments]
        assert statuses == [ComplianceStatus.NON_COMPLIANT, ComplianceStatus.NOT_ASSESSED]

    def test_unknown_status_skipped(self, caplog):
        snap = parse_snapshot({
            "profile": {"company_type": ["university"]},
            "assessments": {"TRAINING-001": "mostly", "AUDIT-001": "compliant"},
        })
        assert snap.skipped == ["TRAINING-001"]
        assert [a.requirement_id for a in snap.assessments] == ["AUDIT-001"]
        assert "unknown status 'mostly'" in caplog.text

    def test_debris_domain(self):
        snap = parse_snapshot({"domain": "debris", "profile": {"orbit_type": "GEO"}})
        assert snap.domain == "debris"
        assert isinstance(snap.profile, DebrisProfile)
        assert snap.profile.orbit_type == OrbitType.GEO
        assert snap.assessments == []

    def test_unknown_domain(self):
        with pytest.raises(KeyError, match="Unknown domain"):
            parse_snapshot({"domain": "spectrum", "profile": {}})

    def test_invalid_profile(self):
        with pytest.raises(ProfileValidationError):
            parse_snapshot({"profile": {}})

    def test_bad_shapes(self):
        with pytest.raises(ComplianceError, match="must be a mapping"):
            parse_snapshot(["not", "a", "mapping"])
        with pytest.raises(ComplianceError, match="'assessments' must be a mapping or a list"):
            parse_snapshot({"profile": {"company_type": ["university"]}, "assessments": "all good"})

    def test_invalid_entry(self):
        with pytest.raises(ComplianceError, match="Invalid assessment entry 'TRAINING-001'"):
            parse_snapshot({
                "profile": {"company_type": ["university"]},
                "assessments": {"TRAINING-001": {"status": "compliant", "target_date": "someday"}},
            })


class TestLoadSnapshot:
    def test_yaml(self, tmp_path):
        path = tmp_path / "snap.yaml"
        path.write_text(yaml.safe_dump({
            "domain": "debris",
            "profile": {"orbit_type": "LEO", "satellite_count": 12},
            "assessments": {"DEBRIS-TRACK-001": "compliant"},
        }))
        snap = load_snapshot(path)
        assert snap.profile.satellite_count == 12
        assert len(snap.assessments) == 1

    def test_json(self, tmp_path):
        path = tmp_path / "snap.json"
        path.write_text(json.dumps({
            "profile": {"company_type": ["satellite_operator"]},
            "assessments": {"EAR-CLASS-001": "partial"},
        }))
        snap = load_snapshot(str(path))
        assert snap.assessments[0].status == ComplianceStatus.PARTIAL

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Snapshot file not found"):
            load_snapshot(tmp_path / "missing.yaml")

    def test_empty_yaml_has_no_profile(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ProfileValidationError):
            load_snapshot(path)


class TestLoadSettings:
    def test_defaults(self):
        assert DEFAULT_SETTINGS.program_score_threshold == 70
        assert DEFAULT_SETTINGS.max_recommendations == 15
        assert DEFAULT_SETTINGS.leo_disposal_years == 5.0
        assert DEFAULT_SETTINGS.screening.weekly_threshold == 1_000_000
        assert DEFAULT_SETTINGS.is_restricted(" ir ")
        assert not DEFAULT_SETTINGS.is_restricted("DE")

    def test_yaml_overrides(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({
            "restricted_countries": ["kp", "ir", "IR"],
            "program_score_threshold": 80,
            "screening": {"weekly_threshold": 500_000},
        }))
        settings = load_settings(path)
        assert settings.restricted_countries == ("IR", "KP")
        assert settings.program_score_threshold == 80
        assert settings.screening.weekly_threshold == 500_000
        assert settings.screening.daily_threshold == 10_000_000

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert load_settings(path) == EngineSettings()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_settings(tmp_path / "nope.yaml")

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"program_score_threshold": 150}))
        with pytest.raises(ValueError):
            load_settings(path)
