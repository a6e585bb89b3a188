# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the CLI layer using Click's CliRunner."""

from __future__ import annotations

import json
from functools import partial

import yaml
from click.testing import CliRunner

from space_compliance.assessment.engine import AssessmentEngine
from space_compliance.assessment.history import save_result
from space_compliance.cli import app as cli_app
from space_compliance.cli.app import cli

SNAPSHOT = {
    "domain": "export_control",
    "profile": {
        "name": "Orbital Dynamics",
        "company_type": ["satellite_operator"],
        "has_ear_items": True,
    },
    "assessments": {
        "EAR-CLASS-001": "compliant",
        "EAR-LIC-001": {"status": "partial", "notes": "Pending BIS review"},
        "LEGACY-999": "compliant",
    },
}


def _write_snapshot(tmp_path, data=SNAPSHOT, name="snapshot.yaml"):
    path = tmp_path / name
    path.write_text(yaml.safe_dump(data))
    return str(path)


class TestCLI:
    """Tests for CLI commands."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "space-compliance" in result.output
        assert "export_control" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_demo_default(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert "COMPLIANCE ASSESSMENT" in result.output
        assert "OVERALL SCORE" in result.output
        assert "RECOMMENDATIONS" in result.output

    def test_demo_export_details(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["demo", "-p", "unregistered_supplier"])
        assert result.exit_code == 0
        assert "CRITICAL" in result.output
        assert "DEEMED EXPORTS" in result.output
        assert "PENALTY EXPOSURE" in result.output

    def test_demo_compliant_fill(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["demo", "-p", "defense_prime", "--fill", "compliant"])
        assert result.exit_code == 0
        assert "No gaps" in result.output

    def test_demo_debris(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["demo", "-d", "debris", "-p", "cubesat_demo"])
        assert result.exit_code == 0
        assert "END-OF-LIFE DISPOSAL" in result.output
        assert "leo_reentry" in result.output

    def test_demo_no_details(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["demo", "-p", "unregistered_supplier", "--no-details"])
        assert result.exit_code == 0
        assert "DEEMED EXPORTS" not in result.output

    def test_demo_domain_mismatch(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["demo", "-d", "debris", "-p", "defense_prime"])
        assert result.exit_code == 1
        assert "belongs to the export_control domain" in result.output

    def test_profiles(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["profiles"])
        assert result.exit_code == 0
        assert "defense_prime" in result.output
        assert "cubesat_demo" in result.output

    def test_profiles_filtered(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["profiles", "-d", "debris"])
        assert result.exit_code == 0
        assert "geo_comsat" in result.output
        assert "defense_prime" not in result.output

    def test_requirements(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["requirements"])
        assert result.exit_code == 0
        assert "25 requirements" in result.output

    def test_requirements_for_profile(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["requirements", "-d", "debris", "-p", "cubesat_demo"])
        assert result.exit_code == 0
        assert "8 requirements" in result.output

    def test_assess_snapshot(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["assess", _write_snapshot(tmp_path)])
        assert result.exit_code == 0
        assert "OVERALL SCORE" in result.output
        assert "LEGACY-999" in result.output

    def test_assess_export_json(self, tmp_path):
        out = tmp_path / "result.json"
        runner = CliRunner()
        result = runner.invoke(
            cli, ["assess", _write_snapshot(tmp_path), "--export-json", str(out), "--no-details"]
        )
        assert result.exit_code == 0
        data = json.loads(out.read_text())
        assert data["domain"] == "export_control"
        assert data["ignored_assessment_ids"] == ["LEGACY-999"]
        assert data["gap_count"] == 12

    def test_assess_save(self, tmp_path, monkeypatch):
        monkeypatch.setattr(cli_app, "save_result", partial(save_result, base_dir=tmp_path))
        runner = CliRunner()
        result = runner.invoke(cli, ["assess", _write_snapshot(tmp_path), "--save"])
        assert result.exit_code == 0
        assert "Result saved to" in result.output
        assert len(list((tmp_path / "results").glob("*.json"))) == 1

    def test_assess_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["assess", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "Snapshot file not found" in result.output

    def test_assess_invalid_profile(self, tmp_path):
        runner = CliRunner()
        path = _write_snapshot(tmp_path, {"profile": {"has_itar_items": True}})
        result = runner.invoke(cli, ["assess", path])
        assert result.exit_code == 1
        assert "company type is required" in result.output

    def test_assess_missing_config(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["assess", _write_snapshot(tmp_path), "-c", str(tmp_path / "missing.yaml")]
        )
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_assess_with_config(self, tmp_path):
        config = tmp_path / "settings.yaml"
        config.write_text(yaml.safe_dump({"max_recommendations": 1}))
        out = tmp_path / "result.json"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["assess", _write_snapshot(tmp_path), "-c", str(config), "--export-json", str(out)],
        )
        assert result.exit_code == 0
        assert len(json.loads(out.read_text())["recommendations"]) == 1

    def test_history_empty(self, monkeypatch):
        monkeypatch.setattr(cli_app, "get_history", lambda name=None: [])
        runner = CliRunner()
        result = runner.invoke(cli, ["history"])
        assert result.exit_code == 0
        assert "No saved results." in result.output

    def test_compare(self, tmp_path):
        engine = AssessmentEngine("export_control")
        data = SNAPSHOT["profile"]
        before = save_result(engine.assess(data), base_dir=tmp_path / "a")
        after = save_result(
            engine.assess(data, {"EAR-CLASS-001": "compliant", "EAR-LIC-001": "compliant"}),
            base_dir=tmp_path / "b",
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["compare", str(before), str(after)])
        assert result.exit_code == 0
        assert "COMPARISON" in result.output
        assert "Overall" in result.output

    def test_verbose_flag(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["-v", "requirements", "-d", "debris"])
        assert result.exit_code == 0
