# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the space compliance test suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from space_compliance.data.models import Requirement, RiskLevel
from space_compliance.domains import get_domain
from space_compliance.domains.base import RegulatoryDomain
from space_compliance.domains.debris.profile import DebrisProfile
from space_compliance.domains.export_control.profile import ExportControlProfile


@pytest.fixture()
def export_domain() -> RegulatoryDomain:
    return get_domain("export_control")


@pytest.fixture()
def debris_domain() -> RegulatoryDomain:
    return get_domain("debris")


@pytest.fixture()
def make_requirement() -> Callable[..., Requirement]:
    """Factory for minimal requirements used by scoring and gap tests."""

    def _make(
        req_id: str,
        risk: RiskLevel = RiskLevel.HIGH,
        regulation: str = "ITAR",
        category: str = "LICENSING",
        mandatory: bool = True,
        **kwargs: Any,
    ) -> Requirement:
        return Requirement(
            id=req_id,
            title=f"Requirement {req_id}",
            regulation=regulation,
            category=category,
            risk_level=risk,
            mandatory=mandatory,
            **kwargs,
        )

    return _make


@pytest.fixture()
def make_export_profile() -> Callable[..., ExportControlProfile]:
    """Build a validated export-control profile; company type defaults to operator."""

    def _make(**fields: Any) -> ExportControlProfile:
        data = {"company_type": ["satellite_operator"], **fields}
        return ExportControlProfile.validate_profile(data)

    return _make


@pytest.fixture()
def make_debris_profile() -> Callable[..., DebrisProfile]:
    def _make(**fields: Any) -> DebrisProfile:
        data = {"orbit_type": "LEO", **fields}
        return DebrisProfile.validate_profile(data)

    return _make


@pytest.fixture()
def registered_itar_data() -> dict[str, Any]:
    """Registered ITAR manufacturer with no foreign nationals."""
    return {
        "name": "Registered Manufacturer",
        "company_type": ["spacecraft_manufacturer"],
        "has_itar_items": True,
        "registered_with_ddtc": True,
        "has_foreign_nationals": False,
    }


@pytest.fixture()
def unregistered_supplier_data() -> dict[str, Any]:
    """Unregistered ITAR component supplier with restricted-country staff."""
    return {
        "name": "Vector Components",
        "company_type": ["component_supplier"],
        "has_itar_items": True,
        "has_foreign_nationals": True,
        "foreign_national_countries": ["CN", "IR"],
        "has_manufacturing_abroad": True,
    }


@pytest.fixture()
def ear_operator_data() -> dict[str, Any]:
    """EAR-only satellite operator."""
    return {
        "name": "Orbital Dynamics",
        "company_type": ["satellite_operator"],
        "has_ear_items": True,
    }
