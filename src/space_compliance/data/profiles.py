# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Bundled sample profiles for demos and documentation.

Each sample pairs a domain name with raw profile data, exactly as a
snapshot file would carry it, so it passes through normal validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SampleProfile(BaseModel):
    """A named, ready-to-assess organization or mission profile."""

    model_config = {"frozen": True}

    key: str = Field(description="Short identifier for the profile")
    domain: str = Field(description="Regulatory domain the profile belongs to")
    name: str = Field(description="Display name of the organization or mission")
    description: str = Field(description="Human-readable description of the profile")
    data: dict[str, Any] = Field(description="Raw profile fields")


# ---------------------------------------------------------------------------
# Export control
# ---------------------------------------------------------------------------

SMALLSAT_STARTUP = SampleProfile(
    key="smallsat_startup",
    domain="export_control",
    name="Nimbus Orbital",
    description="Commercial smallsat operator with EAR-controlled payloads and a few foreign hires",
    data={
        "name": "Nimbus Orbital",
        "company_type": ["satellite_operator", "software_developer"],
        "has_ear_items": True,
        "has_foreign_nationals": True,
        "foreign_national_countries": ["DE", "IN"],
        "exports_to_countries": ["DE", "JP"],
        "annual_export_value": 2_500_000,
    },
)

DEFENSE_PRIME = SampleProfile(
    key="defense_prime",
    domain="export_control",
    name="Aegis Space Systems",
    description="Registered spacecraft manufacturer with ITAR and EAR items and a mature program",
    data={
        "name": "Aegis Space Systems",
        "company_type": ["spacecraft_manufacturer", "defense_contractor"],
        "has_itar_items": True,
        "has_ear_items": True,
        "has_defense_contracts": True,
        "has_technology_transfer": True,
        "exports_to_countries": ["GB", "AU", "JP"],
        "annual_export_value": 45_000_000,
        "registered_with_ddtc": True,
        "has_tcp": True,
        "has_ecl": True,
        "has_compliance_program": True,
    },
)

UNREGISTERED_SUPPLIER = SampleProfile(
    key="unregistered_supplier",
    domain="export_control",
    name="Vector Components",
    description="Component supplier shipping ITAR parts without DDTC registration",
    data={
        "name": "Vector Components",
        "company_type": ["component_supplier"],
        "has_itar_items": True,
        "has_foreign_nationals": True,
        "foreign_national_countries": ["CN", "IR"],
        "has_manufacturing_abroad": True,
        "annual_export_value": 800_000,
    },
)

UNIVERSITY_LAB = SampleProfile(
    key="university_lab",
    domain="export_control",
    name="Polaris University Space Lab",
    description="University research lab with international students and no listed items",
    data={
        "name": "Polaris University Space Lab",
        "company_type": ["university", "research_institution"],
        "has_foreign_nationals": True,
        "foreign_national_countries": ["CN", "BR", "KR"],
    },
)

# ---------------------------------------------------------------------------
# Debris mitigation
# ---------------------------------------------------------------------------

LEO_CONSTELLATION = SampleProfile(
    key="leo_constellation",
    domain="debris",
    name="Starweave Broadband",
    description="Large LEO broadband constellation with electric propulsion",
    data={
        "name": "Starweave Broadband",
        "orbit_type": "LEO",
        "altitude_km": 550,
        "satellite_count": 240,
        "maneuverability": "full",
        "has_propulsion": True,
        "has_passivation_capability": True,
        "planned_mission_duration_years": 7,
        "deorbit_strategy": "active_deorbit",
        "deorbit_timeline_years": 1,
        "has_debris_mitigation_plan": True,
        "has_collision_avoidance_service": True,
    },
)

GEO_COMSAT = SampleProfile(
    key="geo_comsat",
    domain="debris",
    name="Meridian GEO-3",
    description="Single geostationary communications satellite",
    data={
        "name": "Meridian GEO-3",
        "orbit_type": "GEO",
        "satellite_count": 1,
        "maneuverability": "full",
        "has_propulsion": True,
        "has_passivation_capability": True,
        "planned_mission_duration_years": 15,
        "deorbit_strategy": "graveyard_orbit",
    },
)

CUBESAT_DEMO = SampleProfile(
    key="cubesat_demo",
    domain="debris",
    name="Kestrel-1 CubeSat",
    description="Non-manoeuvrable LEO CubeSat relying on passive decay",
    data={
        "name": "Kestrel-1 CubeSat",
        "orbit_type": "LEO",
        "altitude_km": 520,
        "satellite_count": 1,
        "maneuverability": "none",
        "planned_mission_duration_years": 2,
        "deorbit_strategy": "passive_decay",
        "deorbit_timeline_years": 8,
    },
)

PROFILES: dict[str, SampleProfile] = {
    p.key: p
    for p in (
        SMALLSAT_STARTUP,
        DEFENSE_PRIME,
        UNREGISTERED_SUPPLIER,
        UNIVERSITY_LAB,
        LEO_CONSTELLATION,
        GEO_COMSAT,
        CUBESAT_DEMO,
    )
}


def get_profile(key: str) -> SampleProfile:
    """Return the sample profile for the given key.

    Raises
    ------
    KeyError
        If *key* does not match any bundled profile.
    """
    try:
        return PROFILES[key]
    except KeyError:
        available = ", ".join(sorted(PROFILES.keys()))
        raise KeyError(
            f"Unknown profile '{key}'. Available profiles: {available}"
        ) from None


def profiles_for_domain(domain: str) -> list[SampleProfile]:
    return [p for p in PROFILES.values() if p.domain == domain]
