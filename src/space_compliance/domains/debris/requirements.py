# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""EU Space Act debris mitigation requirements (Art. 63-73)."""

from __future__ import annotations

from space_compliance.applicability.predicates import (
    all_of,
    always,
    at_least,
    field_in,
    flag,
)
from space_compliance.data.models import Requirement, RequirementCorpus, RiskLevel
from space_compliance.domains.debris.profile import OrbitType

CORPUS_VERSION = "2025.1"
REGULATION = "EU_SPACE_ACT"

ALL_ORBITS = always()
MANEUVERABLE = flag("is_maneuverable")


def _orbits(*orbits: OrbitType):
    return field_in("orbit_type", *orbits)


_REQUIREMENTS = (
    Requirement(
        id="DEBRIS-TRACK-001",
        title="Trackability",
        description=(
            "Spacecraft must be detectable by ground-based or space-based "
            "sensors throughout its operational lifetime."
        ),
        regulation=REGULATION,
        category="TRACKABILITY",
        reference="EU Space Act Art. 63",
        risk_level=RiskLevel.CRITICAL,
        applies=ALL_ORBITS,
        compliance_actions=(
            "Register with Space Surveillance networks (EU SST, 18th SDS)",
            "Add radar reflectors if the spacecraft is smaller than 10 cm",
            "Confirm sufficient optical albedo and size for tracking",
        ),
        documentation_required=(
            "Radar cross-section analysis",
            "Tracking feasibility study",
            "Space Surveillance registration confirmation",
        ),
    ),
    Requirement(
        id="DEBRIS-CA-001",
        title="Collision Avoidance Service Subscription",
        description=(
            "Operators must subscribe to collision avoidance services and "
            "maintain capability to receive and act on conjunction warnings."
        ),
        regulation=REGULATION,
        category="COLLISION_AVOIDANCE",
        reference="EU Space Act Art. 64",
        risk_level=RiskLevel.CRITICAL,
        applies=_orbits(OrbitType.LEO, OrbitType.MEO, OrbitType.GEO),
        compliance_actions=(
            "Contract a collision avoidance service covering the entire operational phase",
            "Ensure 24/7 capability to receive conjunction alerts",
        ),
        documentation_required=(
            "CA service contract or letter of intent",
            "Provider confirmation letter",
            "Operations procedures for conjunction handling",
        ),
    ),
    Requirement(
        id="DEBRIS-MANEUVER-001",
        title="Manoeuvrability Requirements",
        description=(
            "Spacecraft in congested orbital regimes must maintain minimum "
            "manoeuvrability for collision avoidance throughout operational life."
        ),
        regulation=REGULATION,
        category="MANEUVERABILITY",
        reference="EU Space Act Art. 66",
        risk_level=RiskLevel.CRITICAL,
        applies=all_of(_orbits(OrbitType.LEO, OrbitType.MEO), MANEUVERABLE),
        compliance_actions=(
            "Reserve delta-V for collision avoidance in the propellant budget",
            "Plan for 2-4 avoidance manoeuvres per year in congested LEO",
        ),
        documentation_required=(
            "Propulsion system specifications",
            "Delta-V budget with CA allocation",
            "CA manoeuvre capability analysis",
            "Response time analysis",
        ),
    ),
    Requirement(
        id="DEBRIS-PLAN-001",
        title="Debris Mitigation Plan",
        description=(
            "Comprehensive plan covering collision avoidance procedures, "
            "end-of-life disposal strategy, fragmentation avoidance measures, "
            "and passivation procedures."
        ),
        regulation=REGULATION,
        category="PLANNING",
        reference="EU Space Act Art. 67",
        risk_level=RiskLevel.CRITICAL,
        applies=ALL_ORBITS,
        compliance_actions=(
            "Prepare a debris mitigation plan following ISO 24113",
            "Submit the plan with the authorization application",
        ),
        documentation_required=(
            "Debris Mitigation Plan document",
            "ISO 24113 compliance checklist",
        ),
    ),
    Requirement(
        id="DEBRIS-FRAG-001",
        title="Fragmentation Avoidance",
        description=(
            "Design and operational measures to prevent in-orbit break-ups, "
            "both intentional and accidental."
        ),
        regulation=REGULATION,
        category="FRAGMENTATION",
        reference="EU Space Act Art. 67(c)",
        risk_level=RiskLevel.HIGH,
        applies=_orbits(OrbitType.LEO, OrbitType.MEO, OrbitType.GEO, OrbitType.HEO),
        compliance_actions=(
            "Avoid storing energy in pressurized vessels longer than necessary",
            "Use batteries with low risk of thermal runaway",
            "Design propellant tanks with rupture mitigation",
        ),
        documentation_required=(
            "Fragmentation risk assessment",
            "Design review showing mitigation measures",
            "Battery safety analysis",
        ),
    ),
    Requirement(
        id="DEBRIS-LIGHT-001",
        title="Light & Radio Pollution Mitigation",
        description=(
            "Visual magnitude must remain at 7 or fainter throughout the "
            "operational lifetime and radio frequency interference must be minimized."
        ),
        regulation=REGULATION,
        category="POLLUTION",
        reference="EU Space Act Art. 68",
        risk_level=RiskLevel.HIGH,
        applies=all_of(_orbits(OrbitType.LEO, OrbitType.MEO), at_least("satellite_count", 10)),
        compliance_actions=(
            "Apply anti-reflective coatings or sun visors",
            "Coordinate with the astronomical community",
        ),
        documentation_required=(
            "Brightness analysis at various phase angles",
            "Mitigation measures description",
            "Coordination with astronomical community",
        ),
    ),
    Requirement(
        id="DEBRIS-CONST-001",
        title="Large Constellation Management",
        description=(
            "Constellations of 100+ satellites require comprehensive "
            "constellation-wide debris management systems."
        ),
        regulation=REGULATION,
        category="CONSTELLATION",
        reference="EU Space Act Art. 69",
        risk_level=RiskLevel.CRITICAL,
        applies=at_least("satellite_count", 100),
        compliance_actions=(
            "Automate collision avoidance decisions across the constellation",
            "Coordinate manoeuvres for deconfliction",
        ),
        documentation_required=(
            "Constellation debris management plan",
            "Automation system documentation",
            "Reliability analysis for deorbit systems",
        ),
    ),
    Requirement(
        id="DEBRIS-CONST-002",
        title="Large Constellation Disposal Requirements",
        description=(
            "Enhanced end-of-life reliability requirements for large "
            "constellations to ensure a high disposal success rate."
        ),
        regulation=REGULATION,
        category="DISPOSAL",
        reference="EU Space Act Art. 70",
        risk_level=RiskLevel.CRITICAL,
        applies=at_least("satellite_count", 100),
        compliance_actions=(
            "Demonstrate a disposal success rate above 95%",
            "Provide redundant deorbit systems",
            "Establish a decommissioning fund or insurance for failed satellites",
        ),
        documentation_required=(
            "Disposal reliability analysis",
            "Redundancy design documentation",
            "Failed satellite handling procedures",
            "Financial provisions for ADR",
        ),
        related_requirements=("DEBRIS-CONST-001",),
    ),
    Requirement(
        id="DEBRIS-EOL-LEO-001",
        title="End-of-Life Disposal (LEO)",
        description=(
            "LEO spacecraft must deorbit within 5 years of end of mission by "
            "natural decay or controlled reentry."
        ),
        regulation=REGULATION,
        category="DISPOSAL",
        reference="EU Space Act Art. 72",
        risk_level=RiskLevel.CRITICAL,
        applies=_orbits(OrbitType.LEO),
        compliance_actions=(
            "Run an orbital lifetime analysis for the end-of-mission altitude",
            "Budget propellant for the end-of-life manoeuvre",
            "Define a backup deorbit strategy",
        ),
        documentation_required=(
            "Orbital lifetime analysis",
            "Propellant budget for EOL manoeuvre",
            "Backup deorbit strategy",
            "Reentry casualty risk analysis",
        ),
    ),
    Requirement(
        id="DEBRIS-EOL-GEO-001",
        title="End-of-Life Disposal (GEO)",
        description=(
            "GEO spacecraft must transfer to a graveyard orbit at least 300 km "
            "above GEO altitude at end of mission."
        ),
        regulation=REGULATION,
        category="DISPOSAL",
        reference="EU Space Act Art. 72",
        risk_level=RiskLevel.CRITICAL,
        applies=_orbits(OrbitType.GEO),
        compliance_actions=(
            "Reserve about 11 m/s delta-V for the re-orbit manoeuvre",
            "Passivate after graveyard transfer",
        ),
        documentation_required=(
            "GEO disposal analysis",
            "Propellant budget with EOL reserve",
            "Graveyard orbit parameters",
        ),
    ),
    Requirement(
        id="DEBRIS-EOL-MEO-001",
        title="End-of-Life Disposal (MEO)",
        description=(
            "MEO spacecraft disposal depends on altitude and may require "
            "transfer to a disposal orbit or long-term stable orbit."
        ),
        regulation=REGULATION,
        category="DISPOSAL",
        reference="EU Space Act Art. 72",
        risk_level=RiskLevel.CRITICAL,
        applies=_orbits(OrbitType.MEO),
        compliance_actions=(
            "Determine the disposal region for the operational altitude",
            "Consult IADC guidelines for MEO disposal",
        ),
        documentation_required=(
            "MEO disposal analysis",
            "Long-term orbit stability study",
            "Propellant budget for disposal",
        ),
    ),
    Requirement(
        id="DEBRIS-PASS-001",
        title="Passivation Procedures",
        description=(
            "All stored energy sources must be depleted at end of life to "
            "prevent explosions and fragmentation."
        ),
        regulation=REGULATION,
        category="PASSIVATION",
        reference="EU Space Act Art. 67(d)",
        risk_level=RiskLevel.HIGH,
        applies=ALL_ORBITS,
        compliance_actions=(
            "Deplete propellant tanks by controlled venting or burn",
            "Discharge batteries to a safe level",
            "De-spin reaction wheels and CMGs",
        ),
        documentation_required=(
            "Passivation procedure document",
            "Energy source inventory",
            "Passivation sequence timeline",
        ),
    ),
    Requirement(
        id="DEBRIS-SUPPLY-001",
        title="Supply Chain Compliance",
        description=(
            "Suppliers, manufacturers, and subcontractors must comply with "
            "debris-related design requirements."
        ),
        regulation=REGULATION,
        category="SUPPLY_CHAIN",
        reference="EU Space Act Art. 73",
        risk_level=RiskLevel.MEDIUM,
        applies=ALL_ORBITS,
        compliance_actions=(
            "Include EU Space Act compliance clauses in supplier contracts",
            "Audit critical suppliers for debris-related requirements",
        ),
        documentation_required=(
            "Supplier compliance declarations",
            "Supply chain audit records",
        ),
    ),
    Requirement(
        id="DEBRIS-SERVICE-001",
        title="On-Orbit Servicing Readiness",
        description=(
            "Design features enabling future on-orbit servicing, life "
            "extension, or active debris removal."
        ),
        regulation=REGULATION,
        category="SERVICING",
        reference="EU Space Act Art. 71",
        risk_level=RiskLevel.MEDIUM,
        mandatory=False,
        applies=_orbits(OrbitType.LEO, OrbitType.MEO, OrbitType.GEO),
        compliance_actions=(
            "Assess grapple fixtures or docking interfaces",
            "Assess ADR compatibility of the design",
        ),
        documentation_required=(
            "Serviceable design features description",
            "ADR compatibility assessment",
        ),
    ),
)

DEBRIS_CORPUS = RequirementCorpus(
    domain="debris",
    version=CORPUS_VERSION,
    requirements=_REQUIREMENTS,
)
