# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Recommendation template definitions.

Each template carries a static title, a description template string
with ``{placeholder}`` fields, and metadata used for grouping and
display (category, timeframe, resources).
"""

from __future__ import annotations

from dataclasses import dataclass

from space_compliance.data.models import Timeframe


@dataclass(frozen=True)
class RecommendationTemplate:
    """Immutable template for a single recommendation type."""

    title: str
    description_template: str
    category: str
    timeframe: Timeframe
    resources: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Export control (ITAR / EAR)
# ---------------------------------------------------------------------------

DDTC_REGISTRATION = RecommendationTemplate(
    title="Register with DDTC Immediately",
    description_template=(
        "ITAR requires registration with the Directorate of Defense Trade "
        "Controls (DDTC) before engaging in any defense trade activities. "
        "Operating without registration is a serious violation."
    ),
    category="registration",
    timeframe=Timeframe.IMMEDIATE,
    resources=(
        "DDTC Registration Portal: https://www.pmddtc.state.gov",
        "22 CFR § 122.1 - Registration Requirements",
    ),
)

TECHNOLOGY_CONTROL_PLAN = RecommendationTemplate(
    title="Implement Technology Control Plan (TCP)",
    description_template=(
        "{foreign_national_summary} Without a TCP, releases of controlled "
        "technology to foreign persons may constitute unauthorized deemed exports."
    ),
    category="tcp",
    timeframe=Timeframe.IMMEDIATE,
    resources=(
        "22 CFR § 125.4 - Technical Data Exports",
        "15 CFR § 734.13 - Deemed Exports",
        "DDTC Guidelines on TCPs",
    ),
)

RESTRICTED_PARTY_SCREENING = RecommendationTemplate(
    title="Implement Automated Restricted Party Screening",
    description_template=(
        "{gap_count} screening gap(s) identified. All export transactions "
        "require screening against government restricted party lists "
        "including SDN, Entity List, DPL, and Debarred Parties."
    ),
    category="screening",
    timeframe=Timeframe.DAYS_30,
    resources=(
        "BIS Consolidated Screening List",
        "OFAC Sanctions List Search",
        "DDTC Debarred Parties List",
    ),
)

EXPORT_LICENSES = RecommendationTemplate(
    title="Obtain Required Export Licenses",
    description_template=(
        "{gap_count} licensing gap(s) identified. Review and obtain required "
        "DDTC and/or BIS licenses before any controlled exports."
    ),
    category="licensing",
    timeframe=Timeframe.DAYS_30,
    resources=(
        "DDTC DECCS Licensing Portal",
        "BIS SNAP-R License Application System",
    ),
)

COMPLIANCE_PROGRAM = RecommendationTemplate(
    title="Establish Comprehensive Export Compliance Program",
    description_template=(
        "Overall compliance score is {score}%. A strong compliance program "
        "is a mitigating factor in enforcement actions. Include policies, "
        "procedures, training, auditing, and corrective action processes."
    ),
    category="documentation",
    timeframe=Timeframe.DAYS_90,
    resources=("BIS ECP Guidelines", "DDTC Compliance Program Guidelines"),
)

EXPORT_TRAINING = RecommendationTemplate(
    title="Conduct Export Control Training",
    description_template=(
        "Provide initial and annual refresher training to all personnel "
        "involved in export activities."
    ),
    category="training",
    timeframe=Timeframe.DAYS_90,
)

INTERNAL_AUDIT = RecommendationTemplate(
    title="Conduct Internal Compliance Audit",
    description_template=(
        "Perform a comprehensive audit of export activities, including "
        "sample transaction reviews and process evaluations."
    ),
    category="audit",
    timeframe=Timeframe.ONGOING,
)

# ---------------------------------------------------------------------------
# Debris mitigation (EU Space Act)
# ---------------------------------------------------------------------------

DEBRIS_MITIGATION_PLAN = RecommendationTemplate(
    title="Prepare a Debris Mitigation Plan",
    description_template=(
        "A documented debris mitigation plan is required for authorization. "
        "Cover collision avoidance, passivation and end-of-life disposal "
        "for all {satellite_count} spacecraft."
    ),
    category="planning",
    timeframe=Timeframe.IMMEDIATE,
    resources=("EU Space Act Art. 67", "ISO 24113:2023 Space debris mitigation requirements"),
)

COLLISION_AVOIDANCE = RecommendationTemplate(
    title="Subscribe to a Collision Avoidance Service",
    description_template=(
        "{orbit_type} operations require conjunction screening. Subscribe to "
        "an EU SST or equivalent collision avoidance service."
    ),
    category="collision_avoidance",
    timeframe=Timeframe.DAYS_30,
    resources=("EU Space Surveillance and Tracking (EU SST) service portal",),
)

DISPOSAL_STRATEGY = RecommendationTemplate(
    title="Define a Compliant End-of-Life Disposal Strategy",
    description_template=(
        "{gap_count} disposal gap(s) identified. Select a disposal strategy "
        "available for {orbit_type} and demonstrate it meets the applicable "
        "disposal deadline."
    ),
    category="disposal",
    timeframe=Timeframe.DAYS_90,
    resources=("EU Space Act Art. 72", "IADC Space Debris Mitigation Guidelines"),
)

PASSIVATION = RecommendationTemplate(
    title="Implement End-of-Life Passivation",
    description_template=(
        "Deplete residual propellant, discharge batteries and safe "
        "pressure vessels at end of life to prevent fragmentation."
    ),
    category="passivation",
    timeframe=Timeframe.DAYS_90,
    resources=("EU Space Act Art. 70",),
)

SURVEILLANCE_REGISTRATION = RecommendationTemplate(
    title="Maintain Trackability and Surveillance Registration",
    description_template=(
        "Keep all spacecraft registered with space surveillance networks "
        "and share ephemerides throughout the mission."
    ),
    category="trackability",
    timeframe=Timeframe.ONGOING,
)
