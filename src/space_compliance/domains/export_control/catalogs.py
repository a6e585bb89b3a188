# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Reference catalogs used by the export-control sub-assessors."""

from __future__ import annotations

from space_compliance.analysis.models import (
    DeemedExportRule,
    DocumentationCategory,
    DocumentItem,
    LicenseException,
    ScreeningList,
    ScreeningScope,
)
from space_compliance.data.models import RiskLevel

# ---------------------------------------------------------------------------
# Deemed export rules
# ---------------------------------------------------------------------------

DEEMED_EXPORT_RULES: tuple[DeemedExportRule, ...] = (
    DeemedExportRule(
        id="DEEMED-ITAR-001",
        title="ITAR Deemed Export - Visual Access",
        description="Visual access to defense articles by a foreign person constitutes a deemed export.",
        regulation="ITAR",
        reference="22 CFR § 120.56",
        risk_level=RiskLevel.CRITICAL,
        scenarios=(
            "Foreign national employee access to ITAR facilities",
            "Visitor tours of manufacturing areas",
            "Virtual meetings showing ITAR items",
        ),
        exemptions=("Publicly available information",),
        required_actions=(
            "Obtain DSP-5 or TAA authorization",
            "Implement physical access controls",
            "Escort visitors in controlled areas",
        ),
    ),
    DeemedExportRule(
        id="DEEMED-ITAR-002",
        title="ITAR Deemed Export - Technical Data Disclosure",
        description="Oral, written, or electronic disclosure of technical data to foreign persons is a deemed export.",
        regulation="ITAR",
        reference="22 CFR § 120.56",
        risk_level=RiskLevel.CRITICAL,
        scenarios=(
            "Technical discussions with foreign engineers",
            "Sharing design documents",
            "Training foreign personnel",
        ),
        exemptions=("Publicly available information", "General system descriptions"),
        required_actions=(
            "Obtain TAA covering disclosure scope",
            "Mark all technical data with classification",
            "Control distribution of technical documents",
        ),
    ),
    DeemedExportRule(
        id="DEEMED-EAR-001",
        title="EAR Deemed Export - Technology Release",
        description=(
            "Release of technology or source code to a foreign national is a deemed "
            "export to that person's most recent country of citizenship or permanent residency."
        ),
        regulation="EAR",
        reference="15 CFR § 734.13",
        risk_level=RiskLevel.HIGH,
        scenarios=(
            "Employment of foreign nationals in technical roles",
            "University research with foreign students",
            "Joint ventures with foreign partners",
        ),
        exemptions=(
            "Fundamental Research Exclusion (15 CFR § 734.8)",
            "Publicly available technology",
        ),
        required_actions=(
            "Determine ECCN of technology",
            "Check license requirements for country",
            "Apply for deemed export license if required",
        ),
    ),
    DeemedExportRule(
        id="DEEMED-EAR-002",
        title="EAR Deemed Export - Foreign National Categories",
        description=(
            "License requirements vary with the foreign national's country of "
            "citizenship; multiple nationalities require checking all."
        ),
        regulation="EAR",
        reference="15 CFR § 734.13",
        risk_level=RiskLevel.HIGH,
        scenarios=(
            "Hiring decisions for technical positions",
            "Temporary worker assignments",
        ),
        exemptions=("U.S. citizens", "U.S. permanent residents"),
        required_actions=(
            "Verify citizenship/residency status",
            "For multiple nationalities, assess most restrictive",
        ),
    ),
)

# ---------------------------------------------------------------------------
# Denied-party screening lists
# ---------------------------------------------------------------------------

SCREENING_LISTS: tuple[ScreeningList, ...] = (
    ScreeningList(
        code="SDN",
        name="Specially Designated Nationals and Blocked Persons List",
        agency="OFAC (Treasury Department)",
        scope=ScreeningScope.ALL_TRANSACTIONS,
        description="Parties whose assets are blocked; U.S. persons generally may not deal with them.",
        consequences=("Asset blocking", "Transaction prohibition"),
    ),
    ScreeningList(
        code="ENTITY_LIST",
        name="Entity List",
        agency="BIS (Commerce Department)",
        scope=ScreeningScope.EXPORT_ONLY,
        description="Entities subject to license requirements for most EAR items.",
        consequences=("License applications presumptively denied", "No license exceptions available"),
    ),
    ScreeningList(
        code="DPL",
        name="Denied Persons List",
        agency="BIS (Commerce Department)",
        scope=ScreeningScope.EXPORT_ONLY,
        description="Parties denied export privileges.",
        consequences=("Complete export prohibition",),
    ),
    ScreeningList(
        code="UNVERIFIED",
        name="Unverified List",
        agency="BIS (Commerce Department)",
        scope=ScreeningScope.EXPORT_ONLY,
        description="Parties whose end use BIS could not verify; UVL statement required.",
        consequences=("No license exceptions available", "Enhanced due diligence required"),
    ),
    ScreeningList(
        code="DEBARRED",
        name="ITAR Debarred Parties",
        agency="DDTC (State Department)",
        scope=ScreeningScope.EXPORT_ONLY,
        description="Persons debarred from defense trade.",
        consequences=("Prohibited from all ITAR activities",),
    ),
    ScreeningList(
        code="ISN",
        name="Nonproliferation Sanctions",
        agency="State Department",
        scope=ScreeningScope.ALL_TRANSACTIONS,
        description="Entities sanctioned under nonproliferation statutes.",
        consequences=("Prohibited transactions", "No U.S. government contracts"),
    ),
)

# ---------------------------------------------------------------------------
# EAR license exceptions (15 CFR § 740)
# ---------------------------------------------------------------------------

TMP = LicenseException(
    code="TMP",
    name="Temporary Exports",
    description="Permits temporary exports for exhibitions, demonstrations, or testing.",
    reference="15 CFR § 740.9",
    eligibility_criteria=(
        "Items must be returned to the U.S. within 1-4 years",
        "Cannot export to embargoed destinations",
        "Technology transfer must not occur",
    ),
    considerations=(
        "Useful for trade shows and demonstrations",
        "Requires written assurance from foreign consignee",
    ),
)

RPL = LicenseException(
    code="RPL",
    name="Servicing and Replacement Parts",
    description="Permits export of replacement parts for previously exported equipment.",
    reference="15 CFR § 740.10",
    eligibility_criteria=("One-for-one replacement only", "Original export was authorized"),
    considerations=("Records of original export required",),
)

GOV = LicenseException(
    code="GOV",
    name="Government and International Organizations",
    description="Permits exports to U.S. government agencies and certain international organizations.",
    reference="15 CFR § 740.11",
    eligibility_criteria=("End-user must be USG or eligible organization", "For official use only"),
    considerations=("Commonly used for government contractors", "Verify organization eligibility"),
)

TSR = LicenseException(
    code="TSR",
    name="Technology and Software under Restriction",
    description="Permits export of certain national-security-controlled technology and software.",
    reference="15 CFR § 740.6",
    eligibility_criteria=(
        "Technology must not be controlled for MT, SI, or CB reasons",
        "Destination must be in Country Group B",
        "Written assurance from consignee required",
    ),
    considerations=("Does not apply to most spacecraft technology",),
)

STA = LicenseException(
    code="STA",
    name="Strategic Trade Authorization",
    description="Permits exports of specified items to trusted destinations.",
    reference="15 CFR § 740.20",
    eligibility_criteria=(
        "Destination must be STA-eligible country",
        "Items must be STA-eligible per ECCN",
        "Consignee statement required",
    ),
    considerations=("Not available for most sensitive space items",),
)

# ---------------------------------------------------------------------------
# Documentation checklist groups
# ---------------------------------------------------------------------------

SCREENING_DOCS = DocumentationCategory(
    category="Restricted Party Screening",
    documents=(
        DocumentItem(
            name="Screening Results",
            description="Results of denied party screening for each transaction",
            retention_period="5 years from transaction",
        ),
        DocumentItem(
            name="Match Resolution Documentation",
            description="Documentation of potential match resolution",
            retention_period="5 years from resolution",
        ),
        DocumentItem(
            name="End-User Due Diligence",
            description="Know Your Customer documentation",
            retention_period="5 years from last transaction",
        ),
    ),
)

COMPLIANCE_PROGRAM_DOCS = DocumentationCategory(
    category="Compliance Program",
    documents=(
        DocumentItem(
            name="Export Compliance Manual",
            description="Written policies and procedures",
            retention_period="Current version + 5 years of prior versions",
        ),
        DocumentItem(
            name="Training Records",
            description="Attendance and completion records for all training",
            retention_period="Duration of employment + 5 years",
        ),
        DocumentItem(
            name="Audit Reports",
            description="Internal and external audit findings and responses",
            retention_period="5 years from audit",
        ),
    ),
)

TCP_DOCS = DocumentationCategory(
    category="Technology Control Plan",
    documents=(
        DocumentItem(
            name="Technology Control Plan",
            description="Written TCP approved by empowered official",
            retention_period="Duration of activities + 5 years",
        ),
        DocumentItem(
            name="Foreign National Records",
            description="Citizenship/residency documentation for all foreign nationals",
            retention_period="Duration of access + 5 years",
        ),
        DocumentItem(
            name="Access Logs",
            description="Records of foreign national access to controlled areas",
            retention_period="5 years",
        ),
        DocumentItem(
            name="Visitor Control Logs",
            description="Records of foreign visitor access",
            retention_period="5 years",
        ),
    ),
)

EAR_DOCS = DocumentationCategory(
    category="EAR Export Documentation",
    documents=(
        DocumentItem(
            name="ECCN Classification Records",
            description="Documentation of all item classifications",
            retention_period="5 years from export",
        ),
        DocumentItem(
            name="BIS License Applications & Approvals",
            description="License applications and approval letters",
            retention_period="5 years from license expiration",
        ),
        DocumentItem(
            name="License Exception Records",
            description="Documentation supporting use of license exceptions",
            retention_period="5 years from export",
        ),
        DocumentItem(
            name="Destination Control Statements",
            description="DCS on commercial invoices and shipping docs",
            retention_period="5 years from export",
        ),
    ),
)

GENERAL_PENALTY_CONSEQUENCES = (
    "Debarment from government contracts",
    "Denial of export privileges",
    "Loss of security clearances",
    "Reputational damage",
    "Civil litigation from affected parties",
)
