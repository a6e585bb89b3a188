# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""ITAR and EAR requirement corpus for space-sector organizations.

Penalty amounts are the inflation-adjusted statutory maxima per violation
(22 CFR § 127.10 and 15 CFR § 766.3 as adjusted for 2024).
"""

from __future__ import annotations

from space_compliance.applicability.predicates import (
    all_of,
    any_of,
    company_type_in,
    flag,
    non_empty,
)
from space_compliance.data.models import (
    PenaltyInfo,
    Requirement,
    RequirementCorpus,
    RiskLevel,
)
from space_compliance.domains.export_control.profile import CompanyType as CT

CORPUS_VERSION = "2024.2"

ITAR_MAX_CIVIL = 1_227_364
EAR_MAX_CIVIL = 353_534
MAX_CRIMINAL = 1_000_000
MAX_IMPRISONMENT_YEARS = 20


def _itar_penalty(*consequences: str) -> PenaltyInfo:
    return PenaltyInfo(
        max_civil_penalty=ITAR_MAX_CIVIL,
        max_criminal_penalty=MAX_CRIMINAL,
        max_imprisonment_years=MAX_IMPRISONMENT_YEARS,
        additional_consequences=consequences,
    )


def _ear_penalty(*consequences: str) -> PenaltyInfo:
    return PenaltyInfo(
        max_civil_penalty=EAR_MAX_CIVIL,
        max_criminal_penalty=MAX_CRIMINAL,
        max_imprisonment_years=MAX_IMPRISONMENT_YEARS,
        additional_consequences=consequences,
    )


# ---------------------------------------------------------------------------
# Applicability building blocks
# ---------------------------------------------------------------------------
ITAR = flag("has_itar_items")
EAR = flag("has_ear_items")
CONTROLLED = any_of(ITAR, EAR)
# Registered organizations keep general ITAR duties even without current items.
ITAR_SCOPE = any_of(ITAR, flag("registered_with_ddtc"))
FOREIGN_NATIONALS = flag("has_foreign_nationals")
TECH_TRANSFER = flag("has_technology_transfer")
MANUFACTURING_ABROAD = flag("has_manufacturing_abroad")
JOINT_VENTURES = flag("has_joint_ventures")
DEFENSE_CONTRACTS = flag("has_defense_contracts")
EXPORT_DESTINATIONS = non_empty("exports_to_countries")


# ---------------------------------------------------------------------------
# Requirements
# ---------------------------------------------------------------------------

_REQUIREMENTS = (
    # -- Registration and licensing ---------------------------------------
    Requirement(
        id="ITAR-REG-001",
        title="DDTC Registration Requirement",
        description=(
            "Any U.S. person who engages in the business of manufacturing, "
            "exporting, or brokering defense articles or defense services must "
            "register with the Directorate of Defense Trade Controls (DDTC)."
        ),
        regulation="ITAR",
        category="REGISTRATION",
        reference="22 CFR § 122.1",
        risk_level=RiskLevel.CRITICAL,
        applies=ITAR,
        penalty=_itar_penalty(
            "Debarment from government contracts",
            "Denial of export privileges",
            "Loss of security clearances",
            "Reputational damage",
        ),
        compliance_actions=(
            "Submit DS-2032 (Statement of Registration) through DECCS",
            "Pay registration fee (tiered based on activities)",
            "Renew annually",
            "Update within 5 days of material changes",
            "Designate empowered official",
        ),
        documentation_required=(
            "DDTC Registration Certificate",
            "Empowered Official designation letter",
            "Corporate ownership disclosure",
            "Foreign ownership/control documentation",
        ),
        registration_name="DDTC Registration (22 CFR § 122.1)",
        related_requirements=("ITAR-LIC-001", "ITAR-TAA-001"),
    ),
    Requirement(
        id="ITAR-LIC-001",
        title="DSP-5 Export License Requirement",
        description=(
            "Permanent export of unclassified defense articles requires a DSP-5 "
            "license from DDTC. This includes spacecraft, components, and "
            "technical data controlled under USML Categories IV and XV."
        ),
        regulation="ITAR",
        category="LICENSING",
        reference="22 CFR § 123.1",
        risk_level=RiskLevel.CRITICAL,
        applies=ITAR,
        penalty=_itar_penalty(
            "License denial for future applications",
            "Enhanced scrutiny on all applications",
            "Mandatory compliance program audits",
        ),
        compliance_actions=(
            "Classify item on USML",
            "Obtain required supporting documents",
            "Screen all parties against restricted lists",
            "Submit DSP-5 application via DECCS",
            "Obtain Congressional notification if required",
            "Implement provisos and conditions",
        ),
        documentation_required=(
            "DSP-5 Application",
            "Technical specifications",
            "End-use/end-user certificates",
            "Non-transfer/non-re-export assurances",
            "Purchase orders/contracts",
            "Transportation routing plan",
        ),
        license_types=("DSP_5",),
        related_requirements=("ITAR-REG-001", "ITAR-SCREEN-001"),
    ),
    Requirement(
        id="ITAR-TAA-001",
        title="Technical Assistance Agreement (TAA) Requirement",
        description=(
            "Export of technical data or provision of defense services to foreign "
            "persons requires a Technical Assistance Agreement approved by DDTC."
        ),
        regulation="ITAR",
        category="LICENSING",
        reference="22 CFR § 124.1",
        risk_level=RiskLevel.CRITICAL,
        applies=all_of(
            ITAR,
            any_of(TECH_TRANSFER, company_type_in(CT.TECHNOLOGY_PROVIDER, CT.RESEARCH_INSTITUTION)),
        ),
        penalty=_itar_penalty(
            "Termination of cooperative programs",
            "Loss of classified access",
            "Mandatory enhanced compliance measures",
        ),
        compliance_actions=(
            "Draft TAA with all required provisions",
            "Include scope limitations and end-use restrictions",
            "Specify all parties and their roles",
            "Address third-party transfers",
            "Implement Technology Control Plan",
            "Submit for DDTC approval",
        ),
        documentation_required=(
            "Technical Assistance Agreement",
            "Scope of technical data to be shared",
            "Technology Control Plan",
            "Foreign party due diligence records",
            "List of authorized personnel",
        ),
        license_types=("TAA",),
        related_requirements=("ITAR-REG-001", "ITAR-DEEMED-001", "ITAR-TCP-001"),
    ),
    Requirement(
        id="ITAR-MLA-001",
        title="Manufacturing License Agreement (MLA) Requirement",
        description=(
            "Manufacturing of USML items abroad requires an MLA approved by DDTC, "
            "including co-production and licensed manufacturing outside the "
            "United States."
        ),
        regulation="ITAR",
        category="LICENSING",
        reference="22 CFR § 124.1",
        risk_level=RiskLevel.CRITICAL,
        applies=all_of(ITAR, MANUFACTURING_ABROAD),
        penalty=_itar_penalty(
            "Seizure of unauthorized production",
            "International legal complications",
            "Loss of manufacturing capabilities",
        ),
        compliance_actions=(
            "Conduct detailed assessment of manufacturing scope",
            "Draft MLA with manufacturing provisions",
            "Include quality control requirements",
            "Specify production quantities and locations",
            "Address third-country re-exports",
        ),
        documentation_required=(
            "Manufacturing License Agreement",
            "Production facility details",
            "Quality control procedures",
            "Technology protection measures",
            "Supply chain mapping",
            "Re-export provisions",
        ),
        license_types=("MLA",),
        related_requirements=("ITAR-TAA-001", "ITAR-TCP-001"),
    ),
    Requirement(
        id="ITAR-TCP-001",
        title="Technology Control Plan (TCP) Requirement",
        description=(
            "Implementation of a Technology Control Plan to protect controlled "
            "technical data from unauthorized access, including access by "
            "foreign nationals."
        ),
        regulation="ITAR",
        category="TECHNOLOGY_CONTROL",
        reference="22 CFR § 125.4",
        risk_level=RiskLevel.HIGH,
        applies=all_of(
            ITAR,
            any_of(
                FOREIGN_NATIONALS,
                JOINT_VENTURES,
                company_type_in(CT.RESEARCH_INSTITUTION, CT.UNIVERSITY),
            ),
        ),
        penalty=_itar_penalty(
            "Deemed export violations",
            "Program termination",
            "Facility access restrictions",
        ),
        compliance_actions=(
            "Identify all controlled technical data",
            "Map data storage and access points",
            "Implement physical access controls",
            "Establish IT security controls",
            "Create personnel screening procedures",
            "Document visitor control procedures",
        ),
        documentation_required=(
            "Written Technology Control Plan",
            "Physical security protocols",
            "IT access control documentation",
            "Personnel clearance records",
            "Visitor logs",
            "Training records",
        ),
        related_requirements=("ITAR-DEEMED-001", "ITAR-TAA-001"),
    ),
    Requirement(
        id="ITAR-BROKERING-001",
        title="Brokering Registration and Licensing",
        description=(
            "Engaging in brokering activities involving defense articles or "
            "defense services requires registration and, for most transactions, "
            "prior approval from DDTC."
        ),
        regulation="ITAR",
        category="REGISTRATION",
        reference="22 CFR § 129",
        risk_level=RiskLevel.CRITICAL,
        applies=all_of(
            ITAR,
            company_type_in(CT.COMPONENT_SUPPLIER, CT.TECHNOLOGY_PROVIDER, CT.FOREIGN_SUBSIDIARY),
        ),
        penalty=_itar_penalty(
            "Criminal prosecution for undisclosed brokering",
            "Debarment from defense trade",
            "Asset forfeiture",
        ),
        compliance_actions=(
            "Determine if activities constitute brokering",
            "Register as broker with DDTC",
            "Apply for brokering approval",
            "Maintain transaction records",
        ),
        documentation_required=(
            "Broker registration",
            "Brokering approval documentation",
            "Transaction records",
            "Commission/fee agreements",
        ),
        registration_name="DDTC Broker Registration (22 CFR § 129.3)",
        related_requirements=("ITAR-REG-001",),
    ),
    Requirement(
        id="EAR-CLASS-001",
        title="Item Classification Requirement",
        description=(
            "All items subject to the EAR must be classified to determine "
            "licensing requirements, including the applicable ECCN or EAR99 status."
        ),
        regulation="EAR",
        category="CLASSIFICATION",
        reference="15 CFR § 738",
        risk_level=RiskLevel.HIGH,
        applies=CONTROLLED,
        penalty=_ear_penalty(
            "Denial of export privileges",
            "Mandatory compliance audit",
            "Enhanced licensing requirements",
        ),
        compliance_actions=(
            "Review CCL for applicable ECCN",
            "Apply ECCN order of review",
            "Document classification rationale",
            "Submit CJ request if uncertain",
            "Review periodically for regulatory changes",
        ),
        documentation_required=(
            "Product technical specifications",
            "Classification determination record",
            "ECCN assignment rationale",
            "Periodic review records",
        ),
        related_requirements=("EAR-LIC-001", "EAR-SCREEN-001"),
    ),
    Requirement(
        id="EAR-LIC-001",
        title="BIS Export License Requirement",
        description=(
            "Export of items on the CCL may require a license from BIS depending "
            "on ECCN, destination, end-user and end-use, as determined with the "
            "Commerce Country Chart."
        ),
        regulation="EAR",
        category="LICENSING",
        reference="15 CFR § 742",
        risk_level=RiskLevel.HIGH,
        applies=EAR,
        penalty=_ear_penalty(
            "Temporary denial order",
            "Export privilege revocation",
            "Enhanced compliance requirements",
        ),
        compliance_actions=(
            "Determine ECCN classification",
            "Check Commerce Country Chart",
            "Screen parties against denied/restricted lists",
            "Evaluate license exceptions",
            "Submit license application if required",
        ),
        documentation_required=(
            "BIS License Application (BIS-748P)",
            "End-user certificate",
            "Transaction value documentation",
            "Destination control statement",
            "License determination record",
        ),
        license_types=("BIS_LICENSE",),
        related_requirements=("EAR-CLASS-001", "EAR-SCREEN-001", "EAR-EXC-001"),
    ),
    Requirement(
        id="EAR-EXC-001",
        title="License Exception Eligibility Assessment",
        description=(
            "Determine whether a license exception (TMP, RPL, GOV, TSR, STA) may "
            "be used in lieu of a BIS license."
        ),
        regulation="EAR",
        category="LICENSE_EXCEPTION",
        reference="15 CFR § 740",
        risk_level=RiskLevel.MEDIUM,
        mandatory=False,
        applies=EAR,
        penalty=_ear_penalty(
            "Loss of license exception privileges",
            "Mandatory licensing for all exports",
        ),
        compliance_actions=(
            "Review all available license exceptions",
            "Verify item and destination eligibility",
            "Check end-user restrictions",
            "Document exception justification",
        ),
        documentation_required=(
            "License exception determination record",
            "STA certification (if using STA)",
            "Record of export using exception",
        ),
        license_types=("LICENSE_EXCEPTION",),
        related_requirements=("EAR-CLASS-001", "EAR-LIC-001"),
    ),
    Requirement(
        id="EAR-TECH-001",
        title="Technology and Software Export Controls",
        description=(
            "Export of spacecraft technology (9E) and software (9D) requires "
            "classification and may require a license, including releases to "
            "foreign nationals in the United States."
        ),
        regulation="EAR",
        category="TECHNOLOGY_CONTROL",
        reference="15 CFR § 772",
        risk_level=RiskLevel.HIGH,
        applies=all_of(
            EAR,
            any_of(
                TECH_TRANSFER,
                company_type_in(
                    CT.TECHNOLOGY_PROVIDER, CT.SOFTWARE_DEVELOPER,
                    CT.RESEARCH_INSTITUTION, CT.UNIVERSITY,
                ),
            ),
        ),
        penalty=_ear_penalty(
            "Research restrictions",
            "International collaboration limitations",
        ),
        compliance_actions=(
            "Classify all technology and software",
            "Identify foreign nationals with access",
            "Obtain deemed export licenses if required",
            "Document all technology transfers",
        ),
        documentation_required=(
            "Technology classification records",
            "Foreign national access records",
            "Technology control procedures",
        ),
        related_requirements=("EAR-DEEMED-001", "EAR-CLASS-001"),
    ),
    Requirement(
        id="EAR-ENCRYPTION-001",
        title="Encryption Item Controls",
        description=(
            "Items incorporating encryption require classification under "
            "Category 5 Part 2 and may require BIS notification or a license."
        ),
        regulation="EAR",
        category="CLASSIFICATION",
        reference="15 CFR § 740.17",
        risk_level=RiskLevel.MEDIUM,
        applies=all_of(
            EAR,
            company_type_in(
                CT.SPACECRAFT_MANUFACTURER, CT.SATELLITE_OPERATOR,
                CT.SOFTWARE_DEVELOPER, CT.TECHNOLOGY_PROVIDER,
            ),
        ),
        penalty=_ear_penalty("Product seizure", "Market access restrictions"),
        compliance_actions=(
            "Identify encryption functionality",
            "Classify under ECCN 5A002 or 5D002",
            "Determine mass market eligibility",
            "File annual self-classification report",
        ),
        documentation_required=(
            "Encryption classification",
            "Self-classification report",
            "Mass market eligibility analysis",
        ),
        related_requirements=("EAR-CLASS-001",),
    ),
    # -- Deemed exports ----------------------------------------------------
    Requirement(
        id="ITAR-DEEMED-001",
        title="ITAR Deemed Export - Foreign Person Access",
        description=(
            "Release of technical data to foreign persons in the United States is "
            "an export to that person's country of citizenship and requires prior "
            "authorization."
        ),
        regulation="ITAR",
        category="DEEMED_EXPORT",
        reference="22 CFR § 120.56",
        risk_level=RiskLevel.CRITICAL,
        applies=all_of(ITAR, FOREIGN_NATIONALS),
        penalty=_itar_penalty(
            "Program termination",
            "Facility access revocation",
        ),
        compliance_actions=(
            "Identify all foreign nationals in workforce",
            "Document nationality/citizenship",
            "Obtain DDTC approval before access",
            "Implement Technology Control Plan",
            "Conduct regular access audits",
        ),
        documentation_required=(
            "Foreign national employee records",
            "DDTC authorization (DSP-5 or TAA)",
            "Technology Control Plan",
            "Access control logs",
        ),
        related_requirements=("ITAR-TCP-001", "ITAR-TAA-001"),
    ),
    Requirement(
        id="EAR-DEEMED-001",
        title="EAR Deemed Export - Technology Release to Foreign Nationals",
        description=(
            "Release of EAR technology or source code to a foreign national in the "
            "United States requires a license determination for the person's most "
            "recent country of citizenship or permanent residency."
        ),
        regulation="EAR",
        category="DEEMED_EXPORT",
        reference="15 CFR § 734.13",
        risk_level=RiskLevel.HIGH,
        applies=all_of(EAR, FOREIGN_NATIONALS),
        penalty=_ear_penalty("Research program restrictions", "Personnel restrictions"),
        compliance_actions=(
            "Classify technology to be shared",
            "Identify nationality of recipients",
            "Check license requirements for country",
            "Evaluate Fundamental Research Exclusion",
        ),
        documentation_required=(
            "Technology classification",
            "Foreign national information",
            "License determination record",
            "Deemed export license (if required)",
            "Fundamental Research documentation (if applicable)",
        ),
        related_requirements=("EAR-TECH-001", "EAR-CLASS-001"),
    ),
    # -- Screening ---------------------------------------------------------
    Requirement(
        id="ITAR-SCREEN-001",
        title="ITAR Party Screening",
        description=(
            "All parties to ITAR transactions must be screened against the DDTC "
            "debarred parties list and other restricted party lists."
        ),
        regulation="ITAR",
        category="SCREENING",
        reference="22 CFR § 127.7",
        risk_level=RiskLevel.CRITICAL,
        applies=ITAR_SCOPE,
        penalty=_itar_penalty("Transaction unwinding", "License application delays"),
        compliance_actions=(
            "Screen all parties before transaction",
            "Screen against DDTC debarred list",
            "Screen against OFAC SDN list",
            "Document all screening results",
            "Re-screen for ongoing relationships",
        ),
        documentation_required=(
            "Screening results documentation",
            "Red flag resolution records",
            "Screening procedure documentation",
        ),
        related_requirements=("EAR-SCREEN-001",),
    ),
    Requirement(
        id="EAR-SCREEN-001",
        title="EAR Restricted Party Screening",
        description=(
            "All parties to EAR transactions must be screened against BIS and OFAC "
            "lists including the Entity List, Denied Persons List and Unverified List."
        ),
        regulation="EAR",
        category="SCREENING",
        reference="15 CFR § 744",
        risk_level=RiskLevel.HIGH,
        applies=any_of(CONTROLLED, EXPORT_DESTINATIONS),
        penalty=_ear_penalty("Denial of export privileges", "Transaction unwinding"),
        compliance_actions=(
            "Screen against Entity List",
            "Screen against Denied Persons List",
            "Screen against Unverified List",
            "Resolve any potential matches",
            "Implement periodic re-screening",
        ),
        documentation_required=(
            "Screening results",
            "Match resolution documentation",
            "Screening procedures",
        ),
        related_requirements=("ITAR-SCREEN-001", "EAR-END-USE-001"),
    ),
    Requirement(
        id="EAR-END-USE-001",
        title="End-Use and End-User Due Diligence",
        description=(
            "Exporters must ensure items are not diverted to prohibited end-uses "
            "(nuclear, missile, chemical/biological weapons) or end-users."
        ),
        regulation="EAR",
        category="SCREENING",
        reference="15 CFR § 744.6",
        risk_level=RiskLevel.CRITICAL,
        applies=CONTROLLED,
        penalty=_ear_penalty(
            "Criminal prosecution for willful violation",
            "Mandatory compliance programs",
        ),
        compliance_actions=(
            "Conduct end-user due diligence",
            "Confirm stated end-use is accurate",
            "Evaluate red flags",
            "Obtain end-use certificates",
        ),
        documentation_required=(
            "End-user questionnaire/certificate",
            "Company verification records",
            "Red flag evaluation",
        ),
        related_requirements=("EAR-SCREEN-001", "EAR-LIC-001"),
    ),
    # -- Jurisdiction ------------------------------------------------------
    Requirement(
        id="JURIS-001",
        title="Jurisdiction Determination - ITAR vs EAR",
        description=(
            "Determine whether each item is subject to the ITAR (USML) or the EAR "
            "(CCL/EAR99); the answer decides which regime applies."
        ),
        regulation="ITAR",
        category="CLASSIFICATION",
        reference="22 CFR § 120.11 / 15 CFR § 734.3",
        risk_level=RiskLevel.CRITICAL,
        applies=CONTROLLED,
        penalty=_itar_penalty(
            "Wrong regime means all exports are potentially unlicensed",
            "Retroactive violations",
        ),
        compliance_actions=(
            "Review USML for specific enumeration",
            "Review 600-series ECCNs",
            "Submit Commodity Jurisdiction (CJ) request if uncertain",
            "Document determination rationale",
        ),
        documentation_required=(
            "Jurisdiction determination record",
            "USML/CCL comparison analysis",
        ),
        related_requirements=("ITAR-REG-001", "EAR-CLASS-001"),
    ),
    Requirement(
        id="CJ-001",
        title="Commodity Jurisdiction (CJ) Request Process",
        description=(
            "When jurisdiction is unclear, a CJ request to DDTC determines whether "
            "an item is USML- or CCL-controlled."
        ),
        regulation="ITAR",
        category="CLASSIFICATION",
        reference="22 CFR § 120.12",
        risk_level=RiskLevel.HIGH,
        mandatory=False,
        applies=CONTROLLED,
        penalty=_itar_penalty("Export delays pending determination"),
        compliance_actions=(
            "Prepare detailed technical description",
            "Explain military vs commercial application",
            "Submit CJ request (DS-4076) to DDTC",
        ),
        documentation_required=(
            "CJ Request (Form DS-4076)",
            "Military/commercial application analysis",
            "CJ determination letter",
        ),
        related_requirements=("JURIS-001",),
    ),
    # -- Recordkeeping and disclosure --------------------------------------
    Requirement(
        id="ITAR-RECORDS-001",
        title="ITAR Record Keeping Requirements",
        description=(
            "Maintain records of all defense trade activities for 5 years from "
            "license expiration or transaction completion."
        ),
        regulation="ITAR",
        category="RECORDKEEPING",
        reference="22 CFR § 122.5",
        risk_level=RiskLevel.HIGH,
        applies=ITAR_SCOPE,
        penalty=_itar_penalty("Inability to demonstrate compliance", "Adverse audit findings"),
        compliance_actions=(
            "Implement document retention system",
            "Maintain all license documentation",
            "Preserve transaction records",
            "Establish destruction procedures",
        ),
        documentation_required=(
            "License applications and approvals",
            "Shipping documents",
            "End-user certificates",
            "Transaction communications",
        ),
        related_requirements=("EAR-RECORDS-001",),
    ),
    Requirement(
        id="EAR-RECORDS-001",
        title="EAR Record Keeping Requirements",
        description="Maintain records of all EAR transactions for 5 years from export.",
        regulation="EAR",
        category="RECORDKEEPING",
        reference="15 CFR § 762",
        risk_level=RiskLevel.MEDIUM,
        applies=CONTROLLED,
        penalty=_ear_penalty("Audit failures", "Inability to claim license exceptions"),
        compliance_actions=(
            "Implement record retention system",
            "Preserve classification records",
            "Retain screening results",
            "Document license exception use",
        ),
        documentation_required=(
            "Export/reexport records",
            "License exception records",
            "Screening documentation",
            "Classification records",
        ),
        related_requirements=("ITAR-RECORDS-001",),
    ),
    Requirement(
        id="ITAR-REPORT-001",
        title="ITAR Voluntary Disclosure",
        description=(
            "Violations of the ITAR should be voluntarily disclosed to DDTC; "
            "disclosure is a mitigating factor in enforcement."
        ),
        regulation="ITAR",
        category="DISCLOSURE",
        reference="22 CFR § 127.12",
        risk_level=RiskLevel.CRITICAL,
        mandatory=False,
        applies=ITAR_SCOPE,
        penalty=_itar_penalty(
            "Enhanced penalties without disclosure",
            "Potential criminal referral without disclosure",
        ),
        compliance_actions=(
            "Investigate potential violations promptly",
            "Submit initial notification within 60 days",
            "Implement remedial measures",
        ),
        documentation_required=(
            "Voluntary disclosure narrative",
            "Root cause analysis",
            "Remedial action plan",
        ),
        related_requirements=("EAR-REPORT-001",),
    ),
    Requirement(
        id="EAR-REPORT-001",
        title="EAR Voluntary Self-Disclosure",
        description=(
            "Violations of the EAR may be voluntarily self-disclosed to BIS Office "
            "of Export Enforcement, a significant mitigating factor."
        ),
        regulation="EAR",
        category="DISCLOSURE",
        reference="15 CFR § 764.5",
        risk_level=RiskLevel.HIGH,
        mandatory=False,
        applies=CONTROLLED,
        penalty=_ear_penalty("Loss of mitigation credit"),
        compliance_actions=(
            "Investigate potential violations",
            "Prepare VSD narrative",
            "Submit to BIS-OEE",
        ),
        documentation_required=("VSD narrative", "Corrective action plan"),
        related_requirements=("ITAR-REPORT-001",),
    ),
    # -- Program -----------------------------------------------------------
    Requirement(
        id="COMP-PROGRAM-001",
        title="Export Compliance Program",
        description=(
            "Establish and maintain an export compliance program including "
            "policies, procedures, training, auditing and corrective action."
        ),
        regulation="ITAR",
        category="PROGRAM",
        reference="22 CFR § 120.1 (implied)",
        risk_level=RiskLevel.HIGH,
        applies=any_of(ITAR_SCOPE, EAR, DEFENSE_CONTRACTS),
        penalty=_itar_penalty(
            "No compliance program is an aggravating factor",
            "Required for voluntary disclosure credit",
        ),
        compliance_actions=(
            "Designate Empowered Official/compliance officer",
            "Develop written procedures",
            "Establish screening procedures",
            "Maintain corrective action process",
        ),
        documentation_required=(
            "Written export compliance manual",
            "Organization chart showing compliance function",
            "Corrective action records",
            "Management certifications",
        ),
        related_requirements=("TRAINING-001", "AUDIT-001"),
    ),
    Requirement(
        id="TRAINING-001",
        title="Export Control Training",
        description=(
            "Provide regular export control training to all personnel involved in "
            "export activities."
        ),
        regulation="ITAR",
        category="TRAINING",
        reference="22 CFR § 120.1 (implied)",
        risk_level=RiskLevel.MEDIUM,
        applies=any_of(CONTROLLED, FOREIGN_NATIONALS, DEFENSE_CONTRACTS),
        penalty=_itar_penalty("Training gaps weigh in enforcement decisions"),
        compliance_actions=(
            "Develop training curriculum",
            "Provide initial training to new employees",
            "Conduct annual refresher training",
            "Document all training completion",
        ),
        documentation_required=(
            "Training materials",
            "Attendance records",
            "Completion certificates",
        ),
        related_requirements=("COMP-PROGRAM-001",),
    ),
    Requirement(
        id="AUDIT-001",
        title="Export Compliance Auditing",
        description="Conduct regular internal audits of export compliance procedures and transactions.",
        regulation="ITAR",
        category="PROGRAM",
        reference="22 CFR § 120.1 (implied)",
        risk_level=RiskLevel.MEDIUM,
        applies=CONTROLLED,
        penalty=_itar_penalty("Undetected violations", "Missed disclosure opportunities"),
        compliance_actions=(
            "Develop audit program",
            "Conduct annual compliance audits",
            "Test screening processes",
            "Document findings and remediation",
        ),
        documentation_required=(
            "Audit procedures",
            "Audit reports",
            "Corrective action plans",
        ),
        related_requirements=("COMP-PROGRAM-001",),
    ),
)

EXPORT_CONTROL_CORPUS = RequirementCorpus(
    domain="export_control",
    version=CORPUS_VERSION,
    requirements=_REQUIREMENTS,
)

# TAA is only needed when technical data actually moves to foreign persons.
LICENSE_GATES = {
    "TAA": TECH_TRANSFER,
    "MLA": MANUFACTURING_ABROAD,
}
