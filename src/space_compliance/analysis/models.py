# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Pydantic models for the structural sub-assessments."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from space_compliance.data.models import RiskLevel


# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------

class DeemedExportRule(BaseModel):
    """A scenario in which releasing controlled technology is a deemed export."""

    model_config = {"frozen": True}

    id: str
    title: str
    description: str
    regulation: str
    reference: str
    risk_level: RiskLevel
    scenarios: tuple[str, ...] = ()
    exemptions: tuple[str, ...] = ()
    required_actions: tuple[str, ...] = ()


class ScreeningScope(str, Enum):
    """When a denied-party list must be checked."""

    ALL_TRANSACTIONS = "all_transactions"
    EXPORT_ONLY = "export_only"


class ScreeningList(BaseModel):
    """A government restricted-party list."""

    model_config = {"frozen": True}

    code: str
    name: str
    agency: str
    scope: ScreeningScope
    description: str = ""
    consequences: tuple[str, ...] = ()


class LicenseException(BaseModel):
    """An EAR license exception and whether the profile may rely on it."""

    model_config = {"frozen": True}

    code: str = Field(..., description="e.g. 'TMP', 'STA'")
    name: str
    description: str
    reference: str = ""
    eligibility_criteria: tuple[str, ...] = ()
    considerations: tuple[str, ...] = ()


class DocumentItem(BaseModel):
    model_config = {"frozen": True}

    name: str
    required: bool = True
    description: str = ""
    retention_period: str = ""


class DocumentationCategory(BaseModel):
    """One group of the documentation checklist."""

    model_config = {"frozen": True}

    category: str
    documents: tuple[DocumentItem, ...]

    @property
    def document_names(self) -> list[str]:
        return [d.name for d in self.documents]


# ---------------------------------------------------------------------------
# Sub-assessment results
# ---------------------------------------------------------------------------

class DeemedExportAssessment(BaseModel):
    model_config = {"frozen": True}

    has_foreign_nationals: bool
    foreign_national_countries: tuple[str, ...] = ()
    itar_risks: tuple[DeemedExportRule, ...] = ()
    ear_risks: tuple[DeemedExportRule, ...] = ()
    tcp_required: bool = False
    licenses_required: tuple[str, ...] = ()
    restricted_countries: tuple[str, ...] = Field(
        default=(), description="Foreign-national countries in the restricted set",
    )
    recommendations: tuple[str, ...] = ()


class ScreeningAssessment(BaseModel):
    model_config = {"frozen": True}

    required_lists: tuple[ScreeningList, ...]
    red_flag_procedures_required: bool
    automated_screening_required: bool
    screening_frequency: str = Field(..., description="'daily', 'weekly' or 'per_transaction'")
    restricted_destinations: tuple[str, ...] = ()

    @property
    def list_codes(self) -> list[str]:
        return [s.code for s in self.required_lists]


class TCPAssessment(BaseModel):
    """Technology Control Plan necessity and rollout priority."""

    model_config = {"frozen": True}

    tcp_required: bool
    has_existing_plan: bool
    reasons: tuple[str, ...] = ()
    required_elements: tuple[str, ...] = ()
    implementation_priority: str = Field(..., description="'immediate', 'high' or 'medium'")


class PenaltyExposure(BaseModel):
    """Statutory maxima across applicable requirements. Display only."""

    model_config = {"frozen": True}

    max_civil_per_violation: int = 0
    max_criminal_per_violation: int = 0
    max_imprisonment_years: int = 0
    additional_consequences: tuple[str, ...] = ()
    mitigating_factors: tuple[str, ...] = ()
    aggravating_factors: tuple[str, ...] = ()


class DeorbitAssessment(BaseModel):
    """End-of-life disposal feasibility for a debris profile."""

    model_config = {"frozen": True}

    orbit_type: str
    constellation_tier: str
    available_strategies: tuple[str, ...]
    declared_strategy: Optional[str] = None
    strategy_available: bool = False
    disposal_deadline_years: Optional[float] = None
    declared_timeline_years: Optional[float] = None
    meets_deadline: Optional[bool] = Field(
        default=None, description="None when no deadline applies or no timeline is declared",
    )
    notes: tuple[str, ...] = ()
