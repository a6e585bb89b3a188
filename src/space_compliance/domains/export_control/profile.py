# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Organization profile for US export control (ITAR / EAR)."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field, computed_field, field_validator

from space_compliance.data.models import Profile


class CompanyType(str, Enum):
    """Business roles that drive requirement applicability."""

    SPACECRAFT_MANUFACTURER = "spacecraft_manufacturer"
    SATELLITE_OPERATOR = "satellite_operator"
    LAUNCH_PROVIDER = "launch_provider"
    COMPONENT_SUPPLIER = "component_supplier"
    SOFTWARE_DEVELOPER = "software_developer"
    TECHNOLOGY_PROVIDER = "technology_provider"
    DEFENSE_CONTRACTOR = "defense_contractor"
    RESEARCH_INSTITUTION = "research_institution"
    UNIVERSITY = "university"
    FOREIGN_SUBSIDIARY = "foreign_subsidiary"


class ExportControlProfile(Profile):
    """What an organization builds, who it employs and where it ships."""

    primary_fields: ClassVar[dict[str, str]] = {
        "company_type": "At least one company type is required",
    }

    company_type: list[CompanyType] = Field(default_factory=list)

    # Controlled items
    has_itar_items: bool = Field(default=False, description="Handles USML-listed defense articles")
    has_ear_items: bool = Field(default=False, description="Handles CCL-listed dual-use items")

    # Exposure
    has_foreign_nationals: bool = False
    foreign_national_countries: list[str] = Field(default_factory=list)
    exports_to_countries: list[str] = Field(default_factory=list)
    has_technology_transfer: bool = False
    has_defense_contracts: bool = False
    has_manufacturing_abroad: bool = False
    has_joint_ventures: bool = False
    annual_export_value: Optional[float] = Field(default=None, ge=0, description="USD per year")

    # Existing controls
    registered_with_ddtc: bool = False
    has_tcp: bool = Field(default=False, description="Technology Control Plan in place")
    has_ecl: bool = Field(default=False, description="Export compliance lead designated")
    has_compliance_program: bool = False
    voluntary_disclosure_filed: bool = False

    @field_validator("foreign_national_countries", "exports_to_countries")
    @classmethod
    def _upper_country_codes(cls, value: list[str]) -> list[str]:
        return [code.strip().upper() for code in value if code and code.strip()]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_controlled_items(self) -> bool:
        return self.has_itar_items or self.has_ear_items

    @property
    def itar_only(self) -> bool:
        return self.has_itar_items and not self.has_ear_items
