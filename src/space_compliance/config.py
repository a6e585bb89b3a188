# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Engine settings model and YAML loader."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

# Country Group D (national security) and E (embargoed) destinations.
DEFAULT_RESTRICTED_COUNTRIES = ("CN", "RU", "IR", "KP", "SY", "CU", "BY", "VE")


class ScreeningSettings(BaseModel):
    """Annual export value thresholds (USD) driving screening obligations."""

    model_config = {"frozen": True}

    automated_threshold: int = Field(
        default=10_000_000, ge=0,
        description="Annual export value at or above which screening must be automated",
    )
    daily_threshold: int = Field(
        default=10_000_000, ge=0,
        description="Annual export value at or above which screening runs daily",
    )
    weekly_threshold: int = Field(
        default=1_000_000, ge=0,
        description="Annual export value at or above which screening runs weekly",
    )


class EngineSettings(BaseModel):
    """Tunable constants consumed by the sub-assessors and generators.

    The engine never reads settings from disk on its own; callers pass an
    instance (or rely on the defaults) so every run stays a pure function
    of its inputs.
    """

    model_config = {"frozen": True}

    screening: ScreeningSettings = Field(default_factory=ScreeningSettings)
    restricted_countries: tuple[str, ...] = Field(
        default=DEFAULT_RESTRICTED_COUNTRIES,
        description="ISO-3166 alpha-2 codes treated as restricted destinations",
    )
    program_score_threshold: int = Field(
        default=70, ge=0, le=100,
        description="Overall score below which a compliance program is recommended",
    )
    max_recommendations: int = Field(default=15, ge=1)
    leo_disposal_years: float = Field(
        default=5.0, gt=0,
        description="Maximum post-mission lifetime for LEO spacecraft",
    )

    @field_validator("restricted_countries", mode="before")
    @classmethod
    def _normalize_countries(cls, value: object) -> object:
        if isinstance(value, (list, tuple, set)):
            return tuple(sorted({str(code).strip().upper() for code in value}))
        return value

    def is_restricted(self, country_code: str) -> bool:
        """Whether *country_code* is in the restricted destination set."""
        return country_code.strip().upper() in self.restricted_countries


DEFAULT_SETTINGS = EngineSettings()


def load_settings(path: str | Path) -> EngineSettings:
    """Load :class:`EngineSettings` from a YAML file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    settings = EngineSettings.model_validate(raw)
    logger.info("Loaded engine settings from %s", config_path)
    return settings
