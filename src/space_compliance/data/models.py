# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core pydantic models shared by every regulatory domain.

Corpus models (:class:`Requirement`, :class:`RequirementCorpus`) are frozen
and authored once per domain.  Output models are frozen value objects so an
:class:`AssessmentResult` can be shared across threads without copying.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, ClassVar, Iterable, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    Field,
    PrivateAttr,
    SerializeAsAny,
    ValidationError,
    computed_field,
    model_validator,
)

from space_compliance.exceptions import ProfileValidationError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class RiskLevel(str, Enum):
    """Severity of a requirement or of an organization's overall exposure."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key: critical sorts first."""
        return _RISK_RANK[self]

    @property
    def color(self) -> str:
        """Terminal color for this risk level."""
        return {
            RiskLevel.CRITICAL: "bold red",
            RiskLevel.HIGH: "dark_orange",
            RiskLevel.MEDIUM: "yellow",
            RiskLevel.LOW: "green",
        }[self]


_RISK_RANK = {
    RiskLevel.CRITICAL: 0,
    RiskLevel.HIGH: 1,
    RiskLevel.MEDIUM: 2,
    RiskLevel.LOW: 3,
}


class ComplianceStatus(str, Enum):
    """Assessor-entered status of one requirement."""

    COMPLIANT = "compliant"
    PARTIAL = "partial"
    NON_COMPLIANT = "non_compliant"
    NOT_ASSESSED = "not_assessed"
    NOT_APPLICABLE = "not_applicable"

    @property
    def is_gap(self) -> bool:
        """Whether a requirement in this status produces a gap."""
        return self in (
            ComplianceStatus.PARTIAL,
            ComplianceStatus.NON_COMPLIANT,
            ComplianceStatus.NOT_ASSESSED,
        )


class Timeframe(str, Enum):
    """Target window for acting on a recommendation."""

    IMMEDIATE = "Immediate"
    DAYS_30 = "30 days"
    DAYS_90 = "90 days"
    ONGOING = "Ongoing"


# ---------------------------------------------------------------------------
# Corpus models
# ---------------------------------------------------------------------------

class PenaltyInfo(BaseModel):
    """Statutory maximum penalties for violating a requirement."""

    model_config = {"frozen": True}

    max_civil_penalty: int = Field(default=0, ge=0, description="USD per violation")
    max_criminal_penalty: int = Field(default=0, ge=0, description="USD per violation")
    max_imprisonment_years: int = Field(default=0, ge=0)
    additional_consequences: tuple[str, ...] = ()

    @property
    def has_penalty(self) -> bool:
        return (
            self.max_civil_penalty > 0
            or self.max_criminal_penalty > 0
            or self.max_imprisonment_years > 0
        )


def _always_applies(profile: Any) -> bool:
    return True


class Requirement(BaseModel):
    """One regulatory obligation in a domain corpus."""

    model_config = {"frozen": True}

    id: str = Field(..., min_length=1, description="Unique identifier within the corpus")
    title: str
    description: str = ""
    regulation: str = Field(..., description="Regulation tag, e.g. 'ITAR' or 'EAR'")
    category: str = Field(..., description="Domain category, e.g. 'REGISTRATION'")
    reference: str = Field(default="", description="Legal citation")
    risk_level: RiskLevel
    mandatory: bool = True
    applies: Callable[[Any], bool] = Field(
        default=_always_applies,
        exclude=True,
        repr=False,
        description="Pure predicate deciding applicability for a profile",
    )
    penalty: Optional[PenaltyInfo] = None
    compliance_actions: tuple[str, ...] = ()
    documentation_required: tuple[str, ...] = ()
    registration_name: Optional[str] = None
    license_types: tuple[str, ...] = ()
    related_requirements: tuple[str, ...] = ()

    def is_applicable(self, profile: Any) -> bool:
        """Evaluate the applicability predicate against *profile*."""
        return bool(self.applies(profile))


class RequirementCorpus(BaseModel):
    """Frozen, versioned set of requirements for one domain."""

    model_config = {"frozen": True}

    domain: str
    version: str
    requirements: tuple[Requirement, ...]

    _by_id: dict[str, Requirement] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> RequirementCorpus:
        seen: set[str] = set()
        for req in self.requirements:
            if req.id in seen:
                raise ValueError(f"Duplicate requirement id '{req.id}' in {self.domain} corpus")
            seen.add(req.id)
        return self

    def model_post_init(self, __context: Any) -> None:
        self._by_id = {r.id: r for r in self.requirements}

    def __len__(self) -> int:
        return len(self.requirements)

    def __contains__(self, requirement_id: object) -> bool:
        return requirement_id in self._by_id

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(r.id for r in self.requirements)

    @property
    def regulations(self) -> list[str]:
        """Regulation tags in first-seen corpus order."""
        tags: list[str] = []
        for req in self.requirements:
            if req.regulation not in tags:
                tags.append(req.regulation)
        return tags

    def get(self, requirement_id: str) -> Requirement | None:
        return self._by_id.get(requirement_id)

    def by_regulation(self, regulation: str) -> list[Requirement]:
        return [r for r in self.requirements if r.regulation == regulation]

    def by_risk_level(self, level: RiskLevel) -> list[Requirement]:
        return [r for r in self.requirements if r.risk_level == level]

    def mandatory(self) -> list[Requirement]:
        return [r for r in self.requirements if r.mandatory]


# ---------------------------------------------------------------------------
# Profile base
# ---------------------------------------------------------------------------

class Profile(BaseModel):
    """Organization profile for one domain.

    Subclasses declare their fields and list the primary classification
    fields in ``primary_fields`` (field name -> error message).  Every other
    field must have a default so partially filled profiles are accepted.
    """

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    primary_fields: ClassVar[dict[str, str]] = {}

    name: str = Field(default="", description="Display name of the organization")

    @classmethod
    def validate_profile(cls, data: Any) -> Profile:
        """Build a profile from a mapping or instance, checking primary fields.

        Raises :class:`ProfileValidationError` naming the first missing
        primary field, or wrapping pydantic's error for malformed values.
        """
        if isinstance(data, cls):
            profile = data
        elif isinstance(data, BaseModel):
            profile = cls._from_mapping(data.model_dump())
        elif isinstance(data, dict):
            cls._check_primary(data)
            profile = cls._from_mapping(data)
        else:
            raise ProfileValidationError(
                f"Profile must be a mapping or {cls.__name__}, got {type(data).__name__}"
            )
        cls._check_primary(profile.model_dump())
        return profile

    @classmethod
    def _check_primary(cls, data: dict) -> None:
        for field_name, message in cls.primary_fields.items():
            value = data.get(field_name)
            if value is None or value == "" or value == [] or value == ():
                raise ProfileValidationError(message, field=field_name)

    @classmethod
    def _from_mapping(cls, data: dict) -> Profile:
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            first = exc.errors()[0]
            loc = ".".join(str(part) for part in first["loc"])
            raise ProfileValidationError(
                f"Invalid profile field '{loc}': {first['msg']}", field=loc or None
            ) from exc


# ---------------------------------------------------------------------------
# Assessment input
# ---------------------------------------------------------------------------

class RequirementAssessment(BaseModel):
    """The assessor's recorded status for one requirement."""

    model_config = {"frozen": True}

    requirement_id: str
    status: ComplianceStatus = ComplianceStatus.NOT_ASSESSED
    notes: Optional[str] = None
    evidence_notes: Optional[str] = None
    assessed_at: Optional[datetime] = None
    target_date: Optional[date] = None
    responsible_party: Optional[str] = None


Assessments = Union[
    Iterable[RequirementAssessment],
    Mapping[str, Union[ComplianceStatus, str, RequirementAssessment]],
]


def status_index(assessments: Assessments | None) -> dict[str, ComplianceStatus]:
    """Map requirement id to status from a list or an ``{id: status}`` mapping.

    Later entries for the same id win.
    """
    if not assessments:
        return {}
    index: dict[str, ComplianceStatus] = {}
    if isinstance(assessments, Mapping):
        for req_id, value in assessments.items():
            if isinstance(value, RequirementAssessment):
                index[req_id] = value.status
            else:
                index[req_id] = ComplianceStatus(value)
        return index
    for entry in assessments:
        index[entry.requirement_id] = entry.status
    return index


# ---------------------------------------------------------------------------
# Output models
# ---------------------------------------------------------------------------

class ComplianceScore(BaseModel):
    """Risk-weighted compliance scores, all integers in 0-100."""

    model_config = {"frozen": True}

    overall: int = Field(..., ge=0, le=100)
    mandatory: int = Field(..., ge=0, le=100)
    by_regulation: dict[str, int] = Field(default_factory=dict)
    by_category: dict[str, int] = Field(default_factory=dict)
    critical: int = Field(default=0, ge=0, le=100, description="Score over critical-risk requirements")


class Gap(BaseModel):
    """An applicable requirement that is not fully met."""

    model_config = {"frozen": True}

    requirement_id: str
    title: str
    regulation: str
    category: str
    risk_level: RiskLevel
    current_status: ComplianceStatus
    description: str
    recommendation: str
    potential_penalty: str = ""
    estimated_effort: str = Field(default="weeks", description="'days', 'weeks' or 'months'")


class RiskClassification(BaseModel):
    """Overall risk level and jurisdiction tag for a profile."""

    model_config = {"frozen": True}

    overall_risk: RiskLevel
    jurisdiction: str
    reason: str = ""
    jurisdiction_reason: str = ""


class Recommendation(BaseModel):
    """One prioritized action, linked to the gaps it closes."""

    model_config = {"frozen": True}

    priority: int = Field(..., ge=1, description="1 = highest")
    title: str
    description: str
    category: str
    timeframe: Timeframe
    gap_ids: tuple[str, ...] = ()
    resources: tuple[str, ...] = ()


class RegulationStatus(BaseModel):
    """Per-regulation rollup of counts, score and derived risk."""

    model_config = {"frozen": True}

    regulation: str
    total_requirements: int = 0
    assessed: int = 0
    compliant: int = 0
    partial: int = 0
    non_compliant: int = 0
    score: int = Field(default=0, ge=0, le=100)
    risk_level: RiskLevel = RiskLevel.LOW
    gap_count: int = 0


class AssessmentResult(BaseModel):
    """Immutable output of one assessment run.

    Domain subclasses narrow ``profile`` and add typed sub-assessment fields.
    """

    model_config = {"frozen": True}

    domain: str
    corpus_version: str
    profile: SerializeAsAny[Profile]
    applicable_requirement_ids: tuple[str, ...]
    score: ComplianceScore
    gaps: tuple[Gap, ...]
    classification: RiskClassification
    recommendations: tuple[Recommendation, ...]
    regulation_statuses: tuple[RegulationStatus, ...] = ()
    required_registrations: tuple[str, ...] = ()
    required_license_types: tuple[str, ...] = ()
    evidence_by_category: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    ignored_assessment_ids: tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def gap_count(self) -> int:
        return len(self.gaps)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def critical_gap_count(self) -> int:
        return sum(1 for g in self.gaps if g.risk_level == RiskLevel.CRITICAL)
