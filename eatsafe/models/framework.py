"""Compliance framework configuration models."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Seriousness of a non-compliant checklist answer."""

    MINOR = "minor"
    MAJOR = "major"
    CRITICAL = "critical"


class ScoringModel(str, Enum):
    """Algorithm family used to grade a self-assessment."""

    STAR_RATING = "star_rating"
    PERCENTAGE = "percentage"
    LETTER_GRADE = "letter_grade"


class FieldType(str, Enum):
    """Input type of an onboarding wizard field."""

    TEXT = "text"
    DATE = "date"
    BOOLEAN = "boolean"
    SELECT = "select"


@dataclass(frozen=True)
class AssessmentItem:
    """A single regulatory checklist question.

    The ``code`` is stable and is used as the key of the answer map.
    """

    code: str  # e.g. "A13", "G20"
    category: str
    text: str
    severities: tuple[Severity, ...]
    detail: str | None = None
    has_evidence: bool = False


@dataclass(frozen=True)
class AssessmentSection:
    """An ordered group of checklist items."""

    key: str
    label: str
    items: tuple[AssessmentItem, ...]


@dataclass(frozen=True)
class ScoringTier:
    """Display band: the first tier whose ``min`` the score meets wins."""

    min: int
    label: str
    color: str


@dataclass(frozen=True)
class PenaltyWeights:
    """Points deducted per non-compliance in weighted percentage scoring."""

    minor: int = 1
    major: int = 3
    critical: int = 0  # criticals cap the score instead of deducting


@dataclass(frozen=True)
class ScoringConfig:
    """How answers turn into a grade for one framework."""

    model: ScoringModel
    tiers: tuple[ScoringTier, ...]
    compute_star_rating: Callable[[Mapping[str, Any]], int] | None = None
    penalty_weights: PenaltyWeights = field(default_factory=PenaltyWeights)
    grade_scale: int = 100  # upper bound of letter-grade scores


@dataclass(frozen=True)
class SectionDefinition:
    """An operator-togglable logging section (e.g. "Fridge Temps")."""

    key: str
    label: str
    default_on: bool
    home_cook_default: bool | None = None


@dataclass(frozen=True)
class FieldOption:
    label: str
    value: str


@dataclass(frozen=True)
class ProfileField:
    """A typed form field shown by the onboarding wizard."""

    key: str
    label: str
    type: FieldType
    required: bool = False
    placeholder: str | None = None
    options: tuple[FieldOption, ...] = ()


@dataclass(frozen=True)
class WizardStep:
    key: str
    title: str
    subtitle: str
    fields: tuple[ProfileField, ...] = ()


@dataclass(frozen=True)
class TableMapping:
    """Logical entity name to physical storage collection name.

    Several frameworks share the same physical tables and differ only in
    logic, so the persistence layer must go through this mapping.
    """

    compliance_profiles: str
    section_toggles: str
    audit_self_assessments: str
    supplier_register: str
    cleaning_schedules: str
    cleaning_completions: str
    pest_control_logs: str
    equipment_calibration_logs: str
    corrective_actions: str
    daily_compliance_logs: str
    food_safety_supervisors: str
    food_handler_training: str


@dataclass(frozen=True)
class RegulatoryLabels:
    framework_name: str
    framework_short: str
    licence_label: str
    licence_field_key: str
    supervisor_role: str
    cert_body: str
    assessment_title: str
    assessment_subtitle: str
    accent_color: str


@dataclass(frozen=True)
class SupplierConfig:
    business_id_label: str  # e.g. "ABN", "Trade Licence"
    business_id_placeholder: str


@dataclass(frozen=True)
class FeatureFlags:
    has_supervisors: bool
    has_training_register: bool
    has_severity_levels: bool
    has_evidence_checks: bool
    has_star_rating: bool
    has_grading_system: bool
    has_halal_tracking: bool


@dataclass(frozen=True)
class ComplianceFrameworkConfig:
    """A fully-resolved food-safety regulatory regime.

    Examples:
    - Brisbane City Council Eat Safe (the baseline every other one derives from)
    - Dubai Municipality
    - UK Food Standards Agency
    """

    id: str  # e.g. "bcc", "dm", "fsa"
    region_id: str
    locale: str
    labels: RegulatoryLabels
    assessment_sections: tuple[AssessmentSection, ...]
    scoring: ScoringConfig
    sections: tuple[SectionDefinition, ...]
    wizard_steps: tuple[WizardStep, ...]
    tables: TableMapping
    features: FeatureFlags
    supplier: SupplierConfig
    available_tabs: tuple[str, ...]
    assessment_framework_filter: str | None = None  # shared-table discriminator

    def get_all_items(self) -> list[AssessmentItem]:
        """Flatten all assessment items across sections."""
        return [item for section in self.assessment_sections for item in section.items]

    def get_item(self, code: str) -> AssessmentItem | None:
        """Get an assessment item by code."""
        for item in self.get_all_items():
            if item.code == code:
                return item
        return None

    def get_section(self, key: str) -> SectionDefinition | None:
        """Get a togglable section definition by key."""
        for section in self.sections:
            if section.key == key:
                return section
        return None

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-ready view; scoring functions are omitted."""
        return _plain(self)


def _plain(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _plain(getattr(value, f.name))
            for f in fields(value)
            if not callable(getattr(value, f.name))
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    return value


def get_all_assessment_items(config: ComplianceFrameworkConfig) -> list[AssessmentItem]:
    """Flatten all assessment items from a framework's sections."""
    return config.get_all_items()
