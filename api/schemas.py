"""Pydantic schemas for API request/response models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# === Enums ===
class SeverityEnum(str, Enum):
    MINOR = "minor"
    MAJOR = "major"
    CRITICAL = "critical"


class AnswerStatusEnum(str, Enum):
    COMPLIANT = "compliant"
    NON_COMPLIANT = "non_compliant"
    NOT_APPLICABLE = "not_applicable"


class ScoringModelEnum(str, Enum):
    STAR_RATING = "star_rating"
    PERCENTAGE = "percentage"
    LETTER_GRADE = "letter_grade"


class FieldTypeEnum(str, Enum):
    TEXT = "text"
    DATE = "date"
    BOOLEAN = "boolean"
    SELECT = "select"


class TempStatusEnum(str, Enum):
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


# === Framework Schemas ===
class FrameworkSummary(BaseModel):
    """Schema for a framework in the list view."""

    id: str
    region_id: str
    name: str
    model: ScoringModelEnum
    item_count: int = 0


class FrameworkListResponse(BaseModel):
    frameworks: list[FrameworkSummary]


class AssessmentItemSchema(BaseModel):
    code: str
    category: str
    text: str
    severities: list[SeverityEnum]
    detail: str | None = None
    has_evidence: bool = False


class AssessmentSectionSchema(BaseModel):
    key: str
    label: str
    items: list[AssessmentItemSchema]


class ScoringTierSchema(BaseModel):
    min: int
    label: str
    color: str


class PenaltyWeightsSchema(BaseModel):
    minor: int = 1
    major: int = 3
    critical: int = 0


class ScoringConfigSchema(BaseModel):
    model: ScoringModelEnum
    tiers: list[ScoringTierSchema]
    penalty_weights: PenaltyWeightsSchema = Field(default_factory=PenaltyWeightsSchema)
    grade_scale: int = 100


class SectionDefinitionSchema(BaseModel):
    key: str
    label: str
    default_on: bool
    home_cook_default: bool | None = None


class FieldOptionSchema(BaseModel):
    label: str
    value: str


class ProfileFieldSchema(BaseModel):
    key: str
    label: str
    type: FieldTypeEnum
    required: bool = False
    placeholder: str | None = None
    options: list[FieldOptionSchema] = Field(default_factory=list)


class WizardStepSchema(BaseModel):
    key: str
    title: str
    subtitle: str
    fields: list[ProfileFieldSchema] = Field(default_factory=list)


class FrameworkResponse(BaseModel):
    """Schema for a fully-resolved framework config."""

    id: str
    region_id: str
    locale: str
    labels: dict[str, str]
    assessment_sections: list[AssessmentSectionSchema]
    scoring: ScoringConfigSchema
    sections: list[SectionDefinitionSchema]
    wizard_steps: list[WizardStepSchema]
    tables: dict[str, str]
    features: dict[str, bool]
    supplier: dict[str, str]
    available_tabs: list[str]
    assessment_framework_filter: str | None = None


# === Scoring Schemas ===
class AnswerSchema(BaseModel):
    """Schema for one checklist answer."""

    status: AnswerStatusEnum
    severity: SeverityEnum | None = None


class ScoreRequest(BaseModel):
    """Request body for scoring a self-assessment."""

    answers: dict[str, AnswerSchema] = Field(default_factory=dict)


class SeverityCountsSchema(BaseModel):
    total: int
    compliant: int
    minor: int
    major: int
    critical: int


class ScoreResponse(BaseModel):
    framework_id: str
    model: ScoringModelEnum
    score: int
    label: str
    color: str
    counts: SeverityCountsSchema


# === Variant Schemas ===
class VariantResponse(BaseModel):
    """Schema for a resolved app variant."""

    variant: str
    stream: str
    layout: str
    store_mode: str
    region: str
    currency: str
    currency_symbol: str
    locale: str
    framework_code: str
    base_features: list[str] | None = None
    release_modules: list[str] = Field(default_factory=list)
    brand: dict[str, Any]


# === Geo / Temperature Schemas ===
class GeoDetectResponse(BaseModel):
    region: str
    jurisdiction: str
    framework_code: str


class TemperatureResponse(BaseModel):
    family: str
    log_type: str
    reading: float
    status: TempStatusEnum
    known_log_type: bool
