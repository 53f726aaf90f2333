"""Domain models for the EatSafe compliance core."""

from eatsafe.models.answer import (
    Answer,
    AnswerStatus,
    SeverityCounts,
)
from eatsafe.models.framework import (
    AssessmentItem,
    AssessmentSection,
    ComplianceFrameworkConfig,
    FeatureFlags,
    FieldOption,
    FieldType,
    PenaltyWeights,
    ProfileField,
    RegulatoryLabels,
    ScoringConfig,
    ScoringModel,
    ScoringTier,
    SectionDefinition,
    Severity,
    SupplierConfig,
    TableMapping,
    WizardStep,
    get_all_assessment_items,
)
from eatsafe.models.region import (
    Layout,
    RegionConfig,
    ResolvedVariant,
    StoreMode,
    StreamConfig,
    Units,
    VariantBrand,
    VariantEntry,
)
from eatsafe.models.threshold import (
    ComplianceCheck,
    ComplianceCheckCategory,
    TempStatus,
    TempThreshold,
)

__all__ = [
    # Framework
    "AssessmentItem",
    "AssessmentSection",
    "ComplianceFrameworkConfig",
    "FeatureFlags",
    "FieldOption",
    "FieldType",
    "PenaltyWeights",
    "ProfileField",
    "RegulatoryLabels",
    "ScoringConfig",
    "ScoringModel",
    "ScoringTier",
    "SectionDefinition",
    "Severity",
    "SupplierConfig",
    "TableMapping",
    "WizardStep",
    "get_all_assessment_items",
    # Answers
    "Answer",
    "AnswerStatus",
    "SeverityCounts",
    # Regions and variants
    "Layout",
    "RegionConfig",
    "ResolvedVariant",
    "StoreMode",
    "StreamConfig",
    "Units",
    "VariantBrand",
    "VariantEntry",
    # Thresholds
    "ComplianceCheck",
    "ComplianceCheckCategory",
    "TempStatus",
    "TempThreshold",
]
