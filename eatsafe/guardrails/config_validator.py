"""Structural validation for framework configurations."""

from dataclasses import dataclass

from eatsafe.errors import FrameworkDefinitionError
from eatsafe.models import ComplianceFrameworkConfig, FieldType, ScoringModel


@dataclass
class ValidationResult:
    """Result of validation."""

    is_valid: bool
    errors: list[str]
    warnings: list[str]

    @classmethod
    def valid(cls, warnings: list[str] | None = None) -> "ValidationResult":
        """Create a valid result."""
        return cls(is_valid=True, errors=[], warnings=warnings or [])

    @classmethod
    def invalid(cls, errors: list[str], warnings: list[str] | None = None) -> "ValidationResult":
        """Create an invalid result."""
        return cls(is_valid=False, errors=errors, warnings=warnings or [])


class FrameworkConfigValidator:
    """Validates that a framework config is complete enough to serve."""

    def __init__(self, require_wizard: bool = True):
        """Initialize the validator.

        Args:
            require_wizard: Whether an empty onboarding wizard is an error.
        """
        self.require_wizard = require_wizard

    def validate(self, config: ComplianceFrameworkConfig) -> ValidationResult:
        """Validate a single framework config.

        Args:
            config: The config to validate.

        Returns:
            ValidationResult with any errors or warnings.
        """
        errors = []
        warnings = []

        if not config.id:
            errors.append("Framework ID is required")
        if not config.region_id:
            errors.append("Region ID is required")

        # Checklist
        items = config.get_all_items()
        if not config.assessment_sections or not items:
            errors.append("Assessment checklist is empty")

        seen: set[str] = set()
        for section in config.assessment_sections:
            if not section.items:
                warnings.append(f"Assessment section '{section.key}' has no items")
            for item in section.items:
                if item.code in seen:
                    errors.append(f"Duplicate assessment item code '{item.code}'")
                seen.add(item.code)
                if not item.severities:
                    errors.append(f"Item '{item.code}' has no severities")

        # Scoring
        tiers = config.scoring.tiers
        if not tiers:
            errors.append(f"Scoring model '{config.scoring.model.value}' has no tiers")
        else:
            mins = [tier.min for tier in tiers]
            if mins != sorted(mins, reverse=True):
                errors.append("Scoring tiers must be sorted by descending min")
            if len(set(mins)) != len(mins):
                errors.append("Scoring tiers have duplicate min values")
        if config.scoring.model == ScoringModel.LETTER_GRADE and config.scoring.grade_scale <= 0:
            errors.append("Letter-grade scale must be positive")
        if config.scoring.model == ScoringModel.STAR_RATING and config.scoring.compute_star_rating is None:
            warnings.append("Star model has no compute function; the Eat Safe cascade applies")

        # Wizard
        if self.require_wizard and not config.wizard_steps:
            errors.append("Onboarding wizard has no steps")
        step_keys = [step.key for step in config.wizard_steps]
        if len(set(step_keys)) != len(step_keys):
            errors.append("Onboarding wizard has duplicate step keys")
        for step in config.wizard_steps:
            for field in step.fields:
                if field.type == FieldType.SELECT and not field.options:
                    errors.append(f"Select field '{step.key}.{field.key}' has no options")

        # Sections
        section_keys = [s.key for s in config.sections]
        if len(set(section_keys)) != len(section_keys):
            errors.append("Section toggles have duplicate keys")

        if errors:
            return ValidationResult.invalid(errors, warnings)
        return ValidationResult.valid(warnings)


def validate_framework_config(config: ComplianceFrameworkConfig) -> ValidationResult:
    """Validate a framework config with default settings."""
    return FrameworkConfigValidator().validate(config)


def ensure_valid_framework(config: ComplianceFrameworkConfig) -> ComplianceFrameworkConfig:
    """Return ``config`` unchanged, or raise if it fails validation.

    Raises:
        FrameworkDefinitionError: Listing every validation error.
    """
    result = validate_framework_config(config)
    if not result.is_valid:
        raise FrameworkDefinitionError(
            "; ".join(result.errors),
            path=config.id or None,
            errors=result.errors,
        )
    return config
