"""Guardrails for framework configuration."""

from .config_validator import (
    FrameworkConfigValidator,
    ValidationResult,
    ensure_valid_framework,
    validate_framework_config,
)

__all__ = [
    "FrameworkConfigValidator",
    "ValidationResult",
    "ensure_valid_framework",
    "validate_framework_config",
]
