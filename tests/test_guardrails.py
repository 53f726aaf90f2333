"""Framework config validation tests."""

import pytest

from eatsafe.errors import FrameworkDefinitionError
from eatsafe.frameworks import BCC_CONFIG, BUILTIN_FRAMEWORKS, derive
from eatsafe.guardrails import (
    FrameworkConfigValidator,
    ensure_valid_framework,
    validate_framework_config,
)


def _item(code, severities=("minor",)):
    return {"code": code, "category": "Test", "text": f"{code}?", "severities": list(severities)}


class TestFrameworkConfigValidator:
    """Tests for FrameworkConfigValidator."""

    @pytest.mark.parametrize("config", BUILTIN_FRAMEWORKS, ids=lambda c: c.id)
    def test_builtin_frameworks_are_valid(self, config):
        """Test every built-in framework passes validation."""
        result = validate_framework_config(config)
        assert result.is_valid, result.errors

    def test_empty_checklist(self):
        """Test a framework without assessment items is invalid."""
        config = derive(BCC_CONFIG, {"assessment_sections": []})
        result = validate_framework_config(config)
        assert not result.is_valid
        assert "Assessment checklist is empty" in result.errors

    def test_duplicate_item_codes(self):
        """Test item codes must be unique across sections."""
        config = derive(
            BCC_CONFIG,
            {"assessment_sections": [
                {"key": "a", "label": "A", "items": [_item("X1")]},
                {"key": "b", "label": "B", "items": [_item("X1")]},
            ]},
        )
        result = validate_framework_config(config)
        assert "Duplicate assessment item code 'X1'" in result.errors

    def test_item_without_severities(self):
        """Test every item must declare at least one severity."""
        config = derive(
            BCC_CONFIG,
            {"assessment_sections": [{"key": "a", "label": "A", "items": [_item("X1", ())]}]},
        )
        result = validate_framework_config(config)
        assert "Item 'X1' has no severities" in result.errors

    def test_empty_section_is_a_warning(self):
        """Test an empty section only warns."""
        config = derive(
            BCC_CONFIG,
            {"assessment_sections": [
                {"key": "a", "label": "A", "items": [_item("X1")]},
                {"key": "b", "label": "B", "items": []},
            ]},
        )
        result = validate_framework_config(config)
        assert result.is_valid
        assert any("'b'" in w for w in result.warnings)

    def test_empty_tiers(self):
        """Test scoring needs at least one tier."""
        config = derive(BCC_CONFIG, {"scoring": {"tiers": []}})
        result = validate_framework_config(config)
        assert not result.is_valid

    def test_unsorted_tiers(self):
        """Test tiers must run from best to worst."""
        config = derive(
            BCC_CONFIG,
            {"scoring": {"tiers": [
                {"min": 0, "label": "Low", "color": "#f00"},
                {"min": 5, "label": "High", "color": "#0f0"},
            ]}},
        )
        result = validate_framework_config(config)
        assert "Scoring tiers must be sorted by descending min" in result.errors

    def test_select_without_options(self):
        """Test select fields must offer options."""
        config = derive(
            BCC_CONFIG,
            {"wizard_steps": [{
                "key": "only",
                "title": "Only",
                "subtitle": "Only step",
                "fields": [{"key": "kind", "label": "Kind", "type": "select"}],
            }]},
        )
        result = validate_framework_config(config)
        assert "Select field 'only.kind' has no options" in result.errors

    def test_wizard_optional(self):
        """Test the wizard requirement can be relaxed."""
        config = derive(BCC_CONFIG, {"wizard_steps": []})
        assert not validate_framework_config(config).is_valid
        assert FrameworkConfigValidator(require_wizard=False).validate(config).is_valid


class TestEnsureValidFramework:
    """Tests for ensure_valid_framework."""

    def test_valid_config_returned(self):
        """Test valid configs pass through unchanged."""
        assert ensure_valid_framework(BCC_CONFIG) is BCC_CONFIG

    def test_invalid_config_raises_with_all_errors(self):
        """Test every error is carried on the exception."""
        config = derive(BCC_CONFIG, {"id": "broken", "assessment_sections": [], "wizard_steps": []})
        with pytest.raises(FrameworkDefinitionError) as exc_info:
            ensure_valid_framework(config)
        assert exc_info.value.path == "broken"
        assert len(exc_info.value.errors) == 2
