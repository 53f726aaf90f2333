"""Framework inheritance tests."""

import copy

import pytest

from eatsafe.errors import FrameworkDefinitionError
from eatsafe.frameworks import BCC_CONFIG, build_record, derive, derive_framework
from eatsafe.models import (
    ComplianceFrameworkConfig,
    ScoringModel,
    ScoringTier,
    Severity,
    WizardStep,
)
from eatsafe.scoring import adafsa_star_rating


class TestDerive:
    """Deep-merge semantics of derive()."""

    def test_empty_overrides_equal_base(self):
        """Test deriving with no overrides reproduces the base."""
        assert derive(BCC_CONFIG, {}) == BCC_CONFIG
        assert derive(BCC_CONFIG, None) == BCC_CONFIG

    def test_base_is_not_mutated(self):
        """Test the base record is untouched by a derive."""
        snapshot = copy.deepcopy(BCC_CONFIG)
        derive(
            BCC_CONFIG,
            {
                "id": "other",
                "labels": {"framework_short": "OTHER"},
                "scoring": {"model": "percentage", "tiers": [{"min": 0, "label": "Any", "color": "#000"}]},
            },
        )
        assert BCC_CONFIG == snapshot
        assert BCC_CONFIG.labels.framework_short == "BCC"

    def test_mapping_base_is_not_mutated(self):
        """Test plain mapping bases are copied, not modified."""
        base = {"a": 1, "nested": {"b": 2, "c": 3}}
        result = derive(base, {"nested": {"b": 20}})
        assert result == {"a": 1, "nested": {"b": 20, "c": 3}}
        assert base == {"a": 1, "nested": {"b": 2, "c": 3}}

    def test_idempotent(self):
        """Test applying the same overrides twice equals applying once."""
        overrides = {
            "id": "twice",
            "labels": {"accent_color": "#123456"},
            "features": {"has_halal_tracking": True},
        }
        once = derive(BCC_CONFIG, overrides)
        assert derive(once, overrides) == once

    def test_nested_records_merge(self):
        """Test nested records keep fields the override does not name."""
        derived = derive(BCC_CONFIG, {"labels": {"framework_short": "X"}})
        assert derived.labels.framework_short == "X"
        assert derived.labels.framework_name == BCC_CONFIG.labels.framework_name
        assert derived.labels.cert_body == BCC_CONFIG.labels.cert_body

    def test_arrays_replace_wholesale(self):
        """Test arrays replace the base array instead of blending."""
        derived = derive(BCC_CONFIG, {"available_tabs": ["overview"]})
        assert derived.available_tabs == ("overview",)

        one_step = derive(
            BCC_CONFIG,
            {"wizard_steps": [{"key": "only", "title": "Only", "subtitle": "Just one"}]},
        )
        assert len(one_step.wizard_steps) == 1
        assert isinstance(one_step.wizard_steps[0], WizardStep)

    def test_none_keeps_base_value(self):
        """Test None override values are ignored."""
        derived = derive(BCC_CONFIG, {"labels": None, "locale": None})
        assert derived.labels == BCC_CONFIG.labels
        assert derived.locale == BCC_CONFIG.locale

    def test_enum_strings_are_coerced(self):
        """Test enum-valued fields accept their string values."""
        derived = derive(BCC_CONFIG, {"scoring": {"model": "letter_grade"}})
        assert derived.scoring.model == ScoringModel.LETTER_GRADE
        # Untouched scoring fields are inherited
        assert derived.scoring.tiers == BCC_CONFIG.scoring.tiers

    def test_tiers_from_mappings(self):
        """Test tier mappings become ScoringTier records."""
        derived = derive(
            BCC_CONFIG,
            {"scoring": {"tiers": [{"min": 50, "label": "Pass", "color": "#0f0"},
                                   {"min": 0, "label": "Fail", "color": "#f00"}]}},
        )
        assert derived.scoring.tiers == (
            ScoringTier(50, "Pass", "#0f0"),
            ScoringTier(0, "Fail", "#f00"),
        )

    def test_callable_override(self):
        """Test the star function can be replaced."""
        derived = derive(BCC_CONFIG, {"scoring": {"compute_star_rating": adafsa_star_rating}})
        assert derived.scoring.compute_star_rating is adafsa_star_rating


class TestDeriveErrors:
    """Authoring mistakes are rejected with the field path."""

    def test_unknown_field(self):
        """Test unknown top-level fields raise."""
        with pytest.raises(FrameworkDefinitionError, match="unknown field"):
            derive(BCC_CONFIG, {"not_a_field": 1})

    def test_unknown_nested_field_reports_path(self):
        """Test unknown nested fields raise with a dotted path."""
        with pytest.raises(FrameworkDefinitionError) as exc_info:
            derive(BCC_CONFIG, {"labels": {"colour": "#fff"}})
        assert exc_info.value.path == "labels.colour"

    def test_scalar_for_record(self):
        """Test a scalar cannot replace a record."""
        with pytest.raises(FrameworkDefinitionError) as exc_info:
            derive(BCC_CONFIG, {"labels": "BCC"})
        assert exc_info.value.path == "labels"

    def test_wrong_scalar_type(self):
        """Test a number cannot replace a string."""
        with pytest.raises(FrameworkDefinitionError, match="expected str"):
            derive(BCC_CONFIG, {"locale": 42})

    def test_bool_is_not_a_number(self):
        """Test booleans are rejected for numeric fields."""
        with pytest.raises(FrameworkDefinitionError, match="expected number"):
            derive(BCC_CONFIG, {"scoring": {"grade_scale": True}})

    def test_invalid_enum_value(self):
        """Test unknown enum values raise."""
        with pytest.raises(FrameworkDefinitionError, match="not a valid ScoringModel"):
            derive(BCC_CONFIG, {"scoring": {"model": "coin_toss"}})

    def test_string_for_array(self):
        """Test a string cannot replace an array."""
        with pytest.raises(FrameworkDefinitionError, match="expected array"):
            derive(BCC_CONFIG, {"available_tabs": "overview"})

    def test_non_mapping_overrides(self):
        """Test overrides must be a mapping."""
        with pytest.raises(FrameworkDefinitionError, match="must be a mapping"):
            derive(BCC_CONFIG, ["id", "x"])

    def test_error_is_value_error(self):
        """Test FrameworkDefinitionError is a ValueError."""
        with pytest.raises(ValueError):
            derive(BCC_CONFIG, {"features": {"has_star_rating": "yes"}})

    def test_derive_framework_requires_id(self):
        """Test derived frameworks must name themselves."""
        with pytest.raises(FrameworkDefinitionError, match="must set an 'id'"):
            derive_framework({"locale": "en-GB"})


class TestBuildRecord:
    """Record construction from plain mappings."""

    def test_nested_construction(self):
        """Test nested mappings build nested records."""
        step = build_record(
            WizardStep,
            {
                "key": "licence",
                "title": "Licence",
                "subtitle": "Details",
                "fields": [
                    {"key": "licence_type", "label": "Type", "type": "select",
                     "options": [{"label": "State", "value": "state"}]},
                ],
            },
        )
        assert step.fields[0].options[0].value == "state"
        assert step.fields[0].type.value == "select"

    def test_missing_required_field(self):
        """Test missing required fields raise FrameworkDefinitionError."""
        with pytest.raises(FrameworkDefinitionError):
            build_record(ScoringTier, {"min": 1, "label": "x"})

    def test_severity_strings(self):
        """Test item severities coerce from strings."""
        derived = derive(
            BCC_CONFIG,
            {"assessment_sections": [{
                "key": "only",
                "label": "Only",
                "items": [{"code": "Z1", "category": "Only", "text": "Test?",
                           "severities": ["minor", "critical"]}],
            }]},
        )
        assert isinstance(derived, ComplianceFrameworkConfig)
        assert derived.get_item("Z1").severities == (Severity.MINOR, Severity.CRITICAL)
