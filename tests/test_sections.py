"""Section toggle resolution tests."""

from eatsafe.frameworks import BCC_CONFIG, enabled_sections, resolve_section_toggles
from eatsafe.frameworks.gcc import DM_CONFIG


class TestResolveSectionToggles:
    """Tests for resolve_section_toggles."""

    def test_defaults(self):
        """Test framework defaults apply with nothing stored."""
        toggles = resolve_section_toggles(BCC_CONFIG)
        assert list(toggles) == [s.key for s in BCC_CONFIG.sections]
        assert toggles["fridge_temps"] is True
        assert toggles["display_monitoring"] is False
        assert toggles["haccp"] is True

    def test_home_cook_defaults(self):
        """Test home cooks get the lighter defaults."""
        toggles = resolve_section_toggles(BCC_CONFIG, home_cook=True)
        assert toggles["haccp"] is False
        assert toggles["grease_trap"] is False
        # No home-cook default, so the regular default applies
        assert toggles["fridge_temps"] is True

    def test_stored_mapping_overrides(self):
        """Test stored toggles win over defaults."""
        toggles = resolve_section_toggles(
            BCC_CONFIG, {"fridge_temps": False, "transport_logs": True}
        )
        assert toggles["fridge_temps"] is False
        assert toggles["transport_logs"] is True

    def test_stored_rows(self):
        """Test toggles read as table rows are accepted."""
        rows = [
            {"section_key": "haccp", "is_enabled": False},
            {"section_key": "display_monitoring", "is_enabled": 1},
        ]
        toggles = resolve_section_toggles(BCC_CONFIG, rows, home_cook=False)
        assert toggles["haccp"] is False
        assert toggles["display_monitoring"] is True

    def test_unknown_keys_ignored(self):
        """Test toggles for sections the framework lacks are dropped."""
        toggles = resolve_section_toggles(BCC_CONFIG, {"halal_tracking": True})
        assert "halal_tracking" not in toggles
        assert "halal_tracking" in resolve_section_toggles(DM_CONFIG)

    def test_enabled_sections(self):
        """Test enabled_sections returns definitions in framework order."""
        sections = enabled_sections(BCC_CONFIG, {"fridge_temps": False})
        keys = [s.key for s in sections]
        assert "fridge_temps" not in keys
        assert "display_monitoring" not in keys
        assert keys[0] == "freezer_temps"
