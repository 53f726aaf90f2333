"""Temperature threshold and daily check tests."""

import pytest

from eatsafe.models import TempStatus, TempThreshold
from eatsafe.thresholds import (
    AU_TEMP_THRESHOLDS,
    UAE_TEMP_THRESHOLDS,
    au_temp_status,
    get_daily_checks,
    get_threshold,
    temp_status,
    uae_temp_status,
)


class TestTempStatus:
    """Reading classification."""

    @pytest.mark.parametrize(
        "reading,expected",
        [(4, TempStatus.PASS), (5, TempStatus.PASS), (7, TempStatus.WARNING),
         (8, TempStatus.WARNING), (10, TempStatus.FAIL)],
    )
    def test_fridge(self, reading, expected):
        """Test cold checks pass at or below the limit."""
        assert uae_temp_status("fridge_temp", reading) == expected

    @pytest.mark.parametrize(
        "reading,expected",
        [(65, TempStatus.PASS), (60, TempStatus.PASS), (58, TempStatus.WARNING),
         (50, TempStatus.FAIL)],
    )
    def test_hot_holding(self, reading, expected):
        """Test hot checks pass at or above the limit."""
        assert uae_temp_status("hot_holding", reading) == expected

    def test_freezer(self):
        """Test freezer bands."""
        assert au_temp_status("freezer_temp", -20) == TempStatus.PASS
        assert au_temp_status("freezer_temp", -16) == TempStatus.WARNING
        assert au_temp_status("freezer_temp", -10) == TempStatus.FAIL

    def test_unknown_log_type_passes(self):
        """Test log types without a threshold always pass."""
        assert uae_temp_status("mystery", 999) == TempStatus.PASS
        assert temp_status((), "fridge_temp", 50) == TempStatus.PASS

    def test_poultry_differs_between_families(self):
        """Test the UAE poultry limit is 74 where Australia's is 75."""
        assert au_temp_status("cooking_poultry", 74) == TempStatus.WARNING
        assert uae_temp_status("cooking_poultry", 74) == TempStatus.PASS
        assert get_threshold("uae", "reheating").pass_min == 74
        assert get_threshold("au", "reheating").pass_min == 75

    def test_families_cover_the_same_log_types(self):
        """Test both families define the same log types."""
        assert [t.log_type for t in AU_TEMP_THRESHOLDS] == [t.log_type for t in UAE_TEMP_THRESHOLDS]

    def test_uae_thresholds_have_arabic_labels(self):
        """Test every UAE threshold is labelled in Arabic."""
        assert all(t.label_ar for t in UAE_TEMP_THRESHOLDS)

    def test_unknown_family(self):
        """Test unknown families have no thresholds."""
        assert get_threshold("mars", "fridge_temp") is None


class TestTempThreshold:
    """Threshold record validation."""

    def test_requires_exactly_one_direction(self):
        """Test a threshold must be either cold or hot."""
        with pytest.raises(ValueError):
            TempThreshold("both", "Both", pass_max=5, pass_min=60)
        with pytest.raises(ValueError):
            TempThreshold("neither", "Neither")

    def test_no_warning_band(self):
        """Test a threshold without a warning band goes straight to fail."""
        threshold = TempThreshold("probe", "Probe", pass_max=5)
        assert threshold.is_cold_check
        assert threshold.classify(6) == TempStatus.FAIL


class TestDailyChecks:
    """Daily compliance burst filtering."""

    def _keys(self, categories):
        return {check.key for category in categories for check in category.checks}

    def test_au_categories(self):
        """Test the Australian burst has five categories."""
        categories = get_daily_checks("au")
        assert [c.key for c in categories] == [
            "temperature", "food_safety", "hygiene", "cleaning", "pest_control",
        ]

    def test_uae_includes_halal_by_default(self):
        """Test halal verification is shown by default."""
        assert "halal_cert" in self._keys(get_daily_checks("uae"))

    def test_halal_filtered_out(self):
        """Test halal checks are removed for non-halal venues."""
        keys = self._keys(get_daily_checks("uae", include_halal=False))
        assert "halal_cert" not in keys
        assert "health_cert" in keys

    def test_unknown_family_falls_back_to_au(self):
        """Test unknown families get the Australian burst."""
        assert self._keys(get_daily_checks("mars")) == self._keys(get_daily_checks("au"))

    def test_temperature_checks_reference_thresholds(self):
        """Test every temperature check has a threshold in its family."""
        for family in ("au", "uae"):
            for category in get_daily_checks(family):
                for check in category.checks:
                    if check.requires_temp:
                        assert get_threshold(family, check.log_type) is not None
