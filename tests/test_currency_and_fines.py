"""Currency formatting and fine exposure tests."""

import re

from eatsafe.currency import (
    currency_symbol,
    format_aed,
    format_aed_ar,
    format_aud,
    format_price,
    format_region_amount,
)
from eatsafe.fines import DUBAI_FINE_SCHEDULE, get_fine, get_fine_exposure
from eatsafe.models import Severity


class TestCurrency:
    """Price formatting."""

    def test_format_aed(self):
        """Test AED amounts use the latin prefix."""
        text = format_aed(1500)
        assert re.match(r"^AED\s", text)
        assert "1,500.00" in text
        assert "0.00" in format_aed(0)

    def test_format_aed_ar(self):
        """Test the Arabic form puts the symbol after the amount."""
        assert format_aed_ar(1500) == "1,500.00 د.إ"

    def test_format_aud(self):
        """Test Australian dollars."""
        assert format_aud(12.5) == "$12.50"

    def test_known_symbols(self):
        """Test symbol lookup is case-insensitive."""
        assert currency_symbol("GBP") == "£"
        assert format_price(10, "sgd") == "S$10.00"

    def test_unknown_currency(self):
        """Test unknown codes render as the upper-cased code."""
        assert format_price(10, "xyz") == "XYZ 10.00"

    def test_no_currency(self):
        """Test a missing code falls back like an unknown one."""
        assert currency_symbol("") == " "
        assert currency_symbol(None) == " "
        assert format_price(3, None) == " 3.00"

    def test_region_amounts(self):
        """Test region conventions."""
        assert format_region_amount(20, "au") == "$20.00"
        assert format_region_amount(20, "uae") == "AED 20.00"
        assert format_region_amount(20, "uk") == "£20.00"
        assert format_region_amount(20, "atlantis") == "$20.00"


class TestFines:
    """Dubai Municipality fines."""

    def test_schedule_ranges(self):
        """Test every fine has a sane range."""
        assert len(DUBAI_FINE_SCHEDULE) == 9
        for fine in DUBAI_FINE_SCHEDULE:
            assert 0 < fine.min_fine_aed <= fine.max_fine_aed

    def test_get_fine(self):
        """Test lookup by violation type."""
        fine = get_fine("temp_danger_zone")
        assert fine.severity == Severity.CRITICAL
        assert fine.max_fine_aed == 100000
        assert get_fine("parking") is None

    def test_exposure(self):
        """Test exposure sums the ranges."""
        exposure = get_fine_exposure(["no_handwash", "incomplete_logs"])
        assert exposure.min_aed == 10000
        assert exposure.max_aed == 30000
        assert exposure.closure_risk is False

    def test_exposure_closure_risk(self):
        """Test closure risk when any violation can close the venue."""
        exposure = get_fine_exposure(["no_grade_display", "pest_infestation"])
        assert exposure.closure_risk is True

    def test_exposure_ignores_unknown_and_duplicates(self):
        """Test unknown types are skipped and repeats count once."""
        exposure = get_fine_exposure(["expired_food", "expired_food", "parking"])
        assert exposure.min_aed == 10000
        assert exposure.to_dict()["violations"] == ["expired_food"]

    def test_empty(self):
        """Test no violations means no exposure."""
        exposure = get_fine_exposure([])
        assert (exposure.min_aed, exposure.max_aed, exposure.closure_risk) == (0, 0, False)
