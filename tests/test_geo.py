"""Geo classifier tests."""

import pytest

from eatsafe.geo import (
    AU_STATE_CONFIGS,
    AU_STATES,
    EMIRATE_CONFIGS,
    detect_au_state,
    detect_emirate,
    detect_framework,
    detect_jurisdiction,
    get_emirate_compliance,
    get_state_compliance,
)
from eatsafe.registry import get_framework_registry


class TestDetectAUState:
    """Australian postcode classification."""

    @pytest.mark.parametrize(
        "text,state",
        [
            ("4000", "qld"),
            ("2000", "nsw"),
            ("3000", "vic"),
            ("5000", "sa"),
            ("6000", "wa"),
            ("7000", "tas"),
            ("0800", "nt"),
            ("2600", "act"),
            ("2913", "act"),
            ("2619", "nsw"),
            ("9726", "qld"),
        ],
    )
    def test_postcodes(self, text, state):
        """Test each state's postcode ranges."""
        assert detect_au_state(text) == state

    def test_address_with_postcode(self):
        """Test the postcode is found inside a full address."""
        assert detect_au_state("1 Martin Place, Sydney NSW 2000") == "nsw"
        assert detect_au_state("Shop 3, 45 Smith St, Darwin NT 0800") == "nt"

    def test_first_postcode_wins(self):
        """Test the first 3-4 digit run is used."""
        assert detect_au_state("PO Box 3000, Brisbane 4000") == "vic"

    def test_act_checked_before_nsw(self):
        """Test ACT ranges inside the NSW allocation go to ACT."""
        assert detect_au_state("Canberra ACT 2601") == "act"

    @pytest.mark.parametrize("text", ["", "Brisbane", "postcode 12345", None, 4000])
    def test_falls_back_to_qld(self, text):
        """Test unmatched or non-string input falls back to Queensland."""
        assert detect_au_state(text) == "qld"

    @pytest.mark.parametrize("text", ["٢٦٠٠", "２０００", "Sydney ３０００"])
    def test_non_ascii_digits_are_not_postcodes(self, text):
        """Test only ASCII digits form a postcode."""
        assert detect_au_state(text) == "qld"

    def test_ascii_postcode_next_to_non_ascii_text(self):
        """Test an ASCII postcode is still found in mixed-script text."""
        assert detect_au_state("سيدني 2000") == "nsw"

    def test_state_compliance(self):
        """Test state to framework mapping."""
        assert get_state_compliance("qld") == "bcc"
        assert get_state_compliance("nsw") == "nsw_fa"
        assert get_state_compliance("vic") == "vic_dh"
        assert get_state_compliance("mars") == "bcc"

    def test_state_configs(self):
        """Test every state has metadata pointing at its framework."""
        assert set(AU_STATE_CONFIGS) == set(AU_STATES)
        for state, config in AU_STATE_CONFIGS.items():
            assert config.compliance_framework == get_state_compliance(state)
            assert config.currency == "AUD"


class TestDetectEmirate:
    """UAE address classification."""

    @pytest.mark.parametrize(
        "text,emirate",
        [
            ("Business Bay, Dubai", "dubai"),
            ("Yas Island, Abu Dhabi", "abu_dhabi"),
            ("Al Majaz, Sharjah", "sharjah"),
            ("Random city", "dubai"),
        ],
    )
    def test_addresses(self, text, emirate):
        """Test emirate detection for typical addresses."""
        assert detect_emirate(text) == emirate

    def test_district_without_emirate_name(self):
        """Test district names alone are enough."""
        assert detect_emirate("Villa 12, Khalifa City") == "abu_dhabi"
        assert detect_emirate("Muwaileh Commercial") == "sharjah"
        assert detect_emirate("Shop 4, Deira") == "dubai"

    def test_longest_district_wins(self):
        """Test a longer district name beats a shorter one it contains."""
        assert detect_emirate("Al Nahda") == "dubai"
        assert detect_emirate("Al Nahda Sharjah") == "sharjah"

    def test_postal_prefix(self):
        """Test postal prefixes match at the start of the text."""
        assert detect_emirate("AUH-12345") == "abu_dhabi"
        assert detect_emirate("shj 001") == "sharjah"

    def test_case_and_whitespace(self):
        """Test matching ignores case and surrounding whitespace."""
        assert detect_emirate("   YAS ISLAND  ") == "abu_dhabi"

    @pytest.mark.parametrize("text", ["", "   ", None, 42])
    def test_falls_back_to_dubai(self, text):
        """Test empty or non-string input falls back to Dubai."""
        assert detect_emirate(text) == "dubai"

    def test_emirate_compliance(self):
        """Test emirate to framework mapping."""
        assert get_emirate_compliance("dubai") == "dm"
        assert get_emirate_compliance("abu_dhabi") == "adafsa"
        assert get_emirate_compliance("sharjah") == "sm_sharjah"
        assert get_emirate_compliance("ajman") == "dm"

    def test_emirate_configs(self):
        """Test emirate metadata."""
        assert EMIRATE_CONFIGS["abu_dhabi"].compliance_framework == "adafsa"
        assert all(c.vat_rate == 5 for c in EMIRATE_CONFIGS.values())
        assert EMIRATE_CONFIGS["dubai"].name_ar == "دبي"


class TestDetectFramework:
    """Address to framework composition."""

    def test_au(self):
        """Test an Australian address resolves to its state framework."""
        assert detect_jurisdiction("Melbourne VIC 3000", "au") == ("vic", "vic_dh")

    def test_uae(self):
        """Test a UAE address resolves to its emirate framework."""
        assert detect_framework("Yas Island", "uae") == "adafsa"

    def test_other_regions_use_default(self):
        """Test regions without sub-national regimes use the region default."""
        assert detect_jurisdiction("London SW1A 1AA", "uk") == ("uk", "fsa")
        assert detect_framework("Mumbai", "in") == "fssai"

    def test_unknown_region(self):
        """Test unknown regions fall back to the baseline."""
        assert detect_framework("anywhere", "atlantis") == "bcc"

    @pytest.mark.parametrize(
        "text,region",
        [
            ("Sydney NSW 2000", "au"),
            ("Melbourne VIC 3000", "au"),
            ("Adelaide SA 5000", "au"),
            ("Perth WA 6000", "au"),
            ("Hobart TAS 7000", "au"),
            ("Canberra ACT 2600", "au"),
            ("Darwin NT 0800", "au"),
            ("Yas Island", "uae"),
            ("Al Majaz", "uae"),
        ],
    )
    def test_detected_jurisdictions_have_dedicated_frameworks(self, text, region):
        """Test detection never silently lands on the baseline."""
        code = detect_framework(text, region)
        config = get_framework_registry().get_framework_config(code)
        assert config.id == code
        assert config.id != "bcc"

    def test_queensland_is_the_baseline(self):
        """Test Queensland's dedicated framework is the baseline itself."""
        code = detect_framework("Brisbane QLD 4000", "au")
        assert get_framework_registry().get_framework_config(code).id == "bcc"
