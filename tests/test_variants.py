"""App variant registry tests."""

import pytest

from eatsafe.models import Layout, StoreMode
from eatsafe.registry import (
    AU_EATSAFE_VARIANTS,
    REGIONS,
    STREAMS,
    VARIANT_REGISTRY,
    get_base_features,
    get_compliance,
    get_region,
    get_region_config,
    get_release_modules,
    get_variant,
    is_au_eatsafe_variant,
    is_compliance,
    is_home_cook,
    is_vendor,
    resolve_variant,
)


class TestVariantRegistry:
    """Tests for the variant table."""

    def test_every_variant_references_known_stream_and_region(self):
        """Test variant entries point at registered streams and regions."""
        for key, entry in VARIANT_REGISTRY.items():
            assert entry.stream in STREAMS, key
            assert entry.region in REGIONS, key

    def test_bundle_ids_unique(self):
        """Test each variant ships under its own bundle ID."""
        bundle_ids = [entry.brand.bundle_id for entry in VARIANT_REGISTRY.values()]
        assert len(bundle_ids) == len(set(bundle_ids))

    def test_unknown_variant(self):
        """Test unknown variants raise KeyError."""
        with pytest.raises(KeyError, match="Unknown app variant"):
            get_variant("nope")
        with pytest.raises(KeyError):
            resolve_variant("nope")

    def test_get_region(self):
        """Test region lookup through a variant."""
        assert get_region("gcc_uae").currency == "AED"
        assert get_region_config("atlantis") is None


class TestStreams:
    """Stream predicates and feature bundles."""

    def test_compliance_layout(self):
        """Test only EatSafe variants use the compliance shell."""
        assert is_compliance("eatsafe_sydney")
        assert is_compliance("gcc_uae")
        assert not is_compliance("chefos")

    def test_home_cook(self):
        """Test home-cook variants."""
        assert is_home_cook("homechef_uk")
        assert not is_home_cook("eatsafe_london")

    def test_vendor(self):
        """Test the vendor variant."""
        assert is_vendor("vendor")
        assert not is_vendor("chefos")

    def test_chefos_has_all_features(self):
        """Test ChefOS has no feature restriction."""
        assert get_base_features("chefos") is None
        assert resolve_variant("chefos_us").is_feature_enabled("roster")

    def test_eatsafe_bundle(self):
        """Test the EatSafe base bundle and release modules."""
        resolved = resolve_variant("eatsafe_brisbane")
        assert resolved.is_feature_enabled("scanner")
        assert not resolved.is_feature_enabled("recipes")
        assert "recipes" in get_release_modules("eatsafe_brisbane")
        assert get_release_modules("chefos") == ()


class TestResolveVariant:
    """Tests for resolve_variant and framework selection."""

    @pytest.mark.parametrize(
        "variant,code",
        [
            ("eatsafe_brisbane", "bcc"),
            ("eatsafe_sydney", "nsw_fa"),
            ("eatsafe_melbourne", "vic_dh"),
            ("eatsafe_perth", "wa_doh"),
            ("eatsafe_adelaide", "sa_health"),
            ("eatsafe_hobart", "tas_doh"),
            ("eatsafe_canberra", "act_health"),
            ("eatsafe_darwin", "nt_doh"),
            ("eatsafe_au", "bcc"),
            ("gcc_uae", "dm"),
            ("india_fssai", "fssai"),
            ("eatsafe_london", "fsa"),
            ("eatsafe_sg", "sfa"),
            ("eatsafe_ny", "fda"),
            ("chefos", "bcc"),
        ],
    )
    def test_framework_code(self, variant, code):
        """Test city builds use their state's framework."""
        assert get_compliance(variant) == code
        assert resolve_variant(variant).framework_code == code

    def test_resolved_fields(self):
        """Test the resolved variant carries stream, region and brand."""
        resolved = resolve_variant("homechef_us")
        assert resolved.stream.store_mode == StoreMode.HOME_COOK
        assert resolved.stream.layout == Layout.FULL
        assert resolved.region.id == "us"
        assert "organized" in resolved.brand.tagline

    def test_au_eatsafe_variants(self):
        """Test the Australian EatSafe set."""
        assert "eatsafe_sydney" in AU_EATSAFE_VARIANTS
        assert "eatsafe_au" in AU_EATSAFE_VARIANTS
        assert is_au_eatsafe_variant("eatsafe_darwin")
        assert not is_au_eatsafe_variant("gcc_uae")
        assert not is_au_eatsafe_variant("chefos")
