"""Deployment variant registry and resolver.

A variant is a deployable product: a stream (feature bundle and layout)
joined with a region (currency, units, default framework) and a brand.
Australian city builds also pin a state, which selects the state's
framework instead of the region default.
"""

from __future__ import annotations

from eatsafe.geo.au import get_state_compliance
from eatsafe.models import (
    Layout,
    RegionConfig,
    ResolvedVariant,
    StoreMode,
    StreamConfig,
    VariantBrand,
    VariantEntry,
)
from eatsafe.registry.regions import REGIONS, STREAMS

_IMG = "https://images.unsplash.com/photo-{}?w=800&q=80"

_EATSAFE_AU_PALETTE = dict(
    accent="#000080", bg="#F0F0FF", splash="#000080",
    text_color="#000080", subtext_color="#64748B",
    input_bg="#FFFFFF", input_border="#D0D0E8",
)
_PRO_PALETTE = dict(
    bg="#1A1A2E", splash="#1A1A2E",
    text_color="#FFFFFF", subtext_color="#A0A0B0",
    input_bg="#252542", input_border="#3B3B5C",
)
_VENUE_IMAGES = ("1414235077428-338989a2e8c0", "1560053608-13721e0d69e8")
_PRO_IMAGES = ("1600565193348-f74bd3c7ccdf", "1581299894007-aaa50297cf16")
_HOME_IMAGES = ("1607478900766-efe13248b125", "1495521821757-a1efb6729352")


def _images(*photo_ids: str) -> tuple[str, ...]:
    return tuple(_IMG.format(photo_id) for photo_id in photo_ids)


def _eatsafe_au(city: str, slug: str, subtitle: str, hero: str = "1599493758267-c6c884c4a70d",
                bundle_suffix: str | None = None) -> VariantBrand:
    return VariantBrand(
        name="EatSafe",
        slug=slug,
        bundle_id=f"com.eatsafe.{bundle_suffix or city.lower()}",
        scheme="eatsafe",
        tagline=f"Food safety compliance for {city}.",
        signup_title="Join EatSafe",
        signup_subtitle=subtitle,
        login_title="EatSafe Login",
        images=_images(hero, *_VENUE_IMAGES),
        **_EATSAFE_AU_PALETTE,
    )


def _chefos(name: str, slug: str, bundle_id: str, scheme: str, accent: str,
            where: str, subtitle: str, hero: str) -> VariantBrand:
    return VariantBrand(
        name=name,
        slug=slug,
        bundle_id=bundle_id,
        scheme=scheme,
        accent=accent,
        tagline=f"Professional kitchen management for {where}.",
        signup_title="Create Account",
        signup_subtitle=subtitle,
        login_title="Welcome Back",
        images=_images(hero, *_PRO_IMAGES),
        **_PRO_PALETTE,
    )


def _homechef(name: str, slug: str, bundle_id: str, scheme: str, accent: str,
              bg: str, input_border: str, hero: str, organise: str = "Organise") -> VariantBrand:
    return VariantBrand(
        name=name,
        slug=slug,
        bundle_id=bundle_id,
        scheme=scheme,
        accent=accent,
        bg=bg,
        splash=accent,
        text_color=accent,
        subtext_color="#64748B",
        input_bg="#FFFFFF",
        input_border=input_border,
        tagline=f"Your home kitchen, {organise.lower()}d.",
        signup_title="Join HomeChef",
        signup_subtitle=f"{organise} your home kitchen",
        login_title="Welcome Back",
        images=_images(hero, *_HOME_IMAGES),
    )


def _eatsafe_intl(name: str, slug: str, bundle_id: str, scheme: str, accent: str, bg: str,
                  input_border: str, tagline: str, signup_title: str, subtitle: str,
                  hero: str) -> VariantBrand:
    return VariantBrand(
        name=name,
        slug=slug,
        bundle_id=bundle_id,
        scheme=scheme,
        accent=accent,
        bg=bg,
        splash=accent,
        text_color=accent,
        subtext_color="#64748B",
        input_bg="#FFFFFF",
        input_border=input_border,
        tagline=tagline,
        signup_title=signup_title,
        signup_subtitle=subtitle,
        login_title="EatSafe Login",
        images=_images(hero, *_VENUE_IMAGES),
    )


# To add a variant, add an entry here
VARIANT_REGISTRY: dict[str, VariantEntry] = {
    "chefos": VariantEntry("chefos", "au", VariantBrand(
        name="ChefOS", slug="chefos", bundle_id="com.chefos.pro", scheme="chefos",
        accent="#6366F1",
        tagline="Professional kitchen management.",
        signup_title="Create Account",
        signup_subtitle="Professional kitchen management starts here",
        login_title="Welcome Back",
        images=_images("1556910103-1c02745aae4d", *_PRO_IMAGES),
        **_PRO_PALETTE,
    )),
    "homechef": VariantEntry("homechef", "au", VariantBrand(
        name="HomeChef", slug="homechef", bundle_id="com.chefos.homechef", scheme="homechef",
        accent="#EA580C", bg="#FFF7ED", splash="#FF6B35",
        text_color="#EA580C", subtext_color="#78716C",
        input_bg="#FFFFFF", input_border="#E5E7EB",
        tagline="Your home kitchen, organised.",
        signup_title="Join HomeChef",
        signup_subtitle="Start organising your home kitchen",
        login_title="Welcome Back",
        images=_images("1556909114-f6e7ad7d3136", *_HOME_IMAGES),
    )),

    # Australia: one EatSafe build per state capital
    "eatsafe_brisbane": VariantEntry("eatsafe", "au", _eatsafe_au(
        "Brisbane", "eatsafe", "Food safety compliance for your venue"), state="qld"),
    "eatsafe_sydney": VariantEntry("eatsafe", "au", _eatsafe_au(
        "Sydney", "eatsafe-sydney", "NSW Food Authority compliance for your venue",
        hero="1506973035872-a4ec16b8e8d9"), state="nsw"),
    "eatsafe_melbourne": VariantEntry("eatsafe", "au", _eatsafe_au(
        "Melbourne", "eatsafe-melbourne", "Victorian food safety compliance for your venue",
        hero="1514395462725-fb4566210144"), state="vic"),
    "eatsafe_perth": VariantEntry("eatsafe", "au", _eatsafe_au(
        "Perth", "eatsafe-perth", "WA food safety compliance for your venue"), state="wa"),
    "eatsafe_adelaide": VariantEntry("eatsafe", "au", _eatsafe_au(
        "Adelaide", "eatsafe-adelaide", "SA Health compliance for your venue"), state="sa"),
    "eatsafe_hobart": VariantEntry("eatsafe", "au", _eatsafe_au(
        "Hobart", "eatsafe-hobart", "Tasmanian food safety compliance for your venue"), state="tas"),
    "eatsafe_canberra": VariantEntry("eatsafe", "au", _eatsafe_au(
        "Canberra", "eatsafe-canberra", "ACT food safety compliance for your venue"), state="act"),
    "eatsafe_darwin": VariantEntry("eatsafe", "au", _eatsafe_au(
        "Darwin", "eatsafe-darwin", "NT food safety compliance for your venue"), state="nt"),
    # National build; the state is detected from the venue address at runtime
    "eatsafe_au": VariantEntry("eatsafe", "au", _eatsafe_au(
        "Australia", "eatsafe-au", "State-specific food safety compliance for your venue",
        bundle_suffix="au")),

    # India
    "india_fssai": VariantEntry("eatsafe", "in", VariantBrand(
        name="EatSafe India", slug="chefos-in", bundle_id="com.chefos.india", scheme="chefosin",
        accent="#FF9933", bg="#FFFAF0", splash="#FF9933",
        text_color="#FF9933", subtext_color="#78716C",
        input_bg="#FFFFFF", input_border="#E5E7EB",
        tagline="FSSAI food safety compliance, simplified.",
        signup_title="Join EatSafe India",
        signup_subtitle="FSSAI food safety compliance for your kitchen",
        login_title="Welcome Back",
        images=_images("1585937421612-70a008356fbe", "1596797038530-2c107229654b",
                       "1505253758473-96b7015fcd40"),
    )),
    "chefos_in": VariantEntry("chefos", "in", _chefos(
        "ChefOS India", "chefos-in", "com.chefos.india.pro", "chefosinpro", "#FF9933",
        "India", "FSSAI-ready kitchen management", "1585937421612-70a008356fbe")),
    "homechef_in": VariantEntry("homechef", "in", VariantBrand(
        name="HomeChef India", slug="homechef-in", bundle_id="com.chefos.homechef.india",
        scheme="homechefin",
        accent="#EA580C", bg="#FFF7ED", splash="#FF6B35",
        text_color="#EA580C", subtext_color="#78716C",
        input_bg="#FFFFFF", input_border="#E5E7EB",
        tagline="Your home kitchen, organised.",
        signup_title="Join HomeChef",
        signup_subtitle="Organise your home kitchen",
        login_title="Welcome Back",
        images=_images("1585937421612-70a008356fbe", *_HOME_IMAGES),
    )),

    # UAE
    "gcc_uae": VariantEntry("eatsafe", "uae", VariantBrand(
        name="EatSafe UAE", slug="chefos-uae", bundle_id="com.chefos.uae", scheme="chefosuae",
        accent="#059669", bg="#F0FDF4", splash="#059669",
        text_color="#059669", subtext_color="#64748B",
        input_bg="#FFFFFF", input_border="#D1E7DD",
        tagline="Dubai Municipality & ADAFSA compliance, simplified.",
        signup_title="Join EatSafe UAE",
        signup_subtitle="Dubai Municipality compliance for your kitchen",
        login_title="Welcome Back",
        images=_images("1512453979798-5ea266f8880c", "1546069901-ba9599a7e63c",
                       "1551024506-0bccd828d307", "1503376780353-7e6692767b70"),
    )),
    "chefos_uae": VariantEntry("chefos", "uae", _chefos(
        "ChefOS UAE", "chefos-uae-pro", "com.chefos.uae.pro", "chefosuaepro", "#059669",
        "the UAE", "DM-compliant kitchen management", "1512453979798-5ea266f8880c")),
    "homechef_uae": VariantEntry("homechef", "uae", _homechef(
        "HomeChef UAE", "homechef-uae", "com.chefos.homechef.uae", "homechefuae",
        "#059669", "#F0FDF4", "#D1E7DD", "1512453979798-5ea266f8880c")),

    # UK
    "eatsafe_london": VariantEntry("eatsafe", "uk", _eatsafe_intl(
        "EatSafe London", "eatsafe-london", "com.eatsafe.london", "eatsafelon",
        "#1E40AF", "#EFF6FF", "#BFDBFE",
        "Food safety compliance for London.", "Join EatSafe London",
        "FSA compliance for your venue", "1513635269975-59663e0ac1ad")),
    "chefos_uk": VariantEntry("chefos", "uk", _chefos(
        "ChefOS UK", "chefos-uk", "com.chefos.uk", "chefosuk", "#1E40AF",
        "the UK", "FSA-ready kitchen management", "1513635269975-59663e0ac1ad")),
    "homechef_uk": VariantEntry("homechef", "uk", _homechef(
        "HomeChef UK", "homechef-uk", "com.chefos.homechef.uk", "homechefuk",
        "#1E40AF", "#EFF6FF", "#BFDBFE", "1513635269975-59663e0ac1ad")),

    # Singapore
    "eatsafe_sg": VariantEntry("eatsafe", "sg", _eatsafe_intl(
        "EatSafe Singapore", "eatsafe-sg", "com.eatsafe.sg", "eatsafesg",
        "#DC2626", "#FFF1F2", "#FECDD3",
        "SFA food safety compliance, simplified.", "Join EatSafe Singapore",
        "SFA compliance for your venue", "1525625293386-3f8f99389edd")),
    "chefos_sg": VariantEntry("chefos", "sg", _chefos(
        "ChefOS Singapore", "chefos-sg", "com.chefos.sg", "chefossg", "#DC2626",
        "Singapore", "SFA-ready kitchen management", "1525625293386-3f8f99389edd")),
    "homechef_sg": VariantEntry("homechef", "sg", _homechef(
        "HomeChef Singapore", "homechef-sg", "com.chefos.homechef.sg", "homechefsg",
        "#DC2626", "#FFF1F2", "#FECDD3", "1525625293386-3f8f99389edd")),

    # US
    "eatsafe_ny": VariantEntry("eatsafe", "us", _eatsafe_intl(
        "EatSafe New York", "eatsafe-ny", "com.eatsafe.ny", "eatsafeny",
        "#7C3AED", "#F5F3FF", "#DDD6FE",
        "FDA food safety compliance, simplified.", "Join EatSafe NY",
        "FDA compliance for your venue", "1496442226666-8d4d0e62e6e9")),
    "chefos_us": VariantEntry("chefos", "us", _chefos(
        "ChefOS US", "chefos-us", "com.chefos.us", "chefosus", "#7C3AED",
        "the US", "FDA-ready kitchen management", "1496442226666-8d4d0e62e6e9")),
    "homechef_us": VariantEntry("homechef", "us", _homechef(
        "HomeChef US", "homechef-us", "com.chefos.homechef.us", "homechefus",
        "#7C3AED", "#F5F3FF", "#DDD6FE", "1496442226666-8d4d0e62e6e9", organise="Organize")),

    "vendor": VariantEntry("vendor", "au", VariantBrand(
        name="VendorOS", slug="vendoros", bundle_id="com.chefos.vendor", scheme="vendoros",
        accent="#0EA5E9", bg="#0C1222", splash="#0C1222",
        text_color="#FFFFFF", subtext_color="#94A3B8",
        input_bg="#1E293B", input_border="#334155",
        tagline="Your vendor command centre.",
        signup_title="Register Your Business",
        signup_subtitle="Start selling to hospitality professionals",
        login_title="Welcome Back",
        images=_images("1542838132-92c53300491e", "1578916171728-46686eac8d58",
                       "1488459716781-31db52582fe9"),
    )),
}

AU_EATSAFE_VARIANTS: frozenset[str] = frozenset(
    key for key, entry in VARIANT_REGISTRY.items()
    if entry.stream == "eatsafe" and entry.region == "au"
)


def get_variant(key: str) -> VariantEntry:
    """Get a variant entry.

    Raises:
        KeyError: If the variant is not registered.
    """
    try:
        return VARIANT_REGISTRY[key]
    except KeyError:
        raise KeyError(f"Unknown app variant '{key}'") from None


def get_region(key: str) -> RegionConfig:
    return REGIONS[get_variant(key).region]


def get_stream(key: str) -> StreamConfig:
    return STREAMS[get_variant(key).stream]


def is_compliance(key: str) -> bool:
    return get_stream(key).layout == Layout.COMPLIANCE


def is_home_cook(key: str) -> bool:
    return get_stream(key).store_mode == StoreMode.HOME_COOK


def is_vendor(key: str) -> bool:
    return get_stream(key).id == "vendor"


def get_base_features(key: str) -> tuple[str, ...] | None:
    return get_stream(key).base_features


def get_release_modules(key: str) -> tuple[str, ...]:
    return get_stream(key).release_modules


def get_compliance(key: str) -> str:
    """Framework code for a variant.

    A pinned Australian state wins over the region default.
    """
    entry = get_variant(key)
    if entry.state:
        return get_state_compliance(entry.state)
    return REGIONS[entry.region].compliance


def is_au_eatsafe_variant(key: str) -> bool:
    return key in AU_EATSAFE_VARIANTS


def resolve_variant(key: str) -> ResolvedVariant:
    """Resolve a variant into its stream, region, brand and framework code.

    Raises:
        KeyError: If the variant is not registered.
    """
    entry = get_variant(key)
    stream = STREAMS[entry.stream]
    return ResolvedVariant(
        variant=key,
        stream=stream,
        region=REGIONS[entry.region],
        brand=entry.brand,
        framework_code=get_compliance(key),
        base_features=stream.base_features,
        release_modules=stream.release_modules,
    )
