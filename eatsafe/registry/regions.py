"""Supported regions and product streams."""

from eatsafe.models import Layout, RegionConfig, StoreMode, StreamConfig, Units

# Add a region here when expanding to a new country
REGIONS: dict[str, RegionConfig] = {
    "au": RegionConfig(
        id="au", name="Australia", currency="AUD", currency_symbol="$",
        units=Units.METRIC, compliance="bcc",
        greeting="Hey Chef", home_greeting="Hey Boss", locale="en-AU",
    ),
    "in": RegionConfig(
        id="in", name="India", currency="INR", currency_symbol="₹",
        units=Units.METRIC, compliance="fssai",
        greeting="Namaste Chef", home_greeting="Namaste", locale="en-IN",
    ),
    "uae": RegionConfig(
        id="uae", name="UAE", currency="AED", currency_symbol="د.إ",
        units=Units.METRIC, compliance="dm",
        greeting="Hello Chef", home_greeting="Hello", locale="en-AE",
    ),
    "uk": RegionConfig(
        id="uk", name="United Kingdom", currency="GBP", currency_symbol="£",
        units=Units.METRIC, compliance="fsa",
        greeting="Hey Chef", home_greeting="Hey", locale="en-GB",
    ),
    "sg": RegionConfig(
        id="sg", name="Singapore", currency="SGD", currency_symbol="S$",
        units=Units.METRIC, compliance="sfa",
        greeting="Hey Chef", home_greeting="Hey", locale="en-SG",
    ),
    "us": RegionConfig(
        id="us", name="United States", currency="USD", currency_symbol="$",
        units=Units.IMPERIAL, compliance="fda",
        greeting="Hey Chef", home_greeting="Hey", locale="en-US",
    ),
}

STREAMS: dict[str, StreamConfig] = {
    "chefos": StreamConfig(
        id="chefos",
        label="ChefOS",
        store_mode=StoreMode.RESTAURANT,
        layout=Layout.FULL,
        base_features=None,
    ),
    "homechef": StreamConfig(
        id="homechef",
        label="HomeChef",
        store_mode=StoreMode.HOME_COOK,
        layout=Layout.FULL,
        base_features=(
            "dashboard", "recipes", "kitchen", "todo", "food-safety",
            "cheatsheets", "money-lite", "settings", "feedback", "games",
            "companion",
        ),
    ),
    "eatsafe": StreamConfig(
        id="eatsafe",
        label="EatSafe",
        store_mode=StoreMode.RESTAURANT,
        layout=Layout.COMPLIANCE,
        base_features=("dashboard", "food-safety", "scanner", "reports", "settings", "games"),
        release_modules=(
            "recipes", "ingredients", "prep", "kitchen-sections", "inventory",
            "menu-engineering", "production", "team", "roster", "calendar",
            "invoices", "marketplace", "ai-chat", "money-lite", "training", "games",
        ),
    ),
    "vendor": StreamConfig(
        id="vendor",
        label="VendorOS",
        store_mode=StoreMode.RESTAURANT,
        layout=Layout.FULL,
        base_features=("dashboard", "demands", "deals", "settings"),
    ),
}


def get_region_config(region_id: str) -> RegionConfig | None:
    return REGIONS.get(region_id)
