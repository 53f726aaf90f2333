"""Region, product stream and deployment variant models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Units(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class StoreMode(str, Enum):
    RESTAURANT = "restaurant"
    HOME_COOK = "home_cook"


class Layout(str, Enum):
    FULL = "full"  # full kitchen-management app
    COMPLIANCE = "compliance"  # compliance-first shell


@dataclass(frozen=True)
class RegionConfig:
    """A supported geography. Never mutated after registration."""

    id: str  # e.g. "au", "uae"
    name: str
    currency: str  # ISO 4217 code
    currency_symbol: str
    units: Units
    compliance: str  # default compliance framework code
    greeting: str
    home_greeting: str
    locale: str


@dataclass(frozen=True)
class StreamConfig:
    """A product vertical: feature bundle plus base layout."""

    id: str  # "chefos", "homechef", "eatsafe", "vendor"
    label: str
    store_mode: StoreMode
    layout: Layout
    base_features: tuple[str, ...] | None  # None means all features
    release_modules: tuple[str, ...] = ()


@dataclass(frozen=True)
class VariantBrand:
    name: str
    slug: str
    bundle_id: str
    scheme: str
    accent: str
    bg: str
    splash: str
    text_color: str
    subtext_color: str
    input_bg: str
    input_border: str
    tagline: str
    signup_title: str
    signup_subtitle: str
    login_title: str
    images: tuple[str, ...] = ()


@dataclass(frozen=True)
class VariantEntry:
    """A deployable product configuration.

    ``state`` pins an Australian state so that city builds resolve to the
    state's framework instead of the region default.
    """

    stream: str
    region: str
    brand: VariantBrand
    state: str | None = None


@dataclass(frozen=True)
class ResolvedVariant:
    """The concrete features, branding and framework of a variant."""

    variant: str
    stream: StreamConfig
    region: RegionConfig
    brand: VariantBrand
    framework_code: str
    base_features: tuple[str, ...] | None
    release_modules: tuple[str, ...]

    @property
    def has_all_features(self) -> bool:
        return self.base_features is None

    def is_feature_enabled(self, feature: str) -> bool:
        """Check whether a feature is part of the variant's base bundle."""
        if self.base_features is None:
            return True
        return feature in self.base_features
