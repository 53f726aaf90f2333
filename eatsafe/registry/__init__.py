"""Registries for frameworks, regions and app variants."""

from eatsafe.registry.framework_registry import (
    FrameworkRegistry,
    build_default_registry,
    get_framework_config,
    get_framework_registry,
    get_variant_framework_config,
    reset_framework_registry,
)
from eatsafe.registry.regions import REGIONS, STREAMS, get_region_config
from eatsafe.registry.variants import (
    AU_EATSAFE_VARIANTS,
    VARIANT_REGISTRY,
    get_base_features,
    get_compliance,
    get_region,
    get_release_modules,
    get_stream,
    get_variant,
    is_au_eatsafe_variant,
    is_compliance,
    is_home_cook,
    is_vendor,
    resolve_variant,
)

__all__ = [
    "AU_EATSAFE_VARIANTS",
    "FrameworkRegistry",
    "REGIONS",
    "STREAMS",
    "VARIANT_REGISTRY",
    "build_default_registry",
    "get_base_features",
    "get_compliance",
    "get_framework_config",
    "get_framework_registry",
    "get_region",
    "get_region_config",
    "get_release_modules",
    "get_stream",
    "get_variant",
    "get_variant_framework_config",
    "is_au_eatsafe_variant",
    "is_compliance",
    "is_home_cook",
    "is_vendor",
    "reset_framework_registry",
    "resolve_variant",
]
