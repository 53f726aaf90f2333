"""Geographic jurisdiction detection."""

from typing import Any

from eatsafe.geo.au import (
    AU_POSTCODE_RANGES,
    AU_STATE_CONFIGS,
    AU_STATES,
    AUStateConfig,
    detect_au_state,
    get_state_compliance,
)
from eatsafe.geo.uae import (
    EMIRATE_CONFIGS,
    EMIRATES,
    EmirateConfig,
    detect_emirate,
    get_emirate_compliance,
)


def detect_jurisdiction(text: Any, region: str) -> tuple[str, str]:
    """Detect the jurisdiction and framework code for a venue address.

    Args:
        text: Postcode or free-text address.
        region: Region ID (``"au"``, ``"uae"``, ...).

    Returns:
        ``(jurisdiction, framework_code)``. Regions without sub-national
        regimes return the region itself and its default framework.
    """
    if region == "au":
        state = detect_au_state(text)
        return state, get_state_compliance(state)
    if region == "uae":
        emirate = detect_emirate(text)
        return emirate, get_emirate_compliance(emirate)

    from eatsafe.registry.regions import REGIONS

    config = REGIONS.get(region)
    if config is None:
        return region, REGIONS["au"].compliance
    return region, config.compliance


def detect_framework(text: Any, region: str) -> str:
    """Detect the framework code for a venue address within a region."""
    return detect_jurisdiction(text, region)[1]


__all__ = [
    "AU_POSTCODE_RANGES",
    "AU_STATES",
    "AU_STATE_CONFIGS",
    "AUStateConfig",
    "EMIRATES",
    "EMIRATE_CONFIGS",
    "EmirateConfig",
    "detect_au_state",
    "detect_emirate",
    "detect_framework",
    "detect_jurisdiction",
    "get_emirate_compliance",
    "get_state_compliance",
]
