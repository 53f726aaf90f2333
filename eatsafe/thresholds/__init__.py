"""Temperature thresholds and daily compliance checks."""

from eatsafe.thresholds.daily_checks import (
    AU_COMPLIANCE_CATEGORIES,
    UAE_COMPLIANCE_CATEGORIES,
    get_daily_checks,
)
from eatsafe.thresholds.temperature import (
    AU_TEMP_THRESHOLDS,
    THRESHOLD_FAMILIES,
    UAE_TEMP_THRESHOLDS,
    au_temp_status,
    get_threshold,
    temp_status,
    uae_temp_status,
)

__all__ = [
    "AU_COMPLIANCE_CATEGORIES",
    "AU_TEMP_THRESHOLDS",
    "THRESHOLD_FAMILIES",
    "UAE_COMPLIANCE_CATEGORIES",
    "UAE_TEMP_THRESHOLDS",
    "au_temp_status",
    "get_daily_checks",
    "get_threshold",
    "temp_status",
    "uae_temp_status",
]
