"""Temperature thresholds for logged checks, per regulatory family."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from eatsafe.models import TempStatus, TempThreshold
from eatsafe.tracing import log_config_event

T = TempThreshold

# Food Standards Code 3.2.2, shared by every Australian state
AU_TEMP_THRESHOLDS: tuple[TempThreshold, ...] = (
    T("fridge_temp", "Fridge Temperature", pass_max=5, warning_max=8),
    T("freezer_temp", "Freezer Temperature", pass_max=-18, warning_max=-15),
    T("hot_holding", "Hot Holding", pass_min=60, warning_min=57),
    T("cooking_poultry", "Cooking — Poultry / Mince", pass_min=75, warning_min=72),
    T("cooking_whole", "Cooking — Whole Cuts", pass_min=63, warning_min=60),
    T("reheating", "Reheating", pass_min=75, warning_min=72),
    T("receiving_chilled", "Receiving — Chilled Goods", pass_max=5, warning_max=8),
    T("receiving_frozen", "Receiving — Frozen Goods", pass_max=-18, warning_max=-15),
    T("display_hot", "Display — Hot Food", pass_min=60, warning_min=57),
    T("display_cold", "Display — Cold Food", pass_max=5, warning_max=8),
    T("transport_chilled", "Transport — Chilled", pass_max=5, warning_max=8),
    T("transport_frozen", "Transport — Frozen", pass_max=-18, warning_max=-15),
    T("oil_temp", "Oil Temperature (Frying)", pass_max=180, warning_max=185),
)

# Dubai Municipality / ADAFSA; poultry and reheating run at 74°C
UAE_TEMP_THRESHOLDS: tuple[TempThreshold, ...] = (
    T("fridge_temp", "Fridge Temperature", pass_max=5, warning_max=8,
      label_ar="درجة حرارة الثلاجة"),
    T("freezer_temp", "Freezer Temperature", pass_max=-18, warning_max=-15,
      label_ar="درجة حرارة الفريزر"),
    T("hot_holding", "Hot Holding", pass_min=60, warning_min=57,
      label_ar="الحفظ الساخن"),
    T("cooking_poultry", "Cooking — Poultry/Mince", pass_min=74, warning_min=70,
      label_ar="الطهي — الدواجن/اللحم المفروم"),
    T("cooking_whole", "Cooking — Whole Cuts", pass_min=63, warning_min=60,
      label_ar="الطهي — قطع كاملة"),
    T("reheating", "Reheating", pass_min=74, warning_min=70,
      label_ar="إعادة التسخين"),
    T("receiving_chilled", "Receiving — Chilled Goods", pass_max=5, warning_max=8,
      label_ar="الاستلام — بضائع مبردة"),
    T("receiving_frozen", "Receiving — Frozen Goods", pass_max=-18, warning_max=-15,
      label_ar="الاستلام — بضائع مجمدة"),
    T("display_hot", "Display — Hot Food", pass_min=60, warning_min=57,
      label_ar="العرض — طعام ساخن"),
    T("display_cold", "Display — Cold Food", pass_max=5, warning_max=8,
      label_ar="العرض — طعام بارد"),
    T("transport_chilled", "Transport — Chilled", pass_max=5, warning_max=8,
      label_ar="النقل — مبرد"),
    T("transport_frozen", "Transport — Frozen", pass_max=-18, warning_max=-15,
      label_ar="النقل — مجمد"),
    T("oil_temp", "Oil Temperature (Frying)", pass_max=180, warning_max=185,
      label_ar="درجة حرارة الزيت (القلي)"),
)

THRESHOLD_FAMILIES: dict[str, tuple[TempThreshold, ...]] = {
    "au": AU_TEMP_THRESHOLDS,
    "uae": UAE_TEMP_THRESHOLDS,
}


def find_threshold(thresholds: Iterable[TempThreshold], log_type: str) -> TempThreshold | None:
    for threshold in thresholds:
        if threshold.log_type == log_type:
            return threshold
    return None


def get_threshold(family: str, log_type: str) -> TempThreshold | None:
    """Look up the threshold for a log type in a family (``au`` or ``uae``)."""
    return find_threshold(THRESHOLD_FAMILIES.get(family, ()), log_type)


def temp_status(
    thresholds: Iterable[TempThreshold],
    log_type: str,
    reading: float,
) -> TempStatus:
    """Classify a reading for a log type.

    Args:
        thresholds: The threshold table to search.
        log_type: The logged check type, e.g. ``"fridge_temp"``.
        reading: Temperature in °C.

    Returns:
        The status; log types with no threshold always pass.
    """
    threshold = find_threshold(thresholds, log_type)
    if threshold is None:
        log_config_event(
            "fallback",
            "thresholds",
            f"No threshold for log type '{log_type}', treating as pass",
            level=logging.DEBUG,
        )
        return TempStatus.PASS
    return threshold.classify(reading)


def au_temp_status(log_type: str, reading: float) -> TempStatus:
    return temp_status(AU_TEMP_THRESHOLDS, log_type, reading)


def uae_temp_status(log_type: str, reading: float) -> TempStatus:
    return temp_status(UAE_TEMP_THRESHOLDS, log_type, reading)
