"""Temperature threshold models for logged checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TempStatus(str, Enum):
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


@dataclass(frozen=True)
class TempThreshold:
    """Pass/warning bounds for one logged-check type.

    Cold-chain checks define ``pass_max`` (lower is better); hot-chain checks
    define ``pass_min`` (higher is better). Exactly one of the two is set.
    """

    log_type: str  # e.g. "fridge_temp", "hot_holding"
    label: str
    pass_max: float | None = None
    warning_max: float | None = None
    pass_min: float | None = None
    warning_min: float | None = None
    label_ar: str | None = None
    unit: str = "°C"

    def __post_init__(self):
        if (self.pass_max is None) == (self.pass_min is None):
            raise ValueError(
                f"Threshold '{self.log_type}' must define exactly one of pass_max/pass_min"
            )

    @property
    def is_cold_check(self) -> bool:
        return self.pass_max is not None

    def classify(self, reading: float) -> TempStatus:
        """Classify a reading against this threshold."""
        if self.pass_max is not None:
            if reading <= self.pass_max:
                return TempStatus.PASS
            if self.warning_max is not None and reading <= self.warning_max:
                return TempStatus.WARNING
            return TempStatus.FAIL

        if reading >= self.pass_min:
            return TempStatus.PASS
        if self.warning_min is not None and reading >= self.warning_min:
            return TempStatus.WARNING
        return TempStatus.FAIL


@dataclass(frozen=True)
class ComplianceCheck:
    """A daily check shown in the compliance burst."""

    key: str
    label: str
    log_type: str
    requires_temp: bool = False
    temp_label: str | None = None
    label_ar: str | None = None
    is_halal: bool = False
    is_ramadan: bool = False  # only active during Ramadan


@dataclass(frozen=True)
class ComplianceCheckCategory:
    key: str
    label: str
    icon: str  # lucide icon name
    checks: tuple[ComplianceCheck, ...]
    label_ar: str | None = None
