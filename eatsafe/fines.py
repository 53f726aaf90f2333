"""Dubai Municipality fine schedule and exposure estimates."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from eatsafe.models import Severity


@dataclass(frozen=True)
class FineSchedule:
    violation_type: str
    label: str
    label_ar: str
    severity: Severity
    min_fine_aed: int
    max_fine_aed: int
    can_cause_closure: bool


@dataclass(frozen=True)
class FineExposure:
    """Total AED exposure for a set of violations."""

    min_aed: int
    max_aed: int
    closure_risk: bool
    matched: tuple[FineSchedule, ...]

    def to_dict(self) -> dict:
        return {
            "min_aed": self.min_aed,
            "max_aed": self.max_aed,
            "closure_risk": self.closure_risk,
            "violations": [fine.violation_type for fine in self.matched],
        }


DUBAI_FINE_SCHEDULE: tuple[FineSchedule, ...] = (
    FineSchedule("temp_danger_zone", "Food in Danger Zone (5-60°C) > 2hrs", "طعام في المنطقة الخطرة",
                 Severity.CRITICAL, 5000, 100000, True),
    FineSchedule("pest_infestation", "Pest Infestation", "إصابة بالآفات",
                 Severity.CRITICAL, 10000, 50000, True),
    FineSchedule("no_handwash", "No Handwashing Facilities", "لا توجد مرافق غسل اليدين",
                 Severity.CRITICAL, 5000, 20000, False),
    FineSchedule("cross_contamination", "Cross-Contamination", "تلوث متبادل",
                 Severity.CRITICAL, 5000, 50000, True),
    FineSchedule("expired_food", "Expired Food on Premises", "طعام منتهي الصلاحية",
                 Severity.CRITICAL, 10000, 50000, True),
    FineSchedule("no_halal_cert", "No Valid Halal Certificate", "لا توجد شهادة حلال سارية",
                 Severity.CRITICAL, 10000, 50000, True),
    FineSchedule("no_health_cert", "Staff Without Health Certificate", "موظف بدون شهادة صحية",
                 Severity.MAJOR, 5000, 20000, False),
    FineSchedule("incomplete_logs", "Incomplete Temperature Logs", "سجلات حرارة غير مكتملة",
                 Severity.MAJOR, 5000, 10000, False),
    FineSchedule("no_grade_display", "Food Safety Grade Not Displayed", "عدم عرض تصنيف سلامة الغذاء",
                 Severity.MINOR, 5000, 5000, False),
)

_BY_TYPE = {fine.violation_type: fine for fine in DUBAI_FINE_SCHEDULE}


def get_fine(violation_type: str) -> FineSchedule | None:
    return _BY_TYPE.get(violation_type)


def get_fine_exposure(violation_types: Iterable[str]) -> FineExposure:
    """Sum the fine range for a set of violation types.

    Unknown violation types are ignored. Each type counts once.
    """
    matched = []
    seen = set()
    for violation_type in violation_types:
        fine = _BY_TYPE.get(violation_type)
        if fine is None or violation_type in seen:
            continue
        seen.add(violation_type)
        matched.append(fine)

    return FineExposure(
        min_aed=sum(f.min_fine_aed for f in matched),
        max_aed=sum(f.max_fine_aed for f in matched),
        closure_risk=any(f.can_cause_closure for f in matched),
        matched=tuple(matched),
    )
