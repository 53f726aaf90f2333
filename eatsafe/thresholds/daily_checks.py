"""Daily compliance checks shown in the food safety burst."""

from __future__ import annotations

from eatsafe.models import ComplianceCheck, ComplianceCheckCategory

C = ComplianceCheck

AU_COMPLIANCE_CATEGORIES: tuple[ComplianceCheckCategory, ...] = (
    ComplianceCheckCategory("temperature", "Temperature Monitoring", "Thermometer", (
        C("fridge", "Fridge Temps", "fridge_temp", requires_temp=True, temp_label="°C (0–5 pass)"),
        C("freezer", "Freezer Temps", "freezer_temp", requires_temp=True, temp_label="°C (≤ -18 pass)"),
        C("hot_holding", "Hot Holding", "hot_holding", requires_temp=True, temp_label="°C (≥ 60 pass)"),
        C("cooking", "Cooking Temps", "cooking_poultry", requires_temp=True, temp_label="°C (≥ 75 pass)"),
    )),
    ComplianceCheckCategory("food_safety", "Food Safety", "Shield", (
        C("expiry_check", "Expiry Date Check", "expiry_check"),
        C("cross_contam", "Cross-Contamination", "cross_contamination"),
        C("food_labelling", "Date Marking & Labelling", "food_labelling"),
        C("allergen_check", "Allergen Management", "allergen_check"),
    )),
    ComplianceCheckCategory("hygiene", "Personal Hygiene", "HeartPulse", (
        C("staff_health", "Staff Health Declaration", "staff_health"),
        C("handwash", "Handwash Stations", "handwash_check"),
        C("uniform", "Uniform & Appearance", "uniform_check"),
    )),
    ComplianceCheckCategory("cleaning", "Cleaning & Sanitisation", "SprayCan", (
        C("sanitiser", "Sanitiser Check", "sanitiser_check"),
        C("kitchen_clean", "Kitchen Cleanliness", "kitchen_clean"),
        C("equipment_clean", "Equipment Clean", "equipment_clean"),
        C("waste_disposal", "Waste Disposal", "waste_disposal"),
    )),
    ComplianceCheckCategory("pest_control", "Pest Control", "Bug", (
        C("pest_visual", "Visual Pest Check", "pest_check"),
        C("pest_devices", "Pest Control Devices", "pest_device_check"),
    )),
)

UAE_COMPLIANCE_CATEGORIES: tuple[ComplianceCheckCategory, ...] = (
    ComplianceCheckCategory("temperature", "Temperature Monitoring", "Thermometer", (
        C("fridge", "Fridge Temps", "fridge_temp", requires_temp=True,
          temp_label="°C (0–5 pass)", label_ar="حرارة الثلاجة"),
        C("freezer", "Freezer Temps", "freezer_temp", requires_temp=True,
          temp_label="°C (≤ -18 pass)", label_ar="حرارة الفريزر"),
        C("hot_holding", "Hot Holding", "hot_holding", requires_temp=True,
          temp_label="°C (≥ 60 pass)", label_ar="الحفظ الساخن"),
        C("cooking", "Cooking Temps", "cooking_poultry", requires_temp=True,
          temp_label="°C (≥ 74 pass)", label_ar="حرارة الطهي"),
    ), label_ar="مراقبة درجة الحرارة"),
    ComplianceCheckCategory("food_safety", "Food Safety", "Shield", (
        C("expiry_check", "Expiry Date Check", "expiry_check", label_ar="فحص تاريخ الصلاحية"),
        C("cross_contam", "Cross-Contamination Check", "cross_contamination",
          label_ar="فحص التلوث المتبادل"),
        C("halal_cert", "Halal Certificate Verification", "halal_verification",
          label_ar="التحقق من شهادة الحلال", is_halal=True),
        C("food_labelling", "Food Labelling & Date Marking", "food_labelling",
          label_ar="ملصقات الغذاء والتاريخ"),
    ), label_ar="سلامة الغذاء"),
    ComplianceCheckCategory("hygiene", "Personal Hygiene", "HeartPulse", (
        C("staff_health", "Staff Health Declaration", "staff_health", label_ar="إقرار صحة الموظف"),
        C("handwash", "Handwash Stations", "handwash_check", label_ar="محطات غسل اليدين"),
        C("uniform", "Uniform & Appearance", "uniform_check", label_ar="الزي والمظهر"),
        C("health_cert", "Health Certificate Valid", "health_cert_check",
          label_ar="صلاحية الشهادة الصحية"),
    ), label_ar="النظافة الشخصية"),
    ComplianceCheckCategory("cleaning", "Cleaning & Sanitization", "SprayCan", (
        C("sanitiser", "Sanitiser Check", "sanitiser_check", label_ar="فحص المعقم"),
        C("kitchen_clean", "Kitchen Cleanliness", "kitchen_clean", label_ar="نظافة المطبخ"),
        C("equipment_clean", "Equipment Clean", "equipment_clean", label_ar="تنظيف المعدات"),
        C("waste_disposal", "Waste Disposal", "waste_disposal", label_ar="التخلص من النفايات"),
    ), label_ar="التنظيف والتعقيم"),
    ComplianceCheckCategory("pest_control", "Pest Control", "Bug", (
        C("pest_visual", "Visual Pest Check", "pest_check", label_ar="فحص بصري للآفات"),
        C("pest_devices", "Pest Control Devices", "pest_device_check", label_ar="أجهزة مكافحة الآفات"),
    ), label_ar="مكافحة الآفات"),
)

CHECK_FAMILIES: dict[str, tuple[ComplianceCheckCategory, ...]] = {
    "au": AU_COMPLIANCE_CATEGORIES,
    "uae": UAE_COMPLIANCE_CATEGORIES,
}


def get_daily_checks(
    family: str,
    include_halal: bool = True,
    ramadan: bool = False,
) -> list[ComplianceCheckCategory]:
    """Get the daily check categories for a family, filtered for the venue.

    Args:
        family: ``"au"`` or ``"uae"``; unknown families fall back to ``"au"``.
        include_halal: Whether halal checks apply to the venue.
        ramadan: Whether Ramadan-only checks are active.

    Returns:
        Categories with inapplicable checks removed. Categories left with
        no checks are dropped.
    """
    categories = CHECK_FAMILIES.get(family, AU_COMPLIANCE_CATEGORIES)

    result = []
    for category in categories:
        checks = tuple(
            check for check in category.checks
            if (include_halal or not check.is_halal) and (ramadan or not check.is_ramadan)
        )
        if checks:
            result.append(
                ComplianceCheckCategory(
                    key=category.key,
                    label=category.label,
                    icon=category.icon,
                    checks=checks,
                    label_ar=category.label_ar,
                )
            )
    return result
