"""UAE emirate frameworks: Dubai Municipality, ADAFSA and Sharjah Municipality.

The three emirates share one G1-G55 checklist synthesised from the Dubai
Food Code, ADAFSA standards, the Sharjah Food Safety Program, Federal Law
No. 10/2015 and GSO requirements. They differ in grading: Dubai issues A-D
letter grades, Abu Dhabi issues Zadna stars and Sharjah runs pass/fail
inspections.
"""

from __future__ import annotations

from typing import Any

from eatsafe.frameworks.bcc import CRITICAL, MAJOR, MINOR, SECTIONS_STEP, checklist_items, derive_framework
from eatsafe.models import AssessmentSection, ComplianceFrameworkConfig, SectionDefinition
from eatsafe.scoring.star import adafsa_star_rating

_DOCS = "Documentation & Licensing"
_TEMP = "Temperature Control"
_STRUCT = "Structural & Operational Hygiene"
_CROSS = "Cross-Contamination & Storage"
_PERSONAL = "Personal Hygiene & Health"
_CLEAN = "Cleaning, Sanitising & Pest Control"
_TRACE = "Traceability & Halal"
_RED = "Red Flag / Critical Items"

GCC_ASSESSMENT_SECTIONS: tuple[AssessmentSection, ...] = (
    AssessmentSection(
        key="documentation",
        label=_DOCS,
        items=checklist_items(
            _DOCS,
            ("G1", "Trade Licence — Is the food establishment trade licence valid and does it include the correct food-handling activity?", [CRITICAL]),
            ("G2", "Person in Charge (PIC) — Is at least one certified PIC (Level 2 or 3) present during all operating hours?", [CRITICAL]),
            ("G3", "Digital Portal — Are all staff training records and permits updated on the Foodwatch / Zadna system?", [MAJOR], None, True),
            ("G4", "Staff Health Records — Do all food handlers have valid Occupational Health Cards (OHC)?", [CRITICAL], None, True),
            ("G5", "Pest Control Contract — Is there a valid contract with a municipality-approved pest control company?", [MAJOR], None, True),
            ("G6", "Pest Control Log — Is the pest control log maintained showing recent visits and bait station maps?", [MAJOR], None, True),
            ("G7", "Water Tank Cleaning — Has the water tank been cleaned and disinfected within the last 6 months, with certificate available?", [MAJOR], None, True),
            ("G8", "HACCP Plan — Does the food business have a documented HACCP plan or food safety management system?", [MAJOR], None, True),
            ("G9", "Halal Certificate — Does the establishment have a valid Halal certificate from an approved body (where applicable)?", [CRITICAL], None, True),
        ),
    ),
    AssessmentSection(
        key="temperature_control",
        label=_TEMP,
        items=checklist_items(
            _TEMP,
            ("G10", "Receiving — Are temperature logs maintained showing temps of high-risk foods upon delivery (Cold: <5°C; Frozen: <−18°C)?", [MAJOR, CRITICAL], None, True),
            ("G11", "Storage — Are chiller and freezer temperatures recorded at least twice daily?", [MAJOR, CRITICAL], None, True),
            ("G12", "Cooking / Reheating — Are internal core temperature logs showing food reached ≥75°C (or equivalent time/temp parameters)?", [MAJOR, CRITICAL], None, True),
            ("G13", "Cooling — Is there evidence of rapid cooling (blast chiller or ice bath) ensuring food drops from 60°C to 20°C within 2 hours?", [MAJOR, CRITICAL], None, True),
            ("G14", "Calibration — Are thermometers calibrated (ice point/boiling point method) at least monthly, with records available?", [MINOR, MAJOR], None, True),
            ("G15", "Hot Holding — Is hot food maintained at ≥60°C during service and display?", [MAJOR, CRITICAL], None, True),
            ("G16", "Cold Display — Is cold food displayed at ≤5°C with temperature monitoring?", [MAJOR, CRITICAL], None, True),
            ("G17", "Transport — Are temperature-controlled vehicles used for transporting high-risk foods, with records maintained?", [MAJOR], None, True),
        ),
    ),
    AssessmentSection(
        key="structural_hygiene",
        label=_STRUCT,
        items=checklist_items(
            _STRUCT,
            ("G18", "Kitchen Area — Does the kitchen area meet the minimum size requirement (≥40% of floor area or ≥300 sq. ft)?", [MAJOR], "Dubai: 40% rule applies"),
            ("G19", "Flow of Food — Is there unidirectional flow from raw to ready-to-eat areas (no cross-traffic or back-tracking)?", [MAJOR, CRITICAL]),
            ("G20", "Handwash Stations — Are dedicated hand-wash stations available (sensor or foot-operated, with liquid soap and paper towels)?", [CRITICAL], "No cloth towels permitted"),
            ("G21", "Prep Sinks — Are separate sinks provided for vegetables and raw meats/poultry?", [MAJOR]),
            ("G22", "Surfaces — Are all food contact surfaces non-porous (stainless steel Grade 304 or food-grade plastic)? No wood surfaces?", [MAJOR]),
            ("G23", "Walls & Coving — Are walls tiled/clad up to 2 metres with curved joints (coving) between walls and floors?", [MINOR, MAJOR]),
            ("G24", "Ventilation — Is mechanical exhaust ventilation maintained in a clean and working condition?", [MINOR, MAJOR]),
            ("G25", "Lighting — Is adequate lighting provided in food preparation, storage, and cleaning areas?", [MINOR]),
            ("G26", "Drainage — Are floor drains clean, functioning, and fitted with proper traps to prevent backflow?", [MAJOR]),
            ("G27", "Toilets — Are adequate staff toilets provided, separate from food areas, and maintained in a clean state?", [MINOR, MAJOR]),
        ),
    ),
    AssessmentSection(
        key="cross_contamination",
        label=_CROSS,
        items=checklist_items(
            _CROSS,
            ("G28", "Color Coding — Are specific colour-coded boards/knives used? (Red: Raw Meat; Blue: Raw Fish; Green: Veg; White: Dairy/Bakery)", [MAJOR, CRITICAL]),
            ("G29", "Dry Storage — Are all food items stored at least 15cm (6 inches) off the floor on stainless steel or plastic shelving?", [MINOR, MAJOR]),
            ("G30", "Date Labelling — Do all prepped items have a date label (Prep Date + Expiry Date)?", [MAJOR], None, True),
            ("G31", "Chemical Storage — Are cleaning chemicals stored in a locked cabinet, separate from food storage areas?", [CRITICAL]),
            ("G32", "FEFO / FIFO — Is the First-Expiry-First-Out stock rotation system followed for all stored food items?", [MAJOR]),
            ("G33", "Raw/Cooked Separation — Are raw and ready-to-eat foods stored separately with raw foods placed below cooked?", [CRITICAL]),
            ("G34", "Allergens — Are allergens identified and managed with clear labelling and staff awareness?", [MAJOR]),
        ),
    ),
    AssessmentSection(
        key="personal_hygiene",
        label=_PERSONAL,
        items=checklist_items(
            _PERSONAL,
            ("G35", "Staff Health — Are staff members excluded from food handling if suffering from a food-borne illness (vomiting, diarrhoea, jaundice)?", [CRITICAL]),
            ("G36", "Handwashing — Do food handlers wash hands correctly and at appropriate times (after breaks, handling raw food, etc.)?", [MAJOR, CRITICAL]),
            ("G37", "Uniforms — Are food handlers wearing clean uniforms, hair nets/caps, and no jewellery (except plain wedding band)?", [MINOR, MAJOR]),
            ("G38", "Gloves — Are single-use gloves used when handling ready-to-eat food, and changed between tasks?", [MAJOR]),
            ("G39", "Smoking & Eating — Is there no smoking, eating, or drinking in food preparation areas?", [MINOR, MAJOR]),
            ("G40", "Wounds — Are cuts and wounds properly covered with blue waterproof dressings?", [MAJOR]),
        ),
    ),
    AssessmentSection(
        key="cleaning_pest",
        label=_CLEAN,
        items=checklist_items(
            _CLEAN,
            ("G41", "Cleaning Schedule — Is a written cleaning schedule maintained and followed for all areas and equipment?", [MAJOR], None, True),
            ("G42", "Sanitising — Are food contact surfaces sanitised correctly using approved sanitising agents at the correct concentration?", [MAJOR, CRITICAL], None, True),
            ("G43", "Equipment Maintenance — Are all fixtures, fittings, and equipment maintained in a good state of repair and working order?", [MINOR, MAJOR]),
            ("G44", "Grease Trap — Is the grease trap cleaned and maintained regularly with records available?", [MAJOR], None, True),
            ("G45", "Pest Evidence — Is the establishment completely free from evidence of live or dead pests (cockroaches, rodents, flies)?", [CRITICAL]),
            ("G46", "Pest Prevention — Are pest prevention measures in place (mesh screens, door strips, sealed entry points, bait stations)?", [MAJOR]),
            ("G47", "Waste Management — Are waste bins lidded, lined, and emptied frequently? Is the waste storage area clean and enclosed?", [MINOR, MAJOR]),
        ),
    ),
    AssessmentSection(
        key="traceability_halal",
        label=_TRACE,
        items=checklist_items(
            _TRACE,
            ("G48", "Supplier Records — Are invoices and certificates maintained for all raw materials, with Lot/Batch tracking for outgoing items?", [MAJOR], None, True),
            ("G49", "Food Recall — Does the business have a documented food recall/withdrawal procedure?", [MAJOR]),
            ("G50", "Halal Integrity — Is halal meat stored, handled, and prepared separately from non-halal products (where applicable)?", [CRITICAL]),
            ("G51", "Food Labels (GSO 9/2013) — Do all prepackaged foods have Arabic labels with ingredients, allergens, and expiry dates?", [MAJOR]),
            ("G52", "Nutritional Labelling (GSO 2233) — Do food labels comply with GSO nutritional labelling requirements?", [MINOR]),
        ),
    ),
    AssessmentSection(
        key="critical_items",
        label=_RED,
        items=checklist_items(
            _RED,
            ("G53", "Sewage — Are there any sewage leaks, odours, or grease trap overflows on the premises?", [CRITICAL], "Immediate fail if sewage issues found"),
            ("G54", "Running Water — Is hot and cold running water available at all times in food preparation areas?", [CRITICAL]),
            ("G55", "Expired Food — Is the premises completely free from any expired food products?", [CRITICAL]),
        ),
    ),
)

GCC_SECTIONS: tuple[SectionDefinition, ...] = (
    SectionDefinition("fridge_temps", "Fridge Temps", True),
    SectionDefinition("freezer_temps", "Freezer Temps", True),
    SectionDefinition("staff_health", "Staff Health Checks", True),
    SectionDefinition("handwash_stations", "Handwash Station Checks", True),
    SectionDefinition("sanitiser_check", "Sanitiser Checks", True),
    SectionDefinition("kitchen_clean", "Kitchen Cleanliness", True),
    SectionDefinition("pest_check", "Pest Checks", True),
    SectionDefinition("receiving_logs", "Receiving Logs", True),
    SectionDefinition("cooking_logs", "Cooking Logs", True),
    SectionDefinition("cooling_logs", "Cooling Logs", True),
    SectionDefinition("reheating_logs", "Reheating Logs", True),
    SectionDefinition("display_monitoring", "Display Monitoring", True),
    SectionDefinition("transport_logs", "Transport Logs", False),
    SectionDefinition("cleaning_schedules", "Cleaning Schedules", True),
    SectionDefinition("equipment_calibration", "Equipment & Calibration", True),
    SectionDefinition("supplier_register", "Supplier Register", True),
    SectionDefinition("halal_tracking", "Halal Tracking", True),
    SectionDefinition("self_assessment", "Self-Assessment (G1–G55)", True),
)

_GCC_FEATURES = {
    "has_supervisors": True,
    "has_training_register": True,
    "has_severity_levels": True,
    "has_evidence_checks": True,
    "has_halal_tracking": True,
}


def _gcc_wizard(
    licence_title: str,
    licence_subtitle: str,
    licence_label: str,
    supervisor_title: str,
    supervisor_subtitle: str,
    supervisor_name_label: str,
    certificate_label: str,
    placeholder: str | None = None,
) -> list[dict[str, Any]]:
    licence_number = {"key": "bcc_licence_number", "label": licence_label, "type": "text", "required": True}
    if placeholder:
        licence_number["placeholder"] = placeholder
    return [
        {
            "key": "licence",
            "title": licence_title,
            "subtitle": licence_subtitle,
            "fields": [
                licence_number,
                {"key": "licence_expiry", "label": "Licence Expiry Date", "type": "date"},
                {"key": "licence_displayed", "label": "Licence Displayed", "type": "boolean"},
            ],
        },
        {
            "key": "fss",
            "title": supervisor_title,
            "subtitle": supervisor_subtitle,
            "fields": [
                {"key": "name", "label": supervisor_name_label, "type": "text", "required": True},
                {"key": "certificate_number", "label": certificate_label, "type": "text"},
                {"key": "certificate_date", "label": "Certificate Date", "type": "date"},
            ],
        },
        SECTIONS_STEP,
    ]


# Dubai Municipality: A-D letter grades from a weighted percentage
DM_CONFIG: ComplianceFrameworkConfig = derive_framework(
    {
        "id": "dm",
        "region_id": "uae",
        "locale": "en-AE",
        "labels": {
            "framework_name": "Dubai Municipality Compliance",
            "framework_short": "DM",
            "licence_label": "Trade Licence Number",
            "supervisor_role": "Person in Charge (PIC)",
            "cert_body": "Dubai Municipality — Food Safety Department",
            "assessment_title": "Food Safety Self-Assessment",
            "assessment_subtitle": "Dubai Food Code Compliance Checklist (G1–G55)",
            "accent_color": "#059669",
        },
        "assessment_sections": GCC_ASSESSMENT_SECTIONS,
        "scoring": {
            "model": "percentage",
            "tiers": [
                {"min": 85, "label": "Grade A — Excellent", "color": "#22c55e"},
                {"min": 70, "label": "Grade B — Good", "color": "#3b82f6"},
                {"min": 55, "label": "Grade C — Acceptable", "color": "#f59e0b"},
                {"min": 0, "label": "Grade D — Poor", "color": "#ef4444"},
            ],
        },
        "sections": GCC_SECTIONS,
        "features": {**_GCC_FEATURES, "has_star_rating": False, "has_grading_system": True},
        "supplier": {
            "business_id_label": "Trade Licence",
            "business_id_placeholder": "Dubai Trade Licence Number",
        },
        "assessment_framework_filter": "dm",
        "wizard_steps": _gcc_wizard(
            "Trade Licence",
            "Enter your Dubai Municipality food trade licence",
            "Trade Licence Number",
            "Person in Charge (PIC)",
            "Enter your certified PIC details",
            "PIC Name",
            "PIC Certificate Number",
            placeholder="e.g. TL-12345",
        ),
    }
)

# Abu Dhabi Agriculture & Food Safety Authority: Zadna 1-5 stars
ADAFSA_CONFIG: ComplianceFrameworkConfig = derive_framework(
    {
        "id": "adafsa",
        "region_id": "uae",
        "locale": "en-AE",
        "labels": {
            "framework_name": "ADAFSA Compliance",
            "framework_short": "ADAFSA",
            "licence_label": "ADAFSA Licence Number",
            "supervisor_role": "Person in Charge (PIC)",
            "cert_body": "Abu Dhabi Agriculture and Food Safety Authority",
            "assessment_title": "Zadna Self-Assessment",
            "assessment_subtitle": "ADAFSA Food Safety Checklist (G1–G55)",
            "accent_color": "#059669",
        },
        "assessment_sections": GCC_ASSESSMENT_SECTIONS,
        "scoring": {
            "model": "star_rating",
            "compute_star_rating": adafsa_star_rating,
            "tiers": [
                {"min": 5, "label": "Outstanding", "color": "#f59e0b"},
                {"min": 4, "label": "Very Good", "color": "#22c55e"},
                {"min": 3, "label": "Good", "color": "#3b82f6"},
                {"min": 2, "label": "Acceptable", "color": "#f97316"},
                {"min": 0, "label": "Needs Improvement", "color": "#ef4444"},
            ],
        },
        "sections": GCC_SECTIONS,
        "features": {**_GCC_FEATURES, "has_star_rating": True, "has_grading_system": False},
        "supplier": {
            "business_id_label": "Trade Licence",
            "business_id_placeholder": "Abu Dhabi Trade Licence Number",
        },
        "assessment_framework_filter": "adafsa",
        "wizard_steps": _gcc_wizard(
            "ADAFSA Licence",
            "Enter your Abu Dhabi food establishment licence",
            "ADAFSA Licence Number",
            "Person in Charge (PIC)",
            "Enter your certified PIC details",
            "PIC Name",
            "E-FST Certificate Number",
        ),
    }
)

# Sharjah Municipality: GHP/HACCP focus, pass/fail inspections
SM_SHARJAH_CONFIG: ComplianceFrameworkConfig = derive_framework(
    {
        "id": "sm_sharjah",
        "region_id": "uae",
        "locale": "en-AE",
        "labels": {
            "framework_name": "Sharjah Municipality Compliance",
            "framework_short": "SM",
            "licence_label": "Trade Licence Number",
            "supervisor_role": "GHP Manager",
            "cert_body": "Sharjah Municipality — Public Health Department",
            "assessment_title": "SFSP Self-Assessment",
            "assessment_subtitle": "Sharjah Food Safety Program Checklist (G1–G55)",
            "accent_color": "#059669",
        },
        "assessment_sections": GCC_ASSESSMENT_SECTIONS,
        "scoring": {
            "model": "percentage",
            "tiers": [
                {"min": 80, "label": "Compliant", "color": "#22c55e"},
                {"min": 60, "label": "Conditional Pass", "color": "#f59e0b"},
                {"min": 0, "label": "Non-Compliant", "color": "#ef4444"},
            ],
        },
        "sections": GCC_SECTIONS,
        "features": {**_GCC_FEATURES, "has_star_rating": False, "has_grading_system": False},
        "supplier": {
            "business_id_label": "Trade Licence",
            "business_id_placeholder": "Sharjah Trade Licence Number",
        },
        "assessment_framework_filter": "sm_sharjah",
        "wizard_steps": _gcc_wizard(
            "Trade Licence",
            "Enter your Sharjah Municipality food trade licence",
            "Trade Licence Number",
            "GHP Manager",
            "Enter your GHP/HACCP manager details",
            "GHP Manager Name",
            "Training Certificate Number",
        ),
    }
)

GCC_FRAMEWORKS: tuple[ComplianceFrameworkConfig, ...] = (
    DM_CONFIG,
    ADAFSA_CONFIG,
    SM_SHARJAH_CONFIG,
)
