"""Food Safety and Standards Authority of India framework.

Checklist F1-F30 follows Schedule 4 of the Food Safety and Standards
(Licensing and Registration of Food Businesses) Regulations, 2011: general
hygienic and sanitary practices for food service establishments. Scores map
onto the FSSAI Hygiene Rating bands.
"""

from __future__ import annotations

import re

from eatsafe.frameworks.bcc import CRITICAL, MAJOR, MINOR, SECTIONS_STEP, checklist_items, derive_framework
from eatsafe.models import AssessmentSection, ComplianceFrameworkConfig

FSSAI_LICENCE_PATTERN = re.compile(r"^\d{14}$")

LICENCE_TYPE_OPTIONS = [
    {"label": "Registration (Turnover < ₹12 lakh)", "value": "registration"},
    {"label": "State Licence (₹12-20 crore)", "value": "state"},
    {"label": "Central Licence (> ₹20 crore)", "value": "central"},
]

_DOCS = "Licensing & Documentation"
_PREMISES = "Premises & Facilities"
_HANDLING = "Food Operations & Control"
_PERSONAL = "Personal Hygiene"
_SANITATION = "Cleaning, Sanitation & Pest Control"

FSSAI_ASSESSMENT_SECTIONS: tuple[AssessmentSection, ...] = (
    AssessmentSection(
        key="licensing_documentation",
        label=_DOCS,
        items=checklist_items(
            _DOCS,
            ("F1", "FSSAI licence/registration — Is a valid FSSAI licence or registration certificate held for the activities carried out?", [CRITICAL]),
            ("F2", "Licence display — Is the FSSAI licence/registration displayed at a prominent place in the premises?", [MINOR]),
            ("F3", "FoSTaC supervisor — Is at least one FoSTaC-trained food safety supervisor available per 25 food handlers?", [MAJOR], "Food Safety Training and Certification under FSSAI"),
            ("F4", "Medical fitness — Do all food handlers hold a medical fitness certificate renewed annually?", [MAJOR], "Schedule 4, Part II, clause 10", True),
            ("F5", "Water testing — Is potable water tested at least every six months from an FSSAI-recognised laboratory?", [MAJOR], None, True),
            ("F6", "Records — Are records of production, raw material receipt and sale maintained for the shelf life of the product or one year?", [MINOR]),
        ),
    ),
    AssessmentSection(
        key="premises_facilities",
        label=_PREMISES,
        items=checklist_items(
            _PREMISES,
            ("F7", "Location — Is the premises located away from environmentally polluted areas and free from filth?", [MAJOR]),
            ("F8", "Design — Are walls, floors and ceilings smooth, impervious, easy to clean and free from flaking paint or plaster?", [MINOR, MAJOR]),
            ("F9", "Ventilation and lighting — Are ventilation and lighting adequate in food preparation and storage areas?", [MINOR]),
            ("F10", "Water supply — Is an adequate supply of potable water available for food preparation and cleaning?", [CRITICAL]),
            ("F11", "Handwashing — Are handwash facilities with soap and clean towels or dryers provided near the food preparation area?", [MAJOR, CRITICAL]),
            ("F12", "Drainage and waste — Are drainage and waste disposal systems adequate and designed to prevent contamination?", [MAJOR]),
        ),
    ),
    AssessmentSection(
        key="food_operations",
        label=_HANDLING,
        items=checklist_items(
            _HANDLING,
            ("F13", "Raw materials — Are raw materials procured from licensed/registered suppliers and inspected on receipt?", [MAJOR], None, True),
            ("F14", "Storage — Are raw and cooked foods stored separately, off the floor and in food-grade containers?", [MAJOR, CRITICAL]),
            ("F15", "Cold storage — Is chilled food held at or below 5°C and frozen food at or below -18°C?", [MAJOR, CRITICAL], None, True),
            ("F16", "Cooking — Is food cooked thoroughly to a core temperature of at least 75°C?", [CRITICAL], None, True),
            ("F17", "Hot holding — Is hot food held at 60°C or above until service?", [MAJOR, CRITICAL], None, True),
            ("F18", "Thawing and reheating — Are frozen foods thawed under refrigeration and reheated only once?", [MAJOR]),
            ("F19", "Cooking oil — Is cooking oil monitored and discarded once Total Polar Compounds exceed 25%?", [MAJOR], "FSSAI Repurpose Used Cooking Oil (RUCO) requirement", True),
            ("F20", "Labelling — Are prepacked foods labelled with the FSSAI logo, licence number, ingredients and best-before date?", [MINOR, MAJOR]),
            ("F21", "Allergens and additives — Are only permitted additives used within prescribed limits, with allergens declared?", [MAJOR]),
        ),
    ),
    AssessmentSection(
        key="personal_hygiene",
        label=_PERSONAL,
        items=checklist_items(
            _PERSONAL,
            ("F22", "Protective clothing — Do food handlers wear clean aprons, head covers and gloves where required?", [MINOR, MAJOR]),
            ("F23", "Illness exclusion — Are food handlers with infectious disease symptoms excluded from food handling?", [CRITICAL]),
            ("F24", "Behaviour — Do food handlers refrain from smoking, spitting, chewing or eating in food handling areas?", [MINOR, MAJOR]),
            ("F25", "Hand hygiene — Do food handlers wash hands with soap before handling food and after using the toilet?", [MAJOR, CRITICAL]),
        ),
    ),
    AssessmentSection(
        key="sanitation_pest_control",
        label=_SANITATION,
        items=checklist_items(
            _SANITATION,
            ("F26", "Cleaning schedule — Is a documented cleaning programme followed for premises and equipment?", [MINOR, MAJOR], None, True),
            ("F27", "Food contact surfaces — Are food contact surfaces and utensils cleaned and sanitised after each use?", [MAJOR, CRITICAL]),
            ("F28", "Pest control — Is pest control carried out by a trained agency at least monthly, with records kept?", [MAJOR], None, True),
            ("F29", "Pest evidence — Is the premises free from any evidence of pest infestation?", [CRITICAL]),
            ("F30", "Waste — Is food waste stored in covered bins and removed daily?", [MINOR]),
        ),
    ),
)

FSSAI_CONFIG: ComplianceFrameworkConfig = derive_framework(
    {
        "id": "fssai",
        "region_id": "in",
        "locale": "en-IN",
        "labels": {
            "framework_name": "FSSAI Food Safety Compliance",
            "framework_short": "FSSAI",
            "licence_label": "FSSAI Licence Number",
            "supervisor_role": "FoSTaC Food Safety Supervisor",
            "cert_body": "Food Safety and Standards Authority of India",
            "assessment_title": "Schedule 4 Self-Assessment",
            "assessment_subtitle": "FSSAI Hygiene & Sanitary Practices Checklist (F1–F30)",
            "accent_color": "#EA580C",
        },
        "assessment_sections": FSSAI_ASSESSMENT_SECTIONS,
        "scoring": {
            "model": "percentage",
            "tiers": [
                {"min": 81, "label": "Excellent", "color": "#10B981"},
                {"min": 61, "label": "Very Good", "color": "#22C55E"},
                {"min": 41, "label": "Good", "color": "#F59E0B"},
                {"min": 21, "label": "Fair", "color": "#F97316"},
                {"min": 0, "label": "Needs Improvement", "color": "#EF4444"},
            ],
        },
        "features": {
            "has_star_rating": False,
            "has_grading_system": True,
        },
        "supplier": {
            "business_id_label": "GSTIN",
            "business_id_placeholder": "15-character GST Identification Number",
        },
        "assessment_framework_filter": "fssai",
        "wizard_steps": [
            {
                "key": "licence",
                "title": "FSSAI Licence",
                "subtitle": "Enter your FSSAI licence or registration details",
                "fields": [
                    {"key": "bcc_licence_number", "label": "FSSAI Licence Number", "type": "text", "required": True, "placeholder": "14-digit licence number"},
                    {"key": "fssai_licence_type", "label": "Licence Type", "type": "select", "options": LICENCE_TYPE_OPTIONS},
                    {"key": "licence_expiry", "label": "Licence Expiry", "type": "date"},
                    {"key": "licence_displayed", "label": "Licence Displayed", "type": "boolean"},
                ],
            },
            {
                "key": "fss",
                "title": "Food Safety Supervisor",
                "subtitle": "Enter your FoSTaC-trained supervisor details",
                "fields": [
                    {"key": "name", "label": "Supervisor Name", "type": "text", "required": True},
                    {"key": "certificate_number", "label": "FoSTaC Certificate Number", "type": "text"},
                    {"key": "certificate_date", "label": "Certificate Date", "type": "date"},
                    {"key": "fostac_certified", "label": "FoSTaC Certified", "type": "boolean"},
                ],
            },
            SECTIONS_STEP,
        ],
    }
)


def is_valid_fssai_licence(value: str | None) -> bool:
    """Check an FSSAI licence/registration number (exactly 14 digits)."""
    if not isinstance(value, str):
        return False
    return bool(FSSAI_LICENCE_PATTERN.match(value.strip()))
