"""Brisbane City Council Eat Safe: the baseline framework.

Every other framework is derived from ``BCC_CONFIG`` through
``derive_framework``; any field a regime does not override is inherited
from here.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from eatsafe.errors import FrameworkDefinitionError
from eatsafe.frameworks.inheritance import derive
from eatsafe.models import (
    AssessmentItem,
    AssessmentSection,
    ComplianceFrameworkConfig,
    FeatureFlags,
    FieldOption,
    FieldType,
    ProfileField,
    RegulatoryLabels,
    ScoringConfig,
    ScoringModel,
    ScoringTier,
    SectionDefinition,
    Severity,
    SupplierConfig,
    TableMapping,
    WizardStep,
)
from eatsafe.scoring.star import bcc_star_rating

MINOR = Severity.MINOR
MAJOR = Severity.MAJOR
CRITICAL = Severity.CRITICAL


def checklist_items(category: str, *rows: tuple) -> tuple[AssessmentItem, ...]:
    """Build checklist items sharing one category.

    Each row is ``(code, text, severities, detail=None, has_evidence=False)``.
    """
    items = []
    for row in rows:
        code, text, severities, *rest = row
        detail = rest[0] if rest else None
        has_evidence = rest[1] if len(rest) > 1 else False
        items.append(
            AssessmentItem(
                code=code,
                category=category,
                text=text,
                severities=tuple(severities),
                detail=detail,
                has_evidence=has_evidence,
            )
        )
    return tuple(items)


# =============================================================================
# Assessment checklist (A1-A40)
# =============================================================================

_GENERAL = "General Requirements"
_HANDLING = "Food Handling Controls"
_HYGIENE = "Health and Hygiene Requirements"
_CLEANING = "Cleaning, Sanitising and Maintenance"
_MISC = "Miscellaneous"

BCC_ASSESSMENT_SECTIONS: tuple[AssessmentSection, ...] = (
    AssessmentSection(
        key="general_requirements",
        label=_GENERAL,
        items=checklist_items(
            _GENERAL,
            ("A1", "Licence – Is your Council food business licence current?", [MINOR], "i.e. no outstanding fees"),
            ("A2", "Licence – Is the current licence displayed prominently on the premises?", [MINOR, MAJOR]),
            ("A3", "Licence Conditions – Is your business complying with all site specific licence conditions (if applicable)?", [MINOR]),
            ("A4", "Previous non-compliances – Has your business fixed all previous non-compliance items?", [MINOR, MAJOR]),
            ("A5", "Design – Does your business comply with the structural requirements of the Food Safety Standards?", [MINOR]),
            ("A6", "Food Safety Supervisor – Have you notified Council who your Food Safety Supervisor is/are?", [MAJOR]),
            ("A7", "Food Safety Supervisor – Is the Food Safety Supervisor reasonably available/contactable?", [MINOR, MAJOR]),
            ("A8", "Food Safety Supervisor – Does the FSS have an RTO issued certificate that is no more than 5 years old?", [MINOR, MAJOR]),
            ("A9", "Food Safety Program – If required, does your food business have an accredited Food Safety Program?", [MAJOR], "Category 1 and 2 businesses only"),
            ("A10", "Skills and knowledge – Do you and your employees have appropriate skills and knowledge in food safety and hygiene matters?", [MINOR, CRITICAL]),
        ),
    ),
    AssessmentSection(
        key="food_handling_controls",
        label=_HANDLING,
        items=checklist_items(
            _HANDLING,
            ("A11", "Receival – Is food protected from contamination at receival and are potentially hazardous foods accepted at the correct temperature?", [MINOR, CRITICAL], None, True),
            ("A12", "Food storage – Is all food stored appropriately so that it is protected from contamination?", [MINOR, MAJOR], "cold room / fridge • freezer • dry store"),
            ("A13", "Food storage – Is potentially hazardous food stored under temperature control?", [MINOR, MAJOR], "cold food = 5°C and below • hot food = 60°C and above • frozen food = remain frozen", True),
            ("A14", "Food processing – Are suitable measures in place to prevent contamination?", [MINOR, MAJOR], "e.g. cross contamination"),
            ("A15", "Food processing – Is potentially hazardous food that is ready to eat and held outside of temperature control monitored correctly?", [MINOR, CRITICAL], "e.g. 2 hour / 4 hour rule", True),
            ("A16", "Thawing – Are acceptable methods used to thaw food?", [MINOR, MAJOR], None, True),
            ("A17", "Cooling – Are acceptable methods used to cool food?", [MINOR, MAJOR], None, True),
            ("A18", "Reheating – Are appropriate reheating procedures followed?", [MINOR, CRITICAL], None, True),
            ("A19", "Food display – Is food on display protected from contamination?", [MINOR, MAJOR]),
            ("A20", "Food display – Is potentially hazardous food displayed under correct temperature control?", [MINOR, MAJOR], None, True),
            ("A21", "Food packaging – Is food packaged in a manner that protects it from contamination?", [MINOR]),
            ("A22", "Food transportation – Is food transported in a manner that protects it from contamination and keeps it at the appropriate temperature?", [MINOR], None, True),
            ("A23", "Food for disposal – Do you use acceptable arrangements for throwing out food?", [MINOR]),
            ("A24", "Food recall – If you are a wholesale supplier, manufacturer or importer of food, does your food business comply with the food recall requirements?", [MINOR]),
            ("A25", "Alternative methods – Are your documented alternative compliance methods acceptable?", [MINOR], "i.e. receipt, storage, cooling, reheating, display, transport"),
        ),
    ),
    AssessmentSection(
        key="health_hygiene",
        label=_HYGIENE,
        items=checklist_items(
            _HYGIENE,
            ("A26", "Contact with food – Does your business minimise the risk of contamination of food and food contact surfaces?", [MINOR, CRITICAL]),
            ("A27", "Health of food handlers – Do you ensure staff members do not engage in food handling if they are suffering from a food-borne illness or are sick?", [MINOR, MAJOR]),
            ("A28", "Hygiene – Do food handlers exercise good hygiene practices?", [MINOR, CRITICAL], "e.g. cleanliness of clothing, not eating over surfaces, washing hands correctly and at appropriate times, jewellery"),
            ("A29", "Hand washing facilities – Does your business have adequate hand washing facilities?", [MINOR, CRITICAL], "soap • warm running water • single use towel • easily accessible basin"),
            ("A30", "Duty of food business – Do you inform food handlers of their obligations and take measures to ensure they do not contaminate food?", [MINOR, CRITICAL]),
        ),
    ),
    AssessmentSection(
        key="cleaning_maintenance",
        label=_CLEANING,
        items=checklist_items(
            _CLEANING,
            ("A31", "Cleanliness – Are the floors, walls and ceilings maintained in a clean condition?", [MINOR, CRITICAL]),
            ("A32", "Cleanliness – Are the fixtures, fittings and equipment maintained in a clean condition?", [MINOR, MAJOR, CRITICAL], "mechanical exhaust ventilation • fridges, coolrooms, freezers • benches, shelves, cooking equipment", True),
            ("A33", "Sanitation – Has your business provided clean and sanitary equipment including eating/drinking utensils and food contact surfaces? Are food contact surfaces sanitised correctly?", [MINOR, MAJOR], None, True),
            ("A34", "Maintenance – Does your business ensure no damaged (cracked/broken) utensils, crockery, cutting boards are used?", [MINOR, CRITICAL]),
            ("A35", "Maintenance – Are your premises’ fixtures, fittings and equipment maintained in a good state of repair and working order?", [MINOR, CRITICAL], "floors, walls & ceilings • fixtures, fittings & equipment • mechanical exhaust ventilation"),
        ),
    ),
    AssessmentSection(
        key="miscellaneous",
        label=_MISC,
        items=checklist_items(
            _MISC,
            ("A36", "Thermometer – Does your food business (if handling potentially hazardous food) have a thermometer?", [MINOR, CRITICAL]),
            ("A37", "Single Use Items – Are single use items protected from contamination until use and not used more than once?", [MINOR]),
            ("A38", "Toilet – Are adequate staff toilets provided and in a clean state?", [MINOR, CRITICAL]),
            ("A39", "Animals and pests – Is your food business completely free from animals or vermin (assistance animals exempt)?", [MINOR, MAJOR]),
            ("A40", "Animals and pests – Are animals and pests prevented from being on the premises?", [MINOR, CRITICAL]),
        ),
    ),
)

# =============================================================================
# Togglable logging sections
# =============================================================================

BCC_SECTIONS: tuple[SectionDefinition, ...] = (
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
    SectionDefinition("display_monitoring", "Display Monitoring", False, home_cook_default=False),
    SectionDefinition("transport_logs", "Transport Logs", False, home_cook_default=False),
    SectionDefinition("cleaning_schedules", "Cleaning Schedules", True),
    SectionDefinition("equipment_calibration", "Equipment & Calibration", True, home_cook_default=False),
    SectionDefinition("supplier_register", "Supplier Register", True, home_cook_default=False),
    SectionDefinition("self_assessment", "Self-Assessment (A1–A40)", True),
    SectionDefinition("grease_trap", "Grease Trap", True, home_cook_default=False),
    SectionDefinition("hood_cleaning", "Hood Cleaning", True, home_cook_default=False),
    SectionDefinition("chemical_safety", "Chemical Safety", True),
    SectionDefinition("haccp", "HACCP Plan", True, home_cook_default=False),
    SectionDefinition("audit_docs", "Audit & Documents", True, home_cook_default=False),
    SectionDefinition("eq_training", "Equipment Training", True, home_cook_default=False),
)

# =============================================================================
# Onboarding wizard
# =============================================================================

SECTIONS_STEP = WizardStep(
    key="sections",
    title="Compliance Sections",
    subtitle="Choose which compliance sections to enable",
)

BCC_WIZARD_STEPS: tuple[WizardStep, ...] = (
    WizardStep(
        key="licence",
        title="Licence Details",
        subtitle="Enter your BCC food business licence information",
        fields=(
            ProfileField("bcc_licence_number", "BCC Licence Number", FieldType.TEXT, required=True, placeholder="e.g. FBL-12345"),
            ProfileField("licence_expiry", "Licence Expiry Date", FieldType.DATE),
            ProfileField("licence_displayed", "Licence Displayed on Premises", FieldType.BOOLEAN),
        ),
    ),
    WizardStep(
        key="category",
        title="Business Category",
        subtitle="Select your category under FSANZ Standard 3.2.2A",
        fields=(
            ProfileField(
                "business_category",
                "Business Category",
                FieldType.SELECT,
                options=(
                    FieldOption("Category 1 – Higher risk (e.g. restaurants, caterers)", "category_1"),
                    FieldOption("Category 2 – Lower risk (e.g. retail, packaged food)", "category_2"),
                ),
            ),
        ),
    ),
    WizardStep(
        key="fss",
        title="Food Safety Supervisor",
        subtitle="Enter your primary FSS details and certificate info",
        fields=(
            ProfileField("name", "Supervisor Name", FieldType.TEXT, required=True),
            ProfileField("certificate_number", "Certificate Number", FieldType.TEXT),
            ProfileField("certificate_date", "Certificate Date", FieldType.DATE),
            ProfileField("notified_council", "Council Notified", FieldType.BOOLEAN),
        ),
    ),
    WizardStep(
        key="program",
        title="Food Safety Program",
        subtitle="Is your food safety program accredited?",
        fields=(
            ProfileField("food_safety_program_accredited", "Program Accredited", FieldType.BOOLEAN),
            ProfileField("food_safety_program_auditor", "Auditor Name", FieldType.TEXT, placeholder="e.g. AUS-QUAL, SAI Global"),
        ),
    ),
    SECTIONS_STEP,
)

# All frameworks share the same physical tables
SHARED_TABLES = TableMapping(
    compliance_profiles="compliance_profiles",
    section_toggles="bcc_section_toggles",
    audit_self_assessments="audit_self_assessments",
    supplier_register="bcc_supplier_register",
    cleaning_schedules="bcc_cleaning_schedules",
    cleaning_completions="bcc_cleaning_completions",
    pest_control_logs="bcc_pest_control_logs",
    equipment_calibration_logs="bcc_equipment_calibration_logs",
    corrective_actions="corrective_actions",
    daily_compliance_logs="daily_compliance_logs",
    food_safety_supervisors="food_safety_supervisors",
    food_handler_training="food_handler_training",
)

BCC_TABS: tuple[str, ...] = (
    "temp_grid", "burst", "overview", "actions", "a1a40", "equipment",
    "pest", "grease", "hood", "chemical", "haccp", "receiving",
    "training", "eq_training", "cleaning_bcc", "suppliers_bcc", "audit", "sections",
    "staff_health", "cooking_log", "cooling_log", "reheating_log",
    "display_monitoring", "transport_log", "handwash_check", "sanitiser_check", "kitchen_clean",
    "temp_setup", "receiving_setup",
)

BCC_STAR_TIERS: tuple[ScoringTier, ...] = (
    ScoringTier(5, "Excellent Performer", "#10B981"),
    ScoringTier(4, "Very Good Performer", "#22C55E"),
    ScoringTier(3, "Good Performer", "#F59E0B"),
    ScoringTier(2, "Poor Performer", "#EF4444"),
    ScoringTier(0, "Non-Compliant Performer", "#DC2626"),
)

BCC_CONFIG = ComplianceFrameworkConfig(
    id="bcc",
    region_id="au",
    locale="en-AU",
    labels=RegulatoryLabels(
        framework_name="BCC Eat Safe Compliance",
        framework_short="BCC",
        licence_label="BCC Licence Number",
        licence_field_key="bcc_licence_number",
        supervisor_role="Food Safety Supervisor",
        cert_body="Brisbane City Council",
        assessment_title="Self-Assessment (A1–A40)",
        assessment_subtitle="Eat Safe Brisbane Food Safety Checklist",
        accent_color="#000080",
    ),
    assessment_sections=BCC_ASSESSMENT_SECTIONS,
    scoring=ScoringConfig(
        model=ScoringModel.STAR_RATING,
        tiers=BCC_STAR_TIERS,
        compute_star_rating=bcc_star_rating,
    ),
    sections=BCC_SECTIONS,
    wizard_steps=BCC_WIZARD_STEPS,
    tables=SHARED_TABLES,
    features=FeatureFlags(
        has_supervisors=True,
        has_training_register=True,
        has_severity_levels=True,
        has_evidence_checks=True,
        has_star_rating=True,
        has_grading_system=False,
        has_halal_tracking=False,
    ),
    supplier=SupplierConfig(
        business_id_label="ABN",
        business_id_placeholder="Australian Business Number",
    ),
    available_tabs=BCC_TABS,
)


def derive_framework(overrides: Mapping[str, Any]) -> ComplianceFrameworkConfig:
    """Derive a framework from the BCC baseline.

    Args:
        overrides: Partial override tree; must at least carry ``id``.

    Raises:
        FrameworkDefinitionError: On a missing ``id``, unknown fields or
            incompatible values.
    """
    if not overrides.get("id"):
        raise FrameworkDefinitionError("derived frameworks must set an 'id'", "id")
    return derive(BCC_CONFIG, overrides)
