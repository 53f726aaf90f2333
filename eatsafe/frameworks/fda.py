"""US FDA Food Code framework (D1-D40, pass/fail percentage)."""

from __future__ import annotations

from eatsafe.frameworks.bcc import CRITICAL, MAJOR, MINOR, SECTIONS_STEP, checklist_items, derive_framework
from eatsafe.models import AssessmentSection, ComplianceFrameworkConfig

_PERSONNEL = "Person In Charge & Personnel"
_TEMP = "Temperature Control"
_TPHC = "Time as a Public Health Control"
_SOURCE = "Food Source & Protection"
_FACILITIES = "Facilities & Equipment"
_RECORDS = "Compliance & Records"

FDA_ASSESSMENT_SECTIONS: tuple[AssessmentSection, ...] = (
    AssessmentSection(
        key="person_in_charge_personnel",
        label=_PERSONNEL,
        items=checklist_items(
            _PERSONNEL,
            ("D1", "Certified Food Protection Manager (CFPM) is on-site during all hours of operation with a valid ANSI-accredited certificate", [MAJOR]),
            ("D2", "Person In Charge (PIC) is present and demonstrates knowledge of foodborne disease prevention, HACCP principles, and applicable food laws", [MAJOR]),
            ("D3", "Employee health policy addresses the Big 5 illnesses (Norovirus, Hepatitis A, Shigella, Salmonella Typhi, E. coli O157:H7) — symptomatic employees are excluded or restricted per FDA Food Code", [CRITICAL]),
            ("D4", "Proper handwashing practiced — hands washed for at least 20 seconds with warm water, soap, and single-use towels at designated handwash sinks", [CRITICAL], None, True),
            ("D5", "No bare-hand contact with ready-to-eat (RTE) food — suitable utensils, single-use gloves, deli tissue, or dispensing equipment used", [CRITICAL]),
            ("D6", "Food employees wear clean outer clothing to prevent contamination of food and food-contact surfaces", [MINOR]),
            ("D7", "Effective hair restraints worn by food employees to prevent hair from contacting exposed food, clean equipment, and utensils", [MINOR]),
            ("D8", "Single-use gloves used properly — changed between tasks, after contamination, and when damaged or soiled", [MAJOR]),
        ),
    ),
    AssessmentSection(
        key="temperature_control",
        label=_TEMP,
        items=checklist_items(
            _TEMP,
            ("D9", "Cold holding: TCS (Time/Temperature Control for Safety) food held at 41°F (5°C) or below", [CRITICAL], None, True),
            ("D10", "Hot holding: TCS food held at 135°F (57°C) or above", [CRITICAL], None, True),
            ("D11", "Cooking — Poultry (including stuffed meats and stuffing containing meat): internal temperature reaches 165°F (74°C) for 15 seconds", [CRITICAL], None, True),
            ("D12", "Cooking — Ground meat and ground fish: internal temperature reaches 155°F (68°C) for 15 seconds", [CRITICAL], None, True),
            ("D13", "Cooking — Whole intact meat, fish, and eggs for immediate service: internal temperature reaches 145°F (63°C) for 15 seconds", [CRITICAL], None, True),
            ("D14", "Cooking — Eggs for immediate service: cooked to 145°F (63°C) for 15 seconds (or consumer requested preparation)", [CRITICAL], None, True),
            ("D15", "Cooling: TCS food cooled from 135°F to 70°F (57°C to 21°C) within 2 hours, then from 70°F to 41°F (21°C to 5°C) within the next 4 hours (total 6 hours)", [CRITICAL], None, True),
            ("D16", "Reheating: previously cooked TCS food reheated to 165°F (74°C) within 2 hours before being placed in hot holding", [CRITICAL], None, True),
            ("D17", "Date marking: refrigerated RTE TCS food held at 41°F (5°C) or below is marked with a use-by date not exceeding 7 days from preparation (day of preparation = Day 1)", [MAJOR], None, True),
            ("D18", "Thawing conducted by approved methods: under refrigeration at 41°F (5°C) or below, under running water at 70°F (21°C) or below, in a microwave followed by immediate cooking, or as part of the cooking process", [MAJOR], None, True),
        ),
    ),
    AssessmentSection(
        key="time_temperature_management",
        label=_TPHC,
        items=checklist_items(
            _TPHC,
            ("D19", "Time as a public health control (TPHC): when used, food is discarded after 4 hours if not served or sold; written procedures are maintained and food is marked with discard time", [CRITICAL], None, True),
        ),
    ),
    AssessmentSection(
        key="food_source_protection",
        label=_SOURCE,
        items=checklist_items(
            _SOURCE,
            ("D20", "Food obtained from approved, inspected sources — all food and ingredients meet FDA, USDA, or state regulatory requirements", [CRITICAL]),
            ("D21", "Shellfish tags and labels retained for 90 days from the date the last shellfish from the container was sold or served", [MAJOR]),
            ("D22", "Parasite destruction for raw or undercooked fish: frozen at -4°F (-20°C) or below for 7 days, or -31°F (-35°C) for 15 hours (except tuna species)", [CRITICAL]),
            ("D23", "Food protected from cross-contamination during storage, preparation, holding, and display — raw animal foods stored below RTE foods", [CRITICAL]),
            ("D24", "Proper food labelling: all packaged food bears labels with common name, ingredients, allergens, net quantity, and manufacturer information per 21 CFR 101", [MAJOR]),
            ("D25", "Consumer advisory provided for raw or undercooked animal foods — written disclosure and reminder on menu or signage (e.g., asterisk with footnote)", [MAJOR]),
            ("D26", "FIFO (First In, First Out) stock rotation practiced — oldest products used first, expired items removed from inventory", [MINOR]),
            ("D27", "Food stored in food-grade containers that are durable, non-toxic, and clearly labelled — no corroded or compromised containers in use", [MINOR]),
        ),
    ),
    AssessmentSection(
        key="facilities_equipment",
        label=_FACILITIES,
        items=checklist_items(
            _FACILITIES,
            ("D28", "Handwashing sinks accessible, unobstructed, and supplied with warm water at 100°F (38°C) or above, soap, and single-use towels or air dryers", [CRITICAL], None, True),
            ("D29", "Warewashing: manual operation uses wash-rinse-sanitize three-compartment sink; mechanical warewashing machines reach proper temperatures (wash 150°F / rinse 180°F for hot-water sanitizing, or chemical sanitizer at correct concentration)", [MAJOR]),
            ("D30", "Food-contact surfaces clean and sanitized before use, after each use, and at least every 4 hours during continuous use — sanitizer concentration tested and documented", [CRITICAL], None, True),
            ("D31", "Non-food-contact surfaces (floors, walls, ceilings, equipment exteriors) maintained in clean condition and good repair", [MAJOR]),
            ("D32", "Proper ventilation: mechanical exhaust hoods and fans adequate to remove grease, steam, smoke, and odors; filters clean and maintained", [MAJOR]),
            ("D33", "Adequate lighting provided: at least 50 foot-candles on food preparation surfaces, 20 foot-candles in handwashing and warewashing areas, and 10 foot-candles in walk-in coolers and dry storage", [MAJOR]),
            ("D34", "Plumbing in good repair with no cross-connections; sewage and waste water properly disposed; backflow prevention devices installed where required", [MAJOR]),
            ("D35", "Toilet facilities adequate in number, clean, in good repair, and equipped with self-closing doors that do not open directly into food preparation areas", [MAJOR]),
        ),
    ),
    AssessmentSection(
        key="compliance_records",
        label=_RECORDS,
        items=checklist_items(
            _RECORDS,
            ("D36", "HACCP plan developed and implemented where required (juice, seafood, reduced oxygen packaging, or other processes requiring a variance)", [MINOR]),
            ("D37", "Variance documentation on file from the regulatory authority for any specialized processing methods (e.g., smoking for preservation, curing, ROP)", [MINOR]),
            ("D38", "Employee health agreements signed — all food employees have acknowledged reporting requirements for Big 5 illnesses and symptoms", [MINOR]),
            ("D39", "Temperature monitoring logs maintained: cold holding, hot holding, cooking, cooling, and reheating temperatures recorded and reviewed daily", [MINOR], "Logs should include date, time, item, temperature, initials, and corrective actions taken", True),
            ("D40", "Cleaning and sanitizing schedules maintained and documented — includes frequency, method, responsible person, and sanitizer concentration records", [MINOR]),
        ),
    ),
)

FDA_CONFIG: ComplianceFrameworkConfig = derive_framework(
    {
        "id": "fda",
        "region_id": "us",
        "locale": "en-US",
        "labels": {
            "framework_name": "FDA Food Safety Compliance",
            "framework_short": "FDA",
            "licence_label": "Health Permit Number",
            "supervisor_role": "Certified Food Protection Manager",
            "cert_body": "Food and Drug Administration",
            "assessment_title": "Food Safety Self-Assessment",
            "assessment_subtitle": "FDA Food Code Compliance Checklist",
            "accent_color": "#7C3AED",
        },
        "assessment_sections": FDA_ASSESSMENT_SECTIONS,
        "scoring": {
            "model": "percentage",
            "tiers": [
                {"min": 90, "label": "Pass – Excellent", "color": "#10B981"},
                {"min": 70, "label": "Pass – Satisfactory", "color": "#F59E0B"},
                {"min": 0, "label": "Fail – Unsatisfactory", "color": "#EF4444"},
            ],
        },
        "assessment_framework_filter": "fda",
        "supplier": {
            "business_id_label": "EIN",
            "business_id_placeholder": "Employer Identification Number",
        },
        "wizard_steps": [
            {
                "key": "licence",
                "title": "Health Permit",
                "subtitle": "Enter your food establishment health permit",
                "fields": [
                    {"key": "bcc_licence_number", "label": "Health Permit Number", "type": "text", "required": True},
                    {"key": "licence_expiry", "label": "Permit Expiry", "type": "date"},
                    {"key": "licence_displayed", "label": "Permit Displayed", "type": "boolean"},
                ],
            },
            {
                "key": "fss",
                "title": "Certified Food Protection Manager",
                "subtitle": "Enter your CFPM certification details",
                "fields": [
                    {"key": "name", "label": "Manager Name", "type": "text", "required": True},
                    {"key": "certificate_number", "label": "ANSI Certificate Number", "type": "text"},
                    {"key": "certificate_date", "label": "Certificate Date", "type": "date"},
                ],
            },
            SECTIONS_STEP,
        ],
    }
)
