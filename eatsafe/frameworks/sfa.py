"""Singapore Food Agency framework (S1-S40, A-D grading)."""

from __future__ import annotations

from eatsafe.frameworks.bcc import CRITICAL, MAJOR, MINOR, SECTIONS_STEP, checklist_items, derive_framework
from eatsafe.models import AssessmentSection, ComplianceFrameworkConfig

_PERSONNEL = "Licence & Personnel"
_TEMP = "Temperature Control"
_HANDLING = "Food Handling & Contamination"
_PREMISES = "Premises & Equipment"
_DOCS = "Documentation & Compliance"

SFA_ASSESSMENT_SECTIONS: tuple[AssessmentSection, ...] = (
    AssessmentSection(
        key="licence_personnel",
        label=_PERSONNEL,
        items=checklist_items(
            _PERSONNEL,
            ("S1", "Valid SFA food shop licence is current and displayed prominently at the premises", [MAJOR]),
            ("S2", "Certified Food Hygiene Officer (FHO) appointed and present on-site during operating hours", [MAJOR]),
            ("S3", "All food handlers have completed the Basic Food Hygiene Course (BFHC) certified by SkillsFuture Singapore", [MAJOR]),
            ("S4", "Food Hygiene Refresher Training completed within the past 5 years for all handlers", [MINOR]),
            ("S5", "All food handlers wear clean uniforms, aprons, and effective hair restraints during food preparation", [MINOR], None, True),
            ("S6", "Food handlers with symptoms of foodborne illness are reported, excluded from food handling, and a record is maintained", [CRITICAL]),
            ("S7", "Proper hand hygiene practised — hands washed with soap and water before handling food, after using toilet, and after handling raw food", [CRITICAL], None, True),
        ),
    ),
    AssessmentSection(
        key="temperature_control",
        label=_TEMP,
        items=checklist_items(
            _TEMP,
            ("S8", "Cold storage units maintained at or below 4°C (SFA requirement)", [CRITICAL], None, True),
            ("S9", "Hot holding of cooked food maintained at or above 60°C at all times", [CRITICAL], None, True),
            ("S10", "Cooking achieves a minimum core temperature of 75°C or above", [CRITICAL], None, True),
            ("S11", "Cooling performed from 60°C to 20°C within 2 hours, then from 20°C to 4°C within a further 4 hours", [CRITICAL], None, True),
            ("S12", "Chilled food deliveries received at or below 4°C; rejected and documented if above", [CRITICAL], None, True),
            ("S13", "Thawing conducted under refrigeration at or below 4°C, or under clean running water at 21°C or below", [MAJOR], None, True),
            ("S14", "Reheating of previously cooked food reaches a core temperature of 75°C or above rapidly (within 2 hours)", [CRITICAL], None, True),
            ("S15", "Hawker stall and food court hot display units monitored and food temperature checked at least every 2 hours", [MAJOR], None, True),
        ),
    ),
    AssessmentSection(
        key="food_handling_contamination",
        label=_HANDLING,
        items=checklist_items(
            _HANDLING,
            ("S16", "Raw and cooked/ready-to-eat foods stored and handled separately with dedicated utensils and cutting boards", [CRITICAL]),
            ("S17", "Allergen awareness procedures in place; staff trained to identify and communicate allergen information to customers", [MAJOR]),
            ("S18", "No bare-hand contact with ready-to-eat food — disposable gloves, tongs, or other utensils used at all times", [CRITICAL], None, True),
            ("S19", "All food covered, wrapped, or stored in sealed containers when not being prepared or served", [MAJOR]),
            ("S20", "Proper food labelling with date of preparation, use-by date, and ingredient list where required", [MINOR]),
            ("S21", "First-In-First-Out (FIFO) stock rotation practised for all perishable and non-perishable inventory", [MINOR]),
            ("S22", "All food sourced only from SFA-approved or licensed suppliers with valid import permits where applicable", [MAJOR]),
            ("S23", "Food grade packaging and containers used for storage, transport, and service of food", [MINOR]),
            ("S24", "Premises free from evidence of pests (rodents, cockroaches, flies) and preventive measures in place", [CRITICAL]),
        ),
    ),
    AssessmentSection(
        key="premises_equipment",
        label=_PREMISES,
        items=checklist_items(
            _PREMISES,
            ("S25", "Premises (floors, walls, ceilings) clean, in good repair, and constructed of smooth impervious materials", [MAJOR]),
            ("S26", "Adequate mechanical ventilation and lighting provided in food preparation, cooking, and storage areas", [MINOR]),
            ("S27", "Proper drainage installed, maintained, and free from blockages; floor drains fitted with grilles", [MAJOR]),
            ("S28", "Adequate toilet facilities provided for staff, maintained in clean condition, and not opening directly into food areas", [MINOR]),
            ("S29", "Refuse stored in covered bins, removed at least daily, and disposal area kept clean and pest-free", [MAJOR]),
            ("S30", "All equipment and utensils in good working order, clean, and maintained to prevent food contamination", [MAJOR], None, True),
            ("S31", "Dishwashing achieves sanitisation at 77°C or above for heat method, or approved chemical sanitiser used at correct concentration", [MAJOR], None, True),
            ("S32", "Grease trap installed where required, cleaned regularly, and maintenance records kept up to date", [MINOR]),
        ),
    ),
    AssessmentSection(
        key="documentation_compliance",
        label=_DOCS,
        items=checklist_items(
            _DOCS,
            ("S33", "Food safety management system (based on HACCP principles) documented and implemented", [MINOR]),
            ("S34", "Temperature monitoring logs for cold storage, hot holding, cooking, and cooling maintained daily", [MINOR], None, True),
            ("S35", "Cleaning schedule documented and cleaning completion records maintained for all areas and equipment", [MINOR]),
            ("S36", "Pest control records maintained — including contract with licensed pest control operator, service reports, and bait station maps", [MINOR]),
            ("S37", "Staff training records maintained with copies of BFHC certificates, refresher course dates, and FHO appointment letter", [MINOR]),
            ("S38", "Supplier records maintained — including approved supplier list, SFA import permits, and delivery receipts", [MINOR]),
            ("S39", "Traceability records maintained — food can be traced one step back (supplier) and one step forward (customer) within 4 hours", [MINOR]),
            ("S40", "SFA inspection readiness maintained — previous inspection reports addressed, demerit points tracked, and corrective actions completed", [MINOR]),
        ),
    ),
)

SFA_CONFIG: ComplianceFrameworkConfig = derive_framework(
    {
        "id": "sfa",
        "region_id": "sg",
        "locale": "en-SG",
        "labels": {
            "framework_name": "SFA Compliance",
            "framework_short": "SFA",
            "licence_label": "SFA Licence Number",
            "supervisor_role": "Food Hygiene Officer",
            "cert_body": "Singapore Food Agency",
            "assessment_title": "Food Safety Self-Assessment",
            "assessment_subtitle": "SFA Food Safety Audit Checklist",
            "accent_color": "#DC2626",
        },
        "assessment_sections": SFA_ASSESSMENT_SECTIONS,
        "scoring": {
            "model": "letter_grade",
            "tiers": [
                {"min": 85, "label": "A – Excellent", "color": "#10B981"},
                {"min": 70, "label": "B – Good", "color": "#22C55E"},
                {"min": 50, "label": "C – Adequate", "color": "#F59E0B"},
                {"min": 0, "label": "D – Needs Improvement", "color": "#EF4444"},
            ],
        },
        "assessment_framework_filter": "sfa",
        "supplier": {
            "business_id_label": "UEN",
            "business_id_placeholder": "Unique Entity Number",
        },
        "wizard_steps": [
            {
                "key": "licence",
                "title": "SFA Licence",
                "subtitle": "Enter your SFA food establishment licence",
                "fields": [
                    {"key": "bcc_licence_number", "label": "SFA Licence Number", "type": "text", "required": True},
                    {"key": "licence_expiry", "label": "Licence Expiry", "type": "date"},
                    {"key": "licence_displayed", "label": "Licence Displayed", "type": "boolean"},
                ],
            },
            {
                "key": "fss",
                "title": "Food Hygiene Officer",
                "subtitle": "Enter your food hygiene officer details",
                "fields": [
                    {"key": "name", "label": "Officer Name", "type": "text", "required": True},
                    {"key": "certificate_number", "label": "WSQ Certificate Number", "type": "text"},
                    {"key": "certificate_date", "label": "Certificate Date", "type": "date"},
                ],
            },
            SECTIONS_STEP,
        ],
    }
)
