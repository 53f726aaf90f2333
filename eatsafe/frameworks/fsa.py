"""UK Food Standards Agency framework (Food Hygiene Rating Scheme).

Checklist U1-U40 is based on the FHRS, EC Regulation 852/2004, the Food
Safety Act 1990, the Food Hygiene (England) Regulations 2006 and Natasha's
Law. Ratings run on the FHRS 0-5 scale.
"""

from __future__ import annotations

from eatsafe.frameworks.bcc import CRITICAL, MAJOR, MINOR, SECTIONS_STEP, checklist_items, derive_framework
from eatsafe.models import AssessmentSection, ComplianceFrameworkConfig

_HYGIENE = "Food Hygiene"
_TEMP = "Temperature Control"
_CROSS = "Cross-Contamination & Allergens"
_STRUCT = "Structural & Facilities"
_DOCS = "Documentation & HACCP"

FSA_ASSESSMENT_SECTIONS: tuple[AssessmentSection, ...] = (
    AssessmentSection(
        key="food_hygiene",
        label=_HYGIENE,
        items=checklist_items(
            _HYGIENE,
            ("U1", "Food business registration — Is the business registered with the local authority at least 28 days before trading?", [MAJOR], "Required under Food Safety Act 1990 and EC Regulation 852/2004"),
            ("U2", "FHRS rating display — Is the current Food Hygiene Rating Scheme sticker displayed in a prominent location visible to customers?", [MINOR], "Mandatory display in Wales and Northern Ireland; voluntary but expected in England"),
            ("U3", "Safer Food Better Business (SFBB) — Is an up-to-date SFBB pack (or equivalent documented food safety management system) in place and actively used?", [MAJOR], "FSA-recommended food safety management system for small businesses"),
            ("U4", "Food hygiene training — Do all food handlers hold a minimum Level 2 Award in Food Safety in Catering (or equivalent)?", [MAJOR], "Chartered Institute of Environmental Health (CIEH) or Highfield-accredited qualifications accepted"),
            ("U5", "Personal hygiene — Do food handlers maintain appropriate personal hygiene standards including clean protective clothing and hair covering?", [MAJOR, CRITICAL]),
            ("U6", "Illness reporting — Are food handlers required to report symptoms of vomiting, diarrhoea, infected wounds, or skin infections, and excluded from food handling for 48 hours after symptoms cease?", [MAJOR, CRITICAL], "EC Regulation 852/2004 Annex II Chapter VIII"),
            ("U7", "Handwashing — Do food handlers wash hands thoroughly before handling food, after using the toilet, handling raw food, and after breaks?", [MAJOR, CRITICAL]),
            ("U8", "Fitness to work policy — Is there a documented fitness to work policy covering food handlers with gastrointestinal illness, skin infections, and return-to-work criteria?", [MINOR, MAJOR]),
        ),
    ),
    AssessmentSection(
        key="temperature_control",
        label=_TEMP,
        items=checklist_items(
            _TEMP,
            ("U9", "Cold holding — Is chilled food stored at or below 8°C (legal maximum), with 5°C or below as best practice?", [MAJOR, CRITICAL], "Food Safety (Temperature Control) Regulations 1995 — legal limit 8°C; industry best practice 5°C", True),
            ("U10", "Hot holding — Is hot food held at 63°C or above?", [MAJOR, CRITICAL], "Food Safety (Temperature Control) Regulations 1995", True),
            ("U11", "Cooking temperature — Is food cooked to a core temperature of 75°C (or equivalent time/temperature combination, e.g. 70°C for 2 minutes)?", [CRITICAL], None, True),
            ("U12", "Cooling — Is cooked food cooled as quickly as possible and within 90 minutes before refrigeration?", [MAJOR, CRITICAL], "SFBB guidance: cool to below 8°C within 90 minutes", True),
            ("U13", "Chilled delivery — Is food received at or below 8°C, with delivery temperatures checked and recorded on arrival?", [MAJOR, CRITICAL], None, True),
            ("U14", "Date labelling and use-by compliance — Are use-by dates checked at delivery, during storage, and before service, with expired items removed and disposed of?", [CRITICAL], "It is an offence to sell food past its use-by date under the Food Safety Act 1990", True),
            ("U15", "Ambient display — Is food displayed outside temperature control limited to a single period of up to 2 hours (for cold food) or used/discarded appropriately?", [MAJOR, CRITICAL], "Tolerated under the 2-hour rule; food must be discarded if not used within this period", True),
            ("U16", "Freezer storage — Are freezers maintained at -18°C or below, with no evidence of thaw/refreeze damage?", [MAJOR], None, True),
        ),
    ),
    AssessmentSection(
        key="cross_contamination",
        label=_CROSS,
        items=checklist_items(
            _CROSS,
            ("U17", "Allergen management (Natasha's Law) — Are all prepacked for direct sale (PPDS) products labelled with a full ingredients list highlighting any of the 14 specified allergens?", [CRITICAL], "Food Information (Amendment) (England) Regulations 2019 — applies to PPDS foods; the 14 allergens: celery, cereals containing gluten, crustaceans, eggs, fish, lupin, milk, molluscs, mustard, nuts, peanuts, sesame, soya, sulphur dioxide/sulphites", True),
            ("U18", "Allergen communication — Can staff accurately communicate allergen information to customers for non-prepacked food, and are allergen matrices or charts available and up to date?", [MAJOR, CRITICAL], "EU Food Information for Consumers Regulation (EU FIC) No. 1169/2011 retained in UK law", True),
            ("U19", "Raw and cooked separation — Are raw and ready-to-eat foods stored, prepared, and handled separately to prevent cross-contamination?", [MAJOR, CRITICAL], "Separate storage (raw below cooked), separate preparation areas or temporal separation with sanitisation between uses"),
            ("U20", "Colour-coded chopping boards and utensils — Are colour-coded boards/utensils used and correctly assigned (e.g. red for raw meat, blue for raw fish, green for salad/fruit, white for dairy, yellow for cooked meat, brown for vegetables)?", [MINOR, MAJOR]),
            ("U21", "Handwashing facilities — Are designated handwash basins available with hot and cold running water, antibacterial soap, and disposable paper towels, separate from food preparation sinks?", [MAJOR, CRITICAL]),
            ("U22", "Single-use items — Are single-use items (gloves, cloths, containers) stored hygienically, used once only, and not reused?", [MINOR]),
        ),
    ),
    AssessmentSection(
        key="structural_facilities",
        label=_STRUCT,
        items=checklist_items(
            _STRUCT,
            ("U23", "Premises registration — Is the food business premises registered with the local authority and does it meet the structural requirements of EC Regulation 852/2004 Annex II?", [MAJOR]),
            ("U24", "Pest control — Is an effective pest control programme in place, including proofing of the premises and regular inspections by a qualified pest controller?", [MAJOR, CRITICAL], "Records of pest control visits, bait station maps, and any sightings/treatments required"),
            ("U25", "Waste management — Is food waste and refuse stored in lidded, foot-operated bins, removed regularly, and the external waste area kept clean and secure?", [MINOR, MAJOR]),
            ("U26", "Ventilation — Is adequate mechanical or natural ventilation provided to prevent excessive condensation, grease build-up, and stale air in food preparation areas?", [MINOR, MAJOR], "EC Regulation 852/2004 Annex II Chapter I"),
            ("U27", "Lighting — Is adequate lighting provided in all food handling, storage, and cleaning areas?", [MINOR]),
            ("U28", "Water supply — Is there an adequate supply of potable water, and is any non-potable water (e.g. for fire control) clearly identified and not connected to potable supply?", [MAJOR, CRITICAL], "EC Regulation 852/2004 Annex II Chapter VII"),
            ("U29", "Staff changing facilities — Are adequate changing facilities provided for staff to change into and store protective clothing?", [MINOR]),
            ("U30", "First aid provisions — Is a suitably stocked first aid kit available, including blue detectable plasters for food handlers?", [MINOR]),
        ),
    ),
    AssessmentSection(
        key="documentation_haccp",
        label=_DOCS,
        items=checklist_items(
            _DOCS,
            ("U31", "HACCP-based food safety management system — Is a documented HACCP-based system (e.g. SFBB, Cooksafe, or bespoke HACCP plan) in place, implemented, and maintained?", [MAJOR, CRITICAL], "Mandatory under EC Regulation 852/2004 Article 5; must be based on HACCP principles"),
            ("U32", "Temperature monitoring records — Are fridge, freezer, cooking, cooling, and hot holding temperatures recorded at least daily with dates, times, and corrective actions noted?", [MINOR, MAJOR], None, True),
            ("U33", "Cleaning records — Are cleaning schedules documented and cleaning activities recorded with dates, responsible persons, and chemicals used?", [MINOR]),
            ("U34", "Staff training records — Are records maintained for all food safety training including Level 2 certificates, induction training, allergen awareness, and refresher training?", [MINOR]),
            ("U35", "Supplier due diligence — Are records kept demonstrating that food is sourced from reputable, approved suppliers, including evidence of food safety certifications or audit reports?", [MINOR, MAJOR]),
            ("U36", "Traceability — Can the business demonstrate traceability one step back (supplier) and one step forward (customer) for all food products?", [MAJOR, CRITICAL], "EC Regulation 178/2002 Article 18 — 'one up, one down' traceability requirement"),
            ("U37", "Complaint records — Is there a documented procedure for handling food safety complaints, with records of complaints received and actions taken?", [MINOR]),
            ("U38", "Corrective actions — Are corrective actions documented when food safety issues are identified, including root cause analysis and measures taken to prevent recurrence?", [MINOR, MAJOR]),
            ("U39", "Annual review — Is the food safety management system reviewed at least annually (or when significant changes occur) and updated accordingly?", [MINOR, MAJOR]),
            ("U40", "EHO inspection readiness — Is the business prepared for Environmental Health Officer inspections with all required documentation readily accessible and up to date?", [MINOR], "Includes SFBB diary, temperature logs, cleaning records, training certificates, allergen information, and HACCP documentation"),
        ),
    ),
)

FSA_CONFIG: ComplianceFrameworkConfig = derive_framework(
    {
        "id": "fsa",
        "region_id": "uk",
        "locale": "en-GB",
        "labels": {
            "framework_name": "FSA Food Hygiene Compliance",
            "framework_short": "FSA",
            "licence_label": "Food Business Registration Number",
            "supervisor_role": "Food Safety Officer",
            "cert_body": "Food Standards Agency",
            "assessment_title": "Food Hygiene Self-Assessment",
            "assessment_subtitle": "FSA Food Hygiene Rating Checklist",
            "accent_color": "#1E40AF",
        },
        "assessment_sections": FSA_ASSESSMENT_SECTIONS,
        "scoring": {
            "model": "letter_grade",
            "grade_scale": 5,
            "tiers": [
                {"min": 5, "label": "5 – Very Good", "color": "#10B981"},
                {"min": 4, "label": "4 – Good", "color": "#22C55E"},
                {"min": 3, "label": "3 – Generally Satisfactory", "color": "#F59E0B"},
                {"min": 2, "label": "2 – Improvement Necessary", "color": "#F97316"},
                {"min": 1, "label": "1 – Major Improvement Necessary", "color": "#EF4444"},
                {"min": 0, "label": "0 – Urgent Improvement Necessary", "color": "#991B1B"},
            ],
        },
        "assessment_framework_filter": "fsa",
        "features": {
            "has_star_rating": False,
            "has_grading_system": True,
        },
        "supplier": {
            "business_id_label": "Company Number",
            "business_id_placeholder": "Companies House Number",
        },
        "wizard_steps": [
            {
                "key": "licence",
                "title": "Food Business Registration",
                "subtitle": "Enter your FSA food business registration details",
                "fields": [
                    {"key": "bcc_licence_number", "label": "Registration Number", "type": "text", "required": True},
                    {"key": "licence_expiry", "label": "Registration Expiry", "type": "date"},
                    {"key": "licence_displayed", "label": "Registration Displayed", "type": "boolean"},
                ],
            },
            {
                "key": "fss",
                "title": "Food Safety Officer",
                "subtitle": "Enter your Level 3 food safety officer details",
                "fields": [
                    {"key": "name", "label": "Officer Name", "type": "text", "required": True},
                    {"key": "certificate_number", "label": "Certificate Number", "type": "text"},
                    {"key": "certificate_date", "label": "Certificate Date", "type": "date"},
                ],
            },
            SECTIONS_STEP,
        ],
    }
)
