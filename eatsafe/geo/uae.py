"""UAE address to emirate classification.

The UAE has no universal postcode system, so venues are matched on emirate
names, then known district names, then postal prefixes. District names are
checked across all emirates longest first, so a specific name such as
"al nahda sharjah" wins over the shorter Dubai "al nahda".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_EMIRATE = "dubai"

EMIRATES: tuple[str, ...] = ("dubai", "abu_dhabi", "sharjah")

# Explicit emirate names, in priority order
EMIRATE_NAMES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("abu_dhabi", ("abu dhabi", "abudhabi", "abu_dhabi")),
    ("sharjah", ("sharjah", "al shariqah")),
    ("dubai", ("dubai",)),
)

DUBAI_DISTRICTS: tuple[str, ...] = (
    "deira", "bur dubai", "jumeirah", "marina", "downtown",
    "business bay", "al barsha", "al quoz", "jebel ali", "jlt",
    "difc", "karama", "satwa", "oud metha", "al nahda",
    "international city", "silicon oasis", "dubailand", "palm",
    "motor city", "sports city", "production city", "tecom",
    "media city", "internet city", "knowledge village", "healthcare city",
    "al rigga", "al garhoud", "festival city", "creek harbour",
    "dubai hills", "arabian ranches", "al rashidiya", "mirdif",
    "discovery gardens", "al sufouh", "umm suqeim", "al mankhool",
    "hor al anz", "al twar", "al warqa", "muhaisnah", "al khawaneej",
)

ABU_DHABI_DISTRICTS: tuple[str, ...] = (
    "khalifa city", "al reem island", "al maryah", "saadiyat",
    "yas island", "al raha", "musaffah", "mussafah", "khalidiyah",
    "corniche", "al wahda", "al bateen", "tourist club",
    "hamdan street", "electra", "al ain", "al dhafra", "madinat zayed",
    "al shamkha", "mohammed bin zayed", "mbz", "al reef",
    "masdar city", "al ghadeer", "al wathba",
)

SHARJAH_DISTRICTS: tuple[str, ...] = (
    "al majaz", "al nahda sharjah", "al khan", "al qasimia",
    "al taawun", "muwaileh", "muwailih", "university city",
    "sharjah industrial", "al zahia", "al mamzar sharjah",
    "al bu daniq", "al ghuwair", "al yarmook", "al nasseriya",
    "al ramla", "al qadisiya", "al falaj", "al jazzat",
    "al azra", "wasit", "halwan",
)

# Postal/area prefixes, matched at the start of the input
EMIRATE_POSTAL_PREFIXES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("abu_dhabi", ("abu_dhabi", "abudhabi", "auh")),
    ("sharjah", ("sharjah", "shj")),
    ("dubai", ("00000", "dubai", "dxb")),
)


def _district_index() -> tuple[tuple[str, str], ...]:
    pairs = [
        *((d, "abu_dhabi") for d in ABU_DHABI_DISTRICTS),
        *((d, "sharjah") for d in SHARJAH_DISTRICTS),
        *((d, "dubai") for d in DUBAI_DISTRICTS),
    ]
    # Stable sort keeps the emirate order for equal lengths
    return tuple(sorted(pairs, key=lambda pair: -len(pair[0])))


_DISTRICTS_LONGEST_FIRST = _district_index()


def detect_emirate(postcode_or_address: Any) -> str:
    """Detect the emirate of a venue from its postcode or address.

    Returns ``"dubai"`` when nothing matches.
    """
    if not isinstance(postcode_or_address, str):
        return DEFAULT_EMIRATE
    text = postcode_or_address.lower().strip()
    if not text:
        return DEFAULT_EMIRATE

    for emirate, names in EMIRATE_NAMES:
        if any(name in text for name in names):
            return emirate

    for district, emirate in _DISTRICTS_LONGEST_FIRST:
        if district in text:
            return emirate

    for emirate, prefixes in EMIRATE_POSTAL_PREFIXES:
        if any(text.startswith(prefix) for prefix in prefixes):
            return emirate

    return DEFAULT_EMIRATE


EMIRATE_COMPLIANCE: dict[str, str] = {
    "dubai": "dm",
    "abu_dhabi": "adafsa",
    "sharjah": "sm_sharjah",
}


def get_emirate_compliance(emirate: str) -> str:
    """Framework code of the emirate's regulator; unknown emirates get Dubai's."""
    return EMIRATE_COMPLIANCE.get(emirate, EMIRATE_COMPLIANCE[DEFAULT_EMIRATE])


@dataclass(frozen=True)
class EmirateConfig:
    emirate: str
    name: str
    name_ar: str
    regulatory_body: str
    regulatory_body_ar: str
    compliance_framework: str
    grading_system: str  # "letter" | "star" | "none"
    grading_scale: str
    currency: str = "AED"
    vat_rate: int = 5  # percent
    timezone: str = "Asia/Dubai"


EMIRATE_CONFIGS: dict[str, EmirateConfig] = {
    "dubai": EmirateConfig(
        emirate="dubai",
        name="Dubai",
        name_ar="دبي",
        regulatory_body="Dubai Municipality — Food Safety Department",
        regulatory_body_ar="بلدية دبي — إدارة سلامة الغذاء",
        compliance_framework="dm",
        grading_system="letter",
        grading_scale="A (85-100%), B (70-84%), C (55-69%), D (<55%)",
    ),
    "abu_dhabi": EmirateConfig(
        emirate="abu_dhabi",
        name="Abu Dhabi",
        name_ar="أبوظبي",
        regulatory_body="Abu Dhabi Agriculture and Food Safety Authority (ADAFSA)",
        regulatory_body_ar="هيئة أبوظبي للزراعة وسلامة الغذاء",
        compliance_framework="adafsa",
        grading_system="star",
        grading_scale="1-5 Stars",
    ),
    "sharjah": EmirateConfig(
        emirate="sharjah",
        name="Sharjah",
        name_ar="الشارقة",
        regulatory_body="Sharjah Municipality — Public Health Department",
        regulatory_body_ar="بلدية الشارقة — إدارة الصحة العامة",
        compliance_framework="sm_sharjah",
        grading_system="none",
        grading_scale="Pass/Fail inspection",
    ),
}
