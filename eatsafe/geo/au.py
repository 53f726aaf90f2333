"""Australian postcode to state classification.

Australian postcodes are 4-digit numbers allocated to states in fixed
ranges. ACT postcodes sit numerically inside the NSW allocation, so ACT's
ranges are checked first.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

DEFAULT_AU_STATE = "qld"  # original launch state, served by the BCC baseline

# Checked in order; first containing range wins
AU_POSTCODE_RANGES: tuple[tuple[str, tuple[tuple[int, int], ...]], ...] = (
    ("act", ((200, 299), (2600, 2618), (2900, 2920))),
    ("nsw", ((1000, 1999), (2000, 2599), (2619, 2899), (2921, 2999))),
    ("vic", ((3000, 3999), (8000, 8999))),
    ("qld", ((4000, 4999), (9000, 9999))),
    ("sa", ((5000, 5799), (5800, 5999))),
    ("wa", ((6000, 6797), (6800, 6999))),
    ("tas", ((7000, 7999),)),
    ("nt", ((800, 899), (900, 999))),
)

AU_STATES: tuple[str, ...] = ("qld", "nsw", "vic", "sa", "wa", "tas", "act", "nt")

STATE_COMPLIANCE: dict[str, str] = {
    "qld": "bcc",
    "nsw": "nsw_fa",
    "vic": "vic_dh",
    "sa": "sa_health",
    "wa": "wa_doh",
    "tas": "tas_doh",
    "act": "act_health",
    "nt": "nt_doh",
}

# ASCII digits only; int() would otherwise accept Arabic-Indic or full-width digits
_POSTCODE_RE = re.compile(r"\b([0-9]{3,4})\b", re.ASCII)


def detect_au_state(postcode_or_address: Any) -> str:
    """Detect the Australian state of a venue from its postcode or address.

    The first 3-4 digit run in the text is taken as the postcode. Text
    without a recognisable postcode falls back to Queensland.
    """
    if not isinstance(postcode_or_address, str) or not postcode_or_address:
        return DEFAULT_AU_STATE

    match = _POSTCODE_RE.search(postcode_or_address)
    if not match:
        return DEFAULT_AU_STATE

    code = int(match.group(1))
    for state, ranges in AU_POSTCODE_RANGES:
        for low, high in ranges:
            if low <= code <= high:
                return state
    return DEFAULT_AU_STATE


def get_state_compliance(state: str) -> str:
    """Framework code for a state; unknown states get the baseline."""
    return STATE_COMPLIANCE.get(state, STATE_COMPLIANCE[DEFAULT_AU_STATE])


@dataclass(frozen=True)
class AUStateConfig:
    state: str
    name: str
    abbreviation: str
    regulatory_body: str
    food_act: str
    compliance_framework: str
    grading_system: str  # "star" | "scores_on_doors" | "percentage" | "none"
    grading_scale: str
    supervisor_title: str
    cert_validity_years: int
    requires_food_safety_program: bool
    council_examples: tuple[str, ...]
    timezone: str
    currency: str = "AUD"


AU_STATE_CONFIGS: dict[str, AUStateConfig] = {
    "qld": AUStateConfig(
        "qld", "Queensland", "QLD", "Queensland Health / Local Councils", "Food Act 2006 (QLD)",
        "bcc", "star", "0–5 Stars (Eat Safe)", "Food Safety Supervisor", 5, True,
        ("Brisbane City Council", "Gold Coast", "Cairns", "Sunshine Coast"), "Australia/Brisbane",
    ),
    "nsw": AUStateConfig(
        "nsw", "New South Wales", "NSW", "NSW Food Authority", "Food Act 2003 (NSW)",
        "nsw_fa", "star", "Scores on Doors (pilot councils)", "Food Safety Supervisor", 5, True,
        ("City of Sydney", "Parramatta", "Northern Beaches", "Blue Mountains"), "Australia/Sydney",
    ),
    "vic": AUStateConfig(
        "vic", "Victoria", "VIC", "Department of Health Victoria", "Food Act 1984 (VIC)",
        "vic_dh", "scores_on_doors", "1–5 Stars (Scores on Doors)", "Food Safety Supervisor", 5, True,
        ("City of Melbourne", "Yarra", "Stonnington", "Port Phillip"), "Australia/Melbourne",
    ),
    "sa": AUStateConfig(
        "sa", "South Australia", "SA", "SA Health", "Food Act 2001 (SA)",
        "sa_health", "star", "Star rating", "Food Safety Supervisor", 5, True,
        ("City of Adelaide", "Marion", "Onkaparinga", "Charles Sturt"), "Australia/Adelaide",
    ),
    "wa": AUStateConfig(
        "wa", "Western Australia", "WA", "Department of Health WA", "Food Act 2008 (WA)",
        "wa_doh", "star", "Star rating", "Food Safety Supervisor", 5, True,
        ("City of Perth", "Stirling", "Joondalup", "Fremantle"), "Australia/Perth",
    ),
    "tas": AUStateConfig(
        "tas", "Tasmania", "TAS", "Department of Health Tasmania", "Food Act 2003 (TAS)",
        "tas_doh", "none", "Pass / Fail inspection", "Food Safety Supervisor", 5, True,
        ("City of Hobart", "Launceston", "Clarence", "Glenorchy"), "Australia/Hobart",
    ),
    "act": AUStateConfig(
        "act", "Australian Capital Territory", "ACT", "ACT Health", "Food Act 2001 (ACT)",
        "act_health", "star", "Star rating", "Food Safety Supervisor", 5, True,
        ("Canberra",), "Australia/Sydney",
    ),
    "nt": AUStateConfig(
        "nt", "Northern Territory", "NT", "NT Department of Health", "Food Act 2004 (NT)",
        "nt_doh", "none", "Pass / Fail inspection", "Food Safety Supervisor", 5, True,
        ("City of Darwin", "Alice Springs", "Palmerston"), "Australia/Darwin",
    ),
}
