"""Australian state and territory frameworks.

All states enforce the FSANZ Food Standards Code, so they keep the A1-A40
checklist, sections and wizard shape of the Brisbane baseline and differ in
regulator, licence wording and grading. Queensland is ``bcc`` itself.
"""

from __future__ import annotations

from typing import Any

from eatsafe.frameworks.bcc import BCC_WIZARD_STEPS, derive_framework
from eatsafe.models import ComplianceFrameworkConfig
from eatsafe.scoring.star import vic_star_rating

PASS_FAIL_TIERS = [
    {"min": 80, "label": "Compliant", "color": "#10B981"},
    {"min": 60, "label": "Conditional Pass", "color": "#F59E0B"},
    {"min": 0, "label": "Non-Compliant", "color": "#DC2626"},
]

VIC_TIERS = [
    {"min": 5, "label": "Excellent", "color": "#10B981"},
    {"min": 4, "label": "Very Good", "color": "#22C55E"},
    {"min": 3, "label": "Satisfactory", "color": "#F59E0B"},
    {"min": 2, "label": "Needs Improvement", "color": "#F97316"},
    {"min": 1, "label": "Action Required", "color": "#EF4444"},
]


def _licence_step(licence_label: str, regulator: str, placeholder: str) -> dict[str, Any]:
    return {
        "key": "licence",
        "title": "Licence Details",
        "subtitle": f"Enter your {regulator} food business licence information",
        "fields": [
            {"key": "bcc_licence_number", "label": licence_label, "type": "text", "required": True, "placeholder": placeholder},
            {"key": "licence_expiry", "label": "Licence Expiry Date", "type": "date"},
            {"key": "licence_displayed", "label": "Licence Displayed on Premises", "type": "boolean"},
        ],
    }


def _state_overrides(
    code: str,
    short: str,
    name: str,
    regulator: str,
    licence_label: str,
    placeholder: str,
    accent_color: str,
) -> dict[str, Any]:
    return {
        "id": code,
        "labels": {
            "framework_name": f"{name} Food Safety Compliance",
            "framework_short": short,
            "licence_label": licence_label,
            "cert_body": regulator,
            "assessment_subtitle": f"{regulator} Food Safety Checklist",
            "accent_color": accent_color,
        },
        "wizard_steps": [_licence_step(licence_label, regulator, placeholder), *BCC_WIZARD_STEPS[1:]],
        "assessment_framework_filter": code,
    }


NSW_FA_CONFIG: ComplianceFrameworkConfig = derive_framework(
    _state_overrides(
        "nsw_fa", "NSW FA", "NSW", "NSW Food Authority",
        "Council Food Business Notification", "e.g. FBN-123456", "#0B5FA5",
    )
)

VIC_DH_CONFIG: ComplianceFrameworkConfig = derive_framework(
    {
        **_state_overrides(
            "vic_dh", "VIC DH", "Victoria", "Department of Health Victoria",
            "Council Registration Number", "e.g. FR-12345", "#092A5E",
        ),
        "scoring": {
            "model": "star_rating",
            "compute_star_rating": vic_star_rating,
            "tiers": VIC_TIERS,
        },
    }
)

SA_HEALTH_CONFIG: ComplianceFrameworkConfig = derive_framework(
    _state_overrides(
        "sa_health", "SA Health", "South Australia", "SA Health",
        "Food Business Notification Number", "e.g. SA-12345", "#B91C1C",
    )
)

WA_DOH_CONFIG: ComplianceFrameworkConfig = derive_framework(
    _state_overrides(
        "wa_doh", "WA DoH", "Western Australia", "Department of Health WA",
        "Food Business Registration Number", "e.g. WA-12345", "#B45309",
    )
)

TAS_DOH_CONFIG: ComplianceFrameworkConfig = derive_framework(
    {
        **_state_overrides(
            "tas_doh", "TAS DoH", "Tasmania", "Department of Health Tasmania",
            "Council Food Business Registration", "e.g. TAS-12345", "#047857",
        ),
        "scoring": {"model": "percentage", "tiers": PASS_FAIL_TIERS},
        "features": {"has_star_rating": False},
    }
)

ACT_HEALTH_CONFIG: ComplianceFrameworkConfig = derive_framework(
    _state_overrides(
        "act_health", "ACT Health", "ACT", "ACT Health",
        "Food Business Registration Number", "e.g. ACT-12345", "#1D4ED8",
    )
)

NT_DOH_CONFIG: ComplianceFrameworkConfig = derive_framework(
    {
        **_state_overrides(
            "nt_doh", "NT DoH", "Northern Territory", "NT Department of Health",
            "Food Business Registration Number", "e.g. NT-12345", "#C2410C",
        ),
        "scoring": {"model": "percentage", "tiers": PASS_FAIL_TIERS},
        "features": {"has_star_rating": False},
    }
)

AU_STATE_FRAMEWORKS: tuple[ComplianceFrameworkConfig, ...] = (
    NSW_FA_CONFIG,
    VIC_DH_CONFIG,
    SA_HEALTH_CONFIG,
    WA_DOH_CONFIG,
    TAS_DOH_CONFIG,
    ACT_HEALTH_CONFIG,
    NT_DOH_CONFIG,
)
