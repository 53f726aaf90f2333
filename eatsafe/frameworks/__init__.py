"""Compliance framework definitions, all derived from the BCC baseline."""

from eatsafe.frameworks.au_states import AU_STATE_FRAMEWORKS
from eatsafe.frameworks.bcc import BCC_CONFIG, derive_framework
from eatsafe.frameworks.fda import FDA_CONFIG
from eatsafe.frameworks.fsa import FSA_CONFIG
from eatsafe.frameworks.fssai import FSSAI_CONFIG, is_valid_fssai_licence
from eatsafe.frameworks.gcc import GCC_FRAMEWORKS
from eatsafe.frameworks.inheritance import build_record, derive
from eatsafe.frameworks.sections import default_enabled, enabled_sections, resolve_section_toggles
from eatsafe.frameworks.sfa import SFA_CONFIG

# Registration order; the baseline comes first
BUILTIN_FRAMEWORKS = (
    BCC_CONFIG,
    *AU_STATE_FRAMEWORKS,
    *GCC_FRAMEWORKS,
    FSA_CONFIG,
    SFA_CONFIG,
    FDA_CONFIG,
    FSSAI_CONFIG,
)

__all__ = [
    "BCC_CONFIG",
    "BUILTIN_FRAMEWORKS",
    "build_record",
    "default_enabled",
    "derive",
    "derive_framework",
    "enabled_sections",
    "is_valid_fssai_licence",
    "resolve_section_toggles",
]
