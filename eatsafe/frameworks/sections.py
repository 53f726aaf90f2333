"""Resolution of operator section toggles."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from eatsafe.models import ComplianceFrameworkConfig, SectionDefinition


def default_enabled(section: SectionDefinition, home_cook: bool = False) -> bool:
    """Default on/off state of a section for the operating mode."""
    if home_cook and section.home_cook_default is not None:
        return section.home_cook_default
    return section.default_on


def resolve_section_toggles(
    config: ComplianceFrameworkConfig,
    stored: Mapping[str, bool] | Iterable[Mapping[str, Any]] | None = None,
    home_cook: bool = False,
) -> dict[str, bool]:
    """Work out which logging sections are enabled for a venue.

    Args:
        config: The venue's framework.
        stored: Saved toggles, either ``{section_key: enabled}`` or rows of
            ``{"section_key": ..., "is_enabled": ...}`` as read from the
            section toggles table.
        home_cook: Apply the lighter home-cook defaults where defined.

    Returns:
        Section key to enabled flag, in framework order. Stored toggles for
        sections the framework does not define are ignored.
    """
    toggles = {s.key: default_enabled(s, home_cook) for s in config.sections}

    if stored is None:
        return toggles
    if isinstance(stored, Mapping):
        overrides = dict(stored)
    else:
        overrides = {row["section_key"]: row["is_enabled"] for row in stored}

    for key, enabled in overrides.items():
        if key in toggles:
            toggles[key] = bool(enabled)
    return toggles


def enabled_sections(
    config: ComplianceFrameworkConfig,
    stored: Mapping[str, bool] | Iterable[Mapping[str, Any]] | None = None,
    home_cook: bool = False,
) -> list[SectionDefinition]:
    """Section definitions that are currently enabled."""
    toggles = resolve_section_toggles(config, stored, home_cook)
    return [s for s in config.sections if toggles[s.key]]
