"""Framework Registry for managing compliance framework configurations."""

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from config.settings import settings
from eatsafe.errors import FrameworkDefinitionError
from eatsafe.frameworks import BUILTIN_FRAMEWORKS
from eatsafe.frameworks.inheritance import derive
from eatsafe.guardrails import ensure_valid_framework
from eatsafe.models import ComplianceFrameworkConfig
from eatsafe.registry.variants import VARIANT_REGISTRY, get_compliance
from eatsafe.tracing import log_config_event

BASELINE_CODE = "bcc"


class FrameworkRegistry:
    """Registry for compliance frameworks.

    Holds fully-derived framework configs keyed by code. Configs are
    validated on registration, so everything served from the registry is
    complete enough to drive onboarding and scoring. Frameworks can also be
    declared in YAML as overrides of an already-registered framework.

    Once frozen, the registry rejects every mutation. The baseline config is
    held separately from the lookup table, so fallbacks keep working even if
    the baseline code is unregistered from an unfrozen registry.
    """

    def __init__(self, baseline_code: str = BASELINE_CODE):
        self._frameworks: dict[str, ComplianceFrameworkConfig] = {}
        self._baseline: ComplianceFrameworkConfig | None = None
        self._frozen = False
        self.baseline_code = baseline_code

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("Framework registry is frozen")

    def register(self, config: ComplianceFrameworkConfig) -> None:
        """Register a framework config.

        Args:
            config: The framework config to register.

        Raises:
            RuntimeError: If the registry is frozen.
            ValueError: If a framework with the same ID already exists.
            FrameworkDefinitionError: If the config fails validation.
        """
        self._check_mutable()
        if config.id in self._frameworks:
            raise ValueError(f"Framework '{config.id}' already registered")
        ensure_valid_framework(config)
        self._frameworks[config.id] = config
        if config.id == self.baseline_code:
            self._baseline = config
        log_config_event(
            "register",
            "registry",
            f"Registered framework '{config.id}'",
            {"region": config.region_id, "model": config.scoring.model.value},
            level=logging.DEBUG,
        )

    def get(self, code: str) -> ComplianceFrameworkConfig | None:
        """Get a framework by code, or None if not found."""
        return self._frameworks.get(code)

    def get_or_raise(self, code: str) -> ComplianceFrameworkConfig:
        """Get a framework by code, raising if not found.

        Raises:
            KeyError: If the framework is not registered.
        """
        if code not in self._frameworks:
            raise KeyError(f"Framework '{code}' not found")
        return self._frameworks[code]

    @property
    def baseline(self) -> ComplianceFrameworkConfig:
        """The fallback framework.

        Raises:
            KeyError: If the baseline was never registered.
        """
        if self._baseline is None:
            raise KeyError(f"Baseline framework '{self.baseline_code}' not registered")
        return self._baseline

    def get_framework_config(self, code: str | None) -> ComplianceFrameworkConfig:
        """Resolve a framework code, falling back to the baseline.

        Empty, ``"none"`` and unknown codes all resolve to the baseline, so
        a venue always has a framework to work against.
        """
        config = self._frameworks.get(code) if code else None
        if config is not None:
            return config
        if code and code != "none":
            log_config_event(
                "fallback",
                "registry",
                f"Unknown framework '{code}', using '{self.baseline_code}'",
                level=logging.DEBUG,
            )
        return self.baseline

    def get_variant_framework_config(self, variant: str) -> ComplianceFrameworkConfig:
        """Resolve the framework for an app variant.

        Unknown variants resolve to the baseline.
        """
        if variant not in VARIANT_REGISTRY:
            log_config_event(
                "fallback",
                "registry",
                f"Unknown variant '{variant}', using '{self.baseline_code}'",
                level=logging.DEBUG,
            )
            return self.baseline
        return self.get_framework_config(get_compliance(variant))

    def list_all(self) -> list[ComplianceFrameworkConfig]:
        """List all registered frameworks."""
        return list(self._frameworks.values())

    def list_ids(self) -> list[str]:
        """List all framework codes."""
        return list(self._frameworks.keys())

    def filter_by_region(self, region_id: str) -> list[ComplianceFrameworkConfig]:
        """Get frameworks belonging to a region."""
        return [c for c in self._frameworks.values() if c.region_id == region_id]

    def unregister(self, code: str) -> bool:
        """Remove a framework from the registry.

        Returns:
            True if removed, False if not found.

        Raises:
            RuntimeError: If the registry is frozen.
        """
        self._check_mutable()
        if code in self._frameworks:
            del self._frameworks[code]
            return True
        return False

    def clear(self) -> None:
        """Clear all registered frameworks.

        Raises:
            RuntimeError: If the registry is frozen.
        """
        self._check_mutable()
        self._frameworks.clear()

    def load_from_yaml(self, path: str | Path) -> ComplianceFrameworkConfig:
        """Load a derived framework from a YAML file.

        The document names the new framework's ``id``, optionally the
        framework it ``extends`` (the baseline by default), and overrides
        for any config field.

        Args:
            path: Path to the YAML file.

        Returns:
            The registered framework config.

        Raises:
            RuntimeError: If the registry is frozen.
            FrameworkDefinitionError: If the document is malformed, extends
                an unknown framework, or produces an invalid config.
        """
        self._check_mutable()
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        try:
            config = self._parse_framework(data)
        except FrameworkDefinitionError as e:
            raise FrameworkDefinitionError(f"{path.name}: {e}", errors=e.errors) from e
        self.register(config)
        log_config_event(
            "load",
            "registry",
            f"Loaded framework '{config.id}' from {path.name}",
        )
        return config

    def load_from_directory(self, directory: str | Path) -> list[ComplianceFrameworkConfig]:
        """Load all framework definitions from a directory.

        Args:
            directory: Directory containing YAML files.

        Returns:
            List of loaded framework configs.

        Raises:
            RuntimeError: If the registry is frozen.
        """
        self._check_mutable()
        directory = Path(directory)
        loaded = []
        for yaml_file in sorted(directory.glob("*.yaml")):
            loaded.append(self.load_from_yaml(yaml_file))
        for yml_file in sorted(directory.glob("*.yml")):
            loaded.append(self.load_from_yaml(yml_file))
        return loaded

    def _parse_framework(self, data: Any) -> ComplianceFrameworkConfig:
        """Derive a framework config from a parsed YAML document."""
        if not isinstance(data, Mapping):
            raise FrameworkDefinitionError("framework document must be a mapping")

        overrides = dict(data)
        parent_code = overrides.pop("extends", None) or self.baseline_code
        if not overrides.get("id"):
            raise FrameworkDefinitionError("derived frameworks must set an 'id'", "id")

        parent = self.get(parent_code)
        if parent is None:
            raise FrameworkDefinitionError(
                f"extends unknown framework '{parent_code}'", "extends"
            )
        return derive(parent, overrides)

    def __len__(self) -> int:
        return len(self._frameworks)

    def __contains__(self, code: str) -> bool:
        return code in self._frameworks


def build_default_registry() -> FrameworkRegistry:
    """Build a registry holding every built-in framework."""
    registry = FrameworkRegistry()
    for config in BUILTIN_FRAMEWORKS:
        registry.register(config)
    log_config_event(
        "build",
        "registry",
        f"Built framework registry with {len(registry)} frameworks",
    )
    return registry


# Global registry instance
_default_registry: FrameworkRegistry | None = None
_registry_lock = threading.Lock()


def get_framework_registry() -> FrameworkRegistry:
    """Get the default framework registry, building it on first use.

    The returned registry is frozen; build a separate ``FrameworkRegistry``
    to experiment with registrations.
    """
    global _default_registry
    if _default_registry is None:
        with _registry_lock:
            if _default_registry is None:
                registry = build_default_registry()
                if settings.extra_frameworks_dir:
                    registry.load_from_directory(settings.extra_frameworks_dir)
                registry.freeze()
                _default_registry = registry
    return _default_registry


def reset_framework_registry() -> None:
    """Drop the default registry so the next call rebuilds it."""
    global _default_registry
    with _registry_lock:
        _default_registry = None


def get_framework_config(code: str | None) -> ComplianceFrameworkConfig:
    """Resolve a framework code against the default registry."""
    return get_framework_registry().get_framework_config(code)


def get_variant_framework_config(variant: str) -> ComplianceFrameworkConfig:
    """Resolve an app variant's framework against the default registry."""
    return get_framework_registry().get_variant_framework_config(variant)
