"""Structural inheritance for framework configurations.

``derive(base, overrides)`` overlays a partial override tree onto an
immutable base record:

- records (dataclasses or mappings) present on both sides merge recursively,
  field by field;
- every other value, arrays included, replaces the base value wholesale, so
  two regimes' checklists or wizard steps can never blend;
- keys missing from the overrides, or set to ``None``, keep the base value.

Neither input is mutated. Type mismatches between an override and the base
field raise ``FrameworkDefinitionError`` with the dotted field path.
"""

from __future__ import annotations

import collections.abc
import types
import typing
from collections.abc import Mapping
from dataclasses import fields, is_dataclass, replace
from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar

from eatsafe.errors import FrameworkDefinitionError

T = TypeVar("T")


def derive(base: T, overrides: Mapping[str, Any] | None) -> T:
    """Derive a new record by deep-merging overrides onto ``base``.

    Args:
        base: A dataclass record or mapping to inherit from.
        overrides: Partial override tree. Nested mappings merge into nested
            records; arrays and scalars replace.

    Returns:
        A new, fully-populated record of the same type as ``base``.

    Raises:
        FrameworkDefinitionError: If an override names an unknown field or
            carries a value incompatible with the base field.
    """
    if overrides is None:
        overrides = {}
    if not isinstance(overrides, Mapping):
        raise FrameworkDefinitionError(
            f"overrides must be a mapping, got {type(overrides).__name__}"
        )
    return _merge(base, overrides, "")


def build_record(cls: type[T], data: Mapping[str, Any], path: str = "") -> T:
    """Construct a dataclass record (recursively) from plain mappings.

    Used for array elements given as mappings and for YAML-authored
    frameworks.
    """
    if not isinstance(data, Mapping):
        raise FrameworkDefinitionError(
            f"expected a mapping for {cls.__name__}, got {type(data).__name__}", path or None
        )
    hints = _field_hints(cls)
    names = {f.name for f in fields(cls)}
    unknown = set(data) - names
    if unknown:
        raise FrameworkDefinitionError(
            f"unknown field(s) for {cls.__name__}: {', '.join(sorted(unknown))}", path or None
        )

    kwargs = {}
    for name, value in data.items():
        kwargs[name] = _from_hint(hints[name], value, _join(path, name))
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise FrameworkDefinitionError(str(e), path or None) from e


def _merge(base: Any, overrides: Mapping[str, Any], path: str) -> Any:
    if is_dataclass(base) and not isinstance(base, type):
        hints = _field_hints(type(base))
        names = {f.name for f in fields(base)}
        changes = {}
        for key, value in overrides.items():
            key_path = _join(path, key)
            if key not in names:
                raise FrameworkDefinitionError(
                    f"unknown field for {type(base).__name__}", key_path
                )
            if value is None:
                continue
            changes[key] = _merge_value(getattr(base, key), value, hints[key], key_path)
        return replace(base, **changes)

    if isinstance(base, Mapping):
        result = dict(base)
        for key, value in overrides.items():
            if value is None:
                continue
            key_path = _join(path, str(key))
            if key in base:
                result[key] = _merge_value(base[key], value, None, key_path)
            else:
                result[key] = value
        return result

    raise FrameworkDefinitionError(
        f"cannot merge a record into {type(base).__name__}", path or None
    )


def _merge_value(base_value: Any, value: Any, hint: Any, path: str) -> Any:
    if isinstance(value, Mapping) and _is_record(base_value):
        return _merge(base_value, value, path)
    if base_value is None:
        return _from_hint(hint, value, path) if hint is not None else value
    _check_compatible(base_value, value, path)
    if hint is not None:
        return _from_hint(hint, value, path)
    if isinstance(value, list):
        return tuple(value)
    return value


def _check_compatible(base_value: Any, value: Any, path: str) -> None:
    """Raise if ``value`` cannot replace ``base_value``."""
    if _is_record(base_value):
        if isinstance(value, type(base_value)):
            return
        _mismatch(path, "a record", value)
    if isinstance(base_value, Enum):
        if isinstance(value, type(base_value)):
            return
        if isinstance(value, str):
            try:
                type(base_value)(value)
                return
            except ValueError:
                raise FrameworkDefinitionError(
                    f"'{value}' is not a valid {type(base_value).__name__}", path
                ) from None
        _mismatch(path, type(base_value).__name__, value)
    if isinstance(base_value, bool):
        if not isinstance(value, bool):
            _mismatch(path, "bool", value)
        return
    if isinstance(base_value, (int, float)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            _mismatch(path, "number", value)
        return
    if isinstance(base_value, str):
        if not isinstance(value, str):
            _mismatch(path, "str", value)
        return
    if isinstance(base_value, (list, tuple)):
        if not isinstance(value, (list, tuple)):
            _mismatch(path, "array", value)
        return
    if callable(base_value) and not callable(value):
        _mismatch(path, "callable", value)


def _from_hint(hint: Any, value: Any, path: str) -> Any:
    """Coerce ``value`` into the type described by a field annotation."""
    origin = typing.get_origin(hint)

    if origin in (typing.Union, types.UnionType):
        if value is None:
            return None
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return _from_hint(args[0], value, path)
        return value

    if origin is tuple:
        if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
            _mismatch(path, "array", value)
        elem = typing.get_args(hint)[0] if typing.get_args(hint) else Any
        return tuple(_from_hint(elem, v, f"{path}[{i}]") for i, v in enumerate(value))

    if origin is collections.abc.Callable:
        if not callable(value):
            _mismatch(path, "callable", value)
        return value

    if isinstance(hint, type):
        if is_dataclass(hint):
            if isinstance(value, hint):
                return value
            if isinstance(value, Mapping):
                return build_record(hint, value, path)
            _mismatch(path, hint.__name__, value)
        if issubclass(hint, Enum):
            if isinstance(value, hint):
                return value
            try:
                return hint(value)
            except ValueError:
                raise FrameworkDefinitionError(
                    f"'{value}' is not a valid {hint.__name__}", path
                ) from None
        if hint is bool and not isinstance(value, bool):
            _mismatch(path, "bool", value)
        if hint is str and not isinstance(value, str):
            _mismatch(path, "str", value)
        if hint in (int, float) and (isinstance(value, bool) or not isinstance(value, (int, float))):
            _mismatch(path, "number", value)

    return value


@lru_cache(maxsize=None)
def _field_hints(cls: type) -> dict[str, Any]:
    return typing.get_type_hints(cls)


def _is_record(value: Any) -> bool:
    return (is_dataclass(value) and not isinstance(value, type)) or isinstance(value, Mapping)


def _mismatch(path: str, expected: str, value: Any) -> typing.NoReturn:
    raise FrameworkDefinitionError(
        f"expected {expected}, got {type(value).__name__}", path or None
    )


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key
