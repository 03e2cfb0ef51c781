"""Reading theme files and turning YAML mappings into theme sections."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

import yaml

T = TypeVar("T")


class ThemeError(ValueError):
    """Raised when a theme cannot be read or does not describe a valid theme."""


def parse_yaml(text: str) -> Any:
    """Parse YAML text into plain Python data."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ThemeError(f"invalid YAML: {exc}") from exc


def read_yaml(path: str | os.PathLike[str]) -> Any:
    """Read and parse a YAML theme file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ThemeError(f"cannot read theme file {os.fspath(path)!r}: {exc}") from exc
    return parse_yaml(text)


def _key_for(field: dataclasses.Field) -> str:
    return field.name.replace("_", "-")


def build_section(cls: type[T], data: Any) -> T:
    """Build the dataclass ``cls`` from a mapping with kebab-case keys.

    Missing keys keep their defaults and unknown keys are rejected. A field
    whose metadata holds ``convert`` has its value passed through it; a field
    marked ``skip`` cannot be set from the mapping. ``None`` stands for an
    empty mapping.
    """
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ThemeError(
            f"expected a mapping for {cls.__name__}, got {type(data).__name__}"
        )

    fields = {
        _key_for(field): field
        for field in dataclasses.fields(cls)
        if field.init and not field.metadata.get("skip", False)
    }

    values: dict[str, Any] = {}
    for key, value in data.items():
        field = fields.get(key) if isinstance(key, str) else None
        if field is None:
            expected = ", ".join(f"`{name}`" for name in fields)
            raise ThemeError(
                f"unknown field `{key}` in {cls.__name__}, expected one of {expected}"
            )
        convert = field.metadata.get("convert")
        try:
            values[field.name] = convert(value) if convert is not None else value
        except ThemeError as exc:
            raise ThemeError(f"{key}: {exc}") from exc

    return cls(**values)