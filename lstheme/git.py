"""Symbols shown for each git status."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Any

from .loader import ThemeError, build_section, parse_yaml, read_yaml


def _symbol(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ThemeError(f"invalid symbol {value!r}, expected a string")
    return value


def _text(default: str) -> Any:
    return dataclasses.field(default=default, metadata={"convert": _symbol})


@dataclass
class GitThemeSymbols:
    """The symbol shown for each git status; unset entries keep their defaults."""

    default: str = _text("-")
    unmodified: str = _text(".")
    new_in_index: str = _text("N")
    new_in_workdir: str = _text("?")
    deleted: str = _text("D")
    modified: str = _text("M")
    renamed: str = _text("R")
    ignored: str = _text("I")
    typechange: str = _text("T")
    conflicted: str = _text("C")

    @classmethod
    def from_mapping(cls, data: Any) -> GitThemeSymbols:
        """Build the symbols from parsed YAML data."""
        return build_section(cls, data)

    @classmethod
    def from_yaml(cls, text: str) -> GitThemeSymbols:
        """Build the symbols from YAML text."""
        return cls.from_mapping(parse_yaml(text))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> GitThemeSymbols:
        """Build the symbols from a YAML file."""
        return cls.from_mapping(read_yaml(path))