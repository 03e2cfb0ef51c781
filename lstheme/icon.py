"""Icon theme: icons by file name, by extension and by file type."""

from __future__ import annotations

import dataclasses
import functools
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .icon_defaults import default_icons_by_extension, default_icons_by_name
from .loader import ThemeError, build_section, parse_yaml, read_yaml


def _icon(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ThemeError(f"invalid icon {value!r}, expected a string")
    return value


def _merge_onto(defaults: Callable[[], dict[str, str]], data: Any) -> dict[str, str]:
    """Lay the user's entries over the built-in icons."""
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ThemeError(f"expected a mapping of icons, got {type(data).__name__}")
    merged = defaults()
    for key, value in data.items():
        if not isinstance(key, str):
            raise ThemeError(f"invalid key {key!r}, expected a string")
        merged[key] = _icon(value)
    return merged


def _icons(defaults: Callable[[], dict[str, str]]) -> Any:
    return dataclasses.field(
        default_factory=defaults,
        metadata={"convert": functools.partial(_merge_onto, defaults)},
    )


def _text(default: str) -> Any:
    return dataclasses.field(default=default, metadata={"convert": _icon})


@dataclass
class ByType:
    """The icon shown for each kind of file."""

    dir: str = _text("\uf115")
    file: str = _text("\uf016")
    pipe: str = _text("\U000f0232")
    socket: str = _text("\U000f01a8")
    executable: str = _text("\uf489")
    device_char: str = _text("\ue601")
    device_block: str = _text("\U000f072b")
    special: str = _text("\uf2dc")
    symlink_dir: str = _text("\uf482")
    symlink_file: str = _text("\uf481")

    @classmethod
    def unicode(cls) -> ByType:
        """Icons drawn from plain Unicode emoji instead of a patched font."""
        return cls(
            dir="\U0001f4c2",
            file="\U0001f4c4",
            pipe="\U0001f4e9",
            socket="\U0001f4ec",
            executable="\U0001f3d7",
            symlink_dir="\U0001f5c2",
            symlink_file="\U0001f516",
            device_char="\U0001f5a8",
            device_block="\U0001f4bd",
            special="\U0001f4df",
        )


@dataclass
class IconTheme:
    """The full icon theme; user entries are added to the built-in ones."""

    name: dict[str, str] = _icons(default_icons_by_name)
    extension: dict[str, str] = _icons(default_icons_by_extension)
    filetype: ByType = dataclasses.field(
        default_factory=ByType,
        metadata={"convert": functools.partial(build_section, ByType)},
    )

    @classmethod
    def unicode(cls) -> IconTheme:
        """A theme with no name or extension icons and emoji file-type icons."""
        return cls(name={}, extension={}, filetype=ByType.unicode())

    @classmethod
    def from_mapping(cls, data: Any) -> IconTheme:
        """Build a theme from parsed YAML data."""
        return build_section(cls, data)

    @classmethod
    def from_yaml(cls, text: str) -> IconTheme:
        """Build a theme from YAML text."""
        return cls.from_mapping(parse_yaml(text))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> IconTheme:
        """Build a theme from a YAML file."""
        return cls.from_mapping(read_yaml(path))