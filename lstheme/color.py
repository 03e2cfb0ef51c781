"""Colour theme: colour values and the sections of a colour theme."""

from __future__ import annotations

import dataclasses
import enum
import functools
import os
import re
from dataclasses import dataclass
from typing import Any, Union

from .loader import ThemeError, build_section, parse_yaml, read_yaml

_EXPECTED = (
    "`black`, `blue`, `dark_blue`, `cyan`, `dark_cyan`, `green`, `dark_green`, "
    "`grey`, `dark_grey`, `magenta`, `dark_magenta`, `red`, `dark_red`, `white`, "
    "`yellow`, `dark_yellow`, `u8`, or `3 u8 array`"
)

_U8_RE = re.compile(r"\+?[0-9]+")
_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")


class NamedColor(enum.Enum):
    """One of the sixteen named terminal colours."""

    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"


def _check_byte(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


@dataclass(frozen=True)
class AnsiValue:
    """A colour from the 256-colour terminal palette."""

    value: int

    def __post_init__(self) -> None:
        _check_byte("value", self.value)


@dataclass(frozen=True)
class Rgb:
    """A true colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_byte(name, getattr(self, name))


Color = Union[NamedColor, AnsiValue, Rgb]


def _parse_u8(text: str) -> int | None:
    if not _U8_RE.fullmatch(text):
        return None
    number = int(text)
    return number if number <= 255 else None


def _parse_color_text(value: str) -> Color:
    try:
        return NamedColor(value.lower())
    except ValueError:
        pass

    if "ansi" in value:
        number = _parse_u8(value.replace("ansi_(", "").replace(")", ""))
        if number is not None:
            return AnsiValue(number)
    elif "rgb" in value:
        parts = value.replace("rgb_(", "").replace(")", "").split(",")
        if len(parts) == 3:
            channels = [_parse_u8(part) for part in parts]
            if None not in channels:
                return Rgb(*channels)
    elif value.startswith("#"):
        digits = value[1:]
        if _HEX_RE.fullmatch(digits):
            return Rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    raise ThemeError(f"invalid color {value!r}, expected {_EXPECTED}")


def _channel(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ThemeError(f"invalid RGB component {value!r}, expected u8")
    return value


def parse_color(value: Any) -> Color:
    """Turn a YAML colour value (name, palette number or RGB triple) into a colour."""
    if isinstance(value, bool):
        raise ThemeError(f"invalid color {value!r}, expected {_EXPECTED}")
    if isinstance(value, int):
        if 0 <= value <= 255:
            return AnsiValue(value)
        raise ThemeError(f"invalid color {value!r}, expected {_EXPECTED}")
    if isinstance(value, str):
        return _parse_color_text(value)
    if isinstance(value, (list, tuple)):
        if len(value) != 3:
            raise ThemeError(f"invalid length {len(value)}, expected a list of size 3(RGB)")
        return Rgb(*(_channel(item) for item in value))
    raise ThemeError(f"invalid color {value!r}, expected {_EXPECTED}")


def _color(default: Color) -> Any:
    return dataclasses.field(default=default, metadata={"convert": parse_color})


def _section(cls: type) -> Any:
    return dataclasses.field(
        default_factory=cls,
        metadata={"convert": functools.partial(build_section, cls)},
    )


@dataclass
class Permission:
    read: Color = _color(NamedColor.DARK_GREEN)
    write: Color = _color(NamedColor.DARK_YELLOW)
    exec: Color = _color(NamedColor.DARK_RED)
    exec_sticky: Color = _color(AnsiValue(5))
    no_access: Color = _color(AnsiValue(245))
    octal: Color = _color(AnsiValue(6))
    acl: Color = _color(NamedColor.DARK_CYAN)
    context: Color = _color(NamedColor.CYAN)


@dataclass
class File:
    exec_uid: Color = _color(AnsiValue(40))
    uid_no_exec: Color = _color(AnsiValue(184))
    exec_no_uid: Color = _color(AnsiValue(40))
    no_exec_no_uid: Color = _color(AnsiValue(184))


@dataclass
class Dir:
    uid: Color = _color(AnsiValue(33))
    no_uid: Color = _color(AnsiValue(33))


@dataclass
class Symlink:
    default: Color = _color(AnsiValue(44))
    broken: Color = _color(AnsiValue(124))
    missing_target: Color = _color(AnsiValue(124))


@dataclass
class FileType:
    file: File = _section(File)
    dir: Dir = _section(Dir)
    pipe: Color = _color(AnsiValue(44))
    symlink: Symlink = _section(Symlink)
    block_device: Color = _color(AnsiValue(44))
    char_device: Color = _color(AnsiValue(172))
    socket: Color = _color(AnsiValue(44))
    special: Color = _color(AnsiValue(44))


@dataclass
class Date:
    hour_old: Color = _color(AnsiValue(40))
    day_old: Color = _color(AnsiValue(42))
    older: Color = _color(AnsiValue(36))


@dataclass
class Size:
    none: Color = _color(AnsiValue(245))
    small: Color = _color(AnsiValue(229))
    medium: Color = _color(AnsiValue(216))
    large: Color = _color(AnsiValue(172))


@dataclass
class INode:
    valid: Color = _color(AnsiValue(13))
    invalid: Color = _color(AnsiValue(245))


@dataclass
class Links:
    valid: Color = _color(AnsiValue(13))
    invalid: Color = _color(AnsiValue(245))


@dataclass
class GitStatus:
    default: Color = _color(AnsiValue(245))
    unmodified: Color = _color(AnsiValue(245))
    ignored: Color = _color(AnsiValue(245))
    new_in_index: Color = _color(NamedColor.DARK_GREEN)
    new_in_workdir: Color = _color(NamedColor.DARK_GREEN)
    typechange: Color = _color(NamedColor.DARK_YELLOW)
    deleted: Color = _color(NamedColor.DARK_RED)
    renamed: Color = _color(NamedColor.DARK_GREEN)
    modified: Color = _color(NamedColor.DARK_YELLOW)
    conflicted: Color = _color(NamedColor.DARK_RED)


@dataclass
class ColorTheme:
    """The full colour theme; unset entries keep the dark defaults."""

    user: Color = _color(AnsiValue(230))
    group: Color = _color(AnsiValue(187))
    permission: Permission = _section(Permission)
    date: Date = _section(Date)
    size: Size = _section(Size)
    inode: INode = _section(INode)
    tree_edge: Color = _color(AnsiValue(245))
    links: Links = _section(Links)
    git_status: GitStatus = _section(GitStatus)
    file_type: FileType = dataclasses.field(
        default_factory=FileType, metadata={"skip": True}
    )

    @classmethod
    def default_dark(cls) -> ColorTheme:
        """The theme for dark terminal backgrounds."""
        return cls()

    @classmethod
    def from_mapping(cls, data: Any) -> ColorTheme:
        """Build a theme from parsed YAML data."""
        return build_section(cls, data)

    @classmethod
    def from_yaml(cls, text: str) -> ColorTheme:
        """Build a theme from YAML text."""
        return cls.from_mapping(parse_yaml(text))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> ColorTheme:
        """Build a theme from a YAML file."""
        return cls.from_mapping(read_yaml(path))