import pytest

from lstheme.color import (
    AnsiValue,
    ColorTheme,
    NamedColor,
    Rgb,
    parse_color,
)
from lstheme.loader import ThemeError

DEFAULT_YAML = """---
user: 230
group: 187
permission:
  read: dark_green
  write: dark_yellow
  exec: dark_red
  exec-sticky: 5
  no-access: 245
date:
  hour-old: 40
  day-old: 42
  older: 36
size:
  none: 245
  small: 229
  medium: 216
  large: 172
inode:
  valid: 13
  invalid: 245
links:
  valid: 13
  invalid: 245
tree-edge: 245
"""


def test_default_theme():
    assert ColorTheme.default_dark() == ColorTheme.from_yaml(DEFAULT_YAML)


def test_default_theme_file(tmp_path):
    path = tmp_path / "theme.yaml"
    path.write_text(DEFAULT_YAML + "\n", encoding="utf-8")
    assert ColorTheme.default_dark() == ColorTheme.from_path(str(path))


def test_empty_theme_return_default():
    assert ColorTheme.from_yaml("user: 230") == ColorTheme.default_dark()


def test_first_level_theme_return_default_but_changed():
    theme = ColorTheme.default_dark()
    theme.user = AnsiValue(130)
    assert ColorTheme.from_yaml("user: 130") == theme


def test_hexadecimal_colors():
    theme = ColorTheme.from_yaml('user: "#ff007f"')
    assert theme.user == Rgb(r=255, g=0, b=127)


def test_second_level_theme_return_default_but_changed():
    theme = ColorTheme.default_dark()
    theme.permission.read = AnsiValue(130)
    assert ColorTheme.from_yaml("---\npermission:\n  read: 130") == theme


def test_default_values_pinned():
    theme = ColorTheme.default_dark()
    assert theme.user == AnsiValue(230)
    assert theme.group == AnsiValue(187)
    assert theme.permission.exec_sticky == AnsiValue(5)
    assert theme.git_status.conflicted == NamedColor.DARK_RED
    assert theme.file_type.char_device == AnsiValue(172)


def test_unknown_field_rejected():
    with pytest.raises(ThemeError):
        ColorTheme.from_yaml("colour: 1")


def test_file_type_cannot_be_set():
    with pytest.raises(ThemeError):
        ColorTheme.from_yaml("file-type:\n  pipe: 1")


def test_invalid_color_in_nested_section():
    with pytest.raises(ThemeError, match="permission"):
        ColorTheme.from_yaml("permission:\n  read: 300")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("dark_green", NamedColor.DARK_GREEN),
        ("DARK_GREEN", NamedColor.DARK_GREEN),
        ("grey", NamedColor.GREY),
        (0, AnsiValue(0)),
        (255, AnsiValue(255)),
        ([255, 0, 127], Rgb(255, 0, 127)),
        ("#ff007f", Rgb(255, 0, 127)),
        ("ansi_(130)", AnsiValue(130)),
        ("rgb_(255,0,127)", Rgb(255, 0, 127)),
    ],
)
def test_parse_color_accepts(value, expected):
    assert parse_color(value) == expected


@pytest.mark.parametrize(
    "value",
    [256, -1, True, 1.5, None, "purple", "#ff00", "#gg0000", [1, 2], [1, 2, 3, 4],
     [1, 2, 300], ["a", 2, 3], "ansi_(256)", "rgb_(1,2)"],
)
def test_parse_color_rejects(value):
    with pytest.raises(ThemeError):
        parse_color(value)


def test_color_values_validate_range():
    with pytest.raises(ValueError):
        AnsiValue(256)
    with pytest.raises(ValueError):
        Rgb(0, -1, 0)