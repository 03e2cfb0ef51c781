from dataclasses import dataclass, field

import pytest

from lstheme.loader import ThemeError, build_section, parse_yaml, read_yaml


def _upper(value):
    if not isinstance(value, str):
        raise ThemeError("expected text")
    return value.upper()


@dataclass
class Inner:
    some_value: str = "inner"


@dataclass
class Outer:
    long_name: str = field(default="outer", metadata={"convert": _upper})
    inner: Inner = field(
        default_factory=Inner,
        metadata={"convert": lambda value: build_section(Inner, value)},
    )
    hidden: str = field(default="hidden", metadata={"skip": True})


def test_parse_yaml_returns_mapping():
    assert parse_yaml("a: 1\nb: [1, 2]\n") == {"a": 1, "b": [1, 2]}


def test_parse_yaml_empty_is_none():
    assert parse_yaml("  ") is None


def test_parse_yaml_invalid_raises():
    with pytest.raises(ThemeError):
        parse_yaml("a: [1, 2\n")


def test_read_yaml_reads_file(tmp_path):
    path = tmp_path / "theme.yaml"
    path.write_text("long-name: abc\n", encoding="utf-8")
    assert read_yaml(path) == {"long-name": "abc"}
    assert read_yaml(str(path)) == {"long-name": "abc"}


def test_read_yaml_missing_file_raises(tmp_path):
    with pytest.raises(ThemeError):
        read_yaml(tmp_path / "missing.yaml")


def test_build_section_none_gives_defaults():
    assert build_section(Outer, None) == Outer()


def test_build_section_kebab_keys_and_convert():
    built = build_section(Outer, {"long-name": "abc"})
    assert built.long_name == "ABC"
    assert built.inner == Inner()


def test_build_section_nested_partial():
    built = build_section(Outer, {"inner": {"some-value": "changed"}})
    assert built.inner.some_value == "changed"
    assert built.long_name == Outer().long_name


def test_build_section_unknown_key_raises():
    with pytest.raises(ThemeError, match="unknown field"):
        build_section(Outer, {"nope": 1})


def test_build_section_snake_case_key_is_unknown():
    with pytest.raises(ThemeError):
        build_section(Outer, {"long_name": "abc"})


def test_build_section_skipped_field_is_unknown():
    with pytest.raises(ThemeError):
        build_section(Outer, {"hidden": "x"})


def test_build_section_non_mapping_raises():
    with pytest.raises(ThemeError):
        build_section(Outer, [1, 2, 3])


def test_build_section_convert_error_names_key():
    with pytest.raises(ThemeError, match="long-name"):
        build_section(Outer, {"long-name": 5})