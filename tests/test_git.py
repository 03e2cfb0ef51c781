import pytest

from lstheme.git import GitThemeSymbols
from lstheme.loader import ThemeError


def test_defaults_pinned():
    symbols = GitThemeSymbols()
    assert symbols.default == "-"
    assert symbols.unmodified == "."
    assert symbols.new_in_index == "N"
    assert symbols.new_in_workdir == "?"
    assert symbols.conflicted == "C"


def test_empty_yaml_gives_defaults():
    assert GitThemeSymbols.from_yaml("  ") == GitThemeSymbols()


def test_partial_override_keeps_other_defaults():
    symbols = GitThemeSymbols.from_yaml("modified: '*'\nnew-in-index: '+'")
    assert symbols.modified == "*"
    assert symbols.new_in_index == "+"
    assert symbols.deleted == GitThemeSymbols().deleted


def test_from_mapping_matches_from_yaml():
    assert GitThemeSymbols.from_mapping({"renamed": ">"}) == GitThemeSymbols.from_yaml(
        "renamed: '>'"
    )


def test_from_path(tmp_path):
    path = tmp_path / "git.yaml"
    path.write_text("ignored: '!'\n", encoding="utf-8")
    symbols = GitThemeSymbols.from_path(path)
    assert symbols.ignored == "!"
    assert symbols.typechange == GitThemeSymbols().typechange


def test_unknown_field_rejected():
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_yaml("untracked: U")


def test_snake_case_key_rejected():
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_yaml("new_in_index: N")


def test_non_string_symbol_rejected():
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_yaml("modified: [1, 2]")


def test_missing_file_raises(tmp_path):
    with pytest.raises(ThemeError):
        GitThemeSymbols.from_path(tmp_path / "absent.yaml")