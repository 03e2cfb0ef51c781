import pytest

from lstheme.icon_defaults import default_icons_by_extension, default_icons_by_name


@pytest.mark.parametrize(
    "name, icon",
    [
        ("cargo.lock", "\ue7a8"),
        ("cargo.toml", "\ue7a8"),
        (".trash", "\uf1f8"),
        ("a.out", "\uf489"),
        (".emacs.d", "\ue779"),
        ("hosts", "\U000f0002"),
        ("__pycache__", "\U000f0320"),
    ],
)
def test_known_names(name, icon):
    assert default_icons_by_name()[name] == icon


@pytest.mark.parametrize(
    "ext, icon",
    [
        ("go", "\ue627"),
        ("rs", "\ue7a8"),
        ("hs", "\ue777"),
        ("7z", "\uf410"),
        ("c++", "\ue61d"),
        ("vue", "\U000f0844"),
    ],
)
def test_known_extensions(ext, icon):
    assert default_icons_by_extension()[ext] == icon


def test_extension_keys_are_lower_case():
    keys = default_icons_by_extension()
    assert all(key == key.lower() for key in keys)


def test_mixed_case_names_share_lower_case_icon():
    names = default_icons_by_name()
    for key, icon in names.items():
        if key != key.lower():
            assert names[key.lower()] == icon


def test_every_icon_is_one_character():
    for table in (default_icons_by_name(), default_icons_by_extension()):
        assert all(isinstance(icon, str) and len(icon) == 1 for icon in table.values())


def test_name_table_is_a_fresh_copy():
    first = default_icons_by_name()
    first["cargo.lock"] = "x"
    del first[".trash"]
    second = default_icons_by_name()
    assert second["cargo.lock"] == "\ue7a8"
    assert second[".trash"] == "\uf1f8"


def test_extension_table_is_a_fresh_copy():
    first = default_icons_by_extension()
    first.clear()
    assert default_icons_by_extension()["go"] == "\ue627"


def test_unknown_entries_are_absent():
    assert "no-such-name" not in default_icons_by_name()
    assert "nosuchext" not in default_icons_by_extension()