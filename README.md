# lstheme

Theme definitions for a colourful directory lister. There are three
kinds of theme: terminal colours, file icons and git status symbols.
Themes are plain YAML, and every field in them is optional. A field
you leave out keeps its built-in default.

## Installation

```
pip install lstheme
```

## Colour themes

```python
from lstheme.color import AnsiValue, ColorTheme, Rgb

theme = ColorTheme.from_yaml("""
user: 130
permission:
  read: dark_green
  exec: "#ff007f"
size:
  large: [255, 128, 0]
""")

assert theme.user == AnsiValue(130)
assert theme.permission.exec == Rgb(255, 0, 127)
assert theme.group == ColorTheme.default_dark().group
```

A colour can be written in any of these forms:

- a colour name: `black`, `blue`, `dark_blue`, `cyan`, `dark_cyan`,
  `green`, `dark_green`, `grey`, `dark_grey`, `magenta`,
  `dark_magenta`, `red`, `dark_red`, `white`, `yellow` or
  `dark_yellow`. Names are case-insensitive.
- a 256-colour palette index from 0 to 255, written as a number or
  as `ansi_(N)`;
- a hexadecimal string such as `"#ff007f"`. In YAML it must be quoted.
- `rgb_(R,G,B)`;
- a list of exactly three bytes, `[r, g, b]`.

`lstheme.color.parse_color` turns one such value into a `NamedColor`,
an `AnsiValue` or an `Rgb`.

The theme has these top-level sections:

- `user`, `group` and `tree-edge`, which each take a single colour;
- `permission`, `date`, `size`, `inode`, `links` and `git-status`.

In YAML, field names use kebab-case, for example `tree-edge`,
`exec-sticky` or `hour-old`. The `file_type` section cannot be set
from YAML and always keeps its defaults.

`ColorTheme.default_dark()` returns the built-in theme. You can also
build a theme in any of these ways:

- from YAML text with `ColorTheme.from_yaml(text)`;
- from a file with `ColorTheme.from_path("theme.yaml")`;
- from data you have already parsed with `ColorTheme.from_mapping(data)`.

## Icon themes

```python
from lstheme.icon import IconTheme

icons = IconTheme.from_yaml("""
name:
  cargo.toml: "📦"
extension:
  rs: "🦀"
filetype:
  dir: "D"
""")

icons.name["cargo.toml"]   # "📦"
icons.name["cargo.lock"]   # the built-in icon is kept
icons.extension["go"]      # the built-in icon is kept
icons.filetype.dir         # "D"
```

The `name` and `extension` entries you give are added to the built-in
tables. Where a key is already in a table, your entry overrides it;
the rest of the table stays as it is. The `filetype` section covers
these fields:

- `dir`, `file`, `pipe`, `socket` and `executable`;
- `device-char`, `device-block` and `special`;
- `symlink-dir` and `symlink-file`.

An empty value means no icon.

`IconTheme.unicode()` returns a theme with empty name and extension
tables and emoji file-type icons (`ByType.unicode()`), which need no
special font. The module `lstheme.icon_defaults` gives fresh copies of
the built-in tables through `default_icons_by_name()` and
`default_icons_by_extension()`.

## Git symbols

```python
from lstheme.git import GitThemeSymbols

symbols = GitThemeSymbols.from_yaml("modified: '~'")
symbols.modified   # "~"
symbols.deleted    # "D"
```

The fields are:

- `default`, `unmodified` and `ignored`;
- `new-in-index` and `new-in-workdir`;
- `deleted`, `modified`, `renamed`, `typechange` and `conflicted`.

## Errors

Every loader raises `lstheme.loader.ThemeError`, a subclass of
`ValueError`, in these cases:

- the YAML is invalid;
- the file cannot be read;
- a key is unknown;
- a value has the wrong type;
- a value cannot be read as a colour.

The lower-level helpers `parse_yaml`, `read_yaml` and `build_section`
are also available from `lstheme.loader`.

## What this package does not do

This package only holds and loads theme data. It provides no command,
and it does not list directories or render any output. It also does
not look up an icon or a colour for a given file. Choosing an entry
from the tables is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```