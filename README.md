# lcftools

Small tools for working with RPG Maker 2000/2003 game folders:

- **gencache**: a command that writes a JSON index of a game directory, so
  that a player running on a case-sensitive or remote file system can find
  files by their normalised, lower-case names.
- **Translation catalogues**: read, write, merge and match gettext `.po`
  catalogues of the kind used to translate games.
- **Map graphs**: turn a list of teleports between maps into a Graphviz
  `dot` graph.

The package has no dependencies outside the Python standard library and
needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## gencache

```
gencache [OPTIONS] [DIRECTORY]
```

Scans `DIRECTORY` (the current directory if none is given) and writes a JSON
file describing its contents. Further directory arguments are skipped with a
warning.

| Option | Meaning |
| --- | --- |
| `-h`, `--help` | Show the usage message |
| `-p`, `--pretty` | Pretty print the JSON (two-space indent) |
| `-o`, `--output FILE` | Output file name (default: `index.json`) |
| `-r`, `--recurse DEPTH` | Recursion depth (default: 4) |

The output has two top-level keys; object keys are written in sorted order
and non-ASCII text is kept as UTF-8:

```json
{
  "cache": {
    "picture": {
      "_dirname": "Picture",
      "title": "Title.png"
    },
    "rpg_rt.ldb": "RPG_RT.ldb"
  },
  "metadata": {"date": "2024-01-31", "version": 2}
}
```

Keys are the entry names lower-cased and NFKC-normalised; values are the real
names on disk. In the top directory every file keeps its extension in the
key (except that `ExFont.*` becomes `exfont`); in sub-directories the
extension is dropped from the key, except for `.ini` and `.po` files. Each
sub-directory records its real name under `_dirname`; an entry that is itself
called `_dirname` is skipped with a warning, and empty sub-directories are
left out. If nothing was found, `cache` is `null`.

The same work is available from Python:

```python
from lcftools.gencache import parse_dir_recursive, build_document

cache = parse_dir_recursive("MyGame", 4, True)
document = build_document(cache, "2024-01-31")
```

`strip_ext` and `basename` are the small name helpers the scan uses.

## Translation catalogues

`lcftools.translation.Translation` holds a list of `lcftools.entry.Entry`
objects in its `entries` attribute; each entry has the original lines
(`original`, the msgid), the translated lines (`translation`, the msgstr), an
optional `context` (msgctxt), extracted comments (`info`, written as `#.`), a
`location` (`#:`) and a `fuzzy` flag.

```python
from lcftools.translation import Translation

current = Translation.from_po("RPG_RT.ldb.po")
previous = Translation.from_po("old/RPG_RT.ldb.po")

stale = current.merge(previous)   # translated entries whose original text disappeared

with open("RPG_RT.ldb.po", "w", encoding="utf-8") as out:
    current.write(out)
```

- `add_entry` stores a copy of an entry unless all of its original lines are
  empty.
- `write` writes a fixed PO header and then the entries; entries with the same
  context and original text are written as one message carrying all their
  comments.
- `merge` copies existing translations onto entries with the same original
  text and returns a `Translation` of the entries that no longer have a
  counterpart.
- `match` pairs untranslated entries with the other catalogue's entries by
  context, or by the `ID ...` location comment (exactly first, then ignoring
  `Line N`, which marks the entry as fuzzy), and makes the other catalogue's
  original text the translation. It returns `(unmatched, number_of_matches)`.
- `Translation.parse_po` reads a catalogue from an open text stream instead
  of a path. Only `msgctxt`, `msgid`, `msgstr` and `#.` lines are read;
  malformed lines are reported on standard error and parsing goes on.

### Matching whole directories

```python
from lcftools.po_match import match_directories

results = match_directories("original_po", "translated_po", "out")
```

Every `.po` file in the merge directory (`translated_po`) is matched with the
file of the same name, ignoring ASCII case, in the input directory
(`original_po`). The matched catalogue is written to the output directory
under the input name, and entries that matched nothing go to
`<name>.unmatched.po`. Progress lines go to `print`, or to the `report`
callable if one is given. The result is a list of `MatchResult` records
(`name`, `matched`, `fuzzy`, `unmatched`). The output directory must differ
from the merge directory, or `ValueError` is raised.

`list_directory` returns the `(name, lower-case name)` pairs of a directory,
sorted by name.

## Map graphs

`lcftools.mapgraph` builds a `strict digraph` from the teleports between
maps:

```python
from lcftools.mapgraph import render_dot

maps = [(1, "Town"), (2, "Forest"), (3, "Cave")]
edges = [(1, 2), (2, 1), (2, 3)]
print(render_dot(maps, edges, 1, -1, False))
```

Edges that run both ways are drawn once with `dir=both`, and the start map is
drawn as a filled box. With `remove_unreachable` set, maps that cannot be
reached from the start map, or lie deeper than `depth_limit` teleports, are
left out (`None` or a negative limit means no limit); `reachable_maps`
computes that set with each map's smallest depth, and `map_filename` gives
the `mapNNNN.lmu` file name for a map ID.

Render the result with Graphviz, for example
`dot -Goverlap=false -Gsplines=true -Tpng -o graph.png graph.dot`.

## Text helpers

`lcftools.textutils` holds the string helpers used above: ASCII-only
`lower_case`, `has_ext`, `get_filename`, `join`, `split`,
`remove_control_chars`, `trim_whitespace`, `escape` for PO strings and
`read_lines`, which accepts `\n`, `\r` and `\r\n` line endings.

## What this package does not do

- It does not read RPG Maker database, map tree or map files (`.ldb`, `.lmt`,
  `.lmu`). Catalogues cannot be created or updated from game data; they can
  only be read, merged, matched and written as `.po` files.
- It does not detect a game's text encoding.
- The map graph is drawn from maps and teleport edges that you supply; the
  package does not find the teleports in the game's maps itself.
- `gencache` is the only command. Catalogue matching and map graphs are used
  from Python.