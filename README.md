# quickedit

The building blocks of a small modal terminal text editor, as a plain Python
library with no third-party dependencies. Everything here works on strings
and lists of lines. The rendering helpers return ANSI escape sequences as
strings, and the caller writes them to the terminal.

## Modules

### `quickedit.syntax`

- `SyntaxDef` describes a language. It holds a `name`, the `filetypes`
  (extensions), `keywords`, `types`, and the single-line and multi-line
  comment delimiters.
- `SyntaxRegistry` keeps definitions in order. `register` stops adding once
  the registry's capacity (64 by default) is reached. `detect(filename)`
  returns the most recently registered definition whose filetypes contain
  the file's extension, or `None`. The registry starts empty; no language
  definitions are built in.
- `Row` holds a line's text (`chars`), its highlight list (`hl`) and whether
  a multi-line comment is open at its start (`hl_open_comment`).
- `highlight_row(definition, row, open_comment)` fills `row.hl` with an
  `HlType` per character: keywords, types, strings and escapes, numbers,
  comments, `#` directives (with `#include` paths as strings) and rainbow
  brackets in four levels. It returns whether a multi-line comment is still
  open at the end of the row.
- `scan_row` computes only that open-comment state. `update_open_comments`
  carries it down a list of rows from a starting index and stops once the
  state settles.

### `quickedit.search`

- `match_literal(line, pattern, start_col)` returns `(col, length)` or `None`.
- `SearchQuery(pattern, matcher=match_literal)` and its `match` method.
- `find_next` and `find_prev` return `(row, col)` of the next or previous
  match, wrapping around the buffer, or `None`.

### `quickedit.recovery`

Crash-recovery snapshots in a small binary format. The format has a
`QER\x01` magic, a timestamp, the absolute path of the file, the cursor
position and the lines.

- `RecoveryStore(base_dir=".")` keeps snapshots in `<base_dir>/.qe/recovery`.
  Each snapshot is named by `path_hash(filepath)`, a 16-hex-digit hash of
  the absolute path.
- `save(filepath, lines, cx, cy)` writes a snapshot and returns its path.
- `exists(filepath)` is true when a snapshot is newer than the file, or when
  the file no longer exists.
- `load(filepath)` returns a `RecoveryState` with `lines`, `cx`, `cy`,
  `timestamp` and `stored_path`.
- `remove(filepath)` deletes the snapshot if there is one.

A missing, truncated or malformed snapshot raises `RecoveryError`.

### `quickedit.render_rows`

- `EditorMode` lists the editing modes (normal, insert, the three visual
  modes, command, search, fuzzy).
- `visual_col_range(...)` gives the selected `(start, end)` range on a row.
  `end` is `None` when the selection runs to the end of the line.
- `find_bracket_match(lines, row, col)` finds the bracket matching the one
  under the cursor.
- `diff_bg_escape(sign)` gives the background tint for a `+`, `~` or `-`
  diff sign.
- `render_row_content(row, vcol_start, vcol_count, tabwidth, ...)` renders
  the visible part of a row. It expands tabs and overlays bracket matches,
  the visual selection and search hits. The `palette` argument maps each
  `HlType` to an escape sequence.

### `quickedit.render_gutter`

- `gutter_width`, `diff_gutter_width`: widths of the line-number gutters.
- `render_number_gutter`: relative or absolute numbers, marks and git signs.
- `render_diff_gutter`: old and new line numbers of a unified diff.
- `scroll_offsets(cy, vcx, rowoff, coloff, screenrows, content_cols,
  scrolloff)`: the new `(rowoff, coloff)` that keep the cursor in view.
- `splash_line(y, height, width)`: one row of the empty-buffer splash.

### `quickedit.render_panels`

- `format_position(cy, numrows)` returns `Top`, `Bot` or a percentage.
- `pending_prefix(register, count, pending_op)` builds the hint for a
  partly typed command. An invalid register raises `ValueError`.
- `simple_status_bar(width, left, right, bar_escape)`.
- Line renderers for special panes: `render_quickfix_line`,
  `render_log_line`, `render_blame_line`, `render_commit_line`,
  `render_tree_line`, `render_revision_line`.

## Example

```python
from quickedit.syntax import SyntaxDef, SyntaxRegistry, Row, highlight_row
from quickedit.search import SearchQuery, find_next
from quickedit.render_rows import render_row_content

registry = SyntaxRegistry()
registry.register(SyntaxDef(
    name="c",
    filetypes=("c", "h"),
    keywords=("if", "return"),
    types=("int",),
    comment_single="//",
    comment_ml_start="/*",
    comment_ml_end="*/",
))
c_syntax = registry.detect("main.c")

row = Row("int x = 42; // answer")
highlight_row(c_syntax, row, False)
print(row.hl)

lines = ["alpha", "beta", "alphabet"]
print(find_next(SearchQuery("alpha"), lines, 0, 0))  # (2, 0)

print(repr(render_row_content(Row("a\tb"), 0, 80, 4)))  # 'a   b'
```

```python
from quickedit.recovery import RecoveryStore

store = RecoveryStore("/tmp/work")
store.save("notes.txt", ["first line", "second line"], cx=0, cy=1)
state = store.load("notes.txt")
print(state.lines, state.cx, state.cy)
store.remove("notes.txt")
```

## What this package does not do

This is a library of parts, not a complete editor. It has no command to
run and no main loop. It does not switch the terminal into raw mode or read
the window size. It does not run an embedded shell or emulate a terminal
screen. It does not draw a whole screen: there is no full-screen refresh,
no fuzzy-finder panel, no command bar and no pane dividers. The caller puts
the rendered pieces together and writes them out.

## Running the tests

```
pip install -e .[test]
pytest
```