"""Per-row content rendering: selections, bracket matching and highlight overlays."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterable, Mapping, Sequence

from .search import SearchQuery
from .syntax import HlType, Row

SGR_RESET = "\x1b[m"

GIT_SIGN_ADD = "+"
GIT_SIGN_MOD = "~"
GIT_SIGN_DEL = "-"

_DIFF_BACKGROUNDS = {
    GIT_SIGN_ADD: "\x1b[48;2;30;50;30m",
    GIT_SIGN_MOD: "\x1b[48;2;50;50;20m",
    GIT_SIGN_DEL: "\x1b[48;2;50;30;30m",
}

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {close: open_ for open_, close in _OPENERS.items()}

# A visual range is (start, end); end None means "to the end of the line".
VisualRange = tuple[int, "int | None"]


class EditorMode(Enum):
    """Editing mode, which decides how selections and the cursor are drawn."""

    NORMAL = auto()
    INSERT = auto()
    VISUAL = auto()
    VISUAL_LINE = auto()
    VISUAL_BLOCK = auto()
    COMMAND = auto()
    SEARCH = auto()
    FUZZY = auto()

    @property
    def is_visual(self) -> bool:
        return self in (EditorMode.VISUAL, EditorMode.VISUAL_LINE, EditorMode.VISUAL_BLOCK)


def visual_col_range(
    filerow: int,
    anchor_row: int,
    anchor_col: int,
    cur_row: int,
    cur_col: int,
    mode: EditorMode,
) -> VisualRange | None:
    """Selected column range ``[start, end)`` on ``filerow``, or None if unselected."""
    if not mode.is_visual:
        return None
    if not min(anchor_row, cur_row) <= filerow <= max(anchor_row, cur_row):
        return None

    if mode is EditorMode.VISUAL_LINE:
        return 0, None
    if mode is EditorMode.VISUAL_BLOCK:
        return min(anchor_col, cur_col), max(anchor_col, cur_col) + 1

    (sr, sc), (er, ec) = sorted([(anchor_row, anchor_col), (cur_row, cur_col)])
    start = sc if filerow == sr else 0
    end = ec + 1 if filerow == er else None
    return start, end


def diff_bg_escape(sign: str | None) -> str | None:
    """Background tint for a diff sign, or None for unchanged lines."""
    return _DIFF_BACKGROUNDS.get(sign) if sign else None


def find_bracket_match(lines: Sequence[str], row: int, col: int) -> tuple[int, int] | None:
    """Position of the bracket matching the one at ``(row, col)``, if any."""
    if not 0 <= row < len(lines):
        return None
    line = lines[row]
    if not 0 <= col < len(line):
        return None
    ch = line[col]

    depth = 1
    if ch in _OPENERS:
        open_ch, close_ch = ch, _OPENERS[ch]
        c = col + 1
        for r in range(row, len(lines)):
            text = lines[r]
            while c < len(text):
                if text[c] == open_ch:
                    depth += 1
                elif text[c] == close_ch:
                    depth -= 1
                    if depth == 0:
                        return r, c
                c += 1
            c = 0
        return None

    if ch in _CLOSERS:
        open_ch, close_ch = _CLOSERS[ch], ch
        c = col - 1
        for r in range(row, -1, -1):
            text = lines[r]
            if r != row:
                c = len(text) - 1
            while c >= 0:
                if text[c] == close_ch:
                    depth += 1
                elif text[c] == open_ch:
                    depth -= 1
                    if depth == 0:
                        return r, c
                c -= 1
        return None

    return None


def _final_highlight(
    row: Row,
    query: SearchQuery | None,
    bracket_cols: Iterable[int],
    visual: VisualRange | None,
    cursor_col: int,
) -> list[HlType]:
    length = len(row.chars)
    fhl = list(row.hl) if row.hl else [HlType.NORMAL] * length

    for col in bracket_cols:
        if 0 <= col < length:
            fhl[col] = HlType.BRACKET_MATCH

    if visual is not None and visual[0] >= 0:
        start = visual[0]
        end = length if visual[1] is None else min(visual[1], length)
        for k in range(start, end):
            fhl[k] = HlType.VISUAL

    if query is not None:
        pos = 0
        while pos < length:
            found = query.match(row.chars, pos)
            if found is None:
                break
            mc, ml = found
            end = min(mc + ml, length)
            for k in range(mc, end):
                fhl[k] = HlType.SEARCH
            pos = mc + ml if mc + ml > pos else pos + 1

    if 0 <= cursor_col < length:
        fhl[cursor_col] = row.hl[cursor_col] if row.hl else HlType.NORMAL
    return fhl


def render_row_content(
    row: Row,
    vcol_start: int,
    vcol_count: int,
    tabwidth: int,
    query: SearchQuery | None = None,
    bracket_cols: Iterable[int] = (),
    visual: VisualRange | None = None,
    cursor_col: int = -1,
    bg_escape: str | None = None,
    palette: Mapping[HlType, str] | None = None,
) -> str:
    """Render the part of ``row`` visible in the visual-column viewport.

    Tabs are expanded to ``tabwidth`` stops.  ``cursor_col`` keeps its syntax
    colour so the terminal cursor stays visible over overlays.
    """
    length = len(row.chars)
    if vcol_count <= 0 or length == 0:
        return ""
    palette = palette or {}
    fhl = _final_highlight(row, query, bracket_cols, visual, cursor_col)

    out: list[str] = []
    any_esc = False
    if bg_escape:
        out.append(bg_escape)
        any_esc = True

    prev_hl = HlType.NORMAL
    view_end = vcol_start + vcol_count
    vcol = 0
    for ch, cur in zip(row.chars, fhl):
        width = tabwidth - vcol % tabwidth if ch == "\t" else 1
        char_end = vcol + width
        if char_end <= vcol_start:
            vcol = char_end
            continue
        if vcol >= view_end:
            break

        visible = min(char_end, view_end) - max(vcol, vcol_start)
        if cur != prev_hl:
            out.append(SGR_RESET)
            if bg_escape:
                out.append(bg_escape)
            esc = palette.get(cur)
            if esc:
                out.append(esc)
            prev_hl = cur
            any_esc = True

        out.append(" " * visible if ch == "\t" else ch)
        vcol = char_end

    if any_esc:
        out.append(SGR_RESET)
    return "".join(out)