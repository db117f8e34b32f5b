"""Line-number gutters, viewport scrolling and the empty-buffer splash screen."""

from __future__ import annotations

from typing import Iterable

from .render_rows import GIT_SIGN_ADD, GIT_SIGN_DEL, GIT_SIGN_MOD, SGR_RESET

BOLD = "\x1b[1m"
DIM = "\x1b[2m"
MARK_COLOUR = "\x1b[33m"

_SIGN_CELLS = {
    GIT_SIGN_ADD: "\x1b[32m+",
    GIT_SIGN_MOD: "\x1b[33m~",
    GIT_SIGN_DEL: "\x1b[31m-",
}

_DIFF_NUMBER_COLOURS = {
    GIT_SIGN_ADD: "\x1b[38;5;77m",
    GIT_SIGN_DEL: "\x1b[38;5;167m",
    GIT_SIGN_MOD: "\x1b[38;5;186m",
}

SPLASH = (
    "Quick Ed",
    "",
    "Version 0.1",
    "A small modal text editor",
    "Qe is open source and freely distributable",
    "",
    "Type  :q<Enter>             to exit",
    "Type  :w <File>             to write",
)


def _digits(value: int) -> int:
    return len(str(max(value, 0)))


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def gutter_width(numrows: int, has_marks: bool = False, has_git_signs: bool = False) -> int:
    """Columns taken by the line-number gutter of a buffer with ``numrows`` rows."""
    if numrows <= 0:
        return 0
    width = len(str(numrows)) + 1
    if has_marks:
        width += 2
    if has_git_signs:
        width += 1
    return width


def _diff_digit_widths(line_numbers: Iterable[tuple[int, int]]) -> tuple[int, int]:
    max_old = max_new = 0
    for old, new in line_numbers:
        max_old = max(max_old, old)
        max_new = max(max_new, new)
    return _digits(max_old), _digits(max_new)


def diff_gutter_width(line_numbers: Iterable[tuple[int, int]]) -> int:
    """Width of a unified-diff gutter: old number, new number and a sign column."""
    old_digits, new_digits = _diff_digit_widths(line_numbers)
    return old_digits + 1 + new_digits + 1 + 1


def _sign_cell(git_sign: str | None) -> str:
    return _SIGN_CELLS.get(git_sign or " ", " ")


def render_number_gutter(
    filerow: int,
    cursor_row: int,
    width: int,
    relative: bool = False,
    has_marks: bool = False,
    mark: str | None = None,
    git_sign: str | None = None,
    row_bg: str | None = None,
    diff_sign: str | None = None,
) -> str:
    """Gutter for one row: optional git sign, optional mark, right-aligned number.

    ``git_sign`` is None when the buffer has no git signs at all; a blank
    string or space draws an empty sign column.
    """
    has_git = git_sign is not None
    on_cursor = filerow == cursor_row
    if relative and not on_cursor:
        number = str(abs(filerow - cursor_row))
    else:
        number = str(filerow + 1)
    num_width = width - (2 if has_marks else 0) - (1 if has_git else 0)
    pad = num_width - 1 - len(number)
    weight = BOLD if on_cursor else DIM
    restore_bg = row_bg or ""

    out: list[str] = []
    if has_git:
        out.append(_sign_cell(git_sign))
        out.append(SGR_RESET)
        out.append(restore_bg)

    if row_bg:
        out.append(_DIFF_NUMBER_COLOURS.get(diff_sign or "", weight))
    else:
        out.append(weight)

    if has_marks:
        if mark:
            out.append(MARK_COLOUR)
            out.append(mark[0])
            if row_bg:
                out.append(SGR_RESET)
                out.append(row_bg)
            out.append(weight)
        else:
            out.append(" ")
        out.append(" ")

    out.append(" " * max(pad, 0))
    out.append(number)
    out.append(" ")
    out.append(SGR_RESET)
    out.append(restore_bg)
    return "".join(out)


def _diff_number(value: int, digits: int, colour: str) -> str:
    if value > 0:
        return colour + str(value).rjust(digits)
    return DIM + " " * digits


def render_diff_gutter(
    old_line: int,
    new_line: int,
    old_digits: int,
    new_digits: int,
    git_sign: str | None = None,
    row_bg: str | None = None,
    diff_sign: str | None = None,
) -> str:
    """Gutter for a unified-diff row: sign column, old number, new number.

    A line number of zero or less leaves its column blank.
    """
    restore_bg = row_bg or ""
    old_colour = _DIFF_NUMBER_COLOURS[GIT_SIGN_DEL] if diff_sign == GIT_SIGN_DEL else DIM
    new_colour = _DIFF_NUMBER_COLOURS[GIT_SIGN_ADD] if diff_sign == GIT_SIGN_ADD else DIM
    return "".join(
        (
            _sign_cell(git_sign),
            SGR_RESET,
            restore_bg,
            _diff_number(old_line, old_digits, old_colour),
            " ",
            SGR_RESET,
            restore_bg,
            _diff_number(new_line, new_digits, new_colour),
            " ",
            SGR_RESET,
            restore_bg,
        )
    )


def scroll_offsets(
    cy: int,
    vcx: int,
    rowoff: int,
    coloff: int,
    screenrows: int,
    content_cols: int,
    scrolloff: int = 0,
) -> tuple[int, int]:
    """New ``(rowoff, coloff)`` keeping the cursor inside the viewport.

    ``vcx`` is the cursor's visual column (tabs expanded).
    """
    so = min(scrolloff, screenrows // 2)

    if cy < rowoff + so:
        rowoff = cy - so
    rowoff = max(rowoff, 0)

    visible = max(cy - rowoff, 0)
    if visible >= screenrows - so:
        back = max(screenrows - 1 - so, 0)
        rowoff = cy - min(back, max(cy, 0))

    if vcx < coloff:
        coloff = vcx
    if vcx >= coloff + content_cols:
        coloff = vcx - content_cols + 1
    return rowoff, coloff


def splash_line(y: int, height: int, width: int) -> str:
    """Row ``y`` of the splash shown in an empty single-pane buffer."""
    if width <= 1:
        return ""
    top = _trunc_div(height - len(SPLASH), 2)
    idx = y - top
    if not 0 <= idx < len(SPLASH):
        return "~"
    text = SPLASH[idx][:width]
    pad = max(_trunc_div(width - 1 - len(text), 2), 0)
    return "~" + " " * pad + text