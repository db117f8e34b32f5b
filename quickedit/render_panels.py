"""Status bars and the line renderers of the special (non-file) panes."""

from __future__ import annotations

from .render_rows import SGR_RESET

REVERSE = "\x1b[7m"
DIM = "\x1b[2m"
DIM_REVERSE = "\x1b[2;7m"
YELLOW = "\x1b[33m"
YELLOW_REVERSE = "\x1b[33;7m"
CYAN = "\x1b[36m"
CYAN_REVERSE = "\x1b[36;7m"
GREEN = "\x1b[32m"
RED = "\x1b[31m"
BOLD_YELLOW = "\x1b[1;33m"

SELECTED_MARKER = "\u25b6 "
UNSELECTED_MARKER = "  "
CURRENT_REVISION_MARKER = "\u25c0"
CLIPBOARD_REGISTER = "+"
AUTHOR_WIDTH = 12

_TREE_COLOURS = {"?": GREEN, "A": GREEN, "M": YELLOW, "D": RED}


def format_position(cy: int, numrows: int) -> str:
    """Vertical position of the cursor: ``Top``, ``Bot`` or a percentage."""
    if numrows <= 1 or cy == 0:
        return "Top"
    if cy >= numrows - 1:
        return "Bot"
    return f"{cy * 100 // (numrows - 1)}%"


def pending_prefix(register: str | None, count: int, pending_op: str | None) -> str:
    """Status-bar hint for a partly typed command: register, count and operator.

    ``register`` is a lower-case letter, ``+`` for the clipboard, or None.
    """
    if register is None or register == "":
        regstr = ""
    elif register == CLIPBOARD_REGISTER or (
        len(register) == 1 and "a" <= register <= "z"
    ):
        regstr = '"' + register
    else:
        raise ValueError(f"invalid register {register!r}")

    count_str = str(count) if count > 0 else ""
    return regstr + count_str + (pending_op or "")


def simple_status_bar(width: int, left: str, right: str, bar_escape: str) -> str:
    """Status bar with ``left`` text, ``right`` text and space in between."""
    left = left[: max(width, 0)]
    out = [bar_escape, f"\x1b[{width}X", left]
    gap = width - len(left) - len(right)
    if gap > 0:
        out.append(" " * gap)
    if right and len(left) + len(right) <= width:
        out.append(right)
    out.append(SGR_RESET)
    return "".join(out)


def render_quickfix_line(path: str, line: int, text: str, width: int, selected: bool) -> str:
    """One quickfix entry: marker, dim directory, file name, line number, match text."""
    out: list[str] = []
    if selected:
        out.append(REVERSE)
    out.append(SELECTED_MARKER if selected else UNSELECTED_MARKER)
    avail = width - 2

    dir_len = path.rfind("/") + 1
    fname = path[dir_len:]

    if dir_len > 0 and avail > 0:
        shown = path[: min(dir_len, avail)]
        out.append(DIM_REVERSE if selected else DIM)
        out.append(shown)
        avail -= len(shown)
        out.append(REVERSE if selected else SGR_RESET)

    if fname and avail > 0:
        shown = fname[:avail]
        out.append(shown)
        avail -= len(shown)

    if avail > 0:
        lnum = f":{line}:"[:avail]
        out.append(YELLOW_REVERSE if selected else YELLOW)
        out.append(lnum)
        avail -= len(lnum)
        out.append(REVERSE if selected else SGR_RESET)

    if avail > 1:
        out.append(" ")
        avail -= 1
        out.append(text[:avail])

    out.append(SGR_RESET)
    return "".join(out)


def render_log_line(
    commit_hash: str, date: str, author: str, subject: str, width: int, selected: bool
) -> str:
    """One git-log entry: hash, date, author padded to 12 columns, subject."""
    out: list[str] = []
    if selected:
        out.append(REVERSE)
    out.append(SELECTED_MARKER if selected else UNSELECTED_MARKER)
    col = 2

    def space() -> None:
        nonlocal col
        if col < width:
            out.append(" ")
            col += 1

    if col + len(commit_hash) <= width:
        out.append(YELLOW_REVERSE if selected else YELLOW)
        out.append(commit_hash)
        col += len(commit_hash)
    space()

    if col + len(date) <= width:
        out.append(DIM_REVERSE if selected else DIM)
        out.append(date)
        col += len(date)
    space()

    author = author[:AUTHOR_WIDTH]
    if col + len(author) <= width:
        out.append(CYAN_REVERSE if selected else CYAN)
        out.append(author)
        col += len(author)
        pad = min(AUTHOR_WIDTH - len(author), max(width - col, 0))
        out.append(" " * pad)
        col += pad
    space()

    shown = subject[: max(width - col, 0)]
    if shown:
        out.append(SGR_RESET + REVERSE if selected else SGR_RESET)
        out.append(shown)

    out.append(SGR_RESET)
    return "".join(out)


def render_blame_line(line: str, width: int, selected: bool) -> str:
    """A blame annotation: commit hash in yellow, the rest in cyan."""
    text = line[: max(width, 0)]
    out: list[str] = []
    if selected:
        out.append(REVERSE)
    hash_end = text.find(" ")
    if hash_end < 0:
        hash_end = len(text)
    out.append(YELLOW)
    out.append(text[:hash_end])
    if hash_end < len(text):
        out.append(CYAN)
        out.append(text[hash_end:])
    out.append(SGR_RESET)
    return "".join(out)


def render_commit_line(line: str, width: int) -> str:
    """A line of the commit-message buffer: dim comments, coloured file markers."""
    text = line[: max(width, 0)]
    if text.startswith("#"):
        colour = DIM
    elif text.startswith("+ "):
        colour = GREEN
    elif text.startswith("- "):
        colour = RED
    else:
        return text
    return colour + text + SGR_RESET


def render_tree_line(line: str, width: int, git_status: str | None, selected: bool) -> str:
    """A file-tree entry coloured by its git status."""
    out: list[str] = []
    if selected:
        out.append(REVERSE)
    colour = _TREE_COLOURS.get(git_status or " ")
    if colour:
        out.append(colour)
    out.append(line[: max(width, 0)])
    out.append(SGR_RESET)
    return "".join(out)


def render_revision_line(line: str, width: int, selected: bool) -> str:
    """A line of the local-revisions tree; the current revision stands out."""
    text = line[: max(width, 0)]
    out: list[str] = []
    if selected:
        out.append(REVERSE)
    else:
        out.append(BOLD_YELLOW if CURRENT_REVISION_MARKER in text else CYAN)
    out.append(text)
    out.append(SGR_RESET)
    return "".join(out)