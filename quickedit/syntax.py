"""Syntax definitions, filetype detection and per-row highlighting."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, MutableSequence

MAX_SYNTAXES = 64


class HlType(IntEnum):
    """Highlight class of a single character cell."""

    NORMAL = 0
    COMMENT = 1
    KEYWORD = 2
    TYPE = 3
    STRING = 4
    NUMBER = 5
    ESCAPE = 6
    PREPROC = 7
    BRACKET1 = 8
    BRACKET2 = 9
    BRACKET3 = 10
    BRACKET4 = 11
    BRACKET_MATCH = 12
    VISUAL = 13
    SEARCH = 14


@dataclass
class Row:
    """One line of a buffer together with its highlight state."""

    chars: str = ""
    hl: list[HlType] | None = None
    hl_open_comment: bool = False


@dataclass(frozen=True)
class SyntaxDef:
    """Language description used by the highlighter."""

    name: str
    filetypes: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    comment_single: str | None = None
    comment_ml_start: str | None = None
    comment_ml_end: str | None = None


@dataclass
class SyntaxRegistry:
    """Ordered collection of syntax definitions; later ones take priority."""

    capacity: int = MAX_SYNTAXES
    _definitions: list[SyntaxDef] = field(default_factory=list, repr=False)

    def register(self, definition: SyntaxDef) -> None:
        """Add a definition; silently dropped once the registry is full."""
        if len(self._definitions) < self.capacity:
            self._definitions.append(definition)

    def detect(self, filename: str | None) -> SyntaxDef | None:
        """Return the newest definition matching the file's extension."""
        if not filename:
            return None
        dot = filename.rfind(".")
        if dot <= 0:
            return None
        ext = filename[dot + 1:]
        for definition in reversed(self._definitions):
            if ext in definition.filetypes:
                return definition
        return None

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[SyntaxDef]:
        return iter(self._definitions)


def _starts_with(line: str, pos: int, prefix: str | None) -> bool:
    return bool(prefix) and line.startswith(prefix, pos)


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _is_ident(ch: str) -> bool:
    return _is_alnum(ch) or ch == "_"


def scan_row(definition: SyntaxDef | None, row: Row, open_comment: bool) -> bool:
    """Return whether a multi-line comment is still open after the row."""
    if definition is None:
        return open_comment
    line = row.chars
    length = len(line)
    ml_start = definition.comment_ml_start
    ml_end = definition.comment_ml_end
    single = definition.comment_single

    in_ml = bool(open_comment)
    quote: str | None = None
    pos = 0
    while pos < length:
        ch = line[pos]
        if in_ml:
            if _starts_with(line, pos, ml_end):
                in_ml = False
                pos += len(ml_end)
            else:
                pos += 1
            continue
        if quote is not None:
            if ch == "\\" and pos + 1 < length:
                pos += 2
                continue
            if ch == quote:
                quote = None
            pos += 1
            continue
        if _starts_with(line, pos, single):
            break
        if _starts_with(line, pos, ml_start):
            in_ml = True
            pos += len(ml_start)
            continue
        if ch in "\"'":
            quote = ch
        pos += 1
    return in_ml


def update_open_comments(
    definition: SyntaxDef | None, rows: MutableSequence[Row], start: int
) -> None:
    """Propagate open-comment state forward from ``start`` until it settles."""
    if definition is None or not definition.comment_ml_start or not rows:
        return
    start = max(start, 0)
    if start > 0:
        prev = rows[start - 1]
        rows[start].hl_open_comment = scan_row(definition, prev, prev.hl_open_comment)

    changed = False
    for i in range(start, len(rows)):
        state_after = scan_row(definition, rows[i], rows[i].hl_open_comment)
        if i + 1 >= len(rows):
            break
        nxt = rows[i + 1]
        if nxt.hl_open_comment == state_after:
            if changed:
                break
        else:
            changed = True
        nxt.hl_open_comment = state_after


def highlight_row(definition: SyntaxDef | None, row: Row, open_comment: bool) -> bool:
    """Fill ``row.hl`` and return the open-comment state at the row's end."""
    line = row.chars
    length = len(line)
    if definition is None or length == 0:
        return open_comment

    hl = [HlType.NORMAL] * length
    row.hl = hl
    ml_start = definition.comment_ml_start
    ml_end = definition.comment_ml_end
    single = definition.comment_single
    keywords = set(definition.keywords)
    types = set(definition.types)

    in_ml = bool(open_comment)
    quote: str | None = None
    depth = 0
    pos = 0
    while pos < length:
        ch = line[pos]

        if in_ml:
            hl[pos] = HlType.COMMENT
            if _starts_with(line, pos, ml_end):
                end = min(pos + len(ml_end), length)
                hl[pos:end] = [HlType.COMMENT] * (end - pos)
                in_ml = False
                pos += len(ml_end)
            else:
                pos += 1
            continue

        if quote is not None:
            hl[pos] = HlType.STRING
            if ch == "\\" and pos + 1 < length:
                hl[pos] = HlType.ESCAPE
                hl[pos + 1] = HlType.ESCAPE
                pos += 2
                continue
            if ch == quote:
                quote = None
            pos += 1
            continue

        if _starts_with(line, pos, single):
            hl[pos:] = [HlType.COMMENT] * (length - pos)
            break

        if _starts_with(line, pos, ml_start):
            end = min(pos + len(ml_start), length)
            hl[pos:end] = [HlType.COMMENT] * (end - pos)
            in_ml = True
            pos += len(ml_start)
            continue

        if ch == "#" and all(c in " \t" for c in line[:pos]):
            begin = pos
            pos += 1
            while pos < length and _is_alpha(line[pos]):
                pos += 1
            hl[begin:pos] = [HlType.PREPROC] * (pos - begin)
            while pos < length and line[pos] in " \t":
                hl[pos] = HlType.PREPROC
                pos += 1
            if line.startswith("include", begin + 1) and pos < length and line[pos] in "\"<":
                close = ">" if line[pos] == "<" else '"'
                hl[pos] = HlType.STRING
                pos += 1
                while pos < length and line[pos] != close:
                    hl[pos] = HlType.STRING
                    pos += 1
                if pos < length:
                    hl[pos] = HlType.STRING
                    pos += 1
            continue

        if ch in "\"'":
            hl[pos] = HlType.STRING
            quote = ch
            pos += 1
            continue

        if _is_digit(ch) and not (pos > 0 and _is_ident(line[pos - 1])):
            while pos < length and (_is_alnum(line[pos]) or line[pos] == "."):
                hl[pos] = HlType.NUMBER
                pos += 1
            continue

        if _is_alpha(ch) or ch == "_":
            begin = pos
            while pos < length and _is_ident(line[pos]):
                pos += 1
            word = line[begin:pos]
            if word in keywords:
                kind = HlType.KEYWORD
            elif word in types:
                kind = HlType.TYPE
            else:
                kind = HlType.NORMAL
            hl[begin:pos] = [kind] * (pos - begin)
            continue

        if ch in "([{":
            hl[pos] = HlType(HlType.BRACKET1 + depth % 4)
            depth += 1
            pos += 1
            continue
        if ch in ")]}":
            if depth > 0:
                depth -= 1
            hl[pos] = HlType(HlType.BRACKET1 + depth % 4)
            pos += 1
            continue

        pos += 1

    return in_ml