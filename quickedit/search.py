"""Literal search within lines and across a buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

Match = tuple[int, int]
Matcher = Callable[[str, str, int], "Match | None"]


def match_literal(line: str, pattern: str, start_col: int) -> Match | None:
    """Find ``pattern`` in ``line`` at or after ``start_col``; return (col, length)."""
    if not pattern or len(pattern) > len(line):
        return None
    col = line.find(pattern, max(start_col, 0))
    if col < 0:
        return None
    return col, len(pattern)


@dataclass(frozen=True)
class SearchQuery:
    """A search pattern together with the function that matches it."""

    pattern: str
    matcher: Matcher = match_literal

    def match(self, line: str, start_col: int) -> Match | None:
        return self.matcher(line, self.pattern, start_col)


def find_next(
    query: SearchQuery, lines: Sequence[str], from_row: int, from_col: int
) -> tuple[int, int] | None:
    """Next match after the position, wrapping past the end of the buffer."""
    if not lines or not query.pattern:
        return None
    n = len(lines)
    for i in range(n):
        row = (from_row + i) % n
        start = from_col + 1 if i == 0 else 0
        found = query.match(lines[row], start)
        if found is not None:
            return row, found[0]
    return None


def _last_match_before(query: SearchQuery, line: str, limit: int) -> int | None:
    best = None
    start = 0
    while (found := query.match(line, start)) is not None:
        col = found[0]
        if col >= limit:
            break
        best = col
        start = col + 1
    return best


def find_prev(
    query: SearchQuery, lines: Sequence[str], from_row: int, from_col: int
) -> tuple[int, int] | None:
    """Previous match before the position, wrapping past the start of the buffer."""
    if not lines or not query.pattern:
        return None
    n = len(lines)
    for i in range(n):
        row = (from_row - i) % n
        line = lines[row]
        limit = from_col if i == 0 else len(line) + 1
        col = _last_match_before(query, line, limit)
        if col is not None:
            return row, col
    return None