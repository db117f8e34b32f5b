from quickedit.search import SearchQuery, find_next, find_prev, match_literal


LINES = ["foo bar", "baz", "bar foo bar"]


def test_match_literal_basic():
    assert match_literal("hello world", "world", 0) == (6, 5)
    assert match_literal("hello world", "world", 7) is None


def test_match_literal_rejects_empty_and_long():
    assert match_literal("abc", "", 0) is None
    assert match_literal("ab", "abc", 0) is None


def test_query_match_delegates():
    q = SearchQuery("bar")
    assert q.match("foo bar", 0) == match_literal("foo bar", "bar", 0)


def test_find_next_same_row_after_cursor():
    q = SearchQuery("bar")
    row, col = find_next(q, LINES, 0, 0)
    assert row == 0
    assert LINES[row][col:col + 3] == "bar"


def test_find_next_skips_current_position_and_wraps():
    q = SearchQuery("foo")
    assert find_next(q, LINES, 0, 0) == (2, LINES[2].index("foo"))
    last = LINES[2].index("foo")
    assert find_next(q, LINES, 2, last) == (0, 0)


def test_find_next_no_match_or_empty():
    assert find_next(SearchQuery("zzz"), LINES, 0, 0) is None
    assert find_next(SearchQuery(""), LINES, 0, 0) is None
    assert find_next(SearchQuery("foo"), [], 0, 0) is None


def test_find_prev_before_cursor_on_same_row():
    q = SearchQuery("bar")
    last = LINES[2].rindex("bar")
    assert find_prev(q, LINES, 2, last) == (2, 0)


def test_find_prev_takes_rightmost_on_earlier_row_and_wraps():
    q = SearchQuery("bar")
    assert find_prev(q, LINES, 2, 0) == (0, LINES[0].index("bar"))
    assert find_prev(q, LINES, 0, 0) == (2, LINES[2].rindex("bar"))


def test_next_then_prev_returns_to_start():
    q = SearchQuery("ba")
    start = (0, LINES[0].index("ba"))
    nxt = find_next(q, LINES, *start)
    assert find_prev(q, LINES, *nxt) == start


def test_custom_matcher():
    def caseless(line, pattern, start):
        col = line.lower().find(pattern.lower(), start)
        return None if col < 0 else (col, len(pattern))

    q = SearchQuery("BAZ", caseless)
    assert find_next(q, LINES, 0, 0) == (1, 0)