import re

import pytest

from quickedit.render_panels import (
    format_position,
    pending_prefix,
    render_blame_line,
    render_commit_line,
    render_log_line,
    render_quickfix_line,
    render_revision_line,
    render_tree_line,
    simple_status_bar,
)

_ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def visible(text):
    return _ANSI.sub("", text)


# ── format_position ─────────────────────────────────────────────────


@pytest.mark.parametrize("cy,numrows", [(0, 10), (0, 1), (3, 1), (0, 0)])
def test_position_top(cy, numrows):
    assert format_position(cy, numrows) == "Top"


@pytest.mark.parametrize("cy,numrows", [(9, 10), (12, 10)])
def test_position_bottom(cy, numrows):
    assert format_position(cy, numrows) == "Bot"


def test_position_percentage_midpoint():
    assert format_position(5, 11) == "50%"


def test_position_percentage_increases():
    values = [int(format_position(cy, 101)[:-1]) for cy in range(1, 100)]
    assert values == sorted(values)
    assert all(0 < v < 100 for v in values)


# ── pending_prefix ──────────────────────────────────────────────────


def test_prefix_empty():
    assert pending_prefix(None, 0, None) == ""


def test_prefix_register_count_operator():
    assert pending_prefix("a", 3, "d") == '"a' + "3" + "d"


def test_prefix_clipboard_register_only():
    assert pending_prefix("+", 0, None) == '"+'


def test_prefix_count_only():
    assert pending_prefix(None, 12, None) == "12"


def test_prefix_operator_only():
    assert pending_prefix(None, 0, "y") == "y"


def test_prefix_invalid_register():
    with pytest.raises(ValueError):
        pending_prefix("A", 0, None)


# ── simple_status_bar ───────────────────────────────────────────────


def test_status_bar_fills_width():
    bar = simple_status_bar(30, " [Tree]", "5", "\x1b[7m")
    assert bar.startswith("\x1b[7m\x1b[30X")
    assert bar.endswith("\x1b[m")
    text = visible(bar)
    assert len(text) == 30
    assert text.startswith(" [Tree]")
    assert text.endswith("5")


def test_status_bar_drops_right_when_too_long():
    bar = simple_status_bar(10, "left side text", "99", "")
    text = visible(bar)
    assert text == "left side "
    assert "99" not in text


# ── quickfix ────────────────────────────────────────────────────────


def test_quickfix_unselected_layout():
    out = render_quickfix_line("src/main.c", 42, "int main", 80, False)
    assert visible(out) == "  src/main.c:42: int main"
    assert "\x1b[2msrc/" in out
    assert "\x1b[33m:42:" in out


def test_quickfix_selected_marker_and_reverse():
    out = render_quickfix_line("a.c", 1, "x", 80, True)
    assert out.startswith("\x1b[7m\u25b6 ")
    assert "\x1b[33;7m:1:" in out


def test_quickfix_truncated_to_width():
    for width in range(2, 30):
        out = render_quickfix_line("dir/sub/file.txt", 1234, "some match text", width, False)
        assert len(visible(out)) <= width


# ── log ─────────────────────────────────────────────────────────────


def test_log_line_fields():
    out = render_log_line("abc1234", "2024-01-01", "Alice", "Fix bug", 80, False)
    text = visible(out)
    assert text == "  abc1234 2024-01-01 " + "Alice".ljust(12) + " Fix bug"
    assert "\x1b[33mabc1234" in out


def test_log_author_truncated_to_twelve():
    out = render_log_line("h", "d", "A" * 20, "s", 80, False)
    assert "A" * 12 in visible(out)
    assert "A" * 13 not in visible(out)


def test_log_selected_marker():
    out = render_log_line("h", "d", "a", "s", 80, True)
    assert out.startswith("\x1b[7m\u25b6 ")


def test_log_never_exceeds_width():
    for width in range(2, 50):
        out = render_log_line("abc1234", "2024-01-01", "Someone", "A subject line", width, False)
        assert len(visible(out)) <= width


# ── blame ───────────────────────────────────────────────────────────


def test_blame_colours_hash_and_rest():
    out = render_blame_line("abcd123 (Bob 2024) code", 80, False)
    assert out == "\x1b[33mabcd123\x1b[36m (Bob 2024) code\x1b[m"


def test_blame_without_space_is_all_hash():
    out = render_blame_line("abcd123", 80, True)
    assert out == "\x1b[7m\x1b[33mabcd123\x1b[m"


def test_blame_truncated():
    assert visible(render_blame_line("abcd123 rest", 4, False)) == "abcd"


# ── commit ──────────────────────────────────────────────────────────


def test_commit_comment_is_dim():
    assert render_commit_line("# comment", 80) == "\x1b[2m# comment\x1b[m"


def test_commit_added_and_removed_markers():
    assert render_commit_line("+ new.c", 80) == "\x1b[32m+ new.c\x1b[m"
    assert render_commit_line("- old.c", 80) == "\x1b[31m- old.c\x1b[m"


def test_commit_plain_text_untouched():
    assert render_commit_line("Subject line", 80) == "Subject line"
    assert render_commit_line("+no space", 80) == "+no space"


# ── tree ────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "status,colour",
    [("?", "\x1b[32m"), ("A", "\x1b[32m"), ("M", "\x1b[33m"), ("D", "\x1b[31m")],
)
def test_tree_status_colours(status, colour):
    assert render_tree_line("file.c", 80, status, False) == colour + "file.c\x1b[m"


def test_tree_clean_selected():
    assert render_tree_line("file.c", 80, None, True) == "\x1b[7mfile.c\x1b[m"


def test_tree_truncated():
    assert visible(render_tree_line("longname.c", 4, " ", False)) == "long"


# ── revisions ───────────────────────────────────────────────────────


def test_revision_current_is_bold_yellow():
    out = render_revision_line("* rev 3 \u25c0", 80, False)
    assert out.startswith("\x1b[1;33m")


def test_revision_other_is_cyan():
    assert render_revision_line("| rev 2", 80, False) == "\x1b[36m| rev 2\x1b[m"


def test_revision_selected_is_reverse_only():
    assert render_revision_line("* rev 3 \u25c0", 80, True) == "\x1b[7m* rev 3 \u25c0\x1b[m"


def test_revision_marker_outside_width_not_current():
    out = render_revision_line("* rev 3 \u25c0", 3, False)
    assert out.startswith("\x1b[36m")