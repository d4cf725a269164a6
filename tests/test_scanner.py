"""Test capturing group scanner."""

from path_to_regexp.scanner import Group, find_group_end, iter_groups


def test_iter_groups_skips_non_capturing():
    """Only capturing group openings are reported."""
    source = r"(a)(?:b)(?P<c>d)(?=e)(?<!f)(?P=c)[(]\("
    assert list(iter_groups(source)) == [Group(0, None), Group(8, "c")]


def test_iter_groups_inside_lookahead():
    """Groups nested in a negative lookahead still capture."""
    assert list(iter_groups("(?!(x))")) == [Group(3, None)]


def test_iter_groups_foreign_named_syntax():
    """Both named group spellings are recognised."""
    assert list(iter_groups("(?<n>x)/(?P<m>y)")) == [Group(0, "n"), Group(8, "m")]


def test_iter_groups_comment_and_class():
    """Comments and character classes never open groups."""
    assert list(iter_groups("(?#note)(y)")) == [Group(8, None)]
    assert list(iter_groups("[]()](z)")) == [Group(5, None)]
    assert list(iter_groups(r"[^\]()](z)")) == [Group(7, None)]


def test_iter_groups_empty():
    """No groups in plain text."""
    assert list(iter_groups("/users/list")) == []
    assert list(iter_groups("")) == []


def test_find_group_end():
    """Balanced group end is found past nested groups and classes."""
    assert find_group_end("(a(b)c)d", 0) == 7
    assert find_group_end("(a[)]b)", 0) == 7
    assert find_group_end(r"(a\)b)", 0) == 6
    assert find_group_end("x(y)", 1) == 4


def test_find_group_end_unbalanced():
    """Unterminated group returns -1."""
    assert find_group_end("(abc", 0) == -1
