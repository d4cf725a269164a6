"""Test patterns functionality."""

from path_to_regexp.patterns import modifier_pattern, param_pattern


def test_patterns_regex_usage():
    """Test that all patterns are working correctly."""
    match = param_pattern.match("/:id(\\d+)")
    assert match is not None
    assert match["slash"] == "/"
    assert match["format"] is None
    assert match["name"] == "id"
    assert match.end() == 4

    match = param_pattern.match(".:ext")
    assert match["slash"] is None
    assert match["format"] == "."
    assert match["name"] == "ext"

    assert param_pattern.match("/user") is None

    match = modifier_pattern.match("*?")
    assert match["star"] == "*"
    assert match["optional"] == "?"

    match = modifier_pattern.match("/rest")
    assert match.end() == 0
    assert match["star"] is None
    assert match["optional"] is None
