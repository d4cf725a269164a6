"""Capturing group discovery over regular expression source text."""

from typing import Iterator, NamedTuple, Optional, Tuple


class Group(NamedTuple):
    """Opening of a capturing group in regex source."""

    index: int
    name: Optional[str]


def skip_class(source: str, index: int) -> int:
    """Return the index just past the character class opened at ``index``."""
    index += 1
    if source.startswith("^", index):
        index += 1
    # a leading ] is a literal member
    if source.startswith("]", index):
        index += 1
    while index < len(source):
        char = source[index]
        if char == "\\":
            index += 2
            continue
        if char == "]":
            return index + 1
        index += 1
    return index


def read_group_header(source: str, index: int) -> Tuple[bool, Optional[str], int]:
    """Parse the group header at ``index``.

    Returns whether the group captures, its explicit name if any, and the
    index where scanning resumes.
    """
    if not source.startswith("(?", index):
        return True, None, index + 1

    if source.startswith("(?#", index):
        close = source.find(")", index)
        return False, None, len(source) if close < 0 else close + 1

    header = index + 2
    if source.startswith("P<", header):
        header += 2
    elif not source.startswith("<", header) or source[header + 1 : header + 2] in (
        "=",
        "!",
    ):
        return False, None, header
    else:
        header += 1

    close = source.find(">", header)
    if close < 0:
        return False, None, header
    return True, source[header:close], close + 1


def iter_groups(source: str) -> Iterator[Group]:
    """Yield every capturing group opening in ``source``, left to right."""
    index = 0
    while index < len(source):
        char = source[index]
        if char == "\\":
            index += 2
        elif char == "[":
            index = skip_class(source, index)
        elif char == "(":
            capturing, name, resume = read_group_header(source, index)
            if capturing:
                yield Group(index, name)
            index = resume
        else:
            index += 1


def find_group_end(source: str, start: int) -> int:
    """Return the index just past the group opened at ``start``, or -1."""
    depth = 0
    index = start
    while index < len(source):
        char = source[index]
        if char == "\\":
            index += 2
            continue
        if char == "[":
            index = skip_class(source, index)
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index + 1
        index += 1
    return -1
