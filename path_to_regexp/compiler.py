"""Compile path templates into regular expressions."""

import logging
import re
from typing import Any, Dict, List, Mapping, MutableSequence, Optional, Union

from path_to_regexp.errors import PatternCompilationError
from path_to_regexp.patterns import modifier_pattern, param_pattern
from path_to_regexp.scanner import (
    find_group_end,
    iter_groups,
    read_group_header,
    skip_class,
)
from path_to_regexp.types import Key, Options

log = logging.getLogger(__name__)

PathSpec = Union[str, re.Pattern, List[Any], tuple]


def _compile(source: str, flags: int) -> re.Pattern:
    try:
        return re.compile(source, flags)
    except re.error as err:
        raise PatternCompilationError(source, str(err)) from err


def _next_positional(keys: MutableSequence[Key]) -> int:
    return 1 + max(
        (key.name for key in keys if isinstance(key.name, int)), default=-1
    )


def _collect_keys(
    source: str,
    keys: MutableSequence[Key],
    named: Optional[Dict[int, Key]] = None,
) -> None:
    """Append a key for every capturing group in ``source``.

    Groups produced by a named parameter are looked up in ``named`` by the
    index of their opening parenthesis; every other group gets its explicit
    regex name or the next positional number.
    """
    named = named or {}
    position = _next_positional(keys)
    for group in iter_groups(source):
        key = named.get(group.index)
        if key is None:
            name = group.name
            if name is None:
                name = position
                position += 1
            key = Key(name=name, optional=False, offset=group.index)
            log.debug("Implicit group %r at %d", name, group.index)
        keys.append(key)


def _expand_wildcards(capture: str) -> str:
    """Rewrite every ``*`` with nothing to repeat into a wildcard group."""
    result = ""
    repeatable = False
    index = 0
    while index < len(capture):
        char = capture[index]
        if char == "\\":
            result += capture[index : index + 2]
            index += 2
            repeatable = True
            continue
        if char == "[":
            end = skip_class(capture, index)
            result += capture[index:end]
            index = end
            repeatable = True
            continue
        if char == "*" and not repeatable:
            result += "(.*)"
            repeatable = True
        else:
            result += char
            repeatable = char not in "(|"
        index += 1
    return result


def _rewrite_template(template: str, named: Dict[int, Key]) -> str:
    """Rewrite a path template into regex source.

    Named parameter keys are stored in ``named`` under the index of their
    capture group in the returned source.
    """
    out = ""
    backtrack = ""
    index = 0
    while index < len(template):
        char = template[index]

        if char == "\\":
            escaped = template[index : index + 2]
            out += escaped
            backtrack += escaped
            index += len(escaped)
            continue

        param = param_pattern.match(template, index)
        if param:
            index = param.end()
            capture = None
            if template.startswith("(", index):
                end = find_group_end(template, index)
                if end > 0:
                    capture = _expand_wildcards(template[index:end])
                    if not read_group_header(capture, 0)[0]:
                        capture = f"({capture})"
                    index = end
            modifiers = modifier_pattern.match(template, index)
            index = modifiers.end()

            slash = param["slash"] or ""
            format_ = r"\." if param["format"] else ""
            if slash or format_:
                backtrack = ""
            if capture is None:
                if backtrack:
                    capture = f"((?:(?!/|{backtrack}).)+?)"
                else:
                    capture = f"([^/{format_}]+?)"

            optional = modifiers["optional"] or ""
            out += "(?:" + slash + format_
            named[len(out)] = Key(
                name=param["name"], optional=bool(optional), offset=index
            )
            out += capture
            if modifiers["star"]:
                out += f"((?:[/{format_}].+?)?)"
            out += ")" + optional
            backtrack = ""
            continue

        if char == ".":
            out += r"\."
            backtrack += r"\."
            index += 1
        elif char == "*":
            out += "(.*)"
            backtrack = ""
            index += 1
        elif template.startswith("/(", index) and not template.startswith(
            "/(?", index
        ):
            out += "/(?:"
            backtrack = ""
            index += 2
        elif template.startswith("(?", index):
            # copy group headers whole so "(?:x)" is not read as a parameter
            _, name, end = read_group_header(template, index)
            if template.startswith(":", end):
                end += 1
            out += f"(?P<{name}>" if name is not None else template[index:end]
            backtrack = ""
            index = end
        elif char == "[":
            end = skip_class(template, index)
            out += template[index:end]
            backtrack = ""
            index = end
        else:
            out += char
            backtrack = "" if char == "/" else backtrack + re.escape(char)
            index += 1

    return out


def _compile_template(
    template: str, keys: MutableSequence[Key], options: Options
) -> re.Pattern:
    named: Dict[int, Key] = {}
    source = _rewrite_template(template, named)
    _collect_keys(source, keys, named)

    if not options.strict:
        source += "?" if source.endswith("/") else "/?"

    if options.end:
        source += "$"
    elif not source.endswith("/"):
        source += "(?:/|$)"

    return _compile("^" + source, options.flags)


def compile(
    path: PathSpec,
    keys: Optional[MutableSequence[Key]] = None,
    options: Optional[Union[Options, Mapping[str, Any]]] = None,
) -> re.Pattern:
    """Compile a path template, pattern or list of them into one pattern.

    ``keys`` receives one :class:`Key` per capturing group, in the order the
    groups open in the returned pattern. Passing the same list to several
    calls keeps positional names counting upward.
    """
    options = Options.from_value(options)
    if keys is None:
        keys = []

    if isinstance(path, re.Pattern):
        _collect_keys(path.pattern, keys)
        return path

    if isinstance(path, (list, tuple)):
        sources = [compile(value, keys, options).pattern for value in path]
        pattern = _compile("|".join(sources), options.flags)
    elif isinstance(path, str):
        pattern = _compile_template(path, keys, options)
    else:
        raise TypeError(
            f"Expected a string, compiled pattern or list, got {type(path).__name__}"
        )

    log.debug("Compiled %r to %s", path, pattern.pattern)
    return pattern


path_to_regexp = compile
