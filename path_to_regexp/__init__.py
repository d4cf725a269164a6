"""path_to_regexp: compile express-style path templates into regexes."""

import logging

from path_to_regexp.compiler import compile, path_to_regexp
from path_to_regexp.errors import PatternCompilationError
from path_to_regexp.log import configure_logging
from path_to_regexp.types import Key, Options

__all__ = [
    "compile",
    "configure_logging",
    "Key",
    "Options",
    "path_to_regexp",
    "PatternCompilationError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
