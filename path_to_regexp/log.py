"""Logging setup for path_to_regexp."""

import logging
import sys
from typing import IO, Optional

FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"


def configure_logging(
    debug: bool = False, stream: Optional[IO] = None
) -> logging.Logger:
    """Route package records to ``stream``, stdout unless given.

    Calling again with the same stream only updates the level.
    """
    stream = stream or sys.stdout
    log = logging.getLogger("path_to_regexp")
    log.setLevel(logging.DEBUG if debug else logging.ERROR)
    log.propagate = False

    for handler in log.handlers:
        if getattr(handler, "stream", None) is stream:
            return log

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(FORMAT_STRING))
    log.addHandler(handler)
    return log
