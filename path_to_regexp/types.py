"""Key and option records."""

import re
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True)
class Key:
    """One capturing group of a compiled path pattern."""

    name: Union[str, int]
    optional: bool = False
    offset: int = 0


@dataclass(frozen=True)
class Options:
    """Compilation options.

    strict: when False a trailing slash is optional.
    end: when False the pattern may match a prefix ending on a ``/``.
    sensitive: when False matching ignores case.
    """

    strict: bool = False
    end: bool = True
    sensitive: bool = False

    @classmethod
    def from_value(
        cls, value: Optional[Union["Options", Mapping[str, Any]]]
    ) -> "Options":
        """Build options from None, an Options instance or a mapping."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        known = {field.name for field in fields(cls)}
        # None leaves a field at its default
        return cls(
            **{
                k: bool(v)
                for k, v in value.items()
                if k in known and v is not None
            }
        )

    @property
    def flags(self) -> int:
        """Return the ``re`` flags implied by ``sensitive``."""
        return 0 if self.sensitive else re.IGNORECASE
