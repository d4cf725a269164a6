"""path_to_regexp errors."""


class PatternCompilationError(ValueError):
    """Generated pattern source is not a valid regular expression."""

    def __init__(self, source: str, message: str) -> None:
        """Initialize error with the offending source."""
        super().__init__(f"Invalid pattern '{source}': {message}")
        self.source = source
