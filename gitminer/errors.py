"""
Parse errors for gitminer.

Every error raised while parsing a log is a ParseError. Each one carries the
raw line that caused it, so a broken export can be diagnosed without
re-running the parser in a debugger.
"""

from typing import Optional


class ParseError(Exception):
    """Base class for all log parsing failures."""

    def __init__(self, message: str, raw_line: Optional[str] = None):
        super().__init__(message)
        self.raw_line = raw_line

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON error output."""
        return {
            'error': str(self),
            'type': type(self).__name__,
            'line': self.raw_line,
        }


class MalformedHeader(ParseError):
    """A header line did not split into exactly 3 non-empty fields."""

    def __init__(self, raw_line: str):
        super().__init__(
            "Wrong format of git log entry header. Please check the "
            f"`--pretty=format` argument of `git log`. Raw header: {raw_line!r}",
            raw_line,
        )


class InvalidTimestamp(ParseError):
    """A header's date field could not be parsed."""

    def __init__(self, raw_value: str, reason: str, raw_line: Optional[str] = None):
        super().__init__(
            f"Invalid commit date {raw_value!r}: {reason}",
            raw_line,
        )
        self.raw_value = raw_value
        self.reason = reason


class MalformedChange(ParseError):
    """A change line did not split into exactly 3 tab-separated fields."""

    def __init__(self, raw_line: str):
        super().__init__(
            f"Error parsing git change, expected 3 tab-separated fields: {raw_line!r}",
            raw_line,
        )


class AmbiguousBlock(ParseError):
    """A block held more than one header line (strict mode only)."""

    def __init__(self, header_lines):
        header_lines = list(header_lines)
        super().__init__(
            f"Block has {len(header_lines)} header lines; expected exactly one",
            header_lines[0] if header_lines else None,
        )
        self.header_lines = header_lines
