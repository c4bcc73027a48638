"""
Scalar value objects for git log records.

Each value is an immutable wrapper built through a ``parse`` classmethod,
so anything holding a CommitId or a LineDelta holds a validated one.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..errors import InvalidTimestamp, MalformedHeader

# Characters the header format wraps around its fields
_DELIMITER_ARTIFACTS = " \t'\""


@dataclass(frozen=True)
class CommitId:
    """Opaque commit identifier (usually an abbreviated hash)."""

    value: str

    @classmethod
    def parse(cls, raw: str, raw_line: Optional[str] = None) -> 'CommitId':
        value = raw.strip(_DELIMITER_ARTIFACTS)
        if not value:
            raise MalformedHeader(raw_line if raw_line is not None else raw)
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Author:
    """Free-text author name, compared by exact match."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FilePath:
    """Repository-relative path exactly as git printed it."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CommitTimestamp:
    """
    Commit date parsed from the log header.

    Accepts what ``git log`` prints for ``--date=short``, ``--date=iso`` and
    ``--date=iso-strict``.

    Examples:
        CommitTimestamp.parse("2023-01-01")
        CommitTimestamp.parse("2023-01-01 12:30:00 +0100")
        CommitTimestamp.parse("2023-01-01T12:30:00Z")
    """

    value: datetime

    @classmethod
    def parse(cls, raw: str, raw_line: Optional[str] = None) -> 'CommitTimestamp':
        """
        Parse a date string.

        Args:
            raw: Date text from the header
            raw_line: Full header line, attached to the error on failure

        Returns:
            Parsed CommitTimestamp

        Raises:
            InvalidTimestamp: If the text is not a recognizable date
        """
        text = raw.strip()
        # git's --date=iso puts a space before the UTC offset
        normalized = text.replace(' +', '+').replace(' -', '-')
        if normalized.endswith('Z'):
            normalized = normalized[:-1] + '+00:00'
        try:
            return cls(datetime.fromisoformat(normalized))
        except ValueError as e:
            raise InvalidTimestamp(raw, str(e), raw_line) from e

    def isoformat(self) -> str:
        return self.value.isoformat()

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class LineDelta:
    """
    Added or removed line count for one file change.

    ``count`` is None for the "not applicable" sentinel, which git emits as
    ``-`` for binary files.
    """

    count: Optional[int] = None

    @classmethod
    def parse(cls, raw: str) -> 'LineDelta':
        """Parse a numstat count field. Never raises."""
        try:
            count = int(raw)
        except (TypeError, ValueError):
            return NOT_APPLICABLE
        if count < 0:
            return NOT_APPLICABLE
        return cls(count)

    @property
    def is_applicable(self) -> bool:
        return self.count is not None

    def to_json(self) -> Optional[int]:
        return self.count

    def __str__(self) -> str:
        return '-' if self.count is None else str(self.count)


NOT_APPLICABLE = LineDelta()
LineDelta.NOT_APPLICABLE = NOT_APPLICABLE
