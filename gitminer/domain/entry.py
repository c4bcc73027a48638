"""
Log entry domain objects.

A LogEntryHeader comes from one header line of the log:

    '<id>--<date>--<author>'

which is what ``git log --pretty=format:"'--%h--%ad--%aN'"`` prints (the
leading ``--`` is optional). A LogEntry is a header plus the changes of
its block.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Tuple
import json

from ..errors import MalformedHeader
from .change import ChangeRecord
from .values import Author, CommitId, CommitTimestamp

FIELD_DELIMITER = '--'
QUOTE = "'"


@dataclass(frozen=True)
class LogEntryHeader:
    """Commit id, date and author of one commit."""

    id: CommitId
    timestamp: CommitTimestamp
    author: Author

    @classmethod
    def parse(cls, raw_line: str) -> 'LogEntryHeader':
        """
        Parse a header line.

        Quotes are removed first, then the line is split on ``--`` and
        empty fragments are dropped, so leading and trailing delimiters
        are harmless.

        Raises:
            MalformedHeader: If there are not exactly 3 fields
            InvalidTimestamp: If the date field does not parse
        """
        fragments = [
            fragment
            for fragment in raw_line.replace(QUOTE, '').split(FIELD_DELIMITER)
            if fragment
        ]
        if len(fragments) != 3:
            raise MalformedHeader(raw_line)

        commit_id, date, author = fragments
        return cls(
            id=CommitId.parse(commit_id, raw_line=raw_line),
            timestamp=CommitTimestamp.parse(date, raw_line=raw_line),
            author=Author(author),
        )


@dataclass(frozen=True)
class LogEntry:
    """
    One fully parsed commit.

    Attributes:
        id: Commit identifier
        timestamp: Commit date
        author: Author name
        changes: Files touched by the commit, in log order
    """

    id: CommitId
    timestamp: CommitTimestamp
    author: Author
    changes: Tuple[ChangeRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_header(cls, header: LogEntryHeader, changes) -> 'LogEntry':
        return cls(
            id=header.id,
            timestamp=header.timestamp,
            author=header.author,
            changes=tuple(changes),
        )

    @property
    def date(self) -> datetime:
        return self.timestamp.value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id.value,
            'timestamp': self.timestamp.isoformat(),
            'author': self.author.name,
            'changes': [change.to_dict() for change in self.changes],
        }

    def to_jsonl(self) -> str:
        """Convert to single-line JSON for streaming output."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __str__(self) -> str:
        return f"{self.id} by {self.author} at {self.timestamp}"
