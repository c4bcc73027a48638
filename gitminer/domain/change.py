"""
ChangeRecord domain object.

One ChangeRecord per file touched by a commit, parsed from a
``git log --numstat`` line:

    <added>\\t<removed>\\t<path>
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..errors import MalformedChange
from .values import FilePath, LineDelta

FIELD_SEPARATOR = '\t'


@dataclass(frozen=True)
class ChangeRecord:
    """
    Line counts for a single file in a single commit.

    Examples:
        ChangeRecord.parse("3\\t1\\tfoo.txt")   -> added 3, removed 1
        ChangeRecord.parse("-\\t-\\tlogo.png")  -> both not applicable

    Attributes:
        added_lines: Lines added, or the not-applicable sentinel
        removed_lines: Lines removed, or the not-applicable sentinel
        path: File path as printed by git
    """

    added_lines: LineDelta
    removed_lines: LineDelta
    path: FilePath

    @classmethod
    def parse(cls, raw_line: str) -> 'ChangeRecord':
        """
        Parse one numstat line.

        Raises:
            MalformedChange: If the line does not have exactly 3 fields
        """
        fields = raw_line.split(FIELD_SEPARATOR)
        if len(fields) != 3:
            raise MalformedChange(raw_line)

        added, removed, path = fields
        return cls(
            added_lines=LineDelta.parse(added),
            removed_lines=LineDelta.parse(removed),
            path=FilePath(path),
        )

    @property
    def is_binary(self) -> bool:
        return not (self.added_lines.is_applicable or self.removed_lines.is_applicable)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'path': self.path.value,
            'added': self.added_lines.to_json(),
            'removed': self.removed_lines.to_json(),
        }
