"""
Aggregate results computed over a parsed log.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from .values import FilePath


@dataclass(frozen=True)
class Summary:
    """
    Counts over a whole log.

    Attributes:
        authors_count: Distinct authors
        commits_count: Log entries
        distinct_files_count: Distinct file paths touched
        total_changed_files_count: Change records (a file touched by two
            commits counts twice)
    """

    authors_count: int = 0
    commits_count: int = 0
    distinct_files_count: int = 0
    total_changed_files_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FileRevisions:
    """Number of commits that touched a file."""

    path: FilePath
    revisions: int

    def to_dict(self) -> Dict[str, Any]:
        return {'path': self.path.value, 'revisions': self.revisions}
