"""
Domain layer for gitminer.

Contains pure domain objects with no I/O or side effects:
- Value objects: CommitId, Author, CommitTimestamp, FilePath, LineDelta
- ChangeRecord: One file touched by a commit
- LogEntryHeader / LogEntry: One commit
- Summary / FileRevisions: Aggregates over a parsed log

All objects are immutable and provide serialization methods for JSONL
output.
"""

from .values import Author, CommitId, CommitTimestamp, FilePath, LineDelta, NOT_APPLICABLE
from .change import ChangeRecord
from .entry import LogEntry, LogEntryHeader
from .summary import FileRevisions, Summary

__all__ = [
    'Author',
    'CommitId',
    'CommitTimestamp',
    'FilePath',
    'LineDelta',
    'NOT_APPLICABLE',
    'ChangeRecord',
    'LogEntry',
    'LogEntryHeader',
    'Summary',
    'FileRevisions',
]
