"""
Aggregations over parsed log entries.

All functions here are pure: they take a finished collection of entries
and never fail.
"""

from collections import Counter
from typing import Iterable, List, Optional

from .domain import FileRevisions, LogEntry, Summary


def summarize(entries: Iterable[LogEntry]) -> Summary:
    """
    Compute summary counts for a log.

    Args:
        entries: Parsed log entries

    Returns:
        Summary with author, commit and file counts
    """
    entries = list(entries)
    changes = [change for entry in entries for change in entry.changes]

    return Summary(
        authors_count=len({entry.author for entry in entries}),
        commits_count=len(entries),
        distinct_files_count=len({change.path for change in changes}),
        total_changed_files_count=len(changes),
    )


def file_revisions(
    entries: Iterable[LogEntry],
    top: Optional[int] = None
) -> List[FileRevisions]:
    """
    Count how many commits touched each file.

    Args:
        entries: Parsed log entries
        top: Only return the most revised files

    Returns:
        FileRevisions sorted by revisions (most first), then by path
    """
    counts = Counter(
        change.path
        for entry in entries
        for change in entry.changes
    )
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0].value))
    if top is not None:
        ranked = ranked[:top]
    return [FileRevisions(path=path, revisions=revisions) for path, revisions in ranked]
