"""
gitminer - Repository history metrics from exported git logs.

gitminer parses the text printed by ``git log --numstat`` into validated
commit records and computes aggregate statistics over them, without
calling git for every question.

Quick Start:
    import gitminer

    text = open("logfile.log", encoding="utf-8").read()

    # Parse (raises gitminer.ParseError on the first malformed line)
    entries = gitminer.parse(text)

    # Aggregate
    summary = gitminer.summarize(entries)
    print(summary.commits_count, summary.authors_count)

    # Most frequently changed files
    for item in gitminer.file_revisions(entries, top=10):
        print(item.path, item.revisions)

Producing a log:
    git log --all --numstat --date=short --pretty=format:"'--%h--%ad--%aN'" --no-renames

Domain Objects:
    LogEntry - One commit with its file changes
    ChangeRecord - Added/removed line counts for one file
    Summary - Author, commit and file counts
"""

__version__ = "0.3.0"

# Core operations
from .parser import parse, split_blocks, partition_block, parse_block, collect
from .analysis import summarize, file_revisions

# Domain objects
from .domain import (
    Author,
    ChangeRecord,
    CommitId,
    CommitTimestamp,
    FilePath,
    FileRevisions,
    LineDelta,
    LogEntry,
    LogEntryHeader,
    NOT_APPLICABLE,
    Summary,
)

# Errors
from .errors import (
    ParseError,
    MalformedHeader,
    InvalidTimestamp,
    MalformedChange,
    AmbiguousBlock,
)

# Services (for advanced use)
from .services import LogService

# Configuration
from .config import load_config, save_config

__all__ = [
    # Version
    "__version__",
    # Core operations
    "parse",
    "summarize",
    "file_revisions",
    "split_blocks",
    "partition_block",
    "parse_block",
    "collect",
    # Domain objects
    "Author",
    "ChangeRecord",
    "CommitId",
    "CommitTimestamp",
    "FilePath",
    "FileRevisions",
    "LineDelta",
    "LogEntry",
    "LogEntryHeader",
    "NOT_APPLICABLE",
    "Summary",
    # Errors
    "ParseError",
    "MalformedHeader",
    "InvalidTimestamp",
    "MalformedChange",
    "AmbiguousBlock",
    # Services
    "LogService",
    # Configuration
    "load_config",
    "save_config",
]
