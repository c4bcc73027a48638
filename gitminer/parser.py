"""
Git log parser.

Turns the text printed by

    git log --numstat --date=short --pretty=format:"'--%h--%ad--%aN'"

into a list of LogEntry objects. Parsing is all-or-nothing: the first
malformed line anywhere in the log raises a ParseError and no entries are
returned.

Layout of the input:

    '--abc123--2023-01-01--Alice'
    3	1	foo.txt
    -	-	logo.png

    '--def456--2023-01-02--Bob'
    10	0	bar.py

Blocks are separated by a blank line. Within a block, the leading lines
that start with the header marker are headers and every remaining line is
a change. A blank line inside one commit's change list would split it into
two blocks; git never prints one there.
"""

import logging
from typing import Callable, Iterable, List, Sequence, Tuple, TypeVar

from .domain import ChangeRecord, LogEntry, LogEntryHeader
from .errors import AmbiguousBlock

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')

NEWLINE = '\n'
BLOCK_SEPARATOR = NEWLINE + NEWLINE

# Every header line opens with a quote, whether or not the pretty format
# starts with the '--' field delimiter.
DEFAULT_HEADER_MARKER = "'"


def collect(func: Callable[[T], R], items: Iterable[T]) -> List[R]:
    """
    Apply func to every item in order, stopping at the first error.

    The exception raised by func propagates unchanged; no partial list is
    returned.
    """
    return [func(item) for item in items]


def split_blocks(text: str) -> List[List[str]]:
    """
    Split raw log text into blocks of lines.

    Args:
        text: Full log text

    Returns:
        One list of non-empty lines per blank-line-delimited block
    """
    text = text.replace('\r\n', NEWLINE).strip(NEWLINE)
    if not text:
        return []

    blocks = []
    for raw_block in text.split(BLOCK_SEPARATOR):
        lines = [line for line in raw_block.split(NEWLINE) if line]
        if lines:
            blocks.append(lines)
    return blocks


def is_header_line(line: str, marker: str = DEFAULT_HEADER_MARKER) -> bool:
    """Check if a line looks like a commit header."""
    return line.startswith(marker)


def partition_block(
    lines: Sequence[str],
    marker: str = DEFAULT_HEADER_MARKER
) -> Tuple[List[str], List[str]]:
    """
    Split a block into its leading header lines and its change lines.

    Everything after the first non-header line is a change line, whatever
    it looks like.
    """
    split_at = 0
    while split_at < len(lines) and is_header_line(lines[split_at], marker):
        split_at += 1
    return list(lines[:split_at]), list(lines[split_at:])


def parse_block(
    lines: Sequence[str],
    marker: str = DEFAULT_HEADER_MARKER,
    strict: bool = False
) -> List[LogEntry]:
    """
    Parse one block into log entries.

    Each header line in the block becomes one entry, and all of them share
    the block's changes. Headers are parsed before changes, so a bad header
    is reported ahead of a bad change.

    Args:
        lines: Lines of the block
        marker: Prefix identifying header lines
        strict: Reject blocks with more than one header line

    Returns:
        Entries in header order

    Raises:
        MalformedHeader, InvalidTimestamp, MalformedChange: On the first
            bad line
        AmbiguousBlock: In strict mode, if the block has several headers
    """
    header_lines, change_lines = partition_block(lines, marker)

    headers = collect(LogEntryHeader.parse, header_lines)
    changes = tuple(collect(ChangeRecord.parse, change_lines))

    if strict and len(headers) > 1:
        raise AmbiguousBlock(header_lines)

    if not headers and changes:
        logger.warning(
            f"Ignoring {len(changes)} change line(s) with no commit header, "
            f"starting at {change_lines[0]!r}"
        )

    return [LogEntry.from_header(header, changes) for header in headers]


def parse(
    text: str,
    header_marker: str = DEFAULT_HEADER_MARKER,
    strict: bool = False
) -> List[LogEntry]:
    """
    Parse a whole git log.

    Args:
        text: Log text as printed by git
        header_marker: Prefix identifying header lines
        strict: Reject blocks with more than one header line

    Returns:
        All entries, in block order then header order

    Raises:
        ParseError: The first error found in the log
    """
    blocks = split_blocks(text)
    logger.debug(f"Parsing {len(blocks)} log blocks")

    per_block = collect(
        lambda block: parse_block(block, marker=header_marker, strict=strict),
        blocks
    )
    entries = [entry for block_entries in per_block for entry in block_entries]

    logger.debug(f"Parsed {len(entries)} log entries")
    return entries
