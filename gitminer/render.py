"""
Rendering functions for gitminer output.

This module handles pretty-printing of analysis results.
Analysis functions return data, this module makes it human-readable.
"""

from rich.table import Table
from rich.console import Console
from rich import box
from typing import List, Optional

from .domain import FileRevisions, Summary

console = Console()

SUMMARY_LABELS = [
    ('commits_count', 'Commits'),
    ('authors_count', 'Authors'),
    ('distinct_files_count', 'Distinct files'),
    ('total_changed_files_count', 'Changed files'),
]


def render_summary(summary: Summary, title: Optional[str] = "Git log summary") -> None:
    """
    Render summary counts as a two-column table.

    Args:
        summary: Summary to display
        title: Optional table title
    """
    table = Table(
        title=title,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )
    table.add_column("Statistic")
    table.add_column("Value", justify="right")

    values = summary.to_dict()
    for key, label in SUMMARY_LABELS:
        table.add_row(label, str(values[key]))

    console.print(table)


def render_revisions(revisions: List[FileRevisions], title: Optional[str] = "Revisions per file") -> None:
    """
    Render per-file revision counts, most revised first.
    """
    if not revisions:
        console.print("[yellow]No file changes found.[/yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )
    table.add_column("File")
    table.add_column("Revisions", justify="right", style="cyan")

    for item in revisions:
        table.add_row(item.path.value, str(item.revisions))

    console.print(table)
