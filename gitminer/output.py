"""
Output module for gitminer.

Provides consistent output formatting across all commands:
- JSONL (default): Newline-delimited JSON for piping
- Pretty: Human-readable tables using Rich

Usage:
    from gitminer.output import emit, emit_error

    # Stream items as JSONL (default) or pretty table
    emit(entries, pretty=pretty)

    # Emit error to stderr
    emit_error("Bad header", type="MalformedHeader", context={"line": "..."})
"""

import json
import sys
from typing import Iterable, Any, Dict, Optional, List

from rich.console import Console
from rich.table import Table


def emit(
    items: Iterable[Any],
    pretty: bool = False,
    columns: Optional[List[str]] = None,
    title: Optional[str] = None
) -> None:
    """
    Emit items as JSONL or pretty table.

    Args:
        items: Items to emit (should have to_dict() method or be dicts)
        pretty: If True, render as table. If False, output JSONL
        columns: Column names for table (auto-detected if None)
        title: Table title (pretty mode only)
    """
    if pretty:
        _emit_table(items, columns, title)
    else:
        _emit_jsonl(items)


def _to_dict(item: Any) -> Dict[str, Any]:
    if hasattr(item, 'to_dict'):
        return item.to_dict()
    if isinstance(item, dict):
        return item
    return {'value': str(item)}


def _emit_jsonl(items: Iterable[Any]) -> None:
    """Emit items as JSONL."""
    for item in items:
        print(json.dumps(_to_dict(item), ensure_ascii=False), flush=True)


def _emit_table(
    items: Iterable[Any],
    columns: Optional[List[str]] = None,
    title: Optional[str] = None
) -> None:
    """Emit items as a Rich table."""
    rows = [_to_dict(item) for item in items]

    if not rows:
        print("No results found")
        return

    if not columns:
        columns = list(rows[0].keys())

    console = Console()
    table = Table(title=title, show_header=True, header_style="bold")

    for col in columns:
        table.add_column(col)

    for row in rows:
        table.add_row(*[_format_value(row.get(col, '')) for col in columns])

    console.print(table)


def _format_value(value: Any, max_len: int = 60) -> str:
    """Format a value for table display."""
    if value is None:
        return '-'
    if isinstance(value, list):
        return str(len(value))
    if isinstance(value, dict):
        return '{...}'

    s = str(value)
    if len(s) > max_len:
        return s[:max_len-3] + '...'
    return s


def emit_error(
    error: str,
    type: str = "error",
    context: Optional[Dict[str, Any]] = None
) -> None:
    """
    Emit error to stderr as JSON.

    Args:
        error: Error message
        type: Error type (e.g., "MalformedHeader", "ConfigError")
        context: Additional context dict
    """
    obj = {
        'error': error,
        'type': type
    }
    if context:
        obj.update(context)

    print(json.dumps(obj, ensure_ascii=False), file=sys.stderr, flush=True)
