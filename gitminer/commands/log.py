"""
Log analysis commands: summary, entries, revisions.

Each command reads an exported git log file, parses it, and prints the
result as JSONL (default) or a Rich table (--pretty).
"""

import click
from typing import Optional

from ..cli_utils import add_common_options, resolve_pretty, standard_command
from ..output import emit
from ..render import render_revisions, render_summary
from ..services import LogService

LOGFILE = click.argument('logfile', type=click.Path(exists=True, dir_okay=False))


def _service(config: dict, strict: bool) -> LogService:
    return LogService.from_config(config, strict=True if strict else None)


@click.command('summary')
@LOGFILE
@add_common_options('pretty', 'strict', 'debug')
@standard_command
def summary_handler(logfile: str, pretty: bool, strict: bool, config: dict):
    """
    Print author, commit and file counts for a git log.

    \b
    Produce the log with:
        git log --all --numstat --date=short --pretty=format:"'--%h--%ad--%aN'" --no-renames > logfile.log

    \b
    Examples:
        gitminer summary logfile.log
        gitminer summary logfile.log --pretty
    """
    service = _service(config, strict)
    summary = service.summary(service.load(logfile))

    if resolve_pretty(pretty, config):
        render_summary(summary)
    else:
        emit([summary])


@click.command('entries')
@LOGFILE
@add_common_options('pretty', 'strict', 'debug')
@standard_command
def entries_handler(logfile: str, pretty: bool, strict: bool, config: dict):
    """
    Print every parsed commit, one JSON object per line.

    \b
    Examples:
        gitminer entries logfile.log
        gitminer entries logfile.log | jq .author
    """
    entries = _service(config, strict).load(logfile)
    emit(entries, pretty=resolve_pretty(pretty, config),
         columns=['id', 'timestamp', 'author', 'changes'], title="Commits")


@click.command('revisions')
@LOGFILE
@click.option('--top', type=int, default=None, help='Only show the N most revised files')
@add_common_options('pretty', 'strict', 'debug')
@standard_command
def revisions_handler(logfile: str, top: Optional[int], pretty: bool, strict: bool, config: dict):
    """
    Print how many commits touched each file, most revised first.

    \b
    Examples:
        gitminer revisions logfile.log --top 20 --pretty
    """
    if top is None:
        top = config.get('output', {}).get('top')

    service = _service(config, strict)
    revisions = service.revisions(service.load(logfile), top=top)

    if resolve_pretty(pretty, config):
        render_revisions(revisions)
    else:
        emit(revisions)
