"""
Export command for gitminer.

Runs git log in a repository and writes the numstat log in the format the
parser reads, so it can be analysed later without touching the repository.
"""

import click
import logging
from typing import Optional

from ..cli_utils import add_common_options, standard_command
from ..output import emit
from ..services import LogService

logger = logging.getLogger(__name__)


@click.command('export')
@click.argument('repo', type=click.Path(exists=True, file_okay=False), default='.')
@click.option('-o', '--output', 'output', type=click.Path(dir_okay=False),
              help='Write the log to this file instead of stdout')
@click.option('--since', help='Only commits after this date (passed to git)')
@click.option('--until', help='Only commits before this date (passed to git)')
@click.option('--check', is_flag=True, help='Parse the log before writing it')
@add_common_options('debug')
@standard_command
def export_handler(
    repo: str,
    output: Optional[str],
    since: Optional[str],
    until: Optional[str],
    check: bool,
    config: dict,
):
    """
    Export a repository's git log for later analysis.

    \b
    Examples:
        gitminer export ~/src/project -o project.log
        gitminer export . --since 2024-01-01 --check -o recent.log
    """
    service = LogService.from_config(config)
    text = service.git.numstat_log(repo, since=since, until=until)

    if check:
        entries = service.parse(text)
        logger.info(f"Exported log has {len(entries)} commits")

    if output:
        with open(output, 'w', encoding=service.encoding) as f:
            f.write(text)
        emit([{'repo': repo, 'output': output, 'bytes': len(text.encode(service.encoding))}])
    else:
        click.echo(text, nl=not text.endswith('\n'))
