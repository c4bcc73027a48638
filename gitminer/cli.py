#!/usr/bin/env python3

import click

from gitminer.commands.config import config_cmd
from gitminer.commands.export import export_handler
from gitminer.commands.log import entries_handler, revisions_handler, summary_handler


@click.group()
@click.version_option(package_name='gitminer')
def cli():
    """gitminer - Repository history metrics from exported git logs.

    Parses the output of `git log --numstat` into commits and file changes,
    then reports author, commit and file counts.
    """
    pass


# Analysis commands
cli.add_command(summary_handler, name='summary')
cli.add_command(entries_handler, name='entries')
cli.add_command(revisions_handler, name='revisions')

# Log production
cli.add_command(export_handler, name='export')

# Command groups
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
