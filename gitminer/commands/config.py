import click
import json

from ..config import get_config_path, get_default_config, save_config
from ..cli_utils import standard_command


@click.group("config")
def config_cmd():
    """Configuration management commands."""
    pass


@config_cmd.command("generate")
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file")
def generate_config(force):
    """Write the default configuration to the config file path."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        click.echo(f"Configuration already exists at {config_path}. Use --force to overwrite.")
        return
    written = save_config(get_default_config(), config_path)
    click.echo(f"Default configuration written to {written}")


@config_cmd.command("show")
@click.option("--pretty", is_flag=True, help="Display as formatted JSON instead of single-line JSONL")
@click.option("--path", is_flag=True, help="Show the config file path being used")
@standard_command
def show_config(pretty, path, config):
    """Show the current configuration with all merges applied.

    By default, outputs single-line JSON (JSONL format).
    Use --pretty for human-readable formatted output.
    Use --path to see which config file is being used.
    """
    if path:
        print(json.dumps({"config_path": str(get_config_path())}))
        return

    if pretty:
        print(json.dumps(config, indent=2, ensure_ascii=False))
    else:
        print(json.dumps(config, ensure_ascii=False))
