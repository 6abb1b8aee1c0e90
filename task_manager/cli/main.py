"""Main CLI entry point for the task manager."""

from pathlib import Path

import click

from .helpers import configure_logging, load_settings
from .commands.shell import shell
from .commands.credentials import credentials
from .commands.config import config


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
@click.option('--config', 'config_file', type=click.Path(dir_okay=False, path_type=Path),
              envvar='TASK_MANAGER_CONFIG', help='JSON settings file')
@click.pass_context
def cli(ctx, verbose, config_file):
    """Task Manager - A demo task list behind an in-memory login gate"""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['settings'] = load_settings(config_file)


# Register commands
cli.add_command(shell)
cli.add_command(credentials)
cli.add_command(config)


if __name__ == '__main__':
    cli()
