"""Configuration management commands."""

import sys
from pathlib import Path

import click

from task_manager.cli.helpers import format_priority, format_task_table
from ...models.config import AppSettings
from ...services.exceptions import ConfigError
from ...utils.config_manager import ConfigManager


@click.group()
def config():
    """Manage task manager settings"""
    pass


@config.command()
@click.pass_context
def show(ctx):
    """Show the settings in effect"""
    settings = ctx.obj['settings']

    click.echo(f"Settings file: {settings.source_path or '(built-in defaults)'}")
    click.echo(f"Default priority: {format_priority(settings.default_priority)}")
    click.echo(f"Accounts: {', '.join(settings.credentials) or '(none)'}")

    click.echo(f"\nSeed tasks ({len(settings.seed_tasks)}):")
    if settings.seed_tasks:
        click.echo(format_task_table(settings.seed_records()))


@config.command()
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--force', is_flag=True, help='Overwrite an existing file')
def init(path, force):
    """Write the default settings to PATH as a starting point"""
    if path.exists() and not force:
        click.echo(f"Error: {path} already exists. Use --force to overwrite.", err=True)
        sys.exit(1)

    try:
        saved = ConfigManager(path).save_settings(AppSettings())
    except (ConfigError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"✅ Default settings written to {saved}")
