"""Show demo credentials command."""

import click

from task_manager.cli.helpers import print_table


@click.command()
@click.pass_context
def credentials(ctx):
    """Show the demo accounts you can log in with"""
    settings = ctx.obj['settings']

    if not settings.credentials:
        click.echo("No accounts configured")
        return

    click.echo("Demo Credentials:")
    print_table(
        ["USERNAME", "PASSWORD"],
        [[username, password] for username, password in settings.credentials.items()]
    )
