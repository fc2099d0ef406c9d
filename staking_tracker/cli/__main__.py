# staking_tracker/cli/__main__.py

"""
Staking Tracker CLI

Usage: python -m staking_tracker.cli [command] [options]
"""

import atexit

import click

from staking_tracker.cli.context import CLIContext
from staking_tracker.core.logging import TrackerLogger

# Create global CLI context
cli_context = CLIContext()

@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, verbose):
    """Staking Tracker CLI - serve the API and refresh staking data"""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    context = ctx.obj.setdefault('cli_context', cli_context)
    context.verbose = verbose

    TrackerLogger.reset()
    TrackerLogger.configure(
        log_level="DEBUG" if verbose else "INFO",
        console_enabled=True,
        file_enabled=False,
        structured_format=True
    )


# Import command groups
from staking_tracker.cli.commands.serve import serve
from staking_tracker.cli.commands.sync import sync
from staking_tracker.cli.commands.tokens import tokens
from staking_tracker.cli.commands.db import db

# Register command groups
cli.add_command(serve)
cli.add_command(sync)
cli.add_command(tokens)
cli.add_command(db)


def cleanup():
    """Release database connections held by commands that did not shut down themselves"""
    cli_context.shutdown_database()


atexit.register(cleanup)


if __name__ == '__main__':
    cli()
