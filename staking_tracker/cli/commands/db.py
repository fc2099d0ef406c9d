# staking_tracker/cli/commands/db.py

import click

from ...core.errors import ConfigurationError
from ...database.connection import DatabaseManager


@click.group()
def db():
    """Database administration"""
    pass


@db.command('init')
@click.pass_context
def init(ctx):
    """Create the staking table if it does not exist

    Managed deployments should run `alembic upgrade head` instead.
    """
    cli_context = ctx.obj['cli_context']

    try:
        db_manager = cli_context.container.get(DatabaseManager)
        db_manager.initialize()
        db_manager.create_tables()
    except ConfigurationError as e:
        raise click.ClickException(f"Configuration error: {e}")
    finally:
        cli_context.shutdown_database()

    click.echo("✅ Database tables ready")


@db.command('check')
@click.pass_context
def check(ctx):
    """Verify the database is reachable"""
    cli_context = ctx.obj['cli_context']

    try:
        db_manager = cli_context.container.get(DatabaseManager)
        db_manager.initialize()
        healthy = db_manager.health_check()
    except ConfigurationError as e:
        raise click.ClickException(f"Configuration error: {e}")
    except Exception as e:
        raise click.ClickException(f"Database connection failed: {e}")
    finally:
        cli_context.shutdown_database()

    if not healthy:
        raise click.ClickException("Database health check failed")
    click.echo("✅ Database reachable")
