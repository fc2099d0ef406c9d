# staking_tracker/cli/commands/serve.py

import click

from ...core.config import TrackerConfig
from ...core.errors import ConfigurationError


@click.command()
@click.option('--host', help='Bind address (default: STAKING_HOST or 0.0.0.0)')
@click.option('--port', type=int, help='Port (default: STAKING_PORT / PORT or 3000)')
@click.option('--reload', is_flag=True, help='Reload on code changes (development)')
def serve(host, port, reload):
    """Run the HTTP API with uvicorn"""
    import uvicorn

    try:
        server = TrackerConfig.from_env().server
    except ConfigurationError as e:
        raise click.ClickException(f"Configuration error: {e}")

    uvicorn.run(
        "api.main:app",
        host=host or server.host,
        port=port or server.port,
        reload=reload,
    )
