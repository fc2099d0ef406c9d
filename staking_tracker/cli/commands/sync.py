# staking_tracker/cli/commands/sync.py

import asyncio
from typing import List, Optional

import click

from ... import start_tracker
from ...core.errors import ConfigurationError, UnknownTokenError
from ...services.sync_service import StakingSyncService
from ...types import SyncResult


async def _run_sync(cli_context, symbol: Optional[str]) -> List[SyncResult]:
    container = cli_context.container
    try:
        start_tracker(container)
        service = container.get(StakingSyncService)
        if symbol:
            return [await service.sync_token(symbol)]
        return await service.sync_all()
    finally:
        await cli_context.shutdown()


@click.command()
@click.option('--symbol', '-s', help='Refresh a single token (default: every registered token)')
@click.pass_context
def sync(ctx, symbol):
    """Refresh staking records from chain once

    Examples:
        # Refresh every token
        sync

        # Refresh USDC only
        sync --symbol USDC
    """
    cli_context = ctx.obj['cli_context']

    try:
        results = asyncio.run(_run_sync(cli_context, symbol))
    except UnknownTokenError as e:
        raise click.ClickException(str(e))
    except ConfigurationError as e:
        raise click.ClickException(f"Configuration error: {e}")

    for result in results:
        if result.ok:
            click.echo(f"✅ {result.symbol:<6} apy={result.apy} tvl={result.tvl}")
        else:
            click.echo(f"❌ {result.symbol:<6} {result.error}")

    failed = [r for r in results if not r.ok]
    if failed:
        click.echo(f"\n{len(failed)} of {len(results)} tokens failed")
        ctx.exit(1)

    click.echo(f"\nUpdated {len(results)} tokens")
