# staking_tracker/cli/commands/tokens.py

import click

from ...core.errors import ConfigurationError
from ...registry import TokenRegistry, STABLECOIN_SYMBOLS


@click.command()
@click.option('--file', 'tokens_file', type=click.Path(exists=True, dir_okay=False),
              envvar='STAKING_TOKENS_FILE', help='JSON token registry (defaults to built-in tokens)')
def tokens(tokens_file):
    """List the tokens whose staking data is tracked"""
    try:
        registry = TokenRegistry.from_file(tokens_file) if tokens_file else TokenRegistry.default()
    except (ConfigurationError, ValueError) as e:
        raise click.ClickException(str(e))

    click.echo(f"{'SYMBOL':<8} {'PROJECT':<12} {'PROTOCOL ID':<20} {'TOKEN':<44} {'STAKING':<44} STABLE")
    for token in registry:
        stable = "yes" if token.symbol in STABLECOIN_SYMBOLS else "no"
        click.echo(f"{token.symbol:<8} {token.project_name:<12} {token.protocol_id:<20} "
                   f"{token.token_address:<44} {token.staking_address:<44} {stable}")
    click.echo(f"\n{len(registry)} tokens")
