"""Click command listing the supported chains."""

import click

from cw3d.chains.registry import ChainRegistry


@click.command("chains")
def chains_cmd():
    """List the chains a project can be configured for."""
    for chain in ChainRegistry.default().chains():
        click.echo(
            f"{chain.short_name:<16} {chain.mainnet_name} ({chain.mainnet_chain_id}) / "
            f"{chain.testnet_chain_name} ({chain.testnet_chain_id})"
        )
