"""Top-level Click group for the cw3d CLI."""

import click

from cw3d.chains.cli import chains_cmd
from cw3d.project.cli import check_cmd, config_cmd, new_cmd


@click.group()
def main():
    """cw3d - scaffold web3 dapps from the scaffold-alchemy template."""


main.add_command(new_cmd)
main.add_command(config_cmd)
main.add_command(check_cmd)
main.add_command(chains_cmd)
