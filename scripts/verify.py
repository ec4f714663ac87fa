#!/usr/bin/python3

from pathlib import Path

import click
from ape import networks
from ape.cli import ConnectedProviderCommand, network_option

from cre8ors_deployment.constants import SUPPORTED_CHAINS
from cre8ors_deployment.registry import verify_from_registry
from cre8ors_deployment.utils import check_plugins, registry_filepath_from_chain


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@click.option(
    "--contract-name",
    "-n",
    "contract_names",
    help="Recorded contract to publish, e.g. TransferHook",
    type=click.STRING,
    required=True,
    multiple=True,
)
@click.option(
    "--chain",
    "-c",
    help="Chain whose registry artifact records the deployments",
    type=click.Choice(SUPPORTED_CHAINS),
    required=False,
)
@click.option(
    "--registry-filepath",
    "-f",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    help="Registry artifact to read instead of the chain's default one",
    required=False,
)
def cli(network, contract_names, chain, registry_filepath):
    """Publish Cre8ors contracts recorded in a registry to the block explorer."""
    if bool(chain) == bool(registry_filepath):
        raise click.BadOptionUsage(
            option_name="--chain",
            message=(
                "Pass exactly one of --chain or --registry-filepath; "
                f"got {chain}, {registry_filepath}"
            ),
        )

    check_plugins()
    registry_filepath = registry_filepath or registry_filepath_from_chain(chain=chain)
    verified = verify_from_registry(
        filepath=registry_filepath,
        chain_id=networks.provider.chain_id,
        contract_names=list(contract_names),
    )
    for deployment in verified:
        print(f"(i) Published {deployment.location} at {deployment.address}")


if __name__ == "__main__":
    cli()
