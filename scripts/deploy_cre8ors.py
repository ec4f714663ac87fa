#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from cre8ors_deployment.cre8ors import deploy_cre8ors
from cre8ors_deployment.deployer import Deployer
from cre8ors_deployment.options import (
    autosign_option,
    chain_option,
    presale_merkle_root_option,
    retries_option,
    verify_option,
)


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@account_option()
@chain_option
@retries_option
@verify_option
@autosign_option
@presale_merkle_root_option
def cli(network, account, chain, retries, verify, autosign, presale_merkle_root):
    """Deploy the Cre8ors collection contract."""
    deployer = Deployer(chain=chain, verify=verify, account=account, autosign=autosign)
    cre8ors = deploy_cre8ors(deployer, presale_merkle_root=presale_merkle_root, retries=retries)
    deployer.finalize(deployments=[cre8ors])


if __name__ == "__main__":
    cli()
