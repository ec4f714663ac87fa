#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from cre8ors_deployment.deployer import Deployer
from cre8ors_deployment.options import autosign_option, chain_option
from cre8ors_deployment.transfers import deploy_transfers


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@account_option()
@chain_option
@autosign_option
def cli(network, account, chain, autosign):
    """Deploy the Cre8ors transfer hook and verify it on the block explorer."""
    # deploy_and_verify always publishes on live networks
    deployer = Deployer(chain=chain, verify=False, account=account, autosign=autosign)
    transfer_hook = deploy_transfers(deployer)
    deployer.finalize(deployments=[transfer_hook])


if __name__ == "__main__":
    cli()
