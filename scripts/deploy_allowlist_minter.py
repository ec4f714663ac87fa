#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from cre8ors_deployment.allowlist_minter import deploy_allowlist_minter
from cre8ors_deployment.deployer import Deployer
from cre8ors_deployment.options import (
    autosign_option,
    chain_option,
    collection_holder_mint_option,
    cre8ors_address_option,
    friends_and_family_minter_option,
    minter_utility_option,
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
@cre8ors_address_option
@minter_utility_option
@collection_holder_mint_option
@friends_and_family_minter_option
def cli(
    network,
    account,
    chain,
    retries,
    verify,
    autosign,
    cre8ors_address,
    minter_utility,
    collection_holder_mint,
    friends_and_family_minter,
):
    """Deploy the Cre8ors allowlist minter."""
    deployer = Deployer(chain=chain, verify=verify, account=account, autosign=autosign)
    allowlist_minter = deploy_allowlist_minter(
        deployer,
        cre8ors_address=cre8ors_address,
        minter_utility=minter_utility,
        collection_holder_mint=collection_holder_mint,
        friends_and_family_minter=friends_and_family_minter,
        retries=retries,
    )
    deployer.finalize(deployments=[allowlist_minter])


if __name__ == "__main__":
    cli()
