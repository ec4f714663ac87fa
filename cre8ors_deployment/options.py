import click

from cre8ors_deployment.constants import (
    CHAIN_ENVVAR,
    COLLECTION_HOLDER_MINT_ENVVAR,
    CRE8ORS_ADDRESS_ENVVAR,
    DEFAULT_DEPLOY_RETRIES,
    DEPLOY_RETRIES_ENVVAR,
    FRIENDS_AND_FAMILY_MINTER_ENVVAR,
    MINTER_UTILITY_ENVVAR,
    PRESALE_MERKLE_ROOT_ENVVAR,
    SUPPORTED_CHAINS,
)
from cre8ors_deployment.env import load_chain_environment
from cre8ors_deployment.types import Bytes32, ChecksumAddress


def _load_environment(ctx, param, value):
    # eager, so that options below can read their defaults from .env.<chain>
    if value is None or ctx.resilient_parsing:
        return value
    return load_chain_environment(chain=value)


chain_option = click.option(
    "--chain",
    "-c",
    help="Target chain; selects the .env.<chain> file to load",
    type=click.Choice(SUPPORTED_CHAINS),
    envvar=CHAIN_ENVVAR,
    required=True,
    is_eager=True,
    callback=_load_environment,
)

retries_option = click.option(
    "--retries",
    "-r",
    help="Number of deployment attempts before giving up",
    type=click.IntRange(min=1),
    envvar=DEPLOY_RETRIES_ENVVAR,
    default=DEFAULT_DEPLOY_RETRIES,
    show_default=True,
)

verify_option = click.option(
    "--verify/--no-verify",
    help="Publish the deployed contract source to the block explorer",
    default=False,
    show_default=True,
)

autosign_option = click.option(
    "--autosign",
    help="Sign transactions without asking for confirmation",
    is_flag=True,
    default=False,
)

cre8ors_address_option = click.option(
    "--cre8ors-address",
    help="Address of the deployed Cre8ors collection",
    type=ChecksumAddress(),
    envvar=CRE8ORS_ADDRESS_ENVVAR,
    required=True,
)

minter_utility_option = click.option(
    "--minter-utility",
    help="Address of the minter utilities contract",
    type=ChecksumAddress(),
    envvar=MINTER_UTILITY_ENVVAR,
    required=True,
)

collection_holder_mint_option = click.option(
    "--collection-holder-mint",
    help="Address of the collection holder minter",
    type=ChecksumAddress(),
    envvar=COLLECTION_HOLDER_MINT_ENVVAR,
    required=True,
)

friends_and_family_minter_option = click.option(
    "--friends-and-family-minter",
    help="Address of the friends and family minter",
    type=ChecksumAddress(),
    envvar=FRIENDS_AND_FAMILY_MINTER_ENVVAR,
    required=True,
)

presale_merkle_root_option = click.option(
    "--presale-merkle-root",
    help="Merkle root of the presale allowlist (32 bytes, hex)",
    type=Bytes32(),
    envvar=PRESALE_MERKLE_ROOT_ENVVAR,
    required=True,
)
