from eth_typing import ChecksumAddress

from cre8ors_deployment.constants import ALLOWLIST_MINTER_LOCATION, DEFAULT_DEPLOY_RETRIES
from cre8ors_deployment.contract import DeployedContract
from cre8ors_deployment.deployer import Deployer


def deploy_allowlist_minter(
    deployer: Deployer,
    cre8ors_address: ChecksumAddress,
    minter_utility: ChecksumAddress,
    collection_holder_mint: ChecksumAddress,
    friends_and_family_minter: ChecksumAddress,
    retries: int = DEFAULT_DEPLOY_RETRIES,
) -> DeployedContract:
    print("deploying allowlist minter")
    args = [cre8ors_address, minter_utility, collection_holder_mint, friends_and_family_minter]
    contract = deployer.retry_deploy(retries, ALLOWLIST_MINTER_LOCATION, args)
    print(f"[deployed] {ALLOWLIST_MINTER_LOCATION}")
    print(f"deployed allowlist minter to {contract.address}")
    print("make sure to call grantRole with ADMIN_ROLE on cre8ors contract")
    return contract
