from cre8ors_deployment.constants import TRANSFER_HOOK_LOCATION
from cre8ors_deployment.contract import DeployedContract
from cre8ors_deployment.deployer import Deployer

BEFORE_TOKEN_TRANSFER_HOOK = 0
AFTER_TOKEN_TRANSFER_HOOK = 1


def deploy_transfers(deployer: Deployer) -> DeployedContract:
    print("deploying Transfer Hook")
    result = deployer.deploy_and_verify(TRANSFER_HOOK_LOCATION, None)
    print(f"deployed transfer hook to {result.deployed.address}")
    print(
        f"make sure to call cre8ors.setHook({BEFORE_TOKEN_TRANSFER_HOOK}) "
        "for beforeTokenTransferHook"
    )
    print(
        f"make sure to call cre8ors.setHook({AFTER_TOKEN_TRANSFER_HOOK}) "
        "for afterTokenTransferHook"
    )
    return result.deployed
