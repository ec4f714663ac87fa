import json
import os
from pathlib import Path
from typing import List

from ape import networks, project
from ape.contracts import ContractContainer, ContractInstance

from cre8ors_deployment.constants import ARTIFACTS_DIR, ETHERSCAN_API_KEY_ENVVAR
from cre8ors_deployment.networks import is_local_network


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def check_etherscan_plugin() -> None:
    """
    Checks that the ape-etherscan plugin is installed and that
    the explorer API key environment variable is set.
    """
    if is_local_network():
        # unnecessary for local deployment
        return
    try:
        import ape_etherscan  # noqa: F401
    except ImportError:
        raise ImportError("Please install the ape-etherscan plugin to use this script.")
    api_key = os.environ.get(ETHERSCAN_API_KEY_ENVVAR)
    if not api_key:
        raise ValueError(f"{ETHERSCAN_API_KEY_ENVVAR} is not set.")


def check_plugins() -> None:
    print("Checking plugins...")
    check_etherscan_plugin()


def verify_contracts(contracts: List[ContractInstance]) -> None:
    explorer = networks.provider.network.explorer
    for instance in contracts:
        print(f"(i) Verifying {instance.contract_type.name}...")
        explorer.publish_contract(instance.address)


def get_contract_container(contract: str) -> ContractContainer:
    try:
        return getattr(project, contract)
    except AttributeError:
        raise ValueError(f"No contract found with name '{contract}'.")


def registry_filepath_from_chain(chain: str) -> Path:
    return ARTIFACTS_DIR / f"{chain}.json"
