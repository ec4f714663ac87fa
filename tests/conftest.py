import importlib.util
import os
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

import pytest
from ape.exceptions import ApeException
from eth_utils import to_checksum_address
from ethpm_types.abi import ABIType, MethodABI

from cre8ors_deployment import deployer as deployer_module
from cre8ors_deployment.constants import (
    CHAIN_ENVVAR,
    COLLECTION_HOLDER_MINT_ENVVAR,
    CRE8ORS_ADDRESS_ENVVAR,
    DEPLOY_RETRIES_ENVVAR,
    FRIENDS_AND_FAMILY_MINTER_ENVVAR,
    MINTER_UTILITY_ENVVAR,
    PRESALE_MERKLE_ROOT_ENVVAR,
)
from cre8ors_deployment.deployer import Deployer

# Common constants
SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"
CHAIN_ID = 1337
MERKLE_ROOT = bytes.fromhex("ab" * 32)

SALES_CONFIG_COMPONENTS = [
    ("publicSalePrice", "uint104"),
    ("erc20PaymentToken", "address"),
    ("maxSalePurchasePerAddress", "uint32"),
    ("publicSaleStart", "uint64"),
    ("publicSaleEnd", "uint64"),
    ("presaleStart", "uint64"),
    ("presaleEnd", "uint64"),
    ("presaleMerkleRoot", "bytes32"),
]

CONSTRUCTOR_INPUTS = {
    "AllowlistMinter": [
        ("_cre8orsNFT", "address"),
        ("_minterUtility", "address"),
        ("_collectionHolderMint", "address"),
        ("_friendsAndFamilyMinter", "address"),
    ],
    "Cre8ors": [
        ("_contractName", "string"),
        ("_contractSymbol", "string"),
        ("_initialOwner", "address"),
        ("_fundsRecipient", "address"),
        ("_editionSize", "uint64"),
        ("_royaltyBPS", "uint16"),
        ("_salesConfig", SALES_CONFIG_COMPONENTS),
        ("_metadataRenderer", "address"),
    ],
    "TransferHook": [],
}


# Utility functions
def address(n: int) -> str:
    return to_checksum_address(n.to_bytes(20, "big"))


def abi_input(name, abi_type) -> ABIType:
    if isinstance(abi_type, list):
        components = [abi_input(n, t) for n, t in abi_type]
        return ABIType(name=name, type="tuple", components=components)
    return ABIType(name=name, type=abi_type)


def load_script(name: str):
    """Imports one of the `ape run` scripts as a module."""
    spec = importlib.util.spec_from_file_location(f"scripts_{name}", SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class FakeContainer:
    """Stands in for an ape ContractContainer."""

    def __init__(self, name, inputs):
        self.name = name
        abi = SimpleNamespace(inputs=[abi_input(n, t) for n, t in inputs])
        self.constructor = SimpleNamespace(abi=abi)
        self.contract_type = SimpleNamespace(
            name=name,
            abi=[MethodABI(name="owner", inputs=[], outputs=[abi_input("", "address")])],
        )

    def at(self, contract_address):
        return SimpleNamespace(address=contract_address, contract_type=self.contract_type)


class FakeAccount:
    """Stands in for an ape account; fails the first `failures` deployments with `error`."""

    def __init__(self, failures=0, error=ApeException):
        self.address = address(0xDE9)
        self.failures = failures
        self.error = error
        self.deploy_calls = []

    def deploy(self, container, *args, **kwargs):
        self.deploy_calls.append((container, args, kwargs))
        if len(self.deploy_calls) <= self.failures:
            raise self.error(f"attempt {len(self.deploy_calls)} reverted")
        receipt = SimpleNamespace(
            txn_hash=f"0x{len(self.deploy_calls):064x}", block_number=100 + len(self.deploy_calls)
        )
        return SimpleNamespace(
            address=address(0xC0FFEE + len(self.deploy_calls)),
            receipt=receipt,
            contract_type=container.contract_type,
        )


# Fixtures
@pytest.fixture
def containers():
    return {name: FakeContainer(name, inputs) for name, inputs in CONSTRUCTOR_INPUTS.items()}


@pytest.fixture
def account():
    return FakeAccount()


@pytest.fixture
def verified():
    return []


@pytest.fixture
def local_network():
    return {"is_local": True}


@pytest.fixture
def patched_ape(monkeypatch, containers, verified, local_network):
    def get_contract_container(name):
        try:
            return containers[name]
        except KeyError:
            raise ValueError(f"No contract found with name '{name}'.")

    monkeypatch.setattr(deployer_module, "check_plugins", lambda: None)
    monkeypatch.setattr(deployer_module, "get_contract_container", get_contract_container)
    monkeypatch.setattr(deployer_module, "is_local_network", lambda: local_network["is_local"])
    monkeypatch.setattr(
        deployer_module, "verify_contracts", lambda contracts: verified.extend(contracts)
    )
    monkeypatch.setattr(Deployer, "_print_deployment_info", lambda self: None)


@pytest.fixture
def provider(monkeypatch):
    provider = SimpleNamespace(chain_id=CHAIN_ID)
    monkeypatch.setattr(deployer_module, "networks", SimpleNamespace(provider=provider))
    return provider


@pytest.fixture
def deployer(patched_ape, account, tmp_path):
    return Deployer(
        chain="local",
        account=account,
        autosign=True,
        registry_filepath=tmp_path / "local.json",
    )


@pytest.fixture
def clean_environ():
    with mock.patch.dict(os.environ):
        for envvar in (
            CHAIN_ENVVAR,
            CRE8ORS_ADDRESS_ENVVAR,
            MINTER_UTILITY_ENVVAR,
            COLLECTION_HOLDER_MINT_ENVVAR,
            FRIENDS_AND_FAMILY_MINTER_ENVVAR,
            PRESALE_MERKLE_ROOT_ENVVAR,
            DEPLOY_RETRIES_ENVVAR,
        ):
            os.environ.pop(envvar, None)
        yield
