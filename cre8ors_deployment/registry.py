import json
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, NamedTuple

from eth_typing import ABI, ChecksumAddress

from cre8ors_deployment.contract import ContractLocation, DeployedContract
from cre8ors_deployment.utils import _load_json, get_contract_container, verify_contracts

ChainId = int
ContractName = str


STANDARD_REGISTRY_JSON_FORMAT = {"indent": 4, "separators": (",", ": ")}


class RegistryEntry(NamedTuple):
    """Represents a single deployed contract in a registry artifact."""

    chain_id: ChainId
    name: ContractName
    location: str
    address: ChecksumAddress
    abi: ABI
    tx_hash: str
    block_number: int
    deployer: str


def _get_abi(deployment: DeployedContract) -> ABI:
    """Returns the ABI of a deployed contract."""
    contract_abi = list()
    for entry in deployment.instance.contract_type.abi:
        contract_abi.append(entry.model_dump(mode="json", by_alias=True))
    return contract_abi


def _get_entries(
    deployments: List[DeployedContract], chain_id: ChainId, deployer: str
) -> List[RegistryEntry]:
    """Returns a list of registry entries from a list of deployments."""
    entries = list()
    for deployment in deployments:
        entry = RegistryEntry(
            chain_id=chain_id,
            name=deployment.name,
            location=str(deployment.location),
            address=deployment.address,
            abi=_get_abi(deployment),
            tx_hash=deployment.tx_hash,
            block_number=deployment.block_number,
            deployer=deployer,
        )
        entries.append(entry)
    return entries


def read_registry(filepath: Path) -> List[RegistryEntry]:
    data = _load_json(filepath)
    registry_entries = list()
    for chain_id, entries in data.items():
        for contract_name, artifacts in entries.items():
            registry_entry = RegistryEntry(
                chain_id=int(chain_id),
                name=contract_name,
                location=artifacts["location"],
                address=artifacts["address"],
                abi=artifacts["abi"],
                tx_hash=artifacts["tx_hash"],
                block_number=artifacts["block_number"],
                deployer=artifacts["deployer"],
            )
            registry_entries.append(registry_entry)
    return registry_entries


def write_registry(entries: List[RegistryEntry], filepath: Path, silent: bool = False) -> Path:
    """
    Writes a contract registry to a file.

    An existing registry is extended with the new entries. If any entry
    collides with an existing contract on the same chain, the result is
    written next to it as `<name>.unmerged.json` instead.
    """

    if not entries:
        print("No entries provided.")
        return filepath

    # Sort registry entries to enforce common order
    entries = sorted(entries, key=lambda entry: (str(entry.chain_id), entry.name))

    data = defaultdict(dict)
    for entry in entries:
        entry_abi = list(entry.abi)
        entry_abi.sort(key=lambda d: (d["type"], d.get("name", "")))

        data[str(entry.chain_id)][entry.name] = {
            "location": entry.location,
            "address": entry.address,
            "abi": entry_abi,
            "tx_hash": entry.tx_hash,
            "block_number": int(entry.block_number),
            "deployer": entry.deployer,
        }

    filepath.parent.mkdir(parents=True, exist_ok=True)

    if filepath.exists():
        if not silent:
            print(f"Updating existing registry at {filepath}.")
        existing_data = _load_json(filepath)

        conflicts = [
            (chain_id, name)
            for chain_id, contracts in data.items()
            for name in contracts
            if name in existing_data.get(chain_id, {})
        ]
        if conflicts:
            filepath = filepath.with_suffix(".unmerged.json")
            if not silent:
                print(
                    "Cannot merge registries with overlapping contracts "
                    f"({', '.join(name for _, name in conflicts)}).\n"
                    f"Writing to {filepath} to avoid overwriting existing data."
                )
        else:
            for chain_id, contracts in data.items():
                existing_data.setdefault(chain_id, {}).update(contracts)
            data = existing_data
    elif not silent:
        print(f"Creating new registry at {filepath}.")

    with open(filepath, "w") as file:
        json.dump(data, file, **STANDARD_REGISTRY_JSON_FORMAT)

    return filepath


def registry_from_deployments(
    deployments: List[DeployedContract],
    chain_id: ChainId,
    deployer: str,
    output_filepath: Path,
) -> Path:
    """Creates (or extends) a contract registry from deployed contract handles."""
    entries = _get_entries(deployments=deployments, chain_id=chain_id, deployer=deployer)
    output_filepath = write_registry(entries=entries, filepath=output_filepath)
    print(f"(i) Registry written to {output_filepath}!")
    return output_filepath


def deployments_from_registry(
    filepath: Path, chain_id: ChainId
) -> Dict[ContractName, DeployedContract]:
    """Returns handles for the contracts recorded for a chain, keyed by contract name."""
    deployments = dict()
    for registry_entry in read_registry(filepath=filepath):
        if registry_entry.chain_id != chain_id:
            continue
        location = ContractLocation.from_string(registry_entry.location)
        contract_container = get_contract_container(location.name)
        deployments[registry_entry.name] = DeployedContract(
            location=location,
            instance=contract_container.at(registry_entry.address),
            address=registry_entry.address,
            tx_hash=registry_entry.tx_hash,
            block_number=registry_entry.block_number,
        )
    return deployments


def verify_from_registry(
    filepath: Path, chain_id: ChainId, contract_names: List[ContractName]
) -> List[DeployedContract]:
    """Publishes the named contracts recorded in a registry to the block explorer."""
    deployments = deployments_from_registry(filepath=filepath, chain_id=chain_id)
    missing = [name for name in contract_names if name not in deployments]
    if missing:
        raise ValueError(
            f"Contract(s) {', '.join(missing)} not found in registry, '{filepath}', "
            f"for chain {chain_id}"
        )
    selected = [deployments[name] for name in contract_names]
    verify_contracts(contracts=[deployment.instance for deployment in selected])
    return selected
