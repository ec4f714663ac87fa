import typing
from collections import OrderedDict
from typing import Any, List, NamedTuple, Optional, Sequence

from ape.contracts.base import ContractInstance
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address
from web3.auto import w3


class DeploymentFailed(Exception):
    """Raised when a contract could not be deployed within the retry budget."""


class ContractLocation:
    """
    Identifies a contract by its source file and contract name,
    e.g. ``src/Cre8ors.sol:Cre8ors``.
    """

    DELIMITER = ":"
    SOURCE_SUFFIX = ".sol"

    class Invalid(ValueError):
        """Raised when a contract location string is malformed."""

    def __init__(self, source: str, name: str):
        self.source = source
        self.name = name

    @classmethod
    def from_string(cls, location: str) -> "ContractLocation":
        parts = location.split(cls.DELIMITER)
        if len(parts) != 2:
            raise cls.Invalid(
                f"Contract location '{location}' must have the form <source>{cls.DELIMITER}<name>"
            )
        source, name = (part.strip() for part in parts)
        if not source.endswith(cls.SOURCE_SUFFIX):
            raise cls.Invalid(f"Contract location '{location}' must point to a Solidity source")
        if not name:
            raise cls.Invalid(f"Contract location '{location}' is missing a contract name")
        return cls(source=source, name=name)

    def __str__(self) -> str:
        return f"{self.source}{self.DELIMITER}{self.name}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ContractLocation):
            return NotImplemented
        return (self.source, self.name) == (other.source, other.name)

    def __hash__(self) -> int:
        return hash((self.source, self.name))


class ConstructorArguments:
    """Positional constructor arguments for a single contract."""

    class Invalid(ValueError):
        """Raised when the constructor arguments do not match the constructor ABI"""

    def __init__(self, location: ContractLocation, args: Optional[Sequence[Any]] = None):
        self.location = location
        self.args = list(args or [])

    def __iter__(self):
        return iter(self.args)

    def __len__(self) -> int:
        return len(self.args)

    def validate(self, abi_inputs: List[Any]) -> None:
        """Validates the arguments against the constructor ABI."""
        contract_name = self.location.name
        if len(self.args) != len(abi_inputs):
            raise self.Invalid(
                f"Constructor arguments length mismatch - "
                f"{contract_name} ABI requires {len(abi_inputs)}, Got {len(self.args)}."
            )

        for position, (abi_input, value) in enumerate(zip(abi_inputs, self.args)):
            if not w3.is_encodable(abi_input.canonical_type, value):
                raise self.Invalid(
                    f"{contract_name} constructor argument '{abi_input.name}' at position "
                    f"{position} has a value '{value}' whose type does not match expected "
                    f"ABI type '{abi_input.canonical_type}'"
                )

    def named(self, abi_inputs: List[Any]) -> typing.OrderedDict[str, Any]:
        """Pairs each argument with its ABI name, for display."""
        named_args = OrderedDict()
        for position, (abi_input, value) in enumerate(zip(abi_inputs, self.args)):
            named_args[abi_input.name or f"arg{position}"] = value
        return named_args


class DeployedContract(NamedTuple):
    """Handle for a freshly deployed contract."""

    location: ContractLocation
    instance: ContractInstance
    address: ChecksumAddress
    tx_hash: str
    block_number: int

    @classmethod
    def from_instance(
        cls, location: ContractLocation, instance: ContractInstance
    ) -> "DeployedContract":
        receipt = instance.receipt
        return cls(
            location=location,
            instance=instance,
            address=to_checksum_address(instance.address),
            tx_hash=receipt.txn_hash,
            block_number=receipt.block_number,
        )

    @property
    def name(self) -> str:
        return self.location.name


class VerifiedDeployment(NamedTuple):
    deployed: DeployedContract
    verified: bool
