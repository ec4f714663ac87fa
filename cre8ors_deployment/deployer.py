import typing
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from ape import networks
from ape.api import AccountAPI
from ape.cli.choices import select_account
from ape.contracts.base import ContractContainer
from ape.exceptions import ApeException, SignatureError
from ape_accounts import KeyfileAccount

from cre8ors_deployment.confirm import _confirm_arguments, _continue
from cre8ors_deployment.contract import (
    ConstructorArguments,
    ContractLocation,
    DeployedContract,
    DeploymentFailed,
    VerifiedDeployment,
)
from cre8ors_deployment.networks import is_local_network
from cre8ors_deployment.registry import registry_from_deployments
from cre8ors_deployment.utils import (
    check_plugins,
    get_contract_container,
    registry_filepath_from_chain,
    verify_contracts,
)

Location = Union[str, ContractLocation]


def _to_location(location: Location) -> ContractLocation:
    if isinstance(location, ContractLocation):
        return location
    return ContractLocation.from_string(location)


class Deployer:
    """
    Represents an ape account plus the deployment settings for one chain,
    plus validated/annotated contract deployment.
    """

    def __init__(
        self,
        chain: str,
        verify: bool = False,
        account: typing.Optional[AccountAPI] = None,
        autosign: bool = False,
        registry_filepath: Optional[Path] = None,
    ):
        if account is None:
            account = select_account()
        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
        if isinstance(account, KeyfileAccount):
            account.set_autosign(autosign)
        self._account = account
        self._autosign = autosign

        check_plugins()
        self.chain = chain
        self.verify = verify
        self.registry_filepath = registry_filepath or registry_filepath_from_chain(chain)
        self._print_deployment_info()

        if not self._autosign:
            # Confirms the start of the deployment.
            _continue()

    def get_account(self) -> AccountAPI:
        """Returns the deployer account."""
        return self._account

    def _prepare(
        self, location: ContractLocation, args: Optional[Sequence[Any]]
    ) -> typing.Tuple[ContractContainer, ConstructorArguments]:
        """Resolves the contract and validates its constructor arguments."""
        container = get_contract_container(location.name)
        arguments = ConstructorArguments(location=location, args=args)
        abi_inputs = container.constructor.abi.inputs
        arguments.validate(abi_inputs)
        if not self._autosign:
            _confirm_arguments(arguments.named(abi_inputs), location.name)
        return container, arguments

    def _deploy_contract(
        self,
        location: ContractLocation,
        container: ContractContainer,
        arguments: ConstructorArguments,
    ) -> DeployedContract:
        instance = self._account.deploy(container, *arguments, publish=False)
        return DeployedContract.from_instance(location=location, instance=instance)

    def retry_deploy(
        self, retries: int, location: Location, args: Optional[Sequence[Any]] = None
    ) -> DeployedContract:
        """
        Deploys a contract, making up to `retries` attempts in total.

        Malformed constructor arguments fail immediately, and so does a
        declined signature. Any other ape error consumes one attempt; once the
        budget is spent, DeploymentFailed is raised from the last error.
        """
        if retries < 1:
            raise ValueError(f"retries must be at least 1, got {retries}")

        location = _to_location(location)
        container, arguments = self._prepare(location, args)

        last_error = None
        for attempt in range(1, retries + 1):
            try:
                return self._deploy_contract(location, container, arguments)
            except SignatureError:
                raise
            except ApeException as e:
                last_error = e
                print(f"(!) Attempt {attempt}/{retries} to deploy {location} failed: {e}")

        raise DeploymentFailed(
            f"Could not deploy {location} after {retries} attempt(s)."
        ) from last_error

    def deploy_and_verify(
        self, location: Location, args: Optional[Sequence[Any]] = None
    ) -> VerifiedDeployment:
        """
        Deploys a contract once and publishes its source to the block explorer.

        Verification is skipped on local networks. An explorer failure does
        not undo the deployment: it is reported and the result is returned
        with verified=False, so the contract can still be recorded.
        """
        location = _to_location(location)
        container, arguments = self._prepare(location, args)
        deployment = self._deploy_contract(location, container, arguments)
        print(f"(i) Deployed {location.name} at {deployment.address}")

        if is_local_network():
            print(f"(i) Skipping verification of {location.name} on a local network")
            return VerifiedDeployment(deployed=deployment, verified=False)

        try:
            verify_contracts(contracts=[deployment.instance])
        except Exception as e:
            print(f"(!) Verification of {location.name} failed: {e}")
            print("(!) Re-run scripts/verify.py once the explorer has indexed it")
            return VerifiedDeployment(deployed=deployment, verified=False)
        return VerifiedDeployment(deployed=deployment, verified=True)

    def finalize(self, deployments: List[DeployedContract]) -> Path:
        """
        Records the deployments in the chain's registry artifact and then,
        if requested, publishes them to the block explorer.
        """
        filepath = registry_from_deployments(
            deployments=deployments,
            chain_id=networks.provider.chain_id,
            deployer=self._account.address,
            output_filepath=self.registry_filepath,
        )
        if self.verify:
            verify_contracts(contracts=[deployment.instance for deployment in deployments])
        return filepath

    def _print_deployment_info(self):
        print(
            f"Account: {self.get_account().address}",
            f"Chain: {self.chain}",
            f"Registry: {self.registry_filepath}",
            f"Verify: {self.verify}",
            f"Ecosystem: {networks.provider.network.ecosystem.name}",
            f"Network: {networks.provider.network.name}",
            f"Chain ID: {networks.provider.chain_id}",
            sep="\n",
        )
