from collections import OrderedDict

from cre8ors_deployment.constants import ZERO_ADDRESS


def _abort() -> None:
    print("Aborting deployment!")
    exit(-1)


def _confirm_deployment(contract_name: str) -> None:
    """Asks the user to confirm the deployment of a single contract."""
    answer = input(f"Deploy {contract_name} Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _continue() -> None:
    """Asks the user to continue."""
    answer = input("Continue Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _confirm_zero_address() -> None:
    answer = input("Zero Address detected for constructor argument; Continue? Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _contains_zero_address(value) -> bool:
    if isinstance(value, (list, tuple)):
        return any(_contains_zero_address(v) for v in value)
    return value == ZERO_ADDRESS


def _confirm_arguments(named_args: OrderedDict, contract_name: str) -> None:
    """Asks the user to confirm the constructor arguments for a single contract."""
    if len(named_args) == 0:
        print(f"\n(i) No constructor arguments for {contract_name}")
        _confirm_deployment(contract_name)
        return

    print(f"\nConstructor arguments for {contract_name}")
    contains_zero_address = False
    for name, value in named_args.items():
        print(f"\t{name}={value}")
        if not contains_zero_address:
            contains_zero_address = _contains_zero_address(value)
    _confirm_deployment(contract_name)
    if contains_zero_address:
        _confirm_zero_address()
