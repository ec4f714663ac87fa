from ape import networks

from cre8ors_deployment.constants import FORK_NETWORK_SUFFIX, LOCAL_CHAINS


def is_local_network() -> bool:
    """
    Returns True if the connected network is a local development chain,
    including local forks of a live network (e.g. mainnet-fork).
    """
    network_name = networks.provider.network.name
    return network_name in LOCAL_CHAINS or network_name.endswith(FORK_NETWORK_SUFFIX)
