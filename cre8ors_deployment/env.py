import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from cre8ors_deployment.constants import CHAIN_ENVVAR, LOCAL_CHAINS, SUPPORTED_CHAINS


def get_chain(chain: Optional[str] = None) -> str:
    """
    Returns the target chain, either as given or from the CHAIN
    environment variable.
    """
    chain = chain or os.environ.get(CHAIN_ENVVAR)
    if not chain:
        raise ValueError(f"{CHAIN_ENVVAR} is not set.")
    if chain not in SUPPORTED_CHAINS:
        raise ValueError(
            f"Unsupported chain '{chain}'; expected one of {', '.join(SUPPORTED_CHAINS)}."
        )
    return chain


def env_filepath(chain: str, directory: Optional[Path] = None) -> Path:
    directory = directory or Path.cwd()
    return directory / f".env.{chain}"


def load_chain_environment(chain: Optional[str] = None, directory: Optional[Path] = None) -> str:
    """
    Loads `.env.<chain>` into the process environment.

    Variables that are already set take precedence over the file. Local chains
    do not require an environment file.
    """
    chain = get_chain(chain)
    filepath = env_filepath(chain=chain, directory=directory)
    if not filepath.exists():
        if chain in LOCAL_CHAINS:
            return chain
        raise FileNotFoundError(f"No environment file found for chain '{chain}' at {filepath}")

    load_dotenv(dotenv_path=filepath, override=False)
    os.environ.setdefault(CHAIN_ENVVAR, chain)
    print(f"(i) Loaded {chain} environment from {filepath}")
    return chain
