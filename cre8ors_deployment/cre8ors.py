from typing import Any, List, NamedTuple

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address, to_hex

from cre8ors_deployment.constants import (
    CRE8ORS_EDITION_SIZE,
    CRE8ORS_FUNDS_RECIPIENT,
    CRE8ORS_INITIAL_OWNER,
    CRE8ORS_LOCATION,
    CRE8ORS_METADATA_RENDERER,
    CRE8ORS_NAME,
    CRE8ORS_ROYALTY_BPS,
    CRE8ORS_SYMBOL,
    DEFAULT_DEPLOY_RETRIES,
    ERC20_PAYMENT_TOKEN,
    MAX_SALE_PURCHASE_PER_ADDRESS,
    PRESALE_END,
    PRESALE_START,
    PUBLIC_SALE_END,
    PUBLIC_SALE_PRICE,
    PUBLIC_SALE_START,
)
from cre8ors_deployment.contract import DeployedContract
from cre8ors_deployment.deployer import Deployer


class SalesConfig(NamedTuple):
    """The sales configuration struct, in constructor order."""

    public_sale_price: int
    erc20_payment_token: ChecksumAddress
    max_sale_purchase_per_address: int
    public_sale_start: int
    public_sale_end: int
    presale_start: int
    presale_end: int
    presale_merkle_root: bytes

    def __str__(self) -> str:
        fields = [
            to_hex(value) if isinstance(value, bytes) else str(value) for value in self
        ]
        return f"({','.join(fields)})"


def sales_config(presale_merkle_root: bytes) -> SalesConfig:
    return SalesConfig(
        public_sale_price=PUBLIC_SALE_PRICE,
        erc20_payment_token=to_checksum_address(ERC20_PAYMENT_TOKEN),
        max_sale_purchase_per_address=MAX_SALE_PURCHASE_PER_ADDRESS,
        public_sale_start=PUBLIC_SALE_START,
        public_sale_end=PUBLIC_SALE_END,
        presale_start=PRESALE_START,
        presale_end=PRESALE_END,
        presale_merkle_root=presale_merkle_root,
    )


def cre8ors_constructor_args(presale_merkle_root: bytes) -> List[Any]:
    return [
        CRE8ORS_NAME,
        CRE8ORS_SYMBOL,
        to_checksum_address(CRE8ORS_INITIAL_OWNER),
        to_checksum_address(CRE8ORS_FUNDS_RECIPIENT),
        CRE8ORS_EDITION_SIZE,
        CRE8ORS_ROYALTY_BPS,
        sales_config(presale_merkle_root),
        to_checksum_address(CRE8ORS_METADATA_RENDERER),
    ]


def deploy_cre8ors(
    deployer: Deployer,
    presale_merkle_root: bytes,
    retries: int = DEFAULT_DEPLOY_RETRIES,
) -> DeployedContract:
    print("deploying Cre8ors")
    args = cre8ors_constructor_args(presale_merkle_root)
    drop_contract = deployer.retry_deploy(retries, CRE8ORS_LOCATION, args)
    print(f"[deployed] {CRE8ORS_LOCATION}")
    print(f"deployed cre8ors to {drop_contract.address}")
    return drop_contract
