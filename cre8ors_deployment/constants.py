from pathlib import Path

import cre8ors_deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(cre8ors_deployment.__file__).parent
ARTIFACTS_DIR = DEPLOYMENT_DIR / "artifacts"

#
# Chains
#

CHAIN_ENVVAR = "CHAIN"

MAINNET = "mainnet"
GOERLI = "goerli"
SEPOLIA = "sepolia"
LOCAL = "local"

SUPPORTED_CHAINS = [MAINNET, GOERLI, SEPOLIA, LOCAL]
LOCAL_CHAINS = [LOCAL]
FORK_NETWORK_SUFFIX = "-fork"  # e.g. mainnet-fork

ETHERSCAN_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"

#
# Deployment
#

DEFAULT_DEPLOY_RETRIES = 2

ALLOWLIST_MINTER_LOCATION = "src/minter/AllowlistMinter.sol:AllowlistMinter"
CRE8ORS_LOCATION = "src/Cre8ors.sol:Cre8ors"
TRANSFER_HOOK_LOCATION = "src/Transfers.sol:TransferHook"

ZERO_ADDRESS = "0x" + "0" * 40
MAX_UINT64 = 2**64 - 1  # 18446744073709551615, i.e. "forever"

#
# Cre8ors collection
#

CRE8ORS_NAME = "cre8ors"
CRE8ORS_SYMBOL = "CRE8"
CRE8ORS_INITIAL_OWNER = "0x4D977d9aEceC3776DD73F2f9080C9AF3BC31f505"  # cre8ors.eth
CRE8ORS_FUNDS_RECIPIENT = "0xcfBf34d385EA2d5Eb947063b67eA226dcDA3DC38"  # sweetman.eth
CRE8ORS_EDITION_SIZE = 8888
CRE8ORS_ROYALTY_BPS = 888
CRE8ORS_METADATA_RENDERER = "0x209511E9fe3c526C61B7691B9308830C1d1612bE"  # from Zora

PUBLIC_SALE_PRICE = 150000000000000000  # 0.15 ether
ERC20_PAYMENT_TOKEN = ZERO_ADDRESS
MAX_SALE_PURCHASE_PER_ADDRESS = 18
PUBLIC_SALE_START = 1691167800  # Friday, August 4, 2023 12:50:00 PM ET
PUBLIC_SALE_END = MAX_UINT64
PRESALE_START = 1691167200  # Friday, August 4, 2023 12:40:00 PM ET
PRESALE_END = MAX_UINT64

#
# Environment-supplied parameters
#

CRE8ORS_ADDRESS_ENVVAR = "CRE8ORS_ADDRESS"
MINTER_UTILITY_ENVVAR = "MINTER_UTILITY_ADDRESS"
COLLECTION_HOLDER_MINT_ENVVAR = "COLLECTION_HOLDER_MINT_ADDRESS"
FRIENDS_AND_FAMILY_MINTER_ENVVAR = "FRIENDS_AND_FAMILY_MINTER_ADDRESS"
PRESALE_MERKLE_ROOT_ENVVAR = "PRESALE_MERKLE_ROOT"
DEPLOY_RETRIES_ENVVAR = "DEPLOY_RETRIES"
