"""
NFT Marketplace deployment package

Provides access to the compiled NFT and Marketplace contract artifacts and
a runner that deploys both contracts to an EVM node.
"""

__version__ = "1.0.0"

from .artifacts.loader import (
    get_abi,
    get_bytecode,
    load_artifact,
    get_contract_metadata
)

from .contracts.marketplace import MarketplaceContract
from .contracts.nft import NFTContract
from .deployer import (
    ContractFactory,
    DeployedContract,
    DeploymentError,
    Signer,
)

__all__ = [
    'get_abi',
    'get_bytecode',
    'load_artifact',
    'get_contract_metadata',
    'MarketplaceContract',
    'NFTContract',
    'ContractFactory',
    'DeployedContract',
    'DeploymentError',
    'Signer',
]
