"""Deployable contract wrappers, keyed by artifact name."""
from typing import Dict, Type

from .base import ContractWrapper
from .marketplace import MarketplaceContract
from .nft import NFTContract

CONTRACT_WRAPPERS: Dict[str, Type[ContractWrapper]] = {
    NFTContract.CONTRACT_NAME: NFTContract,
    MarketplaceContract.CONTRACT_NAME: MarketplaceContract,
}


def get_wrapper(contract_name: str) -> Type[ContractWrapper]:
    """
    Resolve the wrapper class for an artifact name.

    Raises:
        ValueError: If no wrapper exists for the name
    """
    try:
        return CONTRACT_WRAPPERS[contract_name]
    except KeyError:
        available = ", ".join(CONTRACT_WRAPPERS.keys())
        raise ValueError(
            f"Unknown contract: {contract_name}. "
            f"Available contracts: {available}"
        ) from None


__all__ = [
    "CONTRACT_WRAPPERS",
    "ContractWrapper",
    "MarketplaceContract",
    "NFTContract",
    "get_wrapper",
]
