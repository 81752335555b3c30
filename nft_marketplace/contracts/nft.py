"""NFT contract wrapper for deployment."""

from typing import Any, List

from .base import ContractWrapper


class NFTContract(ContractWrapper):
    """
    Wrapper for the NFT (ERC721) contract.

    The NFT contract takes no constructor arguments; tokens are minted
    after deployment and listed through the Marketplace.
    """

    CONTRACT_NAME = "NFT"

    def encode_constructor_params(self, *params) -> List[Any]:
        if params:
            raise ValueError(
                f"NFT constructor takes no arguments, got {len(params)}"
            )
        return []
