"""
Marketplace contract wrapper for deployment.

The Marketplace lists NFTs for sale and keeps a fee, expressed as a
whole percentage of the item price, for the deploying account.
"""

from typing import Any, List

from .base import ContractWrapper

# Fee percent the Marketplace is deployed with
DEFAULT_FEE_PERCENT = 1


class MarketplaceContract(ContractWrapper):
    """Wrapper for the Marketplace contract."""

    CONTRACT_NAME = "Marketplace"

    def encode_constructor_params(self, *params) -> List[Any]:
        """
        Encode constructor parameters for deployment.

        Args:
            fee_percent: Marketplace fee as a whole percentage (0-100)

        Returns:
            Single-element list holding the fee percent

        Raises:
            ValueError: If validation fails
        """
        if len(params) != 1:
            raise ValueError(
                f"Marketplace constructor takes exactly one argument "
                f"(fee_percent), got {len(params)}"
            )

        fee_percent = params[0]

        # bool is an int subclass
        if isinstance(fee_percent, bool) or not isinstance(fee_percent, int):
            raise ValueError("Fee percent must be an integer")

        if fee_percent < 0 or fee_percent > 100:
            raise ValueError("Fee percent must be between 0 and 100")

        return [fee_percent]
