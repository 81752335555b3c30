"""
Shared behaviour of the contract wrappers.

A wrapper pairs a compiled artifact with the validation of its
constructor arguments.
"""

from typing import Any, Dict, List

from ..artifacts.loader import get_abi, get_bytecode


class ContractWrapper:
    """Base class for a deployable contract artifact."""

    CONTRACT_NAME = ""

    def __init__(self):
        self.abi = get_abi(self.CONTRACT_NAME)
        self.bytecode = get_bytecode(self.CONTRACT_NAME)

    def encode_constructor_params(self, *params) -> List[Any]:
        """
        Validate constructor parameters and return them in ABI order.

        Raises:
            ValueError: If validation fails
        """
        raise NotImplementedError

    def get_deployment_data(self, *params) -> Dict[str, Any]:
        """
        Get complete deployment data for the contract.

        Returns:
            Dictionary with bytecode, ABI and positional constructor args
        """
        constructor_args = self.encode_constructor_params(*params)

        return {
            "bytecode": self.bytecode,
            "abi": self.abi,
            "constructor_args": constructor_args,
            "contract_name": self.CONTRACT_NAME,
        }
