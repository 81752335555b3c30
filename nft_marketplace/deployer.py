"""
Web3 deployment layer.

Wraps a node connection into the handles the deployment runner works
with: signers, contract factories and deployed contracts.
"""

import logging
from dataclasses import dataclass
from typing import List

from web3 import Web3

from .contracts import ContractWrapper, get_wrapper

logger = logging.getLogger(__name__)


class DeploymentError(Exception):
    """A deployment step could not produce a usable result."""


@dataclass(frozen=True)
class DeployedContract:
    name: str
    address: str
    transaction_hash: str


class Signer:
    """An account unlocked on the node, used to send transactions."""

    def __init__(self, w3: Web3, address: str):
        self.w3 = w3
        self.address = address

    def get_balance(self) -> int:
        """Return the current balance in wei."""
        return self.w3.eth.get_balance(self.address)

    def __repr__(self):
        return f"Signer({self.address})"


class ContractFactory:
    """
    Submits contract-creation transactions for one compiled artifact.

    Each call to deploy() sends a new transaction from the bound signer
    and blocks until its receipt is available.
    """

    def __init__(self, w3: Web3, wrapper: ContractWrapper, signer: Signer):
        self.w3 = w3
        self.wrapper = wrapper
        self.signer = signer

    @property
    def contract_name(self) -> str:
        return self.wrapper.CONTRACT_NAME

    def deploy(self, *args) -> DeployedContract:
        """
        Deploy a new instance of the contract.

        Args:
            *args: Constructor arguments, validated by the wrapper

        Returns:
            The deployed contract with its on-chain address

        Raises:
            ValueError: If the constructor arguments are invalid
            DeploymentError: If the transaction reverted or created no contract
        """
        constructor_args = self.wrapper.encode_constructor_params(*args)

        contract = self.w3.eth.contract(
            abi=self.wrapper.abi, bytecode=self.wrapper.bytecode
        )
        tx_hash = contract.constructor(*constructor_args).transact(
            {"from": self.signer.address}
        )
        tx_hex = Web3.to_hex(tx_hash)
        logger.debug("%s deployment sent in transaction %s", self.contract_name, tx_hex)

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)

        if receipt.get("status") == 0:
            raise DeploymentError(
                f"{self.contract_name} deployment reverted in transaction {tx_hex}"
            )

        address = receipt.get("contractAddress")
        if not address:
            raise DeploymentError(
                f"{self.contract_name} deployment in transaction {tx_hex} "
                f"did not create a contract"
            )

        return DeployedContract(self.contract_name, address, tx_hex)


def connect(rpc_url: str) -> Web3:
    """
    Connect to a JSON-RPC node.

    Raises:
        DeploymentError: If the node does not answer
    """
    w3 = Web3(Web3.HTTPProvider(rpc_url))
    if not w3.is_connected():
        raise DeploymentError(f"Could not connect to node at {rpc_url}")
    return w3


def get_signers(w3: Web3) -> List[Signer]:
    """
    List the node's unlocked accounts as signers, in node order.

    Raises:
        DeploymentError: If the node exposes no accounts
    """
    accounts = w3.eth.accounts
    if not accounts:
        raise DeploymentError("The node has no unlocked accounts to deploy from")
    return [Signer(w3, address) for address in accounts]


def get_contract_factory(w3: Web3, contract_name: str, signer: Signer) -> ContractFactory:
    """
    Resolve a factory for a named artifact, bound to a signer.

    Raises:
        ValueError: If the contract name is not recognized
        FileNotFoundError: If the artifact has not been compiled
    """
    wrapper = get_wrapper(contract_name)()
    return ContractFactory(w3, wrapper, signer)
