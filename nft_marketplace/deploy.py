"""
Deploy the Marketplace and NFT contracts.

Uses the first account of the configured node, deploys the Marketplace
with its fee percent and then the NFT, and reports both addresses.
Run with ``python -m nft_marketplace.deploy`` or ``scripts/deploy.py``.
"""

import logging
import sys
from typing import Tuple

from web3 import Web3

from .config import load_settings
from .contracts.marketplace import DEFAULT_FEE_PERCENT
from .deployer import DeployedContract, connect, get_contract_factory, get_signers

logger = logging.getLogger(__name__)


def deploy_contracts(w3: Web3) -> Tuple[DeployedContract, DeployedContract]:
    """
    Deploy Marketplace, then NFT, from the node's first account.

    Returns:
        The deployed Marketplace and NFT contracts
    """
    deployer = get_signers(w3)[0]

    logger.info("Deploying contracts with the account: %s", deployer.address)
    logger.info("Account balance: %s", deployer.get_balance())

    nft_factory = get_contract_factory(w3, "NFT", deployer)
    marketplace_factory = get_contract_factory(w3, "Marketplace", deployer)

    marketplace = marketplace_factory.deploy(DEFAULT_FEE_PERCENT)
    nft = nft_factory.deploy()

    logger.info("Marketplace deployed to: %s", marketplace.address)
    logger.info("NFT deployed to: %s", nft.address)

    return marketplace, nft


def main() -> int:
    """Run a deployment and return the process exit code."""
    try:
        settings = load_settings()
        logging.basicConfig(level=settings.log_level, format="%(message)s")

        w3 = connect(settings.rpc_url)
        deploy_contracts(w3)
    except Exception:
        logger.exception("Deployment failed")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
