"""
Artifact loader for the compiled NFT and Marketplace contracts.

This module reads ABI, bytecode and compilation metadata from the
Hardhat artifact files produced by the contracts build.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any

# Get the package root directory
PACKAGE_DIR = Path(__file__).parent.parent
# Artifacts are copied during package build to this location
PACKAGED_ARTIFACTS_DIR = PACKAGE_DIR / "data" / "artifacts"
# Hardhat output of a development checkout
PROJECT_ARTIFACTS_DIR = PACKAGE_DIR.parent / "artifacts" / "contracts"

ARTIFACTS_DIR_ENV = "NFT_MARKETPLACE_ARTIFACTS_DIR"

# Contract name mappings
CONTRACT_PATHS = {
    "NFT": "NFT.sol/NFT.json",
    "Marketplace": "Marketplace.sol/Marketplace.json",
}


def get_artifacts_dir() -> Path:
    """
    Resolve the directory holding the Hardhat artifacts.

    The NFT_MARKETPLACE_ARTIFACTS_DIR environment variable wins, then the
    artifacts bundled with the package, then the checkout's Hardhat output.
    """
    override = os.getenv(ARTIFACTS_DIR_ENV)
    if override:
        return Path(override)
    if PACKAGED_ARTIFACTS_DIR.exists():
        return PACKAGED_ARTIFACTS_DIR
    return PROJECT_ARTIFACTS_DIR


def load_artifact(contract_name: str) -> Dict[str, Any]:
    """
    Load the complete artifact JSON for a contract.

    Args:
        contract_name: Name of the contract ('NFT' or 'Marketplace')

    Returns:
        Complete artifact dictionary including ABI, bytecode, and metadata

    Raises:
        FileNotFoundError: If the artifact file doesn't exist
        ValueError: If the contract name is not recognized
    """
    if contract_name not in CONTRACT_PATHS:
        available = ", ".join(CONTRACT_PATHS.keys())
        raise ValueError(
            f"Unknown contract: {contract_name}. "
            f"Available contracts: {available}"
        )

    artifact_path = get_artifacts_dir() / CONTRACT_PATHS[contract_name]

    if not artifact_path.exists():
        raise FileNotFoundError(
            f"Artifact file not found: {artifact_path}\n"
            f"Make sure the contracts have been compiled with 'npx hardhat compile'"
        )

    with open(artifact_path, 'r') as f:
        return json.load(f)


def get_abi(contract_name: str) -> list:
    """Return the ABI list of a contract."""
    artifact = load_artifact(contract_name)
    return artifact.get('abi', [])


def get_bytecode(contract_name: str) -> str:
    """Return the creation bytecode of a contract as a '0x' hex string."""
    artifact = load_artifact(contract_name)
    return artifact.get('bytecode', '0x')


def get_deployed_bytecode(contract_name: str) -> str:
    artifact = load_artifact(contract_name)
    return artifact.get('deployedBytecode', '0x')


def get_contract_metadata(contract_name: str) -> Dict[str, Any]:
    """
    Get the identifying fields of a compiled artifact.

    Args:
        contract_name: Name of the contract

    Returns:
        Dictionary with the artifact format, contract and source names
    """
    artifact = load_artifact(contract_name)

    return {
        'format': artifact.get('_format'),
        'contractName': artifact.get('contractName'),
        'sourceName': artifact.get('sourceName'),
        'hasBytecode': artifact.get('bytecode', '0x') not in ('', '0x'),
    }


def list_available_contracts() -> list:
    return list(CONTRACT_PATHS.keys())


def validate_artifacts() -> Dict[str, bool]:
    """
    Check which exposed artifacts can be loaded.

    Returns:
        Dictionary mapping contract names to availability status
    """
    status = {}
    for contract_name in CONTRACT_PATHS:
        try:
            load_artifact(contract_name)
            status[contract_name] = True
        except (FileNotFoundError, ValueError):
            status[contract_name] = False

    return status
