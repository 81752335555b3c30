import json

import pytest

from nft_marketplace.artifacts.loader import ARTIFACTS_DIR_ENV

NFT_ARTIFACT = {
    "_format": "hh-sol-artifact-1",
    "contractName": "NFT",
    "sourceName": "contracts/NFT.sol",
    "abi": [
        {"inputs": [], "stateMutability": "nonpayable", "type": "constructor"},
        {
            "inputs": [{"internalType": "string", "name": "_tokenURI", "type": "string"}],
            "name": "mint",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "nonpayable",
            "type": "function",
        },
    ],
    "bytecode": "0x6080604052348015600f57600080fd5b50",
    "deployedBytecode": "0x6080604052600080fd",
    "linkReferences": {},
    "deployedLinkReferences": {},
}

MARKETPLACE_ARTIFACT = {
    "_format": "hh-sol-artifact-1",
    "contractName": "Marketplace",
    "sourceName": "contracts/Marketplace.sol",
    "abi": [
        {
            "inputs": [{"internalType": "uint256", "name": "_feePercent", "type": "uint256"}],
            "stateMutability": "nonpayable",
            "type": "constructor",
        },
        {
            "inputs": [],
            "name": "feePercent",
            "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
    ],
    "bytecode": "0x60a0604052348015600f57600080fd5b506040",
    "deployedBytecode": "0x60806040526004361061",
    "linkReferences": {},
    "deployedLinkReferences": {},
}


def write_artifact(root, artifact):
    name = artifact["contractName"]
    path = root / f"{name}.sol" / f"{name}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(artifact))
    return path


@pytest.fixture
def artifacts_dir(tmp_path, monkeypatch):
    """Hardhat artifacts for both contracts, picked up by the loader."""
    root = tmp_path / "artifacts"
    write_artifact(root, NFT_ARTIFACT)
    write_artifact(root, MARKETPLACE_ARTIFACT)
    monkeypatch.setenv(ARTIFACTS_DIR_ENV, str(root))
    return root


@pytest.fixture
def empty_artifacts_dir(tmp_path, monkeypatch):
    root = tmp_path / "empty"
    root.mkdir()
    monkeypatch.setenv(ARTIFACTS_DIR_ENV, str(root))
    return root
