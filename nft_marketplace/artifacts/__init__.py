"""Artifact loading utilities for the compiled NFT and Marketplace contracts."""
from .loader import get_abi, get_bytecode, load_artifact

__all__ = ["get_abi", "get_bytecode", "load_artifact"]
