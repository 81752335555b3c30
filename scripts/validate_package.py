#!/usr/bin/env python3
"""Validate that the NFT and Marketplace artifacts are ready for deployment"""

import sys
from pathlib import Path

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from nft_marketplace.artifacts.loader import (
    get_artifacts_dir,
    list_available_contracts,
    load_artifact,
)


def validate():
    """Check that every exposed contract loads with an ABI and bytecode"""
    print(f"Validating artifacts in {get_artifacts_dir()}...")

    contracts = list_available_contracts()
    print(f"\nFound {len(contracts)} exposed contracts:")

    all_valid = True
    for name in contracts:
        try:
            artifact = load_artifact(name)
        except (FileNotFoundError, ValueError) as e:
            print(f"  ❌ {name}: {e}")
            all_valid = False
            continue

        abi = artifact.get("abi", [])
        bytecode = artifact.get("bytecode", "")

        if not abi:
            print(f"  ⚠️  {name}: No ABI found")
            all_valid = False
        elif not bytecode or bytecode == "0x":
            print(f"  ⚠️  {name}: No bytecode found")
            all_valid = False
        else:
            print(
                f"  ✅ {name}: {len(abi)} ABI items, {len(bytecode)} bytecode chars"
            )

    print()
    if all_valid:
        print("✅ All contracts ready to deploy!")
        return 0
    else:
        print("❌ Some contracts failed validation")
        return 1


if __name__ == "__main__":
    sys.exit(validate())
