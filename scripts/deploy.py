#!/usr/bin/env python3
"""Deploy the Marketplace and NFT contracts to the node at RPC_URL"""

import sys
from pathlib import Path

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from nft_marketplace.deploy import main


if __name__ == "__main__":
    sys.exit(main())
