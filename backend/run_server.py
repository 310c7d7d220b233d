#!/usr/bin/env python3
"""
FastAPI server runner for the NFT Relay backend
"""

from nft_relay.server import main

if __name__ == "__main__":
    main()
