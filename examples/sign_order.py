"""Sign an NFT sell order with a local key.

This example lists an ERC721 token for WETH:
1. Approves the exchange proxy for the NFT (if RPC_URL is set)
2. Builds and signs the order (EIP-712)
3. Verifies the signature locally

Prerequisites:
1. pip install nft-swap-sdk[examples]
2. Set PRIVATE_KEY (and optionally CHAIN_ID, RPC_URL) in the environment or .env

Usage:
    python sign_order.py
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def main():
    from nft_swap_sdk import NftSwap, Web3TokenApprovals
    from eth_account import Account

    PRIVATE_KEY = os.environ.get("PRIVATE_KEY")
    CHAIN_ID = int(os.environ.get("CHAIN_ID", "1"))
    RPC_URL = os.environ.get("RPC_URL")

    if not PRIVATE_KEY:
        print("Missing required environment variable: PRIVATE_KEY")
        return

    logging.basicConfig(level=logging.DEBUG if os.environ.get("DEBUG") else logging.INFO)

    swap = NftSwap({"chain_id": CHAIN_ID})
    maker = Account.from_key(PRIVATE_KEY).address

    nft = {
        "type": "ERC721",
        "tokenAddress": "0x8a90CAb2b38dba80c64b7734e58Ee1dB38B8992e",
        "tokenId": "1234",
    }
    weth = {
        "type": "ERC20",
        "tokenAddress": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        "amount": "100000000000000000",  # 0.1 WETH
    }

    print("=" * 60)
    print("  LIST ERC721 FOR WETH")
    print("=" * 60)

    if RPC_URL:
        from web3 import Web3

        print("\n[1] Approving exchange proxy for the NFT...")
        approvals = Web3TokenApprovals(Web3(Web3.HTTPProvider(RPC_URL)), PRIVATE_KEY)
        tx_hash = swap.approve_asset(nft, approvals)
        print(f"    Approval TX: {tx_hash}")
    else:
        print("\n[1] RPC_URL not set, skipping approval")

    print("\n[2] Building and signing order...")
    order = swap.build_order(maker_asset=nft, taker_asset=weth, maker=maker)
    signed = swap.sign_order_with_private_key(order, PRIVATE_KEY)
    print(f"    Order hash: {swap.get_order_hash(order)}")
    print(f"    Signature:  v={signed.signature.v} r={signed.signature.r[:18]}...")

    print("\n[3] Verifying signature...")
    print(f"    Valid: {swap.verify_order_signature(signed, maker)}")


if __name__ == "__main__":
    main()
