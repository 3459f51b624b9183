"""Protocol constants for the 0x v4 NFT exchange."""

from typing import Optional

# Zero address
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Unlimited ERC20 allowance
MAX_APPROVAL = 2**256 - 1

# 0x Exchange Proxy, keyed by chain ID
EXCHANGE_PROXY_ADDRESSES = {
    1: "0xDef1C0ded9bec7F1a1670819833240f027b25EfF",  # Ethereum
    56: "0xDef1C0ded9bec7F1a1670819833240f027b25EfF",  # BNB Chain
    137: "0xDef1C0ded9bec7F1a1670819833240f027b25EfF",  # Polygon
}

# Orders expire after 30 days unless told otherwise
DEFAULT_ORDER_EXPIRY_SECONDS = 30 * 24 * 60 * 60


def get_exchange_proxy_address(chain_id: int) -> Optional[str]:
    """Look up the exchange proxy deployed on a chain.

    Args:
        chain_id: EVM chain ID

    Returns:
        Checksummed proxy address, or None if the chain is unknown
    """
    return EXCHANGE_PROXY_ADDRESSES.get(chain_id)
