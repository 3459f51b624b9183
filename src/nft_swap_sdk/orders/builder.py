"""Order construction helpers.

Fill in the fields callers rarely care about (taker, expiry, nonce) with
the exchange's conventions.
"""

import secrets
import time
from typing import List, Optional

from eth_utils import is_address, to_checksum_address

from ..utils import DEFAULT_ORDER_EXPIRY_SECONDS, ZERO_ADDRESS
from .types import ERC1155Order, ERC721Order, FeeLike, PropertyLike, TradeDirection


def generate_order_nonce() -> int:
    """Random 128-bit order nonce."""
    return secrets.randbits(128)


def _resolve_expiry(expiry_seconds: int) -> int:
    if expiry_seconds <= 0:
        raise ValueError(f"Expiry must be in the future: {expiry_seconds}s")
    return int(time.time()) + expiry_seconds


def _checksum(name: str, address: str) -> str:
    if not is_address(address):
        raise ValueError(f"Invalid {name} address: {address}")
    return to_checksum_address(address)


def create_erc721_order(
    direction: TradeDirection,
    maker: str,
    erc20_token: str,
    erc20_token_amount: int,
    erc721_token: str,
    erc721_token_id: int,
    taker: str = ZERO_ADDRESS,
    expiry_seconds: int = DEFAULT_ORDER_EXPIRY_SECONDS,
    nonce: Optional[int] = None,
    fees: Optional[List[FeeLike]] = None,
    properties: Optional[List[PropertyLike]] = None,
) -> ERC721Order:
    """Create an ERC721 order.

    Args:
        direction: SELL_NFT if the maker gives the NFT, BUY_NFT otherwise
        maker: Order maker address
        erc20_token: ERC20 paid or received
        erc20_token_amount: ERC20 amount in base units
        erc721_token: NFT contract address
        erc721_token_id: NFT token ID
        taker: Restrict filling to this address (default: anyone)
        expiry_seconds: Seconds from now until the order expires (default: 30 days)
        nonce: Order nonce (default: random 128-bit value)
        fees: Fees paid out of the ERC20 side
        properties: Property filters (buy orders only)

    Returns:
        ERC721Order

    Raises:
        ValueError: If an address is invalid or the expiry is not in the future
    """
    return ERC721Order(
        direction=int(direction),
        maker=_checksum("maker", maker),
        taker=_checksum("taker", taker),
        expiry=_resolve_expiry(expiry_seconds),
        nonce=generate_order_nonce() if nonce is None else nonce,
        erc20_token=_checksum("erc20_token", erc20_token),
        erc20_token_amount=erc20_token_amount,
        erc721_token=_checksum("erc721_token", erc721_token),
        erc721_token_id=erc721_token_id,
        fees=list(fees or []),
        erc721_token_properties=list(properties or []),
    )


def create_erc1155_order(
    direction: TradeDirection,
    maker: str,
    erc20_token: str,
    erc20_token_amount: int,
    erc1155_token: str,
    erc1155_token_id: int,
    erc1155_token_amount: int = 1,
    taker: str = ZERO_ADDRESS,
    expiry_seconds: int = DEFAULT_ORDER_EXPIRY_SECONDS,
    nonce: Optional[int] = None,
    fees: Optional[List[FeeLike]] = None,
    properties: Optional[List[PropertyLike]] = None,
) -> ERC1155Order:
    """Create an ERC1155 order. Same arguments as ``create_erc721_order``."""
    return ERC1155Order(
        direction=int(direction),
        maker=_checksum("maker", maker),
        taker=_checksum("taker", taker),
        expiry=_resolve_expiry(expiry_seconds),
        nonce=generate_order_nonce() if nonce is None else nonce,
        erc20_token=_checksum("erc20_token", erc20_token),
        erc20_token_amount=erc20_token_amount,
        erc1155_token=_checksum("erc1155_token", erc1155_token),
        erc1155_token_id=erc1155_token_id,
        erc1155_token_amount=erc1155_token_amount,
        fees=list(fees or []),
        erc1155_token_properties=list(properties or []),
    )
