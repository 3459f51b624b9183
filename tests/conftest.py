"""Shared fixtures for the NFT swap SDK tests."""

import pytest
from eth_account import Account

from nft_swap_sdk.orders import ERC721Order, ERC1155Order, Fee, Property, TradeDirection
from nft_swap_sdk.utils import EXCHANGE_PROXY_ADDRESSES, ZERO_ADDRESS

# Test wallet (DO NOT use in production)
TEST_PRIVATE_KEY = "0x" + "ab" * 32  # Deterministic test key
TEST_ACCOUNT = Account.from_key(TEST_PRIVATE_KEY)
TEST_ADDRESS = TEST_ACCOUNT.address

WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
NFT_CONTRACT = "0x" + "12" * 20
EXCHANGE_PROXY = EXCHANGE_PROXY_ADDRESSES[1]
FEE_RECIPIENT = "0x" + "34" * 20


@pytest.fixture
def erc721_order() -> ERC721Order:
    return ERC721Order(
        direction=TradeDirection.SELL_NFT,
        maker=TEST_ADDRESS,
        taker=ZERO_ADDRESS,
        expiry=2524604400,
        nonce=100131415900000000000000000000000000000257,
        erc20_token=WETH,
        erc20_token_amount=10**18,
        erc721_token=NFT_CONTRACT,
        erc721_token_id=42,
        fees=[Fee(recipient=FEE_RECIPIENT, amount=25 * 10**15, fee_data="0x")],
    )


@pytest.fixture
def erc1155_order() -> ERC1155Order:
    return ERC1155Order(
        direction=TradeDirection.BUY_NFT,
        maker=TEST_ADDRESS,
        taker=ZERO_ADDRESS,
        expiry=2524604400,
        nonce=7,
        erc20_token=WETH,
        erc20_token_amount=5 * 10**17,
        erc1155_token=NFT_CONTRACT,
        erc1155_token_id=3,
        erc1155_token_amount=10,
        erc1155_token_properties=[Property(property_validator=ZERO_ADDRESS, property_data=b"")],
    )
