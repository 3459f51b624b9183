"""Tests for the NftSwap client."""

import pytest
from eth_account import Account

from nft_swap_sdk import (
    ERC721Asset,
    ERC721Order,
    ERC1155Order,
    NftSwap,
    TradeDirection,
)
from nft_swap_sdk.errors import UnsupportedAssetTypeError
from nft_swap_sdk.utils import DEFAULT_ORDER_EXPIRY_SECONDS, MAX_APPROVAL

from conftest import EXCHANGE_PROXY, NFT_CONTRACT, TEST_ADDRESS, TEST_PRIVATE_KEY, WETH

WETH_ASSET = {"type": "ERC20", "tokenAddress": WETH, "amount": "1000000000000000000"}
ERC721_ASSET = {"type": "ERC721", "tokenAddress": NFT_CONTRACT, "tokenId": "42"}
ERC1155_ASSET = {"type": "ERC1155", "tokenAddress": NFT_CONTRACT, "tokenId": "7", "amount": "5"}


class LocalSigner:
    """TypedDataSigner backed by a local key, returning R,S,V hex."""

    def __init__(self, swap: NftSwap, private_key: str):
        self._swap = swap
        self._account = Account.from_key(private_key)
        self._requests = {}

    def expect(self, order):
        request = self._swap.build_signing_request(order)
        self._requests[request.primary_type] = request

    async def get_address(self) -> str:
        return self._account.address

    async def sign_typed_data(self, params):
        request = self._requests[params["primaryType"]]
        signed = self._account.sign_typed_data(
            domain_data=request.domain,
            message_types=request.types,
            message_data=request.message,
        )
        return "0x" + bytes(signed.signature).hex()


class RecordingExecutor:
    def __init__(self):
        self.calls = []

    def set_allowance(self, token, spender, amount):
        self.calls.append(("set_allowance", token, spender, amount))
        return "0x01"

    def set_operator_approval(self, token, operator, approved):
        self.calls.append(("set_operator_approval", token, operator, approved))
        return "0x02"


class TestConfig:
    """Tests for client configuration."""

    def test_defaults(self):
        """Test defaults resolve to Ethereum mainnet."""
        config = NftSwap().get_config()

        assert config.chain_id == 1
        assert config.exchange_proxy_address == EXCHANGE_PROXY
        assert config.order_expiry_seconds == DEFAULT_ORDER_EXPIRY_SECONDS

    def test_known_chain(self):
        """Test the proxy is looked up by chain."""
        assert NftSwap({"chain_id": 137}).get_config().exchange_proxy_address == EXCHANGE_PROXY

    def test_unknown_chain_requires_address(self):
        """Test that an unknown chain without an address raises."""
        with pytest.raises(ValueError, match="No exchange proxy known"):
            NftSwap({"chain_id": 31337})

    def test_explicit_address(self):
        """Test an explicit proxy address for a local chain."""
        proxy = "0x" + "99" * 20
        swap = NftSwap({"chain_id": 31337, "exchange_proxy_address": proxy})

        assert swap.get_config().exchange_proxy_address == proxy
        assert swap.build_signing_request(
            swap.build_order(ERC721_ASSET, WETH_ASSET, maker=TEST_ADDRESS)
        ).domain["chainId"] == 31337


class TestBuildOrder:
    """Tests for building orders from assets."""

    def test_sell_erc721(self):
        """Test the maker giving an NFT makes a sell order."""
        order = NftSwap().build_order(ERC721_ASSET, WETH_ASSET, maker=TEST_ADDRESS, nonce=1)

        assert isinstance(order, ERC721Order)
        assert order.direction == TradeDirection.SELL_NFT
        assert order.erc721_token_id == 42
        assert order.erc20_token_amount == 10**18
        assert order.nonce == 1

    def test_buy_erc1155(self):
        """Test the maker giving ERC20 makes a buy order."""
        order = NftSwap().build_order(WETH_ASSET, ERC1155_ASSET, maker=TEST_ADDRESS)

        assert isinstance(order, ERC1155Order)
        assert order.direction == TradeDirection.BUY_NFT
        assert order.erc1155_token_amount == 5

    def test_dataclass_assets(self):
        """Test assets may be passed as dataclasses."""
        nft = ERC721Asset(token_address=NFT_CONTRACT, token_id=3)

        order = NftSwap().build_order(nft, WETH_ASSET, maker=TEST_ADDRESS)

        assert order.erc721_token_id == 3

    def test_nft_for_nft_rejected(self):
        """Test that swapping two NFTs raises."""
        with pytest.raises(ValueError, match="one NFT for ERC20"):
            NftSwap().build_order(ERC721_ASSET, ERC1155_ASSET, maker=TEST_ADDRESS)

    def test_erc20_for_erc20_rejected(self):
        """Test that swapping two ERC20s raises."""
        with pytest.raises(ValueError, match="one NFT for ERC20"):
            NftSwap().build_order(WETH_ASSET, WETH_ASSET, maker=TEST_ADDRESS)

    def test_zero_expiry_rejected(self):
        """Test an explicit zero expiry is not replaced by the default."""
        with pytest.raises(ValueError, match="Expiry must be in the future"):
            NftSwap().build_order(ERC721_ASSET, WETH_ASSET, maker=TEST_ADDRESS, expiry_seconds=0)

    def test_unsupported_nft_rejected(self):
        """Test an object outside the asset classes cannot be swapped."""
        with pytest.raises(UnsupportedAssetTypeError):
            NftSwap().build_order(object(), WETH_ASSET, maker=TEST_ADDRESS)


class TestSignAndApprove:
    """Tests for the full flow through the client."""

    @pytest.mark.asyncio
    async def test_sign_with_signer(self):
        """Test signing through an external signer and verifying."""
        swap = NftSwap()
        order = swap.build_order(ERC721_ASSET, WETH_ASSET, maker=TEST_ADDRESS)
        signer = LocalSigner(swap, TEST_PRIVATE_KEY)
        signer.expect(order)

        signed = await swap.sign_order(order, signer)

        assert swap.verify_order_signature(signed, TEST_ADDRESS) is True

    def test_sign_with_private_key(self):
        """Test signing with a local key matches the order hash flow."""
        swap = NftSwap({"chain_id": 137})
        order = swap.build_order(WETH_ASSET, ERC1155_ASSET, maker=TEST_ADDRESS)

        signed = swap.sign_order_with_private_key(order, TEST_PRIVATE_KEY)

        assert swap.verify_order_signature(signed, TEST_ADDRESS) is True
        assert swap.get_order_hash(signed.order) == swap.get_order_hash(order)

    def test_approve_erc20(self):
        """Test approving ERC20 grants the proxy an unlimited allowance."""
        executor = RecordingExecutor()

        result = NftSwap().approve_asset(WETH_ASSET, executor)

        assert result == "0x01"
        assert executor.calls == [("set_allowance", WETH, EXCHANGE_PROXY, MAX_APPROVAL)]

    def test_revoke_nft(self):
        """Test revoking NFT approval for the proxy."""
        executor = RecordingExecutor()

        NftSwap().approve_asset(ERC721_ASSET, executor, approve=False)

        assert executor.calls == [("set_operator_approval", NFT_CONTRACT, EXCHANGE_PROXY, False)]
