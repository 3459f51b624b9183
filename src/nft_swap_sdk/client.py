"""NFT Swap client.

Bundles order building, signing and asset approvals behind one object
configured for a single chain and exchange deployment:

    swap = NftSwap({"chain_id": 137})
    order = swap.build_order(nft, weth, maker=address)
    signed = await swap.sign_order(order, signer)
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, TypedDict, Union

from .assets import (
    ERC20Asset,
    ERC721Asset,
    ERC1155Asset,
    SwappableAsset,
    TokenApprovalExecutor,
    dispatch,
    execute_approval,
    parse_swappable_asset,
)
from .errors import UnsupportedAssetTypeError
from .orders import (
    NftOrder,
    SignedNftOrder,
    SigningRequest,
    TradeDirection,
    TypedDataSigner,
    build_signing_request,
    create_erc1155_order,
    create_erc721_order,
    get_order_hash,
    sign_order,
    sign_order_with_signer,
    verify_order_signature,
)
from .orders.types import FeeLike, PropertyLike
from .utils import DEFAULT_ORDER_EXPIRY_SECONDS, ZERO_ADDRESS, get_exchange_proxy_address

logger = logging.getLogger(__name__)

AssetInput = Union[SwappableAsset, Mapping[str, Any]]


class NftSwapConfig(TypedDict, total=False):
    """Configuration for the NFT swap client."""

    chain_id: int
    """Chain ID. Default: 1 (Ethereum)"""

    exchange_proxy_address: str
    """Exchange proxy address. Default: the 0x deployment for the chain"""

    order_expiry_seconds: int
    """Default order lifetime in seconds. Default: 30 days"""


@dataclass
class ResolvedNftSwapConfig:
    """Resolved configuration with all defaults applied."""

    chain_id: int
    exchange_proxy_address: str
    order_expiry_seconds: int


class NftSwap:
    """Build, sign and approve 0x v4 NFT swap orders on one chain.

    Example:
        ```python
        swap = NftSwap({"chain_id": 1})

        order = swap.build_order(
            maker_asset={"type": "ERC721", "tokenAddress": "0x...", "tokenId": "42"},
            taker_asset={"type": "ERC20", "tokenAddress": "0x...", "amount": "1000000000000000000"},
            maker="0x...",
        )

        signed = await swap.sign_order(order, signer)
        ```
    """

    def __init__(self, config: Optional[NftSwapConfig] = None):
        """Initialize the client.

        Args:
            config: Optional configuration

        Raises:
            ValueError: If no exchange proxy is known for the chain and none is given
        """
        config = config or {}
        chain_id = config.get("chain_id", 1)

        exchange_proxy_address = config.get(
            "exchange_proxy_address", get_exchange_proxy_address(chain_id)
        )
        if not exchange_proxy_address:
            raise ValueError(
                f"No exchange proxy known for chain {chain_id}. "
                "Pass exchange_proxy_address in the config."
            )

        self._config = ResolvedNftSwapConfig(
            chain_id=chain_id,
            exchange_proxy_address=exchange_proxy_address,
            order_expiry_seconds=config.get(
                "order_expiry_seconds", DEFAULT_ORDER_EXPIRY_SECONDS
            ),
        )

    def get_config(self) -> ResolvedNftSwapConfig:
        """Get the resolved configuration."""
        return self._config

    def build_order(
        self,
        maker_asset: AssetInput,
        taker_asset: AssetInput,
        maker: str,
        taker: str = ZERO_ADDRESS,
        expiry_seconds: Optional[int] = None,
        nonce: Optional[int] = None,
        fees: Optional[List[FeeLike]] = None,
        properties: Optional[List[PropertyLike]] = None,
    ) -> NftOrder:
        """Build an order swapping an NFT for ERC20 (or the reverse).

        The maker giving the NFT makes a SELL_NFT order; the maker giving
        ERC20 makes a BUY_NFT order.

        Raises:
            ValueError: If the pair is not exactly one NFT and one ERC20
        """
        if isinstance(maker_asset, Mapping):
            maker_asset = parse_swappable_asset(maker_asset)
        if isinstance(taker_asset, Mapping):
            taker_asset = parse_swappable_asset(taker_asset)

        if isinstance(taker_asset, ERC20Asset) and not isinstance(maker_asset, ERC20Asset):
            direction, nft, erc20 = TradeDirection.SELL_NFT, maker_asset, taker_asset
        elif isinstance(maker_asset, ERC20Asset) and not isinstance(taker_asset, ERC20Asset):
            direction, nft, erc20 = TradeDirection.BUY_NFT, taker_asset, maker_asset
        else:
            raise ValueError(
                f"Orders swap one NFT for ERC20, got {type(maker_asset).__name__} "
                f"for {type(taker_asset).__name__}"
            )

        common = dict(
            direction=direction,
            maker=maker,
            erc20_token=erc20.token_address,
            erc20_token_amount=erc20.amount,
            taker=taker,
            expiry_seconds=(
                self._config.order_expiry_seconds if expiry_seconds is None else expiry_seconds
            ),
            nonce=nonce,
            fees=fees,
            properties=properties,
        )
        if isinstance(nft, ERC721Asset):
            order: NftOrder = create_erc721_order(
                erc721_token=nft.token_address,
                erc721_token_id=nft.token_id,
                **common,
            )
        elif isinstance(nft, ERC1155Asset):
            order = create_erc1155_order(
                erc1155_token=nft.token_address,
                erc1155_token_id=nft.token_id,
                erc1155_token_amount=nft.amount,
                **common,
            )
        else:
            raise UnsupportedAssetTypeError(getattr(nft, "type", type(nft).__name__))

        logger.debug(
            f"Built {type(order).__name__} direction={direction.name} "
            f"maker={order.maker} nonce={order.nonce}"
        )
        return order

    def build_signing_request(self, order: NftOrder) -> SigningRequest:
        """Build the EIP-712 signing request for an order on this chain."""
        return build_signing_request(
            order, self._config.chain_id, self._config.exchange_proxy_address
        )

    async def sign_order(self, order: NftOrder, signer: TypedDataSigner) -> SignedNftOrder:
        """Sign an order with an external typed-data signer."""
        return await sign_order_with_signer(
            signer, order, self._config.chain_id, self._config.exchange_proxy_address
        )

    def sign_order_with_private_key(self, order: NftOrder, private_key: str) -> SignedNftOrder:
        """Sign an order with a local private key."""
        return sign_order(
            private_key, order, self._config.chain_id, self._config.exchange_proxy_address
        )

    def get_order_hash(self, order: NftOrder) -> str:
        """EIP-712 digest of an order on this chain."""
        return get_order_hash(
            order, self._config.chain_id, self._config.exchange_proxy_address
        )

    def verify_order_signature(self, signed_order: SignedNftOrder, expected_signer: str) -> bool:
        """Verify an EOA order signature locally."""
        return verify_order_signature(
            signed_order,
            self._config.chain_id,
            self._config.exchange_proxy_address,
            expected_signer,
        )

    def approve_asset(
        self,
        asset: AssetInput,
        executor: TokenApprovalExecutor,
        approve: bool = True,
    ) -> Any:
        """Approve (or revoke) the exchange proxy for an asset.

        Args:
            asset: Asset to approve
            executor: Token-standard call executor (e.g. Web3TokenApprovals)
            approve: Set to False to revoke

        Returns:
            Executor result (transaction hash for Web3TokenApprovals)
        """
        operation = dispatch(asset, self._config.exchange_proxy_address, approve)
        return execute_approval(operation, executor)


__all__ = [
    "NftSwap",
    "NftSwapConfig",
    "ResolvedNftSwapConfig",
]
