"""0x v4 NFT Order Module.

This module builds, signs and verifies ERC721 / ERC1155 swap orders.

Key components:
- Order construction with the exchange's defaults
- EIP-712 signing request construction and signing
- Raw signature normalization (R,S,V or V,R,S, v 0/1 or 27/28)

Example usage:
    ```python
    from nft_swap_sdk.orders import (
        create_erc721_order,
        sign_order,
        TradeDirection,
    )
    from nft_swap_sdk.utils import EXCHANGE_PROXY_ADDRESSES

    order = create_erc721_order(
        direction=TradeDirection.SELL_NFT,
        maker="0x...",
        erc20_token="0x...",  # WETH
        erc20_token_amount=10**18,
        erc721_token="0x...",
        erc721_token_id=42,
    )

    signed = sign_order(
        private_key="0x...",
        order=order,
        chain_id=1,
        verifying_contract=EXCHANGE_PROXY_ADDRESSES[1],
    )
    ```
"""

from .types import (
    TradeDirection,
    OrderStatus,
    SignatureType,
    Fee,
    Property,
    ERC721Order,
    ERC1155Order,
    NftOrder,
    ECSignature,
    SignatureStruct,
    SignedNftOrder,
    EIP712_DOMAIN_TYPE,
    ERC721_ORDER_TYPES,
    ERC1155_ORDER_TYPES,
)
from .signature import parse_raw_signature, normalize
from .signing import (
    DOMAIN_NAME,
    DOMAIN_VERSION,
    SigningRequest,
    TypedDataSigner,
    create_eip712_domain,
    build_signing_request,
    get_type_string,
    get_type_hash,
    get_order_hash,
    sign_order,
    sign_order_with_signer,
    verify_order_signature,
)
from .builder import create_erc721_order, create_erc1155_order, generate_order_nonce

__all__ = [
    # Types
    "TradeDirection",
    "OrderStatus",
    "SignatureType",
    "Fee",
    "Property",
    "ERC721Order",
    "ERC1155Order",
    "NftOrder",
    "ECSignature",
    "SignatureStruct",
    "SignedNftOrder",
    "EIP712_DOMAIN_TYPE",
    "ERC721_ORDER_TYPES",
    "ERC1155_ORDER_TYPES",
    # Signatures
    "parse_raw_signature",
    "normalize",
    # Signing
    "DOMAIN_NAME",
    "DOMAIN_VERSION",
    "SigningRequest",
    "TypedDataSigner",
    "create_eip712_domain",
    "build_signing_request",
    "get_type_string",
    "get_type_hash",
    "get_order_hash",
    "sign_order",
    "sign_order_with_signer",
    "verify_order_signature",
    # Builder
    "create_erc721_order",
    "create_erc1155_order",
    "generate_order_nonce",
]
