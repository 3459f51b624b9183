"""NFT Swap SDK.

Sign and verify 0x v4 NFT swap orders (EIP-712), normalize wallet
signatures, and approve assets for the exchange proxy.
"""

from .client import NftSwap, NftSwapConfig, ResolvedNftSwapConfig
from .errors import (
    NftSwapError,
    MalformedSignatureError,
    UndeterminedLayoutError,
    MalformedOrderFieldError,
    UnsupportedAssetTypeError,
)
from .orders import (
    TradeDirection,
    OrderStatus,
    SignatureType,
    Fee,
    Property,
    ERC721Order,
    ERC1155Order,
    ECSignature,
    SignatureStruct,
    SignedNftOrder,
    SigningRequest,
    TypedDataSigner,
    parse_raw_signature,
    normalize,
    build_signing_request,
    create_eip712_domain,
    create_erc721_order,
    create_erc1155_order,
    get_order_hash,
    sign_order,
    sign_order_with_signer,
    verify_order_signature,
)
from .assets import (
    ERC20Asset,
    ERC721Asset,
    ERC1155Asset,
    SwappableAsset,
    ApprovalKind,
    ApprovalOperation,
    TokenApprovalExecutor,
    Web3TokenApprovals,
    dispatch,
    execute_approval,
    parse_swappable_asset,
)
from .utils import (
    ZERO_ADDRESS,
    MAX_APPROVAL,
    EXCHANGE_PROXY_ADDRESSES,
    get_exchange_proxy_address,
)

__all__ = [
    # Client
    "NftSwap",
    "NftSwapConfig",
    "ResolvedNftSwapConfig",
    # Errors
    "NftSwapError",
    "MalformedSignatureError",
    "UndeterminedLayoutError",
    "MalformedOrderFieldError",
    "UnsupportedAssetTypeError",
    # Orders
    "TradeDirection",
    "OrderStatus",
    "SignatureType",
    "Fee",
    "Property",
    "ERC721Order",
    "ERC1155Order",
    "ECSignature",
    "SignatureStruct",
    "SignedNftOrder",
    "SigningRequest",
    "TypedDataSigner",
    "parse_raw_signature",
    "normalize",
    "build_signing_request",
    "create_eip712_domain",
    "create_erc721_order",
    "create_erc1155_order",
    "get_order_hash",
    "sign_order",
    "sign_order_with_signer",
    "verify_order_signature",
    # Assets
    "ERC20Asset",
    "ERC721Asset",
    "ERC1155Asset",
    "SwappableAsset",
    "ApprovalKind",
    "ApprovalOperation",
    "TokenApprovalExecutor",
    "Web3TokenApprovals",
    "dispatch",
    "execute_approval",
    "parse_swappable_asset",
    # Utils
    "ZERO_ADDRESS",
    "MAX_APPROVAL",
    "EXCHANGE_PROXY_ADDRESSES",
    "get_exchange_proxy_address",
]
