"""Order Types for the 0x v4 NFT exchange.

User-facing order, fee, property and signature types, plus the EIP-712
struct definitions the exchange contract hashes them with.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Union

from eth_utils import to_bytes


class TradeDirection(IntEnum):
    """Which side of the trade the maker is on."""

    SELL_NFT = 0
    BUY_NFT = 1


class OrderStatus(IntEnum):
    """Order status as reported by the exchange contract."""

    INVALID = 0
    FILLABLE = 1
    UNFILLABLE = 2
    EXPIRED = 3


class SignatureType(IntEnum):
    """Signature types understood by the exchange contract."""

    ILLEGAL = 0
    INVALID = 1
    EIP712 = 2
    ETHSIGN = 3
    PRESIGNED = 4


@dataclass(frozen=True)
class Fee:
    """Fee paid out of the ERC20 side of an order."""

    recipient: str
    """Address receiving the fee."""

    amount: int
    """Fee amount in ERC20 base units."""

    fee_data: Union[bytes, str] = b""
    """Callback data passed to the recipient (hex string or bytes)."""

    def to_message(self) -> Dict[str, Any]:
        return {
            "recipient": self.recipient,
            "amount": self.amount,
            "feeData": self.fee_data,
        }


@dataclass(frozen=True)
class Property:
    """Property-based filter that lets an order match many token IDs."""

    property_validator: str
    """Validator contract address (zero address for "any token")."""

    property_data: Union[bytes, str] = b""
    """Data passed to the validator (hex string or bytes)."""

    def to_message(self) -> Dict[str, Any]:
        return {
            "propertyValidator": self.property_validator,
            "propertyData": self.property_data,
        }


FeeLike = Union[Fee, Dict[str, Any]]
PropertyLike = Union[Property, Dict[str, Any]]


@dataclass(frozen=True)
class ERC721Order:
    """Order to buy or sell a single ERC721 token."""

    direction: int
    maker: str
    taker: str
    expiry: int
    nonce: int
    erc20_token: str
    erc20_token_amount: int
    erc721_token: str
    erc721_token_id: int
    fees: List[FeeLike] = field(default_factory=list)
    erc721_token_properties: List[PropertyLike] = field(default_factory=list)

    def to_message(self) -> Dict[str, Any]:
        """Camel-cased struct, in the order the contract declares it."""
        return {
            "direction": self.direction,
            "maker": self.maker,
            "taker": self.taker,
            "expiry": self.expiry,
            "nonce": self.nonce,
            "erc20Token": self.erc20_token,
            "erc20TokenAmount": self.erc20_token_amount,
            "fees": [_entry_message(fee) for fee in self.fees],
            "erc721Token": self.erc721_token,
            "erc721TokenId": self.erc721_token_id,
            "erc721TokenProperties": [
                _entry_message(prop) for prop in self.erc721_token_properties
            ],
        }


@dataclass(frozen=True)
class ERC1155Order:
    """Order to buy or sell an amount of a single ERC1155 token ID."""

    direction: int
    maker: str
    taker: str
    expiry: int
    nonce: int
    erc20_token: str
    erc20_token_amount: int
    erc1155_token: str
    erc1155_token_id: int
    erc1155_token_amount: int = 1
    fees: List[FeeLike] = field(default_factory=list)
    erc1155_token_properties: List[PropertyLike] = field(default_factory=list)

    def to_message(self) -> Dict[str, Any]:
        """Camel-cased struct, in the order the contract declares it."""
        return {
            "direction": self.direction,
            "maker": self.maker,
            "taker": self.taker,
            "expiry": self.expiry,
            "nonce": self.nonce,
            "erc20Token": self.erc20_token,
            "erc20TokenAmount": self.erc20_token_amount,
            "fees": [_entry_message(fee) for fee in self.fees],
            "erc1155Token": self.erc1155_token,
            "erc1155TokenId": self.erc1155_token_id,
            "erc1155TokenProperties": [
                _entry_message(prop) for prop in self.erc1155_token_properties
            ],
            "erc1155TokenAmount": self.erc1155_token_amount,
        }


NftOrder = Union[ERC721Order, ERC1155Order]


def _entry_message(entry: Any) -> Any:
    # Mappings are passed through untouched and validated by the builder
    if isinstance(entry, (Fee, Property)):
        return entry.to_message()
    return entry


@dataclass(frozen=True)
class SignatureStruct:
    """Signature in the shape the exchange contract accepts."""

    signature_type: int
    v: int
    r: str
    s: str

    def to_message(self) -> Dict[str, Any]:
        return {
            "signatureType": self.signature_type,
            "v": self.v,
            "r": self.r,
            "s": self.s,
        }


@dataclass(frozen=True)
class ECSignature:
    """Canonical ECDSA signature.

    ``v`` is always 27 or 28; ``r`` and ``s`` are 0x-prefixed 32-byte hex.
    """

    v: int
    r: str
    s: str

    def to_bytes(self) -> bytes:
        """Pack back into the 65-byte R,S,V layout."""
        return to_bytes(hexstr=self.r) + to_bytes(hexstr=self.s) + bytes([self.v])

    def to_signature_struct(
        self, signature_type: SignatureType = SignatureType.EIP712
    ) -> SignatureStruct:
        return SignatureStruct(
            signature_type=int(signature_type),
            v=self.v,
            r=self.r,
            s=self.s,
        )


@dataclass(frozen=True)
class SignedNftOrder:
    """Order together with its canonical signature, ready for submission."""

    order: NftOrder
    signature: SignatureStruct

    def to_message(self) -> Dict[str, Any]:
        return {**self.order.to_message(), "signature": self.signature.to_message()}


# EIP-712 domain fields
EIP712_DOMAIN_TYPE = [
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]

# Field order matches LibNFTOrder in the exchange contract; do not reorder
FEE_TYPE = [
    {"name": "recipient", "type": "address"},
    {"name": "amount", "type": "uint256"},
    {"name": "feeData", "type": "bytes"},
]

PROPERTY_TYPE = [
    {"name": "propertyValidator", "type": "address"},
    {"name": "propertyData", "type": "bytes"},
]

ERC721_ORDER_TYPE = [
    {"name": "direction", "type": "uint8"},
    {"name": "maker", "type": "address"},
    {"name": "taker", "type": "address"},
    {"name": "expiry", "type": "uint256"},
    {"name": "nonce", "type": "uint256"},
    {"name": "erc20Token", "type": "address"},
    {"name": "erc20TokenAmount", "type": "uint256"},
    {"name": "fees", "type": "Fee[]"},
    {"name": "erc721Token", "type": "address"},
    {"name": "erc721TokenId", "type": "uint256"},
    {"name": "erc721TokenProperties", "type": "Property[]"},
]

ERC1155_ORDER_TYPE = [
    {"name": "direction", "type": "uint8"},
    {"name": "maker", "type": "address"},
    {"name": "taker", "type": "address"},
    {"name": "expiry", "type": "uint256"},
    {"name": "nonce", "type": "uint256"},
    {"name": "erc20Token", "type": "address"},
    {"name": "erc20TokenAmount", "type": "uint256"},
    {"name": "fees", "type": "Fee[]"},
    {"name": "erc1155Token", "type": "address"},
    {"name": "erc1155TokenId", "type": "uint256"},
    {"name": "erc1155TokenProperties", "type": "Property[]"},
    {"name": "erc1155TokenAmount", "type": "uint128"},
]

ERC721_ORDER_PRIMARY_TYPE = "ERC721Order"
ERC1155_ORDER_PRIMARY_TYPE = "ERC1155Order"

# EIP-712 types for each order kind
ERC721_ORDER_TYPES = {
    ERC721_ORDER_PRIMARY_TYPE: ERC721_ORDER_TYPE,
    "Fee": FEE_TYPE,
    "Property": PROPERTY_TYPE,
}

ERC1155_ORDER_TYPES = {
    ERC1155_ORDER_PRIMARY_TYPE: ERC1155_ORDER_TYPE,
    "Fee": FEE_TYPE,
    "Property": PROPERTY_TYPE,
}
