"""Order Signing for the 0x v4 NFT exchange.

Builds the EIP-712 payload for an NFT order and signs it with various
wallet types:
- eth_account.Account (direct signing)
- TypedDataSigner (Privy, MetaMask, hardware wallets, etc.)

The signature a wallet returns is run through ``parse_raw_signature`` so the
order always carries a canonical ``{v, r, s}``.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Protocol, Tuple, TypedDict, Union

from eth_account import Account
from eth_account.messages import encode_typed_data
from eth_utils import (
    decode_hex,
    encode_hex,
    is_address,
    keccak,
    to_checksum_address,
)

from ..errors import MalformedOrderFieldError
from .signature import parse_raw_signature
from .types import (
    EIP712_DOMAIN_TYPE,
    ERC1155_ORDER_PRIMARY_TYPE,
    ERC1155_ORDER_TYPES,
    ERC721_ORDER_PRIMARY_TYPE,
    ERC721_ORDER_TYPES,
    ERC1155Order,
    ERC721Order,
    Fee,
    NftOrder,
    Property,
    SignedNftOrder,
    TradeDirection,
)

logger = logging.getLogger(__name__)

# Protocol constants, the exchange contract hard-codes these
DOMAIN_NAME = "ZeroEx"
DOMAIN_VERSION = "1.0.0"

OrderInput = Union[NftOrder, Mapping[str, Any]]


class EIP712Domain(TypedDict):
    """EIP-712 domain separator."""

    name: str
    version: str
    chainId: int
    verifyingContract: str


@dataclass(frozen=True)
class SigningRequest:
    """Everything a typed-data signer needs to sign one order."""

    domain: EIP712Domain
    types: Dict[str, List[Dict[str, str]]]
    primary_type: str
    message: Dict[str, Any]

    def to_typed_data(self) -> Dict[str, Any]:
        """Full EIP-712 document, including the EIP712Domain type."""
        return {
            "types": {
                "EIP712Domain": copy.deepcopy(EIP712_DOMAIN_TYPE),
                **copy.deepcopy(self.types),
            },
            "primaryType": self.primary_type,
            "domain": dict(self.domain),
            "message": copy.deepcopy(self.message),
        }

    def to_signer_params(self) -> Dict[str, Any]:
        """Params for ``TypedDataSigner.sign_typed_data``.

        Integers are sent as decimal strings so JSON-RPC wallets keep full
        uint256 precision.
        """
        return {
            "domain": dict(self.domain),
            "types": copy.deepcopy(self.types),
            "primaryType": self.primary_type,
            "message": _stringify_ints(self.message),
        }


def _stringify_ints(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _stringify_ints(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_stringify_ints(v) for v in value]
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def create_eip712_domain(verifying_contract: str, chain_id: int) -> EIP712Domain:
    """Create EIP-712 domain for the exchange contract.

    Args:
        verifying_contract: Address of the exchange proxy
        chain_id: Chain ID (1 for Ethereum mainnet)

    Returns:
        EIP-712 domain dictionary

    Raises:
        MalformedOrderFieldError: If the contract address or chain ID is invalid
    """
    if not is_address(verifying_contract):
        raise MalformedOrderFieldError(
            "verifyingContract", f"invalid address {verifying_contract!r}"
        )
    if isinstance(chain_id, bool) or not isinstance(chain_id, int) or chain_id <= 0:
        raise MalformedOrderFieldError("chainId", f"invalid chain ID {chain_id!r}")

    return {
        "name": DOMAIN_NAME,
        "version": DOMAIN_VERSION,
        "chainId": chain_id,
        "verifyingContract": to_checksum_address(verifying_contract),
    }


def get_type_string(primary_type: str, types: Mapping[str, List[Dict[str, str]]]) -> str:
    """EIP-712 ``encodeType``: primary struct, then dependencies sorted by name."""
    deps: List[str] = []
    pending = [primary_type]
    while pending:
        name = pending.pop()
        if name in deps:
            continue
        deps.append(name)
        for f in types[name]:
            base = f["type"].split("[", 1)[0]
            if base in types and base not in deps:
                pending.append(base)

    ordered = [primary_type] + sorted(d for d in deps if d != primary_type)
    return "".join(
        f"{name}(" + ",".join(f"{f['type']} {f['name']}" for f in types[name]) + ")"
        for name in ordered
    )


def get_type_hash(primary_type: str, types: Mapping[str, List[Dict[str, str]]]) -> str:
    """keccak256 of the encoded type, as the contract stores it."""
    return encode_hex(keccak(text=get_type_string(primary_type, types)))


def _order_kind(order: OrderInput) -> Tuple[str, Dict[str, Any]]:
    if isinstance(order, ERC721Order):
        return ERC721_ORDER_PRIMARY_TYPE, order.to_message()
    if isinstance(order, ERC1155Order):
        return ERC1155_ORDER_PRIMARY_TYPE, order.to_message()
    if isinstance(order, Mapping):
        if "erc721Token" in order:
            return ERC721_ORDER_PRIMARY_TYPE, dict(order)
        if "erc1155Token" in order:
            return ERC1155_ORDER_PRIMARY_TYPE, dict(order)
        raise MalformedOrderFieldError(
            "order", "missing erc721Token or erc1155Token"
        )
    raise MalformedOrderFieldError("order", f"unsupported order type {type(order).__name__}")


def _normalize_value(path: str, type_: str, value: Any, types: Mapping[str, Any]) -> Any:
    if type_.endswith("[]"):
        if not isinstance(value, (list, tuple)):
            raise MalformedOrderFieldError(path, "expected a list")
        return [
            _normalize_value(f"{path}[{i}]", type_[:-2], item, types)
            for i, item in enumerate(value)
        ]

    if type_ in types:
        return _normalize_struct(path, type_, value, types)

    if type_ == "address":
        if not isinstance(value, str) or not is_address(value):
            raise MalformedOrderFieldError(path, f"invalid address {value!r}")
        return to_checksum_address(value)

    if type_.startswith("uint"):
        bits = int(type_[4:] or 256)
        if isinstance(value, bool):
            raise MalformedOrderFieldError(path, "expected an integer")
        if isinstance(value, str):
            try:
                value = int(value, 0)
            except ValueError:
                raise MalformedOrderFieldError(path, f"not an integer: {value!r}")
        if not isinstance(value, int):
            raise MalformedOrderFieldError(path, "expected an integer")
        if value < 0 or value >= 2**bits:
            raise MalformedOrderFieldError(path, f"out of range for {type_}: {value}")
        return int(value)

    if type_ == "bytes":
        if isinstance(value, (bytes, bytearray)):
            return encode_hex(bytes(value))
        if isinstance(value, str):
            try:
                return encode_hex(decode_hex(value))
            except ValueError:
                raise MalformedOrderFieldError(path, f"not hex bytes: {value!r}")
        raise MalformedOrderFieldError(path, "expected bytes or hex string")

    raise MalformedOrderFieldError(path, f"unsupported type {type_}")


def _normalize_struct(path: str, type_name: str, value: Any, types: Mapping[str, Any]) -> Dict[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedOrderFieldError(path or type_name, f"expected a {type_name} struct")

    declared = [f["name"] for f in types[type_name]]
    if set(value.keys()) != set(declared):
        missing = sorted(set(declared) - set(value.keys()))
        extra = sorted(set(value.keys()) - set(declared))
        raise MalformedOrderFieldError(
            path or type_name,
            f"expected {len(declared)} fields for {type_name}, got {len(value)}"
            f" (missing={missing}, unexpected={extra})",
        )

    # Rebuild in declared order so the result does not depend on input order
    return {
        f["name"]: _normalize_value(
            f"{path}.{f['name']}" if path else f["name"], f["type"], value[f["name"]], types
        )
        for f in types[type_name]
    }


def build_signing_request(
    order: OrderInput,
    chain_id: int,
    verifying_contract: str,
) -> SigningRequest:
    """Build the EIP-712 domain, types and value for an order.

    Args:
        order: ERC721Order, ERC1155Order, or camelCase order mapping
        chain_id: Chain ID the exchange is deployed on
        verifying_contract: Exchange proxy address

    Returns:
        SigningRequest ready to hand to a typed-data signer

    Raises:
        MalformedOrderFieldError: If any order, fee or property field is invalid
    """
    primary_type, raw_message = _order_kind(order)
    types = ERC721_ORDER_TYPES if primary_type == ERC721_ORDER_PRIMARY_TYPE else ERC1155_ORDER_TYPES

    message = _normalize_struct("", primary_type, raw_message, types)
    if message["direction"] not in (TradeDirection.SELL_NFT, TradeDirection.BUY_NFT):
        raise MalformedOrderFieldError(
            "direction", f"must be 0 (sell NFT) or 1 (buy NFT), got {message['direction']}"
        )

    request = SigningRequest(
        domain=create_eip712_domain(verifying_contract, chain_id),
        types=copy.deepcopy(types),
        primary_type=primary_type,
        message=message,
    )
    logger.debug(
        f"Built {primary_type} signing request: maker={message['maker']}, "
        f"nonce={message['nonce']}, chainId={chain_id}"
    )
    return request


def order_from_message(primary_type: str, message: Mapping[str, Any]) -> NftOrder:
    """Turn a normalized order message back into an order dataclass."""
    fees = [
        Fee(recipient=f["recipient"], amount=f["amount"], fee_data=f["feeData"])
        for f in message["fees"]
    ]
    common = dict(
        direction=message["direction"],
        maker=message["maker"],
        taker=message["taker"],
        expiry=message["expiry"],
        nonce=message["nonce"],
        erc20_token=message["erc20Token"],
        erc20_token_amount=message["erc20TokenAmount"],
        fees=fees,
    )
    if primary_type == ERC721_ORDER_PRIMARY_TYPE:
        return ERC721Order(
            erc721_token=message["erc721Token"],
            erc721_token_id=message["erc721TokenId"],
            erc721_token_properties=[
                Property(p["propertyValidator"], p["propertyData"])
                for p in message["erc721TokenProperties"]
            ],
            **common,
        )
    return ERC1155Order(
        erc1155_token=message["erc1155Token"],
        erc1155_token_id=message["erc1155TokenId"],
        erc1155_token_amount=message["erc1155TokenAmount"],
        erc1155_token_properties=[
            Property(p["propertyValidator"], p["propertyData"])
            for p in message["erc1155TokenProperties"]
        ],
        **common,
    )


def _signed_order(request: SigningRequest, raw_signature: Union[bytes, str]) -> SignedNftOrder:
    signature = parse_raw_signature(raw_signature)
    return SignedNftOrder(
        order=order_from_message(request.primary_type, request.message),
        signature=signature.to_signature_struct(),
    )


def sign_order(
    private_key: str,
    order: OrderInput,
    chain_id: int,
    verifying_contract: str,
) -> SignedNftOrder:
    """Sign an order with EIP-712 using a private key.

    Use this when you have direct access to a private key.

    Args:
        private_key: Private key (hex string with or without 0x prefix)
        order: Order to sign
        chain_id: Chain ID
        verifying_contract: Exchange proxy address

    Returns:
        SignedNftOrder with canonical EIP-712 signature
    """
    request = build_signing_request(order, chain_id, verifying_contract)

    account = Account.from_key(private_key)
    signed_message = account.sign_typed_data(
        domain_data=request.domain,
        message_types=request.types,
        message_data=request.message,
    )

    return _signed_order(request, bytes(signed_message.signature))


class TypedDataSigner(Protocol):
    """Protocol for signers that can sign EIP-712 typed data."""

    async def get_address(self) -> str:
        """Get the signer's address."""
        ...

    async def sign_typed_data(self, params: Dict[str, Any]) -> str:
        """Sign EIP-712 typed data.

        Args:
            params: Dict with domain, types, primaryType, and message

        Returns:
            65-byte signature as hex string, in R,S,V or V,R,S layout
        """
        ...


async def sign_order_with_signer(
    signer: TypedDataSigner,
    order: OrderInput,
    chain_id: int,
    verifying_contract: str,
) -> SignedNftOrder:
    """Sign an order with EIP-712 using any compatible signer.

    Signer errors are propagated as-is; signing is never retried.

    Args:
        signer: Signer that implements TypedDataSigner protocol
        order: Order to sign
        chain_id: Chain ID
        verifying_contract: Exchange proxy address

    Returns:
        SignedNftOrder with canonical EIP-712 signature
    """
    request = build_signing_request(order, chain_id, verifying_contract)
    raw_signature = await signer.sign_typed_data(request.to_signer_params())
    return _signed_order(request, raw_signature)


def get_order_hash(order: OrderInput, chain_id: int, verifying_contract: str) -> str:
    """EIP-712 digest of an order, as computed by the exchange contract."""
    request = build_signing_request(order, chain_id, verifying_contract)
    signable = encode_typed_data(full_message=request.to_typed_data())
    return encode_hex(keccak(b"\x19" + signable.version + signable.header + signable.body))


def verify_order_signature(
    signed_order: SignedNftOrder,
    chain_id: int,
    verifying_contract: str,
    expected_signer: str,
) -> bool:
    """Verify an order signature locally (for EOA signatures).

    Note: contract wallets are verified on-chain and cannot be checked here.

    Args:
        signed_order: Signed order
        chain_id: Chain ID
        verifying_contract: Exchange proxy address
        expected_signer: Expected signer address

    Returns:
        True if signature is valid and from expected signer
    """
    request = build_signing_request(signed_order.order, chain_id, verifying_contract)
    sig = signed_order.signature

    try:
        packed = decode_hex(sig.r) + decode_hex(sig.s) + bytes([sig.v])
        signable_message = encode_typed_data(full_message=request.to_typed_data())
        recovered = Account.recover_message(signable_message, signature=packed)
        return recovered.lower() == expected_signer.lower()
    except Exception:
        logger.debug("Order signature recovery failed", exc_info=True)
        return False
