"""Swappable asset types.

An asset is exactly one of ERC20, ERC721 or ERC1155 (single token ID).
The ``type`` tag is fixed by the class and cannot be passed in.
"""

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Union

from ..errors import NftSwapError, UnsupportedAssetTypeError


@dataclass(frozen=True)
class ERC20Asset:
    """Fungible token amount."""

    token_address: str
    amount: int
    type: Literal["ERC20"] = field(default="ERC20", init=False)


@dataclass(frozen=True)
class ERC721Asset:
    """Single non-fungible token."""

    token_address: str
    token_id: int
    type: Literal["ERC721"] = field(default="ERC721", init=False)


@dataclass(frozen=True)
class ERC1155Asset:
    """Amount of a single ERC1155 token ID."""

    token_address: str
    token_id: int
    amount: int = 1
    type: Literal["ERC1155"] = field(default="ERC1155", init=False)


SwappableAsset = Union[ERC20Asset, ERC721Asset, ERC1155Asset]

ASSET_TYPES = ("ERC20", "ERC721", "ERC1155")


def _field(data: Mapping[str, Any], name: str) -> Any:
    if name not in data:
        raise NftSwapError(f"Invalid asset: missing field '{name}'")
    return data[name]


def _int_field(data: Mapping[str, Any], name: str, default: Any = None) -> int:
    value = data.get(name, default) if default is not None else _field(data, name)
    if isinstance(value, bool):
        raise NftSwapError(f"Invalid asset field '{name}': expected an integer")
    if isinstance(value, str):
        try:
            value = int(value, 0)
        except ValueError:
            raise NftSwapError(f"Invalid asset field '{name}': not an integer: {value!r}")
    if not isinstance(value, int):
        raise NftSwapError(f"Invalid asset field '{name}': expected an integer")
    return value


def parse_swappable_asset(data: Mapping[str, Any]) -> SwappableAsset:
    """Parse the serialized form ``{"type", "tokenAddress", ...}`` of an asset.

    Numeric fields may be ints, decimal strings or 0x-hex strings. A missing
    ERC1155 ``amount`` defaults to 1.

    Raises:
        UnsupportedAssetTypeError: If ``type`` is not ERC20, ERC721 or ERC1155
        NftSwapError: If a required field is missing or not a number
    """
    asset_type = data.get("type")
    if asset_type == "ERC20":
        return ERC20Asset(
            token_address=_field(data, "tokenAddress"),
            amount=_int_field(data, "amount"),
        )
    if asset_type == "ERC721":
        return ERC721Asset(
            token_address=_field(data, "tokenAddress"),
            token_id=_int_field(data, "tokenId"),
        )
    if asset_type == "ERC1155":
        return ERC1155Asset(
            token_address=_field(data, "tokenAddress"),
            token_id=_int_field(data, "tokenId"),
            amount=_int_field(data, "amount", default=1),
        )
    raise UnsupportedAssetTypeError(asset_type)
