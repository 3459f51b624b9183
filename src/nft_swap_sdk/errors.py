"""Errors raised by the NFT swap SDK.

All errors are local validation failures. They are raised to the caller
as-is and never retried.
"""

from typing import Any, Optional


class NftSwapError(ValueError):
    """Base class for SDK validation errors."""


class MalformedSignatureError(NftSwapError):
    """Raw signature is not exactly 65 bytes (or not decodable)."""

    def __init__(self, length: Optional[int], message: Optional[str] = None):
        self.length = length
        super().__init__(
            message
            or f"Invalid signature length, expected 65 bytes, got {length}"
        )


class UndeterminedLayoutError(NftSwapError):
    """Neither the first nor the last byte is a valid recovery id."""

    def __init__(self, raw_signature: str):
        self.raw_signature = raw_signature
        super().__init__(
            f"Cannot determine signature layout from V value: {raw_signature}"
        )


class MalformedOrderFieldError(NftSwapError):
    """An order, fee or property field is structurally invalid."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid order field '{field}': {reason}")


class UnsupportedAssetTypeError(NftSwapError):
    """Asset tag is not one of ERC20, ERC721 or ERC1155."""

    def __init__(self, asset_type: Any):
        self.asset_type = asset_type
        super().__init__(f"Unsupported asset type: {asset_type!r}")
