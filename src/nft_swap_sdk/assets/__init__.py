"""Swappable assets and their approvals."""

from .types import (
    ERC20Asset,
    ERC721Asset,
    ERC1155Asset,
    SwappableAsset,
    parse_swappable_asset,
)
from .approval import (
    ApprovalKind,
    ApprovalOperation,
    TokenApprovalExecutor,
    dispatch,
    execute_approval,
)
from .web3_approvals import Web3TokenApprovals

__all__ = [
    "ERC20Asset",
    "ERC721Asset",
    "ERC1155Asset",
    "SwappableAsset",
    "parse_swappable_asset",
    "ApprovalKind",
    "ApprovalOperation",
    "TokenApprovalExecutor",
    "dispatch",
    "execute_approval",
    "Web3TokenApprovals",
]
