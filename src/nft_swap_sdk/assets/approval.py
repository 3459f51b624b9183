"""Asset approval dispatch.

Maps a swappable asset to the token-standard call that lets the exchange
proxy move it:
- ERC20: ``approve(spender, amount)`` with an unlimited or zero allowance
- ERC721 / ERC1155: ``setApprovalForAll(operator, approved)``
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Protocol, Union

from ..errors import UnsupportedAssetTypeError
from ..utils import MAX_APPROVAL
from .types import (
    ERC20Asset,
    ERC721Asset,
    ERC1155Asset,
    SwappableAsset,
    parse_swappable_asset,
)

logger = logging.getLogger(__name__)


class ApprovalKind(str, Enum):
    SET_ALLOWANCE = "set_allowance"
    SET_OPERATOR_APPROVAL = "set_operator_approval"


@dataclass(frozen=True)
class ApprovalOperation:
    """A single approval call, not yet sent."""

    kind: ApprovalKind
    """Which token-standard operation to call."""

    token_standard: str
    """ERC20, ERC721 or ERC1155."""

    token_address: str
    """Token contract to call."""

    operator: str
    """Spender (ERC20) or operator (ERC721/ERC1155) being approved."""

    amount: Optional[int] = None
    """Allowance to set, for SET_ALLOWANCE only."""

    approved: bool = True
    """Whether the approval is granted or revoked."""


def dispatch(
    asset: Union[SwappableAsset, Mapping[str, Any]],
    operator: str,
    approve: bool = True,
) -> ApprovalOperation:
    """Select the approval operation for an asset.

    Args:
        asset: Asset dataclass or its serialized mapping
        operator: Exchange proxy address that needs the approval
        approve: Set to False to revoke the approval instead

    Returns:
        ApprovalOperation describing the call to make

    Raises:
        UnsupportedAssetTypeError: If the asset type is not ERC20, ERC721 or ERC1155
    """
    if isinstance(asset, Mapping):
        asset = parse_swappable_asset(asset)

    if isinstance(asset, ERC20Asset):
        return ApprovalOperation(
            kind=ApprovalKind.SET_ALLOWANCE,
            token_standard=asset.type,
            token_address=asset.token_address,
            operator=operator,
            amount=MAX_APPROVAL if approve else 0,
            approved=approve,
        )
    if isinstance(asset, (ERC721Asset, ERC1155Asset)):
        return ApprovalOperation(
            kind=ApprovalKind.SET_OPERATOR_APPROVAL,
            token_standard=asset.type,
            token_address=asset.token_address,
            operator=operator,
            approved=approve,
        )
    raise UnsupportedAssetTypeError(getattr(asset, "type", type(asset).__name__))


class TokenApprovalExecutor(Protocol):
    """Token-standard calls needed to approve assets."""

    def set_allowance(self, token: str, spender: str, amount: int) -> Any:
        """Call ERC20 ``approve``."""
        ...

    def set_operator_approval(self, token: str, operator: str, approved: bool) -> Any:
        """Call ERC721/ERC1155 ``setApprovalForAll``."""
        ...


def execute_approval(operation: ApprovalOperation, executor: TokenApprovalExecutor) -> Any:
    """Run an approval operation through an executor.

    Executor errors are propagated as-is; approvals are never retried.

    Returns:
        Whatever the executor returns (a transaction hash for Web3TokenApprovals)
    """
    logger.debug(
        f"Executing {operation.kind.value} on {operation.token_standard} "
        f"{operation.token_address} for {operation.operator}"
    )
    if operation.kind is ApprovalKind.SET_ALLOWANCE:
        return executor.set_allowance(
            operation.token_address, operation.operator, operation.amount
        )
    return executor.set_operator_approval(
        operation.token_address, operation.operator, operation.approved
    )
