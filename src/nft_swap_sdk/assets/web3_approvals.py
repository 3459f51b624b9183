"""Token approvals over web3.py.

Implements ``TokenApprovalExecutor`` by sending ``approve`` and
``setApprovalForAll`` transactions signed with a local private key.
"""

import logging
from typing import Any, Optional

from eth_account import Account
from eth_utils import encode_hex, to_checksum_address
from web3 import Web3

from .abi import ERC20_ABI, OPERATOR_APPROVAL_ABI
from .approval import ApprovalKind, ApprovalOperation

logger = logging.getLogger(__name__)


class Web3TokenApprovals:
    """Send approval transactions from a private-key account.

    Transport and RPC errors raised by web3 are propagated unchanged.
    """

    def __init__(self, web3: Web3, private_key: str) -> None:
        self._web3 = web3
        self._account = Account.from_key(private_key)

    @property
    def address(self) -> str:
        return self._account.address

    def _erc20(self, token: str) -> Any:
        return self._web3.eth.contract(address=to_checksum_address(token), abi=ERC20_ABI)

    def _operator_token(self, token: str) -> Any:
        return self._web3.eth.contract(
            address=to_checksum_address(token), abi=OPERATOR_APPROVAL_ABI
        )

    def _send(self, call: Any) -> str:
        tx = call.build_transaction(
            {
                "from": self.address,
                "nonce": self._web3.eth.get_transaction_count(self.address),
            }
        )
        signed = self._account.sign_transaction(tx)
        tx_hash = self._web3.eth.send_raw_transaction(signed.raw_transaction)
        return encode_hex(tx_hash)

    def set_allowance(self, token: str, spender: str, amount: int) -> str:
        """Send ERC20 ``approve(spender, amount)``.

        Returns:
            Transaction hash
        """
        call = self._erc20(token).functions.approve(to_checksum_address(spender), amount)
        tx_hash = self._send(call)
        logger.info(f"ERC20 approve sent: token={token}, spender={spender}, tx={tx_hash}")
        return tx_hash

    def set_operator_approval(self, token: str, operator: str, approved: bool) -> str:
        """Send ``setApprovalForAll(operator, approved)``.

        Returns:
            Transaction hash
        """
        call = self._operator_token(token).functions.setApprovalForAll(
            to_checksum_address(operator), approved
        )
        tx_hash = self._send(call)
        logger.info(
            f"setApprovalForAll sent: token={token}, operator={operator}, "
            f"approved={approved}, tx={tx_hash}"
        )
        return tx_hash

    def is_approved(self, operation: ApprovalOperation, owner: Optional[str] = None) -> bool:
        """Check whether an approval operation is already in effect.

        For ERC20 the current allowance must cover ``operation.amount``. A
        revoke is in effect once the allowance is zero or the operator is no
        longer approved.

        Args:
            operation: Operation returned by ``dispatch``
            owner: Token owner (default: this account)
        """
        owner = to_checksum_address(owner or self.address)
        operator = to_checksum_address(operation.operator)

        if operation.kind is ApprovalKind.SET_ALLOWANCE:
            allowance = self._erc20(operation.token_address).functions.allowance(
                owner, operator
            ).call()
            if not operation.approved:
                return int(allowance) == 0
            return int(allowance) >= (operation.amount or 0)

        approved_for_all = bool(
            self._operator_token(operation.token_address)
            .functions.isApprovedForAll(owner, operator)
            .call()
        )
        return approved_for_all if operation.approved else not approved_for_all
