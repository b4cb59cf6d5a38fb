"""
Approval resolution for exchange operators.

Two operations:

  - ``approved_item_amount`` reads how much an operator may currently
    move of an owner's item.  ERC-721/ERC-1155 approval is all-or-nothing
    and is reported as ``MAX_INT`` or ``0`` so callers compare a single
    numeric type.
  - ``get_approval_actions`` turns insufficient approvals into unsent
    approval actions.  Fungible tokens are approved for ``MAX_INT``; NFT
    collections get ``setApprovalForAll(operator, true)``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Sequence

from web3 import Web3

from .abi import ERC20_ABI, ERC721_ABI
from .constants import MAX_INT
from .errors import UnsupportedItemTypeError
from .item import is_erc20_item, is_erc721_item, is_erc1155_item, is_native_currency_item
from .models import (
    ApprovalAction,
    ContractCall,
    InsufficientApproval,
    Item,
    TransactionDetails,
    TransactionRequest,
)
from .signer import Signer

logger = logging.getLogger("seaport_approvals.approval")


async def approved_item_amount(owner: str, item: Item, operator: str,
                               connection: Any) -> int:
    """Return the amount of *item* that *operator* may move for *owner*.

    *connection* is an ``AsyncWeb3``-like object; reads for many items
    should share one batching connection.  Read failures propagate.
    """
    if is_erc721_item(item.item_type) or is_erc1155_item(item.item_type):
        # isApprovedForAll is identical for ERC-721 and ERC-1155
        contract = connection.eth.contract(
            address=Web3.to_checksum_address(item.token), abi=ERC721_ABI,
        )
        logger.debug("isApprovedForAll(%s, %s) on %s", owner, operator, item.token)
        approved = await contract.functions.isApprovedForAll(
            Web3.to_checksum_address(owner), Web3.to_checksum_address(operator),
        ).call()
        return MAX_INT if approved else 0

    if is_erc20_item(item.item_type):
        contract = connection.eth.contract(
            address=Web3.to_checksum_address(item.token), abi=ERC20_ABI,
        )
        logger.debug("allowance(%s, %s) on %s", owner, operator, item.token)
        return await contract.functions.allowance(
            Web3.to_checksum_address(owner), Web3.to_checksum_address(operator),
        ).call()

    if is_native_currency_item(item.item_type):
        return MAX_INT

    raise UnsupportedItemTypeError(item.item_type)


def build_approval_call(approval: InsufficientApproval) -> ContractCall:
    """Describe the call that fully approves *approval.operator*."""
    operator = Web3.to_checksum_address(approval.operator)

    if is_erc721_item(approval.item_type) or is_erc1155_item(approval.item_type):
        return ContractCall(
            address=approval.token,
            abi=ERC721_ABI,
            function_name="setApprovalForAll",
            args=(operator, True),
        )
    if is_erc20_item(approval.item_type):
        return ContractCall(
            address=approval.token,
            abi=ERC20_ABI,
            function_name="approve",
            args=(operator, MAX_INT),
        )

    raise UnsupportedItemTypeError(
        approval.item_type,
        f"No approval exists for item type {approval.item_type!r}",
    )


async def _approval_action(approval: InsufficientApproval,
                           signer: Signer) -> ApprovalAction:
    signer_address = await signer.get_address()
    call = build_approval_call(approval)

    action = ApprovalAction(
        token=approval.token,
        identifier_or_criteria=approval.identifier_or_criteria,
        item_type=approval.item_type,
        operator=approval.operator,
        transaction_request=TransactionRequest(
            send=lambda: signer.transact(call),
            details=TransactionDetails(
                to=approval.token,
                from_=signer_address,
                data=call.encode(),
            ),
            call=call,
        ),
    )
    logger.debug("Built %s approval for %s on %s",
                 call.function_name, approval.operator, approval.token)
    return action


async def get_approval_actions(insufficient_approvals: Sequence[InsufficientApproval],
                               signer: Signer) -> List[ApprovalAction]:
    """Build one unsent approval action per insufficient approval.

    Order is preserved.  If any entry fails (e.g. the signer address
    cannot be resolved) the whole call fails and no actions are returned.
    """
    actions = await asyncio.gather(
        *(_approval_action(approval, signer) for approval in insufficient_approvals)
    )
    return list(actions)
