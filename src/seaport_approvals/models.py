"""
Records exchanged between the approval reader, the synthesizer and
their callers.

All records are frozen: they are built fresh for each call and handed
to the caller as plain values.  ``ContractCall`` is the single source
for both the encoded call data and the deferred send of an
``ApprovalAction``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from web3 import Web3

from .constants import ItemType

# Offline codec: only used to ABI-encode call data, never connected.
_CODEC = Web3()


@dataclass(frozen=True)
class Item:
    """A transferable asset descriptor."""
    item_type: ItemType
    token: str = ""
    identifier_or_criteria: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "itemType": int(self.item_type),
            "token": self.token,
            "identifierOrCriteria": str(self.identifier_or_criteria),
        }


@dataclass(frozen=True)
class InsufficientApproval:
    """A (contract, operator) pair known to need a higher approval."""
    token: str
    operator: str
    item_type: ItemType
    identifier_or_criteria: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token": self.token,
            "operator": self.operator,
            "itemType": int(self.item_type),
            "identifierOrCriteria": str(self.identifier_or_criteria),
        }


@dataclass(frozen=True)
class ContractCall:
    """An unsent call to a contract method."""
    address: str
    abi: List[Dict[str, Any]]
    function_name: str
    args: Tuple[Any, ...] = ()

    def encode(self) -> str:
        """ABI-encode the call (selector + arguments) as a 0x-hex string."""
        contract = _CODEC.eth.contract(abi=self.abi)
        return contract.encode_abi(self.function_name, args=list(self.args))


@dataclass(frozen=True)
class TransactionDetails:
    """Raw call details, enough to inspect or relay a transaction."""
    to: str
    from_: str
    data: str

    def to_dict(self) -> Dict[str, Any]:
        return {"to": self.to, "from": self.from_, "data": self.data}


@dataclass(frozen=True)
class TransactionRequest:
    """A deferred send bundled with the details it would submit.

    Nothing is broadcast until ``send()`` is called and awaited.
    """
    send: Callable[[], Awaitable[Any]]
    details: TransactionDetails
    call: Optional[ContractCall] = field(default=None, compare=False)


@dataclass(frozen=True)
class ApprovalAction:
    token: str
    identifier_or_criteria: int
    item_type: ItemType
    operator: str
    transaction_request: TransactionRequest
    type: str = "approval"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "token": self.token,
            "identifierOrCriteria": str(self.identifier_or_criteria),
            "itemType": int(self.item_type),
            "operator": self.operator,
            "transactionRequest": {
                "details": self.transaction_request.details.to_dict(),
            },
        }
