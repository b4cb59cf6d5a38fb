"""
seaport_approvals

Resolve and remediate the token approvals an exchange operator needs:

- ``approved_item_amount`` reads the current approval for an item.
- ``get_approval_actions`` builds unsent approval transactions for
  insufficient approvals.
"""

from .constants import MAX_INT, ItemType
from .errors import ApprovalError, SignerUnavailableError, UnsupportedItemTypeError
from .item import (
    is_currency_item, is_erc20_item, is_erc721_item, is_erc1155_item,
    is_native_currency_item,
)
from .models import (
    ApprovalAction, ContractCall, InsufficientApproval, Item,
    TransactionDetails, TransactionRequest,
)
from .signer import Signer
from .approval import approved_item_amount, build_approval_call, get_approval_actions
from .config import ApprovalConfig

__version__ = "0.1.0"

__all__ = [
    "MAX_INT", "ItemType",
    "ApprovalError", "SignerUnavailableError", "UnsupportedItemTypeError",
    "is_currency_item", "is_erc20_item", "is_erc721_item", "is_erc1155_item",
    "is_native_currency_item",
    "ApprovalAction", "ContractCall", "InsufficientApproval", "Item",
    "TransactionDetails", "TransactionRequest",
    "Signer", "approved_item_amount", "build_approval_call",
    "get_approval_actions", "ApprovalConfig",
]
