"""
Exceptions raised by seaport_approvals.

Network and contract-call failures are not wrapped: whatever web3 raises
reaches the caller unchanged.
"""

from __future__ import annotations

from typing import Any


class ApprovalError(Exception):
    """Base class for errors raised by this package."""


class UnsupportedItemTypeError(ApprovalError, ValueError):
    """An item type outside the classes an operation knows how to handle."""

    def __init__(self, item_type: Any, message: str = ""):
        super().__init__(message or f"Unsupported item type: {item_type!r}")
        self.item_type = item_type


class SignerUnavailableError(ApprovalError):
    """The signing identity has no address to act from."""
