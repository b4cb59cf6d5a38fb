"""
Signing identity for approval transactions.

A ``Signer`` pairs an ``AsyncWeb3`` connection with the account that
approval transactions are sent from.  The account is either a local key
(transactions are signed in-process and broadcast raw) or an account the
connected node manages (transactions go through ``eth_sendTransaction``).

Usage::

    w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider("http://127.0.0.1:8545"))
    signer = Signer.from_private_key(w3, "0x...")
    address = await signer.get_address()
    tx_hash = await signer.transact(call)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from eth_account import Account
from web3 import Web3

from .errors import SignerUnavailableError
from .models import ContractCall

logger = logging.getLogger("seaport_approvals.signer")


class Signer:
    """An address-bearing signing capability bound to one connection."""

    def __init__(self, w3: Any, account: Any = None,
                 address: Optional[str] = None):
        self.w3 = w3
        self.account = account
        self._address = address

    @classmethod
    def from_private_key(cls, w3: Any, private_key: str) -> "Signer":
        return cls(w3, account=Account.from_key(private_key))

    async def get_address(self) -> str:
        """Return the address transactions are sent from.

        Without a local account or an explicit address this asks the
        connected node for its first managed account.
        """
        if self.account is not None:
            return self.account.address
        if self._address:
            return Web3.to_checksum_address(self._address)

        accounts = await self.w3.eth.accounts
        if not accounts:
            raise SignerUnavailableError("Connected node exposes no accounts")
        return accounts[0]

    def contract(self, address: str, abi: List[Dict[str, Any]]) -> Any:
        return self.w3.eth.contract(
            address=Web3.to_checksum_address(address), abi=abi,
        )

    async def transact(self, call: ContractCall) -> Any:
        """Send *call* from this signer and return the transaction hash."""
        contract = self.contract(call.address, call.abi)
        function = getattr(contract.functions, call.function_name)(*call.args)
        sender = await self.get_address()

        if self.account is None:
            tx_hash = await function.transact({"from": sender})
        else:
            nonce = await self.w3.eth.get_transaction_count(sender, "pending")
            tx = await function.build_transaction({"from": sender, "nonce": nonce})
            signed = self.account.sign_transaction(tx)
            tx_hash = await self.w3.eth.send_raw_transaction(signed.raw_transaction)

        logger.debug("Sent %s on %s from %s", call.function_name, call.address, sender)
        return tx_hash
