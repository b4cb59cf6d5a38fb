"""
Tests for Signer: address resolution and the two send paths
(node-managed account vs. local key).
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from eth_account import Account
from web3 import Web3

from seaport_approvals.abi import ERC20_ABI, ERC721_ABI
from seaport_approvals.constants import MAX_INT
from seaport_approvals.errors import SignerUnavailableError
from seaport_approvals.models import ContractCall
from seaport_approvals.signer import Signer


TOKEN = Web3.to_checksum_address("0x" + "aa" * 20)
OPERATOR = Web3.to_checksum_address("0x" + "bb" * 20)
SIGNER = Web3.to_checksum_address("0x" + "cc" * 20)
PRIVATE_KEY = "0x" + "11" * 32


async def _value(v):
    return v


class TestGetAddress:
    @pytest.mark.asyncio
    async def test_local_account(self):
        signer = Signer.from_private_key(MagicMock(), PRIVATE_KEY)
        assert await signer.get_address() == Account.from_key(PRIVATE_KEY).address

    @pytest.mark.asyncio
    async def test_explicit_address_is_checksummed(self):
        signer = Signer(MagicMock(), address=SIGNER.lower())
        assert await signer.get_address() == SIGNER

    @pytest.mark.asyncio
    async def test_node_account(self):
        w3 = MagicMock()
        w3.eth.accounts = _value([SIGNER, TOKEN])
        assert await Signer(w3).get_address() == SIGNER

    @pytest.mark.asyncio
    async def test_no_accounts(self):
        w3 = MagicMock()
        w3.eth.accounts = _value([])
        with pytest.raises(SignerUnavailableError):
            await Signer(w3).get_address()


class TestTransact:
    def test_contract_binds_checksummed_address(self):
        w3 = MagicMock()
        Signer(w3, address=SIGNER).contract(TOKEN.lower(), ERC721_ABI)
        w3.eth.contract.assert_called_once_with(address=TOKEN, abi=ERC721_ABI)

    @pytest.mark.asyncio
    async def test_node_managed_transact(self):
        w3 = MagicMock()
        functions = w3.eth.contract.return_value.functions
        functions.approve.return_value.transact = AsyncMock(return_value=b"\xaa" * 32)
        call = ContractCall(TOKEN, ERC20_ABI, "approve", (OPERATOR, MAX_INT))

        tx_hash = await Signer(w3, address=SIGNER).transact(call)

        assert tx_hash == b"\xaa" * 32
        w3.eth.contract.assert_called_once_with(address=TOKEN, abi=ERC20_ABI)
        functions.approve.assert_called_once_with(OPERATOR, MAX_INT)
        functions.approve.return_value.transact.assert_awaited_once_with({"from": SIGNER})

    @pytest.mark.asyncio
    async def test_local_key_signs_and_sends_raw(self):
        w3 = MagicMock()
        w3.eth.get_transaction_count = AsyncMock(return_value=7)
        w3.eth.send_raw_transaction = AsyncMock(return_value=b"\xbb" * 32)
        function = w3.eth.contract.return_value.functions.setApprovalForAll.return_value
        function.build_transaction = AsyncMock(return_value={"nonce": 7})
        account = MagicMock(address=SIGNER)
        account.sign_transaction.return_value.raw_transaction = b"raw"
        call = ContractCall(TOKEN, ERC721_ABI, "setApprovalForAll", (OPERATOR, True))

        tx_hash = await Signer(w3, account=account).transact(call)

        assert tx_hash == b"\xbb" * 32
        w3.eth.get_transaction_count.assert_awaited_once_with(SIGNER, "pending")
        function.build_transaction.assert_awaited_once_with({"from": SIGNER, "nonce": 7})
        account.sign_transaction.assert_called_once_with({"nonce": 7})
        w3.eth.send_raw_transaction.assert_awaited_once_with(b"raw")
