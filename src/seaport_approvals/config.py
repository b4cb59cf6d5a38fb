"""
Connection and signer configuration.
"""

from __future__ import annotations

import os
from typing import Any, Optional

import aiohttp
from web3 import AsyncWeb3

from .signer import Signer

DEFAULT_RPC_URL = "http://127.0.0.1:8545"


class ApprovalConfig:
    """Where to read approvals from and who signs approval transactions."""

    def __init__(self, **kwargs):
        self.rpc_url: str = kwargs.get("rpc_url") or DEFAULT_RPC_URL
        self.private_key: Optional[str] = kwargs.get("private_key")
        self.from_address: Optional[str] = kwargs.get("from_address")
        self.request_timeout: float = float(kwargs.get("request_timeout", 30.0))

    @classmethod
    def from_env(cls, **overrides) -> "ApprovalConfig":
        """Build a config from ``SEAPORT_*`` variables; non-None overrides win."""
        values = {
            "rpc_url": os.environ.get("SEAPORT_RPC_URL"),
            "private_key": os.environ.get("SEAPORT_PRIVATE_KEY"),
            "from_address": os.environ.get("SEAPORT_FROM_ADDRESS"),
            "request_timeout": os.environ.get("SEAPORT_RPC_TIMEOUT", 30.0),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def connect(self) -> Any:
        return AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(
            self.rpc_url,
            request_kwargs={"timeout": aiohttp.ClientTimeout(total=self.request_timeout)},
        ))

    def build_signer(self, w3: Any) -> Signer:
        if self.private_key:
            return Signer.from_private_key(w3, self.private_key)
        return Signer(w3, address=self.from_address)
