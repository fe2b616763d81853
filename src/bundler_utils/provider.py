"""
JSON-RPC provider abstraction.

The helpers in this package only need a handful of node calls. They are
typed against the ``RpcProvider`` protocol so that tests and callers can
plug in anything that quacks; ``Web3Provider`` is the web3.py backed
implementation.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol, Sequence, runtime_checkable

from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.types import RPCEndpoint

from bundler_utils.errors import RpcError
from bundler_utils.gas.types import FeeData

__all__ = ["RpcProvider", "Web3Provider"]


@runtime_checkable
class RpcProvider(Protocol):
    """Node operations the bundler helpers rely on."""

    chain_id: int

    async def send(self, method: str, params: Sequence[Any]) -> Any:
        """Raw JSON-RPC request. Raises RpcError on an error response."""
        ...

    async def get_block(self, block_identifier: str = "latest") -> Mapping[str, Any]:
        """Block by tag or number; must include ``gasLimit``."""
        ...

    async def estimate_gas(self, transaction: Mapping[str, Any]) -> int:
        ...

    async def call(self, transaction: Mapping[str, Any]) -> str:
        """Static call; returns the 0x hex return data."""
        ...

    async def get_fee_data(self) -> FeeData:
        ...


class Web3Provider:
    """
    RpcProvider backed by a web3.py ``AsyncWeb3`` instance.

    Note: Use `Web3Provider.create()` or `Web3Provider.from_url()` so the
    chain id gets resolved.

    Example:
        ```python
        provider = await Web3Provider.from_url("http://localhost:8545")
        if await is_geth(provider):
            ...
        ```
    """

    def __init__(self, w3: AsyncWeb3, chain_id: int) -> None:
        self._w3 = w3
        self.chain_id = chain_id

    @classmethod
    async def create(cls, w3: AsyncWeb3) -> Web3Provider:
        """Wrap ``w3``, fetching its chain id once."""
        chain_id = await w3.eth.chain_id
        return cls(w3, int(chain_id))

    @classmethod
    async def from_url(
        cls,
        url: str,
        request_kwargs: Optional[Dict[str, Any]] = None,
    ) -> Web3Provider:
        """Connect to an HTTP JSON-RPC endpoint."""
        w3 = AsyncWeb3(AsyncHTTPProvider(url, request_kwargs=request_kwargs))
        return await cls.create(w3)

    @property
    def w3(self) -> AsyncWeb3:
        """Underlying web3 instance."""
        return self._w3

    async def send(self, method: str, params: Sequence[Any]) -> Any:
        response = await self._w3.provider.make_request(RPCEndpoint(method), list(params))
        error = response.get("error")
        if error is not None:
            if isinstance(error, str):
                raise RpcError(error)
            raise RpcError(
                error.get("message", f"{method} failed"),
                error.get("code"),
                error.get("data"),
            )
        return response.get("result")

    async def get_block(self, block_identifier: str = "latest") -> Mapping[str, Any]:
        return await self._w3.eth.get_block(block_identifier)

    async def estimate_gas(self, transaction: Mapping[str, Any]) -> int:
        return int(await self._w3.eth.estimate_gas(dict(transaction)))

    async def call(self, transaction: Mapping[str, Any]) -> str:
        """
        ``eth_call`` against the latest block.

        Goes through ``send`` so a revert surfaces as RpcError with the
        revert data in ``data``. ``transaction`` must already be JSON-RPC
        formatted (hex quantities).
        """
        return await self.send("eth_call", [dict(transaction), "latest"])

    async def get_fee_data(self) -> FeeData:
        """
        Fee data the way ethers computes it.

        On EIP-1559 chains the max fee is twice the latest base fee plus
        the node's suggested priority fee.
        """
        block = await self.get_block("latest")
        gas_price = int(await self._w3.eth.gas_price)
        base_fee = block.get("baseFeePerGas")
        if base_fee is None:
            return FeeData(gas_price=gas_price)

        priority_fee = int(await self._w3.eth.max_priority_fee)
        return FeeData(
            max_priority_fee_per_gas=priority_fee,
            max_fee_per_gas=int(base_fee) * 2 + priority_fee,
            gas_price=gas_price,
        )
