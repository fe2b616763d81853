"""
Shared stubs for bundler-utils tests.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from bundler_utils.gas.types import FeeData


class StubProvider:
    """In-memory RpcProvider recording every call it receives."""

    def __init__(
        self,
        chain_id: int = 1337,
        gas_limit: int = 30_000_000,
        gas_estimate: int = 100_000,
        fee_data: Optional[FeeData] = None,
        handlers: Optional[Dict[str, Callable[[Sequence[Any]], Any]]] = None,
        call_result: Any = "0x",
    ):
        self.chain_id = chain_id
        self.gas_limit = gas_limit
        self.gas_estimate = gas_estimate
        self.fee_data = fee_data or FeeData(
            max_priority_fee_per_gas=1_500_000_000,
            max_fee_per_gas=30_000_000_000,
            gas_price=20_000_000_000,
        )
        self.handlers = handlers or {}
        self.call_result = call_result
        self.sent: List[Tuple[str, List[Any]]] = []
        self.estimated: List[Mapping[str, Any]] = []
        self.calls: List[Mapping[str, Any]] = []
        self.fee_data_requests = 0

    async def send(self, method: str, params: Sequence[Any]) -> Any:
        self.sent.append((method, list(params)))
        handler = self.handlers.get(method)
        if handler is None:
            return None
        return handler(params)

    async def get_block(self, block_identifier: str = "latest") -> Mapping[str, Any]:
        return {"number": 1, "gasLimit": self.gas_limit}

    async def estimate_gas(self, transaction: Mapping[str, Any]) -> int:
        self.estimated.append(transaction)
        return self.gas_estimate

    async def call(self, transaction: Mapping[str, Any]) -> str:
        self.calls.append(transaction)
        if isinstance(self.call_result, Exception):
            raise self.call_result
        return self.call_result

    async def get_fee_data(self) -> FeeData:
        self.fee_data_requests += 1
        return self.fee_data

    def methods_sent(self) -> List[str]:
        return [method for method, _ in self.sent]
