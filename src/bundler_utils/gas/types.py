"""
Gas and fee value types.

All amounts are plain Python ints (wei or gas units).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GasEstimateResult:
    """Raw gas estimate and the padded limit to submit."""

    expanded_gas: int
    """Gas limit to use, padded by the estimation heuristic."""

    gas: int
    """Raw estimate returned by the node."""


@dataclass(frozen=True)
class FeeData:
    """
    EIP-1559 fee suggestion plus the legacy gas price.

    Any field may be None when the source does not provide it (for
    example a pre-London chain has no max fee).
    """

    max_priority_fee_per_gas: Optional[int] = None
    max_fee_per_gas: Optional[int] = None
    gas_price: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Fields keyed by their JSON-RPC names."""
        return {
            "maxPriorityFeePerGas": self.max_priority_fee_per_gas,
            "maxFeePerGas": self.max_fee_per_gas,
            "gasPrice": self.gas_price,
        }


@dataclass(frozen=True)
class SuggestedGasFees:
    """EIP-1559 fees suggested by a third-party gas API, in wei."""

    max_priority_fee_per_gas: int
    max_fee_per_gas: int
