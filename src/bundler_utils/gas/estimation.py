"""
Gas limit padding heuristic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from bundler_utils.constants import (
    GAS_CEILING_DENOMINATOR,
    GAS_CEILING_NUMERATOR,
    GAS_PADDING_DENOMINATOR,
    GAS_PADDING_NUMERATOR,
)
from bundler_utils.gas.types import GasEstimateResult

if TYPE_CHECKING:
    from bundler_utils.provider import RpcProvider


def expand_gas(estimate: int, block_gas_limit: int) -> GasEstimateResult:
    """
    Pad a raw gas estimate without leaving the block's headroom.

    The ceiling is 90% of the block gas limit and the padded value is
    150% of the estimate, both rounded down to whole gas units.

    - An estimate already above the ceiling is returned as is.
    - A padded value below the ceiling is used.
    - Otherwise the limit is clamped to the ceiling.
    """
    max_gas = block_gas_limit * GAS_CEILING_NUMERATOR // GAS_CEILING_DENOMINATOR
    padded_gas = estimate * GAS_PADDING_NUMERATOR // GAS_PADDING_DENOMINATOR

    if estimate > max_gas:
        return GasEstimateResult(expanded_gas=estimate, gas=estimate)
    if padded_gas < max_gas:
        return GasEstimateResult(expanded_gas=padded_gas, gas=estimate)
    return GasEstimateResult(expanded_gas=max_gas, gas=estimate)


async def estimate_gas(
    provider: RpcProvider,
    transaction: Mapping[str, Any],
) -> GasEstimateResult:
    """
    Estimate gas for ``transaction`` and pad it for execution-path variance.

    This is a heuristic: the padded limit can still run out of gas, and
    callers have to handle that downstream.

    Args:
        provider: Node to query
        transaction: Transaction to estimate

    Returns:
        Raw estimate and the expanded limit to submit
    """
    block = await provider.get_block("latest")
    gas = int(await provider.estimate_gas(transaction))
    return expand_gas(gas, int(block["gasLimit"]))
