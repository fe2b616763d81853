"""
Gas price suggestions from third-party APIs.

Polygon, Ethereum mainnet and Arbitrum nodes tend to under-price
priority fees, so on those chains EIP-1559 fees come from a public gas
API. Every other chain, and any chain whose API is unavailable, uses
the node's own fee data. The legacy gas price always comes from the
node.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional, Union

import httpx
from web3 import Web3

from bundler_utils.config import DEFAULT_FEE_ORACLE_CONFIG, FeeOracleConfig
from bundler_utils.constants import POLYGON_CHAIN_ID, SUGGESTED_FEES_CHAIN_IDS
from bundler_utils.errors import DeadlineExceededError, FeeOracleError
from bundler_utils.gas.types import FeeData, SuggestedGasFees
from bundler_utils.utils.deadline import with_deadline
from bundler_utils.utils.logging import get_logger
from bundler_utils.utils.retry import RetryConfig, retry_async

if TYPE_CHECKING:
    from bundler_utils.provider import RpcProvider

_logger = get_logger(__name__)


def gwei_to_wei(value: Union[str, int, float, Decimal]) -> int:
    """
    Convert a decimal Gwei amount to wei, truncating fractions of a wei.

    Example:
        >>> gwei_to_wei("30.5")
        30500000000
    """
    return int(Web3.to_wei(value, "gwei"))


async def _fetch_json(url: str, config: FeeOracleConfig) -> Any:
    retry_config = RetryConfig(
        max_attempts=config.retry_attempts,
        base_delay_ms=config.retry_base_delay_ms,
        retryable_errors=(httpx.TransportError,),
    )

    async def do_fetch() -> Any:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout_ms / 1000)
        ) as client:
            response = await client.get(url)

            if response.status_code != 200:
                raise FeeOracleError(
                    f"Gas API returned HTTP {response.status_code}",
                    url=url,
                    status_code=response.status_code,
                )

            try:
                return response.json()
            except ValueError as e:
                raise FeeOracleError("Gas API returned invalid JSON", url=url) from e

    return await with_deadline(
        lambda: retry_async(do_fetch, retry_config),
        config.timeout_ms,
        operation=f"GET {url}",
    )


async def fetch_polygon_suggested_gas_fees(
    config: Optional[FeeOracleConfig] = None,
) -> Any:
    """
    Fetch the Polygon gas station's fee tiers.

    Raises:
        DeadlineExceededError: If the lookup took longer than ``config.timeout_ms``
        FeeOracleError: On a non-200 response or a non-JSON body
        httpx.TransportError: If the request failed on every attempt
    """
    config = config or DEFAULT_FEE_ORACLE_CONFIG
    return await _fetch_json(config.polygon_gas_station_url, config)


async def fetch_suggested_gas_fees(
    chain_id: Union[int, str],
    config: Optional[FeeOracleConfig] = None,
) -> Any:
    """
    Fetch suggested fee tiers for ``chain_id`` (int or numeric string).

    Raises the same errors as ``fetch_polygon_suggested_gas_fees``.
    """
    config = config or DEFAULT_FEE_ORACLE_CONFIG
    return await _fetch_json(config.suggested_fees_url(chain_id), config)


def _parse_tier(payload: Any, tier: str, priority_key: str, max_key: str) -> SuggestedGasFees:
    try:
        entry = payload[tier]
        return SuggestedGasFees(
            max_priority_fee_per_gas=gwei_to_wei(entry[priority_key]),
            max_fee_per_gas=gwei_to_wei(entry[max_key]),
        )
    except (KeyError, TypeError, ValueError, ArithmeticError) as e:
        raise FeeOracleError(
            f"Gas API response has no usable '{tier}' tier",
            details={"tier": tier, "reason": str(e)},
        ) from e


async def get_suggested_gas_fees(
    chain_id: int,
    config: Optional[FeeOracleConfig] = None,
) -> Optional[SuggestedGasFees]:
    """
    Third-party fee suggestion for ``chain_id``.

    Returns None for chains without a gas API.
    """
    config = config or DEFAULT_FEE_ORACLE_CONFIG

    if chain_id == POLYGON_CHAIN_ID:
        fee = await fetch_polygon_suggested_gas_fees(config)
        return _parse_tier(fee, "standard", "maxPriorityFee", "maxFee")

    if chain_id in SUGGESTED_FEES_CHAIN_IDS:
        fee = await fetch_suggested_gas_fees(chain_id, config)
        return _parse_tier(
            fee, "medium", "suggestedMaxPriorityFeePerGas", "suggestedMaxFeePerGas"
        )

    return None


async def get_fee_data(
    provider: RpcProvider,
    config: Optional[FeeOracleConfig] = None,
) -> FeeData:
    """
    Fee data for the next transaction on ``provider``'s chain.

    EIP-1559 fees come from the chain's gas API when there is one and
    it answers; otherwise from ``provider.get_fee_data()``. A failing
    gas API (timeout, transport error, bad status, malformed body) is
    logged and treated like a chain without one, unless
    ``config.fallback_on_error`` is off.

    Args:
        provider: Node on the target chain
        config: Gas API settings (defaults to DEFAULT_FEE_ORACLE_CONFIG)

    Returns:
        FeeData with the gas price always taken from the node
    """
    config = config or DEFAULT_FEE_ORACLE_CONFIG
    chain_id = int(provider.chain_id)

    suggested: Optional[SuggestedGasFees] = None
    try:
        suggested = await get_suggested_gas_fees(chain_id, config)
    except (FeeOracleError, DeadlineExceededError, httpx.HTTPError) as e:
        if not config.fallback_on_error:
            raise
        _logger.warning(
            "Gas API lookup failed, using provider fee data",
            extra={"chain_id": chain_id, "error": str(e)},
        )

    native = await provider.get_fee_data()

    if suggested is None:
        _logger.debug("Using provider fee data", extra={"chain_id": chain_id})
        return native

    _logger.debug("Using gas API fee data", extra={"chain_id": chain_id})
    return FeeData(
        max_priority_fee_per_gas=suggested.max_priority_fee_per_gas,
        max_fee_per_gas=suggested.max_fee_per_gas,
        gas_price=native.gas_price,
    )
