"""
Configuration for the third-party fee oracles.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from bundler_utils.constants import (
    FEE_FETCH_TIMEOUT_MS,
    POLYGON_GAS_STATION_URL,
    SUGGESTED_FEES_URL_TEMPLATE,
)

__all__ = ["FeeOracleConfig", "DEFAULT_FEE_ORACLE_CONFIG"]


class FeeOracleConfig(BaseModel):
    """
    Third-party gas price API settings.

    The defaults reproduce the bundler's historical behaviour: a single
    attempt per endpoint raced against a 14 second deadline, falling back
    to the node's own fee data when the oracle fails.

    Example:
        ```python
        config = FeeOracleConfig(timeout_ms=5000, retry_attempts=3)
        fee_data = await get_fee_data(provider, config)
        ```
    """

    model_config = ConfigDict(frozen=True)

    polygon_gas_station_url: str = Field(
        default=POLYGON_GAS_STATION_URL,
        description="Polygon gas station v2 endpoint",
    )
    suggested_fees_url_template: str = Field(
        default=SUGGESTED_FEES_URL_TEMPLATE,
        description="Suggested gas fees endpoint, formatted with {chain_id}",
    )
    timeout_ms: int = Field(
        default=FEE_FETCH_TIMEOUT_MS,
        ge=1,
        description="Deadline for one oracle lookup, retries included",
    )
    retry_attempts: int = Field(
        default=1,
        ge=1,
        description="Attempts per lookup on transport errors",
    )
    retry_base_delay_ms: int = Field(
        default=500,
        ge=0,
        description="Base delay for exponential backoff between attempts",
    )
    fallback_on_error: bool = Field(
        default=True,
        description="Use native provider fee data when the oracle fails",
    )

    def suggested_fees_url(self, chain_id: Union[int, str]) -> str:
        """Suggested fees endpoint for ``chain_id``."""
        return self.suggested_fees_url_template.format(chain_id=int(chain_id))


DEFAULT_FEE_ORACLE_CONFIG = FeeOracleConfig()
