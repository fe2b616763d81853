"""
Gas estimation and fee suggestion helpers.
"""

from bundler_utils.gas.estimation import estimate_gas, expand_gas
from bundler_utils.gas.fees import (
    fetch_polygon_suggested_gas_fees,
    fetch_suggested_gas_fees,
    get_fee_data,
    get_suggested_gas_fees,
    gwei_to_wei,
)
from bundler_utils.gas.types import FeeData, GasEstimateResult, SuggestedGasFees

__all__ = [
    "FeeData",
    "GasEstimateResult",
    "SuggestedGasFees",
    "estimate_gas",
    "expand_gas",
    "fetch_polygon_suggested_gas_fees",
    "fetch_suggested_gas_fees",
    "get_fee_data",
    "get_suggested_gas_fees",
    "gwei_to_wei",
]
