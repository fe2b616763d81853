"""
bundler-utils - helpers for an ERC-4337 bundler talking to Ethereum nodes.

Quick Start:
    >>> import asyncio
    >>> from bundler_utils import Web3Provider, estimate_gas, get_fee_data
    >>>
    >>> async def main():
    ...     provider = await Web3Provider.from_url("http://localhost:8545")
    ...     fees = await get_fee_data(provider)
    ...     gas = await estimate_gas(provider, {"to": "0x...", "data": "0x"})
    ...     print(fees, gas.expanded_gas)
    ...
    >>> asyncio.run(main())

Modules:
- `provider`: RpcProvider protocol and the web3.py adapter
- `rpc`: node capability probes
- `gas`: gas limit padding and third-party fee suggestions
- `storage`: storage map merging for simulation results
- `modules`: address extraction and contract script helpers
- `errors`: exception hierarchy
- `utils`: logging, retry, deadline and polling helpers
"""

from bundler_utils.version import __version__, __version_info__

from bundler_utils.config import DEFAULT_FEE_ORACLE_CONFIG, FeeOracleConfig
from bundler_utils.errors import (
    BundlerError,
    ContractScriptError,
    DeadlineExceededError,
    FeeOracleError,
    RpcError,
    RpcErrorCode,
    WaitTimeoutError,
    require_cond,
)
from bundler_utils.gas import (
    FeeData,
    GasEstimateResult,
    SuggestedGasFees,
    estimate_gas,
    expand_gas,
    fetch_polygon_suggested_gas_fees,
    fetch_suggested_gas_fees,
    get_fee_data,
    get_suggested_gas_fees,
    gwei_to_wei,
)
from bundler_utils.modules import get_addr, run_contract_script, to_bytes32
from bundler_utils.provider import RpcProvider, Web3Provider
from bundler_utils.rpc import ClientVersionCache, is_geth, supports_rpc_method
from bundler_utils.storage import SlotMap, StorageMap, merge_storage_map
from bundler_utils.utils import map_of, sleep, to_str, wait_for, with_deadline

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    # Config
    "FeeOracleConfig",
    "DEFAULT_FEE_ORACLE_CONFIG",
    # Provider
    "RpcProvider",
    "Web3Provider",
    # RPC
    "ClientVersionCache",
    "is_geth",
    "supports_rpc_method",
    # Gas
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
    # Storage
    "SlotMap",
    "StorageMap",
    "merge_storage_map",
    # Modules
    "get_addr",
    "run_contract_script",
    "to_bytes32",
    # Utilities
    "map_of",
    "sleep",
    "to_str",
    "wait_for",
    "with_deadline",
    # Errors
    "BundlerError",
    "RpcError",
    "RpcErrorCode",
    "require_cond",
    "WaitTimeoutError",
    "DeadlineExceededError",
    "FeeOracleError",
    "ContractScriptError",
]
