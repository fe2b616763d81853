"""
Exception hierarchy for bundler-utils.
"""

from bundler_utils.errors.base import BundlerError
from bundler_utils.errors.helpers import (
    ContractScriptError,
    DeadlineExceededError,
    FeeOracleError,
    WaitTimeoutError,
)
from bundler_utils.errors.rpc import RpcError, RpcErrorCode, require_cond

__all__ = [
    "BundlerError",
    "RpcError",
    "RpcErrorCode",
    "require_cond",
    "WaitTimeoutError",
    "DeadlineExceededError",
    "FeeOracleError",
    "ContractScriptError",
]
