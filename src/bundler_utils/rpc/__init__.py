"""
JSON-RPC node helpers.
"""

from bundler_utils.rpc.capabilities import (
    ClientVersionCache,
    extract_rpc_error_code,
    is_geth,
    supports_rpc_method,
)

__all__ = [
    "ClientVersionCache",
    "extract_rpc_error_code",
    "is_geth",
    "supports_rpc_method",
]
