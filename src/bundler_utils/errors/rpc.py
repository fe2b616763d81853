"""
JSON-RPC exceptions.

Error codes follow EIP-1474: https://eips.ethereum.org/EIPS/eip-1474
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional

from bundler_utils.errors.base import BundlerError


class RpcErrorCode(IntEnum):
    """Standard JSON-RPC and Ethereum server error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    INVALID_INPUT = -32000
    RESOURCE_NOT_FOUND = -32001
    RESOURCE_UNAVAILABLE = -32002
    TRANSACTION_REJECTED = -32003
    METHOD_NOT_SUPPORTED = -32004
    LIMIT_EXCEEDED = -32005
    EXECUTION_ERROR = 3


class RpcError(BundlerError):
    """
    Raised when a JSON-RPC request fails.

    Attributes:
        code: Numeric JSON-RPC error code, if the node returned one.
        data: Optional structured error data (revert data for eth_call).

    Example:
        >>> raise RpcError("invalid argument 0", code=RpcErrorCode.INVALID_PARAMS)
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Any = None,
    ) -> None:
        details = {"data": data} if data is not None else None
        super().__init__(message, code=code, details=details)
        self.data = data


def require_cond(
    cond: bool,
    msg: str,
    code: Optional[int] = None,
    data: Any = None,
) -> None:
    """Raise RpcError with the given code and data unless ``cond`` holds."""
    if not cond:
        raise RpcError(msg, code, data)
