"""
Exceptions raised by the timing and fee helpers.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from bundler_utils.errors.base import BundlerError


class WaitTimeoutError(BundlerError, TimeoutError):
    """
    Raised when a polled condition never produced a result.

    Example:
        >>> raise WaitTimeoutError("Timed out waiting for get_receipt")
    """

    def __init__(
        self,
        message: str,
        *,
        timeout_ms: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if timeout_ms is not None:
            details["timeout_ms"] = timeout_ms
        super().__init__(message, code="WAIT_TIMEOUT", details=details)
        self.timeout_ms = timeout_ms


class DeadlineExceededError(BundlerError, TimeoutError):
    """
    Raised when an operation did not finish before its deadline.

    The operation itself has been cancelled by the time this is raised.
    """

    def __init__(
        self,
        operation: str,
        timeout_ms: int,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        details["operation"] = operation
        details["timeout_ms"] = timeout_ms
        super().__init__(
            f"{operation} timed out after {timeout_ms}ms",
            code="DEADLINE_EXCEEDED",
            details=details,
        )
        self.operation = operation
        self.timeout_ms = timeout_ms


class FeeOracleError(BundlerError):
    """
    Raised when a third-party gas price API fails or returns garbage.

    Example:
        >>> raise FeeOracleError("HTTP 503", url="https://gasstation.polygon.technology/v2")
    """

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if url:
            details["url"] = url
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, code="FEE_ORACLE_ERROR", details=details)
        self.url = url
        self.status_code = status_code


class ContractScriptError(BundlerError):
    """Raised when a contract script's revert data cannot be decoded."""

    def __init__(self, message: str, *, data: Optional[str] = None) -> None:
        super().__init__(
            message,
            code="CONTRACT_SCRIPT_ERROR",
            details={"data": data} if data is not None else None,
        )
        self.data = data
