"""
Base exception class for bundler-utils.

Every error raised by this package inherits from BundlerError, which
carries a machine-readable code and a details dictionary next to the
human-readable message.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union


class BundlerError(Exception):
    """
    Base exception for all bundler-utils errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code. String codes are used by the
            helper errors; JSON-RPC errors carry their numeric code.
        details: Additional error context.

    Example:
        >>> raise BundlerError(
        ...     "Gas station unreachable",
        ...     code="FEE_ORACLE_ERROR",
        ...     details={"url": "https://gasstation.polygon.technology/v2"}
        ... )
    """

    def __init__(
        self,
        message: str,
        *,
        code: Optional[Union[str, int]] = "BUNDLER_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to a dictionary for JSON serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }
