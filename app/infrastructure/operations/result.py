"""Verdict returned by the request validation pipeline.

A verdict is either a success carrying the validated query, or a permanent
error carrying the single reason shown to API clients and an ErrorCode.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import ErrorCode, OperationStatus


@dataclass(frozen=True)
class OperationResult:
    """Immutable outcome of an operation.

    Attributes:
        status: OperationStatus -- SUCCESS or PERMANENT_ERROR
        message: str -- reason returned to API clients when rejected
        data: Optional[Any] -- validated payload on success
        error_code: Optional[ErrorCode] -- why the request was rejected
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[ErrorCode] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def reason(self) -> str:
        """Client facing reason, empty for successful operations."""
        return "" if self.is_success else self.message

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[ErrorCode] = None
    ) -> "OperationResult":
        """Create a rejection for a request that will never succeed as is.

        Args:
            message: Reason returned to the API client
            error_code: Machine readable reason

        Returns:
            OperationResult with PERMANENT_ERROR status
        """
        return cls(
            status=OperationStatus.PERMANENT_ERROR,
            message=message,
            error_code=error_code,
        )
