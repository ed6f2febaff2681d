"""Request verdicts: OperationResult, OperationStatus and ErrorCode."""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import ErrorCode, OperationStatus

__all__ = [
    "ErrorCode",
    "OperationResult",
    "OperationStatus",
]
