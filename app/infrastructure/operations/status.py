"""Status and error codes for request verdicts."""

from enum import Enum


class OperationStatus(Enum):
    """Outcome of an operation.

    Attributes:
        SUCCESS: The request can be served
        PERMANENT_ERROR: The request is rejected, repeating it will not help
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"


class ErrorCode(str, Enum):
    """Machine readable reason attached to a rejected Stores API request."""

    NO_SERVICE = "NO_SERVICE"
    NOT_ENOUGH_PARAMETERS = "NOT_ENOUGH_PARAMETERS"
    UNSUPPORTED_API_VERSION = "UNSUPPORTED_API_VERSION"
    INVALID_PRODUCT = "INVALID_PRODUCT"
    INVALID_STORE = "INVALID_STORE"
    INVALID_SERVICE = "INVALID_SERVICE"
    INVALID_CHANNEL = "INVALID_CHANNEL"
    INVALID_LOCALE = "INVALID_LOCALE"
    SECTION_NOT_SUPPORTED = "SECTION_NOT_SUPPORTED"
