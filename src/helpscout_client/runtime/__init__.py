"""Runtime helpers for the Help Scout Python SDK"""

from .errors import (
    ErrorCode,
    HelpScoutError,
    InvalidArgumentError,
    TransportError,
    NotFoundError,
    AuthenticationError,
    error_from_response,
)

__all__ = [
    "ErrorCode",
    "HelpScoutError",
    "InvalidArgumentError",
    "TransportError",
    "NotFoundError",
    "AuthenticationError",
    "error_from_response",
]
