"""
Help Scout Error Model

This module provides the error handling framework for the Help Scout Python SDK.
Two kinds of failure reach callers: argument validation errors, raised before any
request is sent, and transport errors, raised when the API answers with a
non-success status or a body that cannot be understood.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum

import requests


class ErrorCode(IntEnum):
    """Help Scout SDK error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INVALID_ARGUMENT = 2

    # Transport errors (100-199)
    HTTP_ERROR = 100
    CONNECTION_FAILED = 101
    TIMEOUT = 102
    NOT_FOUND = 103
    UNAUTHORIZED = 104

    # Decoding errors (200-299)
    INVALID_JSON = 200
    UNEXPECTED_RESPONSE = 201


class HelpScoutError(Exception):
    """
    Base class for all Help Scout SDK errors.

    Callers branch on ``error.code`` rather than on the message text. The
    underlying library exception, when there is one, is chained as
    ``__cause__``.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    @property
    def kind(self) -> str:
        """Lower-case error kind, e.g. ``"invalid_argument"``."""
        return self.code.name.lower()

    def _context(self) -> Optional[str]:
        return None

    def __str__(self) -> str:
        context = self._context()
        text = f"[{self.code.name}] {self.message}"
        return f"{text} ({context})" if context else text

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a JSON-friendly dictionary."""
        result: Dict[str, Any] = {
            "kind": self.kind,
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class InvalidArgumentError(HelpScoutError, ValueError):
    """A caller-supplied argument failed validation; no request was sent."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.INVALID_ARGUMENT, details)


class TransportError(HelpScoutError):
    """
    HTTP-level failure.

    Raised for non-2xx responses, connection problems and response bodies
    that cannot be decoded into the expected shape.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.HTTP_ERROR,
                 status_code: Optional[int] = None, method: Optional[str] = None,
                 url: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code, details)
        self.status_code = status_code
        self.method = method
        self.url = url

    def _context(self) -> Optional[str]:
        request = " ".join(part for part in (self.method, self.url) if part)
        if self.status_code is not None:
            return f"{request} -> HTTP {self.status_code}" if request else f"HTTP {self.status_code}"
        return request or None

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result.update({
            key: value
            for key, value in (("status_code", self.status_code), ("method", self.method), ("url", self.url))
            if value is not None
        })
        return result


class NotFoundError(TransportError):
    """The requested resource does not exist (HTTP 404)."""

    def __init__(self, message: str = "Resource not found", **kwargs: Any):
        super().__init__(message, ErrorCode.NOT_FOUND, **kwargs)


class AuthenticationError(TransportError):
    """The access token was rejected (HTTP 401/403)."""

    def __init__(self, message: str = "Not authorized", **kwargs: Any):
        super().__init__(message, ErrorCode.UNAUTHORIZED, **kwargs)


def _error_details(response: requests.Response) -> Dict[str, Any]:
    """Extract the API's error document, if the body carries one."""
    try:
        body = response.json()
    except ValueError:
        text = response.text
        return {"body": text} if text else {}
    if isinstance(body, dict):
        return body
    return {"body": body}


def error_from_response(response: requests.Response) -> Optional[TransportError]:
    """
    Create an appropriate error from an HTTP response.

    Args:
        response: Response returned by the HTTP session

    Returns:
        Appropriate error instance or None if the response is a success
    """
    if response.ok:
        return None

    method = response.request.method if response.request is not None else None
    status = response.status_code
    details = _error_details(response)
    message = details.get("message") or f"HTTP {status}: {response.reason}"

    kwargs: Dict[str, Any] = {
        "status_code": status,
        "method": method,
        "url": response.url,
        "details": details,
    }

    if status == 404:
        return NotFoundError(message, **kwargs)
    elif status in (401, 403):
        return AuthenticationError(message, **kwargs)
    else:
        return TransportError(message, ErrorCode.HTTP_ERROR, **kwargs)


__all__ = [
    "ErrorCode",
    "HelpScoutError",
    "InvalidArgumentError",
    "TransportError",
    "NotFoundError",
    "AuthenticationError",
    "error_from_response",
]
