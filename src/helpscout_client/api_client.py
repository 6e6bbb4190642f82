"""
Help Scout API Client

This module provides the HTTP layer of the SDK: it executes the request
descriptions built by resource endpoints against the Help Scout Mailbox API
and maps failures onto the SDK error model.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional
from dataclasses import dataclass

import requests

from .client.requests import ApiRequest
from .runtime.errors import ErrorCode, TransportError, error_from_response

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.helpscout.net/v2"


@dataclass
class ClientConfig:
    """Configuration for the Help Scout API client."""

    base_url: str = DEFAULT_BASE_URL
    access_token: Optional[str] = None
    timeout: float = 30.0
    debug: bool = False
    verify_ssl: bool = True
    user_agent: str = "helpscout-client-python/0.1.0"

    def __post_init__(self):
        """Validate configuration parameters."""
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        self.base_url = self.base_url.rstrip('/')


class ApiClient:
    """
    Executes API requests over a ``requests.Session``.

    The client is synchronous: every call blocks until the server answers.
    It applies no retry, backoff or rate limiting; a failed call raises
    ``TransportError`` straight away.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the API client.

        Args:
            config: Client configuration (defaults to ``ClientConfig()``)
            session: Optional requests.Session for connection pooling; a
                session passed in here is never closed by the client
        """
        self.config = config or ClientConfig()
        self._session = session or requests.Session()
        self._owns_session = session is None

        # debug=True promotes this client's request traces to INFO
        self._trace_level = logging.INFO if self.config.debug else logging.DEBUG

    @property
    def base_url(self) -> str:
        """Get the API base URL."""
        return self.config.base_url

    def close(self) -> None:
        """Close the HTTP session if owned by this client."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def url_for(self, path: str) -> str:
        """Return the absolute URL for an API path."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if self.config.access_token:
            headers["Authorization"] = f"Bearer {self.config.access_token}"
        return headers

    def send(self, request: ApiRequest) -> requests.Response:
        """
        Execute a request and return the successful response.

        Args:
            request: Request description

        Returns:
            The HTTP response, guaranteed to have a 2xx status

        Raises:
            TransportError: On connection failures, timeouts and non-2xx statuses
        """
        url = self.url_for(request.path)
        logger.log(self._trace_level, f"{request.method} {url} params={request.params}")

        kwargs: Dict[str, Any] = {
            "headers": self._headers(),
            "timeout": self.config.timeout,
            "verify": self.config.verify_ssl,
        }
        if request.params:
            kwargs["params"] = request.params
        if request.body is not None:
            kwargs["json"] = request.body

        try:
            response = self._session.request(request.method, url, **kwargs)
        except requests.exceptions.Timeout as e:
            logger.warning(f"{request.method} {url} timed out")
            raise TransportError(
                f"Request timed out: {e}", ErrorCode.TIMEOUT,
                method=request.method, url=url,
            ) from e
        except requests.exceptions.RequestException as e:
            logger.warning(f"{request.method} {url} failed: {e}")
            raise TransportError(
                f"HTTP request failed: {e}", ErrorCode.CONNECTION_FAILED,
                method=request.method, url=url,
            ) from e

        error = error_from_response(response)
        if error is not None:
            logger.warning(
                f"{request.method} {url} failed - "
                f"response_code={response.status_code}"
            )
            raise error

        logger.log(self._trace_level, f"{request.method} {url} succeeded ({response.status_code})")
        return response

    def send_json(self, request: ApiRequest) -> Dict[str, Any]:
        """
        Execute a request and decode its JSON object body.

        Raises:
            TransportError: If the call fails or the body is not a JSON object
        """
        response = self.send(request)
        url = self.url_for(request.path)
        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON response: {e}", ErrorCode.INVALID_JSON,
                status_code=response.status_code, method=request.method,
                url=url,
            ) from e
        if not isinstance(data, dict):
            raise TransportError(
                f"Expected a JSON object, got {type(data).__name__}",
                ErrorCode.UNEXPECTED_RESPONSE,
                status_code=response.status_code, method=request.method, url=url,
            )
        return data


__all__ = [
    "DEFAULT_BASE_URL",
    "ClientConfig",
    "ApiClient",
]
