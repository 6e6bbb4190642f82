"""
Help Scout SDK Facade.

The HelpScout class is the primary entry point for SDK users.

Example:
    ```python
    from helpscout_client import HelpScout

    with HelpScout(access_token="...") as client:
        workflows = client.workflows().list()
        page_two = workflows.get_page(2)
    ```
"""

from __future__ import annotations
from typing import Optional
import requests

from .api_client import ApiClient, ClientConfig, DEFAULT_BASE_URL
from .workflows.client import WorkflowsEndpoint


class HelpScout:
    """
    Main Help Scout SDK facade.

    Owns the HTTP client and hands out resource endpoints bound to it.

    Attributes:
        api: The underlying ApiClient
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        access_token: Optional[str] = None,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None
    ):
        """
        Initialize the Help Scout facade.

        Args:
            base_url: API base URL (default: https://api.helpscout.net/v2)
            access_token: Pre-obtained OAuth2 access token, sent as a bearer token
            timeout: Request timeout in seconds (default: 30)
            session: Optional shared requests.Session for connection pooling
            config: Full client configuration; overrides the other settings

        Example:
            ```python
            # Simple initialization
            client = HelpScout(access_token=token)

            # With shared session for connection pooling
            session = requests.Session()
            client = HelpScout(access_token=token, session=session)
            ```
        """
        if config is None:
            config = ClientConfig(
                base_url=base_url,
                access_token=access_token,
                timeout=timeout,
            )
        self._api = ApiClient(config, session=session)
        self._workflows = WorkflowsEndpoint(self._api)

    @property
    def api(self) -> ApiClient:
        return self._api

    def workflows(self) -> WorkflowsEndpoint:
        """Workflows endpoint."""
        return self._workflows

    def close(self) -> None:
        """Close the HTTP session if the SDK created it."""
        self._api.close()

    def __enter__(self) -> HelpScout:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"HelpScout(base_url={self._api.base_url!r})"


__all__ = ["HelpScout"]
