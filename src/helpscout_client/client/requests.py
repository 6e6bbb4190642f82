"""
Request descriptions for the Help Scout client.

Resource endpoints describe what they want to send as an ``ApiRequest``;
the ``ApiClient`` turns that description into an actual HTTP call.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class ApiRequest:
    """A single HTTP request, relative to the API base URL."""
    method: str
    path: str
    params: Dict[str, Any] = field(default_factory=dict)
    body: Optional[Any] = None

    def with_params(self, **params: Any) -> "ApiRequest":
        """Return a copy with extra query parameters merged in."""
        merged = dict(self.params)
        merged.update(params)
        return replace(self, params=merged)

    def without_params(self, *names: str) -> "ApiRequest":
        """Return a copy with the given query parameters removed."""
        kept = {k: v for k, v in self.params.items() if k not in names}
        return replace(self, params=kept)


def get(path: str, params: Optional[Dict[str, Any]] = None) -> ApiRequest:
    return ApiRequest("GET", path, dict(params or {}))


def post(path: str, body: Any = None) -> ApiRequest:
    return ApiRequest("POST", path, body=body)


def patch(path: str, body: Any = None) -> ApiRequest:
    return ApiRequest("PATCH", path, body=body)


# Export classes
__all__ = [
    'ApiRequest',
    'get',
    'post',
    'patch',
]
