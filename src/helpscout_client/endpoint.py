"""
Base class for resource endpoints.

An endpoint maps semantic operations (list, run, update) onto request
descriptions and parses response bodies into domain models. The HTTP work
itself is delegated to ``ApiClient``.
"""

from __future__ import annotations
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel

from .api_client import ApiClient
from .client.requests import ApiRequest, get
from .collection import PagedCollection, parse_page

M = TypeVar("M", bound=BaseModel)


class Endpoint(Generic[M]):
    """
    Resource endpoint bound to one model type.

    Subclasses set ``path`` (collection path, e.g. ``"/workflows"``),
    ``rel`` (HAL embedded name) and ``model``.
    """

    path: str = ""
    rel: str = ""
    model: Type[M]

    def __init__(self, api: ApiClient):
        self._api = api

    @property
    def api(self) -> ApiClient:
        return self._api

    def _parse_item(self, payload: Dict[str, Any]) -> M:
        return self.model.model_validate(payload)

    def _load_collection(self, request: ApiRequest) -> PagedCollection[M]:
        body = self._api.send_json(request)
        items, metadata = parse_page(body, self.rel, self._parse_item)
        return PagedCollection(items, metadata, request, self._load_collection)

    def _list(self, params: Optional[Dict[str, Any]] = None) -> PagedCollection[M]:
        return self._load_collection(get(self.path, params))


__all__ = ["Endpoint"]
