"""
Paged collections.

List endpoints of the Help Scout API return one page of results at a time,
as a HAL document::

    {
        "_embedded": {"workflows": [...]},
        "page": {"size": 10, "totalElements": 35, "totalPages": 4, "number": 1}
    }

``PagedCollection`` holds a single page of parsed items together with its
page metadata and the query that produced it, so later pages can be fetched
on demand. Collections never change after construction: fetching another
page returns a new collection, and every fetch goes to the server (repeated
calls for the same page are not cached or deduplicated).
"""

from __future__ import annotations
import logging
import math
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, Field, ValidationError, model_validator

from .client.requests import ApiRequest
from .runtime.errors import ErrorCode, InvalidArgumentError, TransportError

logger = logging.getLogger(__name__)

T = TypeVar("T")

PAGE_PARAM = "page"


class PageMetadata(BaseModel):
    """
    Pagination counters accompanying a list response.

    ``page_element_count`` is the number of items actually present on the
    page. When the server omits ``totalPages`` it is derived from the element
    total and the page size.
    """
    page_number: int = Field(alias="number", ge=1, description="1-based page number")
    page_size: int = Field(alias="size", ge=1, description="Maximum items per page")
    page_element_count: int = Field(default=0, ge=0, description="Items on this page")
    total_element_count: int = Field(alias="totalElements", ge=0, description="Items across all pages")
    total_page_count: Optional[int] = Field(default=None, alias="totalPages", ge=0)

    model_config = {"populate_by_name": True, "frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _derive_page_count(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("totalPages", data.get("total_page_count")) is None:
            size = data.get("size", data.get("page_size"))
            total = data.get("totalElements", data.get("total_element_count"))
            if isinstance(size, int) and size > 0 and isinstance(total, int):
                data = dict(data)
                data["totalPages"] = math.ceil(total / size)
        return data

    @model_validator(mode="after")
    def _check_element_count(self) -> "PageMetadata":
        if self.page_element_count > self.page_size:
            raise ValueError(
                f"page holds {self.page_element_count} elements, "
                f"more than the page size of {self.page_size}"
            )
        return self


def parse_page(
    body: Dict[str, Any],
    rel: str,
    parse_item: Callable[[Dict[str, Any]], T],
) -> Tuple[List[T], PageMetadata]:
    """
    Split a HAL list document into parsed items and page metadata.

    Args:
        body: Decoded response body
        rel: Name of the embedded item array (e.g. ``"workflows"``)
        parse_item: Converts one item payload into a domain object

    Returns:
        The page's items and its metadata

    Raises:
        TransportError: If the body does not have the expected shape
    """
    embedded = body.get("_embedded") or {}
    raw_items = embedded.get(rel, []) if isinstance(embedded, dict) else None
    if not isinstance(raw_items, list):
        raise TransportError(
            f"Expected '_embedded.{rel}' to be a list",
            ErrorCode.UNEXPECTED_RESPONSE,
            details={"body": body},
        )

    page = body.get("page")
    if not isinstance(page, dict):
        raise TransportError(
            "Response is missing page metadata",
            ErrorCode.UNEXPECTED_RESPONSE,
            details={"body": body},
        )

    try:
        items = [parse_item(raw) for raw in raw_items]
        metadata = PageMetadata.model_validate(
            {**page, "page_element_count": len(items)}
        )
    except ValidationError as e:
        raise TransportError(
            f"Unexpected list response: {e}",
            ErrorCode.UNEXPECTED_RESPONSE,
        ) from e
    return items, metadata


class PagedCollection(Generic[T]):
    """
    One page of a list result.

    Indexing, ``len()`` and iteration only ever see the current page. Use
    ``get_page()`` and friends to fetch other pages; each call issues exactly
    one GET request and returns a fresh collection.

    Example:
        ```python
        workflows = client.workflows().list()
        first = workflows[0]

        if workflows.total_page_count > 1:
            second_page = workflows.get_page(2)
        ```
    """

    def __init__(
        self,
        items: List[T],
        metadata: PageMetadata,
        query: ApiRequest,
        loader: Callable[[ApiRequest], "PagedCollection[T]"],
    ):
        """
        Initialize a paged collection.

        Args:
            items: Parsed items on this page
            metadata: Page metadata for this page
            query: Base list query (any ``page`` parameter is dropped)
            loader: Fetches and parses a query into a new collection
        """
        self._items: Tuple[T, ...] = tuple(items)
        self._metadata = metadata
        self._query = query.without_params(PAGE_PARAM)
        self._loader = loader

    # =========================================================================
    # Page metadata
    # =========================================================================

    @property
    def metadata(self) -> PageMetadata:
        return self._metadata

    @property
    def page_number(self) -> int:
        return self._metadata.page_number

    @property
    def page_size(self) -> int:
        return self._metadata.page_size

    @property
    def page_element_count(self) -> int:
        return self._metadata.page_element_count

    @property
    def total_element_count(self) -> int:
        return self._metadata.total_element_count

    @property
    def total_page_count(self) -> int:
        return self._metadata.total_page_count or 0

    @property
    def query(self) -> ApiRequest:
        """The list query without its page parameter."""
        return self._query

    def to_list(self) -> List[T]:
        """Return this page's items as a new list."""
        return list(self._items)

    # =========================================================================
    # Page navigation
    # =========================================================================

    def get_page(self, page_number: int) -> "PagedCollection[T]":
        """
        Fetch another page of the same query.

        Args:
            page_number: 1-based page to fetch

        Returns:
            A new collection holding the requested page

        Raises:
            InvalidArgumentError: If ``page_number`` is not a positive integer
            TransportError: If the request fails
        """
        if isinstance(page_number, bool) or not isinstance(page_number, int) or page_number < 1:
            raise InvalidArgumentError(
                f"Page number must be a positive integer, got {page_number!r}"
            )
        logger.debug(f"Fetching page {page_number} of {self._query.path}")
        return self._loader(self._query.with_params(**{PAGE_PARAM: page_number}))

    def has_next_page(self) -> bool:
        return self.page_number < self.total_page_count

    def has_previous_page(self) -> bool:
        return self.page_number > 1

    def get_next_page(self) -> "PagedCollection[T]":
        if not self.has_next_page():
            raise InvalidArgumentError(
                f"Page {self.page_number} is the last page"
            )
        return self.get_page(self.page_number + 1)

    def get_previous_page(self) -> "PagedCollection[T]":
        if not self.has_previous_page():
            raise InvalidArgumentError("Page 1 has no previous page")
        return self.get_page(self.page_number - 1)

    def get_first_page(self) -> "PagedCollection[T]":
        return self.get_page(1)

    def get_last_page(self) -> "PagedCollection[T]":
        # An empty result still has a first page
        return self.get_page(max(self.total_page_count, 1))

    # =========================================================================
    # Sequence protocol (current page only)
    # =========================================================================

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        try:
            return self._items[index]
        except IndexError:
            raise IndexError(
                f"Index {index} is out of range for page {self.page_number} "
                f"holding {len(self._items)} elements"
            ) from None

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return (
            f"PagedCollection(page={self.page_number}/{self.total_page_count}, "
            f"elements={self.page_element_count}, total={self.total_element_count})"
        )


__all__ = [
    "PAGE_PARAM",
    "PageMetadata",
    "PagedCollection",
    "parse_page",
]
