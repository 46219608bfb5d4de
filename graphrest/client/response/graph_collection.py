"""
Graph Client Paginated Collection

Read-only ordered view over a connection or search result that can fetch the
next or previous page from the cursor URLs the server returned with it.
"""

import logging
from collections.abc import Sequence
from typing import Any, Dict, Mapping, NamedTuple, Optional
from urllib.parse import parse_qs, urlsplit

from pydantic import ValidationError

from .graph_result import CollectionResult
from ..utils.client_utils import GraphResponseError, InvalidCursorError
from ...model.graph_model import Paging

logger = logging.getLogger(__name__)


class PageRequest(NamedTuple):
    """A decoded cursor: a path and flat parameters that can be re-sent as a GET."""
    path: str
    params: Dict[str, str]


def parse_page_url(url: str) -> PageRequest:
    """
    Decode a paging cursor URL into a repeatable request.

    Multi-valued query keys collapse into one comma-joined string, the same
    form list parameters take on the request side.

    Args:
        url: Fully-qualified cursor URL, e.g. https://graph.example.com/123/feed?limit=3

    Returns:
        PageRequest with the path (no leading slash) and flat parameters

    Raises:
        InvalidCursorError: If the URL has no host or no query string
    """
    if not isinstance(url, str) or "?" not in url:
        raise InvalidCursorError(f"Cursor URL has no query string: {url!r}")

    parts = urlsplit(url)
    if not parts.netloc:
        raise InvalidCursorError(f"Cursor URL has no host: {url!r}")

    params = {
        key: ",".join(values)
        for key, values in parse_qs(parts.query, keep_blank_values=True).items()
    }
    return PageRequest(parts.path.lstrip("/"), params)


class GraphCollection(Sequence):
    """
    Items of a connection or search result, in server order.

    Supports iteration, indexing, len() and membership like a list. The paging
    metadata and the client are kept so further pages can be fetched with
    next_page() and previous_page(). Collections are never modified after
    construction.
    """

    def __init__(self, payload: Mapping[str, Any], client):
        self._items = tuple(payload.get("data") or ())
        self._paging = self._parse_paging(payload.get("paging") or {})
        self._client = client

    @staticmethod
    def _parse_paging(paging: Any) -> Paging:
        if not isinstance(paging, Mapping):
            raise GraphResponseError(f"Paging block must be a mapping, got {type(paging).__name__}")
        try:
            return Paging.model_validate(dict(paging))
        except ValidationError as e:
            raise GraphResponseError(f"Malformed paging block: {e}") from e

    @classmethod
    def from_result(cls, result: CollectionResult, client) -> "GraphCollection":
        return cls({"data": result.data, "paging": result.paging}, client)

    @property
    def items(self) -> tuple:
        return self._items

    @property
    def paging(self) -> Paging:
        return self._paging

    @property
    def client(self):
        return self._client

    def next_page(self) -> Optional["GraphCollection"]:
        """Fetch the next page, or return None when there is none."""
        return self._resolve_page("next")

    def previous_page(self) -> Optional["GraphCollection"]:
        """Fetch the previous page, or return None when there is none."""
        return self._resolve_page("previous")

    def next_page_params(self) -> Optional[PageRequest]:
        return self._page_params("next")

    def previous_page_params(self) -> Optional[PageRequest]:
        return self._page_params("previous")

    def _page_params(self, direction: str) -> Optional[PageRequest]:
        url = self._paging.cursor_url(direction)
        if not url:
            return None
        page_request = parse_page_url(url)
        logger.debug(f"Decoded {direction} cursor into path={page_request.path!r} params={page_request.params}")
        return page_request

    def _resolve_page(self, direction: str) -> Optional["GraphCollection"]:
        page_request = self._page_params(direction)
        if page_request is None:
            return None
        return self._client.fetch_page(page_request)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, GraphCollection):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"GraphCollection(items={list(self._items)!r}, paging={self._paging.as_dict()!r})"
