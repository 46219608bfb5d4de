"""
Graph Client Search Endpoint
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint
from ..response.graph_collection import GraphCollection


class SearchEndpoint(BaseEndpoint):
    """Client endpoint for graph search."""

    def search(self, search_terms: str, params: Optional[Dict[str, Any]] = None) -> Optional[GraphCollection]:
        """
        Search posts visible to the current user, or public posts without a token.

        Args:
            search_terms: Query string sent as "q"
            params: Extra parameters such as {"type": "page"}

        Returns:
            GraphCollection of the first page, or None if the server returned no data
        """
        merged = dict(params or {})
        merged['q'] = search_terms
        return self._to_collection(self._dispatch("search", merged), "search")
