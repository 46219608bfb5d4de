"""
Graph Client Connections Endpoint

Client-side implementation for connection operations and paging.
"""

from typing import Dict, Any, Optional

from .base_endpoint import BaseEndpoint
from ..response.graph_collection import GraphCollection, PageRequest
from ..utils.client_utils import validate_required_params


class ConnectionsEndpoint(BaseEndpoint):
    """Client endpoint for connections between graph objects."""

    def fetch_connections(self, object_id: str, connection_name: str,
                          params: Optional[Dict[str, Any]] = None) -> Optional[GraphCollection]:
        """
        Fetch the connections of an object, e.g. fetch_connections("me", "friends").

        Args:
            object_id: Object identifier
            connection_name: Connection name
            params: Optional query parameters such as "limit"

        Returns:
            GraphCollection of the first page, or None if the server returned no data

        Raises:
            GraphAPIError: If the server reports an error
        """
        validate_required_params(object_id=object_id, connection_name=connection_name)
        path = f"{object_id}/{connection_name}"
        return self._to_collection(self._dispatch(path, params), path)

    def write_connections(self, object_id: str, connection_name: str,
                          params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Post to a connection of an object.

        Raises:
            MissingAccessTokenError: If no access token is configured
        """
        self._require_access_token("Write operations require an access token")
        validate_required_params(object_id=object_id, connection_name=connection_name)
        return self._graph_call(f"{object_id}/{connection_name}", params, 'POST')

    def delete_connections(self, object_id: str, connection_name: str,
                           params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Delete a connection of an object.

        Raises:
            MissingAccessTokenError: If no access token is configured
        """
        self._require_access_token("Delete requires an access token")
        validate_required_params(object_id=object_id, connection_name=connection_name)
        return self._graph_call(f"{object_id}/{connection_name}", params, 'DELETE')

    def fetch_page(self, page_request: PageRequest) -> Optional[GraphCollection]:
        """
        Fetch one page of a connection or search result.

        Args:
            page_request: Path and parameters decoded from a paging cursor

        Returns:
            GraphCollection for that page, or None if the server returned no data
        """
        path, params = page_request
        return self._to_collection(self._dispatch(path, params), path)
