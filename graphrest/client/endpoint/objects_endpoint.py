"""
Graph Client Objects Endpoint

Client-side implementation for fetching, writing and deleting graph objects.
"""

from typing import Dict, Any, List, Optional

from .base_endpoint import BaseEndpoint
from ..utils.client_utils import join_ids, validate_required_params


class ObjectsEndpoint(BaseEndpoint):
    """Client endpoint for object operations."""

    def fetch_object(self, object_id: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Fetch a single object from the graph.

        Args:
            object_id: Object identifier (e.g. "me" or a numeric id)
            params: Optional query parameters such as "fields"

        Returns:
            The object mapping, or None if the server returned no data

        Raises:
            GraphAPIError: If the server reports an error
        """
        validate_required_params(object_id=object_id)
        return self._graph_call(object_id, params)

    def fetch_objects(self, object_ids: List[str], params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Fetch several objects in one request.

        Args:
            object_ids: Object identifiers
            params: Optional query parameters

        Returns:
            Mapping of id to object

        Raises:
            GraphAPIError: If the server rejects any of the ids
        """
        object_ids = list(object_ids)
        validate_required_params(object_ids=object_ids or None)
        merged = dict(params or {})
        merged['ids'] = join_ids(object_ids)
        return self._graph_call("", merged)

    def write_object(self, parent_object: str, connection_name: str,
                     params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Write an object to the graph, connected to the given parent.

        For example, write_object("me", "feed", {"message": "Hello, world"})
        posts to the active user's feed. Most writes need extended permissions
        on the access token.

        Args:
            parent_object: Parent object identifier
            connection_name: Connection to write to (e.g. "feed", "photos")
            params: Fields of the new object

        Returns:
            Raw server response, usually the new object's id

        Raises:
            MissingAccessTokenError: If no access token is configured
            GraphAPIError: If the server reports an error
        """
        self._require_access_token("Write operations require an access token")
        validate_required_params(parent_object=parent_object, connection_name=connection_name)
        return self._graph_call(f"{parent_object}/{connection_name}", params, 'POST')

    def delete_object(self, object_id: str) -> Any:
        """
        Delete the object with the given id.

        Raises:
            MissingAccessTokenError: If no access token is configured
            GraphAPIError: If the server reports an error
        """
        self._require_access_token("Delete requires an access token")
        validate_required_params(object_id=object_id)
        return self._graph_call(object_id, {}, 'DELETE')
