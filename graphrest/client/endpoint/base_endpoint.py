"""
Graph Client Base Endpoint

Base class for all graph client endpoint implementations.
"""

import logging
from typing import Any, Dict, Optional

from ..response.graph_collection import GraphCollection
from ..response.graph_result import CollectionResult, GraphResult, OutageResult
from ..utils.client_utils import GraphResponseError, MissingAccessTokenError
from ...model.graph_model import HttpComponent

logger = logging.getLogger(__name__)


class BaseEndpoint:
    """Base class for graph client endpoints."""

    def __init__(self, client):
        """
        Initialize the endpoint with a reference to the main client.

        Args:
            client: The main GraphAPIClient instance
        """
        self.client = client

    def _graph_call(self, path: str, params: Optional[Dict[str, Any]] = None, verb: str = 'GET',
                    http_component: HttpComponent = HttpComponent.BODY) -> Any:
        """Dispatch a request through the main client and return the raw payload."""
        return self.client.graph_call(path, params, verb, http_component)

    def _dispatch(self, path: str, params: Optional[Dict[str, Any]] = None, verb: str = 'GET',
                  http_component: HttpComponent = HttpComponent.BODY) -> GraphResult:
        """Dispatch a request through the main client and return the classified result."""
        return self.client.dispatch(path, params, verb, http_component)

    def _require_access_token(self, message: str) -> None:
        """
        Fail before any request is sent when no access token is configured.

        Raises:
            MissingAccessTokenError: If the client has no access token
        """
        if not self.client.has_access_token():
            logger.error(f"Refusing request without access token: {message}")
            raise MissingAccessTokenError(message)

    def _to_collection(self, result: GraphResult, path: str) -> Optional[GraphCollection]:
        """
        Wrap a classified result in a GraphCollection.

        Returns:
            GraphCollection, or None when the server returned no data

        Raises:
            GraphResponseError: If the payload is not a collection
        """
        if isinstance(result, OutageResult):
            logger.warning(f"Server returned no data for {path!r}")
            return None
        if isinstance(result, CollectionResult):
            return GraphCollection.from_result(result, self.client)
        raise GraphResponseError(f"Expected a collection with a 'data' list from {path!r}, got {type(result).__name__}")
