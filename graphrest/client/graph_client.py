"""Graph API Client

REST client for graph APIs made of objects and the connections between them.

Given an access token, this fetches the profile of the active user and the
first page of their friends:

    client = GraphAPIClient(access_token)
    user = client.fetch_object("me")
    friends = client.fetch_connections(user["id"], "friends")
    more_friends = friends.next_page()

Every operation funnels through graph_call(), the single place where
server-reported errors are turned into GraphAPIError.
"""

import logging
from typing import Optional, Dict, Any, List, Mapping, Union, BinaryIO
from pathlib import Path

from .config.client_config_loader import GraphClientConfig, ClientConfigurationError
from .endpoint.objects_endpoint import ObjectsEndpoint
from .endpoint.connections_endpoint import ConnectionsEndpoint
from .endpoint.pictures_endpoint import PicturesEndpoint
from .endpoint.search_endpoint import SearchEndpoint
from .endpoint.publishing_endpoint import PublishingEndpoint
from .response.graph_collection import GraphCollection, PageRequest
from .response.graph_result import GraphResult, classify_payload
from .transport.graph_transport_inf import GraphTransport
from .transport.httpx_transport import HttpxTransport, DEFAULT_USER_AGENT
from .utils.client_utils import GraphAPIError, GraphClientError, encode_params
from ..model.graph_model import GraphRequest, HttpComponent

logger = logging.getLogger(__name__)


class GraphAPIClient:
    """
    Graph API client.

    Holds an optional access token and a transport. Neither changes after
    construction, so one client can serve calls from several threads.
    """

    def __init__(self, access_token: Optional[str] = None, *,
                 config: Optional[GraphClientConfig] = None,
                 transport: Optional[GraphTransport] = None):
        """
        Initialize the graph client.

        Args:
            access_token: OAuth access token. Falls back to auth.access_token from config.
            config: Pre-configured GraphClientConfig. Loaded from defaults when omitted
                and no transport is given.
            transport: GraphTransport to send requests through. Defaults to an
                HttpxTransport built from config.

        Raises:
            GraphClientError: If configuration cannot be loaded
        """
        if config is None and transport is None:
            try:
                config = GraphClientConfig()
                config.validate_config()
            except ClientConfigurationError as e:
                logger.error(f"Failed to load client configuration: {e}")
                raise GraphClientError(f"Configuration error: {e}")

        self.config: Optional[GraphClientConfig] = config

        if access_token is None and config is not None:
            access_token = config.get_access_token()
        self._access_token: Optional[str] = access_token or None

        if transport is None:
            transport = HttpxTransport(
                config.get_server_url(),
                access_token=self._access_token,
                api_version=config.get_api_version(),
                timeout=config.get_timeout(),
                user_agent=config.get_user_agent() or DEFAULT_USER_AGENT
            )
        self.transport: GraphTransport = transport

        # Initialize endpoint handlers
        self.objects = ObjectsEndpoint(self)
        self.connections = ConnectionsEndpoint(self)
        self.pictures = PicturesEndpoint(self)
        self.searches = SearchEndpoint(self)
        self.publishing = PublishingEndpoint(self)

        logger.info(f"Graph client initialized: {self}")

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    def has_access_token(self) -> bool:
        """Check whether write and delete operations are allowed."""
        return bool(self._access_token)

    # API access

    def graph_call(self, path: str, params: Optional[Mapping[str, Any]] = None, verb: str = 'GET',
                   http_component: HttpComponent = HttpComponent.BODY) -> Any:
        """
        Send a request to the graph and return the raw payload.

        Args:
            path: Object id or "id/connection" path ("" for multi-id lookups)
            params: Request parameters; lists are comma-joined
            verb: GET, POST or DELETE
            http_component: BODY for the decoded body, HEADERS for response headers

        Returns:
            The decoded payload, a header mapping, or None when the server sent no data

        Raises:
            GraphAPIError: If the payload carries an "error" structure
            GraphTransportError: If the transport fails
        """
        request = GraphRequest(path=path, verb=verb, params=encode_params(params),
                               http_component=http_component)
        logger.debug(f"Graph {request.verb} {request.path!r} params={list(request.params)}")

        raw = self.transport.send(request.path, request.verb, request.params, request.http_component)

        if isinstance(raw, Mapping) and "error" in raw:
            details = raw["error"]
            if not isinstance(details, Mapping):
                details = {"message": str(details)}
            error = GraphAPIError(details)
            logger.error(f"Graph API error on {request.verb} {request.path!r}: {error}")
            raise error

        return raw

    def dispatch(self, path: str, params: Optional[Mapping[str, Any]] = None, verb: str = 'GET',
                 http_component: HttpComponent = HttpComponent.BODY) -> GraphResult:
        """Send a request and classify the payload into a GraphResult variant."""
        return classify_payload(self.graph_call(path, params, verb, http_component), http_component)

    # Objects

    def fetch_object(self, object_id: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Fetch the given object from the graph."""
        return self.objects.fetch_object(object_id, params)

    def fetch_objects(self, object_ids: List[str], params: Optional[Dict[str, Any]] = None) -> Any:
        """Fetch all of the given objects, returned as a mapping of id to object."""
        return self.objects.fetch_objects(object_ids, params)

    def write_object(self, parent_object: str, connection_name: str,
                     params: Optional[Dict[str, Any]] = None) -> Any:
        """Write an object to the graph, connected to the given parent."""
        return self.objects.write_object(parent_object, connection_name, params)

    def delete_object(self, object_id: str) -> Any:
        """Delete the object with the given id."""
        return self.objects.delete_object(object_id)

    # Connections

    def fetch_connections(self, object_id: str, connection_name: str,
                          params: Optional[Dict[str, Any]] = None) -> Optional[GraphCollection]:
        """Fetch the connections of an object as a GraphCollection."""
        return self.connections.fetch_connections(object_id, connection_name, params)

    def write_connections(self, object_id: str, connection_name: str,
                          params: Optional[Dict[str, Any]] = None) -> Any:
        return self.connections.write_connections(object_id, connection_name, params)

    def delete_connections(self, object_id: str, connection_name: str,
                           params: Optional[Dict[str, Any]] = None) -> Any:
        return self.connections.delete_connections(object_id, connection_name, params)

    def fetch_page(self, page_request: PageRequest) -> Optional[GraphCollection]:
        """Fetch one page of a connection or search result."""
        return self.connections.fetch_page(page_request)

    # Pictures

    def fetch_picture(self, object_id: str, params: Optional[Dict[str, Any]] = None) -> Optional[str]:
        """Get the URL of an object's picture."""
        return self.pictures.fetch_picture(object_id, params)

    def upload_picture(self, target_id: str, source: Union[str, Path, bytes, BinaryIO],
                       content_type: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Upload a photo to target_id's photos."""
        return self.pictures.upload_picture(target_id, source, content_type, params)

    # Publishing

    def post_wall_message(self, message: str, attachment: Optional[Dict[str, Any]] = None,
                          profile_id: str = "me") -> Any:
        return self.publishing.post_wall_message(message, attachment, profile_id)

    def post_comment(self, object_id: str, message: str) -> Any:
        return self.publishing.post_comment(object_id, message)

    def like(self, object_id: str) -> Any:
        return self.publishing.like(object_id)

    def unlike(self, object_id: str) -> Any:
        return self.publishing.unlike(object_id)

    # Search

    def search(self, search_terms: str, params: Optional[Dict[str, Any]] = None) -> Optional[GraphCollection]:
        """Search the graph; returns a GraphCollection of the first page."""
        return self.searches.search(search_terms, params)

    # Lifecycle

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()
        logger.info("Graph client closed")

    def get_client_info(self) -> Dict[str, Any]:
        """
        Get information about the configured client.

        Returns:
            Dictionary with server and authentication details
        """
        info: Dict[str, Any] = {
            'transport': type(self.transport).__name__,
            'authentication': {'has_access_token': self.has_access_token()}
        }
        if self.config:
            info['server_url'] = self.config.get_server_url()
            info['api_version'] = self.config.get_api_version()
            info['timeout'] = self.config.get_timeout()
        return info

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __str__(self) -> str:
        """String representation of the client."""
        server_url = self.config.get_server_url() if self.config else "unknown"
        auth = "token" if self.has_access_token() else "anonymous"
        return f"GraphAPIClient(server={server_url}, transport={type(self.transport).__name__}, auth={auth})"

    def __repr__(self) -> str:
        """Detailed string representation of the client."""
        return self.__str__()
