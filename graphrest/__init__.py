"""
Graph REST client: object/connection dispatch, error normalization and
cursor-based pagination for REST-style graph APIs.
"""

from .client.graph_client import GraphAPIClient
from .client.client_factory import create_graph_client, create_mock_client
from .client.binary.uploadable_io import UploadableIO
from .client.response.graph_collection import GraphCollection, PageRequest
from .client.utils.client_utils import (
    GraphClientError, GraphTransportError, GraphAPIError, MissingAccessTokenError,
    GraphResponseError, InvalidCursorError
)
from .model.graph_model import HttpComponent

__version__ = "0.1.0"

__all__ = [
    'GraphAPIClient',
    'create_graph_client',
    'create_mock_client',
    'UploadableIO',
    'GraphCollection',
    'PageRequest',
    'GraphClientError',
    'GraphTransportError',
    'GraphAPIError',
    'MissingAccessTokenError',
    'GraphResponseError',
    'InvalidCursorError',
    'HttpComponent',
]
