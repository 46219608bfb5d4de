"""
Graph Client Utilities

Shared exceptions and helper functions for graph client operations.
"""

from .client_utils import (
    GraphClientError, GraphTransportError, GraphAPIError, MissingAccessTokenError,
    GraphResponseError, InvalidCursorError,
    validate_required_params, encode_params, join_ids
)

__all__ = [
    'GraphClientError',
    'GraphTransportError',
    'GraphAPIError',
    'MissingAccessTokenError',
    'GraphResponseError',
    'InvalidCursorError',
    'validate_required_params',
    'encode_params',
    'join_ids',
]
