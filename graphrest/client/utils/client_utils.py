"""
Graph Client Utilities

Shared exceptions and helper functions for graph client endpoints.
"""

import json
from typing import Dict, Any, Optional, Mapping

from ...model.graph_model import GraphErrorDetails
from ..binary.uploadable_io import UploadableIO


class GraphClientError(Exception):
    """Base exception for graph client errors."""
    pass


class GraphTransportError(GraphClientError):
    """Raised by a transport when the HTTP exchange itself fails."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 response_body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class GraphAPIError(GraphClientError):
    """
    A structured error reported by the graph server inside a response body.

    Attributes:
        details: The parsed error structure
        error_type: Error category reported by the server (e.g. "OAuthException")
        message: Human readable message
        code: Provider specific error code, if any
        error_subcode: Provider specific error subcode, if any
    """

    def __init__(self, details: Mapping[str, Any]):
        if isinstance(details, GraphErrorDetails):
            self.details = details
        else:
            self.details = GraphErrorDetails.model_validate({str(k): v for k, v in details.items()})
        self.error_type = self.details.type
        self.message = self.details.message
        self.code = self.details.code
        self.error_subcode = self.details.error_subcode
        super().__init__(f"{self.error_type}: {self.message}")


class MissingAccessTokenError(GraphAPIError):
    """Raised before any request is sent when an operation needs an access token."""

    ERROR_TYPE = "MissingAccessToken"

    def __init__(self, message: str):
        super().__init__({"type": self.ERROR_TYPE, "message": message})


class GraphResponseError(GraphClientError):
    """Raised when a response payload does not have the shape an operation expects."""
    pass


class InvalidCursorError(GraphClientError, ValueError):
    """Raised when a paging cursor URL cannot be decoded into a request."""
    pass


def validate_required_params(**params):
    """
    Validate that required parameters are provided.

    Args:
        **params: Parameter name-value pairs to validate

    Raises:
        GraphClientError: If any required parameter is missing or empty
    """
    for param_name, param_value in params.items():
        if param_value is None or param_value == "":
            raise GraphClientError(f"Required parameter '{param_name}' is missing or empty")


def join_ids(values) -> str:
    """Join a list of ids or values into the comma separated form the server expects."""
    return ",".join(str(value) for value in values)


def encode_param_value(value: Any) -> Any:
    """
    Encode a single request parameter value for the wire.

    Lists and tuples are comma-joined, booleans become "true"/"false",
    mappings are JSON-encoded. Upload descriptors pass through untouched.
    """
    if isinstance(value, UploadableIO):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return join_ids(value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def encode_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Encode a request parameter mapping, dropping None values.

    Args:
        params: Caller supplied parameters (may be None)

    Returns:
        New dictionary of wire-ready values
    """
    if not params:
        return {}
    return {str(k): encode_param_value(v) for k, v in params.items() if v is not None}
