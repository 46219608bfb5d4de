"""
Graph Client Pictures Endpoint

Picture URL lookup and photo uploads. Photos are deleted with
delete_object(photo_id).
"""

from pathlib import Path
from typing import Dict, Any, Optional, Union, BinaryIO

from .base_endpoint import BaseEndpoint
from ..binary.uploadable_io import UploadableIO
from ..response.graph_result import OutageResult, RedirectResult
from ..utils.client_utils import GraphResponseError, validate_required_params
from ...model.graph_model import HttpComponent


class PicturesEndpoint(BaseEndpoint):
    """Client endpoint for pictures."""

    def fetch_picture(self, object_id: str, params: Optional[Dict[str, Any]] = None) -> Optional[str]:
        """
        Get the picture URL of an object.

        The server answers with a redirect; the Location header is returned
        instead of following it.

        Args:
            object_id: Object identifier
            params: Optional parameters such as {"type": "large"}

        Returns:
            The picture URL, or None if the server sent no Location
        """
        validate_required_params(object_id=object_id)
        path = f"{object_id}/picture"
        result = self._dispatch(path, params, 'GET', HttpComponent.HEADERS)
        if isinstance(result, OutageResult):
            return None
        if not isinstance(result, RedirectResult):
            raise GraphResponseError(f"Expected response headers from {path!r}")
        return result.location

    def upload_picture(self, target_id: str, source: Union[str, Path, bytes, BinaryIO],
                       content_type: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Upload a photo to an object's "photos" connection.

        Args:
            target_id: Object receiving the photo, usually "me" or an album id
            source: File path, bytes or open binary stream
            content_type: MIME type, e.g. "image/jpeg"
            params: Extra fields such as "message"

        Returns:
            Raw server response

        Raises:
            MissingAccessTokenError: If no access token is configured
        """
        merged = dict(params or {})
        merged['source'] = UploadableIO(source, content_type)
        return self.client.write_object(target_id, "photos", merged)
