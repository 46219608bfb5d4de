"""Graph HTTPX Transport

Sends graph requests over HTTP with httpx.
"""

import json
import re
import logging
from typing import Any, Dict, Optional

import httpx

from .graph_transport_inf import GraphTransport
from ..binary.uploadable_io import UploadableIO
from ..utils.client_utils import GraphTransportError
from ...model.graph_model import HttpComponent

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = 'GraphRest-Client/0.1'

VERSION_PREFIX = re.compile(r"^v\d+(\.\d+)?(/|$)")


class HttpxTransport(GraphTransport):
    """
    GraphTransport backed by a synchronous httpx.Client.

    GET and DELETE parameters go in the query string. POST parameters are sent
    as form fields, or as multipart when any value is an UploadableIO.
    """

    def __init__(self, server_url: str, *, access_token: Optional[str] = None,
                 api_version: Optional[str] = None, timeout: float = 30,
                 user_agent: str = DEFAULT_USER_AGENT,
                 http_client: Optional[httpx.Client] = None):
        """
        Initialize the transport.

        Args:
            server_url: Base URL of the graph server, e.g. https://graph.facebook.com
            access_token: Optional token sent as a Bearer Authorization header
            api_version: Optional path prefix such as "v19.0"
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
            http_client: Pre-built httpx.Client; our headers are added to it
        """
        self.server_url = server_url.rstrip('/')
        self.api_version = api_version.strip('/') if api_version else None
        base_url = f"{self.server_url}/{self.api_version}" if self.api_version else self.server_url
        self.base_url = base_url

        headers = {
            'Accept': 'application/json',
            'User-Agent': user_agent
        }
        if access_token:
            headers['Authorization'] = f'Bearer {access_token}'

        if http_client is None:
            http_client = httpx.Client(base_url=base_url, timeout=timeout, headers=headers,
                                       follow_redirects=True)
            logger.info(f"Created HTTP transport for {base_url}")
        else:
            http_client.headers.update(headers)
        self.http_client = http_client

    def _url(self, path: str) -> str:
        # cursor paths decoded from paging URLs already carry a version prefix
        if self.api_version and VERSION_PREFIX.match(path):
            return f"{self.server_url}/{path}"
        return f"{self.base_url}/{path}" if path else f"{self.base_url}/"

    def send(self, path: str, verb: str, params: Dict[str, Any],
             http_component: HttpComponent = HttpComponent.BODY) -> Any:
        url = self._url(path)
        kwargs: Dict[str, Any] = {}

        if verb == 'POST':
            files = {k: v.to_file_tuple() for k, v in params.items() if isinstance(v, UploadableIO)}
            data = {k: v for k, v in params.items() if not isinstance(v, UploadableIO)}
            kwargs['data'] = data
            if files:
                kwargs['files'] = files
        else:
            kwargs['params'] = params

        # redirects carry the value for header requests, so they are not followed
        follow_redirects = http_component != HttpComponent.HEADERS

        try:
            response = self.http_client.request(verb, url, follow_redirects=follow_redirects, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Transport failure on {verb} {url}: {type(e).__name__}: {e}")
            raise GraphTransportError(f"Request failed: {e}") from e

        if response.is_error:
            logger.error(f"HTTP {response.status_code} on {verb} {url}")
            raise GraphTransportError(
                f"HTTP {response.status_code} on {verb} {url}",
                status_code=response.status_code,
                response_body=response.text
            )

        if http_component == HttpComponent.HEADERS:
            return dict(response.headers.items())

        if not response.content.strip():
            return None

        try:
            payload = response.json()
        except json.JSONDecodeError as e:
            raise GraphTransportError(
                f"Response body is not valid JSON: {e}",
                status_code=response.status_code,
                response_body=response.text
            ) from e

        # a bare false body means the server has nothing to return
        return None if payload is False else payload

    def close(self) -> None:
        self.http_client.close()
        logger.info(f"Closed HTTP transport for {self.base_url}")

    def __str__(self) -> str:
        return f"HttpxTransport(base_url={self.base_url})"
