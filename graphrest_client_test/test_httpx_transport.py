#!/usr/bin/env python3
"""
Test suite for HttpxTransport.

Requests are served by httpx.MockTransport, so no network access is needed.
Covers URL and parameter encoding per verb, multipart uploads, header
requests that must not follow redirects, body decoding and the mapping of
HTTP failures to GraphTransportError. The last class runs GraphAPIClient
end to end over the transport.
"""

import pytest
import logging
import sys
from pathlib import Path
from typing import List
from urllib.parse import parse_qs

import httpx

# Add the parent directory to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphrest.client.binary.uploadable_io import UploadableIO
from graphrest.client.graph_client import GraphAPIClient
from graphrest.client.transport.httpx_transport import HttpxTransport
from graphrest.client.utils.client_utils import GraphAPIError, GraphTransportError
from graphrest.model.graph_model import HttpComponent

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

SERVER_URL = "https://graph.example.com"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays a responder."""

    def __init__(self, responder):
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.responder(request)


def make_transport(responder, **kwargs):
    handler = RecordingHandler(responder)
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpxTransport(SERVER_URL, http_client=http_client, **kwargs), handler


class TestRequestEncoding:

    def test_get_sends_query_params(self):
        transport, handler = make_transport(lambda request: httpx.Response(200, json={"id": "123"}),
                                            access_token="secret")

        result = transport.send("123", "GET", {"fields": "id,name"})

        assert result == {"id": "123"}
        request = handler.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/123"
        assert request.url.params["fields"] == "id,name"
        assert request.headers["authorization"] == "Bearer secret"
        assert request.headers["accept"] == "application/json"

    def test_no_token_no_authorization_header(self):
        transport, handler = make_transport(lambda request: httpx.Response(200, json={}))

        transport.send("me", "GET", {})

        assert "authorization" not in handler.requests[0].headers

    def test_empty_path_targets_root(self):
        transport, handler = make_transport(lambda request: httpx.Response(200, json={"a": {}}))

        transport.send("", "GET", {"ids": "a,b"})

        assert handler.requests[0].url.path == "/"
        assert handler.requests[0].url.params["ids"] == "a,b"

    def test_post_sends_form_fields(self):
        transport, handler = make_transport(lambda request: httpx.Response(200, json={"id": "1_2"}))

        transport.send("me/feed", "POST", {"message": "Hello, world"})

        request = handler.requests[0]
        assert request.method == "POST"
        assert request.headers["content-type"].startswith("application/x-www-form-urlencoded")
        assert parse_qs(request.content.decode()) == {"message": ["Hello, world"]}

    def test_post_with_upload_is_multipart(self):
        transport, handler = make_transport(lambda request: httpx.Response(200, json={"id": "9"}))
        upload = UploadableIO(b"PNGDATA", "image/png", filename="a.png")

        transport.send("me/photos", "POST", {"source": upload, "message": "pic"})

        request = handler.requests[0]
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b"PNGDATA" in request.content
        assert b'filename="a.png"' in request.content
        assert b'name="message"' in request.content

    def test_delete_sends_query_params(self):
        transport, handler = make_transport(lambda request: httpx.Response(200, content=b"true"))

        assert transport.send("123/likes", "DELETE", {"uid": "7"}) is True
        assert handler.requests[0].method == "DELETE"
        assert handler.requests[0].url.params["uid"] == "7"

    def test_api_version_prefix(self):
        transport, handler = make_transport(lambda request: httpx.Response(200, json={}), api_version="v19.0")

        transport.send("123", "GET", {})
        transport.send("v19.0/123/feed", "GET", {})

        assert [r.url.path for r in handler.requests] == ["/v19.0/123", "/v19.0/123/feed"]

    def test_cursor_with_other_api_version(self):
        transport, handler = make_transport(lambda request: httpx.Response(200, json={}), api_version="v19.0")

        transport.send("v20.0/123/feed", "GET", {})
        transport.send("v2/123/feed", "GET", {})

        assert [r.url.path for r in handler.requests] == ["/v20.0/123/feed", "/v2/123/feed"]


class TestResponseHandling:

    def test_headers_request_does_not_follow_redirect(self):
        transport, handler = make_transport(
            lambda request: httpx.Response(302, headers={"Location": "https://cdn.example.com/p.jpg"})
        )

        headers = transport.send("123/picture", "GET", {}, HttpComponent.HEADERS)

        assert headers["location"] == "https://cdn.example.com/p.jpg"
        assert len(handler.requests) == 1

    def test_body_request_follows_redirect(self):
        def responder(request):
            if request.url.path == "/old":
                return httpx.Response(301, headers={"Location": f"{SERVER_URL}/new"})
            return httpx.Response(200, json={"moved": True})

        transport, handler = make_transport(responder)

        assert transport.send("old", "GET", {}) == {"moved": True}
        assert [r.url.path for r in handler.requests] == ["/old", "/new"]

    @pytest.mark.parametrize("body", [b"", b"null", b"false", b"  "])
    def test_no_data_bodies(self, body):
        transport, _ = make_transport(lambda request: httpx.Response(200, content=body))

        assert transport.send("123/feed", "GET", {}) is None

    def test_error_body_with_200_is_returned_as_data(self):
        payload = {"error": {"type": "OAuthException", "message": "Invalid token"}}
        transport, _ = make_transport(lambda request: httpx.Response(200, json=payload))

        assert transport.send("me", "GET", {}) == payload

    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    def test_http_status_failure(self, status):
        transport, _ = make_transport(lambda request: httpx.Response(status, text="server says no"))

        with pytest.raises(GraphTransportError) as exc_info:
            transport.send("me", "GET", {})

        assert exc_info.value.status_code == status
        assert exc_info.value.response_body == "server says no"

    def test_invalid_json(self):
        transport, _ = make_transport(lambda request: httpx.Response(200, content=b"<html>"))

        with pytest.raises(GraphTransportError):
            transport.send("me", "GET", {})

    @pytest.mark.parametrize("exception_class", [httpx.ConnectError, httpx.ReadTimeout])
    def test_network_failure(self, exception_class):
        def responder(request):
            raise exception_class("network down", request=request)

        transport, _ = make_transport(responder)

        with pytest.raises(GraphTransportError) as exc_info:
            transport.send("me", "GET", {})

        assert isinstance(exc_info.value.__cause__, exception_class)
        assert exc_info.value.status_code is None

    def test_close(self):
        transport, _ = make_transport(lambda request: httpx.Response(200, json={}))

        transport.close()

        assert transport.http_client.is_closed


class TestClientOverHttp:

    def test_connections_and_next_page(self):
        def responder(request):
            if request.url.params.get("until") == "100":
                return httpx.Response(200, json={"data": [4, 5, 6], "paging": {}})
            return httpx.Response(200, json={
                "data": [1, 2, 3],
                "paging": {"next": f"{SERVER_URL}/123/feed?limit=3&until=100"}
            })

        transport, handler = make_transport(responder, access_token="tok")
        client = GraphAPIClient("tok", transport=transport)

        first = client.fetch_connections("123", "feed", {"limit": 3})
        second = first.next_page()

        assert list(first) == [1, 2, 3]
        assert list(second) == [4, 5, 6]
        assert second.next_page() is None
        assert len(handler.requests) == 2
        assert dict(handler.requests[1].url.params) == {"limit": "3", "until": "100"}
        assert handler.requests[1].url.path == "/123/feed"

    def test_api_error_in_200_body(self):
        transport, _ = make_transport(lambda request: httpx.Response(
            200, json={"error": {"type": "OAuthException", "message": "Invalid token"}}))
        client = GraphAPIClient(transport=transport)

        with pytest.raises(GraphAPIError) as exc_info:
            client.search("tea")

        assert exc_info.value.error_type == "OAuthException"

    def test_fetch_picture_over_http(self):
        transport, handler = make_transport(
            lambda request: httpx.Response(302, headers={"Location": "https://cdn.example.com/123.jpg"}))
        client = GraphAPIClient(transport=transport)

        assert client.fetch_picture("123", {"type": "large"}) == "https://cdn.example.com/123.jpg"
        assert handler.requests[0].url.path == "/123/picture"
        assert handler.requests[0].url.params["type"] == "large"
