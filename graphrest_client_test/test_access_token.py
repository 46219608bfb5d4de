#!/usr/bin/env python3
"""
Test suite for access token gating.

Writes, deletes and unlikes must fail with MissingAccessTokenError before
anything reaches the transport when no token is configured.
"""

import pytest
import sys
from pathlib import Path

# Add the parent directory to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphrest.client.graph_client import GraphAPIClient
from graphrest.client.utils.client_utils import GraphAPIError, MissingAccessTokenError
from graphrest.mock.mock_graph_transport import MockGraphTransport


GATED_OPERATIONS = {
    'write_object': (lambda c: c.write_object("me", "feed", {"message": "hi"}),
                     "Write operations require an access token"),
    'write_connections': (lambda c: c.write_connections("123", "likes"),
                          "Write operations require an access token"),
    'delete_object': (lambda c: c.delete_object("123"), "Delete requires an access token"),
    'delete_connections': (lambda c: c.delete_connections("123", "likes"), "Delete requires an access token"),
    'unlike': (lambda c: c.unlike("123"), "Unliking requires an access token"),
    'like': (lambda c: c.like("123"), "Write operations require an access token"),
    'post_comment': (lambda c: c.post_comment("123", "nice"), "Write operations require an access token"),
    'post_wall_message': (lambda c: c.post_wall_message("hello"), "Write operations require an access token"),
    'upload_picture': (lambda c: c.upload_picture("me", b"data", "image/jpeg"),
                       "Write operations require an access token"),
}


@pytest.fixture
def transport():
    transport = MockGraphTransport()
    # every route answers, so only the token check can stop a request
    for verb, path in [("POST", "me/feed"), ("POST", "123/likes"), ("DELETE", "123"),
                       ("DELETE", "123/likes"), ("POST", "123/comments"), ("POST", "me/photos")]:
        transport.add_response(verb, path, True)
    return transport


@pytest.fixture
def anonymous_client(transport):
    return GraphAPIClient(transport=transport)


class TestMissingAccessToken:

    @pytest.mark.parametrize("operation", sorted(GATED_OPERATIONS))
    def test_gated_operation_sends_nothing(self, anonymous_client, transport, operation):
        call, expected_message = GATED_OPERATIONS[operation]

        with pytest.raises(MissingAccessTokenError) as exc_info:
            call(anonymous_client)

        assert exc_info.value.message == expected_message
        assert exc_info.value.error_type == "MissingAccessToken"
        assert transport.call_count == 0

    def test_missing_token_is_an_api_error(self, anonymous_client):
        with pytest.raises(GraphAPIError):
            anonymous_client.delete_object("123")

    def test_reads_do_not_need_a_token(self, anonymous_client, transport):
        transport.add_response("GET", "123", {"id": "123"})

        assert anonymous_client.fetch_object("123") == {"id": "123"}
        assert transport.call_count == 1

    @pytest.mark.parametrize("operation", sorted(GATED_OPERATIONS))
    def test_gated_operation_with_token(self, transport, operation):
        client = GraphAPIClient("token", transport=transport)
        call, _ = GATED_OPERATIONS[operation]

        assert call(client) is True
        assert transport.call_count == 1
