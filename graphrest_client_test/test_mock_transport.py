#!/usr/bin/env python3
"""
Test suite for MockGraphTransport.

Covers canned and queued responses, injected errors, call recording and reset.
"""

import pytest
import sys
from pathlib import Path

# Add the parent directory to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphrest.client.utils.client_utils import GraphTransportError
from graphrest.mock.mock_graph_transport import MockGraphTransport, RecordedCall
from graphrest.model.graph_model import HttpComponent


class TestMockGraphTransport:

    def test_canned_response_answers_every_call(self):
        transport = MockGraphTransport({("get", "/me/"): {"id": "1"}})

        assert transport.send("me", "GET", {}) == {"id": "1"}
        assert transport.send("me", "GET", {}) == {"id": "1"}
        assert transport.call_count == 2

    def test_queued_responses_come_first_in_order(self):
        transport = MockGraphTransport()
        transport.add_response("GET", "me/feed", {"data": []})
        transport.queue_response("GET", "me/feed", {"data": [1]})
        transport.queue_response("GET", "me/feed", None)

        results = [transport.send("me/feed", "GET", {}) for _ in range(3)]

        assert results == [{"data": [1]}, None, {"data": []}]

    def test_injected_error_is_raised(self):
        transport = MockGraphTransport()
        failure = GraphTransportError("timed out")
        transport.add_error("POST", "me/feed", failure)

        with pytest.raises(GraphTransportError) as exc_info:
            transport.send("me/feed", "POST", {"message": "hi"})

        assert exc_info.value is failure

    def test_unknown_route(self):
        transport = MockGraphTransport()

        with pytest.raises(GraphTransportError) as exc_info:
            transport.send("nowhere", "GET", {})

        assert exc_info.value.status_code == 404

    def test_calls_are_recorded_and_reset(self):
        transport = MockGraphTransport({("GET", "1/picture"): {"Location": "x"}})
        params = {"type": "large"}

        transport.send("1/picture", "GET", params, HttpComponent.HEADERS)
        params["type"] = "small"

        assert transport.calls == [RecordedCall("1/picture", "GET", {"type": "large"}, HttpComponent.HEADERS)]
        transport.reset()
        assert transport.call_count == 0

    def test_close_and_context_manager(self):
        with MockGraphTransport() as transport:
            assert transport.closed is False

        assert transport.closed is True
