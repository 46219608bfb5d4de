"""Mock Graph Transport

In-memory implementation of GraphTransport for testing and offline work.
Responses are registered per (verb, path) and every call is recorded.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..client.transport.graph_transport_inf import GraphTransport
from ..client.utils.client_utils import GraphTransportError
from ..model.graph_model import HttpComponent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordedCall:
    """One call made through the mock transport."""
    path: str
    verb: str
    params: Dict[str, Any]
    http_component: HttpComponent


class MockGraphTransport(GraphTransport):
    """
    Mock GraphTransport with canned responses.

    A route registered with add_response() answers every matching call.
    Routes registered with queue_response() answer once each, in order, ahead
    of the canned response. Unknown routes raise GraphTransportError with
    status 404.
    """

    def __init__(self, responses: Optional[Dict[Tuple[str, str], Any]] = None):
        """
        Initialize the mock transport.

        Args:
            responses: Optional mapping of (verb, path) to raw payload
        """
        self._responses: Dict[Tuple[str, str], Any] = {}
        self._queued: Dict[Tuple[str, str], deque] = {}
        self.calls: List[RecordedCall] = []
        self.closed = False
        for (verb, path), payload in (responses or {}).items():
            self.add_response(verb, path, payload)

    @staticmethod
    def _key(verb: str, path: str) -> Tuple[str, str]:
        return verb.upper(), path.strip('/')

    def add_response(self, verb: str, path: str, payload: Any) -> None:
        """Answer every (verb, path) call with payload."""
        self._responses[self._key(verb, path)] = payload

    def queue_response(self, verb: str, path: str, payload: Any) -> None:
        """Answer the next (verb, path) call with payload, once."""
        self._queued.setdefault(self._key(verb, path), deque()).append(payload)

    def add_error(self, verb: str, path: str, error: Exception) -> None:
        """Raise error for every (verb, path) call."""
        self._responses[self._key(verb, path)] = error

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def send(self, path: str, verb: str, params: Dict[str, Any],
             http_component: HttpComponent = HttpComponent.BODY) -> Any:
        self.calls.append(RecordedCall(path, verb, dict(params), http_component))
        logger.debug(f"Mock {verb} {path!r} params={params}")

        key = self._key(verb, path)
        queue = self._queued.get(key)
        if queue:
            payload = queue.popleft()
        elif key in self._responses:
            payload = self._responses[key]
        else:
            raise GraphTransportError(f"No mock response for {verb} {path!r}", status_code=404)

        if isinstance(payload, Exception):
            raise payload
        return payload

    def close(self) -> None:
        self.closed = True

    def reset(self) -> None:
        """Forget recorded calls."""
        self.calls.clear()
