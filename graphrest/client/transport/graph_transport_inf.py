"""Graph Transport Interface

Abstract base class for the HTTP collaborator the graph client sends its
requests through. Implementations: HttpxTransport for real servers and
MockGraphTransport for offline use and tests.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from ...model.graph_model import HttpComponent


class GraphTransport(ABC):
    """
    Contract between the graph client and an HTTP implementation.

    send() returns the decoded body, or a header mapping when the HEADERS
    component is requested, and raises GraphTransportError when the exchange
    fails. Transports must not inspect the body for API errors; that is the
    client's job.
    """

    @abstractmethod
    def send(self, path: str, verb: str, params: Dict[str, Any],
             http_component: HttpComponent = HttpComponent.BODY) -> Any:
        """Send one request and return the raw result."""
        pass

    def close(self) -> None:
        """Release any connection resources."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
