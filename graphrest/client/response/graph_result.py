"""
Graph Client Result Variants

Every successful transport payload is resolved once, at the dispatcher
boundary, into exactly one of these variants.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from ...model.graph_model import HttpComponent


@dataclass(frozen=True)
class ObjectResult:
    """A single object, or a mapping of id to object."""
    data: Any


@dataclass(frozen=True)
class CollectionResult:
    """A connection or search result: a data list plus paging metadata."""
    data: List[Any]
    paging: Any = field(default_factory=dict)


@dataclass(frozen=True)
class RedirectResult:
    """Response headers of a redirecting request."""
    location: Optional[str]
    headers: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class OutageResult:
    """The server answered with no data at all."""
    pass


GraphResult = Union[ObjectResult, CollectionResult, RedirectResult, OutageResult]


def _header_value(headers: Mapping[str, Any], name: str) -> Optional[Any]:
    lowered = name.lower()
    for key, value in headers.items():
        if str(key).lower() == lowered:
            return value
    return None


def classify_payload(raw: Any, http_component: HttpComponent = HttpComponent.BODY) -> GraphResult:
    """
    Resolve a raw, error-free transport payload into a result variant.

    Args:
        raw: Decoded body, header mapping, or None
        http_component: Which response component the request asked for

    Returns:
        The matching GraphResult variant
    """
    if raw is None or raw is False:
        return OutageResult()

    if http_component == HttpComponent.HEADERS:
        headers = dict(raw) if isinstance(raw, Mapping) else {}
        return RedirectResult(location=_header_value(headers, "Location"), headers=headers)

    if isinstance(raw, Mapping) and isinstance(raw.get("data"), list):
        paging = raw.get("paging") or {}
        # a malformed paging block is rejected when the collection is built
        return CollectionResult(data=list(raw["data"]), paging=dict(paging) if isinstance(paging, Mapping) else paging)

    return ObjectResult(data=raw)
