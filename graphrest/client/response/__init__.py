"""
Graph Client Responses

Result variants produced by the dispatcher and the paginated collection.
"""

from .graph_collection import GraphCollection, PageRequest, parse_page_url
from .graph_result import (
    GraphResult, ObjectResult, CollectionResult, RedirectResult, OutageResult, classify_payload
)

__all__ = [
    'GraphCollection',
    'PageRequest',
    'parse_page_url',
    'GraphResult',
    'ObjectResult',
    'CollectionResult',
    'RedirectResult',
    'OutageResult',
    'classify_payload',
]
