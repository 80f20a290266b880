"""
Core modules for fetch_ask.
"""
from .url_resolver import resolve_url
from .query_composer import compose_query, serialize, with_query
from .codec import compose_body, compose_headers
from .transformers import TransformerRegistry
from .state import FIELD_KINDS, RequestState
from .cancellation import Cancellation
from .executor import Executor, decode_response

__all__ = [
    "resolve_url",
    "compose_query",
    "serialize",
    "with_query",
    "compose_body",
    "compose_headers",
    "TransformerRegistry",
    "FIELD_KINDS",
    "RequestState",
    "Cancellation",
    "Executor",
    "decode_response",
]
