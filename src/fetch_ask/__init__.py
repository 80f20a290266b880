"""
Composable HTTP request builder for Python.

Accumulates URL fragments, query fragments, headers and a body across
chained calls, composes them into one request and races it against a
timeout and an optional cancellation signal.
"""
from .types import (
    HttpMethod,
    HookKind,
    FieldKind,
    ComposedOptions,
    PerformFn,
    Response,
)
from .errors import (
    FetchAskError,
    MissingUrlError,
    HttpStatusError,
    RequestTimeoutError,
    CancellationError,
    TransformError,
)
from .config import (
    AskConfig,
    CONTENT_TYPES,
    DEFAULT_TIMEOUT_MS,
    DefaultSerializer,
    load_config_from_env,
)
from .core.url_resolver import resolve_url
from .core.query_composer import compose_query, with_query
from .core.codec import compose_headers, compose_body
from .core.transformers import TransformerRegistry
from .core.state import RequestState
from .core.cancellation import Cancellation
from .core.executor import Executor
from .client import Ask
from .adapters.httpx_adapter import HttpxTransport, HttpxResponse
from .factory import create_ask, create_executor, request

__all__ = [
    # Types
    "HttpMethod",
    "HookKind",
    "FieldKind",
    "ComposedOptions",
    "PerformFn",
    "Response",
    # Errors
    "FetchAskError",
    "MissingUrlError",
    "HttpStatusError",
    "RequestTimeoutError",
    "CancellationError",
    "TransformError",
    # Config
    "AskConfig",
    "CONTENT_TYPES",
    "DEFAULT_TIMEOUT_MS",
    "DefaultSerializer",
    "load_config_from_env",
    # Core
    "resolve_url",
    "compose_query",
    "with_query",
    "compose_headers",
    "compose_body",
    "TransformerRegistry",
    "RequestState",
    "Cancellation",
    "Executor",
    # Builder
    "Ask",
    # Adapters
    "HttpxTransport",
    "HttpxResponse",
    # Factory
    "create_ask",
    "create_executor",
    "request",
]

__version__ = "0.1.0"
