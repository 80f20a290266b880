"""
Type definitions for fetch_ask.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Literal,
    Optional,
    Protocol,
)


# HTTP methods
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


class HookKind(str, Enum):
    """Transformer pipeline stages."""
    URL = "url"
    BODY = "body"
    HEADERS = "headers"
    RESPONSE = "response"
    RESPONSE_DATA = "response_data"
    ERROR = "error"


class FieldKind(str, Enum):
    """How `set` combines an incoming value with the current one."""
    SEQUENCE = "sequence"
    """Append the incoming value (or values) to the existing list"""

    MAPPING = "mapping"
    """Shallow-merge when both sides are mappings, replace otherwise"""

    SCALAR = "scalar"
    """Replace outright"""


Transformer = Callable[[Any], Any]


class Headers(Protocol):
    """Read access to response headers."""

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        ...


class Response(Protocol):
    """Response interface expected from the network primitive."""

    ok: bool
    status: int
    status_text: str
    headers: Headers

    async def json(self) -> Any:
        ...

    async def text(self) -> str:
        ...


@dataclass(frozen=True)
class ComposedOptions:
    """Ready-to-send request produced by `Ask.compose()`."""

    url: str
    method: str
    headers: Dict[str, str]
    body: Any = None
    timeout: Optional[float] = None
    cancellation: Optional[Any] = None
    resolve_with: Optional[str] = None
    other: Dict[str, Any] = field(default_factory=dict)


class PerformFn(Protocol):
    """Network primitive: `perform(url, options) -> Response`."""

    def __call__(
        self, url: str, options: ComposedOptions
    ) -> Awaitable[Response]:
        ...
