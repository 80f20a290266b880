"""
Composable request builder.

An `Ask` accumulates URL fragments, query fragments, headers and a body
across chained calls, composes them into one `ComposedOptions` and runs
it through an `Executor`.

Example:
    api = Ask("https://api.example.com", {"type": "json"})
    users = await api.clone().get("users").query({"page": 1}).exec()
    created = await api.clone().post("users").body({"name": "x"}).exec()
"""
import logging
from typing import Any, Mapping, Optional, Union

from .config import DEFAULT_METHOD, DEFAULT_TIMEOUT_MS
from .core.codec import compose_body, compose_headers
from .core.executor import Executor
from .core.query_composer import compose_query, with_query
from .core.state import RequestState
from .core.transformers import TRANSFORMER_OPTION_KEYS, TransformerRegistry
from .core.url_resolver import resolve_url
from .types import ComposedOptions, HookKind, Transformer

logger = logging.getLogger("fetch_ask.client")

_UNSET = object()


class Ask:
    """Chainable HTTP request builder."""

    def __init__(self, *inputs: Any, executor: Optional[Executor] = None):
        self._state = RequestState()
        self._transformers = TransformerRegistry()
        self._executor = executor
        for value in inputs:
            self._from(value)

    @classmethod
    def create(cls, *inputs: Any, executor: Optional[Executor] = None) -> "Ask":
        return cls(*inputs, executor=executor)

    @classmethod
    async def request(cls, *inputs: Any, executor: Optional[Executor] = None) -> Any:
        """Build and `exec` a request in one call."""
        return await cls(*inputs, executor=executor).exec()

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def transformers(self) -> TransformerRegistry:
        return self._transformers

    @property
    def executor(self) -> Executor:
        if self._executor is None:
            from .factory import create_executor
            self._executor = create_executor()
        return self._executor

    def _from(self, value: Any) -> None:
        if value is None:
            return
        if isinstance(value, Ask):
            self._merge(value)
        elif isinstance(value, Mapping):
            for key, item in value.items():
                self.set(key, item)
        elif isinstance(value, str):
            self._state.set("url", value)
        else:
            raise TypeError(
                f"Ask input must be a URL string, a mapping or an Ask, got {type(value).__name__}"
            )

    def _merge(self, other: "Ask") -> None:
        self._state.merge(other._state)
        self._transformers.extend(other._transformers)
        if self._executor is None:
            self._executor = other._executor

    def set(self, key: Any, value: Any = _UNSET) -> "Ask":
        """
        Update request state.

        - `set(key, value)`: combine `value` into `key` (see RequestState)
        - `set(mapping)`: apply each entry in order
        - `set(other_ask)`: merge another builder's state and transformers
        - `*_transformer` keys register a transformer for that stage
        """
        if value is _UNSET:
            self._from(key)
            return self
        if key in TRANSFORMER_OPTION_KEYS:
            self._transformers.add(TRANSFORMER_OPTION_KEYS[key], value)
            return self
        self._state.set(key, value)
        return self

    # Chainable setters

    def url(self, *fragments: Any) -> "Ask":
        for fragment in fragments:
            self._state.set("url", fragment)
        return self

    def query(self, query: Union[Mapping[str, Any], str]) -> "Ask":
        self._state.set("query", query)
        return self

    def headers(self, headers: Mapping[str, str]) -> "Ask":
        self._state.set("headers", dict(headers))
        return self

    def header(self, name: str, value: str) -> "Ask":
        self._state.set("headers", {name: value})
        return self

    def body(self, body: Any) -> "Ask":
        self._state.set("body", body)
        return self

    def type(self, type_tag: str) -> "Ask":
        self._state.set("type", type_tag)
        return self

    def method(self, method: str = "GET") -> "Ask":
        self._state.set("method", method.upper())
        return self

    def timeout(self, ms: Optional[float] = None) -> "Ask":
        self._state.set("timeout", DEFAULT_TIMEOUT_MS if ms is None else float(ms))
        return self

    def cancellation(self, cancellation: Any) -> "Ask":
        self._state.set("cancellation", cancellation)
        return self

    def resolve_with(self, name: Optional[str]) -> "Ask":
        self._state.set("resolve_with", name)
        return self

    def options(self, **other: Any) -> "Ask":
        """Passthrough options handed to the network primitive."""
        for key, value in other.items():
            self._state.set(key, value)
        return self

    def _verb(self, method: str, url: Any) -> "Ask":
        self.method(method)
        if url:
            self._state.set("url", url)
        return self

    def get(self, url: Any = None) -> "Ask":
        return self._verb("GET", url)

    def post(self, url: Any = None) -> "Ask":
        return self._verb("POST", url)

    def put(self, url: Any = None) -> "Ask":
        return self._verb("PUT", url)

    def patch(self, url: Any = None) -> "Ask":
        return self._verb("PATCH", url)

    def delete(self, url: Any = None) -> "Ask":
        return self._verb("DELETE", url)

    def head(self, url: Any = None) -> "Ask":
        return self._verb("HEAD", url)

    def options_(self, url: Any = None) -> "Ask":
        return self._verb("OPTIONS", url)

    # Transformers

    def add_transformer(self, kind: Union[HookKind, str], fn: Transformer) -> "Ask":
        self._transformers.add(kind, fn)
        return self

    def remove_transformer(self, kind: Union[HookKind, str], fn: Transformer) -> "Ask":
        self._transformers.remove(kind, fn)
        return self

    def parser(self, fn: Transformer) -> "Ask":
        """Register a transformer for the decoded response body."""
        return self.add_transformer(HookKind.RESPONSE_DATA, fn)

    # Composition and execution

    def clone(self) -> "Ask":
        """Independent copy: state, transformer lists, and the same executor."""
        clone = type(self)(executor=self._executor)
        clone._state = self._state.copy()
        clone._transformers = self._transformers.copy()
        return clone

    def _derive(self, overrides: tuple) -> "Ask":
        derived = self.clone()
        for value in overrides:
            derived._from(value)
        return derived

    def _compose(self, default_method: str) -> ComposedOptions:
        state = self._state
        url = with_query(resolve_url(state.url), compose_query(state.query))
        headers = compose_headers(state.headers, state.type)
        body = compose_body(state.body, headers)

        url = self._transformers.apply(HookKind.URL, url)
        headers = self._transformers.apply(HookKind.HEADERS, headers)
        body = self._transformers.apply(HookKind.BODY, body)

        return ComposedOptions(
            url=url,
            method=(state.method or default_method).upper(),
            headers=headers,
            body=body,
            timeout=state.timeout,
            cancellation=state.cancellation,
            resolve_with=state.resolve_with,
            other=dict(state.other),
        )

    def compose(self, *overrides: Any) -> ComposedOptions:
        """Resolve the request without touching this builder."""
        default_method = self._executor.config.default_method if self._executor else DEFAULT_METHOD
        return self._derive(overrides)._compose(default_method)

    async def fetch(self, *overrides: Any) -> Any:
        """Compose and send; failures are raised when awaited, after the error stage."""
        return await self._send(overrides)

    async def exec(self, *overrides: Any) -> Any:
        """`fetch` that decodes the body (JSON or text by content-type) unless told otherwise."""
        return await self._send(overrides, resolve_with="auto")

    async def fork(self, *overrides: Any) -> Any:
        """Run a request derived from this builder; the builder is left as-is."""
        return await self.exec(*overrides)

    async def _send(self, overrides: tuple, resolve_with: Optional[str] = None) -> Any:
        try:
            derived = self._derive(overrides)
        except Exception as error:
            raise await self._transformers.apply_error(error)

        if resolve_with and not derived._state.resolve_with:
            derived._state.set("resolve_with", resolve_with)

        try:
            executor = derived.executor
            options = derived._compose(executor.config.default_method)
        except Exception as error:
            logger.debug(f"_send: compose failed with {error!r}")
            raise await derived._transformers.apply_error(error)

        logger.debug(f"_send: {options.method} {options.url}")
        return await executor.execute(options, derived._transformers)

    def __repr__(self) -> str:
        return f"Ask({self._state!r}, {self._transformers!r})"
