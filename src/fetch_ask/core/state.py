"""
Mutable request state for the Ask builder.

`RequestState.set` is the single mutation verb. The behavior for a key is
looked up in FIELD_KINDS:

- SEQUENCE fields (url, query) are additive: incoming values are appended.
- MAPPING fields (headers, body, passthrough options) shallow-merge when
  both sides are mappings and are replaced otherwise. Header names merge
  case-insensitively.
- SCALAR fields are replaced.

A callable value for a declared field is applied instead: it receives
`(current_value, state, key)` and its return becomes the new value.
Passthrough keys store callables as plain values.
"""
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..types import FieldKind

logger = logging.getLogger("fetch_ask.state")

FIELD_KINDS: Dict[str, FieldKind] = {
    "url": FieldKind.SEQUENCE,
    "query": FieldKind.SEQUENCE,
    "headers": FieldKind.MAPPING,
    "body": FieldKind.MAPPING,
    "method": FieldKind.SCALAR,
    "type": FieldKind.SCALAR,
    "timeout": FieldKind.SCALAR,
    "cancellation": FieldKind.SCALAR,
    "resolve_with": FieldKind.SCALAR,
}

# Alternative spellings accepted by `set`
KEY_ALIASES = {
    "response_type": "resolve_with",
}

DECLARED_FIELDS = tuple(FIELD_KINDS)


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _copy_value(value: Any) -> Any:
    """One-level copy of lists and dicts."""
    if isinstance(value, list):
        return [dict(item) if isinstance(item, dict) else item for item in value]
    if isinstance(value, dict):
        return dict(value)
    return value


def append_sequence(current: Any, incoming: Any) -> List[Any]:
    return _as_list(current) + _as_list(incoming)


def merge_mapping(current: Any, incoming: Any) -> Any:
    if isinstance(current, Mapping) and isinstance(incoming, Mapping):
        return {**current, **incoming}
    return _copy_value(incoming)


def merge_headers(current: Any, incoming: Any) -> Any:
    """Like merge_mapping, but an incoming name replaces any case variant."""
    if not (isinstance(current, Mapping) and isinstance(incoming, Mapping)):
        return _copy_value(incoming)
    incoming_names = {name.lower() for name in incoming}
    merged = {
        name: value
        for name, value in current.items()
        if name.lower() not in incoming_names
    }
    merged.update(incoming)
    return merged


def replace_scalar(current: Any, incoming: Any) -> Any:
    return incoming


MUTATIONS: Dict[FieldKind, Callable[[Any, Any], Any]] = {
    FieldKind.SEQUENCE: append_sequence,
    FieldKind.MAPPING: merge_mapping,
    FieldKind.SCALAR: replace_scalar,
}

# Per-key overrides of MUTATIONS
KEY_MUTATIONS: Dict[str, Callable[[Any, Any], Any]] = {
    "headers": merge_headers,
}


def field_kind(key: str) -> FieldKind:
    """Field kind for a key; undeclared keys are passthrough mappings."""
    return FIELD_KINDS.get(key, FieldKind.MAPPING)


class RequestState:
    """Accumulated request options owned by one builder."""

    def __init__(self) -> None:
        self.method: Optional[str] = None
        self.url: List[Any] = []
        self.query: List[Any] = []
        self.body: Any = None
        self.headers: Dict[str, str] = {}
        self.type: Optional[str] = None
        self.timeout: Optional[float] = None
        self.cancellation: Optional[Any] = None
        self.resolve_with: Optional[str] = None
        self.other: Dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        key = KEY_ALIASES.get(key, key)
        if key in FIELD_KINDS:
            return getattr(self, key)
        return self.other.get(key, default)

    def _store(self, key: str, value: Any) -> None:
        if key in FIELD_KINDS:
            setattr(self, key, value)
        else:
            self.other[key] = value

    def set(self, key: str, value: Any) -> "RequestState":
        """Combine `value` into `key` according to its field kind."""
        key = KEY_ALIASES.get(key, key)
        # passthrough keys (auth, ...) store callables as values
        if callable(value) and key in FIELD_KINDS and key != "cancellation":
            return self.modify(key, value)

        mutation = KEY_MUTATIONS.get(key) or MUTATIONS[field_kind(key)]
        self._store(key, mutation(self.get(key), value))
        return self

    def modify(self, key: str, fn: Callable[[Any, "RequestState", str], Any]) -> "RequestState":
        """Replace `key` with `fn(current, state, key)`."""
        key = KEY_ALIASES.get(key, key)
        logger.debug(f"modify: applying {fn!r} to {key}")
        value = fn(self.get(key), self, key)
        if field_kind(key) is FieldKind.SEQUENCE:
            value = _as_list(value)
        self._store(key, value)
        return self

    def replace(self, key: str, value: Any) -> "RequestState":
        """Replace `key` outright, bypassing the field kind."""
        key = KEY_ALIASES.get(key, key)
        if field_kind(key) is FieldKind.SEQUENCE:
            value = _as_list(value)
        self._store(key, value)
        return self

    def merge(self, other: "RequestState") -> "RequestState":
        """Apply every field another state has set, via `set`."""
        for key in DECLARED_FIELDS:
            value = getattr(other, key)
            if value is None or (isinstance(value, (list, dict)) and not value):
                continue
            self.set(key, _copy_value(value))
        for key, value in other.other.items():
            self.set(key, _copy_value(value))
        return self

    def copy(self) -> "RequestState":
        """Structural copy: lists and mappings are independent of the original."""
        clone = RequestState()
        for key in DECLARED_FIELDS:
            setattr(clone, key, _copy_value(getattr(self, key)))
        clone.other = {key: _copy_value(value) for key, value in self.other.items()}
        return clone

    def __repr__(self) -> str:
        return (
            f"RequestState(method={self.method!r}, url={self.url!r}, "
            f"query={self.query!r}, headers={list(self.headers)!r}, "
            f"type={self.type!r}, timeout={self.timeout!r})"
        )
