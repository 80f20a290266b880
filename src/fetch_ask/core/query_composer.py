"""
Query string composition for fetch_ask.
"""
from typing import Any, Iterable, Mapping, Union
from urllib.parse import quote

QueryFragment = Union[Mapping[str, Any], str]


def _text(value: Any) -> str:
    # booleans encode the way JSON writes them
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def serialize(data: Mapping[str, Any]) -> str:
    """Encode a mapping as `key=value&...` (values percent-encoded, keys as-is)."""
    return "&".join(
        f"{key}={quote(_text(value), safe='')}"
        for key, value in data.items()
        if value is not None
    )


def compose_query(fragments: Iterable[QueryFragment]) -> str:
    """Join query fragments with `&` in accumulation order."""
    parts = []
    for fragment in fragments:
        if not fragment:
            continue
        if isinstance(fragment, str):
            part = fragment
        elif isinstance(fragment, Mapping):
            part = serialize(fragment)
        else:
            raise TypeError(
                f"Query fragment must be a mapping or string, got {type(fragment).__name__}"
            )
        if part:
            parts.append(part)
    return "&".join(parts)


def with_query(url: str, query: str) -> str:
    """Append a composed query string to a resolved URL."""
    if not query:
        return url
    if "?" not in url:
        return f"{url}?{query}"
    if url.endswith(("?", "&")):
        return f"{url}{query}"
    return f"{url}&{query}"
