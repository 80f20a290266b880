"""
Header and body shaping for fetch_ask.
"""
from typing import Any, Dict, Mapping, Optional

from ..config import CONTENT_TYPES, default_serializer
from .query_composer import serialize

CONTENT_TYPE = "Content-Type"


def find_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def media_type(content_type: Optional[str]) -> str:
    """Strip parameters from a content-type value."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def compose_headers(
    headers: Optional[Mapping[str, str]],
    type_tag: Optional[str] = None,
) -> Dict[str, str]:
    """Copy headers, inferring Content-Type from the type tag when absent."""
    result = dict(headers or {})
    if type_tag and find_header(result, CONTENT_TYPE) is None:
        result[CONTENT_TYPE] = CONTENT_TYPES.get(type_tag, type_tag)
    return result


def compose_body(body: Any, headers: Mapping[str, str]) -> Any:
    """Serialize a structured body according to the Content-Type header."""
    if body is None or isinstance(body, (str, bytes)):
        return body

    content_type = media_type(find_header(headers, CONTENT_TYPE))
    if content_type == CONTENT_TYPES["json"]:
        return default_serializer.serialize(body)
    if content_type == CONTENT_TYPES["form"] and isinstance(body, Mapping):
        return serialize(body)
    return body
