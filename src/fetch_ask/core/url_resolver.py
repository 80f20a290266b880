"""
URL fragment resolution for fetch_ask.
"""
import re
from typing import Any, Iterable, List

from ..errors import MissingUrlError

PROTOCOL_MARKER = "://"

ABSOLUTE_URL = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def resolve_url(fragments: Iterable[Any]) -> str:
    """
    Join an ordered sequence of URL fragments into one URL.

    - Empty fragments are ignored; `MissingUrlError` if none remain.
    - Empty and `.` segments are dropped.
    - A fragment starting with `scheme://` discards everything accumulated
      before it and becomes the new root.
    - `..` pops the last path segment. The protocol root and host are
      never popped.
    - A trailing `/` on the last fragment is kept.
    - Text after `?` in a fragment is not split into segments.

    Example:
        resolve_url(["http://h", "/foo/bar/", "../baz"])
        # "http://h/foo/baz"
    """
    kept = [str(fragment) for fragment in fragments if fragment]
    if not kept:
        raise MissingUrlError()

    segments: List[str] = []
    floor = 0
    leading_slash = kept[0].startswith("/")

    for fragment in kept:
        if ABSOLUTE_URL.match(fragment):
            scheme, _, fragment = fragment.partition(PROTOCOL_MARKER)
            segments = [f"{scheme}:/"]
            floor = 1
            leading_slash = False

        path, marker, query = fragment.partition("?")
        for segment in path.split("/"):
            if not segment or segment == ".":
                continue
            if segment == "..":
                if len(segments) > floor:
                    segments.pop()
                continue
            segments.append(segment)
            if floor == 1 and len(segments) == 2:
                # host
                floor = 2
        if marker:
            # query text is kept verbatim
            if segments:
                segments[-1] += marker + query
            else:
                segments.append(marker + query)

    url = "/".join(segments)
    if leading_slash:
        url = "/" + url
    if kept[-1].endswith("/") and not url.endswith("/"):
        url += "/"
    return url
