"""
Default network primitive backed by httpx.
"""
import logging
import os
from typing import Any, Dict, Mapping, Optional

import httpx

from ..types import ComposedOptions

logger = logging.getLogger("fetch_ask.httpx_adapter")

# Passthrough options forwarded to httpx.AsyncClient.request
HTTPX_PASSTHROUGH_KEYS = ("follow_redirects", "cookies", "auth", "extensions", "files")


def _is_ssl_verify_disabled_by_env() -> bool:
    """
    Check if SSL verification is disabled via environment variables.

    Returns True if any of these are set:
    - NODE_TLS_REJECT_UNAUTHORIZED=0
    - SSL_CERT_VERIFY=0
    """
    node_tls = os.environ.get("NODE_TLS_REJECT_UNAUTHORIZED", "")
    ssl_cert_verify = os.environ.get("SSL_CERT_VERIFY", "")
    return node_tls == "0" or ssl_cert_verify == "0"


class HttpxResponse:
    """Adapts httpx.Response to the fetch_ask Response interface."""

    def __init__(self, response: httpx.Response):
        self.raw = response

    @property
    def ok(self) -> bool:
        return self.raw.is_success

    @property
    def status(self) -> int:
        return self.raw.status_code

    @property
    def status_text(self) -> str:
        return self.raw.reason_phrase or ""

    @property
    def headers(self) -> httpx.Headers:
        return self.raw.headers

    @property
    def url(self) -> str:
        return str(self.raw.url)

    async def json(self) -> Any:
        await self.raw.aread()
        return self.raw.json()

    async def text(self) -> str:
        await self.raw.aread()
        return self.raw.text

    async def bytes(self) -> bytes:
        return await self.raw.aread()

    def __repr__(self) -> str:
        return f"HttpxResponse({self.status} {self.status_text!r}, url={self.url!r})"


def build_request_kwargs(options: ComposedOptions) -> Dict[str, Any]:
    """Translate composed options into httpx request keyword arguments."""
    kwargs: Dict[str, Any] = {
        "method": options.method,
        "url": options.url,
        "headers": options.headers,
    }

    body = options.body
    if isinstance(body, (str, bytes)):
        kwargs["content"] = body
    elif isinstance(body, Mapping):
        kwargs["data"] = dict(body)
    elif body is not None:
        kwargs["content"] = str(body)

    for key in HTTPX_PASSTHROUGH_KEYS:
        if key in options.other:
            kwargs[key] = options.other[key]
    return kwargs


class HttpxTransport:
    """
    `perform(url, options)` over httpx.

    With an injected AsyncClient, requests go through it and the caller
    owns its lifecycle. Without one, a short-lived client is opened per
    call; its own timeout is disabled since the executor races a timeout.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        verify: Optional[bool] = None,
    ):
        self._client = client
        self._verify = (not _is_ssl_verify_disabled_by_env()) if verify is None else verify

    async def __call__(self, url: str, options: ComposedOptions) -> HttpxResponse:
        kwargs = build_request_kwargs(options)
        kwargs["url"] = url
        logger.debug(f"HttpxTransport: {kwargs['method']} {url}")

        if self._client is not None:
            response = await self._client.request(**kwargs)
            return HttpxResponse(response)

        async with httpx.AsyncClient(timeout=None, verify=self._verify) as client:
            response = await client.request(**kwargs)
            return HttpxResponse(response)
