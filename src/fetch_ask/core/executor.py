"""
Request execution for fetch_ask.

The network call races a timeout and, when a Cancellation handle is
present, its listener. Whichever settles first decides the outcome.
"""
import asyncio
import logging
from typing import Any, List, Optional

from ..config import AskConfig, resolve_config
from ..diagnostics import print_request, print_response
from ..errors import (
    CancellationError,
    FetchAskError,
    HttpStatusError,
    RequestTimeoutError,
)
from ..types import ComposedOptions, HookKind, PerformFn
from .codec import media_type
from .transformers import TransformerRegistry

logger = logging.getLogger("fetch_ask.executor")

JSON_MEDIA_TYPE = "application/json"


class Executor:
    """
    Dispatches composed requests through an injected network primitive.

    Args:
        perform: async callable `perform(url, options) -> Response`
        config: executor configuration
    """

    def __init__(self, perform: PerformFn, config: Optional[AskConfig] = None):
        if not callable(perform):
            raise TypeError("perform must be callable")
        self._perform = perform
        self._config = resolve_config(config)

    @property
    def config(self) -> AskConfig:
        return self._config

    @property
    def perform(self) -> PerformFn:
        return self._perform

    def effective_timeout(self, options: ComposedOptions) -> float:
        if options.timeout is None:
            return self._config.default_timeout_ms
        return float(options.timeout)

    async def execute(
        self,
        options: ComposedOptions,
        transformers: TransformerRegistry,
    ) -> Any:
        """Send the request and run the response stages; errors go through the error stage."""
        try:
            response = await self._race(options)
            return await self._resolve(response, options, transformers)
        except Exception as error:
            logger.debug(f"execute: {options.method} {options.url} failed with {error!r}")
            raise await transformers.apply_error(error)

    async def _race(self, options: ComposedOptions) -> Any:
        if self._config.debug:
            print_request(options)

        timeout_ms = self.effective_timeout(options)
        network = asyncio.ensure_future(self._perform(options.url, options))
        timer: Optional[asyncio.Future] = None
        listener: Optional[asyncio.Future] = None
        contenders: List[asyncio.Future] = [network]

        if timeout_ms > 0:
            timer = asyncio.ensure_future(asyncio.sleep(timeout_ms / 1000))
            contenders.append(timer)
        if options.cancellation is not None:
            listener = options.cancellation.listen()
            contenders.append(listener)

        logger.debug(
            f"_race: {options.method} {options.url} timeout_ms={timeout_ms} "
            f"cancellable={listener is not None}"
        )

        try:
            done, _ = await asyncio.wait(contenders, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            network.cancel()
            raise
        finally:
            for contender in (timer, listener):
                if contender is not None and not contender.done():
                    contender.cancel()

        # An already-settled network result wins over a timer that fired in the same tick
        if network in done:
            return network.result()

        if self._config.abort_on_loss:
            network.cancel()
        else:
            network.add_done_callback(_consume_result)

        if listener is not None and listener in done:
            logger.warning(f"_race: {options.method} {options.url} cancelled")
            raise CancellationError(options.cancellation)

        logger.warning(f"_race: {options.method} {options.url} timed out after {timeout_ms}ms")
        raise RequestTimeoutError(timeout_ms)

    async def _resolve(
        self,
        response: Any,
        options: ComposedOptions,
        transformers: TransformerRegistry,
    ) -> Any:
        if self._config.debug:
            print_response(options.url, response)

        if not response.ok:
            raise HttpStatusError(response.status, response.status_text, response)

        if not options.resolve_with:
            return await transformers.apply_async(HookKind.RESPONSE, response)

        data = await decode_response(response, options.resolve_with)
        data = await transformers.apply_async(HookKind.RESPONSE, data)
        return await transformers.apply_async(HookKind.RESPONSE_DATA, data)


async def decode_response(response: Any, resolve_with: str) -> Any:
    """Decode a response body with the named method ("auto" picks json or text)."""
    if resolve_with == "auto":
        content_type = media_type(response.headers.get("content-type"))
        resolve_with = "json" if content_type == JSON_MEDIA_TYPE else "text"

    decoder = getattr(response, resolve_with, None)
    if not callable(decoder):
        raise FetchAskError(f"Response has no decoding method {resolve_with!r}")
    return await decoder()


def _consume_result(task: asyncio.Future) -> None:
    # Retrieve the outcome of an ignored network call so asyncio does not warn about it
    if not task.cancelled():
        task.exception()
