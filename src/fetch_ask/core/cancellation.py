"""
One-shot cancellation handle for fetch_ask.
"""
import asyncio
import logging
from typing import List

logger = logging.getLogger("fetch_ask.cancellation")


class Cancellation:
    """
    External signal that pre-empts an in-flight request.

    The handle moves once from pending to cancelled. Listeners attached
    after `cancel()` still observe it, so there is no missed-signal window
    between handing the handle to a request and the request listening.

    Example:
        cancellation = Cancellation()
        task = asyncio.create_task(Ask(url).cancellation(cancellation).fetch())
        cancellation.cancel()
        await task  # raises CancellationError
    """

    def __init__(self, message: str = "Request Canceled"):
        self.message = message
        self.status_text = message
        self.status = "canceled"
        self.ok = False
        self._cancelled = False
        self._waiters: List[asyncio.Future] = []

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Fire the signal. Calls after the first are ignored."""
        if self._cancelled:
            return
        self._cancelled = True
        logger.debug(f"cancel: notifying {len(self._waiters)} listener(s)")
        waiters, self._waiters = self._waiters, []
        for waiter in waiters:
            if not waiter.done():
                waiter.set_result(self)

    def listen(self) -> "asyncio.Future[Cancellation]":
        """Future resolved with this handle once cancelled."""
        loop = asyncio.get_running_loop()
        waiter: asyncio.Future = loop.create_future()
        if self._cancelled:
            waiter.set_result(self)
            return waiter
        self._waiters.append(waiter)
        waiter.add_done_callback(self._discard)
        return waiter

    def _discard(self, waiter: asyncio.Future) -> None:
        if waiter in self._waiters:
            self._waiters.remove(waiter)

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "pending"
        return f"Cancellation({self.message!r}, {state})"
