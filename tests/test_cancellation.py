"""
Tests for cancellation.py
Logic testing: State Transition, Race windows
"""
import asyncio

import pytest

from fetch_ask.core.cancellation import Cancellation


class TestCancellation:
    """Tests for Cancellation handle."""

    def test_defaults(self):
        cancellation = Cancellation()
        assert cancellation.message == "Request Canceled"
        assert cancellation.status == "canceled"
        assert cancellation.ok is False
        assert cancellation.cancelled is False

    # State: pending listener resolved on cancel
    @pytest.mark.asyncio
    async def test_listen_then_cancel(self):
        cancellation = Cancellation()
        waiter = cancellation.listen()
        assert not waiter.done()
        cancellation.cancel()
        assert await waiter is cancellation

    # State: cancel before listening is still observed
    @pytest.mark.asyncio
    async def test_cancel_then_listen(self):
        cancellation = Cancellation("stop")
        cancellation.cancel()
        waiter = cancellation.listen()
        assert waiter.done()
        assert (await waiter).message == "stop"

    # State: second cancel ignored
    @pytest.mark.asyncio
    async def test_cancel_once(self):
        cancellation = Cancellation()
        cancellation.cancel()
        cancellation.cancel()
        assert cancellation.cancelled is True

    # Path: every listener notified
    @pytest.mark.asyncio
    async def test_multiple_listeners(self):
        cancellation = Cancellation()
        waiters = [cancellation.listen(), cancellation.listen()]
        asyncio.get_running_loop().call_soon(cancellation.cancel)
        results = await asyncio.gather(*waiters)
        assert results == [cancellation, cancellation]

    # Path: cancelled listeners are discarded
    @pytest.mark.asyncio
    async def test_discard_cancelled_listener(self):
        cancellation = Cancellation()
        waiter = cancellation.listen()
        waiter.cancel()
        await asyncio.sleep(0)
        assert cancellation._waiters == []
        cancellation.cancel()
