"""
Tests for factory.py
Logic testing: Decision/Branch, Path coverage
"""
import httpx
import pytest

from fetch_ask.adapters.httpx_adapter import HttpxTransport
from fetch_ask.client import Ask
from fetch_ask.config import AskConfig
from fetch_ask.core.executor import Executor
from fetch_ask.factory import create_ask, create_executor, request

from conftest import FakePerform


class TestCreateExecutor:
    """Tests for create_executor function."""

    # Decision: default perform is the httpx transport
    def test_default_transport(self):
        executor = create_executor(config=AskConfig())
        assert isinstance(executor.perform, HttpxTransport)

    # Decision: injected perform used as-is
    def test_injected_perform(self):
        perform = FakePerform()
        assert create_executor(perform=perform).perform is perform

    # Path: config read from env when omitted
    def test_env_config(self, monkeypatch):
        monkeypatch.setenv("FETCH_ASK_TIMEOUT_MS", "250")
        assert create_executor(perform=FakePerform()).config.default_timeout_ms == 250


class TestCreateAsk:
    """Tests for create_ask / request."""

    def test_create_ask(self):
        ask = create_ask("http://h", perform=FakePerform())
        assert isinstance(ask, Ask)
        assert isinstance(ask.executor, Executor)

    # Path: lazily built default executor
    def test_ask_default_executor(self):
        assert isinstance(Ask("http://h").executor.perform, HttpxTransport)

    @pytest.mark.asyncio
    async def test_request(self):
        assert await request("http://h/ok", perform=FakePerform()) == {"success": True}

    # Path: httpx client handed to the transport
    @pytest.mark.asyncio
    async def test_with_httpx_client(self):
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda req: httpx.Response(200, text="hi"))
        )
        result = await create_ask("http://h/ok", httpx_client=client).exec()
        assert result == "hi"
        await client.aclose()
