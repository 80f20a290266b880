"""
Shared fixtures for fetch_ask tests.
"""
import asyncio
import json
from typing import Any, Dict, List, Optional, Tuple

import pytest

from fetch_ask.client import Ask
from fetch_ask.config import AskConfig
from fetch_ask.core.executor import Executor
from fetch_ask.types import ComposedOptions


class FakeResponse:
    """In-memory Response matching the interface the executor expects."""

    def __init__(
        self,
        status: int = 200,
        status_text: str = "OK",
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.status = status
        self.status_text = status_text
        self.ok = 200 <= status < 300
        self.headers = headers if headers is not None else {"content-type": "application/json"}
        self._body = body

    async def json(self) -> Any:
        if isinstance(self._body, str):
            return json.loads(self._body)
        return self._body

    async def text(self) -> str:
        if isinstance(self._body, str):
            return self._body
        return json.dumps(self._body)


class FakePerform:
    """Records calls and answers with a fixed response after an optional delay."""

    def __init__(self, response: Optional[FakeResponse] = None, delay: float = 0.0):
        self.response = response or FakeResponse(body={"success": True})
        self.delay = delay
        self.calls: List[Tuple[str, ComposedOptions]] = []
        self.completed = 0
        self.cancelled = 0

    async def __call__(self, url: str, options: ComposedOptions) -> FakeResponse:
        self.calls.append((url, options))
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        self.completed += 1
        return self.response


@pytest.fixture
def fake_perform():
    """Network primitive answering 200 with a JSON body."""
    return FakePerform()


@pytest.fixture
def executor(fake_perform):
    return Executor(fake_perform, AskConfig())


@pytest.fixture
def ask(executor):
    """Builder pointing at a fake host."""
    return Ask("http://api.example.com", executor=executor)
