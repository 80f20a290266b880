"""
Factory functions for creating builders and executors.
"""
from typing import Any, Optional

import httpx

from .adapters.httpx_adapter import HttpxTransport
from .client import Ask
from .config import AskConfig, load_config_from_env
from .core.executor import Executor
from .types import PerformFn


def create_executor(
    perform: Optional[PerformFn] = None,
    httpx_client: Optional[httpx.AsyncClient] = None,
    config: Optional[AskConfig] = None,
) -> Executor:
    """
    Create an executor.

    Args:
        perform: network primitive; defaults to an httpx transport
        httpx_client: AsyncClient for the default transport
        config: executor configuration; defaults to FETCH_ASK_* env vars

    Example:
        executor = create_executor(httpx_client=httpx.AsyncClient())
        api = create_ask("https://api.example.com", executor=executor)
    """
    if perform is None:
        perform = HttpxTransport(client=httpx_client)
    if config is None:
        config = load_config_from_env()
    return Executor(perform, config)


def create_ask(
    *inputs: Any,
    perform: Optional[PerformFn] = None,
    httpx_client: Optional[httpx.AsyncClient] = None,
    config: Optional[AskConfig] = None,
    executor: Optional[Executor] = None,
) -> Ask:
    """Create a builder bound to an executor."""
    if executor is None:
        executor = create_executor(perform=perform, httpx_client=httpx_client, config=config)
    return Ask(*inputs, executor=executor)


async def request(*inputs: Any, **kwargs: Any) -> Any:
    """One-shot request: `await request("https://h/ok", {"method": "POST"})`."""
    return await create_ask(*inputs, **kwargs).exec()
