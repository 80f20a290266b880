"""
Network adapters for fetch_ask.
"""
from .httpx_adapter import HttpxResponse, HttpxTransport

__all__ = ["HttpxResponse", "HttpxTransport"]
