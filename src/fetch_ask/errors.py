"""
Error taxonomy for fetch_ask.

Every failure raised out of `Ask.fetch()` / `Ask.exec()` is one of these,
or a transport error passed through unchanged from the network primitive.
"""
from typing import Any, Optional


class FetchAskError(Exception):
    """Base class for fetch_ask errors."""


class MissingUrlError(FetchAskError, ValueError):
    """No usable URL fragment at compose time."""

    def __init__(self, message: str = "Missing url"):
        super().__init__(message)


class HttpStatusError(FetchAskError):
    """Response came back with a non-ok status."""

    def __init__(self, status: int, status_text: str, response: Any = None):
        super().__init__(f"HTTP {status}: {status_text}" if status_text else f"HTTP {status}")
        self.status = status
        self.status_text = status_text
        self.response = response


class RequestTimeoutError(FetchAskError, TimeoutError):
    """Timeout branch won the race."""

    status = 408
    status_text = "Request Timeout"

    def __init__(self, timeout_ms: float):
        super().__init__(f"Request Timeout after {timeout_ms}ms")
        self.timeout_ms = timeout_ms


class CancellationError(FetchAskError):
    """Cancellation branch won the race."""

    def __init__(self, cancellation: Any):
        message = getattr(cancellation, "message", None) or "Request Canceled"
        super().__init__(message)
        self.cancellation = cancellation
        self.status = getattr(cancellation, "status", "canceled")
        self.status_text = getattr(cancellation, "status_text", message)


class TransformError(FetchAskError):
    """A transformer raised while processing its stage."""

    def __init__(self, message: str, hook: Optional[str] = None):
        super().__init__(message)
        self.hook = hook
