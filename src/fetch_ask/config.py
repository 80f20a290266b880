"""
Configuration for fetch_ask.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional
import json
import logging
import os

logger = logging.getLogger("fetch_ask.config")

# Default values
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_METHOD = "GET"

# Content-type shorthands accepted by the `type` option
CONTENT_TYPES = {
    "json": "application/json",
    "form": "application/x-www-form-urlencoded",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class AskConfig:
    """Executor configuration."""

    default_method: str = DEFAULT_METHOD
    """Method used when a request never sets one"""

    default_timeout_ms: float = DEFAULT_TIMEOUT_MS
    """Timeout applied when a request leaves `timeout` unset. 0 disables it"""

    abort_on_loss: bool = True
    """Cancel the in-flight network task when timeout or cancellation wins"""

    debug: bool = False
    """Pretty-print composed requests and responses with rich"""


class DefaultSerializer:
    """Default JSON serializer."""

    def serialize(self, data: Any) -> str:
        """Serialize data to JSON string."""
        return json.dumps(data)

    def deserialize(self, text: str) -> Any:
        """Deserialize JSON string to data."""
        return json.loads(text)


default_serializer = DefaultSerializer()


def validate_config(config: AskConfig) -> None:
    """Validate executor configuration."""
    if not config.default_method:
        raise ValueError("default_method is required")
    if config.default_timeout_ms is None or config.default_timeout_ms < 0:
        raise ValueError(
            f"Invalid default_timeout_ms: {config.default_timeout_ms}"
        )


def resolve_config(config: Optional[AskConfig] = None) -> AskConfig:
    """Resolve executor configuration with defaults."""
    if config is None:
        return AskConfig()

    validate_config(config)
    return AskConfig(
        default_method=config.default_method.upper(),
        default_timeout_ms=config.default_timeout_ms,
        abort_on_loss=config.abort_on_loss,
        debug=config.debug,
    )


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


def load_config_from_env(environ: Optional[Mapping[str, str]] = None) -> AskConfig:
    """
    Build an AskConfig from environment variables.

    Recognized variables:
    - FETCH_ASK_TIMEOUT_MS: default timeout in milliseconds
    - FETCH_ASK_ABORT_ON_LOSS: abort losing network calls (bool)
    - FETCH_ASK_DEBUG: enable rich request/response printing (bool)
    """
    env = os.environ if environ is None else environ
    config = AskConfig()

    raw_timeout = env.get("FETCH_ASK_TIMEOUT_MS")
    if raw_timeout:
        try:
            config.default_timeout_ms = float(raw_timeout)
        except ValueError as e:
            raise ValueError(f"Invalid FETCH_ASK_TIMEOUT_MS: {raw_timeout!r}") from e

    raw_abort = env.get("FETCH_ASK_ABORT_ON_LOSS")
    if raw_abort is not None:
        config.abort_on_loss = _parse_bool("FETCH_ASK_ABORT_ON_LOSS", raw_abort)

    raw_debug = env.get("FETCH_ASK_DEBUG")
    if raw_debug is not None:
        config.debug = _parse_bool("FETCH_ASK_DEBUG", raw_debug)

    logger.debug(f"load_config_from_env: resolved {config}")
    return resolve_config(config)
