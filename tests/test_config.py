"""
Tests for config.py
Logic testing: Decision/Branch, Boundary Value
"""
import pytest

from fetch_ask.config import (
    CONTENT_TYPES,
    AskConfig,
    DefaultSerializer,
    load_config_from_env,
    resolve_config,
)


class TestResolveConfig:
    """Tests for resolve_config function."""

    # Decision: None gives defaults
    def test_defaults(self):
        config = resolve_config(None)
        assert config.default_method == "GET"
        assert config.default_timeout_ms == 30000
        assert config.abort_on_loss is True
        assert config.debug is False

    # Path: method upper-cased
    def test_method_upper(self):
        assert resolve_config(AskConfig(default_method="post")).default_method == "POST"

    # Error Path: negative timeout
    def test_negative_timeout(self):
        with pytest.raises(ValueError, match="default_timeout_ms"):
            resolve_config(AskConfig(default_timeout_ms=-1))

    # Error Path: empty method
    def test_empty_method(self):
        with pytest.raises(ValueError, match="default_method is required"):
            resolve_config(AskConfig(default_method=""))


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env function."""

    def test_empty_env(self):
        assert load_config_from_env({}) == AskConfig()

    def test_values(self):
        config = load_config_from_env({
            "FETCH_ASK_TIMEOUT_MS": "1500",
            "FETCH_ASK_ABORT_ON_LOSS": "false",
            "FETCH_ASK_DEBUG": "1",
        })
        assert config.default_timeout_ms == 1500
        assert config.abort_on_loss is False
        assert config.debug is True

    # Error Path: malformed timeout
    def test_bad_timeout(self):
        with pytest.raises(ValueError, match="FETCH_ASK_TIMEOUT_MS"):
            load_config_from_env({"FETCH_ASK_TIMEOUT_MS": "soon"})

    # Error Path: malformed bool
    def test_bad_bool(self):
        with pytest.raises(ValueError, match="FETCH_ASK_DEBUG"):
            load_config_from_env({"FETCH_ASK_DEBUG": "maybe"})


class TestContentTypes:
    def test_registry(self):
        assert CONTENT_TYPES["json"] == "application/json"
        assert CONTENT_TYPES["form"] == "application/x-www-form-urlencoded"

    def test_serializer(self):
        serializer = DefaultSerializer()
        assert serializer.deserialize(serializer.serialize({"a": [1]})) == {"a": [1]}
