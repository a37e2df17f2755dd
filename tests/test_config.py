"""
Tests for decoder configuration and logging setup.

Tests verify:
1. Defaults when no environment variables are set
2. Environment variable overrides
3. Validation in __post_init__
4. Logger setup (handlers, formatters)
"""

import json
import logging
import os
from unittest.mock import patch

import pytest

from txdecode.config import decoder_config
from txdecode.config.decoder_config import DecoderConfig, get_config, reload_config
from txdecode.config.logging_config import (
    HumanReadableFormatter,
    JSONFormatter,
    get_logger,
    setup_logging,
)


class TestDecoderConfig:
    def test_defaults(self):
        """Empty environment gives lenient decoding and indent 2."""
        with patch.dict(os.environ, {}, clear=True):
            config = DecoderConfig()

        assert config.strict_compact_size is False
        assert config.reject_trailing_bytes is False
        assert config.json_indent == 2
        assert config.log_level == "INFO"
        assert config.log_mode == "development"
        assert config.log_dir is None

    def test_env_overrides(self):
        env = {
            "TXDECODE_STRICT_COMPACT_SIZE": "true",
            "TXDECODE_REJECT_TRAILING_BYTES": "TRUE",
            "TXDECODE_JSON_INDENT": "4",
            "LOG_LEVEL": "DEBUG",
            "LOG_MODE": "production",
        }
        with patch.dict(os.environ, env, clear=True):
            config = DecoderConfig()

        assert config.strict_compact_size is True
        assert config.reject_trailing_bytes is True
        assert config.json_indent == 4
        assert config.log_level == "DEBUG"
        assert config.log_mode == "production"

    def test_negative_indent_rejected(self):
        with pytest.raises(ValueError, match="json_indent"):
            DecoderConfig(json_indent=-1)

    def test_invalid_log_mode_rejected(self):
        with pytest.raises(ValueError, match="log_mode"):
            DecoderConfig(log_mode="verbose")

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValueError, match="log_level"):
            DecoderConfig(log_level="LOUD")

    def test_to_dict(self):
        config = DecoderConfig(json_indent=3)
        data = config.to_dict()

        assert data["json_indent"] == 3
        assert set(data) == {
            "strict_compact_size",
            "reject_trailing_bytes",
            "json_indent",
            "log_level",
            "log_mode",
            "log_dir",
        }


class TestConfigSingleton:
    def test_get_config_returns_same_instance(self):
        reload_config()
        assert get_config() is get_config()

    def test_reload_reads_environment(self):
        with patch.dict(os.environ, {"TXDECODE_JSON_INDENT": "8"}):
            config = reload_config()
        assert config.json_indent == 8
        assert decoder_config._config is config
        reload_config()


class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_logger(self):
        yield
        logging.getLogger("txdecode_test").handlers.clear()

    def test_development_mode_uses_readable_formatter(self):
        logger = setup_logging(name="txdecode_test", level="DEBUG")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, HumanReadableFormatter)

    def test_production_mode_uses_json_formatter(self):
        logger = setup_logging(name="txdecode_test", mode="production")
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_log_dir_adds_file_handler(self, tmp_path):
        logger = setup_logging(name="txdecode_test", log_dir=str(tmp_path))
        logger.info("hello")

        assert len(logger.handlers) == 2
        assert (tmp_path / "txdecode_test.log").exists()
        for handler in logger.handlers:
            handler.close()

    def test_setup_twice_does_not_duplicate_handlers(self):
        setup_logging(name="txdecode_test")
        logger = setup_logging(name="txdecode_test")
        assert len(logger.handlers) == 1

    def test_get_logger_reuses_configured_logger(self):
        first = setup_logging(name="txdecode_test")
        assert get_logger("txdecode_test") is first
        assert len(first.handlers) == 1

    def test_json_formatter_output(self):
        record = logging.LogRecord(
            "txdecode", logging.WARNING, __file__, 10, "trailing %d", (2,), None
        )
        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["message"] == "trailing 2"
        assert data["logger"] == "txdecode"

    def test_readable_formatter_without_color(self):
        record = logging.LogRecord(
            "txdecode", logging.INFO, __file__, 10, "decoded", (), None
        )
        text = HumanReadableFormatter(use_color=False).format(record)

        assert "\033[" not in text
        assert "INFO" in text
        assert text.endswith("decoded")
