"""
txdecode configuration package.

Exports:
    DecoderConfig: Runtime settings with environment overrides
    get_config / reload_config: Singleton accessors
    setup_logging / get_logger: Logging setup for the CLI
"""

from txdecode.config.decoder_config import DecoderConfig, get_config, reload_config
from txdecode.config.logging_config import get_logger, setup_logging

__all__ = ["DecoderConfig", "get_config", "reload_config", "get_logger", "setup_logging"]
