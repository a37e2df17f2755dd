#!/usr/bin/env python3
"""
Decoder configuration

All settings can be overridden via environment variables (or a .env file
loaded by the CLI).
"""

import os
from dataclasses import dataclass, field
from typing import Optional

LOG_MODES = ("development", "production")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class DecoderConfig:
    """
    Runtime settings for transaction decoding and rendering
    """

    # ==================== Decoding ====================
    # Reject compact sizes wider than their value needs
    strict_compact_size: bool = field(
        default_factory=lambda: _env_flag("TXDECODE_STRICT_COMPACT_SIZE")
    )

    # Raise instead of warning when bytes follow the locktime
    reject_trailing_bytes: bool = field(
        default_factory=lambda: _env_flag("TXDECODE_REJECT_TRAILING_BYTES")
    )

    # ==================== Output ====================
    json_indent: int = field(
        default_factory=lambda: int(os.getenv("TXDECODE_JSON_INDENT", "2"))
    )

    # ==================== Logging ====================
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_mode: str = field(
        default_factory=lambda: os.getenv("LOG_MODE", "development")
    )  # development or production
    log_dir: Optional[str] = field(default_factory=lambda: os.getenv("LOG_DIR"))

    def __post_init__(self):
        """Validate configuration after initialization"""
        if self.json_indent < 0:
            raise ValueError("json_indent must be non-negative")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        if self.log_mode not in LOG_MODES:
            raise ValueError(f"log_mode must be one of {', '.join(LOG_MODES)}")

    def to_dict(self) -> dict:
        """Convert configuration to dictionary"""
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }


# Singleton instance
_config: Optional[DecoderConfig] = None


def get_config() -> DecoderConfig:
    """
    Get the global configuration instance (singleton)

    Returns:
        DecoderConfig instance
    """
    global _config
    if _config is None:
        _config = DecoderConfig()
    return _config


def reload_config() -> DecoderConfig:
    """
    Reload configuration from environment variables

    Returns:
        New DecoderConfig instance
    """
    global _config
    _config = DecoderConfig()
    return _config
