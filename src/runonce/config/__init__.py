"""Configuration management for RunOnce."""

from runonce.config.loader import load_config
from runonce.config.models import (
    DEFAULT_COMMANDS,
    Config,
    DetectionConfig,
    ExecutionConfig,
    LanguageSelectorMode,
    LoggingConfig,
    SelectorConfig,
    TerminalType,
)

__all__ = [
    "DEFAULT_COMMANDS",
    "Config",
    "DetectionConfig",
    "ExecutionConfig",
    "LanguageSelectorMode",
    "LoggingConfig",
    "SelectorConfig",
    "TerminalType",
    "load_config",
]
