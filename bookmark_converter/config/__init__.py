"""Configuration for the Bookmark Converter."""

from .pydantic_config import (
    ConfigurationManager,
    ConverterConfig,
    InputConfig,
    LoggingConfig,
    OutputConfig,
    format_config_error,
)

__all__ = [
    "ConfigurationManager",
    "ConverterConfig",
    "InputConfig",
    "LoggingConfig",
    "OutputConfig",
    "format_config_error",
]
