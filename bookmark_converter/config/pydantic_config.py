"""
Pydantic-based configuration system for the Bookmark Converter.

Settings are read from a TOML or JSON file and can be overridden from the
command line.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from bookmark_converter.core.bookmarks_io import STDOUT, default_bookmarks_path
from bookmark_converter.core.html_writer import DEFAULT_TITLE
from bookmark_converter.utils.error_handler import ConfigurationError


class InputConfig(BaseModel):
    """Bookmarks file settings."""

    path: Path = Field(
        default_factory=default_bookmarks_path,
        description="Bookmarks file pathname",
    )

    @field_validator("path", mode="before")
    @classmethod
    def expand_user(cls, v):
        """Allow ~ in configured paths."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


class OutputConfig(BaseModel):
    """HTML output settings."""

    path: str = Field(
        default=STDOUT,
        min_length=1,
        description="Output file pathname, or STDOUT",
    )
    title: str = Field(
        default=DEFAULT_TITLE,
        min_length=1,
        description="Title of the generated HTML document",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file; logs always go to stderr as well",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class ConverterConfig(BaseModel):
    """Main configuration model."""

    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)

        Raises:
            ConfigurationError: If the file cannot be loaded or is invalid
        """
        self.logger = logging.getLogger(__name__)
        self._config: Optional[ConverterConfig] = None
        self.source: Optional[Path] = None
        self._load_configuration(config_path)

    def _get_default_config_paths(self) -> List[Path]:
        """Get list of default configuration file paths to try."""
        return [
            Path.home() / ".config" / "bookmark-converter" / "config.toml",
            Path.cwd() / "bookmark_converter.toml",
            Path.cwd() / "bookmark_converter.json",
        ]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data: Dict[str, Any] = {}

        if config_path:
            config_data = self._load_config_file(Path(config_path))
            self.source = Path(config_path)
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    self.source = path
                    break

        try:
            self._config = ConverterConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

    def _load_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ConfigurationError(
                f"Unsupported configuration file format: {config_path.suffix}"
            )

        try:
            if suffix == ".toml":
                data = toml.load(config_path)
            else:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration in {config_path} must be a table of settings"
            )

        self.logger.debug(f"Loaded configuration from {config_path}")
        return data

    def update_from_cli_args(self, args: Dict[str, Any]) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump()

        if args.get("input_path"):
            config_dict["input"]["path"] = args["input_path"]

        if args.get("output_path"):
            config_dict["output"]["path"] = str(args["output_path"])

        if args.get("title"):
            config_dict["output"]["title"] = args["title"]

        if args.get("debug"):
            config_dict["logging"]["level"] = "DEBUG"
        elif args.get("verbose"):
            config_dict["logging"]["level"] = "INFO"

        try:
            self._config = ConverterConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

    @property
    def config(self) -> ConverterConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    @staticmethod
    def create_sample_config(output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = {
            "input": {"path": str(default_bookmarks_path())},
            "output": {"path": STDOUT, "title": DEFAULT_TITLE},
            "logging": {"level": "WARNING"},
        }

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


def _format_error_location(location: tuple) -> str:
    """Format the error location path."""
    if not location:
        return "Configuration"

    path_parts = []
    for part in location:
        if isinstance(part, str):
            path_parts.append(part)
        else:
            path_parts.append(f"[{part}]")

    return ".".join(path_parts)


def format_config_error(error: ValidationError) -> str:
    """
    Convert a pydantic ValidationError into a readable message.

    Args:
        error: Pydantic ValidationError instance

    Returns:
        A single-line message listing every invalid setting
    """
    messages = []

    for detail in error.errors():
        location = _format_error_location(detail["loc"])
        error_type = detail["type"]
        input_value = detail.get("input", "N/A")

        if error_type == "missing":
            messages.append(f"{location}: Required field is missing")
        elif error_type == "literal_error":
            expected = detail.get("ctx", {}).get("expected", "valid option")
            messages.append(f"{location}: Must be one of {expected} (got: {input_value})")
        else:
            msg = detail.get("msg", "Invalid configuration value")
            messages.append(f"{location}: {msg} (got: {input_value!r})")

    return "Invalid configuration: " + "; ".join(messages)
