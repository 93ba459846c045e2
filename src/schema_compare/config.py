"""Configuration management for Schema Compare using Pydantic.

Settings come from an optional YAML file, with environment variables
(``SCHEMA_COMPARE_`` prefix, ``__`` for nesting) filling anything the file
leaves out.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from schema_compare.exceptions import ConfigurationError
from schema_compare.schema.models import DEFAULT_KEY_SPECS, Category, KeySpec


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="WARNING",
        description="Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    file_level: str = Field(
        default="DEBUG",
        description="File log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    format: str = Field(default="json", description="Log file format (json or console)")
    file: str | None = Field(default=None, description="Log file path")

    @field_validator("level", "file_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = ["json", "console"]
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v_lower


class KeysConfig(BaseModel):
    """Attributes that identify a record of each category across versions."""

    tables: list[str] = Field(
        default_factory=lambda: list(DEFAULT_KEY_SPECS[Category.TABLES].fields),
        description="Key attributes for tables",
    )
    columns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_KEY_SPECS[Category.COLUMNS].fields),
        description="Key attributes for columns",
    )
    joins: list[str] = Field(
        default_factory=lambda: list(DEFAULT_KEY_SPECS[Category.JOINS].fields),
        description="Key attributes for joins",
    )
    separator: str = Field(default=".", description="Separator between key attribute values")

    @field_validator("tables", "columns", "joins")
    @classmethod
    def validate_fields(cls, v: list[str]) -> list[str]:
        """Validate a key has at least one attribute."""
        if not v:
            raise ValueError("Key must name at least one attribute")
        return v

    def key_specs(self) -> dict[Category, KeySpec]:
        """Build the KeySpec of every category."""
        return {
            category: KeySpec.of(getattr(self, category.value), self.separator)
            for category in Category
        }


class LoaderConfig(BaseModel):
    """Schema archive loading options."""

    schema_marker: str = Field(
        default="_schema.xml",
        description="Substring identifying the schema document inside an archive",
    )

    @field_validator("schema_marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Validate marker is not empty."""
        if not v.strip():
            raise ValueError("Schema marker cannot be empty")
        return v


class ReportConfig(BaseModel):
    """Report rendering options."""

    view: str = Field(
        default="differences", description="Default view (differences or similarities)"
    )
    max_value_width: int | None = Field(
        default=None, ge=10, le=500, description="Maximum width of value columns"
    )

    @field_validator("view")
    @classmethod
    def validate_view(cls, v: str) -> str:
        """Validate report view."""
        valid_views = ["differences", "similarities"]
        v_lower = v.lower()
        if v_lower not in valid_views:
            raise ValueError(f"Report view must be one of: {', '.join(valid_views)}")
        return v_lower


class ComparisonConfig(BaseSettings):
    """Main Schema Compare configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMA_COMPARE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    keys: KeysConfig = Field(default_factory=KeysConfig, description="Record key configuration")
    loader: LoaderConfig = Field(default_factory=LoaderConfig, description="Loader configuration")
    report: ReportConfig = Field(default_factory=ReportConfig, description="Report configuration")


def load_config_from_yaml(config_path: str | Path) -> ComparisonConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        ComparisonConfig: Loaded configuration

    Raises:
        ConfigurationError: If the file is missing, empty, or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not config_data:
        raise ConfigurationError(f"Empty configuration file: {config_path}")

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration must be a mapping: {config_path}")

    config_data = _expand_env_vars(config_data)

    try:
        return ComparisonConfig(**config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in config data.

    Supports ${VAR_NAME} syntax for environment variable substitution.
    """
    if isinstance(data, dict):
        return {k: _expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        if data.startswith("${") and data.endswith("}"):
            var_name = data[2:-1]
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ConfigurationError(
                    f"Environment variable '{var_name}' not found. "
                    f"Please set it in your environment or .env file."
                )
            return env_value
        return data
    else:
        return data


def config_to_yaml(config: ComparisonConfig) -> str:
    """Render configuration as YAML text."""
    return yaml.dump(config.model_dump(), default_flow_style=False, sort_keys=False)
