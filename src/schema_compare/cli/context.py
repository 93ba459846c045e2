"""
CLI context for Schema Compare.

This module provides the context object that is passed to all CLI commands,
holding the configuration and the comparator built from it.
"""

from dataclasses import dataclass, field
from pathlib import Path

from schema_compare.config import ComparisonConfig, load_config_from_yaml
from schema_compare.schema.comparator import SchemaComparator
from schema_compare.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CompareContext:
    """
    Context object for CLI commands.

    Attributes:
        config_path: Path to configuration file (optional)
        log_level: Console logging level
        log_file: Optional log file path
        settings: Configuration already loaded by the caller (optional)
        config: Loaded configuration (defaults plus environment when no file)
        comparator: Comparator using the configured record keys
    """

    config_path: Path | None = None
    log_level: str = "WARNING"
    log_file: Path | None = None
    settings: ComparisonConfig | None = field(default=None, repr=False)

    # Lazy-loaded attributes
    _config: ComparisonConfig | None = field(default=None, init=False, repr=False)
    _comparator: SchemaComparator | None = field(default=None, init=False, repr=False)

    @property
    def config(self) -> ComparisonConfig:
        """Get or load configuration."""
        if self._config is None and self.settings is not None:
            self._config = self.settings
        if self._config is None:
            if self.config_path is None:
                logger.debug("Using default configuration")
                self._config = ComparisonConfig()
            else:
                logger.debug("Loading configuration", config_path=str(self.config_path))
                self._config = load_config_from_yaml(self.config_path)
                logger.debug("Configuration loaded successfully")

        return self._config

    @property
    def comparator(self) -> SchemaComparator:
        """Get or create the schema comparator."""
        if self._comparator is None:
            self._comparator = SchemaComparator(self.config.keys.key_specs())
        return self._comparator
