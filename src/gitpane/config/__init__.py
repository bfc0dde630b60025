"""Configuration loading, schema, and defaults."""

from gitpane.config.loader import CONFIG_FILENAME, ConfigError, load_config
from gitpane.config.schema import GitPaneConfig, OutputFormat

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "GitPaneConfig",
    "OutputFormat",
    "load_config",
]
