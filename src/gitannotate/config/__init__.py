"""Configuration loading, schema, and defaults."""

from gitannotate.config.loader import ConfigError, load_config
from gitannotate.config.schema import GitAnnotateConfig

__all__ = [
    "ConfigError",
    "GitAnnotateConfig",
    "load_config",
]
