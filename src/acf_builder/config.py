"""
Configuration module for acf-builder.

Handles environment variables and default settings.
"""

import logging
import os
from dataclasses import dataclass, fields

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class BuilderConfig:
    """Configuration settings for field builders."""

    # Field kind used when a descriptor does not declare its own
    default_type: str = "text"

    # hashlib algorithm behind generate_unique_prefix
    hash_algorithm: str = "md5"

    # Raise FieldDefinitionError from build() when check() finds issues
    strict: bool = False

    log_level: str = "WARNING"

    def apply_logging(self) -> None:
        """Set the level of the package logger."""
        logging.getLogger("acf-builder").setLevel(self.log_level.upper())

    @classmethod
    def from_env(cls) -> "BuilderConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            default_type=os.getenv("ACF_BUILDER_DEFAULT_TYPE", _defaults.default_type),
            hash_algorithm=os.getenv("ACF_BUILDER_HASH_ALGORITHM", _defaults.hash_algorithm),
            strict=os.getenv("ACF_BUILDER_STRICT", str(_defaults.strict).lower()).lower() == "true",
            log_level=os.getenv("ACF_BUILDER_LOG_LEVEL", _defaults.log_level),
        )


config = BuilderConfig.from_env()
config.apply_logging()


def get_config() -> BuilderConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> BuilderConfig:
    """Update configuration settings."""
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    if "log_level" in kwargs:
        config.apply_logging()
    return config


def reset_config() -> BuilderConfig:
    """Restore every setting to its environment/default value."""
    fresh = BuilderConfig.from_env()
    for f in fields(BuilderConfig):
        setattr(config, f.name, getattr(fresh, f.name))
    config.apply_logging()
    return config
