"""
Configuration module for the form engine.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class FormEngineConfig:
    """Configuration settings for the form engine."""

    # Diagnostics
    debug: bool = False  # Default for isDebug when a caller passes none
    log_level: str = "DEBUG"
    logger_name: str = "form_engine"

    # Output settings
    indent_json_output: int = 2

    @classmethod
    def from_env(cls) -> "FormEngineConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            debug=os.getenv("FORM_ENGINE_DEBUG", str(_defaults.debug).lower()).lower() == "true",
            log_level=os.getenv("FORM_ENGINE_LOG_LEVEL", _defaults.log_level).upper(),
            logger_name=os.getenv("FORM_ENGINE_LOGGER_NAME", _defaults.logger_name),
            indent_json_output=int(os.getenv("FORM_ENGINE_JSON_INDENT", str(_defaults.indent_json_output))),
        )


config = FormEngineConfig.from_env()


def get_config() -> FormEngineConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormEngineConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
