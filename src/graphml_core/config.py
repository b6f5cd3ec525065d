"""
Configuration Management for the GraphML exporter.

Provides type-safe configuration loading using Pydantic Settings.
Supports environment variables, .env files, and sensible defaults for zero-config operation.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from typing import Any, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class GraphMLSettings(BaseSettings):
    """
    Centralized configuration for the exporter.

    Configuration is loaded with the following priority (highest to lowest):
    1. System environment variables
    2. .env file in the working directory
    3. Hardcoded default values

    Example:
        ```python
        from graphml_core.config import settings

        print(settings.pretty_print)  # False
        print(settings.log_level)  # 'INFO'
        ```
    """

    # ========================================
    # EXPORT CONFIGURATION
    # ========================================

    pretty_print: bool = Field(
        default=False, description="Indent the GraphML output (whitespace only)"
    )

    indent: int = Field(
        default=2, ge=0, le=8, description="Spaces per nesting level when pretty printing"
    )

    # ========================================
    # LOGGING CONFIGURATION
    # ========================================

    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: str = Field(default="json", description="Log format (json, console)")

    # ========================================
    # VALIDATORS
    # ========================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate log level is one of allowed values.

        Args:
            v: Log level string (case-insensitive)

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level not in allowed values
        """
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got '{v}'")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is json or console."""
        allowed = ["json", "console"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got '{v}'")
        return v_lower

    @property
    def is_development(self) -> bool:
        """True if log_level is DEBUG."""
        return self.log_level == "DEBUG"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "validate_assignment": True,
        "extra": "forbid",
    }


def get_config_summary(settings: GraphMLSettings) -> Dict[str, Any]:
    """
    Get configuration summary for logging/debugging.

    Args:
        settings: GraphMLSettings instance

    Returns:
        Configuration summary grouped by category
    """
    return {
        "export": {
            "pretty_print": settings.pretty_print,
            "indent": settings.indent,
        },
        "logging": {
            "level": settings.log_level,
            "format": settings.log_format,
        },
    }


# Singleton instance - instantiated once at module import
settings = GraphMLSettings()
