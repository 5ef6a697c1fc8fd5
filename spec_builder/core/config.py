"""
Builder configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import sys
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOGGING_CONFIG = str(Path(__file__).resolve().parent.parent / "logging.yml")


class BuilderConfig(BaseSettings):
    """
    Configuration management for the spec builder.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(
        default=DEFAULT_LOGGING_CONFIG, description="Logging dictConfig YAML path"
    )

    # Path settings
    SPEC_PATH: str = Field(default="f.yml", description="Serverless spec file path")
    TEMPLATE_OUTPUT_PATH: str = Field(
        default="template.yml", description="Generated template output path"
    )
    OUTPUT_FORMAT: Literal["yaml", "json"] = Field(
        default="yaml", description="Generated template format"
    )

    # Same-family triggers within one function: keep the last one, or fail.
    DUPLICATE_TRIGGER_POLICY: Literal["last_wins", "reject"] = Field(
        default="last_wins", description="Policy for duplicate triggers per function"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = BuilderConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
