"""Configuration management for RSS Transcoder."""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, validator

from .feedio.json_writer import JsonStyle


class FetchConfig(BaseModel):
    """Configuration for retrieving feeds over HTTP."""

    model_config = ConfigDict(extra="ignore")

    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    retry_attempts: int = Field(default=3, description="Number of retry attempts for failed requests")
    backoff_factor: float = Field(default=1.0, description="Backoff factor between retries")
    user_agent: str = "RSS-Transcoder/0.1.0 (RSS feed transcoder)"

    @validator('retry_attempts')
    def validate_retry_attempts(cls, v):
        if v < 0:
            raise ValueError("retry_attempts must not be negative")
        return v


class TranscoderConfig(BaseModel):
    """Main configuration for RSS Transcoder."""

    model_config = ConfigDict(extra="ignore")

    json_style: JsonStyle = Field(default=JsonStyle.LEGACY, description="JSON layout: legacy|nested")
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")
    fetch: FetchConfig = Field(default_factory=FetchConfig)

    @validator('json_style', pre=True)
    def normalize_json_style(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    @validator('log_level')
    def validate_log_level(cls, v):
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v.upper()

    @validator('log_file')
    def expand_log_file(cls, v):
        if not v:
            return None
        return str(Path(v).expanduser())


def load_config(config_file: Optional[Path] = None) -> TranscoderConfig:
    """
    Load configuration from YAML file.

    Args:
        config_file: Optional path to config file. If None or missing, defaults are used.

    Returns:
        TranscoderConfig object
    """
    if config_file is None or not config_file.exists():
        if config_file is not None:
            logging.info(f"Config file {config_file} not found, using defaults")
        return TranscoderConfig()

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        config = TranscoderConfig(**data)
        logging.debug(f"Loaded config from {config_file}")
        return config

    except (yaml.YAMLError, ValueError, TypeError) as e:
        logging.error(f"Error loading config from {config_file}: {e}")
        raise


def create_example_config() -> str:
    """Create an example configuration YAML string."""
    example_config = TranscoderConfig(
        json_style=JsonStyle.LEGACY,
        log_level="INFO",
        log_file="~/.cache/rss-transcoder/rss-transcoder.log",
        fetch=FetchConfig(timeout=15.0, retry_attempts=3),
    )

    return yaml.dump(example_config.model_dump(mode="json"), default_flow_style=False, indent=2)
