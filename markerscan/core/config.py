"""Configuration management for MarkerScan."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from markerscan.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for a marker scan run."""

    start_marker: str = Field(Constants.DEFAULT_START_MARKER, description="Opening marker")
    end_marker: str = Field(Constants.DEFAULT_END_MARKER, description="End marker")
    inputs: list[str] = Field(default_factory=list, min_length=1, description="Files to scan")
    output: str | None = None
    output_format: Literal["text", "yaml", "json"] = Field("text", description="Report format")
    escape: bool = Field(False, description="Escape region contents for markup output")
    include_content: bool = Field(True, description="Include region contents in the report")
    log_file: str | None = Field(None, description="Also write logs to this file")
    verbose: bool = False
    debug: bool = False

    @field_validator("start_marker", "end_marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Reject empty markers."""
        if not v:
            raise ValueError("markers must be non-empty")
        return v

    @field_validator("inputs", mode="before")
    @classmethod
    def parse_inputs(cls, v):
        """Accept a single path or a list of paths."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise

    config_dict = {
        "start_marker": get_value("start_marker", Constants.DEFAULT_START_MARKER),
        "end_marker": get_value("end_marker", Constants.DEFAULT_END_MARKER),
        "inputs": get_value("inputs", []),
        "output": get_value("output", None),
        "output_format": get_value("output_format", "text"),
        "escape": get_value("escape", False),
        "include_content": get_value("include_content", True),
        "log_file": get_value("log_file", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
