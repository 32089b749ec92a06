"""
mpeg_sync Configuration
=======================

This module handles configuration loading for the frame scanner.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. mpeg_sync.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    MPEG_SYNC_CONFIG             -> path of the YAML file
    MPEG_SYNC_CAPTURE_DATA       -> scanner.capture_data
    MPEG_SYNC_SKIP_MODE          -> scanner.skip_mode
    MPEG_SYNC_DISCARD_CHUNK_SIZE -> scanner.discard_chunk_size
    MPEG_SYNC_LOG_LEVEL          -> logging.level
    MPEG_SYNC_LOG_FORMAT         -> logging.format

Example:
    from mpeg_sync.config import settings

    print(settings.scanner.capture_data)
    print(settings.scanner.skip_mode)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from mpeg_sync.models.options import SkipMode


logger = logging.getLogger(__name__)


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


# =============================================================================
# Configuration Models
# =============================================================================

class ScannerConfig(BaseModel):
    """Frame scanner defaults used by FrameReader."""

    capture_data: bool = Field(
        default=True,
        description="Keep raw frame bytes (header + payload) on each frame",
    )
    skip_mode: SkipMode = Field(
        default=SkipMode.AUTO,
        description="How payloads are skipped when not captured: auto, seek or read",
    )
    discard_chunk_size: int = Field(
        default=8192,
        ge=1,
        le=1024 * 1024,
        description="Read size when skipping payloads by reading",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for mpeg_sync.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    scanner: ScannerConfig = Field(default_factory=ScannerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to a YAML file. If None, MPEG_SYNC_CONFIG and
            then the current directory are searched.

    Returns:
        Settings: Loaded configuration

    Raises:
        pydantic.ValidationError: If a value is out of range
        ValueError: If a boolean environment override is not recognised
    """
    # Find config file
    if config_path is None:
        config_path = os.environ.get("MPEG_SYNC_CONFIG")
    if config_path is None:
        for path in (Path("mpeg_sync.yaml"), Path("mpeg_sync.yml")):
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    # Apply environment variable overrides
    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Scanner settings
    if env_capture := os.environ.get("MPEG_SYNC_CAPTURE_DATA"):
        config_data.setdefault("scanner", {})["capture_data"] = _parse_bool(
            "MPEG_SYNC_CAPTURE_DATA", env_capture
        )
    if env_skip := os.environ.get("MPEG_SYNC_SKIP_MODE"):
        config_data.setdefault("scanner", {})["skip_mode"] = env_skip.strip().lower()
    if env_chunk := os.environ.get("MPEG_SYNC_DISCARD_CHUNK_SIZE"):
        config_data.setdefault("scanner", {})["discard_chunk_size"] = int(env_chunk)

    # Logging settings
    if env_log := os.environ.get("MPEG_SYNC_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_format := os.environ.get("MPEG_SYNC_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_format


def setup_logging(settings: Settings) -> None:
    """
    Configure logging based on settings.

    Intended for applications embedding the scanner; the library never
    calls this itself.
    """
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()
