# src/cursorq/core/config.py
"""
Configuration schema and loading for cursorq.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class HistorySettings(BaseModel):
    """Input history navigator configuration.

    Example YAML:
        history:
          max_entries: 1000
          ignore_consecutive_duplicates: false
    """

    model_config = {"frozen": True}

    max_entries: int = Field(
        default=500,
        gt=0,
        description="Maximum resident entries; the oldest entry is evicted beyond this",
    )
    ignore_consecutive_duplicates: bool = Field(
        default=True,
        description="Skip recording an entry equal to the newest resident entry",
    )


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    model_config = {"frozen": True}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )
    json_output: bool = Field(
        default=False,
        description="Emit JSON lines instead of console output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class CursorqSettings(BaseModel):
    """Top-level cursorq configuration."""

    model_config = {"frozen": True}

    history: HistorySettings = Field(default_factory=HistorySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _lowercase_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k).lower(): _lowercase_keys(v) for k, v in value.items()}
    return value


def load_settings(config_path: Path) -> CursorqSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (CURSORQ_*) - highest priority
    2. Config file (settings.yaml)
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: CURSORQ_HISTORY__MAX_ENTRIES for nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated CursorqSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="CURSORQ",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; filter out its internal settings
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k: v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return CursorqSettings(**_lowercase_keys(raw_config))
