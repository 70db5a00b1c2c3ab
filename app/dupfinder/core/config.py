"""User configuration for dupfinder.

Configuration is stored in ~/.config/dupfinder/config.toml. A missing
file is not an error: the defaults below apply.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dupfinder.core.ignore import IgnorePolicy
from dupfinder.core.paths import get_config_path


class FinderConfig(BaseModel):
    """Settings applied to every dupfinder run.

    Attributes:
        extra_ignored_names: Entry names skipped in addition to the
            built-in denylist. The built-in rules cannot be disabled.
        assume_yes: Skip the confirmation prompt before moving files.
    """

    model_config = ConfigDict(extra="forbid")

    extra_ignored_names: Annotated[
        list[str],
        Field(description="Additional file or directory names to skip"),
    ] = []
    assume_yes: Annotated[
        bool,
        Field(description="Move without asking for confirmation"),
    ] = False

    @field_validator("extra_ignored_names")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        """Reject empty names and names containing path separators."""
        for name in v:
            if not name.strip():
                msg = "extra_ignored_names cannot contain empty names"
                raise ValueError(msg)
            if "/" in name or os.sep in name:
                msg = f"extra_ignored_names must be plain names, got '{name}'"
                raise ValueError(msg)
        return v

    def ignore_policy(self) -> IgnorePolicy:
        """Build the ignore policy for this configuration."""
        return IgnorePolicy().with_names(self.extra_ignored_names)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FinderConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FinderConfig, or defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return FinderConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return FinderConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: FinderConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file first and then moved into
    place with os.replace().

    Args:
        config: The FinderConfig to save.
        path: Destination path. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path
