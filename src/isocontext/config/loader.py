"""Configuration loading from TOML files."""

import os
import tomllib
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from isocontext.config.models import ConfigError, IsocontextConfig
from isocontext.config.paths import get_config_path

CONFIG_ENV_VAR = "ISOCONTEXT_CONFIG"


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    paths = [
        Path("isocontext.toml"),  # Current directory
        get_config_path(),  # ~/.isocontext/config.toml (or ISOCONTEXT_HOME)
    ]
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        paths.insert(0, Path(env_path))
    return paths


def load_config(path: Path | None = None) -> IsocontextConfig:
    """Load configuration from TOML file.

    Args:
        path: Explicit path to config file. If None, searches default locations
            and falls back to defaults when none exists.

    Returns:
        Validated IsocontextConfig instance.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        ConfigError: If the config file is not valid TOML or fails validation.
    """
    config_path: Path | None = None

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for default_path in _get_default_config_paths():
            expanded = default_path.expanduser()
            if expanded.exists():
                config_path = expanded
                break

    if config_path is None:
        return get_default_config()

    try:
        with config_path.open("rb") as f:
            raw_config = tomllib.load(f)
        return IsocontextConfig.model_validate(raw_config)
    except (tomllib.TOMLDecodeError, PydanticValidationError) as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e


def get_default_config() -> IsocontextConfig:
    """Get a default configuration without reading any file."""
    return IsocontextConfig()
