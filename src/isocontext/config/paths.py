"""Path resolution for isocontext configuration.

The base directory can be overridden with the ISOCONTEXT_HOME environment
variable. Default: ~/.isocontext
"""

import os
from pathlib import Path

ENV_VAR = "ISOCONTEXT_HOME"


def get_isocontext_home() -> Path:
    """Get the base directory for isocontext data."""
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser()
    return Path.home() / ".isocontext"


def get_config_path() -> Path:
    return get_isocontext_home() / "config.toml"
