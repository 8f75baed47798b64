"""Centralized logging configuration for isocontext.

Library code only creates module loggers; applications embedding isocontext
call configure_logging() once at startup if they want its output formatted.

Logging Levels:
- DEBUG: Context initialize/close, backend action failures
- INFO: Context creation
- WARNING: Failed initialization, failed close during browser shutdown

Cookie values are never logged.
"""

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from isocontext.config import IsocontextConfig

LEVEL_ENV_VAR = "ISOCONTEXT_LOG_LEVEL"

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Third-party loggers that are too noisy at INFO level
NOISY_LOGGERS = [
    "asyncio",
    "playwright",
]


class ComponentFormatter(logging.Formatter):
    """Formatter that extracts component name from logger path.

    - isocontext.backends.playwright -> backends
    - isocontext.context -> context
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        if len(parts) >= 2 and parts[0] == "isocontext":
            record.component = parts[1]
        else:
            record.component = parts[0]
        return super().format(record)


def resolve_level(level: str | None = None, default: str | None = None) -> str:
    """Resolve a log level name.

    An explicit level wins, then the env var, then ``default``, then INFO.
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR) or default or "INFO"
    level = level.upper()
    if level not in VALID_LEVELS:
        level = "INFO"
    return level


def configure_logging(
    level: str | None = None,
    use_rich: bool = False,
    config: "IsocontextConfig | None" = None,
) -> None:
    """Configure logging for isocontext.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses ISOCONTEXT_LOG_LEVEL env var, then the config
            file's log_level, then INFO.
        use_rich: Use Rich handler for colorful output.
        config: Loaded configuration supplying the fallback log_level.
    """
    default = config.log_level if config is not None else None
    log_level = getattr(logging, resolve_level(level, default))

    if use_rich:
        from rich.logging import RichHandler

        console_handler: logging.Handler = RichHandler(
            rich_tracebacks=False,
            show_path=False,
            show_time=True,
            markup=True,
        )
        console_handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )

    logging.basicConfig(
        level=log_level,
        handlers=[console_handler],
        force=True,
    )

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
