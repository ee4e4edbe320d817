"""
Minimal logger setup that encourages per-module loggers,
with Rich for humans and JSON for machines.

Hook processes answer on stdout, so every handler installed here writes to
stderr (or a file).

Usage:
    from cursor_hooks.logger import get_logger
    logger = get_logger(__name__)
    logger.info("Hello from this module!")
"""

import logging
import os
from logging.handlers import TimedRotatingFileHandler

from pythonjsonlogger.json import JsonFormatter
from rich.console import Console
from rich.logging import RichHandler


# ========= ENV (loaded at import) =========
LEVEL_MAP = (
    logging.getLevelNamesMapping()
    if hasattr(logging, "getLevelNamesMapping")
    else logging._nameToLevel
)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


DEBUG = _env_flag("DEBUG")
ENV_LOG_LEVEL_STR = os.getenv("LOG_LEVEL", "INFO").upper()
ENV_LOG_LEVEL = LEVEL_MAP.get(ENV_LOG_LEVEL_STR, logging.INFO)
if DEBUG:
    ENV_LOG_LEVEL = logging.DEBUG

ENV_LOG_TO_FILE = _env_flag("LOG_TO_FILE")
ENV_LOG_DIR = os.getenv("LOG_DIR", "logs")
ENV_ROTATE_WHEN = os.getenv("LOG_ROTATE_WHEN", "midnight")
ENV_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "7"))

# Rich vs JSON
ENV_JSON = _env_flag("LOG_JSON")
IN_CI = _env_flag("CI") or bool(os.environ.get("GITHUB_ACTIONS"))
ENV_RICH_TRACEBACKS = _env_flag("LOG_RICH_TRACEBACKS", "true")

# Off by default: importing the library must not touch the root logger.
ENV_AUTO_CONFIG = _env_flag("LOG_AUTO_CONFIG")

JSON_LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(filename)s %(lineno)d %(message)s"
)


# ========= SETUP =========
def setup_logging(
    level: int | None = None,
    log_to_file: bool | None = None,
    log_dir: str | None = None,
    fmt: str | None = None,
    when: str | None = None,
    backup_count: int | None = None,
    json_logs: bool | None = None,
) -> None:
    """Configure the root logger. All child loggers inherit this setup."""
    lvl = ENV_LOG_LEVEL if level is None else level
    to_file = ENV_LOG_TO_FILE if log_to_file is None else log_to_file
    directory = ENV_LOG_DIR if log_dir is None else log_dir
    rotate_when = ENV_ROTATE_WHEN if when is None else when
    keep = ENV_BACKUP_COUNT if backup_count is None else backup_count
    use_json = (ENV_JSON or IN_CI) if json_logs is None else json_logs

    root = logging.getLogger()
    root.setLevel(lvl)

    # Only add ours if there isn't already a comparable stream handler.
    has_stream = any(
        isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.FileHandler)
        for h in root.handlers
    )

    if not has_stream:
        if use_json:
            # StreamHandler defaults to sys.stderr
            ch = logging.StreamHandler()
            ch.setLevel(lvl)
            ch.setFormatter(JsonFormatter(fmt=JSON_LOG_FORMAT))
            root.addHandler(ch)
        else:
            rich_handler = RichHandler(
                console=Console(stderr=True),
                omit_repeated_times=False,
                rich_tracebacks=ENV_RICH_TRACEBACKS,
            )
            rich_handler.setFormatter(logging.Formatter("%(message)s"))
            rich_handler.setLevel(lvl)
            root.addHandler(rich_handler)

    if to_file:
        os.makedirs(directory, exist_ok=True)
        fh = TimedRotatingFileHandler(
            os.path.join(directory, "hooks.log"),
            when=rotate_when,
            backupCount=keep,
            encoding="utf-8",
        )
        fh.setLevel(lvl)
        if use_json:
            fh.setFormatter(JsonFormatter(fmt=JSON_LOG_FORMAT))
        else:
            log_fmt = (
                fmt
                or "%(asctime)s - %(levelname)s - %(name)s "
                "- %(filename)s:%(lineno)d - %(message)s"
            )
            fh.setFormatter(logging.Formatter(log_fmt))
        root.addHandler(fh)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    The returned logger inherits from the root logger setup, so it renders
    through Rich or JSON depending on how `setup_logging` was configured.

    Args:
        name: The name of the module, typically __name__.

    Returns:
        A configured Logger instance.

    Example:
        >>> from cursor_hooks.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("This is an info message")
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger


if ENV_AUTO_CONFIG:
    setup_logging()
