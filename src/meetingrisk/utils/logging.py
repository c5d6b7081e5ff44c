# utils/logging.py
"""Logging setup driven by LoggingSettings."""
import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple

from platformdirs import user_log_dir

if TYPE_CHECKING:
    from meetingrisk.config.settings import LoggingSettings

APP = "meetingrisk"
SUMMARY_LOGGER = f"{APP}.summary"


def default_log_dir() -> Path:
    return Path(user_log_dir(APP))


def log_file_path(log_dir: Optional[Path] = None) -> Path:
    """Timestamped log file in log_dir (created if missing)."""
    log_dir = Path(log_dir) if log_dir else default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return log_dir / f"{APP}_{ts}.log"


def build_logging_config(log_path: Path, level: str, console_level: Optional[str]) -> dict:
    """
    dictConfig for the package logger and the summary logger.

    Both write to the same file. The console handler is only added when
    console_level is given.
    """
    handlers = {
        "file": {
            "class": "logging.FileHandler",
            "formatter": "plain",
            "filename": str(log_path),
            "encoding": "utf-8",
            "mode": "w",
            "level": "DEBUG",
        },
        "summary_file": {
            "class": "logging.FileHandler",
            "formatter": "summary",
            "filename": str(log_path),
            "encoding": "utf-8",
            "mode": "a",
            "level": "INFO",
        },
    }
    app_handlers = ["file"]
    summary_handlers = ["summary_file"]
    if console_level:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "console",
            "level": console_level,
        }
        app_handlers.append("console")
        summary_handlers.append("console")

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": "{asctime} {levelname:<7} {name} - {message}", "style": "{"},
            "summary": {"format": "{asctime} SUMMARY - {message}", "style": "{"},
            "console": {"format": "{levelname:<7} {message}", "style": "{"},
        },
        "handlers": handlers,
        "loggers": {
            APP: {"level": level, "handlers": app_handlers, "propagate": False},
            SUMMARY_LOGGER: {"level": "INFO", "handlers": summary_handlers, "propagate": False},
        },
        "root": {"handlers": []},
    }


def setup_logging(
    settings: Optional["LoggingSettings"] = None,
    console_level: Optional[str] = None,
) -> Tuple[logging.Logger, logging.Logger]:
    """
    Configure the meetingrisk loggers from LoggingSettings.

    Args:
        settings: level, log_dir and console_output (defaults when None)
        console_level: Console threshold, defaults to settings.level

    Returns:
        (package logger, summary logger)
    """
    if settings is None:
        from meetingrisk.config.settings import LoggingSettings
        settings = LoggingSettings()

    level = settings.level.value
    log_path = log_file_path(settings.log_dir)
    console = (console_level or level) if settings.console_output else None

    logging.config.dictConfig(build_logging_config(log_path, level, console))
    logging.captureWarnings(True)

    logger = logging.getLogger(APP)
    logger.info("Logging initialised. File: %s", log_path)
    return logger, logging.getLogger(SUMMARY_LOGGER)
