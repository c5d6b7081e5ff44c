import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from meetingrisk.config.settings import LoggingSettings, LogLevel
from meetingrisk.utils.logging import build_logging_config, default_log_dir, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    for name in ("meetingrisk", "meetingrisk.summary"):
        lg = logging.getLogger(name)
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()
        lg.propagate = True
        lg.setLevel(logging.NOTSET)
    logging.captureWarnings(False)


def test_default_log_dir_comes_from_platformdirs(tmp_path):
    with patch("meetingrisk.utils.logging.user_log_dir", return_value=str(tmp_path / "plat")) as mock_dir:
        assert default_log_dir() == Path(tmp_path / "plat")
    mock_dir.assert_called_once_with("meetingrisk")


def _stream_handlers(lg):
    return [h for h in lg.handlers if type(h) is logging.StreamHandler]


def test_creates_timestamped_log_file(tmp_path):
    settings = LoggingSettings(log_dir=tmp_path / "logs", console_output=False)
    logger, summary_logger = setup_logging(settings)

    files = list((tmp_path / "logs").glob("meetingrisk_*.log"))
    assert len(files) == 1
    assert logger.name == "meetingrisk"
    assert summary_logger.name == "meetingrisk.summary"

    summary_logger.info("batch finished")
    for handler in summary_logger.handlers:
        handler.flush()
    assert "SUMMARY - batch finished" in files[0].read_text(encoding="utf-8")


def test_level_comes_from_settings(tmp_path):
    settings = LoggingSettings(level=LogLevel.ERROR, log_dir=tmp_path, console_output=False)
    logger, _ = setup_logging(settings)
    assert logger.level == logging.ERROR
    assert not _stream_handlers(logger)


def test_console_defaults_to_settings_level(tmp_path):
    logger, summary_logger = setup_logging(LoggingSettings(level=LogLevel.DEBUG, log_dir=tmp_path))
    handlers = _stream_handlers(logger)
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG
    assert _stream_handlers(summary_logger) == handlers


def test_separate_console_level(tmp_path):
    logger, _ = setup_logging(LoggingSettings(log_dir=tmp_path), console_level="WARNING")
    assert logger.level == logging.INFO
    assert _stream_handlers(logger)[0].level == logging.WARNING


def test_repeated_setup_does_not_stack_handlers(tmp_path):
    settings = LoggingSettings(log_dir=tmp_path, console_output=False)
    setup_logging(settings)
    logger, summary_logger = setup_logging(settings)
    assert len(logger.handlers) == 1
    assert len(summary_logger.handlers) == 1


def test_default_settings_use_platform_log_dir(tmp_path):
    with patch("meetingrisk.utils.logging.user_log_dir", return_value=str(tmp_path / "plat")):
        setup_logging()
    assert list((tmp_path / "plat").glob("meetingrisk_*.log"))


def test_config_without_console(tmp_path):
    config = build_logging_config(tmp_path / "x.log", "INFO", None)
    assert "console" not in config["handlers"]
    assert config["loggers"]["meetingrisk"]["handlers"] == ["file"]
    assert config["loggers"]["meetingrisk.summary"]["handlers"] == ["summary_file"]
