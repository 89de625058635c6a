"""
Test Logging Utilities
======================

Logging setup driven by loaded straps.
"""

import logging
import logging.handlers

import pytest

from straps import Straps, StrapsError, TypeConversionError
from straps.utils import get_logger, setup_logging
from straps.utils.logger import _parse_size


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_setup_logging_defaults(restore_root_logger):
    logger = setup_logging()

    assert logger.name == "straps"
    assert restore_root_logger.level == logging.INFO
    assert len(restore_root_logger.handlers) == 1


def test_setup_logging_from_straps(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "app.log"
    settings = Straps({
        "LogLevel": "DEBUG",
        "LogFile": str(log_file),
        "LogMaxFileSize": "1KB",
        "LogBackupCount": "2",
    })

    setup_logging(settings)
    get_logger("straps.test").debug("debug line")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert restore_root_logger.level == logging.DEBUG
    file_handlers = [h for h in restore_root_logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 1024
    assert file_handlers[0].backupCount == 2
    contents = log_file.read_text(encoding="utf-8")
    assert "Logging initialized" in contents
    assert "debug line" in contents


def test_setup_logging_arguments_used_when_straps_silent(restore_root_logger):
    setup_logging(Straps({"CompanyName": "NEWCO"}), log_level="WARNING")
    assert restore_root_logger.level == logging.WARNING


@pytest.mark.parametrize("size, expected", [
    ("512", 512),
    ("2KB", 2048),
    ("10MB", 10 * 1024 * 1024),
    ("1gb", 1024 ** 3),
])
def test_parse_size(size, expected):
    assert _parse_size(size) == expected


@pytest.mark.parametrize("level", ["basic_format", "root", "verbose", ""])
def test_setup_logging_rejects_unknown_level(restore_root_logger, level):
    handlers = restore_root_logger.handlers[:]

    with pytest.raises(TypeConversionError) as exc_info:
        setup_logging(Straps({"LogLevel": level}))

    assert exc_info.value.key == "LogLevel"
    assert restore_root_logger.handlers == handlers


def test_setup_logging_accepts_level_in_any_case(restore_root_logger):
    setup_logging(Straps({"LogLevel": "warning"}))
    assert restore_root_logger.level == logging.WARNING


@pytest.mark.parametrize("size", ["ten", "10XB", "inf"])
def test_setup_logging_rejects_bad_file_size(tmp_path, restore_root_logger, size):
    settings = Straps({"LogFile": str(tmp_path / "app.log"), "LogMaxFileSize": size})

    with pytest.raises(TypeConversionError) as exc_info:
        setup_logging(settings)

    assert exc_info.value.key == "LogMaxFileSize"
    assert isinstance(exc_info.value, StrapsError)
    assert not (tmp_path / "app.log").exists()
