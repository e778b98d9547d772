"""tests/unit/test_logging.py"""

import logging
import re

import pytest

from base_url.url.base import BaseUrl
from base_url.utils.logging import configure_logging, get_logger, resolve_log_level


@pytest.mark.parametrize(
    "name, level",
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("bogus", logging.INFO), ("", logging.INFO)],
)
def test_resolve_log_level(name, level):
    """Test level name resolution."""
    assert resolve_log_level(name) == level


def test_get_logger_namespacing():
    """Test that loggers live under the package logger."""
    assert get_logger("tests").name == "base_url.tests"
    assert get_logger("base_url.url").name == "base_url.url"


def test_package_logger_has_null_handler():
    """Test that the library is silent by default."""
    handlers = logging.getLogger("base_url").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_logging_file_line_format(tmp_path, restore_package_logger):
    """Test the file handler line format."""
    log_file = tmp_path / "base_url.log"
    assert configure_logging(level="CRITICAL", log_file=log_file, enable_file=True) == log_file

    get_logger("base_url.tests.logging").info("hello logging")
    for h in restore_package_logger.handlers:
        h.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert re.match(
        r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \| INFO \| base_url\.tests\.logging \| hello logging$",
        line,
    )


def test_enable_file_requires_path(restore_package_logger):
    """Test that file logging needs a destination."""
    with pytest.raises(ValueError):
        configure_logging(enable_file=True)


def test_refused_mutation_is_logged(caplog):
    """Test that refused host changes are logged at DEBUG."""
    url = BaseUrl.from_text("http://example.org/")
    with caplog.at_level(logging.DEBUG, logger="base_url"):
        with pytest.raises(ValueError):
            url.set_host("[:::1]")
    assert any("refused" in record.getMessage() for record in caplog.records)
