"""Tests for logging configuration."""

import logging
from pathlib import Path

import pytest

from fontprofile.utils.logging import BuildLogger, configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the default console handler back after each test."""
    yield
    configure_logging()


def stream_handlers() -> list[logging.Handler]:
    return [
        handler
        for handler in logging.getLogger().handlers
        if type(handler) is logging.StreamHandler
    ]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_no_console_handler(self):
        configure_logging()
        with_console = len(stream_handlers())
        configure_logging(console=False)
        assert len(stream_handlers()) == with_console - 1

    def test_file_only(self, tmp_path: Path):
        log_file = tmp_path / "build.log"
        logger = configure_logging(log_file=log_file, console=False)
        logger.info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "written" in log_file.read_text(encoding="utf-8")


class TestBuildLogger:
    """Tests for BuildLogger statistics."""

    def test_reset(self):
        build_logger = BuildLogger(configure_logging(console=False))
        build_logger.log_fonts_discovered([Path("a.ttf"), Path("b.otf")])
        assert build_logger.stats.fonts_found == 2
        build_logger.reset()
        assert build_logger.stats.fonts_found == 0
