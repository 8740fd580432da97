"""Tests for the logging setup."""

import logging
from pathlib import Path

from rich.logging import RichHandler

from logstats.logger import setup_logger


class TestSetupLogger:
    """Tests for the setup_logger function."""

    def test_creates_logger(self) -> None:
        """Logger is created with the given name."""
        logger = setup_logger("test_logger_create")
        assert logger.name == "test_logger_create"

    def test_default_level_from_config(self) -> None:
        """Default level comes from the settings."""
        logger = setup_logger("test_level_default")
        assert logger.level == logging.WARNING

    def test_custom_level(self) -> None:
        """Custom level string sets the numeric level."""
        logger = setup_logger("test_level_debug", level="debug")
        assert logger.level == logging.DEBUG

    def test_rich_handler_added(self) -> None:
        """Console output goes through a RichHandler."""
        logger = setup_logger("test_rich_handler")
        assert any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_file_handler_created(self, tmp_path: Path) -> None:
        """File handler is created when log_file is provided."""
        log_file = tmp_path / "logs" / "test.log"
        logger = setup_logger("test_file_handler", log_file=str(log_file))
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert log_file.parent.exists()

    def test_repeat_setup_updates_level_only(self) -> None:
        """A second call keeps the handlers and applies the new level."""
        logger = setup_logger("test_repeat")
        handler_count = len(logger.handlers)
        again = setup_logger("test_repeat", level="INFO")
        assert again is logger
        assert len(again.handlers) == handler_count
        assert again.level == logging.INFO

    def test_file_format(self, tmp_path: Path) -> None:
        """File output uses the pipe separated format."""
        log_file = tmp_path / "format.log"
        logger = setup_logger("test_format", log_file=str(log_file), level="INFO")
        logger.info("test message")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "| test_format | INFO | test message" in content

    def test_new_log_file_replaces_previous(self, tmp_path: Path) -> None:
        """Switching to another log file closes and detaches the old handler."""
        logger = setup_logger("test_file_switch", log_file=str(tmp_path / "first.log"))
        first = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))

        setup_logger("test_file_switch", log_file=str(tmp_path / "second.log"))
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert Path(file_handlers[0].baseFilename) == (tmp_path / "second.log").absolute()
        assert first not in logger.handlers
        assert first.stream is None

    def test_same_log_file_keeps_handler(self, tmp_path: Path) -> None:
        """Repeating the current log file reuses its handler."""
        log_file = str(tmp_path / "same.log")
        logger = setup_logger("test_file_same", log_file=log_file)
        first = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))

        setup_logger("test_file_same", log_file=log_file)
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert file_handlers == [first]
