"""Tests for logging configuration."""

import logging
from pathlib import Path

import pytest
from loguru import logger

from runonce.config.models import LoggingConfig
from runonce.utils.logging import configure_logging


class TestConfigureLogging:
    """Test configure_logging."""

    def test_console_respects_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Messages below the configured level should be dropped."""
        configure_logging(LoggingConfig(level="WARNING"))

        logger.info("quiet message")
        logger.warning("loud message")

        err = capsys.readouterr().err
        assert "loud message" in err
        assert "quiet message" not in err

    def test_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON format should serialize records."""
        configure_logging(LoggingConfig(level="INFO", format="json"))

        logger.info("structured message")

        err = capsys.readouterr().err
        assert '"text"' in err
        assert "structured message" in err

    def test_intercepts_stdlib_logging(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Standard library records should be routed through loguru."""
        configure_logging(LoggingConfig(level="INFO"))

        logging.getLogger("some.library").warning("from stdlib")

        assert "from stdlib" in capsys.readouterr().err

    def test_file_sink(self, tmp_path: Path) -> None:
        """A configured file should receive log records."""
        log_file = tmp_path / "runonce.log"

        configure_logging(LoggingConfig(level="INFO", file=log_file))
        logger.info("to file")

        assert log_file.exists()

    def test_verbose_overrides_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        """verbose should enable debug output."""
        configure_logging(LoggingConfig(level="ERROR"), verbose=True)

        logger.debug("debug details")

        assert "debug details" in capsys.readouterr().err
