"""Logging configuration using loguru.

Log records always go to stderr so the tables printed by the CLI on
stdout can be piped into other tools.
"""

import logging
import sys

from loguru import logger

from runonce.config.models import LoggingConfig

CONSOLE_FORMAT = (
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Route standard library logging through loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller frame (skip logging internals)
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(config: LoggingConfig, *, verbose: bool = False) -> None:
    """
    Configure loguru logger based on configuration.

    Args:
        config: LoggingConfig with level, format, and file settings.
        verbose: Log at DEBUG regardless of the configured level.
    """
    level = "DEBUG" if verbose else config.level
    serialize = config.format == "json"
    fmt = "{message}" if serialize else CONSOLE_FORMAT

    logger.remove()
    # colorize=None lets loguru color only when stderr is a terminal
    logger.add(sys.stderr, format=fmt, level=level, serialize=serialize, colorize=None)

    if config.file:
        logger.add(
            config.file,
            format=fmt,
            level=level,
            serialize=serialize,
            rotation=config.rotation,
            retention=config.retention,
            compression="gz",
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    logger.debug("Logging configured: level={} format={}", level, config.format)
