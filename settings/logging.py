"""Logging configuration."""

import logging
import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

# Third-party libraries that log through the stdlib
_ROUTED_LOGGERS = ("httpx", "httpcore")


class _InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, http_level: str = "WARNING"):
    """Configure loguru sinks and route HTTP client logs into them.

    Console output goes to stderr at ``level``. With ``to_file`` a daily
    rotated log is kept under ``LOG_DIR`` at DEBUG.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(exist_ok=True)
        logger.add(
            LOG_DIR / "flip_ledger_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )

    for name in _ROUTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [_InterceptHandler()]
        std_logger.setLevel(http_level)
        std_logger.propagate = False

    logger.info("Logging configured (level={}, file={})", level, to_file)
    return logger
