"""
Logging configuration using loguru.

Library modules log through ``loguru.logger`` directly; applications call
``setup_logging()`` (or ``setup_logging_from_config()``) once at startup.
"""

import os
import sys

from loguru import logger


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Replace loguru's default sink with stderr and an optional rotating file.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to log file. If None, only logs to stderr.
        fmt: Loguru format string for the console sink.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=fmt)

    if log_file:
        logger.add(
            log_file,
            level=level.upper(),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}",
            rotation=rotation,
            retention=retention,
        )


def setup_logging_from_config(config) -> None:
    """Configure logging from the ``logging`` section of a Config.

    A relative ``logging.file`` is placed under ``paths.log_dir``.
    """
    log_file = config.get("logging.file")
    if log_file and not os.path.isabs(os.path.expanduser(log_file)):
        log_file = os.path.join(os.path.expanduser(config.get("paths.log_dir") or "."), log_file)
    setup_logging(
        level=config.get("logging.level", "WARNING") or "WARNING",
        log_file=log_file,
    )
