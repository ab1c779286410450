"""
Basic logging configuration for the application.

``setup_logging`` configures the root logger with a console handler and
an optional file handler. It only runs once per process, so repeated
calls to ``create_app`` (tests do this) don't stack handlers.
"""
import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"). Case insensitive.
        logfile: Optional path of a file to also log to.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
