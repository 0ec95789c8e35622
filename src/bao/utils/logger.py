# src/bao/utils/logger.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from colorama import Fore, Style

_LOGGER_NAME = "bao"
_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def log_success(message: str, logger: Optional[logging.Logger] = None) -> None:
    (logger or get_logger()).info(f"{Fore.GREEN}{message}{Style.RESET_ALL}")


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler


def setup_logger(log_file: Optional[Path] = None) -> logging.Logger:
    """
    Attach bao's handlers once per process: the console gets INFO and up,
    *log_file* (when given) gets everything down to DEBUG.
    Library modules only call get_logger(); the CLI calls this.
    """
    logger = get_logger()
    if getattr(setup_logger, "_configured", False):
        return logger

    logger.handlers.clear()
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(_handler(logging.StreamHandler(), logging.INFO))
    if log_file is not None:
        logger.addHandler(_handler(logging.FileHandler(log_file, encoding="utf-8"), logging.DEBUG))

    setup_logger._configured = True  # type: ignore[attr-defined]
    return logger
