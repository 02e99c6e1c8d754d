"""
Logging system for availability conditions.
Provides human-readable logs on the console and, optionally, in a daily file.

Loggers are addressed the way the plugin names them: a component
("availability_adler") plus a subcomponent ("condition", "restore", ...),
which map onto the stdlib logger "availability_adler.condition".
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "availability_adler"


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        # Color a copy; other handlers on the same record must see plain text
        colored = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        colored.levelname = f"{color}{record.levelname}{Colors.RESET}"
        colored.msg = f"{color}{record.getMessage()}{Colors.RESET}"
        colored.args = None
        return super().format(colored)


def _configure_root(log_dir: str, log_level: str) -> logging.Logger:
    """Attach console (and optional file) handlers to the package logger."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ColoredFormatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S"
    ))
    logger.addHandler(console_handler)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        log_file = path / f"availability_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

    return logger


class AvailabilityLogger:
    """
    Component logger.

    Thin wrapper around a stdlib logger named "<component>.<subcomponent>"
    so call sites read like the plugin's own logging calls.
    """

    def __init__(self, component: str, subcomponent: str):
        self.component = component
        self.subcomponent = subcomponent
        if component == ROOT_LOGGER_NAME:
            name = f"{ROOT_LOGGER_NAME}.{subcomponent}"
        else:
            name = f"{ROOT_LOGGER_NAME}.{component}.{subcomponent}"
        self.logger = logging.getLogger(name)

    def debug(self, msg: str, *args, **kwargs):
        """Log debug message."""
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        """Log info message."""
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message."""
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        """Log error message."""
        self.logger.error(msg, *args, **kwargs)


# Set once the package logger has handlers
_configured: bool = False


def setup_logger(log_dir: Optional[str] = None, log_level: Optional[str] = None) -> logging.Logger:
    """
    (Re)initialize package logging.

    Arguments left as None fall back to the loaded configuration.
    """
    global _configured
    if log_dir is None or log_level is None:
        from ..config import get_config
        log_config = get_config().log
        log_dir = log_config.log_dir if log_dir is None else log_dir
        log_level = log_config.level if log_level is None else log_level
    logger = _configure_root(log_dir, log_level)
    _configured = True
    return logger


def get_logger(component: str = ROOT_LOGGER_NAME, subcomponent: str = "general") -> AvailabilityLogger:
    """Get a component logger, configuring package logging on first use."""
    if not _configured:
        setup_logger()
    return AvailabilityLogger(component, subcomponent)
