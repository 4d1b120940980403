"""
logger.py: Console logging for the game.
"""

import logging
import sys
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """One line per record: time, level initial, module, message."""

    COLORS = {
        "DEBUG": "\033[90m",
        "INFO": "\033[36m",
        "WARNING": "\033[33m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("flappy.", "")
        reset = self.RESET if color else ""
        return f"{color}{ts} [{record.levelname[0]}] {name}: {record.getMessage()}{reset}"


def setup_logging(level: str = "info") -> logging.Logger:
    """Send flappy.* records to stderr at ``level`` and return the package logger."""
    logger = logging.getLogger("flappy")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    logger.addHandler(console)
    logger.propagate = False
    return logger
