"""
logging_utils.py

Colorized console logging for the "scribble" logger, with an optional
rotating log file.
"""

__all__ = ["LOGGER_NAME", "configure_logging", "ColorFormatter"]

import os
import time
import logging
from typing import Optional, Union
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorama import Fore, Style, init as colorama_init

PathLike = Union[str, os.PathLike]
LOGGER_NAME = "scribble"


class ColorFormatter(logging.Formatter):
    """Colorized console formatter."""
    COLORS = {
        "DEBUG":    Fore.CYAN,
        "INFO":     Fore.GREEN,
        "WARNING":  Fore.YELLOW,
        "ERROR":    Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = Style.RESET_ALL
        record.process_str = f"{record.process:5d}"
        record.level_str = f"{record.levelname:<5s}"
        return (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"[{record.process_str}] "
            f"[{record.name}] "
            f"[{color}{record.level_str}{reset}] "
            f"{record.getMessage()}"
        )


def configure_logging(level: int = logging.INFO,
                      log_dir: Optional[PathLike] = None,
                      name: str = LOGGER_NAME,
                      run_prefix: str = "scribble") -> Optional[Path]:
    """Attach a colorized console handler, plus a rotating file handler when `log_dir` is set.

    Replaces any handlers previously attached to logger `name`, so calling
    it twice does not duplicate output. Returns the log file path, or None
    when logging to the console only.
    """
    colorama_init(strip=False, convert=True)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    datefmt = "%H:%M:%S"
    ch = logging.StreamHandler()
    ch.setFormatter(ColorFormatter(datefmt=datefmt))
    logger.addHandler(ch)

    if log_dir is None:
        logger.debug(f"Console logging initialized - PID {os.getpid()}")
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y-%m-%d_%H%M%S")
    log_path = log_dir / f"{run_prefix}_PID{os.getpid()}_{ts}.log"

    fh = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=5, encoding="utf-8")
    fh.setFormatter(logging.Formatter(
        "[%(asctime)s] [%(process)5d] [%(name)s] [%(levelname)-5s] %(message)s", datefmt
    ))
    logger.addHandler(fh)

    logger.info(f"Logging initialized - PID {os.getpid()}; file {log_path}")
    return log_path
