"""
logging_utils.py
----------------

Console + file logging setup for the batch runner. Library modules only
emit records on the "cutlines" logger; handlers are installed here.
"""

__all__ = ["configure_logging", "ColorFormatter"]

import os
import time
import logging
from typing import Optional, Union
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorama import Fore, Style, init as colorama_init

PathLike = Union[str, os.PathLike]

MONO_FMT = "[%(asctime)s] [%(process)5d] [%(levelname)-5s] [%(name)s] %(message)s"
DATE_FMT = "%H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Colorized console formatter; the level tag is colored, the rest is plain."""
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
        message = (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"[{record.process:5d}] "
            f"[{color}{record.levelname:<5s}{reset}] "
            f"[{record.name}] "
            f"{record.getMessage()}"
        )
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def configure_logging(level: int = logging.INFO,
                      log_dir: Optional[PathLike] = "logs",
                      name: str = "cutlines",
                      run_prefix: str = "clip") -> Optional[Path]:
    """Configure colorized console logging plus an optional rotating log file.

    Args:
        level: Level set on the named logger.
        log_dir: Directory for the log file; None disables file logging.
        name: Logger to configure. Existing handlers on it are replaced.
        run_prefix: File name prefix, `<prefix>_PID<pid>_<timestamp>.log`.

    Returns:
        Path of the log file, or None when file logging is disabled.
    """
    colorama_init(strip=False, convert=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    ch = logging.StreamHandler()
    ch.setFormatter(ColorFormatter(datefmt=DATE_FMT))
    logger.addHandler(ch)

    log_path = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y-%m-%d_%H%M%S")
        log_path = log_dir / f"{run_prefix}_PID{os.getpid()}_{ts}.log"
        fh = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(logging.Formatter(MONO_FMT, DATE_FMT))
        logger.addHandler(fh)

    logger.info(f"Logging initialized - PID {os.getpid()}; file {log_path}")
    return log_path
