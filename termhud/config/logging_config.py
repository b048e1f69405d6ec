"""Logging configuration and setup."""
import logging
import logging.handlers
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class LoggingConfig:
    """Log level and destination; no file means logs are discarded."""
    level: str = "WARNING"
    file: Optional[str] = None

    def __post_init__(self):
        """Fix invalid values."""
        self.level = str(self.level).upper()
        if self.file is not None and not isinstance(self.file, str):
            raise TypeError(f"logging.file must be a path string, not {self.file!r}")
        if not isinstance(logging.getLevelName(self.level), int):
            self.level = "WARNING"


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """Configure the root logger.

    The overlay owns the terminal, so nothing is ever logged to a stream:
    records go to a rotating file when one is given and are dropped otherwise.
    """
    # Raises OSError before touching the root logger if the file cannot be opened
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8"
        )
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    else:
        handler = logging.NullHandler()

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()
    logger.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return logger
