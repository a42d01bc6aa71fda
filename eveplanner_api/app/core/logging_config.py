"""
Logging setup for the API process.

``setup_logging`` attaches a console handler, and a rotating file
handler when a log file is configured, to the root logger.  Records are
formatted as ``timestamp [LEVEL] logger: message``.  Only the first call
in a process has any effect.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty below WARNING.
NOISY_LOGGERS = ("multipart", "python_multipart")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``), case
        insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File to write records to in addition to the console.  Rotated
        at 5 MB, three backups kept.  Relative paths are resolved
        against the current working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = RotatingFileHandler(
            Path(logfile).resolve(),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
