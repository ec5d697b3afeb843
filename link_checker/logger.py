# === FILE: link_checker/logger.py ===
"""The ``LinkChecker`` logger shared by the crawler, the engine and the CLI.

Records carry the thread name so lines from the control loop and from each
``worker-N`` thread can be told apart. Importing the module only installs a
stdout handler; a log file is opened when the CLI passes ``--log-file``.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(threadName)s | %(message)s"
LOGGER_NAME: Final[str] = "LinkChecker"

# a long crawl with DEBUG on writes one line per fetched URL
_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024


def configure(
    level: Union[int, str] = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace the handlers of the ``LinkChecker`` logger.

    Output always goes to stdout; ``log_file`` adds a rotating file copy.
    The logger does not propagate, so a host application's root handlers
    never print crawl progress twice.
    """
    formatter = logging.Formatter(log_format)
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    for handler in lg.handlers:
        handler.close()
    lg.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    lg.addHandler(console)
    if log_file is not None:
        to_file = RotatingFileHandler(str(log_file), maxBytes=_MAX_LOG_BYTES, backupCount=3, encoding="utf-8")
        to_file.setFormatter(formatter)
        lg.addHandler(to_file)

    lg.propagate = False
    return lg


logger: logging.Logger = configure()

__all__ = ["logger", "configure", "DEFAULT_FORMAT", "LOGGER_NAME"]
