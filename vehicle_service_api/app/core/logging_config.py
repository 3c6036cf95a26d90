"""
Logging setup for the API process.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger and aligns uvicorn's own loggers with the
chosen level, so request logs and service logs share one threshold.
Calling it again is a no‑op once the root logger has handlers.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers created by uvicorn before our configuration runs.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logging once.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Extra file to write log records to, resolved against the
        current working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)
