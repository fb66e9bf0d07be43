"""
Logging configuration.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable:
    - all autocare logs pass
    - uvicorn access lines only at WARNING+
    - any other third-party logger only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "autocare" or name.startswith("autocare."):
            return True
        if name == "uvicorn.access":
            return record.levelno >= logging.WARNING
        if name.startswith("uvicorn"):
            return record.levelno >= logging.INFO
        return record.levelno >= logging.ERROR


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger with a filtered console handler and, when
    `log_file` is given, a file handler that receives everything.

    Call this once, before the first log line.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(getattr(logging, level.upper(), logging.INFO))
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
