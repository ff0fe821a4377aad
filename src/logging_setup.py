"""Logging configuration for the interactive console.

The menu owns stdout, so log records go to stderr and, optionally, to a
file that keeps everything at DEBUG.
"""
from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import List, Optional

APP_LOGGERS = ("store", "cli", "main", "config", "__main__")

_installed: List[logging.Handler] = []


class _ConsoleNoiseFilter(logging.Filter):
    """Let app records through at the handler level; others only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.split('.', 1)[0] in APP_LOGGERS:
            return True
        return record.levelno >= logging.ERROR


def setup_logging(*, console_level: int = logging.WARNING, log_file: Optional[Path] = None,
                  file_level: int = logging.DEBUG) -> None:
    """Configure the root logger. Call once, before the first log call.

    Calling again replaces the handlers installed by the previous call and
    leaves any other handlers on the root logger alone.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    while _installed:
        h = _installed.pop()
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)
    _installed.append(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)
        _installed.append(fh)

    # route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
