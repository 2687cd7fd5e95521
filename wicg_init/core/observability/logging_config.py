"""
Logging configuration — set up once by the CLI entrypoint.

Every module does ``logger = logging.getLogger(__name__)`` and inherits
this config.  Progress the user is meant to read goes through click;
logging is the trace behind it.

Level precedence:
    --debug / --verbose / --quiet  >  WICG_LOG_LEVEL  >  WARNING

Optional file output via WICG_LOG_FILE / WICG_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import sys

_FMT_PLAIN = "%(message)s"
_FMT_TRACE = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers for this process.

    The console shows bare messages at WARNING and above, and timestamped
    records with logger names when a lower level is asked for.  The log
    file, if any, always gets the timestamped form.
    """
    console_level = _parse_level(level)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(
        logging.Formatter(_FMT_PLAIN)
        if console_level >= logging.WARNING
        else logging.Formatter(_FMT_TRACE, datefmt="%H:%M:%S")
    )
    handlers: list[logging.Handler] = [console]

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(_parse_level(log_file_level or level))
        fh.setFormatter(logging.Formatter(_FMT_TRACE))
        handlers.append(fh)

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(min(h.level for h in handlers))


def _parse_level(level: str | None) -> int:
    """Level name to number; empty or unknown names mean WARNING."""
    return logging.getLevelNamesMapping().get((level or "").upper(), logging.WARNING)
