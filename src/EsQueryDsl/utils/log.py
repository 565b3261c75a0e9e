"""EsQueryDsl logging utilities.

Library modules log through the shared ``log`` object at DEBUG level only;
the CLI calls `configure_logging` once per command.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final


_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}

_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        """Attach a four-letter ``levelabbr`` to the record, then format it.

        Args:
            record: Logging record.

        Returns:
            Formatted line such as ``05-01 12:00:00 [WARN] message``.
        """
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("EsQueryDsl")
log.addHandler(logging.NullHandler())


def _stream_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    # StreamHandler defaults to stderr; stdout carries rendered bodies.
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _file_handler(action: str, log_dir: str, formatter: logging.Formatter) -> logging.Handler:
    action_dir = Path(log_dir or "log") / action
    action_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%m%d%H%M%S")
    handler = logging.FileHandler(action_dir / f"{action}_{stamp}.log", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """Replace the package logger's handlers.

    Console lines go to stderr at ``level``. With ``log_to_file`` and an
    ``action``, a DEBUG-level copy is written to
    ``<log_dir>/<action>/<action>_<mmddHHMMSS>.log``.

    Args:
        level: Level name (DEBUG, INFO, ...); unknown names fall back to INFO.
        action: CLI command name.
        log_to_file: Whether to add the file handler.
        log_dir: Base directory for log files.
    """
    console_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _AbbrevLevelFormatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    log.handlers.clear()
    log.addHandler(_stream_handler(console_level, formatter))
    if log_to_file and action:
        log.addHandler(_file_handler(action, log_dir, formatter))
    log.setLevel(min(logging.DEBUG, console_level))
    log.propagate = False
