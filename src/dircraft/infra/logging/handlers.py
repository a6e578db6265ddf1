from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Builds the concrete handlers used by the logging core and tags them, so a
reconfiguration only removes handlers this package attached itself and
leaves those installed by the host application or by pytest alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from dircraft.infra.fs import safe_mkdir

_HANDLER_TAG_ATTR: str = "_dircraft_handler"


def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by this package."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """Return True if the handler carries our tag."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_console_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    """Build a tagged stderr handler."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    _tag_handler(sh)
    return sh


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Build a tagged RotatingFileHandler.

    A log file that cannot be opened must not stop the application, so the
    failure is reported on stderr and None is returned instead.

    Args:
        log_file: Target path for the log file.
        level_int: Numeric logging level.
        formatter: Formatter applied to file records.
        max_bytes: Rollover threshold in bytes.
        backup_count: Number of rotated files to keep.

    Returns:
        Optional[RotatingFileHandler]: The handler, or None on I/O failure.
    """
    ok, err = safe_mkdir(os.path.dirname(os.path.abspath(log_file)))
    if not ok:
        sys.stderr.write(f"WARNING: Cannot create log directory for '{log_file}': {err}\n")
        return None

    try:
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh
