from __future__ import annotations

"""
Logging Configuration Models.

Holds the settings used to bootstrap the logging subsystem and the map
from textual severity names to the numeric levels of the 'logging' module.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the logging bootstrap.

    Attributes:
        level: Minimum severity level to capture.
        console: Emit records on stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size threshold of a log segment before rotation.
        backup_count: Number of rotated segments kept on disk.
        console_fmt: Format of terminal records.
        file_fmt: Format of file records.
        datefmt: Timestamp format of file records.
        use_queue: Route records through a QueueListener thread. Interactive
            terminals disable it so log lines and prompts stay ordered.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024  # 1MB
    backup_count: int = 2

    console_fmt: str = "%(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    use_queue: bool = True
