from __future__ import annotations

from .config import LoggingConfig
from .core import (
    _QUEUE_LISTENER_ATTR,
    attach_queue_handler,
    configure_logging,
    get_default_gui_log_path,
    get_logger,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "attach_queue_handler",
    "configure_logging",
    "get_logger",
    "get_default_gui_log_path",
]
