from __future__ import annotations

"""
Logging Core Orchestrator.

Owns the idempotent lifecycle of the logging subsystem. By default a
single QueueHandler sits on the root logger and a QueueListener thread
feeds the console and file handlers, so file I/O stays off the GUI main
loop and off the build worker. Interactive terminals can opt out and get
the handlers attached directly.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from dircraft.infra.fs import get_user_data_dir
from dircraft.infra.logging.config import _LEVEL_MAP, LoggingConfig
from dircraft.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_dircraft_configured"
_QUEUE_LISTENER_ATTR: str = "_dircraft_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_gui_log_path(file_name: str = "dircraft.log") -> str:
    """Location of the GUI log: <user data dir>/logs/<file_name>."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Install DirCraft's handlers on the root logger.

    Only the first call has an effect; pass force=True to tear down what a
    previous call installed and start over. If anything goes wrong the
    root logger is left with a plain stderr handler.

    Args:
        cfg: Logging settings.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level = _parse_level(cfg.level)
        root.setLevel(level)
        _remove_our_handlers(root)
        _stop_existing_listener(root)

        sinks = _build_sinks(cfg, level)
        if not sinks:
            return root

        if cfg.use_queue:
            _install_queue(root, sinks)
        else:
            for sink in sinks:
                root.addHandler(sink)

        setattr(root, _CONFIGURED_FLAG_ATTR, True)
        return root

    except Exception as e:
        _remove_our_handlers(root)
        fallback = logging.StreamHandler(sys.stderr)
        fallback.setFormatter(logging.Formatter("FALLBACK | %(levelname)s | %(message)s"))
        _tag_handler(fallback)
        root.addHandler(fallback)
        root.warning(f"Logging setup failed ({e}). Using plain console output.")
        return root


def attach_queue_handler(target: "queue.Queue[logging.LogRecord]", level: int = logging.INFO) -> QueueHandler:
    """
    Copy root records of at least `level` into `target`.

    The GUI drains this queue from its main loop to fill the log console.
    """
    handler = QueueHandler(target)
    handler.setLevel(level)
    _tag_handler(handler)
    logging.getLogger().addHandler(handler)
    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _build_sinks(cfg: LoggingConfig, level: int) -> List[logging.Handler]:
    """Create the console and file handlers requested by cfg."""
    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(_create_console_handler(level, logging.Formatter(cfg.console_fmt)))
    if cfg.log_file:
        file_sink = _create_rotating_file_handler(
            cfg.log_file,
            level,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if file_sink is not None:
            sinks.append(file_sink)
    return sinks


def _install_queue(root: logging.Logger, sinks: List[logging.Handler]) -> None:
    """Put a QueueHandler on root and start a listener draining into sinks."""
    records: "queue.Queue[logging.LogRecord]" = queue.Queue()
    front = QueueHandler(records)
    _tag_handler(front)

    listener = QueueListener(records, *sinks, respect_handler_level=True)
    listener.start()
    root.addHandler(front)
    setattr(root, _QUEUE_LISTENER_ATTR, listener)

    # Pending records are flushed at interpreter exit
    atexit.register(_safe_stop_listener, listener)


def _parse_level(level: str) -> int:
    """Map a level name to its numeric value; unknown or empty means INFO."""
    name = str(level or "").strip().upper()
    return _LEVEL_MAP.get(name, logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close handlers carrying our tag; others are left alone."""
    for handler in [h for h in root.handlers if _is_our_handler(h)]:
        root.removeHandler(handler)
        handler.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    _safe_stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener unless it is missing or already stopped."""
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
