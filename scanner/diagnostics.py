"""
Logging setup and the process-wide warning switch.

Recoverable problems found while scanning (unreadable files, script regions
that fail to parse, glob enumeration errors) are reported through ``warn``.
Callers that want a silent run call ``set_warnings_suppressed(True)`` once;
the setting applies to every later scan in the process.
"""

import logging
import sys
from typing import Any, TextIO


DEFAULT_FORMAT = "%(levelname)s: %(message)s"

_warnings_suppressed = False


def set_warnings_suppressed(suppress: bool) -> None:
    """Turn recoverable-condition warnings off (True) or back on (False)."""
    global _warnings_suppressed
    _warnings_suppressed = bool(suppress)


def warnings_suppressed() -> bool:
    return _warnings_suppressed


def warn(logger: logging.Logger, msg: str, *args: Any) -> None:
    """Log a warning on ``logger`` unless warnings are suppressed."""
    if _warnings_suppressed:
        return
    logger.warning(msg, *args)


def configure_logging(
    level: int = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    stream: TextIO = sys.stderr,
) -> None:
    """
    Install a single stream handler on the root logger.

    Safe to call more than once; the handler is only added the first time.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)
