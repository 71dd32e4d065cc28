# core/logging.py
# Loggers for the core utilities, the policies and the runner.
# Every logger is a child of "rlpolicy"; only that parent owns a handler, so a
# level or stream change made there applies to the whole package.
from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO, Union

ROOT_NAME = "rlpolicy"
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def parse_level(level: Union[int, str]) -> int:
    """Level number for an int or a level name such as "info"."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level {level!r}")
    return value


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
        root.propagate = False
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger "rlpolicy.<name>" (name is typically __name__)."""
    root = _root()
    return root.getChild(name) if name else root


def set_log_level(level: Union[int, str]) -> None:
    _root().setLevel(parse_level(level))


def configure_logging(level: Union[int, str] = logging.WARNING,
                      format_string: Optional[str] = None,
                      stream: Optional[TextIO] = None) -> None:
    """Send package logs to stream (stderr by default) at the given level."""
    level = parse_level(level)
    root = _root()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
