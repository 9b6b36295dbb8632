"""Root logger setup for the command-line host.

Library modules only ever call ``logging.getLogger(__name__)``; the host picks
the level and where the records go.
"""
from __future__ import annotations

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {level!r}")
    return value


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Set the root level and attach a stderr handler unless one is already attached."""
    root = logging.getLogger()
    root.setLevel(resolve_level(level))
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
