# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import sys
from enum import Enum
from functools import total_ordering
from typing import TextIO

LOGGER_NAME = "jarmain"


@total_ordering
class LogLevel(Enum):
    """The `logging` levels selectable from the command line, ordered from most to least verbose."""

    DEBUG = ("debug", logging.DEBUG)
    INFO = ("info", logging.INFO)
    WARN = ("warn", logging.WARN)
    ERROR = ("error", logging.ERROR)

    _level: int

    def __new__(cls, value: str, level: int) -> LogLevel:
        member: LogLevel = object.__new__(cls)
        member._value_ = value
        member._level = level
        return member

    @property
    def level(self) -> int:
        return self._level

    def log(self, logger: logging.Logger, *args, **kwargs) -> None:
        logger.log(self._level, *args, **kwargs)

    def set_level_for(self, logger: logging.Logger) -> None:
        logger.setLevel(self.level)

    def __lt__(self, other):
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self._level < other._level


def initialize_logging(
    level: LogLevel = LogLevel.WARN, stream: TextIO | None = None
) -> logging.Logger:
    """Route `jarmain.*` log records to `stream` (stderr by default) at `level`.

    Repeated calls adjust the level and stream and do not stack handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level.set_level_for(logger)
    logger.propagate = False
    stream = stream or sys.stderr
    handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    if handlers:
        for handler in handlers:
            handler.setStream(stream)
    else:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter("%(levelname)s] %(message)s"))
        logger.addHandler(handler)
    return logger
