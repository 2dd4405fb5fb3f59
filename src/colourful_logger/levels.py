# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

from enum import IntEnum
from typing import Union

from colourful_logger.utils.logger import logger


class LogLevel(IntEnum):
    """
    Severity of a log record.

    Lower values are more severe. A record is emitted when its value is less
    than or equal to the configured threshold.
    """

    FATAL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    SILLY = 5

    @property
    def label(self) -> str:
        """Lower-case tag shown in front of each record, e.g. ``info:``."""
        return f"{self.name.lower()}:"

    @property
    def colour(self) -> str:
        return _COLOURS[self]

    def allows(self, level: "LogLevel") -> bool:
        """Returns True if a record at ``level`` passes this threshold."""
        return level <= self

    @classmethod
    def parse(cls, value: Union[str, int, "LogLevel", None]) -> "LogLevel":
        """
        Parses a level name (``silly``..``fatal``) or its number (``5``..``0``).

        Matching is case-insensitive. Anything unrecognised falls back to INFO.
        """
        if isinstance(value, LogLevel):
            return value
        if value is None:
            return cls.INFO

        key = str(value).strip().lower()
        for level in cls:
            if key == level.name.lower() or key == str(level.value):
                return level

        logger.warning(f"Unrecognised log level {value!r}, falling back to info")
        return cls.INFO


_COLOURS = {
    LogLevel.FATAL: "red",
    LogLevel.ERROR: "bright_red",
    LogLevel.WARN: "bright_yellow",
    LogLevel.INFO: "bright_green",
    LogLevel.DEBUG: "bright_blue",
    LogLevel.SILLY: "bright_magenta",
}
