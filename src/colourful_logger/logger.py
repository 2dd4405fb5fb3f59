# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

from pathlib import Path
from typing import Any, Optional, Union

from colourful_logger.config import LoggerSettings, load_config
from colourful_logger.formatter import LogRecordFormatter
from colourful_logger.interfaces import CallerLocator, Sink
from colourful_logger.levels import LogLevel
from colourful_logger.schemas import NO_PAYLOAD, LogRecord
from colourful_logger.sinks import ConsoleSink, FileSink
from colourful_logger.utils.logger import logger


class Logger:
    """
    Decorative leveled logger.

    Records at or above the configured severity are rendered with a coloured
    level tag, a timestamp and box-drawing connectors, then written either to
    stdout (coloured) or appended to a log file (plain text).

    Logging never raises: serialization, caller lookup and I/O failures are
    absorbed and reported on stderr.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        file: Optional[Union[str, Path]] = None,
        caller_locator: Optional[CallerLocator] = None,
        formatter: Optional[LogRecordFormatter] = None,
    ) -> None:
        self._level = LogLevel.parse(level)
        self.formatter = formatter or LogRecordFormatter(caller_locator=caller_locator)
        self._console: Sink = ConsoleSink()
        self._file_sink: Optional[FileSink] = None
        if file is not None:
            self.set_file(file)

    @classmethod
    def from_config(cls, settings: LoggerSettings, **kwargs: Any) -> "Logger":
        return cls(level=settings.log_level, file=settings.log_file, **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Logger":
        """
        Builds a stdout logger whose level comes from ``LOG_LEVEL`` (or ``.env``).
        """
        return cls.from_config(load_config(), **kwargs)

    @property
    def log_level(self) -> LogLevel:
        return self._level

    @property
    def log_file(self) -> Optional[Path]:
        if self._file_sink is None:
            return None
        return self._file_sink.path

    def set_file(self, path: Union[str, Path]) -> None:
        """
        Routes subsequent records to ``path``.

        An empty path means stdout. ``Path("")`` normalises to ``.``, which is
        treated the same way since a directory can never be appended to.
        """
        if str(path) in ("", "."):
            self.remove_file()
            return
        self._file_sink = FileSink(path)

    def remove_file(self) -> None:
        """Routes subsequent records back to stdout."""
        self._file_sink = None

    def set_log_level(self, level: LogLevel) -> None:
        self._level = LogLevel.parse(level)

    def emit(self, record: LogRecord) -> None:
        """
        Formats and writes a record if it passes the level threshold.
        """
        if not self._level.allows(record.level):
            return

        try:
            text = self.formatter.format(record)
        except Exception:
            logger.exception("Failed to format log record")
            return

        sink = self._file_sink if self._file_sink is not None else self._console
        sink.write(text)

    def _write(self, level: LogLevel, message: str, tag: str, include_caller: bool, payload: Any) -> None:
        self.emit(
            LogRecord(
                message=str(message),
                tag=str(tag),
                level=level,
                include_caller=bool(include_caller),
                payload=payload,
            )
        )

    # Multi-line forms: optional caller line and optional payload line.

    def silly(self, message: str, tag: str, include_caller: bool = False, payload: Any = NO_PAYLOAD) -> None:
        self._write(LogLevel.SILLY, message, tag, include_caller, payload)

    def debug(self, message: str, tag: str, include_caller: bool = False, payload: Any = NO_PAYLOAD) -> None:
        self._write(LogLevel.DEBUG, message, tag, include_caller, payload)

    def info(self, message: str, tag: str, include_caller: bool = False, payload: Any = NO_PAYLOAD) -> None:
        self._write(LogLevel.INFO, message, tag, include_caller, payload)

    def warn(self, message: str, tag: str, include_caller: bool = False, payload: Any = NO_PAYLOAD) -> None:
        self._write(LogLevel.WARN, message, tag, include_caller, payload)

    def error(self, message: str, tag: str, include_caller: bool = False, payload: Any = NO_PAYLOAD) -> None:
        self._write(LogLevel.ERROR, message, tag, include_caller, payload)

    def fatal(self, message: str, tag: str, include_caller: bool = False, payload: Any = NO_PAYLOAD) -> None:
        self._write(LogLevel.FATAL, message, tag, include_caller, payload)

    # Single-line forms.

    def silly_single(self, message: str, tag: str) -> None:
        self._write(LogLevel.SILLY, message, tag, False, NO_PAYLOAD)

    def debug_single(self, message: str, tag: str) -> None:
        self._write(LogLevel.DEBUG, message, tag, False, NO_PAYLOAD)

    def info_single(self, message: str, tag: str) -> None:
        self._write(LogLevel.INFO, message, tag, False, NO_PAYLOAD)

    def warn_single(self, message: str, tag: str) -> None:
        self._write(LogLevel.WARN, message, tag, False, NO_PAYLOAD)

    def error_single(self, message: str, tag: str) -> None:
        self._write(LogLevel.ERROR, message, tag, False, NO_PAYLOAD)

    def fatal_single(self, message: str, tag: str) -> None:
        self._write(LogLevel.FATAL, message, tag, False, NO_PAYLOAD)
