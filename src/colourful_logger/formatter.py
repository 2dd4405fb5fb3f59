# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

import re
from datetime import datetime
from typing import Any, Callable, List, Optional

from pydantic import TypeAdapter
from rich.color import ColorSystem
from rich.style import Style

from colourful_logger.callers import StackCallerLocator
from colourful_logger.interfaces import CallerLocator
from colourful_logger.levels import LogLevel
from colourful_logger.schemas import Connectors, LogRecord
from colourful_logger.utils.logger import logger

ANSI_ESCAPE = re.compile(r"\x1b[@-_][0-?]*[ -/]*[@-~]")
SERIALIZATION_ERROR = "Serialization error"
TIMESTAMP_FORMAT = "[%Y-%m-%d %H:%M:%S]"
TAG_WIDTH = 6
TIMESTAMP_WIDTH = 21

DIM = Style(dim=True)
CALLER_STYLE = Style(dim=True, italic=True)

_payload_adapter: TypeAdapter[Any] = TypeAdapter(Any)


def paint(text: str, style: Style) -> str:
    """Wraps text in the ANSI codes for ``style`` (16-colour palette)."""
    return style.render(text, color_system=ColorSystem.STANDARD)


def strip_ansi(text: str) -> str:
    """Removes every ANSI escape sequence from text."""
    return ANSI_ESCAPE.sub("", text)


def serialize_payload(payload: Any) -> str:
    """
    Serializes a payload to compact JSON.

    Pydantic models, dataclasses and the usual builtins are supported. Anything
    that cannot be serialized becomes the ``Serialization error`` placeholder.
    """
    try:
        return _payload_adapter.dump_json(payload).decode("utf-8")
    except Exception as e:
        logger.warning(f"Could not serialize payload of type {type(payload).__name__}: {e}")
        return SERIALIZATION_ERROR


class LogRecordFormatter:
    """
    Renders a LogRecord into its display lines.

    Output always carries colour codes; sinks that need plain text strip them.
    """

    def __init__(
        self,
        caller_locator: Optional[CallerLocator] = None,
        clock: Callable[[], datetime] = datetime.now,
        connectors: Optional[Connectors] = None,
    ) -> None:
        self.caller_locator = caller_locator or StackCallerLocator()
        self.clock = clock
        self.connectors = connectors or Connectors()

    def format(self, record: LogRecord) -> str:
        if not record.is_multi_line:
            return self._head_line(record, self.connectors.single_line)

        lines: List[str] = [self._head_line(record, self.connectors.start_line)]

        if record.include_caller:
            connector = self.connectors.line if record.has_payload else self.connectors.end_line
            lines.append(f"{self._indent()}{connector} {paint(self._caller(), CALLER_STYLE)}")

        if record.has_payload:
            body = serialize_payload(record.payload)
            lines.append(f"{self._indent()}{self.connectors.end_line} {paint('[1]', DIM)} {paint(body, DIM)}")

        return "\n".join(lines)

    def timestamp(self) -> str:
        return paint(self.clock().strftime(TIMESTAMP_FORMAT), DIM)

    @staticmethod
    def level_tag(level: LogLevel) -> str:
        return paint(level.label.ljust(TAG_WIDTH), Style(color=level.colour))

    def _head_line(self, record: LogRecord, connector: str) -> str:
        colour = Style(color=record.level.colour)
        return (
            f"{self.timestamp()} {self.level_tag(record.level)} {connector} "
            f"[{paint(record.tag, colour)}] {paint(record.message, colour)}"
        )

    def _caller(self) -> str:
        site = self.caller_locator.locate()
        if site is None:
            return "unknown"
        return site.describe()

    @staticmethod
    def _indent() -> str:
        return " " * TIMESTAMP_WIDTH + " " + " " * TAG_WIDTH + " "
