# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from colourful_logger.levels import LogLevel


class _NoPayload:
    """Marker for a record without a payload; ``None`` is a valid payload."""

    _instance: Optional["_NoPayload"] = None

    def __new__(cls) -> "_NoPayload":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_PAYLOAD"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_NoPayload":
        return self

    def __deepcopy__(self, memo: Any) -> "_NoPayload":
        return self


NO_PAYLOAD: Any = _NoPayload()


class Connectors(BaseModel):
    """
    Box-drawing glyphs framing a record.
    """

    model_config = ConfigDict(frozen=True)

    single_line: str = "▪"
    start_line: str = "┏"
    line: str = "┃"
    end_line: str = "┗"


class CallSite(BaseModel):
    """
    Where a logging call was made from.
    """

    model_config = ConfigDict(frozen=True)

    file: str
    line: int = 0
    column: int = 0
    function: str = "top level"

    def describe(self) -> str:
        return f"at {self.file}:{self.line}:{self.column} [{self.function}]"


class LogRecord(BaseModel):
    """
    A single logging request, built per call and discarded after emission.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    tag: str
    level: LogLevel
    include_caller: bool = False
    payload: Any = NO_PAYLOAD

    @property
    def has_payload(self) -> bool:
        return self.payload is not NO_PAYLOAD

    @property
    def is_multi_line(self) -> bool:
        return self.include_caller or self.has_payload
