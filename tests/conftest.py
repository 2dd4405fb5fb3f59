# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

from datetime import datetime
from pathlib import Path
from typing import Callable, Generator, List, Optional

import pytest

from colourful_logger.callers import UnknownCallerLocator
from colourful_logger.formatter import LogRecordFormatter
from colourful_logger.levels import LogLevel
from colourful_logger.logger import Logger
from colourful_logger.utils.logger import logger

FIXED_TIME = datetime(2024, 5, 17, 9, 30, 5)
FIXED_STAMP = "[2024-05-17 09:30:05]"


def fixed_clock() -> datetime:
    return FIXED_TIME


# --- Fixtures ---


@pytest.fixture
def formatter() -> LogRecordFormatter:
    """Formatter with a frozen clock and no stack inspection."""
    return LogRecordFormatter(caller_locator=UnknownCallerLocator(), clock=fixed_clock)


@pytest.fixture
def make_logger() -> Callable[..., Logger]:
    """
    Factory for loggers with a frozen clock.
    Caller lookup uses the real stack walker unless a locator is passed.
    """

    def _make(
        level: LogLevel = LogLevel.SILLY,
        file: Optional[Path] = None,
        **kwargs: object,
    ) -> Logger:
        log = Logger(level, file, **kwargs)  # type: ignore[arg-type]
        log.formatter.clock = fixed_clock
        return log

    return _make


@pytest.fixture
def diagnostics() -> Generator[List[str], None, None]:
    """Collects messages sent to the internal loguru logger."""
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
