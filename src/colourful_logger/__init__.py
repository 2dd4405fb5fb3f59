# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

"""
colourful-logger
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .callers import StackCallerLocator, UnknownCallerLocator
from .config import LoggerSettings, load_config
from .formatter import LogRecordFormatter, serialize_payload, strip_ansi
from .levels import LogLevel
from .logger import Logger
from .schemas import NO_PAYLOAD, CallSite, Connectors, LogRecord
from .sinks import ConsoleSink, FileSink

__all__ = [
    "Logger",
    "LogLevel",
    "LoggerSettings",
    "load_config",
    "LogRecord",
    "LogRecordFormatter",
    "CallSite",
    "Connectors",
    "NO_PAYLOAD",
    "StackCallerLocator",
    "UnknownCallerLocator",
    "ConsoleSink",
    "FileSink",
    "serialize_payload",
    "strip_ansi",
]
