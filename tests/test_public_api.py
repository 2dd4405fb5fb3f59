# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

import colourful_logger


def test_public_api_exposure() -> None:
    """
    Verify that the core functions and classes are exposed at the package level.
    """
    expected_symbols = [
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

    for symbol in expected_symbols:
        assert hasattr(colourful_logger, symbol), f"{symbol} not exposed in colourful_logger"


def test_connectors() -> None:
    connectors = colourful_logger.Connectors()
    assert (connectors.single_line, connectors.start_line, connectors.line, connectors.end_line) == (
        "▪",
        "┏",
        "┃",
        "┗",
    )


def test_no_payload_marker() -> None:
    record = colourful_logger.LogRecord(message="m", tag="t", level=colourful_logger.LogLevel.INFO)
    assert record.payload is colourful_logger.NO_PAYLOAD
    assert not record.has_payload
    assert colourful_logger.LogRecord(message="m", tag="t", level=3, payload=None).has_payload


def test_version_exposure() -> None:
    """Verify version is exposed."""
    assert hasattr(colourful_logger, "__version__")
    assert isinstance(colourful_logger.__version__, str)
