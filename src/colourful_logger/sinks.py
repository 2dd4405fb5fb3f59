# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

import sys
import threading
from pathlib import Path
from typing import Union

from colourful_logger.formatter import strip_ansi
from colourful_logger.interfaces import Sink
from colourful_logger.utils.logger import logger


class ConsoleSink(Sink):
    """
    Writes colourised records to standard output, one write per record.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def write(self, text: str) -> None:
        # Resolved per call so redirected or captured stdout is honoured.
        stream = sys.stdout
        try:
            with self._lock:
                stream.write(text + "\n")
                stream.flush()
        except (OSError, ValueError) as e:
            logger.error(f"Failed to write to stdout: {e}")


class FileSink(Sink):
    """
    Appends plain-text records to a file.

    The file is opened and closed for every record, so it can be moved or
    removed between calls. Colour codes are stripped before writing.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def write(self, text: str) -> None:
        try:
            with self._lock:
                with open(self.path, "a", encoding="utf-8") as handle:
                    handle.write(strip_ansi(text) + "\n")
        except (OSError, ValueError) as e:
            logger.error(f"Failed to write to log file {self.path}: {e}")
