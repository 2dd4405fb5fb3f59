# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

from typing import Optional, Protocol

from colourful_logger.schemas import CallSite


class CallerLocator(Protocol):
    """
    Protocol for finding the call site of a logging call.
    """

    def locate(self) -> Optional[CallSite]:
        """
        Returns the call site, or None when it cannot be determined.
        """
        ...


class Sink(Protocol):
    """
    Protocol for a destination of formatted records.
    """

    def write(self, text: str) -> None:
        """
        Writes one formatted record. Must not raise.
        """
        ...
