# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

import inspect
import os
from types import FrameType
from typing import FrozenSet, Optional

from colourful_logger.interfaces import CallerLocator
from colourful_logger.schemas import CallSite
from colourful_logger.utils.logger import logger

# Modules whose frames sit between the application and the locator.
INTERNAL_MODULES: FrozenSet[str] = frozenset(
    {
        "colourful_logger.callers",
        "colourful_logger.formatter",
        "colourful_logger.logger",
    }
)


class StackCallerLocator(CallerLocator):
    """
    Locates the caller by walking the interpreter stack.

    The first frame outside the logger's own modules is reported. Line and
    column are 1-based; column is 0 when the interpreter does not record it.
    """

    def __init__(self, internal_modules: FrozenSet[str] = INTERNAL_MODULES) -> None:
        self.internal_modules = internal_modules

    def locate(self) -> Optional[CallSite]:
        try:
            frame = self._first_external_frame(inspect.currentframe())
            if frame is None:
                return None
            try:
                return self._describe_frame(frame)
            finally:
                del frame
        except Exception as e:
            logger.debug(f"Caller lookup failed: {e}")
            return None

    def _first_external_frame(self, frame: Optional[FrameType]) -> Optional[FrameType]:
        while frame is not None:
            if frame.f_globals.get("__name__") not in self.internal_modules:
                return frame
            frame = frame.f_back
        return None

    @staticmethod
    def _describe_frame(frame: FrameType) -> CallSite:
        info = inspect.getframeinfo(frame, context=0)

        column = 0
        positions = getattr(info, "positions", None)
        if positions is not None and positions.col_offset is not None:
            column = positions.col_offset + 1

        function = info.function
        if function == "<module>":
            function = "top level"

        return CallSite(
            file=os.path.basename(info.filename) or "unknown",
            line=info.lineno or 0,
            column=column,
            function=function,
        )


class UnknownCallerLocator(CallerLocator):
    """
    Locator for environments without stack introspection. Always unknown.
    """

    def locate(self) -> Optional[CallSite]:
        return None
