# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from colourful_logger.levels import LogLevel
from colourful_logger.utils.logger import logger

LOG_LEVEL_ENV = "LOG_LEVEL"


class LoggerSettings(BaseModel):
    """
    Startup configuration for a Logger.

    Produced once by ``load_config`` and never mutated; runtime changes go
    through the Logger's setters instead.
    """

    model_config = ConfigDict(frozen=True)

    log_level: LogLevel = LogLevel.INFO
    log_file: Optional[str] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> LogLevel:
        return LogLevel.parse(value)

    @field_validator("log_file")
    @classmethod
    def _empty_file_is_stdout(cls, value: Optional[str]) -> Optional[str]:
        return value or None


def load_config(env_file: Optional[Path] = None) -> LoggerSettings:
    """
    Builds LoggerSettings from the environment.

    A ``.env`` file is loaded first (``env_file`` if given, otherwise the
    nearest one found from the working directory). Variables already present
    in the environment are not overridden.
    """
    if env_file is not None:
        load_dotenv(dotenv_path=env_file, override=False)
    else:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    raw_level = os.environ.get(LOG_LEVEL_ENV)
    settings = LoggerSettings(log_level=LogLevel.parse(raw_level))
    logger.debug(f"Loaded logger settings: level={settings.log_level.name.lower()}")
    return settings
