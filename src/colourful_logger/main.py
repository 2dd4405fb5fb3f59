# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

import json
import sys
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from loguru import logger
from pydantic import BaseModel

from colourful_logger import __version__
from colourful_logger.levels import LogLevel
from colourful_logger.logger import Logger
from colourful_logger.schemas import NO_PAYLOAD


class DemoPayload(BaseModel):
    field1: str
    field2: int


app = typer.Typer(
    name="colourful-logger",
    help="CLI for colourful-logger: decorative console and file logging.",
    add_completion=False,
)


def _parse_payload(raw: Optional[str]) -> Any:
    if raw is None:
        return NO_PAYLOAD
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@app.command()
def demo(
    file: Annotated[Optional[Path], typer.Option("--file", "-f", help="Append to this file instead of stdout")] = None,
    level: Annotated[str, typer.Option("--level", "-l", help="Minimum level (silly..fatal or 5..0)")] = "silly",
) -> None:
    """
    Emit one record of every kind at every level.
    """
    try:
        log = Logger(LogLevel.parse(level), file)

        log.info("Info Message!", "Main", True, DemoPayload(field1="some random value 1", field2=540))
        log.debug("Debug Message!", "Main", False, DemoPayload(field1="some random value 2", field2=69))
        log.error("Error Message!", "Main", False, DemoPayload(field1="some random value 3", field2=5))
        log.fatal("Fatal Message!", "Main", False, DemoPayload(field1="some random value 4", field2=3495843))
        log.silly("Silly Message!", "Main", False, DemoPayload(field1="some random value 5", field2=594834594))
        log.warn("Warn Message!", "Main", False, "Joe")

        log.info_single("Single Info Message!", "Main")
        log.debug_single("Single Debug Message!", "Main")
        log.error_single("Single Error Message!", "Main")
        log.fatal_single("Single Fatal Message!", "Main")
        log.silly_single("Single Silly Message!", "Main")
        log.warn_single("Single Warn Message!", "Main")
    except Exception:
        logger.exception("Demo Failed")
        sys.exit(1)


@app.command("log")
def log_message(
    message: Annotated[str, typer.Argument(help="Message to log")],
    tag: Annotated[str, typer.Option("--tag", "-t", help="Tag shown in brackets")] = "Main",
    level: Annotated[str, typer.Option("--level", "-l", help="Level of the record (silly..fatal)")] = "info",
    threshold: Annotated[
        Optional[str], typer.Option("--threshold", help="Minimum level; defaults to LOG_LEVEL")
    ] = None,
    file: Annotated[Optional[Path], typer.Option("--file", "-f", help="Append to this file instead of stdout")] = None,
    at: Annotated[bool, typer.Option("--at", help="Include the caller location")] = False,
    payload: Annotated[Optional[str], typer.Option("--payload", "-p", help="JSON payload to attach")] = None,
) -> None:
    """
    Emit a single record.
    """
    try:
        log = Logger.from_env() if threshold is None else Logger(LogLevel.parse(threshold))
        if file is not None:
            log.set_file(file)

        record_level = LogLevel.parse(level)
        method = getattr(log, record_level.name.lower())
        method(message, tag, at, _parse_payload(payload))
    except Exception:
        logger.exception("Logging Failed")
        sys.exit(1)


@app.command()
def version() -> None:
    """Print the version of colourful-logger."""
    typer.echo(f"colourful-logger v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
