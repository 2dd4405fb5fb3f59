# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/colourful_logger

import threading
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest

from colourful_logger.sinks import ConsoleSink, FileSink


def test_console_sink_writes_line(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleSink().write("\x1b[92mhello\x1b[0m")
    assert capsys.readouterr().out == "\x1b[92mhello\x1b[0m\n"


def test_console_sink_swallows_closed_stream(diagnostics: List[str]) -> None:
    with patch("colourful_logger.sinks.sys.stdout") as mock_stdout:
        mock_stdout.write.side_effect = ValueError("I/O operation on closed file")
        ConsoleSink().write("lost")
    assert any("Failed to write to stdout" in m for m in diagnostics)


def test_file_sink_appends_plain_text(tmp_path: Path) -> None:
    path = tmp_path / "out.log"
    path.write_text("existing\n", encoding="utf-8")

    sink = FileSink(path)
    sink.write("\x1b[2m[stamp]\x1b[0m \x1b[91merror:\x1b[0m ▪ [X] boom")
    sink.write("second\nline")

    assert path.read_text(encoding="utf-8") == "existing\n[stamp] error: ▪ [X] boom\nsecond\nline\n"


def test_file_sink_creates_file(tmp_path: Path) -> None:
    path = tmp_path / "new.log"
    FileSink(str(path)).write("first")
    assert path.read_text(encoding="utf-8") == "first\n"


def test_file_sink_reports_open_failure(tmp_path: Path, diagnostics: List[str]) -> None:
    missing_dir = tmp_path / "missing" / "out.log"
    FileSink(missing_dir).write("dropped")

    assert not missing_dir.exists()
    assert any("Failed to write to log file" in m for m in diagnostics)


def test_file_sink_directory_target(tmp_path: Path, diagnostics: List[str]) -> None:
    FileSink(tmp_path).write("dropped")
    assert any(str(tmp_path) in m for m in diagnostics)


def test_file_sink_threads_do_not_interleave(tmp_path: Path) -> None:
    path = tmp_path / "threads.log"
    sink = FileSink(path)

    def worker(n: int) -> None:
        for i in range(50):
            sink.write(f"start {n}-{i}\nend {n}-{i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 400
    for first, second in zip(lines[::2], lines[1::2]):
        assert first.startswith("start ")
        assert second == "end " + first[len("start ") :]


def test_file_sink_reports_unencodable_text(tmp_path: Path, diagnostics: List[str]) -> None:
    path = tmp_path / "surrogate.log"
    FileSink(path).write("bad \udcff name")
    assert any("Failed to write to log file" in m for m in diagnostics)
