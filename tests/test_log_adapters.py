from __future__ import annotations

import logging

import pytest

from taskhub.infra.log_adapters import (
    ConsoleLoggerAdapter,
    ExternalLogger,
    FileLoggerAdapter,
    LoggerAdapter,
)


def test_logger_adapter_routes_to_external_logger(caplog) -> None:
    adapter = LoggerAdapter(ExternalLogger("test.external"))

    with caplog.at_level(logging.INFO, logger="test.external"):
        adapter.log("hello")
        adapter.log_with_level("warn", "careful")
        adapter.log_to_file("audit.log", "saved")

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "[External] hello",
        "[External:WARNING] careful",
        "[External:FILE:audit.log] saved",
    ]
    assert caplog.records[1].levelno == logging.WARNING


def test_logger_adapter_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        LoggerAdapter().log_with_level("trace", "x")


def test_console_adapter_logs_with_prefix(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="test.console"):
        ConsoleLoggerAdapter("test.console").log("hi")

    assert "[Console]" in caplog.text
    assert caplog.text.rstrip().endswith("hi")


def test_file_adapter_appends_lines(tmp_path) -> None:
    adapter = FileLoggerAdapter(tmp_path / "logs" / "first.log")
    adapter.log("one")
    adapter.log("two")

    adapter.set_log_file(tmp_path / "second.log")
    adapter.log("three")

    lines = (tmp_path / "logs" / "first.log").read_text(encoding="utf-8").splitlines()
    assert [line.split(": ", 1)[1] for line in lines] == ["one", "two"]
    assert (tmp_path / "second.log").read_text(encoding="utf-8").endswith(": three\n")
    assert adapter.path == tmp_path / "second.log"
