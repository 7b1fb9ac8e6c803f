# This test file validates the stock report sinks.
# LoggingSink must honor the configured tag and level; the in-memory sinks must keep line order.

from __future__ import annotations

import io
import logging

import pytest

from src.common import settings as settings_module
from src.time_marker.sinks import CaptureSink, LoggingSink, PrintSink, Sink


def test_stock_sinks_satisfy_protocol() -> None:
    assert isinstance(CaptureSink(), Sink)
    assert isinstance(PrintSink(), Sink)
    assert isinstance(LoggingSink(), Sink)


def test_logging_sink_uses_configured_tag(caplog: pytest.LogCaptureFixture) -> None:
    sink = LoggingSink()

    with caplog.at_level(logging.INFO, logger="TimeMarker"):
        sink.log("hello")

    assert [(record.name, record.levelno, record.getMessage()) for record in caplog.records] == [
        ("TimeMarker", logging.INFO, "hello")
    ]


def test_logging_sink_level_from_settings(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("TIME_MARKER_TAG", "Startup")
    monkeypatch.setenv("TIME_MARKER_SINK_LEVEL", "warning")
    settings_module.get_settings.cache_clear()

    sink = LoggingSink()

    with caplog.at_level(logging.DEBUG, logger="Startup"):
        sink.log("slow step")

    assert caplog.records[0].name == "Startup"
    assert caplog.records[0].levelno == logging.WARNING


def test_logging_sink_explicit_logger_and_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tests.marker")
    sink = LoggingSink(logger=logger, level=logging.DEBUG)

    with caplog.at_level(logging.DEBUG, logger="tests.marker"):
        sink.log("detail")

    assert caplog.records[0].levelno == logging.DEBUG


def test_capture_sink_keeps_order_and_clears() -> None:
    sink = CaptureSink()
    sink.log("one")
    sink.log("two")
    assert sink.lines == ["one", "two"]

    sink.clear()
    assert sink.lines == []


def test_print_sink_writes_lines() -> None:
    stream = io.StringIO()
    sink = PrintSink(stream)

    sink.log("a ---> b  cost: 1  percentage: 100.00%")

    assert stream.getvalue() == "a ---> b  cost: 1  percentage: 100.00%\n"


def test_print_sink_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    PrintSink().log("Nothing to report!")
    assert capsys.readouterr().out == "Nothing to report!\n"
