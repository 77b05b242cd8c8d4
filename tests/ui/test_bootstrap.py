"""Tests for application bootstrap helpers."""

from __future__ import annotations

import logging

import pytest

from movelist.ui import bootstrap


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, logging.WARNING),
        ("", logging.WARNING),
        ("debug", logging.DEBUG),
        (" INFO ", logging.INFO),
        ("error", logging.ERROR),
        ("chatty", logging.WARNING),
        ("   ", logging.WARNING),
    ],
)
def test_resolve_log_level(raw: str | None, expected: int) -> None:
    assert bootstrap.resolve_log_level(raw) == expected


def test_configure_logging_reads_environment(monkeypatch) -> None:
    seen: dict[str, object] = {}
    monkeypatch.setenv(bootstrap.LOG_LEVEL_ENV, "debug")
    monkeypatch.setattr(
        logging, "basicConfig", lambda **kwargs: seen.update(kwargs)
    )

    bootstrap.configure_logging()

    assert seen["level"] == logging.DEBUG


def test_configure_logging_warns_on_unknown_level(
    monkeypatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv(bootstrap.LOG_LEVEL_ENV, "chatty")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)

    with caplog.at_level(logging.WARNING, logger="movelist.ui.bootstrap"):
        bootstrap.configure_logging()

    assert any("chatty" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("raw", ["", "   ", "info"])
def test_configure_logging_quiet_for_blank_or_known_level(
    monkeypatch, caplog: pytest.LogCaptureFixture, raw: str
) -> None:
    monkeypatch.setenv(bootstrap.LOG_LEVEL_ENV, raw)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)

    with caplog.at_level(logging.WARNING, logger="movelist.ui.bootstrap"):
        bootstrap.configure_logging()

    assert caplog.records == []


def test_configure_application_sets_name_and_style(qapp) -> None:
    bootstrap._configure_application(qapp)
    assert qapp.applicationName() == "Movelist"
    assert "QMainWindow" in qapp.styleSheet()
