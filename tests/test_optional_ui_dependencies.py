"""Regression tests for optional CLI UI dependencies (rich/questionary).

These tests verify bootstrap commands are resilient when optional UI
packages are missing, and interactive paths fail cleanly only when they
are actually exercised.
"""

from __future__ import annotations

import logging
import sys
from unittest.mock import MagicMock

import pytest

from integer_collector.cli.app import main
from integer_collector.cli.console import console
from integer_collector.cli.log import configure_logging
from integer_collector.cli.progress import SortProgressDisplay
from integer_collector.cli.prompt import build_invalid_input_message, prompt_for_entry
from integer_collector.core.models import InputKind, InputOutcome
from integer_collector.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.live", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_console_falls_back_to_plain_print(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("hello", "world")
    console.clear()
    err = capsys.readouterr().err
    assert "hello world" in err
    assert "\033[2J" in err


def test_message_unescaped_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    outcome = InputOutcome(kind=InputKind.INVALID, raw="[x]", distance=3, suggest_exit=True)
    assert "[x]" in build_invalid_input_message(outcome, "exit")


def test_logging_falls_back_to_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    configure_logging(verbose=True)
    package_logger = logging.getLogger("integer_collector")
    assert package_logger.level == logging.DEBUG
    assert [type(h) for h in package_logger.handlers] == [logging.StreamHandler]


def test_sort_display_errors_cleanly_when_rich_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        SortProgressDisplay(delay=0, sleep=MagicMock())


def test_prompt_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        prompt_for_entry(1, "exit")
