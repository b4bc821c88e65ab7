"""Tests for the collector session (core/collector.py)."""

from __future__ import annotations

import sys

import pytest

from integer_collector.core.collector import CollectorSession
from integer_collector.core.models import CollectorSettings, InputKind


class TestCollectorSession:
    def test_starts_empty(self) -> None:
        session = CollectorSession()
        assert session.numbers == ()
        assert session.next_position == 1

    def test_numbers_collected_in_order(self) -> None:
        session = CollectorSession()
        for raw in ["3", "-1", "10"]:
            session.submit(raw)
        assert session.numbers == (3, -1, 10)
        assert session.next_position == 4

    def test_invalid_and_exit_not_collected(self) -> None:
        session = CollectorSession()
        assert session.submit("abc").kind is InputKind.INVALID
        assert session.submit("exit").kind is InputKind.EXIT
        assert session.numbers == ()

    def test_uses_configured_keyword_and_threshold(self) -> None:
        session = CollectorSession(CollectorSettings(exit_keyword="sair", suggestion_threshold=1))
        assert session.submit("SAIR").kind is InputKind.EXIT
        assert session.submit("sai").suggest_exit
        assert not session.submit("s").suggest_exit

    def test_sorter_works_on_copy(self) -> None:
        session = CollectorSession()
        for raw in ["5", "3", "1", "4", "2"]:
            session.submit(raw)
        assert session.sorter().sort() == [1, 2, 3, 4, 5]
        assert session.numbers == (5, 3, 1, 4, 2)

    def test_default_settings(self) -> None:
        assert CollectorSession().settings == CollectorSettings()

    def test_oversized_integer_rejected_without_losing_numbers(self) -> None:
        limit = getattr(sys, "get_int_max_str_digits", lambda: 0)()
        if not limit:
            pytest.skip("interpreter has no int-string conversion limit")

        session = CollectorSession()
        session.submit("4")
        outcome = session.submit("9" * (limit + 1))
        assert outcome.kind is InputKind.INVALID
        assert session.numbers == (4,)
