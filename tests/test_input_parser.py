"""Tests for pure input classification (core/input_parser.py)."""

from __future__ import annotations

import sys

import pytest

from integer_collector.core.input_parser import (
    classify_input,
    is_exit_command,
    is_integer_literal,
)
from integer_collector.core.models import InputKind


class TestIsIntegerLiteral:
    @pytest.mark.parametrize("text", ["0", "42", "-7", "007", " 12 ", "123456789012345678901"])
    def test_accepts(self, text: str) -> None:
        assert is_integer_literal(text)

    @pytest.mark.parametrize("text", ["", " ", "-", "+5", "1.5", "1_000", "12a", "٣", "--1"])
    def test_rejects(self, text: str) -> None:
        assert not is_integer_literal(text)


class TestIsExitCommand:
    @pytest.mark.parametrize("text", ["exit", "EXIT", "Exit", "  exit  "])
    def test_matches_case_insensitive(self, text: str) -> None:
        assert is_exit_command(text, "exit")

    def test_custom_keyword(self) -> None:
        assert is_exit_command("SAIR", "sair")
        assert not is_exit_command("exit", "sair")

    def test_near_miss_is_not_exit(self) -> None:
        assert not is_exit_command("exi", "exit")


class TestClassifyInput:
    def test_number(self) -> None:
        outcome = classify_input("-15", "exit")
        assert outcome.kind is InputKind.NUMBER
        assert outcome.value == -15
        assert outcome.distance is None
        assert not outcome.suggest_exit

    def test_number_with_whitespace(self) -> None:
        outcome = classify_input(" 8 ", "exit")
        assert outcome.value == 8
        assert outcome.raw == " 8 "

    def test_exit(self) -> None:
        outcome = classify_input("Exit", "exit")
        assert outcome.kind is InputKind.EXIT
        assert outcome.value is None

    def test_close_typo_suggests_exit(self) -> None:
        outcome = classify_input("exti", "exit")
        assert outcome.kind is InputKind.INVALID
        assert outcome.distance == 2
        assert outcome.suggest_exit

    def test_threshold_is_inclusive(self) -> None:
        # "e" is three deletions away from "exit".
        outcome = classify_input("e", "exit", suggestion_threshold=3)
        assert outcome.distance == 3
        assert outcome.suggest_exit

    def test_far_input_gets_no_suggestion(self) -> None:
        outcome = classify_input("banana", "exit")
        assert outcome.kind is InputKind.INVALID
        assert outcome.distance == 6
        assert not outcome.suggest_exit

    def test_oversized_integer_is_invalid(self) -> None:
        limit = getattr(sys, "get_int_max_str_digits", lambda: 0)()
        if not limit:
            pytest.skip("interpreter has no int-string conversion limit")
        digits = "9" * (limit + 1)

        outcome = classify_input(digits, "exit")
        assert outcome.kind is InputKind.INVALID
        assert outcome.value is None
        assert outcome.distance == len(digits)
        assert not outcome.suggest_exit

    def test_empty_input_is_invalid(self) -> None:
        outcome = classify_input("", "exit")
        assert outcome.kind is InputKind.INVALID
        assert outcome.distance == 4
        assert not outcome.suggest_exit

    def test_zero_threshold_never_suggests(self) -> None:
        outcome = classify_input("exi", "exit", suggestion_threshold=0)
        assert not outcome.suggest_exit

    def test_distance_uses_raw_text(self) -> None:
        outcome = classify_input("EXI", "exit")
        assert outcome.distance == 4
        assert not outcome.suggest_exit
