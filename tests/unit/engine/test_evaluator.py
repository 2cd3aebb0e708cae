"""Tests for single-cell evaluation."""

from __future__ import annotations

import pytest

from lcsviz.engine.evaluator import evaluate
from lcsviz.engine.table import compute_full, initialize
from lcsviz.errors import LcsvizContractError
from lcsviz.models import CellComputation, ComparisonInfo, Position, TransitionKind


class TestMatch:
    def test_match_extends_diagonal(self):
        table = compute_full("abcde", "ace")
        result = evaluate("abcde", "ace", table, 3, 2)  # 'c' == 'c'
        assert result.value == table[2][1] + 1 == 2
        assert result.kind is TransitionKind.MATCH
        assert result.source_cells == (Position(2, 1),)
        assert result.comparison is None
        assert result.is_match

    def test_first_cell_match(self):
        result = evaluate("a", "a", initialize(1, 1), 1, 1)
        assert result.value == 1
        assert result.kind is TransitionKind.MATCH


class TestMismatch:
    def test_top_wins_tie(self):
        table = initialize(1, 1)
        result = evaluate("a", "b", table, 1, 1)
        assert result.value == 0
        assert result.kind is TransitionKind.FROM_TOP
        assert result.source_cells == (Position(0, 1), Position(1, 0))

    def test_top_wins_when_strictly_larger(self):
        # 'x' vs 'b': top dp[1][2] = 1, left dp[2][1] = 0.
        table = compute_full("bx", "ab")
        result = evaluate("bx", "ab", table, 2, 2)
        assert result.kind is TransitionKind.FROM_TOP
        assert result.value == 1

    def test_left_wins_when_strictly_larger(self):
        # 'b' vs 'c': top dp[1][2] = 0, left dp[2][1] = 1.
        table = compute_full("ab", "bc")
        result = evaluate("ab", "bc", table, 2, 2)
        assert result.kind is TransitionKind.FROM_LEFT
        assert result.value == 1
        assert result.comparison == ComparisonInfo(
            top_value=0,
            left_value=1,
            top_cell=Position(1, 2),
            left_cell=Position(2, 1),
        )

    def test_both_sources_recorded_regardless_of_winner(self):
        table = compute_full("ab", "bc")
        result = evaluate("ab", "bc", table, 2, 2)
        assert set(result.source_cells) == {Position(1, 2), Position(2, 1)}

    def test_does_not_write_into_table(self):
        table = initialize(2, 2)
        evaluate("ab", "ab", table, 1, 1)
        assert table == initialize(2, 2)


class TestContract:
    @pytest.mark.parametrize(("i", "j"), [(0, 1), (1, 0), (3, 1), (1, 4), (-1, 1)])
    def test_out_of_bounds_cell(self, i, j):
        with pytest.raises(LcsvizContractError) as exc_info:
            evaluate("ab", "abc", initialize(2, 3), i, j)
        assert exc_info.value.context == {"operation": "evaluate", "row": i, "col": j}

    def test_table_too_small(self):
        with pytest.raises(LcsvizContractError):
            evaluate("ab", "abc", initialize(1, 1), 2, 3)


class TestCellComputationInvariants:
    def test_match_with_comparison_rejected(self):
        info = ComparisonInfo(0, 0, Position(0, 1), Position(1, 0))
        with pytest.raises(ValueError):
            CellComputation(1, TransitionKind.MATCH, (Position(0, 0),), info)

    def test_mismatch_without_comparison_rejected(self):
        with pytest.raises(ValueError):
            CellComputation(0, TransitionKind.FROM_TOP, (Position(0, 1), Position(1, 0)))

    def test_kind_must_agree_with_winner(self):
        info = ComparisonInfo(2, 1, Position(0, 1), Position(1, 0))
        with pytest.raises(ValueError):
            CellComputation(2, TransitionKind.FROM_LEFT, (Position(0, 1), Position(1, 0)), info)
