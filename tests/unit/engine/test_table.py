"""Tests for DP table allocation and the full (non-animated) computation."""

from __future__ import annotations

import pytest

from lcsviz.engine.table import check_shape, compute_full, freeze, initialize, thaw
from lcsviz.errors import ErrorCode, LcsvizContractError


class TestInitialize:
    @pytest.mark.parametrize(("m", "n"), [(0, 0), (0, 4), (3, 0), (5, 3), (10, 10)])
    def test_shape_and_zeros(self, m, n):
        table = initialize(m, n)
        assert len(table) == m + 1
        assert all(len(row) == n + 1 for row in table)
        assert all(value == 0 for row in table for value in row)

    def test_rows_are_independent(self):
        table = initialize(2, 2)
        table[1][1] = 7
        assert table[0][1] == 0
        assert table[2][1] == 0

    def test_negative_dimension_is_contract_violation(self):
        with pytest.raises(LcsvizContractError) as exc_info:
            initialize(-1, 3)
        assert exc_info.value.code == ErrorCode.CONTRACT_VIOLATION
        assert exc_info.value.context["operation"] == "initialize"


class TestComputeFull:
    def test_classic_example(self):
        table = compute_full("abcde", "ace")
        assert table == [
            [0, 0, 0, 0],
            [0, 1, 1, 1],
            [0, 1, 1, 1],
            [0, 1, 2, 2],
            [0, 1, 2, 2],
            [0, 1, 2, 3],
        ]

    def test_identical_strings_fill_diagonal(self):
        table = compute_full("abc", "abc")
        assert [table[k][k] for k in range(4)] == [0, 1, 2, 3]
        assert table[3][3] == 3

    def test_disjoint_strings_stay_zero(self):
        table = compute_full("abc", "def")
        assert all(value == 0 for row in table for value in row)

    def test_empty_input_gives_border_only(self):
        assert compute_full("", "abc") == [[0, 0, 0, 0]]
        assert compute_full("ab", "") == [[0], [0], [0]]

    def test_border_stays_zero(self):
        table = compute_full("banana", "atana")
        assert all(value == 0 for value in table[0])
        assert all(row[0] == 0 for row in table)


class TestFreezeThaw:
    def test_freeze_returns_nested_tuples(self):
        snap = freeze([[0, 0], [0, 1]])
        assert snap == ((0, 0), (0, 1))
        assert isinstance(snap[0], tuple)

    def test_thaw_is_a_deep_copy(self):
        snap = ((0, 0), (0, 1))
        table = thaw(snap)
        table[1][1] = 5
        assert snap[1][1] == 1


class TestCheckShape:
    def test_matching_shape_passes(self):
        check_shape(initialize(2, 3), "ab", "abc", "test")

    def test_wrong_row_count(self):
        with pytest.raises(LcsvizContractError) as exc_info:
            check_shape(initialize(1, 3), "ab", "abc", "test")
        assert exc_info.value.context["expected_shape"] == (3, 4)
        assert exc_info.value.context["actual_rows"] == 2

    def test_ragged_rows(self):
        table = initialize(2, 3)
        table[1] = [0, 0]
        with pytest.raises(LcsvizContractError) as exc_info:
            check_shape(table, "ab", "abc", "test")
        assert exc_info.value.context["actual_widths"] == [2, 4]
