"""Tests for the step sequencer (animation timeline)."""

from __future__ import annotations

import dataclasses

import pytest

from lcsviz.engine.sequencer import final_table, generate_steps
from lcsviz.engine.table import compute_full, freeze
from lcsviz.models import Position, StepPhase, TransitionKind

ASSIGN_PHASES = (StepPhase.MATCH_ASSIGN, StepPhase.MISMATCH_ASSIGN)


def _phases(steps):
    return [step.phase for step in steps]


class TestStepCount:
    @pytest.mark.parametrize(
        ("s1", "s2"),
        [("a", "b"), ("abcde", "ace"), ("abc", "abc"), ("abcdefghij", "aeiou"), ("", "abc")],
    )
    def test_total_matches_formula(self, s1, s2):
        m, n = len(s1), len(s2)
        steps = generate_steps(s1, s2)
        assert len(steps) == 3 + m + 3 * m * n + 1

    def test_compare_and_assign_counts(self):
        steps = generate_steps("abcdefghij", "aeiou")
        phases = _phases(steps)
        assert phases.count(StepPhase.COMPARE) == 50
        assert sum(phases.count(p) for p in ASSIGN_PHASES) == 50
        assert phases.count(StepPhase.LOOP_I) == 10
        assert phases.count(StepPhase.LOOP_J) == 50

    def test_single_mismatch(self):
        steps = generate_steps("a", "b")
        assert _phases(steps) == [
            StepPhase.INIT_M,
            StepPhase.INIT_N,
            StepPhase.INIT_DP,
            StepPhase.LOOP_I,
            StepPhase.LOOP_J,
            StepPhase.COMPARE,
            StepPhase.MISMATCH_ASSIGN,
            StepPhase.RETURN,
        ]
        assign = steps[6]
        assert assign.value == 0
        assert assign.kind is TransitionKind.FROM_TOP


class TestOrdering:
    def test_row_major_with_loop_markers(self):
        steps = generate_steps("ab", "xy")
        phases = _phases(steps)
        assert phases[:4] == [
            StepPhase.INIT_M, StepPhase.INIT_N, StepPhase.INIT_DP, StepPhase.LOOP_I,
        ]
        cells = [step.cell for step in steps if step.phase is StepPhase.COMPARE]
        assert cells == [Position(1, 1), Position(1, 2), Position(2, 1), Position(2, 2)]

    def test_compare_is_followed_by_assign_on_same_cell(self):
        steps = generate_steps("abcde", "ace")
        for index, step in enumerate(steps):
            if step.phase is StepPhase.COMPARE:
                follower = steps[index + 1]
                assert follower.phase in ASSIGN_PHASES
                assert follower.cell == step.cell

    def test_deterministic(self):
        assert generate_steps("abcab", "bacb") == generate_steps("abcab", "bacb")


class TestSnapshots:
    def test_pre_loop_steps_show_zero_table(self):
        steps = generate_steps("abc", "abc")
        zero = freeze([[0] * 4 for _ in range(4)])
        for step in steps[:4]:
            assert step.table == zero

    def test_compare_shows_table_before_write(self):
        steps = generate_steps("a", "a")
        compare, assign = steps[5], steps[6]
        assert compare.table[1][1] == 0
        assert assign.table[1][1] == 1

    def test_earlier_snapshots_never_change(self):
        steps = generate_steps("abcde", "ace")
        first_assign = next(step for step in steps if step.is_assignment)
        assert first_assign.table[1][1] == 1
        assert first_assign.table[5][3] == 0
        assert steps[-1].table[5][3] == 3

    def test_snapshots_are_immutable(self):
        step = generate_steps("ab", "ab")[-1]
        with pytest.raises(TypeError):
            step.table[1][1] = 5  # type: ignore[index]
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.value = 9  # type: ignore[misc]

    def test_unchanged_rows_are_shared(self):
        steps = generate_steps("ab", "ab")
        assigns = [step for step in steps if step.is_assignment]
        assert assigns[-1].table[0] is assigns[0].table[0]
        assert assigns[-1].table[2] is not assigns[0].table[2]

    def test_final_snapshot_equals_full_table(self):
        steps = generate_steps("abcbdab", "bdcaba")
        assert final_table(steps) == compute_full("abcbdab", "bdcaba")

    def test_final_table_of_empty_sequence(self):
        assert final_table(()) == []


class TestStepContent:
    def test_match_assign_step(self):
        steps = generate_steps("abcde", "ace")
        step = next(s for s in steps if s.phase is StepPhase.MATCH_ASSIGN and s.cell == Position(3, 2))
        assert step.value == 2
        assert step.kind is TransitionKind.MATCH
        assert (step.char1, step.char2) == ("c", "c")
        assert step.source_cells == (Position(2, 1),)
        assert step.comparison is None
        assert step.variables.as_dict() == {
            "m": 5, "n": 3, "i": 3, "j": 2,
            "char1": "c", "char2": "c",
            "diag_value": 1, "dp_value": 2,
        }
        assert step.line == 10

    def test_mismatch_assign_step(self):
        steps = generate_steps("ab", "bc")
        step = next(s for s in steps if s.is_assignment and s.cell == Position(2, 2))
        assert step.phase is StepPhase.MISMATCH_ASSIGN
        assert step.kind is TransitionKind.FROM_LEFT
        assert step.value == 1
        assert step.comparison is not None
        assert (step.comparison.top_value, step.comparison.left_value) == (0, 1)
        assert step.variables.top_value == 0
        assert step.variables.left_value == 1
        assert step.variables.dp_value == 1
        assert step.line == 12

    def test_compare_step(self):
        steps = generate_steps("ab", "bc")
        step = next(s for s in steps if s.phase is StepPhase.COMPARE)
        assert step.cell == Position(1, 1)
        assert (step.char1, step.char2) == ("a", "b")
        assert step.value == 0
        assert step.kind is None
        assert step.source_cells == ()
        assert step.line == 9

    def test_pre_loop_steps_have_no_cell(self):
        steps = generate_steps("ab", "bc")
        for step in steps[:5]:
            assert step.cell is None
            assert (step.row, step.col) == (0, 0)
            assert step.char1 == step.char2 == ""
            assert step.kind is None

    def test_variables_grow_with_phase(self):
        steps = generate_steps("ab", "bc")
        assert steps[0].variables.as_dict() == {"m": 2}
        assert steps[1].variables.as_dict() == {"m": 2, "n": 2}
        assert steps[2].variables.as_dict() == {"m": 2, "n": 2}
        assert steps[3].variables.as_dict() == {"m": 2, "n": 2, "i": 1}
        assert steps[4].variables.as_dict() == {"m": 2, "n": 2, "i": 1, "j": 1}

    def test_lines_follow_listing(self):
        steps = generate_steps("a", "b")
        assert [step.line for step in steps] == [3, 4, 5, 7, 8, 9, 12, 16]

    def test_terminal_step(self):
        steps = generate_steps("abcde", "ace")
        last = steps[-1]
        assert last.phase is StepPhase.RETURN
        assert last.cell == Position(5, 3)
        assert last.value == 3
        assert last.variables.as_dict() == {"m": 5, "n": 3, "dp_value": 3}
        assert (last.char1, last.char2) == ("e", "e")

    def test_terminal_step_carries_last_characters(self):
        last = generate_steps("ab", "cb")[-1]
        assert (last.char1, last.char2) == ("b", "b")

    def test_terminal_step_without_cells_has_no_characters(self):
        last = generate_steps("abc", "")[-1]
        assert last.char1 == last.char2 == ""

    def test_empty_inputs(self):
        steps = generate_steps("", "")
        assert _phases(steps) == [
            StepPhase.INIT_M, StepPhase.INIT_N, StepPhase.INIT_DP, StepPhase.RETURN,
        ]
        assert steps[-1].value == 0
        assert steps[-1].table == ((0,),)
