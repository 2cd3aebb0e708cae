"""Tests for the reference listing and the step explanations."""

from __future__ import annotations

import pytest

from lcsviz.engine import generate_steps
from lcsviz.explain import explain_completion, explain_step, to_html
from lcsviz.listing import CODE_LISTING, PHASE_LINES, line_for_phase, render_listing
from lcsviz.models import StepPhase


def _first(steps, phase):
    return next(step for step in steps if step.phase is phase)


class TestListing:
    def test_eighteen_numbered_lines(self):
        assert [line.number for line in CODE_LISTING] == list(range(1, 19))

    def test_every_phase_has_a_line(self):
        assert set(PHASE_LINES) == set(StepPhase)

    @pytest.mark.parametrize(
        ("phase", "line"),
        [
            (StepPhase.INIT_M, 3),
            (StepPhase.INIT_N, 4),
            (StepPhase.INIT_DP, 5),
            (StepPhase.LOOP_I, 7),
            (StepPhase.LOOP_J, 8),
            (StepPhase.COMPARE, 9),
            (StepPhase.MATCH_ASSIGN, 10),
            (StepPhase.MISMATCH_ASSIGN, 12),
            (StepPhase.RETURN, 16),
        ],
    )
    def test_phase_lines(self, phase, line):
        assert line_for_phase(phase) == line

    def test_render_without_step_has_no_marker(self):
        text = render_listing()
        assert len(text.splitlines()) == 18
        assert not any(row.startswith(">") for row in text.splitlines())

    def test_render_highlights_step_line(self):
        steps = generate_steps("ab", "bc")
        step = _first(steps, StepPhase.MISMATCH_ASSIGN)
        highlighted = [row for row in render_listing(step).splitlines() if row.startswith(">")]
        assert len(highlighted) == 1
        assert "Math.max" in highlighted[0]
        assert "dp[1][1] = max(0, 0) = 0" in highlighted[0]

    def test_render_compare_line(self):
        steps = generate_steps("ab", "bc")
        step = _first(steps, StepPhase.COMPARE)
        text = render_listing(step)
        assert "text1[0]='a' text2[0]='b' not equal" in text


class TestExplainStep:
    def test_no_step(self):
        assert "start" in explain_step(None)

    def test_init_phases(self):
        steps = generate_steps("abc", "ab")
        assert "`m = 3`" in explain_step(steps[0])
        assert "`n = 2`" in explain_step(steps[1])
        assert "`4 x 3`" in explain_step(steps[2])

    def test_match(self):
        steps = generate_steps("a", "a")
        text = explain_step(_first(steps, StepPhase.MATCH_ASSIGN))
        assert "**The characters are equal.**" in text
        assert "`dp[1][1] = dp[0][0] + 1 = 1`" in text

    def test_mismatch_marks_winner(self):
        steps = generate_steps("ab", "bc")
        step = next(s for s in steps if s.is_assignment and s.cell.as_tuple() == (2, 2))
        text = explain_step(step)
        assert "**The characters differ.**" in text
        assert "left `dp[2][1] = 1` (chosen)" in text
        assert "max(0, 1) = 1" in text

    def test_return(self):
        steps = generate_steps("abcde", "ace")
        assert "`dp[5][3] = 3`" in explain_step(steps[-1])


class TestCompletionAndHtml:
    def test_completion_with_lcs(self):
        text = explain_completion("ace", 3)
        assert "**3**" in text
        assert "`ace`" in text

    def test_completion_without_lcs(self):
        assert "LCS:" not in explain_completion("", 0)

    def test_to_html_renders_code_and_emphasis(self):
        html = to_html(explain_step(generate_steps("a", "a")[-1]))
        assert "<code>dp[1][1] = 1</code>" in html
        assert html.startswith("<p>")

    def test_to_html_escapes_raw_html(self):
        assert "<script>" not in to_html("<script>alert(1)</script>")
