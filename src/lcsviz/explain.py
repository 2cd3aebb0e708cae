"""Human-readable explanations of animation steps.

:func:`explain_step` describes what a step did as a short Markdown
fragment (inline code for formulas, bold for the verdict).  Front ends
that display HTML can pass the fragment through :func:`to_html`, which
renders it with mistune.
"""

from __future__ import annotations

import mistune

from lcsviz.models import AnimationStep, StepPhase, TransitionKind

_markdown = mistune.create_markdown(escape=True)


def _explain_assignment(step: AnimationStep) -> list[str]:
    row, col = step.row, step.col
    lines = [
        f"Computing `dp[{row}][{col}]`.",
        f"Comparing `'{step.char1}'` with `'{step.char2}'`.",
    ]
    comparison = step.comparison
    if comparison is None:
        lines += [
            "**The characters are equal.**",
            f"`dp[{row}][{col}] = dp[{row - 1}][{col - 1}] + 1 = {step.value}`",
            "Both characters extend the LCS of the shorter prefixes, "
            "so the value is the top-left neighbour plus one.",
        ]
        return lines

    top_mark = " (chosen)" if step.kind is TransitionKind.FROM_TOP else ""
    left_mark = " (chosen)" if step.kind is TransitionKind.FROM_LEFT else ""
    direction = "top" if step.kind is TransitionKind.FROM_TOP else "left"
    lines += [
        "**The characters differ.**",
        f"- top `dp[{row - 1}][{col}] = {comparison.top_value}`{top_mark}",
        f"- left `dp[{row}][{col - 1}] = {comparison.left_value}`{left_mark}",
        "",
        f"`dp[{row}][{col}] = max({comparison.top_value}, "
        f"{comparison.left_value}) = {step.value}`",
        f"The larger candidate wins; here the {direction} value {step.value} "
        "is carried over.",
    ]
    return lines


def explain_step(step: AnimationStep | None) -> str:
    """Return a Markdown explanation of *step*.

    ``None`` (the position before the first step) yields the start prompt.
    """
    if step is None:
        return "Press **start** to watch the table being filled in."

    v = step.variables
    phase = step.phase
    if phase is StepPhase.INIT_M:
        return f"`m = text1.length()` binds `m = {v.m}`."
    if phase is StepPhase.INIT_N:
        return f"`n = text2.length()` binds `n = {v.n}`."
    if phase is StepPhase.INIT_DP:
        return (
            f"Allocate a `{v.m + 1} x {v.n + 1}` table of zeros. Row 0 and "
            "column 0 stay zero: nothing is shared with an empty prefix."
        )
    if phase is StepPhase.LOOP_I:
        return f"Outer loop: row `i = {v.i}` of {v.m}."
    if phase is StepPhase.LOOP_J:
        return f"Inner loop: column `j = {v.j}` of {v.n} in row {v.i}."
    if phase is StepPhase.COMPARE:
        verdict = "equal" if step.char1 == step.char2 else "different"
        return (
            f"Compare `text1[{v.i - 1}] = '{step.char1}'` with "
            f"`text2[{v.j - 1}] = '{step.char2}'`: they are **{verdict}**."
        )
    if phase is StepPhase.RETURN:
        return f"Return `dp[{v.m}][{v.n}] = {step.value}`, the LCS length."
    return "\n\n".join(_explain_assignment(step))


def explain_completion(lcs: str, length: int) -> str:
    """Return the Markdown summary shown once the last step is reached."""
    lines = [
        "**Done!**",
        f"Length of the longest common subsequence: **{length}**",
    ]
    if lcs:
        lines.append(f"LCS: `{lcs}`")
    lines.append("Show the backtrace to see how the LCS is recovered.")
    return "\n\n".join(lines)


def to_html(markdown: str) -> str:
    """Render an explanation fragment to HTML."""
    return _markdown(markdown)
