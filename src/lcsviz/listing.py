"""The reference program the visualizer steps through.

Every :class:`~lcsviz.models.StepPhase` corresponds to exactly one line of
:data:`CODE_LISTING`; the step sequencer stamps that line number onto each
step so a code panel can highlight it.
"""

from __future__ import annotations

from dataclasses import dataclass

from lcsviz.models import AnimationStep, StepPhase


@dataclass(frozen=True)
class ListingLine:
    """One line of the reference listing.

    Attributes
    ----------
    number:
        1-based line number.
    text:
        Source text, indented with two spaces per level.
    kind:
        The :class:`StepPhase` value executed on this line, or a structural
        tag (``"class"``, ``"method"``, ``"else"``, ``"close"``,
        ``"empty"``).
    """

    number: int
    text: str
    kind: str


CODE_LISTING: tuple[ListingLine, ...] = (
    ListingLine(1, "class Solution {", "class"),
    ListingLine(2, "  public int lcs(String text1, String text2) {", "method"),
    ListingLine(3, "    int m = text1.length();", StepPhase.INIT_M.value),
    ListingLine(4, "    int n = text2.length();", StepPhase.INIT_N.value),
    ListingLine(5, "    int[][] dp = new int[m+1][n+1];", StepPhase.INIT_DP.value),
    ListingLine(6, "", "empty"),
    ListingLine(7, "    for (int i = 1; i <= m; i++) {", StepPhase.LOOP_I.value),
    ListingLine(8, "      for (int j = 1; j <= n; j++) {", StepPhase.LOOP_J.value),
    ListingLine(9, "        if (text1.charAt(i-1) == text2.charAt(j-1)) {", StepPhase.COMPARE.value),
    ListingLine(10, "          dp[i][j] = dp[i-1][j-1] + 1;", StepPhase.MATCH_ASSIGN.value),
    ListingLine(11, "        } else {", "else"),
    ListingLine(12, "          dp[i][j] = Math.max(dp[i-1][j], dp[i][j-1]);", StepPhase.MISMATCH_ASSIGN.value),
    ListingLine(13, "        }", "close"),
    ListingLine(14, "      }", "close"),
    ListingLine(15, "    }", "close"),
    ListingLine(16, "    return dp[m][n];", StepPhase.RETURN.value),
    ListingLine(17, "  }", "close"),
    ListingLine(18, "}", "close"),
)

PHASE_LINES: dict[StepPhase, int] = {
    StepPhase(line.kind): line.number
    for line in CODE_LISTING
    if line.kind in {phase.value for phase in StepPhase}
}


def line_for_phase(phase: StepPhase) -> int:
    """Return the listing line executed in *phase*."""
    return PHASE_LINES[phase]


def _inline_values(step: AnimationStep) -> str:
    """Debugger-style annotation for the highlighted line."""
    v = step.variables
    phase = step.phase
    if phase is StepPhase.INIT_M:
        return f"m={v.m}"
    if phase is StepPhase.INIT_N:
        return f"n={v.n}"
    if phase is StepPhase.INIT_DP:
        return f"dp[{v.m + 1}][{v.n + 1}]"
    if phase is StepPhase.LOOP_I:
        return f"i={v.i}  {v.i}<={v.m}"
    if phase is StepPhase.LOOP_J:
        return f"j={v.j}  {v.j}<={v.n}"
    if phase is StepPhase.COMPARE:
        verdict = "equal" if v.char1 == v.char2 else "not equal"
        return f"text1[{v.i - 1}]='{v.char1}' text2[{v.j - 1}]='{v.char2}' {verdict}"
    if phase is StepPhase.MATCH_ASSIGN:
        return f"dp[{v.i}][{v.j}] = {v.diag_value} + 1 = {v.dp_value}"
    if phase is StepPhase.MISMATCH_ASSIGN:
        return f"dp[{v.i}][{v.j}] = max({v.top_value}, {v.left_value}) = {v.dp_value}"
    return f"return {v.dp_value}"


def render_listing(step: AnimationStep | None = None) -> str:
    """Render the listing as plain text.

    With a *step*, the highlighted line is prefixed with ``>`` and followed
    by the values of the variables it touches.
    """
    highlighted = step.line if step is not None else 0
    width = len(str(len(CODE_LISTING)))
    out: list[str] = []
    for line in CODE_LISTING:
        marker = ">" if line.number == highlighted else " "
        text = f"{marker} {line.number:>{width}} {line.text}"
        if step is not None and line.number == highlighted:
            text = f"{text}    // {_inline_values(step)}"
        out.append(text.rstrip())
    return "\n".join(out)
