"""Step sequencer: the animation timeline of the LCS computation.

:func:`generate_steps` runs the textbook algorithm once and records one
:class:`~lcsviz.models.AnimationStep` for every line the reference program
executes::

    init-m -> init-n -> init-dp
    for i in 1..m:
        loop-i
        for j in 1..n:
            loop-j -> compare -> match-assign | mismatch-assign
    return

For inputs of length ``m`` and ``n`` this yields ``3 + m + 3*m*n + 1``
steps.  Each step carries the table exactly as it stood after the step's
effect, so any step can be displayed without replaying the ones before it.
"""

from __future__ import annotations

from collections.abc import Sequence

from lcsviz.listing import line_for_phase
from lcsviz.models import (
    AnimationStep,
    CellComputation,
    Position,
    Snapshot,
    StepPhase,
    Table,
    VariableState,
)

from .evaluator import evaluate
from .table import initialize, thaw


class _TableAccumulator:
    """Owns the live table while the sequencer fills it in.

    The mutable rows never leave this object; callers only receive
    :meth:`snapshot` tuples.  Frozen rows are cached and rebuilt only when
    a write touches them, so consecutive snapshots share unchanged rows.
    """

    def __init__(self, m: int, n: int) -> None:
        self._rows: Table = initialize(m, n)
        self._frozen: list[tuple[int, ...]] = [tuple(row) for row in self._rows]
        self._snapshot: Snapshot | None = None

    def read(self) -> Sequence[Sequence[int]]:
        return self._frozen

    def write(self, i: int, j: int, value: int) -> None:
        self._rows[i][j] = value
        self._frozen[i] = tuple(self._rows[i])
        self._snapshot = None

    def value(self, i: int, j: int) -> int:
        return self._rows[i][j]

    def snapshot(self) -> Snapshot:
        if self._snapshot is None:
            self._snapshot = tuple(self._frozen)
        return self._snapshot


class _StepRecorder:
    """Appends steps stamped with the accumulator's current snapshot."""

    def __init__(self, table: _TableAccumulator) -> None:
        self._table = table
        self.steps: list[AnimationStep] = []

    def record(
        self,
        phase: StepPhase,
        variables: VariableState,
        cell: Position | None = None,
        value: int = 0,
        char1: str = "",
        char2: str = "",
    ) -> None:
        self.steps.append(
            AnimationStep(
                phase=phase,
                table=self._table.snapshot(),
                variables=variables,
                line=line_for_phase(phase),
                cell=cell,
                value=value,
                char1=char1,
                char2=char2,
            )
        )

    def record_compare(self, variables: VariableState, cell: Position) -> None:
        self.steps.append(
            AnimationStep(
                phase=StepPhase.COMPARE,
                table=self._table.snapshot(),
                variables=variables,
                line=line_for_phase(StepPhase.COMPARE),
                cell=cell,
                char1=variables.char1 or "",
                char2=variables.char2 or "",
            )
        )

    def record_assign(
        self,
        phase: StepPhase,
        variables: VariableState,
        cell: Position,
        computation: CellComputation,
    ) -> None:
        self.steps.append(
            AnimationStep(
                phase=phase,
                table=self._table.snapshot(),
                variables=variables,
                line=line_for_phase(phase),
                cell=cell,
                value=computation.value,
                kind=computation.kind,
                char1=variables.char1 or "",
                char2=variables.char2 or "",
                source_cells=computation.source_cells,
                comparison=computation.comparison,
            )
        )


def generate_steps(s1: str, s2: str) -> tuple[AnimationStep, ...]:
    """Produce the full animation timeline for *s1* and *s2*.

    The result is a deterministic function of the two strings.  Every
    interior cell is evaluated exactly once, in row-major order, and
    contributes a ``compare`` step (table before the write) followed by an
    assignment step (table after the write).

    Parameters
    ----------
    s1:
        First input string (rows of the table).
    s2:
        Second input string (columns of the table).

    Returns
    -------
    tuple[AnimationStep, ...]
        The ordered, immutable step sequence.  The last step is the
        ``return`` step whose value is the LCS length.
    """
    m = len(s1)
    n = len(s2)
    table = _TableAccumulator(m, n)
    recorder = _StepRecorder(table)

    recorder.record(StepPhase.INIT_M, VariableState(m=m))
    recorder.record(StepPhase.INIT_N, VariableState(m=m, n=n))
    recorder.record(StepPhase.INIT_DP, VariableState(m=m, n=n))

    for i in range(1, m + 1):
        recorder.record(StepPhase.LOOP_I, VariableState(m=m, n=n, i=i))

        for j in range(1, n + 1):
            recorder.record(StepPhase.LOOP_J, VariableState(m=m, n=n, i=i, j=j))

            cell = Position(i, j)
            char1 = s1[i - 1]
            char2 = s2[j - 1]
            computation = evaluate(s1, s2, table.read(), i, j)

            recorder.record_compare(
                VariableState(m=m, n=n, i=i, j=j, char1=char1, char2=char2),
                cell,
            )

            table.write(i, j, computation.value)

            comparison = computation.comparison
            if comparison is None:
                variables = VariableState(
                    m=m, n=n, i=i, j=j,
                    char1=char1,
                    char2=char2,
                    diag_value=table.value(i - 1, j - 1),
                    dp_value=computation.value,
                )
                phase = StepPhase.MATCH_ASSIGN
            else:
                variables = VariableState(
                    m=m, n=n, i=i, j=j,
                    char1=char1,
                    char2=char2,
                    top_value=comparison.top_value,
                    left_value=comparison.left_value,
                    dp_value=computation.value,
                )
                phase = StepPhase.MISMATCH_ASSIGN

            recorder.record_assign(phase, variables, cell, computation)

    final_value = table.value(m, n)
    recorder.record(
        StepPhase.RETURN,
        VariableState(m=m, n=n, dp_value=final_value),
        cell=Position(m, n),
        value=final_value,
        char1=s1[m - 1] if m and n else "",
        char2=s2[n - 1] if m and n else "",
    )

    return tuple(recorder.steps)


def final_table(steps: Sequence[AnimationStep]) -> Table:
    """Return a mutable copy of the table held by the last step.

    An empty *steps* sequence yields an empty table.
    """
    if not steps:
        return []
    return thaw(steps[-1].table)
