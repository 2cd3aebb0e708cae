"""Public data models for the lcsviz package.

This module contains every value type the engine produces or consumes:
cell positions, transition kinds, per-cell evaluation results, animation
steps and backtrace results.  All record types are frozen dataclasses so
that a step, once produced, can be handed to any number of consumers
(playback cursor, renderer, explanation panel) without defensive copies.

A DP table exists in two forms:

* :data:`Table` — ``list[list[int]]``, mutable, owned by whichever
  function is filling it in.
* :data:`Snapshot` — ``tuple[tuple[int, ...], ...]``, the frozen form
  stored in every :class:`AnimationStep`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

Table = list[list[int]]
"""Mutable DP table, ``(m + 1)`` rows of ``(n + 1)`` columns."""

Snapshot = tuple[tuple[int, ...], ...]
"""Immutable DP table captured at one point of the computation."""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TransitionKind(str, Enum):
    """Which recurrence rule produced a cell's value."""

    MATCH = "match"
    """Characters were equal; the value came from the diagonal plus one."""

    FROM_TOP = "fromTop"
    """Characters differed and the top neighbour won (including ties)."""

    FROM_LEFT = "fromLeft"
    """Characters differed and the left neighbour was strictly larger."""


class StepPhase(str, Enum):
    """Coarse phase tag of an animation step.

    Each phase corresponds to one line of the reference listing (see
    :mod:`lcsviz.listing`).
    """

    INIT_M = "init-m"
    INIT_N = "init-n"
    INIT_DP = "init-dp"
    LOOP_I = "loop-i"
    LOOP_J = "loop-j"
    COMPARE = "compare"
    MATCH_ASSIGN = "match-assign"
    MISMATCH_ASSIGN = "mismatch-assign"
    RETURN = "return"


# ---------------------------------------------------------------------------
# Cell-level types
# ---------------------------------------------------------------------------

@dataclass(frozen=True, order=True)
class Position:
    """A ``(row, col)`` index into the DP table.

    Row ``i`` corresponds to the prefix ``s1[:i]`` and column ``j`` to
    ``s2[:j]``; row 0 and column 0 are the empty-prefix border.
    """

    row: int
    col: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


@dataclass(frozen=True)
class ComparisonInfo:
    """Both candidates of a mismatch transition.

    Kept even though only one candidate wins so that a renderer can show
    the losing value next to the winning one.

    Attributes
    ----------
    top_value:
        Value of ``table[i-1][j]``.
    left_value:
        Value of ``table[i][j-1]``.
    top_cell:
        Position of the top neighbour.
    left_cell:
        Position of the left neighbour.
    """

    top_value: int
    left_value: int
    top_cell: Position
    left_cell: Position

    @property
    def winner(self) -> TransitionKind:
        """The neighbour whose value propagates; top wins ties."""
        if self.top_value >= self.left_value:
            return TransitionKind.FROM_TOP
        return TransitionKind.FROM_LEFT

    @property
    def winning_value(self) -> int:
        return max(self.top_value, self.left_value)


@dataclass(frozen=True)
class CellComputation:
    """Result of evaluating a single interior cell.

    The ``kind`` / ``comparison`` pair behaves as a tagged union:
    ``MATCH`` carries no comparison and a single diagonal source, while
    ``FROM_TOP`` and ``FROM_LEFT`` always carry a :class:`ComparisonInfo`
    and both neighbour positions.  The constructor rejects any other
    combination.

    Attributes
    ----------
    value:
        The value the cell takes.
    kind:
        The transition rule that fired.
    source_cells:
        Cells consulted to produce *value*.
    comparison:
        Candidate values for a mismatch transition, else ``None``.
    """

    value: int
    kind: TransitionKind
    source_cells: tuple[Position, ...]
    comparison: ComparisonInfo | None = None

    def __post_init__(self) -> None:
        if self.kind is TransitionKind.MATCH:
            if self.comparison is not None or len(self.source_cells) != 1:
                raise ValueError(
                    "a match computation has exactly one source cell and no comparison"
                )
        else:
            if self.comparison is None or len(self.source_cells) != 2:
                raise ValueError(
                    f"a {self.kind.value} computation needs a comparison and two source cells"
                )
            if self.comparison.winner is not self.kind:
                raise ValueError(
                    f"comparison winner {self.comparison.winner.value} "
                    f"disagrees with kind {self.kind.value}"
                )

    @property
    def is_match(self) -> bool:
        return self.kind is TransitionKind.MATCH


# ---------------------------------------------------------------------------
# Animation steps
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VariableState:
    """Named variables that are "live" at one step of the algorithm.

    Every field is optional; a field is ``None`` until the algorithm has
    bound it.  :meth:`as_dict` drops the unbound ones.
    """

    m: int | None = None
    n: int | None = None
    i: int | None = None
    j: int | None = None
    char1: str | None = None
    char2: str | None = None
    dp_value: int | None = None
    top_value: int | None = None
    left_value: int | None = None
    diag_value: int | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class AnimationStep:
    """One discrete moment of the algorithm's execution.

    Steps are created once by :func:`~lcsviz.engine.sequencer.generate_steps`
    and never mutated.  The playback layer owns navigation over the
    sequence, never the steps themselves.

    Attributes
    ----------
    phase:
        Coarse phase tag.
    cell:
        The target cell, or ``None`` before the algorithm has reached a
        cell (parameter binding, allocation and loop-entry steps).
    value:
        The value written at this step; 0 unless this is an assignment or
        the terminal step.
    kind:
        The transition rule that fired, or ``None`` when no assignment
        happens at this step.
    char1:
        ``s1[i-1]`` at comparison and assignment steps, else ``""``.
    char2:
        ``s2[j-1]`` at comparison and assignment steps, else ``""``.
    source_cells:
        Cells consulted by the assignment.
    table:
        The DP table as it stood immediately after this step's effect.
    comparison:
        Candidate values for a mismatch assignment, else ``None``.
    variables:
        Variables live at this step.
    line:
        1-based line of the reference listing highlighted for this step.
    """

    phase: StepPhase
    table: Snapshot
    variables: VariableState
    line: int
    cell: Position | None = None
    value: int = 0
    kind: TransitionKind | None = None
    char1: str = ""
    char2: str = ""
    source_cells: tuple[Position, ...] = ()
    comparison: ComparisonInfo | None = None

    @property
    def row(self) -> int:
        return self.cell.row if self.cell is not None else 0

    @property
    def col(self) -> int:
        return self.cell.col if self.cell is not None else 0

    @property
    def is_assignment(self) -> bool:
        return self.phase in (StepPhase.MATCH_ASSIGN, StepPhase.MISMATCH_ASSIGN)


# ---------------------------------------------------------------------------
# Backtrace types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BacktraceResult:
    """Outcome of walking a completed table back to the origin.

    Attributes
    ----------
    path:
        Cells visited, from the bottom-right corner down to ``(0, 0)``
        inclusive of the border cells.
    match_cells:
        The subset of *path* where a diagonal (match) move happened, in
        visiting order.
    lcs:
        The reconstructed longest common subsequence.
    text1_indices:
        Ascending index of each LCS character within the first string.
    text2_indices:
        Ascending index of each LCS character within the second string.
    """

    path: tuple[Position, ...] = field(default_factory=tuple)
    match_cells: tuple[Position, ...] = field(default_factory=tuple)
    lcs: str = ""
    text1_indices: tuple[int, ...] = field(default_factory=tuple)
    text2_indices: tuple[int, ...] = field(default_factory=tuple)

    @property
    def length(self) -> int:
        return len(self.lcs)


@dataclass(frozen=True)
class CellLCS:
    """The LCS of the prefixes addressed by one table cell.

    Attributes
    ----------
    lcs:
        The subsequence recovered from the cell.
    text1_indices:
        Ascending positions of its characters in the first string.
    text2_indices:
        Ascending positions of its characters in the second string.
    """

    lcs: str = ""
    text1_indices: tuple[int, ...] = field(default_factory=tuple)
    text2_indices: tuple[int, ...] = field(default_factory=tuple)
