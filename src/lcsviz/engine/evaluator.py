"""Single-cell evaluation of the LCS recurrence.

The evaluator is side-effect free: it reads the neighbours of ``(i, j)``
and reports what the cell should hold, but writing the value back is the
caller's job.  It does not check that the neighbours are final (zero is a
legal value); callers must visit cells in row-major order.
"""

from __future__ import annotations

from collections.abc import Sequence

from lcsviz.errors import LcsvizContractError
from lcsviz.models import CellComputation, ComparisonInfo, Position, TransitionKind


def evaluate(
    s1: str,
    s2: str,
    table: Sequence[Sequence[int]],
    i: int,
    j: int,
) -> CellComputation:
    """Evaluate interior cell ``(i, j)``.

    When ``s1[i-1] == s2[j-1]`` the cell extends the diagonal by one.
    Otherwise it takes the larger of its top and left neighbours; when the
    two are equal the top neighbour wins.  The backtrace applies the same
    tie-break so that its path always agrees with the recorded kinds.

    Parameters
    ----------
    s1, s2:
        The input strings.
    table:
        The DP table being filled.  Only ``table[i-1][j-1]``,
        ``table[i-1][j]`` and ``table[i][j-1]`` are read.
    i:
        Row index, ``1 <= i <= len(s1)``.
    j:
        Column index, ``1 <= j <= len(s2)``.

    Returns
    -------
    CellComputation

    Raises
    ------
    LcsvizContractError
        If ``(i, j)`` is not an interior cell for the given inputs, or the
        table is too small to hold it.
    """
    if not (1 <= i <= len(s1) and 1 <= j <= len(s2)):
        raise LcsvizContractError(
            f"cell ({i}, {j}) is not an interior cell for inputs of length "
            f"{len(s1)} and {len(s2)}",
            context={"operation": "evaluate", "row": i, "col": j},
        )
    if len(table) <= i or len(table[i]) <= j or len(table[i - 1]) <= j:
        raise LcsvizContractError(
            f"table is too small to evaluate cell ({i}, {j})",
            context={"operation": "evaluate", "row": i, "col": j},
        )

    if s1[i - 1] == s2[j - 1]:
        return CellComputation(
            value=table[i - 1][j - 1] + 1,
            kind=TransitionKind.MATCH,
            source_cells=(Position(i - 1, j - 1),),
        )

    top_cell = Position(i - 1, j)
    left_cell = Position(i, j - 1)
    comparison = ComparisonInfo(
        top_value=table[i - 1][j],
        left_value=table[i][j - 1],
        top_cell=top_cell,
        left_cell=left_cell,
    )
    return CellComputation(
        value=comparison.winning_value,
        kind=comparison.winner,
        source_cells=(top_cell, left_cell),
        comparison=comparison,
    )
