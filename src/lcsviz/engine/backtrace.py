"""Backtrace over a completed DP table.

Walks from a cell back towards the origin to recover one longest common
subsequence.  When the characters differ and the top and left neighbours
tie, the walk moves up, the same tie-break :func:`~lcsviz.engine.evaluator.evaluate`
uses, so the path only crosses cells whose recorded transition points the
way the walk went.
"""

from __future__ import annotations

from collections.abc import Sequence

from lcsviz.errors import LcsvizContractError
from lcsviz.models import BacktraceResult, CellLCS, Position

from .table import check_shape


def _walk(
    s1: str,
    s2: str,
    table: Sequence[Sequence[int]],
    row: int,
    col: int,
    path: list[Position] | None = None,
    match_cells: list[Position] | None = None,
) -> tuple[int, int, CellLCS]:
    """Walk from ``(row, col)`` until either index reaches zero.

    Visited cells are appended to *path* and diagonal moves to
    *match_cells* when those lists are given.  Returns the indices where
    the walk stopped and the recovered subsequence.
    """
    chars: list[str] = []
    text1_indices: list[int] = []
    text2_indices: list[int] = []

    i, j = row, col
    while i > 0 and j > 0:
        cell = Position(i, j)
        if path is not None:
            path.append(cell)

        if s1[i - 1] == s2[j - 1]:
            if match_cells is not None:
                match_cells.append(cell)
            chars.append(s1[i - 1])
            text1_indices.append(i - 1)
            text2_indices.append(j - 1)
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            i -= 1
        else:
            j -= 1

    # Collected back to front.
    chars.reverse()
    text1_indices.reverse()
    text2_indices.reverse()
    return i, j, CellLCS(
        lcs="".join(chars),
        text1_indices=tuple(text1_indices),
        text2_indices=tuple(text2_indices),
    )


def backtrace(
    s1: str,
    s2: str,
    table: Sequence[Sequence[int]],
) -> BacktraceResult:
    """Recover the LCS and the path taken through *table*.

    Parameters
    ----------
    s1, s2:
        The input strings *table* was computed from.
    table:
        A fully computed table, e.g. from
        :func:`~lcsviz.engine.table.compute_full` or the last step's
        snapshot.

    Returns
    -------
    BacktraceResult
        ``path`` starts at ``(len(s1), len(s2))`` and always ends at
        ``(0, 0)``.  After the interior walk it runs straight down column
        0 (or along row 0) to reach the origin.

    Raises
    ------
    LcsvizContractError
        If the table's shape does not match the inputs.
    """
    check_shape(table, s1, s2, "backtrace")

    path: list[Position] = []
    match_cells: list[Position] = []
    i, j, found = _walk(s1, s2, table, len(s1), len(s2), path, match_cells)

    while i > 0:
        path.append(Position(i, 0))
        i -= 1
    while j > 0:
        path.append(Position(0, j))
        j -= 1
    path.append(Position(0, 0))

    return BacktraceResult(
        path=tuple(path),
        match_cells=tuple(match_cells),
        lcs=found.lcs,
        text1_indices=found.text1_indices,
        text2_indices=found.text2_indices,
    )


def lcs_at(
    s1: str,
    s2: str,
    table: Sequence[Sequence[int]],
    row: int,
    col: int,
) -> CellLCS:
    """Recover the LCS of ``s1[:row]`` and ``s2[:col]`` from *table*.

    Same walk as :func:`backtrace`, started at an arbitrary cell and
    without collecting the path.

    Raises
    ------
    LcsvizContractError
        If the table's shape does not match the inputs or ``(row, col)``
        lies outside it.
    """
    check_shape(table, s1, s2, "lcs_at")
    if not (0 <= row <= len(s1) and 0 <= col <= len(s2)):
        raise LcsvizContractError(
            f"cell ({row}, {col}) is outside a "
            f"{len(s1) + 1}x{len(s2) + 1} table",
            context={"operation": "lcs_at", "row": row, "col": col},
        )
    _, _, found = _walk(s1, s2, table, row, col)
    return found
