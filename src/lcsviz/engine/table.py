"""DP table allocation and the non-animated full computation.

``table[i][j]`` stores the length of the LCS of ``s1[:i]`` and ``s2[:j]``.
Row 0 and column 0 stay zero: the LCS of anything with an empty prefix is
empty.
"""

from __future__ import annotations

from collections.abc import Sequence

from lcsviz.errors import LcsvizContractError
from lcsviz.models import Snapshot, Table

from .evaluator import evaluate


def initialize(m: int, n: int) -> Table:
    """Allocate a zero-filled ``(m + 1) x (n + 1)`` table.

    Parameters
    ----------
    m:
        Length of the first string.
    n:
        Length of the second string.

    Returns
    -------
    Table
        ``m + 1`` independent rows of ``n + 1`` zeros.

    Raises
    ------
    LcsvizContractError
        If either dimension is negative.
    """
    if m < 0 or n < 0:
        raise LcsvizContractError(
            f"table dimensions must be non-negative, got m={m}, n={n}",
            context={"operation": "initialize", "m": m, "n": n},
        )
    return [[0] * (n + 1) for _ in range(m + 1)]


def compute_full(s1: str, s2: str) -> Table:
    """Compute the complete DP table for *s1* and *s2*.

    Cells are filled in row-major order, which guarantees that the top,
    left and diagonal neighbours of every cell are final before the cell
    itself is evaluated.  No animation steps are produced.
    """
    m = len(s1)
    n = len(s2)
    table = initialize(m, n)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            table[i][j] = evaluate(s1, s2, table, i, j).value

    return table


def freeze(table: Sequence[Sequence[int]]) -> Snapshot:
    """Return an immutable copy of *table*."""
    return tuple(tuple(row) for row in table)


def thaw(snapshot: Sequence[Sequence[int]]) -> Table:
    """Return a mutable deep copy of *snapshot*."""
    return [list(row) for row in snapshot]


def check_shape(
    table: Sequence[Sequence[int]],
    s1: str,
    s2: str,
    operation: str,
) -> None:
    """Raise :class:`LcsvizContractError` unless *table* is sized for the inputs."""
    expected = (len(s1) + 1, len(s2) + 1)
    rows = len(table)
    if rows != expected[0] or any(len(row) != expected[1] for row in table):
        raise LcsvizContractError(
            f"{operation}: table shape does not match inputs of length "
            f"{len(s1)} and {len(s2)}",
            context={
                "operation": operation,
                "expected_shape": expected,
                "actual_rows": rows,
                "actual_widths": sorted({len(row) for row in table}),
            },
        )
