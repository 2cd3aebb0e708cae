"""LCS algorithm and animation engine.

Exports
-------
initialize
    Allocate a zero-filled DP table.
evaluate
    Compute one interior cell and the rule that produced it.
generate_steps
    Produce the full animation timeline for two strings.
compute_full
    Fill in a DP table without recording steps.
backtrace
    Recover the LCS and its path from a completed table.
lcs_at
    Recover the LCS addressed by an arbitrary cell.
"""

from .backtrace import backtrace, lcs_at
from .evaluator import evaluate
from .sequencer import final_table, generate_steps
from .table import compute_full, freeze, initialize, thaw

__all__ = [
    "backtrace",
    "compute_full",
    "evaluate",
    "final_table",
    "freeze",
    "generate_steps",
    "initialize",
    "lcs_at",
    "thaw",
]
