"""lcsviz — step-by-step engine for visualizing the LCS dynamic program.

Public re-exports
-----------------

* **Engine:** :func:`initialize`, :func:`evaluate`, :func:`generate_steps`,
  :func:`compute_full`, :func:`backtrace`, :func:`lcs_at`
* **Session:** :class:`LCSVisualizer`, :class:`SessionPhase`,
  :class:`StepCursor`
* **Configuration:** :class:`LcsvizConfig`
* **Errors:** Every :class:`LcsvizError` subclass and :class:`ErrorCode`
* **Models:** Positions, steps, backtrace results and enums

Usage::

    from lcsviz import backtrace, compute_full, generate_steps

    steps = generate_steps("abcde", "ace")
    result = backtrace("abcde", "ace", compute_full("abcde", "ace"))
    assert result.lcs == "ace"
    assert steps[-1].value == 3
"""

from __future__ import annotations

__version__ = "0.1.0"

# ── Configuration ───────────────────────────────────────────────────────
from lcsviz.config import (
    DEFAULT_ALLOWED_PATTERN,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    LcsvizConfig,
)

# ── Engine ──────────────────────────────────────────────────────────────
from lcsviz.engine import (
    backtrace,
    compute_full,
    evaluate,
    final_table,
    generate_steps,
    initialize,
    lcs_at,
)

# ── Errors ──────────────────────────────────────────────────────────────
from lcsviz.errors import (
    ErrorCode,
    LcsvizContractError,
    LcsvizError,
    LcsvizStateError,
    LcsvizValidationError,
)

# ── Models ──────────────────────────────────────────────────────────────
from lcsviz.models import (
    AnimationStep,
    BacktraceResult,
    CellComputation,
    CellLCS,
    ComparisonInfo,
    Position,
    Snapshot,
    StepPhase,
    Table,
    TransitionKind,
    VariableState,
)

# ── Session ─────────────────────────────────────────────────────────────
from lcsviz.playback import StepCursor
from lcsviz.session import LCSVisualizer, SessionPhase

# ── Validation ──────────────────────────────────────────────────────────
from lcsviz.validation import (
    filter_to_lowercase,
    require_valid_input,
    validate_characters,
    validate_input,
    validate_length,
)

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    "__version__",
    # Engine
    "initialize",
    "evaluate",
    "generate_steps",
    "final_table",
    "compute_full",
    "backtrace",
    "lcs_at",
    # Session
    "LCSVisualizer",
    "SessionPhase",
    "StepCursor",
    # Configuration
    "LcsvizConfig",
    "DEFAULT_MIN_LENGTH",
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_ALLOWED_PATTERN",
    # Errors
    "LcsvizError",
    "ErrorCode",
    "LcsvizContractError",
    "LcsvizValidationError",
    "LcsvizStateError",
    # Models
    "Position",
    "Table",
    "Snapshot",
    "TransitionKind",
    "StepPhase",
    "ComparisonInfo",
    "CellComputation",
    "VariableState",
    "AnimationStep",
    "BacktraceResult",
    "CellLCS",
    # Validation
    "validate_length",
    "validate_characters",
    "validate_input",
    "filter_to_lowercase",
    "require_valid_input",
]
