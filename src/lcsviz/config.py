"""Package configuration for lcsviz.

:class:`LcsvizConfig` is a dataclass that captures every tuneable knob of
the visualizer: input bounds, playback speed limits, metrics backend and
debug dumps.  Instances are passed to :class:`~lcsviz.session.LCSVisualizer`,
:class:`~lcsviz.playback.StepCursor` and the validation helpers.

Two module-level constants define the product defaults:

* :data:`DEFAULT_MAX_LENGTH` — longest accepted input string.
* :data:`DEFAULT_ALLOWED_PATTERN` — regular expression every input must
  match in full.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

# ---------------------------------------------------------------------------
# Product constants
# ---------------------------------------------------------------------------

DEFAULT_MIN_LENGTH: int = 1
"""Shortest accepted input string."""

DEFAULT_MAX_LENGTH: int = 10
"""Longest accepted input string.  The table grows as O(m*n) and every
step keeps a snapshot, so the product keeps inputs small."""

DEFAULT_ALLOWED_PATTERN: str = r"^[a-z]+$"
"""Inputs are lowercase ASCII letters only."""


# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------

@dataclass
class LcsvizConfig:
    """Complete configuration for a visualization session.

    Every parameter has a default, so ``LcsvizConfig()`` is a valid
    configuration.

    Parameters
    ----------
    min_length:
        Minimum accepted length for each input string.
    max_length:
        Maximum accepted length for each input string.
    allowed_pattern:
        Regular expression that each input string must match.
    validate_input:
        Run the validation layer in :meth:`LCSVisualizer.start`.  The
        engine functions never validate; they accept any finite strings.
    default_speed:
        Initial playback speed multiplier of a new cursor.
    min_speed:
        Lower clamp for the playback speed.
    max_speed:
        Upper clamp for the playback speed.
    metrics:
        Optional :class:`~lcsviz.observability.MetricsHook` backend.
    debug_dump_steps:
        Print a JSON summary of every generated step to *stderr*.
    debug_dump_backtrace:
        Print the backtrace result as JSON to *stderr*.
    """

    # ── Input ───────────────────────────────────────────────────────────
    min_length: int = DEFAULT_MIN_LENGTH

    max_length: int = DEFAULT_MAX_LENGTH

    allowed_pattern: str = DEFAULT_ALLOWED_PATTERN

    validate_input: bool = True

    # ── Playback ────────────────────────────────────────────────────────
    default_speed: float = 1.0

    min_speed: float = 0.5

    max_speed: float = 3.0

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_steps: bool = False

    debug_dump_backtrace: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.min_length < 0:
            raise ValueError(f"min_length must be >= 0, got {self.min_length}")
        if self.max_length < self.min_length:
            raise ValueError(
                f"max_length must be >= min_length ({self.min_length}), "
                f"got {self.max_length}"
            )
        if self.min_speed <= 0:
            raise ValueError(f"min_speed must be > 0, got {self.min_speed}")
        if self.max_speed < self.min_speed:
            raise ValueError(
                f"max_speed must be >= min_speed ({self.min_speed}), got {self.max_speed}"
            )
        if not self.min_speed <= self.default_speed <= self.max_speed:
            raise ValueError(
                f"default_speed must lie in [{self.min_speed}, {self.max_speed}], "
                f"got {self.default_speed}"
            )
        try:
            re.compile(self.allowed_pattern)
        except re.error as exc:
            raise ValueError(
                f"allowed_pattern is not a valid regular expression: {exc}"
            ) from exc
