"""Visualization session: inputs, timeline, cursor and backtrace together.

:class:`LCSVisualizer` is the object a front end holds.  It validates the
two strings, generates the step timeline, tracks the cursor and computes
the backtrace on request, moving through the phases::

    INPUT -> ANIMATING <-> COMPLETE -> BACKTRACING
      ^__________|___________|____________|   (reset)

Usage::

    from lcsviz import LCSVisualizer

    viz = LCSVisualizer()
    viz.start("abcde", "ace")
    viz.go_to(viz.total_steps - 1)
    result = viz.show_backtrace()
    print(result.lcs)  # "ace"
"""

from __future__ import annotations

import dataclasses
import json
import sys
import time
from enum import Enum
from typing import Any

from lcsviz.config import LcsvizConfig
from lcsviz.engine import backtrace, compute_full, generate_steps, lcs_at
from lcsviz.errors import LcsvizStateError, LcsvizValidationError
from lcsviz.explain import explain_completion, explain_step
from lcsviz.models import AnimationStep, BacktraceResult, CellLCS, Position, Snapshot
from lcsviz.observability import get_logger, log_fields, resolve_metrics
from lcsviz.observability.metrics import (
    BACKTRACES,
    LCS_LENGTH,
    SESSIONS_STARTED,
    STEP_GENERATION_MS,
    STEPS_GENERATED,
    VALIDATION_FAILURES,
)
from lcsviz.playback import StepCursor
from lcsviz.validation import require_valid_input

log = get_logger("lcsviz.session")


class SessionPhase(str, Enum):
    """Lifecycle phases of a visualization session."""

    INPUT = "input"
    """Waiting for two strings."""

    ANIMATING = "animating"
    """A timeline exists and the cursor is not on its last step."""

    COMPLETE = "complete"
    """The cursor is on the last step; the backtrace may be shown."""

    BACKTRACING = "backtracing"
    """The backtrace path is being displayed."""


VALID_TRANSITIONS: dict[SessionPhase, set[SessionPhase]] = {
    SessionPhase.INPUT: {SessionPhase.ANIMATING},
    SessionPhase.ANIMATING: {SessionPhase.COMPLETE, SessionPhase.INPUT},
    SessionPhase.COMPLETE: {
        SessionPhase.ANIMATING,
        SessionPhase.BACKTRACING,
        SessionPhase.INPUT,
    },
    SessionPhase.BACKTRACING: {
        SessionPhase.ANIMATING,
        SessionPhase.COMPLETE,
        SessionPhase.INPUT,
    },
}


class LCSVisualizer:
    """Stateful driver for one LCS animation at a time.

    Parameters
    ----------
    config:
        Session configuration.  Defaults to ``LcsvizConfig()``.
    **kwargs:
        Overrides applied on top of *config* (or of the defaults).
    """

    def __init__(self, config: LcsvizConfig | None = None, **kwargs: Any) -> None:
        if config is None:
            config = LcsvizConfig(**kwargs)
        elif kwargs:
            config = dataclasses.replace(config, **kwargs)
        self._config = config
        self._metrics = resolve_metrics(config.metrics)
        self._speed = config.default_speed
        self._clear()

    def _clear(self) -> None:
        self._phase = SessionPhase.INPUT
        self._text1 = ""
        self._text2 = ""
        self._cursor: StepCursor | None = None
        self._backtrace: BacktraceResult | None = None

    # ------------------------------------------------------------------
    # Phase handling
    # ------------------------------------------------------------------

    def _enter(self, phase: SessionPhase) -> None:
        if phase is self._phase:
            return
        allowed = VALID_TRANSITIONS[self._phase]
        if phase not in allowed:
            raise LcsvizStateError(
                f"cannot move from {self._phase.value} to {phase.value}",
                context={
                    "current_phase": self._phase.value,
                    "requested_phase": phase.value,
                },
            )
        self._phase = phase

    def _on_step_change(self, step: AnimationStep | None, index: int) -> None:
        # Any move discards the backtrace being shown.
        self._backtrace = None
        if self._cursor is not None and self._cursor.is_at_end:
            self._enter(SessionPhase.COMPLETE)
        else:
            self._enter(SessionPhase.ANIMATING)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, text1: str, text2: str) -> tuple[AnimationStep, ...]:
        """Validate the inputs, build the timeline and rewind the cursor.

        May be called from any phase; a running session is replaced.

        Returns
        -------
        tuple[AnimationStep, ...]
            The generated steps.

        Raises
        ------
        LcsvizValidationError
            If validation is enabled and an input is rejected.  The
            session is left unchanged.
        """
        if self._config.validate_input:
            try:
                require_valid_input(text1, text2, self._config)
            except LcsvizValidationError as exc:
                self._metrics.increment(
                    VALIDATION_FAILURES, tags={"field": str(exc.context.get("field"))},
                )
                log.info(
                    "input rejected",
                    extra=log_fields(op="start", **exc.context),
                )
                raise

        started = time.perf_counter()
        steps = generate_steps(text1, text2)
        elapsed_ms = (time.perf_counter() - started) * 1000.0

        self._text1 = text1
        self._text2 = text2
        self._backtrace = None
        self._cursor = StepCursor(
            steps,
            speed=self._speed,
            config=self._config,
            on_change=self._on_step_change,
        )
        self._phase = SessionPhase.ANIMATING

        self._metrics.increment(SESSIONS_STARTED)
        self._metrics.increment(STEPS_GENERATED, len(steps))
        self._metrics.timing(STEP_GENERATION_MS, elapsed_ms)
        log.info(
            "session started",
            extra=log_fields(
                op="start",
                m=len(text1),
                n=len(text2),
                steps=len(steps),
                duration_ms=round(elapsed_ms, 3),
            ),
        )
        if self._config.debug_dump_steps:
            _dump_steps(steps)
        return steps

    def reset(self) -> None:
        """Drop the current session and return to the input phase."""
        self._enter(SessionPhase.INPUT)
        self._clear()
        log.debug("session reset", extra=log_fields(op="reset"))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _require_cursor(self, operation: str) -> StepCursor:
        if self._cursor is None:
            raise LcsvizStateError(
                f"{operation} needs a started session",
                context={"current_phase": self._phase.value, "operation": operation},
            )
        return self._cursor

    def step_forward(self) -> AnimationStep | None:
        return self._require_cursor("step_forward").step_forward()

    def step_backward(self) -> AnimationStep | None:
        return self._require_cursor("step_backward").step_backward()

    def go_to(self, index: int) -> AnimationStep | None:
        return self._require_cursor("go_to").go_to(index)

    def rewind(self) -> None:
        """Move the cursor back before the first step, keeping the inputs."""
        self._require_cursor("rewind").reset()

    def set_speed(self, speed: float) -> float:
        """Set the playback speed and return the clamped value."""
        cursor = self._require_cursor("set_speed")
        cursor.speed = speed
        self._speed = cursor.speed
        return cursor.speed

    # ------------------------------------------------------------------
    # Backtrace and inspection
    # ------------------------------------------------------------------

    def show_backtrace(self) -> BacktraceResult:
        """Compute the backtrace of the finished table.

        Only allowed once the cursor has reached the last step.

        Raises
        ------
        LcsvizStateError
            If the session is not in the ``complete`` phase.
        """
        if self._phase is not SessionPhase.COMPLETE:
            raise LcsvizStateError(
                f"backtrace is only available once the animation is complete, "
                f"current phase is {self._phase.value}",
                context={
                    "current_phase": self._phase.value,
                    "requested_phase": SessionPhase.BACKTRACING.value,
                },
            )
        table = compute_full(self._text1, self._text2)
        result = backtrace(self._text1, self._text2, table)
        self._backtrace = result
        self._enter(SessionPhase.BACKTRACING)

        self._metrics.increment(BACKTRACES)
        self._metrics.gauge(LCS_LENGTH, result.length)
        log.info(
            "backtrace computed",
            extra=log_fields(op="backtrace", lcs_length=result.length, path=len(result.path)),
        )
        if self._config.debug_dump_backtrace:
            print(
                "[lcsviz] Backtrace:",
                json.dumps(dataclasses.asdict(result), indent=2),
                file=sys.stderr,
            )
        return result

    def lcs_at(self, row: int, col: int) -> CellLCS:
        """LCS of ``text1[:row]`` and ``text2[:col]`` for the current inputs."""
        self._require_cursor("lcs_at")
        table = compute_full(self._text1, self._text2)
        return lcs_at(self._text1, self._text2, table, row, col)

    def explanation(self) -> str:
        """Markdown explanation of what is currently on screen."""
        if self._cursor is None:
            return explain_step(None)
        if self._phase in (SessionPhase.COMPLETE, SessionPhase.BACKTRACING):
            final = self._cursor.steps[-1]
            found = lcs_at(
                self._text1, self._text2, final.table, len(self._text1), len(self._text2),
            )
            return explain_completion(found.lcs, final.value)
        return explain_step(self._cursor.current)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def config(self) -> LcsvizConfig:
        return self._config

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def text1(self) -> str:
        return self._text1

    @property
    def text2(self) -> str:
        return self._text2

    @property
    def steps(self) -> tuple[AnimationStep, ...]:
        return self._cursor.steps if self._cursor is not None else ()

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def current_index(self) -> int:
        return self._cursor.index if self._cursor is not None else -1

    @property
    def current_step(self) -> AnimationStep | None:
        return self._cursor.current if self._cursor is not None else None

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def can_step_forward(self) -> bool:
        return self._cursor is not None and self._cursor.can_step_forward

    @property
    def can_step_backward(self) -> bool:
        return self._cursor is not None and self._cursor.can_step_backward

    @property
    def table(self) -> Snapshot:
        return self._cursor.table if self._cursor is not None else ()

    @property
    def backtrace_result(self) -> BacktraceResult | None:
        return self._backtrace

    @property
    def backtrack_path(self) -> tuple[Position, ...]:
        return self._backtrace.path if self._backtrace is not None else ()

    @property
    def backtrack_match_cells(self) -> tuple[Position, ...]:
        return self._backtrace.match_cells if self._backtrace is not None else ()

    @property
    def can_show_backtrace(self) -> bool:
        return self._phase is SessionPhase.COMPLETE


def _dump_steps(steps: tuple[AnimationStep, ...]) -> None:
    """Print a compact JSON summary of *steps* to stderr."""
    summary = [
        {
            "phase": step.phase.value,
            "cell": step.cell.as_tuple() if step.cell is not None else None,
            "value": step.value,
            "kind": step.kind.value if step.kind is not None else None,
            "line": step.line,
            "variables": step.variables.as_dict(),
        }
        for step in steps
    ]
    print("[lcsviz] Steps:", json.dumps(summary, indent=2), file=sys.stderr)
