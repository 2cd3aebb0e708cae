"""Navigation over a precomputed step sequence.

:class:`StepCursor` is the index a play/pause controller moves around.  It
never owns a timer: a front end calls :meth:`StepCursor.step_forward`
every :attr:`StepCursor.interval_seconds` while playing.  Index ``-1``
means "before the first step", where the table is still all zeros.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from lcsviz.config import LcsvizConfig
from lcsviz.models import AnimationStep, Snapshot

StepCallback = Callable[[AnimationStep | None, int], None]


class StepCursor:
    """A clamped cursor over an immutable step sequence.

    Parameters
    ----------
    steps:
        The timeline produced by :func:`~lcsviz.engine.generate_steps`.
    speed:
        Initial speed multiplier.  Defaults to ``config.default_speed``.
    config:
        Supplies the speed bounds.
    on_change:
        Called with ``(step, index)`` whenever the index changes; *step* is
        ``None`` at index ``-1``.
    """

    def __init__(
        self,
        steps: Sequence[AnimationStep],
        speed: float | None = None,
        config: LcsvizConfig | None = None,
        on_change: StepCallback | None = None,
    ) -> None:
        self._config = config or LcsvizConfig()
        self._steps: tuple[AnimationStep, ...] = tuple(steps)
        self._index: int = -1
        self._speed: float = self._config.default_speed
        self._on_change = on_change
        if speed is not None:
            self.speed = speed

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def steps(self) -> tuple[AnimationStep, ...]:
        return self._steps

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> AnimationStep | None:
        return self._steps[self._index] if self._index >= 0 else None

    @property
    def can_step_forward(self) -> bool:
        return self._index < len(self._steps) - 1

    @property
    def can_step_backward(self) -> bool:
        return self._index > -1

    @property
    def is_at_end(self) -> bool:
        return bool(self._steps) and self._index == len(self._steps) - 1

    @property
    def table(self) -> Snapshot:
        """Table to display at the current index.

        Before the first step this is the zero table, which every
        pre-loop step also carries.
        """
        if self._index >= 0:
            return self._steps[self._index].table
        if self._steps:
            return self._steps[0].table
        return ()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        self._speed = max(self._config.min_speed, min(self._config.max_speed, value))

    @property
    def interval_seconds(self) -> float:
        """Delay between automatic steps at the current speed."""
        return 1.0 / self._speed

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def go_to(self, index: int) -> AnimationStep | None:
        """Move to *index*, clamped to ``[-1, len(steps) - 1]``."""
        clamped = max(-1, min(len(self._steps) - 1, index))
        self._index = clamped
        step = self.current
        if self._on_change is not None:
            self._on_change(step, clamped)
        return step

    def step_forward(self) -> AnimationStep | None:
        """Advance one step; does nothing at the last step."""
        if self.can_step_forward:
            return self.go_to(self._index + 1)
        return self.current

    def step_backward(self) -> AnimationStep | None:
        """Go back one step; does nothing before the first step."""
        if self.can_step_backward:
            return self.go_to(self._index - 1)
        return self.current

    def reset(self) -> None:
        """Return to the position before the first step."""
        self.go_to(-1)

    def __len__(self) -> int:
        return len(self._steps)
