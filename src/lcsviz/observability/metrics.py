"""Metrics hook protocol and its no-op default.

The visualizer reports a handful of counters, timings and gauges.  Nothing
is recorded unless the caller passes a backend through
``LcsvizConfig(metrics=...)``; any object with the three methods of
:class:`MetricsHook` will do.

Emitted metric names:

* ``lcsviz.sessions_started_total``     -- counter
* ``lcsviz.steps_generated_total``      -- counter
* ``lcsviz.step_generation_ms``         -- timing
* ``lcsviz.backtraces_total``           -- counter
* ``lcsviz.lcs_length``                 -- gauge
* ``lcsviz.validation_failures_total``  -- counter
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

SESSIONS_STARTED = "lcsviz.sessions_started_total"
STEPS_GENERATED = "lcsviz.steps_generated_total"
STEP_GENERATION_MS = "lcsviz.step_generation_ms"
BACKTRACES = "lcsviz.backtraces_total"
LCS_LENGTH = "lcsviz.lcs_length"
VALIDATION_FAILURES = "lcsviz.validation_failures_total"


@runtime_checkable
class MetricsHook(Protocol):
    """Structural interface of a metrics backend.

    *tags* are optional string key/value pairs; backends translate them
    into their own labelling scheme.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Add *value* to the counter *name*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration of *ms* milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set the gauge *name* to *value*."""
        ...


class NoopMetricsHook:
    """Backend that drops every data point.

    Used whenever no backend is configured so that call sites never need
    a ``None`` check.
    """

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass


def resolve_metrics(metrics: Any | None) -> Any:
    """Return *metrics*, or a :class:`NoopMetricsHook` when it is ``None``."""
    return metrics if metrics is not None else NoopMetricsHook()
