"""Exceptions raised by lcsviz.

All of them derive from :class:`LcsvizError` and expose the same four
attributes: ``code`` (an :class:`ErrorCode`), ``message``, a ``context``
dict with the values that triggered the error, and ``cause`` when another
exception is being wrapped.

The engine is total over valid inputs, so it has nothing to recover from.
:class:`LcsvizContractError` marks a caller bug and is never caught inside
the package.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the package can raise."""

    CONTRACT_VIOLATION = "CONTRACT_VIOLATION"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_STATE = "INVALID_STATE"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class LcsvizError(Exception):
    """Base exception for all lcsviz errors.

    Parameters
    ----------
    code:
        Error category, normally an :class:`ErrorCode` member.
    message:
        Explanation aimed at the developer calling the API.
    context:
        Offending values keyed by name; each subclass lists its keys.
    cause:
        Wrapped exception, also set as ``__cause__``.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Subclasses
# ---------------------------------------------------------------------------

class LcsvizContractError(LcsvizError):
    """A documented precondition of an engine operation was violated.

    Raised for out-of-bounds cell indices, negative table dimensions and
    tables whose shape does not match the input strings.

    Context keys: ``operation``, plus the offending values (``row``,
    ``col``, ``expected_shape``, ``actual_rows``, ``actual_widths`` as
    applicable).
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CONTRACT_VIOLATION,
            message=message,
            context=context,
            cause=cause,
        )


class LcsvizValidationError(LcsvizError):
    """User input was rejected by the validation layer.

    Context keys: ``field``, ``value``, ``constraint``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class LcsvizStateError(LcsvizError):
    """A visualization session was asked to do something its current
    phase does not allow.

    Context keys: ``current_phase``, plus ``requested_phase`` or
    ``operation``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATE,
            message=message,
            context=context,
            cause=cause,
        )
