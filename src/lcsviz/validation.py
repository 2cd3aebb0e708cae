"""Input validation for the visualizer.

The engine accepts any two finite strings.  The product, however, only
animates short lowercase words, and these helpers enforce that before a
session starts.  Bounds and the character pattern come from
:class:`~lcsviz.config.LcsvizConfig`.
"""

from __future__ import annotations

import re

from lcsviz.config import LcsvizConfig
from lcsviz.errors import LcsvizValidationError

_DEFAULT_CONFIG = LcsvizConfig()


def validate_length(text: str, config: LcsvizConfig | None = None) -> bool:
    """Return ``True`` if ``min_length <= len(text) <= max_length``."""
    cfg = config or _DEFAULT_CONFIG
    return cfg.min_length <= len(text) <= cfg.max_length


def validate_characters(text: str, config: LcsvizConfig | None = None) -> bool:
    """Return ``True`` if *text* is non-empty and matches ``allowed_pattern``."""
    cfg = config or _DEFAULT_CONFIG
    if not text:
        return False
    return re.fullmatch(cfg.allowed_pattern, text) is not None


def validate_input(text: str, config: LcsvizConfig | None = None) -> bool:
    """Return ``True`` if *text* passes both the length and character checks."""
    return validate_length(text, config) and validate_characters(text, config)


def filter_to_lowercase(text: str) -> str:
    """Lowercase *text* and drop everything outside ``a``-``z``."""
    return re.sub(r"[^a-z]", "", text.lower())


def require_valid_input(
    text1: str,
    text2: str,
    config: LcsvizConfig | None = None,
) -> None:
    """Raise :class:`LcsvizValidationError` for the first invalid input.

    Parameters
    ----------
    text1, text2:
        The two strings a session is about to animate.
    config:
        Supplies the bounds and pattern.  Defaults to ``LcsvizConfig()``.
    """
    cfg = config or _DEFAULT_CONFIG
    for name, value in (("text1", text1), ("text2", text2)):
        if not validate_length(value, cfg):
            raise LcsvizValidationError(
                f"{name} must be between {cfg.min_length} and {cfg.max_length} "
                f"characters, got {len(value)}",
                context={
                    "field": name,
                    "value": value,
                    "constraint": f"length {cfg.min_length}..{cfg.max_length}",
                },
            )
        if not validate_characters(value, cfg):
            raise LcsvizValidationError(
                f"{name} contains characters outside {cfg.allowed_pattern!r}",
                context={
                    "field": name,
                    "value": value,
                    "constraint": cfg.allowed_pattern,
                },
            )
