"""Structured logging helpers distilled into tiny orchestration phrases.

Purpose
    Keep every diagnostic emitted while building the configuration, reading
    the file, and filtering lines predictable and contextual without forcing
    callers to adopt a specific logging backend.

Contents
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries via a
      single private emitter.
    - ``make_event``: convenience builder for structured event payloads.

System Integration
    Used by the adapters and the composition root. The line filter stays free
    of logging so it remains a pure function.
"""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger("minigrep")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error log entry."""

    _emit(logging.ERROR, message, fields)


def make_event(
    stage: str,
    path: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured logging payload for a pipeline stage.

    Why
        Keeps event construction consistent so downstream log processors can rely
        on stable keys.
    Inputs
        stage: Name of the pipeline stage (``"config"``, ``"read"``, ``"search"``).
        path: File path associated with the event, if any.
        payload: Optional mapping with extra diagnostic detail.
    Outputs
        dict[str, Any]: Data safe to unpack into :func:`log_*` helpers.

    Examples
    --------
    >>> make_event('search', 'poem.txt', {'matches': 2})
    {'stage': 'search', 'path': 'poem.txt', 'matches': 2}
    """

    event: dict[str, Any] = {"stage": stage, "path": path}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": dict(fields)})
