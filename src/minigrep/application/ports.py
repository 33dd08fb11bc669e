"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts the run routine and the configuration builder
rely on, so tests can swap in in-memory doubles without touching the
filesystem or the process environment.

Contents
--------
* :class:`FileReader` – returns a file's full text or raises ``IoError``.
* :class:`EnvLoader` – exposes a filtered view of the environment.
* :data:`LineSink` – callable receiving each matching line.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

LineSink = Callable[[str], object]


@runtime_checkable
class FileReader(Protocol):
    """Read a whole file as text.

    Implementations must raise :class:`minigrep.domain.errors.IoError` for any
    failure so the CLI reports read problems uniformly.
    """

    def read(self, filename: str) -> str:
        """Return the full contents of *filename*."""


@runtime_checkable
class EnvLoader(Protocol):
    """Answer environment lookups for the configuration builder."""

    def snapshot(self, *names: str) -> dict[str, str]:
        """Return the variables among *names* that are currently set."""
