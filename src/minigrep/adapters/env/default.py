"""Environment variable adapter.

Purpose
-------
Give the configuration builder a single, injectable view of the process
environment. Tests pass a plain dictionary; production code falls back to
:data:`os.environ`.

Key behaviours
--------------
* Presence, not value, is what counts: an empty string still marks a variable
  as set, so it is kept in the snapshot.
* Variable names are matched exactly (no case folding), mirroring POSIX
  semantics.
"""

from __future__ import annotations

import os
from typing import Mapping

from ...observability import log_debug


class DefaultEnvLoader:
    """Answer environment lookups for the configuration builder."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the loader with a specific ``environ`` mapping for testability.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`. An empty
            mapping is honoured as-is.
        """

        self._environ = os.environ if environ is None else environ

    def snapshot(self, *names: str) -> dict[str, str]:
        """Return the subset of the environment restricted to *names*.

        Why
        ----
        The configuration builder only cares about a handful of toggles. A
        plain ``dict`` keeps the rest of the process environment out of the
        domain layer.

        Examples
        --------
        >>> DefaultEnvLoader(environ={"CASE_INSENSITIVE": "", "HOME": "/root"}).snapshot("CASE_INSENSITIVE")
        {'CASE_INSENSITIVE': ''}
        >>> DefaultEnvLoader(environ={}).snapshot("CASE_INSENSITIVE")
        {}
        """

        found = {name: self._environ[name] for name in names if name in self._environ}
        log_debug("env_snapshot", stage="env", path=None, requested=list(names), present=sorted(found))
        return found
