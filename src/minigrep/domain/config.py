"""Domain-level run configuration value object.

Purpose
-------
Anchor the immutable :class:`Config` that carries the query, the filename, and
the case-sensitivity flag from the CLI to the run routine. The module contains
no I/O; the environment is consulted through a caller-supplied mapping.

Contents
--------
* :data:`CASE_INSENSITIVE_ENV` – environment variable toggling case-insensitive search.
* :data:`DEFAULT_PROG_NAME` – program name used when the argument vector is empty.
* :class:`Config` – frozen dataclass built once per invocation.
* :func:`usage_message` – formats the usage line for a program name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Mapping, Sequence

from .errors import UsageError

CASE_INSENSITIVE_ENV: Final[str] = "CASE_INSENSITIVE"
DEFAULT_PROG_NAME: Final[str] = "minigrep"


def usage_message(prog: str) -> str:
    """Return the usage line for *prog*.

    Examples
    --------
    >>> usage_message("minigrep")
    'Usage: minigrep <query> <filename>'
    """

    return f"Usage: {prog} <query> <filename>"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable parameters governing a single search run.

    Attributes
    ----------
    query:
        Substring searched for within each line.
    filename:
        Path of the file whose contents are searched.
    case_sensitive:
        ``True`` for exact containment, ``False`` to lowercase both sides first.
    """

    query: str
    filename: str
    case_sensitive: bool = True

    @classmethod
    def from_args(cls, args: Sequence[str], *, environ: Mapping[str, str] | None = None) -> "Config":
        """Build a configuration from ``[prog, query, filename, ...]``.

        ``environ`` defaults to an empty mapping, i.e. case-sensitive search.
        Use :func:`minigrep.core.build_config` to consult the real process
        environment.

        Examples
        --------
        >>> Config.from_args(["prog", "needle", "hay.txt"])
        Config(query='needle', filename='hay.txt', case_sensitive=True)
        >>> Config.from_args(["prog", "needle", "hay.txt"], environ={"CASE_INSENSITIVE": ""}).case_sensitive
        False
        >>> Config.from_args(["prog"])
        Traceback (most recent call last):
        ...
        minigrep.domain.errors.UsageError: Usage: prog <query> <filename>
        """

        if len(args) < 3:
            prog = args[0] if args else DEFAULT_PROG_NAME
            raise UsageError(usage_message(prog))
        env = environ if environ is not None else {}
        return cls(
            query=args[1],
            filename=args[2],
            case_sensitive=CASE_INSENSITIVE_ENV not in env,
        )
