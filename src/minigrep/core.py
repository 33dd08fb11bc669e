"""Composition root for ``minigrep``.

Purpose
-------
Provide the two entry points the CLI needs: building the immutable
configuration from the argument vector and the environment, and running the
search pipeline (read, filter, emit) against it.

Contents
--------
* :func:`build_config` – argv + environment to :class:`Config`.
* :func:`run` – read the configured file, filter it, and emit each match.

System Role
-----------
This module wires the environment and file reader adapters to the pure line
filter while emitting structured observability signals. The environment is
consulted here exactly once; the filter never sees it.
"""

from __future__ import annotations

from typing import Sequence

import click

from .adapters.env.default import DefaultEnvLoader
from .adapters.file_reader.default import DefaultFileReader
from .application.ports import EnvLoader, FileReader, LineSink
from .application.search import search, search_case_insensitive, search_lines, split_lines
from .domain.config import CASE_INSENSITIVE_ENV, Config, usage_message
from .domain.errors import IoError, SearchError, UsageError
from .observability import log_debug, log_info, make_event


def build_config(args: Sequence[str], *, env: EnvLoader | None = None) -> Config:
    """Return the run configuration for ``[prog, query, filename, ...]``.

    Why
    ----
    The case-insensitive toggle lives in the process environment. Reading it
    once here and storing it on :class:`Config` keeps the filter pure.

    Parameters
    ----------
    args:
        Full argument vector including the program name. Arguments after the
        filename are ignored.
    env:
        Environment adapter; defaults to :class:`DefaultEnvLoader` over
        :data:`os.environ`.

    Raises
    ------
    UsageError
        When fewer than three entries are supplied.

    Examples
    --------
    >>> build_config(["prog", "needle", "hay.txt"], env=DefaultEnvLoader(environ={}))
    Config(query='needle', filename='hay.txt', case_sensitive=True)
    >>> build_config(["prog", "needle", "hay.txt"], env=DefaultEnvLoader(environ={"CASE_INSENSITIVE": "1"})).case_sensitive
    False
    """

    loader = env if env is not None else DefaultEnvLoader()
    config = Config.from_args(args, environ=loader.snapshot(CASE_INSENSITIVE_ENV))
    log_debug(
        "config_built",
        **make_event("config", config.filename, {"case_sensitive": config.case_sensitive}),
    )
    return config


def run(
    config: Config,
    *,
    reader: FileReader | None = None,
    echo: LineSink | None = None,
) -> list[str]:
    """Search the configured file and emit each matching line in order.

    What
    ----
    Reads ``config.filename`` in full, applies the matcher selected by
    ``config.case_sensitive``, passes every match to *echo* and returns the
    matches.

    Parameters
    ----------
    reader:
        File reader adapter; defaults to :class:`DefaultFileReader`.
    echo:
        Output callable; defaults to :func:`click.echo` (standard output).

    Raises
    ------
    IoError
        When the file cannot be read. Nothing is emitted in that case.

    Examples
    --------
    >>> class _Memory:
    ...     def read(self, filename):
    ...         return "Rust:\\nTrust me.\\n"
    >>> run(Config("rust", "poem.txt", case_sensitive=False), reader=_Memory(), echo=lambda line: None)
    ['Rust:', 'Trust me.']
    """

    source = reader if reader is not None else DefaultFileReader()
    sink = echo if echo is not None else click.echo
    contents = source.read(config.filename)
    matches = search_lines(config.query, contents, case_sensitive=config.case_sensitive)
    for line in matches:
        sink(line)
    log_info(
        "search_complete",
        **make_event("search", config.filename, {"matches": len(matches), "case_sensitive": config.case_sensitive}),
    )
    return matches


__all__ = [
    "Config",
    "SearchError",
    "UsageError",
    "IoError",
    "build_config",
    "run",
    "search",
    "search_case_insensitive",
    "search_lines",
    "split_lines",
    "usage_message",
]
