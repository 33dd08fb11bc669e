"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by the configuration builder, the file reader
adapter, and the CLI. Callers discriminate failure kinds by type instead of
inspecting messages.

Contents
--------
* :class:`SearchError` – umbrella base class for every error the package raises.
* :class:`UsageError` – the invocation did not supply a query and a filename.
* :class:`IoError` – the file could not be read; carries the original cause.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base type for all exceptions emitted by ``minigrep``."""


class UsageError(SearchError):
    """Raised when the argument vector is too short to build a configuration.

    The message always echoes the invoking program name, for example
    ``"Usage: minigrep <query> <filename>"``.

    Examples
    --------
    >>> str(UsageError("Usage: prog <query> <filename>"))
    'Usage: prog <query> <filename>'
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IoError(SearchError):
    """Raised when the file named in the configuration cannot be read.

    What
    ----
    Keeps the requested ``filename`` and the underlying ``cause`` (an
    :class:`OSError` or :class:`UnicodeDecodeError`). The reader adapter raises
    it ``from`` the cause so tracebacks still show the original failure.
    """

    def __init__(self, filename: str, cause: OSError | UnicodeDecodeError) -> None:
        super().__init__(f"Cannot read {filename}: {_describe(cause)}")
        self.filename = filename
        self.cause = cause


def _describe(cause: BaseException) -> str:
    """Return the most readable description of *cause*."""

    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause)
