"""File reader adapter.

Purpose
-------
Read the searched file in full as UTF-8 text and translate every OS-level
failure into :class:`minigrep.domain.errors.IoError`. This is the only place
the package touches the filesystem.

System Role
-----------
Invoked by :func:`minigrep.core.run` before any filtering happens, so a
failing read never produces partial output.
"""

from __future__ import annotations

from pathlib import Path

from ...domain.errors import IoError
from ...observability import log_debug, log_error


class DefaultFileReader:
    """Load whole files as text for the run routine."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read(self, filename: str) -> str:
        """Return the full contents of *filename*.

        Raises
        ------
        IoError
            When the file is missing, unreadable, a directory, or not valid
            text in the configured encoding. The original exception is kept as
            ``cause`` and chained via ``__cause__``.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile(delete=False, suffix=".txt")
        >>> _ = tmp.write(b"one\\ntwo\\n")
        >>> tmp.close()
        >>> DefaultFileReader().read(tmp.name)
        'one\\ntwo\\n'
        >>> Path(tmp.name).unlink()
        """

        try:
            # newline="" keeps line endings untouched; split_lines handles "\r\n".
            with Path(filename).open(encoding=self._encoding, newline="") as handle:
                payload = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            log_error("file_read_failed", stage="read", path=filename, error=type(exc).__name__)
            raise IoError(filename, exc) from exc
        log_debug("file_read", stage="read", path=filename, size=len(payload))
        return payload
