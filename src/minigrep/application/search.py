"""Line filtering policy.

Purpose
-------
Turn a query and the full text of a file into the ordered list of matching
lines. Everything here is pure: no I/O, no environment access, no mutation of
inputs, so calling the same function twice yields identical output.

Contents
--------
* :func:`split_lines` – split text on ``\\n`` (dropping a trailing ``\\r``).
* :func:`search` – case-sensitive substring containment.
* :func:`search_case_insensitive` – Unicode-aware lowercased containment.
* :func:`search_lines` – dispatch on the configuration's case flag.
"""

from __future__ import annotations

from typing import Callable


def split_lines(contents: str) -> list[str]:
    """Return the lines of *contents* without line terminators.

    Only ``"\\n"`` separates lines; a ``"\\r"`` directly before it is dropped.
    A ``"\\r"`` ending the text without a newline stays on the last line.
    A final newline does not create an empty trailing line, and empty text
    has no lines at all. Other separators recognised by :meth:`str.splitlines`
    (form feed, ``\\u2028`` and friends) stay inside the line.

    Examples
    --------
    >>> split_lines("a\\r\\nb\\n")
    ['a', 'b']
    >>> split_lines("a\\n\\n")
    ['a', '']
    >>> split_lines("")
    []
    """

    *segments, last = contents.split("\n")
    lines = [segment[:-1] if segment.endswith("\r") else segment for segment in segments]
    if last:
        lines.append(last)
    return lines


def search(query: str, contents: str) -> list[str]:
    """Return every line of *contents* that contains *query* verbatim.

    Examples
    --------
    >>> search("duct", "Rust:\\nsafe, fast, productive.\\nPick three.\\nDuct tape.")
    ['safe, fast, productive.']
    """

    return [line for line in split_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """Return every line containing *query* once both are lowercased.

    Lowercasing uses :meth:`str.lower`, which covers the full Unicode case
    mapping. Lines are returned in their original spelling.

    Examples
    --------
    >>> search_case_insensitive("rUsT", "Rust:\\nsafe, fast, productive.\\nPick three.\\nTrust me.")
    ['Rust:', 'Trust me.']
    """

    needle = query.lower()
    return [line for line in split_lines(contents) if needle in line.lower()]


def search_lines(query: str, contents: str, *, case_sensitive: bool = True) -> list[str]:
    """Filter *contents* with the matcher selected by *case_sensitive*."""

    matcher: Callable[[str, str], list[str]] = search if case_sensitive else search_case_insensitive
    return matcher(query, contents)


__all__ = ["search", "search_case_insensitive", "search_lines", "split_lines"]
