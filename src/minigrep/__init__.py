"""Public package surface for the ``minigrep`` line search.

``import minigrep`` exposes the configuration builder, the run routine, the
pure line filters, and the error taxonomy. ``python -m minigrep`` drives the
same functions through :mod:`minigrep.cli`.
"""

from __future__ import annotations

from .core import build_config, run
from .application.search import search, search_case_insensitive, search_lines
from .domain.config import Config
from .domain.errors import IoError, SearchError, UsageError
from .observability import get_logger

__all__ = [
    "Config",
    "IoError",
    "SearchError",
    "UsageError",
    "build_config",
    "get_logger",
    "run",
    "search",
    "search_case_insensitive",
    "search_lines",
]
