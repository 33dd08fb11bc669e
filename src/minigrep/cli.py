"""CLI adapter for ``minigrep`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose the line search as ``minigrep <query> <filename>``. The command collects
the raw positional arguments, hands them to :func:`minigrep.core.build_config`
together with the program name, and runs the search.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – the search command.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. Usage errors are reported here as a
single line on stderr with exit status 1; read failures propagate to
``lib_cli_exit_tools`` which prints them and picks the exit code.
"""

from __future__ import annotations

import sys
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import build_config, run
from .domain.config import DEFAULT_PROG_NAME
from .domain.errors import UsageError

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"], "ignore_unknown_options": True}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version("minigrep")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.command(
    DEFAULT_PROG_NAME,
    help="Print every line of FILENAME that contains QUERY. Set CASE_INSENSITIVE to ignore case.",
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.version_option(
    version=_resolve_version(),
    prog_name=DEFAULT_PROG_NAME,
    message="minigrep version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED, metavar="QUERY FILENAME")
@click.pass_context
def cli(ctx: click.Context, traceback: bool, args: tuple[str, ...]) -> None:
    """Search a file for lines containing a query.

    Why
        Argument-count validation belongs to :func:`minigrep.core.build_config`
        so the usage message is the same whether the search is driven from
        Python or from the shell.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``; writes matches to
        standard output.
    """

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    prog = ctx.info_name or DEFAULT_PROG_NAME
    try:
        config = build_config([prog, *args])
    except UsageError as exc:
        click.echo(exc.message, err=True)
        ctx.exit(1)
    run(config)


def _invoked_prog_name() -> str:
    """Return the basename of ``sys.argv[0]``, or ``minigrep`` under ``python -m``."""

    name = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else ""
    if not name or name in {"__main__.py", "-c", "-m"}:
        return DEFAULT_PROG_NAME
    return name


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    prog_name: Optional[str] = None,
    restore_traceback: bool = True,
) -> int:
    """Execute the CLI with shared exit handling and return the exit code.

    ``prog_name`` defaults to the name the process was invoked with so usage
    errors echo it back.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=prog_name or _invoked_prog_name(),
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
