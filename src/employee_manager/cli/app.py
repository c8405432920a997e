"""CLI application entry point and command routing for employee-manager.

This module is the **sole error boundary** for the entire application.
It catches :class:`~employee_manager.exceptions.EmployeeManagerError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to
  :class:`~employee_manager.core.roster_service.RosterService`.
* Argument validation happens before the roster file is touched.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import NoReturn

from rich.text import Text

from employee_manager.cli import exit_codes
from employee_manager.cli.console import configure_logging, err, out
from employee_manager.config import DATA_FILE_ENV_VAR, DEFAULT_DATA_FILE, resolve_settings
from employee_manager.core.models import Roster
from employee_manager.core.roster_service import RosterService
from employee_manager.exceptions import EmployeeManagerError, StorageError, UsageError
from employee_manager.infra.file_store import FileRosterStore
from employee_manager.version import __version__

HELP_LINES: tuple[str, ...] = (
    "  l               - list all employees",
    "  s <name>        - search for a name (substring)",
    "  + <name>        - add a new employee",
    "  c               - count employees",
    "  u <old> <new>   - update an employee name",
    "  ?               - show this help",
)

ITEM_MARKER: str = "- "


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser whose errors become :class:`UsageError` instead of ``exit(2)``."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint="Use '?' for help.")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Global options must come before the command tag; everything from the
    tag onwards is collected verbatim into ``args.words``.
    """
    parser = _ArgumentParser(
        prog="employee-manager",
        description="Maintain a comma-separated roster of employee names.",
        epilog="commands:\n" + "\n".join(HELP_LINES),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        metavar="PATH",
        help=(
            f"roster file (default: ${DATA_FILE_ENV_VAR} or "
            f"{DEFAULT_DATA_FILE})"
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log storage activity to stderr",
    )
    parser.add_argument(
        "words",
        nargs=argparse.REMAINDER,
        help="command tag followed by its arguments",
    )
    return parser


def _join_words(words: Sequence[str]) -> str:
    """Rebuild a free-text name from shell words, e.g. ``John Doe``."""
    return " ".join(words).strip()


def _require_name(words: Sequence[str], *, action: str, usage: str) -> str:
    name = _join_words(words)
    if not name:
        raise UsageError(f"{action} requires a name.", hint=f"Usage: {usage}")
    return name


def _split_rename(words: Sequence[str]) -> tuple[str, str]:
    """Split ``u`` arguments into ``(old_name, new_name)``.

    The last word is the new name and all preceding words form the old
    name, so ``u Mary Ann Smith Mary`` renames ``Mary Ann Smith``.  A
    multi-word new name must be passed as one quoted shell word.
    """
    old_name = _join_words(words[:-1])
    new_name = _join_words(words[-1:])
    if not old_name or not new_name:
        raise UsageError(
            "update requires old and new names.",
            hint="Usage: u <oldName> <newName>",
        )
    return old_name, new_name


# ---------------------------------------------------------------------------
# Command handlers (render only, logic lives in RosterService)
# ---------------------------------------------------------------------------

def _labelled(label: str, style: str, value: str) -> Text:
    """Styled label followed by user text that is never parsed as markup."""
    return Text.assemble((label, style), " ", value)


def _print_names(title: str, roster: Roster) -> None:
    out.print(Text(title, style="bold"))
    for name in roster:
        out.print(Text.assemble(ITEM_MARKER, name))


def _handle_list(service: RosterService, _words: Sequence[str]) -> int:
    roster = service.list_employees()
    if not roster:
        out.print("(no employees found)")
    else:
        _print_names("Employees:", roster)
    return exit_codes.SUCCESS


def _handle_search(service: RosterService, words: Sequence[str]) -> int:
    query = _require_name(words, action="search", usage="s <name>")
    matches = service.search(query)
    if not matches:
        out.print(Text.assemble("No matches found for: ", query))
    else:
        _print_names("Matches:", matches)
    return exit_codes.SUCCESS


def _handle_add(service: RosterService, words: Sequence[str]) -> int:
    name = _require_name(words, action="add", usage="+ <name>")
    outcome = service.add(name)
    if outcome.added:
        out.print(_labelled("Added:", "green", outcome.name))
    else:
        out.print(_labelled("Employee already exists:", "yellow", outcome.name))
    return exit_codes.SUCCESS


def _handle_count(service: RosterService, _words: Sequence[str]) -> int:
    out.print(f"Count: {service.count()}")
    return exit_codes.SUCCESS


def _handle_update(service: RosterService, words: Sequence[str]) -> int:
    old_name, new_name = _split_rename(words)
    outcome = service.update(old_name, new_name)
    if outcome.renamed:
        out.print(
            Text.assemble(
                ("Updated", "green"),
                f" '{outcome.old_name}' to '{outcome.new_name}'",
            )
        )
    else:
        out.print(Text.assemble("No employee found with name: ", outcome.old_name))
    return exit_codes.SUCCESS


def _print_help() -> int:
    out.print(Text("employee-manager usage:", style="bold"))
    for line in HELP_LINES:
        out.print(Text(line))
    return exit_codes.SUCCESS


_HANDLERS: dict[str, Callable[[RosterService, Sequence[str]], int]] = {
    "l": _handle_list,
    "s": _handle_search,
    "+": _handle_add,
    "c": _handle_count,
    "u": _handle_update,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the employee-manager CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        For a missing or unknown command tag, a malformed option, or
        missing arguments.
    StorageError
        When the roster file cannot be read or written.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.words:
        raise UsageError("Missing command.", hint="Use '?' for help.")

    command = args.words[0].strip()
    words: list[str] = args.words[1:]

    if command == "?":
        return _print_help()

    handler = _HANDLERS.get(command)
    if handler is None:
        raise UsageError(f"Unknown command '{command}'.", hint="Use '?' for help.")

    settings = resolve_settings(args.file)
    service = RosterService(FileRosterStore(settings.data_file))
    return handler(service, words)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _print_error(label: str, exc: EmployeeManagerError) -> None:
    err.print(_labelled(label, "bold red", str(exc)))
    if exc.hint:
        err.print(_labelled("Hint:", "yellow", exc.hint))


def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except StorageError as exc:
        _print_error("IO Error:", exc)
        sys.exit(exit_codes.IO_ERROR)
    except EmployeeManagerError as exc:
        _print_error("Error:", exc)
        sys.exit(exit_codes.USAGE_ERROR)
    except KeyboardInterrupt:
        err.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err.print(
            Text.assemble(
                ("Unexpected error.", "bold red"),
                " Please report this issue.\n",
                f"  {type(exc).__name__}: {exc}",
            )
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
