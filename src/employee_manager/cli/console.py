"""Rich console and logging helpers for the CLI layer.

Command results are written to stdout through :data:`out`; errors,
hints and log records go to stderr through :data:`err` and the
:class:`~rich.logging.RichHandler` installed by :func:`configure_logging`.

A fresh :class:`~rich.console.Console` is created per call so output
always follows the current ``sys.stdout`` / ``sys.stderr``.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER: str = "employee_manager"


def get_rich_console(*, stderr: bool = False) -> Console:
    """Create a console that never re-wraps lines or expands emoji codes.

    Names are free text, so soft wrapping keeps a long name on a single
    line and ``emoji=False`` keeps ``:smile:``-like text verbatim.
    """
    return Console(stderr=stderr, soft_wrap=True, emoji=False, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy bound to one output stream."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        get_rich_console(stderr=self._stderr).print(*objects)


out = _ConsoleProxy(stderr=False)
err = _ConsoleProxy(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Route package log records to stderr via Rich.

    ``WARNING`` and above by default, everything with *verbose*.
    Calling this again replaces the previously installed handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
