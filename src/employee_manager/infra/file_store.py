"""Filesystem-backed implementation of :class:`~employee_manager.core.protocols.RosterStore`.

This module is the **only** place in the codebase that touches the
roster file.  Every ``OSError`` (and undecodable content) is caught here
and re-raised as :class:`~employee_manager.exceptions.StorageError`, so
nothing raw escapes the infrastructure boundary.

Writes go to a temporary file beside the (symlink-resolved) target which then
replaces the roster file with :func:`os.replace`, so a crash mid-write
leaves the previous content intact.  There is still no locking across
processes.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path

from employee_manager.core.roster import format_roster, parse_roster
from employee_manager.exceptions import StorageError

logger = logging.getLogger(__name__)

ENCODING: str = "utf-8"
NEW_FILE_MODE: int = 0o666


class FileRosterStore:
    """Concrete :class:`RosterStore` over a single comma-separated text file.

    Usage::

        store = FileRosterStore(Path("employees.txt"))
        names = store.load()
        store.save([*names, "Carol"])
    """

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def load(self) -> list[str]:
        """Read the roster file; a missing file is an empty roster.

        Raises
        ------
        StorageError
            When the file exists but cannot be read or is not valid UTF-8.
        """
        if not self._path.exists():
            logger.debug("Roster file %s does not exist; starting empty", self._path)
            return []

        try:
            text = self._path.read_bytes().decode(ENCODING)
        except OSError as exc:
            raise StorageError(
                _describe(exc, self._path),
                hint="Check that the roster file is readable.",
            ) from exc
        except UnicodeDecodeError as exc:
            raise StorageError(
                f"{self._path} is not valid UTF-8 text: {exc.reason}",
            ) from exc

        names = parse_roster(text)
        logger.debug("Loaded %d record(s) from %s", len(names), self._path)
        return names

    def save(self, names: Sequence[str]) -> None:
        """Replace the roster file's whole content with *names*.

        A symlinked roster is written through to its target.  An existing
        file keeps its permission bits; a new one gets the umask default.

        Raises
        ------
        StorageError
            When the file (or its temporary sibling) cannot be written.
        """
        payload = format_roster(names).encode(ENCODING)
        try:
            target = self._path.resolve()
        except RuntimeError as exc:
            raise StorageError(f"Symlink loop at {self._path}") from exc

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.",
                suffix=".tmp",
                dir=target.parent,
            )
        except OSError as exc:
            raise StorageError(
                _describe(exc, self._path),
                hint="Check that the roster directory exists and is writable.",
            ) from exc

        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            if target.exists():
                shutil.copymode(target, tmp_name)
            else:
                os.chmod(tmp_name, NEW_FILE_MODE & ~_current_umask())
            os.replace(tmp_name, target)
        except OSError as exc:
            _discard(tmp_name)
            raise StorageError(
                _describe(exc, self._path),
                hint="Check that the roster file is writable.",
            ) from exc

        logger.debug("Saved %d record(s) to %s", len(names), target)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _describe(exc: OSError, path: Path) -> str:
    """Render an ``OSError`` as ``"<reason>: <path>"``."""
    reason = exc.strerror or str(exc)
    return f"{reason}: {path}"


def _discard(tmp_name: str) -> None:
    """Remove a leftover temporary file, ignoring a concurrent removal."""
    try:
        os.unlink(tmp_name)
    except FileNotFoundError:
        pass


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
